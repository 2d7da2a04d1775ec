"""Text cleanup for snippet text shown on result cards."""

import re

# CSI/OSC style terminal escape sequences, e.g. "\x1b[31m" or "\x1b]0;title\x07"
_ANSI_ESCAPE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[@-Z\\-_])")
# C0/C1 control characters except whitespace, which is collapsed below
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_string(text: str | None) -> str:
    """Strip escape sequences and control characters and collapse whitespace.

    HTML escaping is left to the template engine.

    Args:
        text (str | None): Raw text from the backend.

    Returns:
        str: Single-line text without control characters, trimmed.
    """
    if not text:
        return ""
    text = _ANSI_ESCAPE.sub("", text)
    text = _CONTROL_CHARS.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
