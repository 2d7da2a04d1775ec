"""Central configuration helper for the case law search page."""

import logging
import os

from shared.models.config import PageSettings


class HelperConfig:
    """Central configuration helper. Reads all settings from environment variables."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    ##########################################
    ############ RAW ACCESSORS ###############
    ##########################################

    def get_string_val(self, key: str, default: str | None = None) -> str:
        """Read a string environment variable.

        Args:
            key (str): Environment variable name (case-insensitive).
            default (str | None): Fallback value if the variable is not set.

        Returns:
            str: The resolved value.

        Raises:
            ValueError: If the variable is not set and no default is provided.
        """
        key = key.upper()
        val = os.getenv(key) or None  # empty string → None
        if val is None and default is None:
            raise ValueError(f"Environment variable '{key}' is not set.")
        return val.strip() if val is not None else default

    def get_number_val(self, key: str, default: float | int | None = None) -> float | int:
        """Read a numeric environment variable.

        Args:
            key (str): Environment variable name (case-insensitive).
            default (float | int | None): Fallback value if the variable is not set.

        Returns:
            float | int: The resolved numeric value.

        Raises:
            ValueError: If the variable is not set and no default is provided.
            ValueError: If the value cannot be parsed as a number.
        """
        key = key.upper()
        raw = os.getenv(key) or None
        if raw is None:
            if default is None:
                raise ValueError(f"Environment variable '{key}' is not set.")
            return default
        try:
            return int(raw) if "." not in raw else float(raw)
        except ValueError:
            raise ValueError(f"Environment variable '{key}' is not a valid number: '{raw}'.")

    def get_bool_val(self, key: str, default: bool | None = None) -> bool:
        """Read a boolean environment variable.

        Args:
            key (str): Environment variable name (case-insensitive).
            default (bool | None): Fallback value if the variable is not set.

        Returns:
            bool: The resolved boolean value.

        Raises:
            ValueError: If the variable is not set and no default is provided.
        """
        key = key.upper()
        raw = os.getenv(key) or None
        if raw is None:
            if default is None:
                raise ValueError(f"Environment variable '{key}' is not set.")
            return default
        return raw.strip().lower() in ("true", "1", "yes")

    def get_list_val(self, key: str, default: list[str] | None = None, separator: str = ";") -> list[str]:
        """Read a list environment variable in the form "[elem1;elem2;...]".

        The default separator is ";" because suggested queries regularly
        contain commas.

        Args:
            key (str): Environment variable name (case-insensitive).
            default (list[str] | None): Fallback value if the variable is not set.
            separator (str): The delimiter between elements.

        Returns:
            list[str]: The resolved elements, whitespace-trimmed, empty ones dropped.

        Raises:
            ValueError: If the variable is not set and no default is provided.
            ValueError: If the value is not wrapped in square brackets.
        """
        key = key.upper()
        raw_val = os.getenv(key) or None
        if raw_val is None:
            if default is None:
                raise ValueError(f"Environment variable '{key}' is not set.")
            return list(default)

        raw_val = raw_val.strip()
        if not raw_val.startswith("[") or not raw_val.endswith("]"):
            raise ValueError(
                f"Environment variable '{key}' must be in the format "
                f"'[elem1{separator}elem2{separator}...]'. Got: '{raw_val}'"
            )
        return [v.strip() for v in raw_val[1:-1].split(separator) if v.strip()]

    ##########################################
    ############# PAGE SETTINGS ##############
    ##########################################

    def get_page_settings(self) -> PageSettings:
        """Collect all settings that shape the page controller and its rendering.

        Returns:
            PageSettings: The resolved page settings.

        Raises:
            ValueError: If any value is malformed or out of range.
        """
        defaults = PageSettings()
        page_size = int(self.get_number_val("PAGE_SIZE", default=defaults.page_size))
        recent_limit = int(
            self.get_number_val("PAGE_RECENT_SEARCHES_LIMIT", default=defaults.recent_searches_limit)
        )
        if page_size < 1:
            raise ValueError(f"PAGE_SIZE must be at least 1. Got: {page_size}")
        if recent_limit < 1:
            raise ValueError(f"PAGE_RECENT_SEARCHES_LIMIT must be at least 1. Got: {recent_limit}")

        return PageSettings(
            page_size=page_size,
            recent_searches_limit=recent_limit,
            suggested_searches=self.get_list_val(
                "PAGE_SUGGESTED_SEARCHES", default=defaults.suggested_searches
            ),
            recover_from_errors=self.get_bool_val(
                "PAGE_RECOVER_FROM_ERRORS", default=defaults.recover_from_errors
            ),
            refresh_seconds=self.get_number_val("PAGE_REFRESH_SECONDS", default=defaults.refresh_seconds),
        )

    def get_logger(self) -> logging.Logger:
        """Return the application logger.

        Returns:
            logging.Logger: The configured logger instance.
        """
        return self._logger
