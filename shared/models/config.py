from pydantic import BaseModel


DEFAULT_SUGGESTED_SEARCHES = [
    "Cases about personal freedoms being violated",
    "Cases involving a US President",
    "Cases involving guns",
    "Cases where Nixon was the defendant",
    "How much power does the commerce clause give Congress?",
    "Cases about personal rights or congressional overreach?",
    "Cases involving the ability to pay for an attorney",
    "Cases about the right to remain silent",
    "Landmark cases that shaped freedom of speech laws",
    "Cases where defendant was found with a gun",
    "What cases involved personal rights or congressional overreach?",
    "Cases where the judge expressed grave concern",
]


class EnvConfig(BaseModel):
    """
    Represents a single configuration parameter required for a env setting.

    Attributes:
        env_key (str): The key/name of the environment variable to read.
        val_type (str): The expected type of the environment variable's value. Client configuration currently only uses "string".
        default (str | int | bool | list | None): An optional default value if the environment variable is not set. If None, the variable is required and an error will be raised if it is not set.
    """

    env_key: str
    val_type: str
    default: str | int | bool | list | None = None


class PageSettings(BaseModel):
    """
    Settings shaping the page controller and its rendering.

    Attributes:
        page_size (int): Number of result cards per page.
        recent_searches_limit (int): Maximum length of the recent searches list.
        suggested_searches (list[str]): Queries offered by the search form.
        recover_from_errors (bool): Reset in-progress flags and show an error banner when a backend call fails.
            When False, a failed call leaves its spinner running and only logs the error.
        refresh_seconds (float | int): Auto-refresh interval of the page while a backend call is in flight.
    """

    page_size: int = 6
    recent_searches_limit: int = 5
    suggested_searches: list[str] = list(DEFAULT_SUGGESTED_SEARCHES)
    recover_from_errors: bool = False
    refresh_seconds: float | int = 1
