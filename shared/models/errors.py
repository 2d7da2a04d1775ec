"""Error raised for unsuccessful responses of the search backend."""

from typing import Any


class ApiError(Exception):
    """A backend request that did not end with a 2xx status.

    Attributes:
        status (int): The HTTP status code, or 0 if no response was received.
        body (Any): The decoded JSON error body, or the raw text if it was not JSON.
        endpoint (str): The endpoint path the request was sent to.
    """

    def __init__(self, status: int, body: Any = None, endpoint: str = "") -> None:
        self.status = status
        self.body = body
        self.endpoint = endpoint
        super().__init__(f"API request failed with status {status}")

    def to_dict(self) -> dict:
        return {"status": self.status, "body": self.body, "endpoint": self.endpoint}
