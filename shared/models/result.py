"""Tagged outcome of an asynchronous backend call."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from shared.models.errors import ApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ApiError

    @property
    def is_ok(self) -> bool:
        return False


Result = Ok[T] | Err
