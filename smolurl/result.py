"""Ok/Err values returned by the creation workflow."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import LinkError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error to report."""

    error: LinkError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
