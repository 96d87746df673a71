"""Result types returned by the orchestration layer."""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

ErrorKind = Literal[
    "validation",
    "generation",
    "store_unavailable",
    "already_saved",
    "busy",
]


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed outcome with a kind and a user-displayable message."""

    kind: ErrorKind
    message: str
