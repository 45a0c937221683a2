"""Success-or-error result types returned by the relay service layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NORMALIZE = "normalize"
    FETCH = "fetch"
    PARSE = "parse"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    """A failed step. ``message`` is client-facing, ``details`` explains the cause."""

    kind: ErrorKind
    message: str
    details: str | None = None


Result = Union[Ok[T], Err]


def describe(exc: BaseException) -> str:
    """Human-readable text for an exception, never empty."""
    return str(exc) or "Unknown error"
