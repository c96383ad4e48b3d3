"""Success/Failure values returned by every rule, repository and handler.

A rejected registration or mint is not exceptional: the handler returns
Failure carrying a DomainError and the host decides what to do with it
(revert the message, render the error). Only storage faults raise.

Usage:
    match EventRecord.create(...):
        case Success(value=event):
            repo.save(event)
        case Failure(error=error):
            log_rejection(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Outcome of a check or command that went through.

    Attributes:
        value: Validated input, stored record, or response.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Outcome of the first check that failed.

    Attributes:
        error: Usually a DomainError subclass.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
