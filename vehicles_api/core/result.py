"""Tagged outcome values returned by services instead of raising.

A service method returns either ``Ok(value)`` or ``Err(error)`` where *error*
is an :class:`~vehicles_api.core.exceptions.AppException`. Callers branch with
``isinstance`` or ``match``; routers call :meth:`unwrap` to hand the error to
the registered FastAPI exception handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from vehicles_api.core.exceptions import AppException

T = TypeVar("T")
E = TypeVar("E", bound=AppException)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err[E]]
