"""
Error strategies

An error strategy decides how a fallible stream construction reports
failure: by raising (:data:`throw_exceptions`) or by returning a tagged
:class:`Success` / :class:`Failure` value (:data:`return_result`).

The strategy is chosen by the caller, either with an explicit ``strategy``
argument or with a :func:`using_strategy` block, which only affects the
current thread or asyncio task.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, Union

from zope.interface import implementer

from ioshim.exceptions import StreamError
from ioshim.interfaces import IErrorStrategy

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Success(Generic[T]):
    """Outcome of an operation which completed"""

    __slots__ = ("value",)

    is_success = True
    is_failure = False

    def __init__(self, value: T):
        self.value: T = value

    def unwrap(self) -> T:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Success):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((Success, self.value))

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


class Failure:
    """Outcome of an operation which raised an error of the declared category"""

    __slots__ = ("error",)

    is_success = False
    is_failure = True

    def __init__(self, error: BaseException):
        self.error: BaseException = error

    def unwrap(self) -> NoReturn:
        """Raise the captured error again."""
        raise self.error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return self.error is other.error

    def __hash__(self) -> int:
        return hash((Failure, id(self.error)))

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[Any], Failure]


@implementer(IErrorStrategy)
class ErrorStrategy:
    name = "base"

    def run(
        self,
        operation: Callable[..., T],
        *args: Any,
        category: Any = StreamError,
        **kwargs: Any,
    ) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class ThrowExceptions(ErrorStrategy):
    """Return the result of the operation, letting every failure propagate"""

    name = "throw"

    def run(
        self,
        operation: Callable[..., T],
        *args: Any,
        category: Any = StreamError,
        **kwargs: Any,
    ) -> T:
        return operation(*args, **kwargs)


class ReturnResult(ErrorStrategy):
    """Wrap the outcome in :class:`Success` or :class:`Failure`.

    Only errors which are instances of ``category`` are captured; anything
    else is considered a programming error and propagates.
    """

    name = "result"

    def run(
        self,
        operation: Callable[..., T],
        *args: Any,
        category: Any = StreamError,
        **kwargs: Any,
    ) -> Success[T] | Failure:
        try:
            value = operation(*args, **kwargs)
        except category as e:
            logger.debug("Captured %r from %r", e, operation)
            return Failure(e)
        return Success(value)


throw_exceptions = ThrowExceptions()
return_result = ReturnResult()

_active_strategy: ContextVar[ErrorStrategy | None] = ContextVar(
    "ioshim_active_strategy", default=None
)


def resolve_strategy(strategy: ErrorStrategy | None = None) -> ErrorStrategy:
    """Return ``strategy`` if given, else the one bound by the innermost
    :func:`using_strategy` block of the current context, else
    :data:`throw_exceptions`."""
    if strategy is not None:
        return strategy
    active = _active_strategy.get()
    if active is not None:
        return active
    return throw_exceptions


@contextmanager
def using_strategy(strategy: ErrorStrategy) -> Iterator[ErrorStrategy]:
    """Bind ``strategy`` for calls made without an explicit one inside the
    ``with`` block. The previous binding is restored on exit."""
    if not IErrorStrategy.providedBy(strategy):
        raise TypeError(f"{strategy!r} is not an error strategy")
    token = _active_strategy.set(strategy)
    try:
        yield strategy
    finally:
        _active_strategy.reset(token)
