"""Try monad: the outcome of a computation that may raise.

A Try is either a Success holding the computed value or a Failure holding the
exception that was raised. Operations differ in whether they capture
exceptions raised by the callbacks they receive:

- captured into a Failure: unit, map, fmap/flat_map, filter, transform
- propagated to the caller: each, recover, recover_with

get() on a Failure re-raises the original exception, never a wrapper.

Example:
    >>> from divergent import attempt
    >>> attempt(lambda: 10 / 0).get_or_else(-1)
    -1
    >>> attempt(lambda: 10 / 0).recover(ZeroDivisionError, lambda e: -2).get()
    -2
    >>> attempt(int, "21").map(lambda x: x * 2).get()
    42
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Callable, NoReturn, TypeVar

from pydantic import ValidationError

from ..config import get_settings
from ..errors import ErrorCode, NoSuchElementError, UnsupportedOperationError
from .monad import Monad, close_family

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger("divergent.try")

ErrorTypes = tuple[type[BaseException], ...]


def _captured(exc: Exception) -> Failure[Any]:
    """Wrap an exception raised inside a capturing operation.

    Invalid logging settings never prevent the capture; the Failure is returned unlogged.
    """
    try:
        settings = get_settings()
    except ValidationError:
        return Failure(exc)
    if settings.log_captured:
        logger.log(settings.log_level_no, "Captured %s into Failure: %s", type(exc).__name__, exc, exc_info=exc)
    return Failure(exc)


def _split_handler(op: str, args: tuple[Any, ...]) -> tuple[ErrorTypes, Callable[[Exception], Any]]:
    """Split recover-style arguments into (error types, handler). Handler goes last."""
    if not args:
        raise TypeError(f"{op}() requires a handler")
    *error_types, handler = args
    if not callable(handler) or (isinstance(handler, type) and issubclass(handler, BaseException)):
        raise TypeError(f"{op}() handler must be a callable passed after the error types, got {handler!r}")
    for et in error_types:
        if not (isinstance(et, type) and issubclass(et, BaseException)):
            raise TypeError(f"{op}() error types must be exception classes, got {et!r}")
    return tuple(error_types), handler


class Try(Monad[T]):
    """Either Success(value) or Failure(error). Closed and immutable.

    Use Try.unit(fn) or attempt(fn) to run a computation and capture what it
    raises; construct Success/Failure directly when the outcome is known.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        close_family(Try, cls)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def unit(cls, fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Try[T]:
        """Run fn(*args, **kwargs): Success with its result, or Failure with what it raised."""
        try:
            return Success(fn(*args, **kwargs))
        except Exception as exc:
            return _captured(exc)

    # ─── Type Checking ───────────────────────────────────────────────

    @abstractmethod
    def is_success(self) -> bool: ...

    @abstractmethod
    def is_failure(self) -> bool: ...

    # ─── Value Extraction ────────────────────────────────────────────

    @abstractmethod
    def get(self) -> T:
        """Return the value, or re-raise the held exception on Failure."""

    def get_or_else(self, default: T) -> T:
        """Return the value on Success, default on Failure."""
        return self.get() if self.is_success() else default

    def or_else(self, default: Try[T]) -> Try[T]:
        """Return self on Success, the given Try on Failure."""
        return self if self.is_success() else default

    # ─── Functor / Monad ─────────────────────────────────────────────

    @abstractmethod
    def each(self, f: Callable[[T], Any]) -> None:
        """Call f with the value on Success. Exceptions from f propagate."""

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Try[U]:
        """Apply f to the value and wrap the result. A raising f yields Failure."""

    @abstractmethod
    def fmap(self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Apply f, which returns a Try itself. A raising f yields Failure."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        """Turn a Success into a Failure when predicate does not hold."""

    # ─── Recovery ────────────────────────────────────────────────────

    @abstractmethod
    def recover_with(self, *args: Any) -> Try[T]:
        """recover_with(*error_types, handler): replace a matching Failure with handler(error).

        handler must return a Try. Matching is on the exact type of the held
        error; with no error types, every Failure matches. Exceptions raised
        by handler propagate.
        """

    @abstractmethod
    def recover(self, *args: Any) -> Try[T]:
        """recover(*error_types, handler): replace a matching Failure with Success(handler(error)).

        Same matching rule as recover_with. Exceptions raised by handler propagate.
        """

    @abstractmethod
    def failed(self) -> Try[Exception]:
        """Invert: Success(error) for a Failure, Failure(UnsupportedOperationError) for a Success."""

    @abstractmethod
    def transform(self, on_success: Callable[[T], Try[U]], on_failure: Callable[[Exception], Try[U]]) -> Try[U]:
        """Apply the branch matching this variant. A raising branch yields Failure."""

    @abstractmethod
    def flatten(self) -> Try[Any]:
        """Unwrap one level of Success(Try)."""

    # ─── Dunder Methods ──────────────────────────────────────────────

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @abstractmethod
    def __bool__(self) -> bool: ...


class Success(Try[T]):
    """Successful outcome holding a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self._value

    def each(self, f: Callable[[T], Any]) -> None:
        f(self._value)

    def map(self, f: Callable[[T], U]) -> Try[U]:
        return self.fmap(lambda v: Success(f(v)))

    def fmap(self, f: Callable[[T], Try[U]]) -> Try[U]:
        try:
            return f(self._value)
        except Exception as exc:
            return _captured(exc)

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        def check(v: T) -> Try[T]:
            if predicate(v):
                return self
            return Failure(NoSuchElementError(f"Predicate does not hold for {v!r}", ErrorCode.PREDICATE_FAILED))

        return self.fmap(check)

    def recover_with(self, *args: Any) -> Try[T]:
        _split_handler("recover_with", args)
        return self

    def recover(self, *args: Any) -> Try[T]:
        _split_handler("recover", args)
        return self

    def failed(self) -> Try[Exception]:
        return Failure(UnsupportedOperationError("Success.failed"))

    def transform(self, on_success: Callable[[T], Try[U]], on_failure: Callable[[Exception], Try[U]]) -> Try[U]:
        return self.fmap(on_success)

    def flatten(self) -> Try[Any]:
        return self._value if isinstance(self._value, Try) else self

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return isinstance(other, Success) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Success, self._value))

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


class Failure(Try[T]):
    """Failed outcome holding the exception that was raised."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: Exception) -> None:
        if not isinstance(error, Exception):
            raise TypeError(f"Failure requires an Exception instance, got {type(error).__name__}: {error!r}")
        object.__setattr__(self, "_error", error)

    @property
    def error(self) -> Exception:
        return self._error

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self) -> NoReturn:
        raise self._error

    def each(self, f: Callable[[T], Any]) -> None:
        return None

    def map(self, f: Callable[[T], U]) -> Try[U]:
        return self  # type: ignore[return-value]

    def fmap(self, f: Callable[[T], Try[U]]) -> Try[U]:
        return self  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        return self

    def _matches(self, error_types: ErrorTypes) -> bool:
        # Exact type membership; subclasses of a listed type do not match.
        return not error_types or type(self._error) in error_types

    def recover_with(self, *args: Any) -> Try[T]:
        error_types, handler = _split_handler("recover_with", args)
        if not self._matches(error_types):
            return self
        return handler(self._error)

    def recover(self, *args: Any) -> Try[T]:
        error_types, handler = _split_handler("recover", args)
        if not self._matches(error_types):
            return self
        return Success(handler(self._error))

    def failed(self) -> Try[Exception]:
        return Success(self._error)

    def transform(self, on_success: Callable[[T], Try[U]], on_failure: Callable[[Exception], Try[U]]) -> Try[U]:
        try:
            return on_failure(self._error)
        except Exception as exc:
            return _captured(exc)

    def flatten(self) -> Try[Any]:
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return isinstance(other, Failure) and self._error == other._error

    def __hash__(self) -> int:
        return hash((Failure, self._error))

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def attempt(fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Try[T]:
    """Run fn and capture its outcome as a Try. Same as Try.unit.

    Example:
        >>> attempt(lambda: 1).get()
        1
        >>> attempt(int, "x").is_failure()
        True
    """
    return Try.unit(fn, *args, **kwargs)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Convert an iterable of Trys into a Try of list.

    Returns the first Failure encountered, otherwise Success with all values.

    Example:
        >>> sequence([Success(1), Success(2)]).get()
        [1, 2]
    """
    values: list[T] = []
    for t in tries:
        if t.is_failure():
            return t  # type: ignore[return-value]
        values.append(t.get())
    return Success(values)


def traverse(items: Iterable[T], f: Callable[[T], Try[U]]) -> Try[list[U]]:
    """Apply f (returning a Try) to each item and collect the values.

    Stops at the first Failure; an exception raised by f becomes that Failure.

    Example:
        >>> traverse(["1", "2"], lambda s: attempt(int, s)).get()
        [1, 2]
        >>> traverse(["1", "x", "3"], lambda s: attempt(int, s)).is_failure()
        True
    """
    values: list[U] = []
    for item in items:
        t = Success(item).fmap(f)
        if t.is_failure():
            return t  # type: ignore[return-value]
        values.append(t.get())
    return Success(values)
