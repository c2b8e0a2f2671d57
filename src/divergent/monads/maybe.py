"""Maybe monad: an optional value.

A Maybe is either Some(value) or the shared Nothing instance. Python's None
is the absent sentinel: Maybe.unit(None) is Nothing, and Some(None) is
rejected outright.

Unlike Try, Maybe never captures exceptions: a raising callback propagates.

Example:
    >>> from divergent import maybe
    >>> maybe({"a": 1}.get("a")).map(lambda v: v + 1).get()
    2
    >>> maybe({"a": 1}.get("b")).get_or_else(0)
    0
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Callable, NoReturn, TypeVar

from ..errors import NoSuchElementError
from .monad import Monad, close_family

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Monad[T]):
    """Either Some(value) or Nothing. Closed and immutable.

    Treat it as a collection of zero or one element: map, fmap, filter, each,
    iteration and membership all work on the contained value when present.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        close_family(Maybe, cls)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def empty(cls) -> Maybe[Any]:
        """Return the shared Nothing instance."""
        return Nothing

    @classmethod
    def unit(cls, v: T | None) -> Maybe[T]:
        """Some(v) if v is not None, Nothing otherwise."""
        return Nothing if v is None else Some(v)

    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def get(self) -> T:
        """Return the value. Raises NoSuchElementError on Nothing."""

    def get_or_else(self, default: T) -> T:
        return default if self.is_empty() else self.get()

    def or_else(self, default: Maybe[T]) -> Maybe[T]:
        """Return self if not empty, else the given Maybe."""
        return default if self.is_empty() else self

    def fmap(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Return f(value), where f itself returns a Maybe. Nothing stays Nothing.

        Example:
            >>> Maybe.unit(1).fmap(lambda v: Maybe.unit(v + 1))
            Some(2)
        """
        if self.is_empty():
            return Nothing
        return f(self.get())

    def map(self, f: Callable[[T], U | None]) -> Maybe[U]:
        """Apply f and re-wrap with unit, so a None result collapses to Nothing.

        Example:
            >>> Maybe.unit("a").map({"b": 1}.get)
            Nothing
        """
        if self.is_empty():
            return Nothing
        return Maybe.unit(f(self.get()))

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        if not self.is_empty() and predicate(self.get()):
            return self
        return Nothing

    def includes(self, elem: object) -> bool:
        """Test whether the Maybe holds a value equal to elem."""
        return not self.is_empty() and self.get() == elem

    def any(self, predicate: Callable[[T], bool]) -> bool:
        """True if not empty and predicate holds for the value."""
        return not self.is_empty() and bool(predicate(self.get()))

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if empty or predicate holds for the value."""
        return self.is_empty() or bool(predicate(self.get()))

    def each(self, f: Callable[[T], Any]) -> None:
        if not self.is_empty():
            f(self.get())

    def to_list(self) -> list[T]:
        """[value] if not empty, [] otherwise."""
        return [] if self.is_empty() else [self.get()]

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __contains__(self, elem: object) -> bool:
        return self.includes(elem)

    def __bool__(self) -> bool:
        return not self.is_empty()


class Some(Maybe[T]):
    """A present value. Never holds None."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise ValueError("Some cannot hold None; use Maybe.unit(None) or Nothing")
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def is_empty(self) -> bool:
        return False

    def get(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class _Nothing(Maybe[Any]):
    """The empty Maybe. Only one instance ever exists."""

    __slots__ = ()
    _instance: _Nothing | None = None

    def __new__(cls) -> _Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return True

    def get(self) -> NoReturn:
        raise NoSuchElementError("no such element in Nothing.get")

    def __reduce__(self) -> str:
        # Pickle and copy resolve to the module-level singleton.
        return "Nothing"

    def __repr__(self) -> str:
        return "Nothing"


Nothing: Maybe[Any] = _Nothing()


def maybe(v: T | None) -> Maybe[T]:
    """Wrap a possibly-None value. Same as Maybe.unit."""
    return Maybe.unit(v)
