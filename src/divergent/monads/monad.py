"""Minimal contract shared by Try and Maybe.

Both containers are closed two-variant families: the abstract base declares
the operations and each variant overrides them. Subclassing the base from
outside its defining module is rejected so no third variant can appear.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Monad(ABC, Generic[T]):
    """Unit + bind. Concrete containers add their own richer operation sets."""

    __slots__ = ()

    @classmethod
    @abstractmethod
    def unit(cls, *args: Any, **kwargs: Any) -> Monad[Any]:
        """Lift a plain value (or computation) into the container."""

    @abstractmethod
    def fmap(self, f: Callable[[T], Any]) -> Monad[Any]:
        """Monadic bind: f returns an already wrapped value."""

    def flat_map(self, f: Callable[[T], Any]) -> Monad[Any]:
        """Alias for fmap."""
        return self.fmap(f)


def close_family(base: type, cls: type) -> None:
    """Reject subclasses of a closed container declared outside base's module."""
    if cls.__module__ != base.__module__:
        raise TypeError(f"{base.__name__} is a closed type; cannot subclass it as {cls.__name__}")
