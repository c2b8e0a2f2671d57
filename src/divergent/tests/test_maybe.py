"""Tests for the Maybe monad.

Validates:
- Functor and monad laws
- The Nothing singleton
- Collection-style queries (includes/any/all/to_list)
- Callback exceptions always propagate
"""

from __future__ import annotations

import copy
import pickle
from typing import Callable

import pytest

from divergent import ErrorCode, Maybe, NoSuchElementError, Nothing, Some, maybe


class Boom(Exception):
    """Test-only exception."""


def boom(*_: object) -> object:
    raise Boom("boom")


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor & Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert Maybe.unit(1).map(lambda x: x) == Maybe.unit(1)
    assert Maybe.empty().map(lambda x: x) is Nothing


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    assert Some(5).map(lambda x: f(g(x))) == Some(5).map(g).map(f)


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Maybe[int]] = lambda x: Maybe.unit(x * 2)
    assert Maybe.unit(21).fmap(f) == f(21)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    assert Some(1).fmap(Maybe.unit) == Some(1)
    assert Nothing.fmap(Maybe.unit) is Nothing


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Singleton
# ═════════════════════════════════════════════════════════════════════════════


def test_empty() -> None:
    assert Maybe.empty().is_empty()
    assert Maybe.empty() is Maybe.empty()
    assert Maybe.empty() is Nothing


def test_unit() -> None:
    assert Maybe.unit(None) is Maybe.empty()
    assert not Maybe.unit(1).is_empty()
    assert Maybe.unit(1).get() == 1


@pytest.mark.parametrize("value", [0, "", [], False, 1.5, "text"])
def test_unit_keeps_falsy_values(value: object) -> None:
    """Only None is absent; other falsy values are present."""
    m = Maybe.unit(value)
    assert not m.is_empty()
    assert m.get() == value


def test_maybe_function() -> None:
    assert maybe(3) == Some(3)
    assert maybe(None) is Nothing


def test_some_rejects_none() -> None:
    with pytest.raises(ValueError):
        Some(None)


def test_nothing_is_singleton() -> None:
    """Re-instantiating, copying or pickling Nothing yields the same object."""
    assert type(Nothing)() is Nothing
    assert copy.copy(Nothing) is Nothing
    assert copy.deepcopy(Nothing) is Nothing
    assert pickle.loads(pickle.dumps(Nothing)) is Nothing


def test_maybe_is_immutable() -> None:
    with pytest.raises(AttributeError):
        Some(1)._value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        Nothing.value = 1  # type: ignore[attr-defined]


def test_maybe_is_closed() -> None:
    with pytest.raises(TypeError):
        class Many(Maybe[int]):  # noqa: F841
            pass


# ═════════════════════════════════════════════════════════════════════════════
# Value Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_get_on_nothing_raises() -> None:
    with pytest.raises(NoSuchElementError) as exc_info:
        Maybe.unit(None).get()
    assert exc_info.value.code == ErrorCode.NO_SUCH_ELEMENT
    assert isinstance(exc_info.value, LookupError)


def test_get_or_else() -> None:
    assert Maybe.unit(1).get_or_else(2) == 1
    assert Maybe.empty().get_or_else(2) == 2


def test_or_else() -> None:
    m = Maybe.unit(1)
    assert m.or_else(Maybe.unit(2)) is m
    assert Maybe.empty().or_else(m) is m
    assert Maybe.unit(None).or_else(Maybe.unit(5)).get() == 5


# ═════════════════════════════════════════════════════════════════════════════
# map / fmap / filter
# ═════════════════════════════════════════════════════════════════════════════


def test_map() -> None:
    assert Maybe.empty().map(lambda v: v + 1) is Nothing
    assert Maybe.unit(1).map(lambda v: v + 1).get() == 2


def test_map_collapses_none() -> None:
    """A mapper returning None produces Nothing, not Some(None)."""
    assert Maybe.unit("a").map(lambda _: None) is Nothing
    assert Maybe.unit("a").map({"b": 1}.get) is Nothing


def test_map_propagates() -> None:
    with pytest.raises(Boom):
        Some(1).map(boom)


def test_fmap() -> None:
    m = Maybe.unit(1)
    assert m.fmap(lambda v: Maybe.empty()) is Nothing
    assert m.fmap(lambda v: Maybe.unit(v)).get() == 1
    assert Nothing.fmap(boom) is Nothing


def test_fmap_propagates() -> None:
    with pytest.raises(Boom):
        Some(1).fmap(boom)


def test_flat_map_alias() -> None:
    assert Some(2).flat_map(lambda v: Some(v * 2)) == Some(4)


def test_filter() -> None:
    assert Maybe.empty().filter(lambda v: v == 1) is Nothing
    assert Maybe.unit(1).filter(lambda v: v != 1) is Nothing
    assert Maybe.unit(1).filter(lambda v: v == 1).get() == 1


# ═════════════════════════════════════════════════════════════════════════════
# Queries
# ═════════════════════════════════════════════════════════════════════════════


def test_includes() -> None:
    assert Maybe.unit(1).includes(1)
    assert not Maybe.unit(1).includes(2)
    assert not Maybe.empty().includes(1)
    assert 1 in Some(1)
    assert 1 not in Nothing


def test_any() -> None:
    assert Maybe.unit(1).any(lambda v: v == 1)
    assert not Maybe.unit(1).any(lambda v: v == 2)
    assert not Maybe.empty().any(lambda v: True)


def test_all() -> None:
    assert Maybe.unit(1).all(lambda v: v == 1)
    assert not Maybe.unit(1).all(lambda v: v == 2)
    assert Maybe.empty().all(lambda v: False)


def test_predicates_not_called_on_nothing() -> None:
    assert not Nothing.any(boom)  # type: ignore[arg-type]
    assert Nothing.all(boom)  # type: ignore[arg-type]


def test_each() -> None:
    seen: list[int] = []
    assert Maybe.unit(1).each(seen.append) is None
    Maybe.empty().each(seen.append)
    assert seen == [1]


def test_callbacks_propagate_on_some() -> None:
    """Maybe never captures: each, filter, any and all let callback errors through."""
    with pytest.raises(Boom):
        Maybe.unit(1).each(boom)
    with pytest.raises(Boom):
        Some(1).filter(boom)  # type: ignore[arg-type]
    with pytest.raises(Boom):
        Some(1).any(boom)  # type: ignore[arg-type]
    with pytest.raises(Boom):
        Some(1).all(boom)  # type: ignore[arg-type]


def test_to_list() -> None:
    assert Maybe.unit(1).to_list() == [1]
    assert Maybe.empty().to_list() == []
    assert list(Some("x")) == ["x"]
    assert list(Nothing) == []


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_equality_and_hash() -> None:
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Some(1) != Nothing
    assert Nothing == Maybe.empty()
    assert Some(1) != 1
    assert len({Some(1), Some(1), Nothing}) == 2


def test_repr_and_bool() -> None:
    assert repr(Some(1)) == "Some(1)"
    assert repr(Some("a")) == "Some('a')"
    assert repr(Nothing) == "Nothing"
    assert Some(0)
    assert not Nothing


def test_pattern_matching() -> None:
    def describe(m: Maybe[int]) -> str:
        match m:
            case Some(value):
                return f"some {value}"
            case _:
                return "nothing"

    assert describe(Some(1)) == "some 1"
    assert describe(Nothing) == "nothing"
