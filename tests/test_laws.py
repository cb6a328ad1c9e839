"""Functor, applicative and monad laws for Maybe and Result."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from monadic import err, just, nothing, ok


def identity(x: Any) -> Any:
    return x


def inc(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def half_maybe(x: int) -> Any:
    return just(x // 2) if x % 2 == 0 else nothing()


def half_result(x: int) -> Any:
    return ok(x // 2) if x % 2 == 0 else err(f"{x} is odd")


MAYBES = [just(0), just(4), just(7), nothing()]
RESULTS = [ok(0), ok(4), ok(7), err("boom")]
CONTAINERS = MAYBES + RESULTS


# =============================================================================
# Functor
# =============================================================================


@pytest.mark.parametrize("c", CONTAINERS, ids=repr)
def test_map_identity(c: Any) -> None:
    assert c.map(identity) == c


@pytest.mark.parametrize("c", CONTAINERS, ids=repr)
@pytest.mark.parametrize(("f", "g"), [(inc, double), (double, inc), (str, len)])
def test_map_composition(c: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> None:
    assert c.map(f).map(g) == c.map(lambda x: g(f(x)))


# =============================================================================
# Monad
# =============================================================================


@pytest.mark.parametrize("value", [0, 4, 7])
def test_bind_left_identity(value: int) -> None:
    assert just(value).bind(half_maybe) == half_maybe(value)
    assert ok(value).bind(half_result) == half_result(value)


@pytest.mark.parametrize("c", MAYBES, ids=repr)
def test_maybe_bind_right_identity(c: Any) -> None:
    assert c.bind(just) == c


@pytest.mark.parametrize("c", RESULTS, ids=repr)
def test_result_bind_right_identity(c: Any) -> None:
    assert c.bind(ok) == c


@pytest.mark.parametrize("c", MAYBES, ids=repr)
def test_maybe_bind_associativity(c: Any) -> None:
    left = c.bind(half_maybe).bind(half_maybe)
    right = c.bind(lambda x: half_maybe(x).bind(half_maybe))
    assert left == right


@pytest.mark.parametrize("c", RESULTS, ids=repr)
def test_result_bind_associativity(c: Any) -> None:
    left = c.bind(half_result).bind(half_result)
    right = c.bind(lambda x: half_result(x).bind(half_result))
    assert left == right


@pytest.mark.parametrize("c", MAYBES, ids=repr)
def test_maybe_bind_of_pure_is_map(c: Any) -> None:
    assert c.bind(lambda x: just(inc(x))) == c.map(inc)


@pytest.mark.parametrize("c", RESULTS, ids=repr)
def test_result_bind_of_pure_is_map(c: Any) -> None:
    assert c.bind(lambda x: ok(inc(x))) == c.map(inc)


# =============================================================================
# Applicative
# =============================================================================


@pytest.mark.parametrize("c", MAYBES, ids=repr)
def test_maybe_ap_identity(c: Any) -> None:
    assert just(identity).ap(c) == c


@pytest.mark.parametrize("c", RESULTS, ids=repr)
def test_result_ap_identity(c: Any) -> None:
    assert ok(identity).ap(c) == c


@pytest.mark.parametrize("value", [0, 4, 7])
def test_ap_homomorphism(value: int) -> None:
    assert just(inc).ap(just(value)) == just(inc(value))
    assert ok(inc).ap(ok(value)) == ok(inc(value))
    assert just(inc).ap(just(value)).unwrap() == inc(value)
    assert ok(inc).ap(ok(value)).unwrap() == inc(value)


def test_ap_propagates_absence_and_first_failure() -> None:
    assert nothing().ap(just(1)).is_nothing()
    assert just(inc).ap(nothing()).is_nothing()
    assert err("receiver").ap(err("operand")).unwrap_err() == "receiver"
    assert ok(inc).ap(err("operand")).unwrap_err() == "operand"


# =============================================================================
# Short-circuit laziness
# =============================================================================


def test_empty_side_never_evaluates_callbacks() -> None:
    calls = 0

    def counting(x: Any) -> Any:
        nonlocal calls
        calls += 1
        return x

    nothing().map(counting)
    nothing().bind(counting)
    err("e").map(counting)
    err("e").bind(counting)
    ok(1).map_err(counting)

    assert calls == 0
