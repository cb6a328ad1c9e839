"""Conversions between monadic Result and kungfu Result / LazyCoroResult."""

from __future__ import annotations

import asyncio

import kungfu
import pytest

from monadic import Err, Ok, err, interop, ok


def test_from_kungfu() -> None:
    assert interop.from_kungfu(kungfu.Ok(1)) == Ok(1)
    assert interop.from_kungfu(kungfu.Error("boom")) == Err("boom")


def test_to_kungfu() -> None:
    match interop.to_kungfu(ok(1)):
        case kungfu.Ok(value):
            assert value == 1
        case other:
            pytest.fail(f"expected kungfu Ok, got {other!r}")

    match interop.to_kungfu(err("boom")):
        case kungfu.Error(error):
            assert error == "boom"
        case other:
            pytest.fail(f"expected kungfu Error, got {other!r}")


def test_round_trip_through_kungfu() -> None:
    assert interop.from_kungfu(interop.to_kungfu(ok(1))) == ok(1)
    assert interop.from_kungfu(interop.to_kungfu(err("e"))) == err("e")


@pytest.mark.asyncio
async def test_to_lazy_is_awaitable() -> None:
    lazy = interop.to_lazy(ok(5))
    outcome = await lazy
    assert outcome.unwrap() == 5


@pytest.mark.asyncio
async def test_run_lazy_converts_outcome() -> None:
    async def succeed() -> kungfu.Result[int, str]:
        return kungfu.Ok(3)

    async def fail() -> kungfu.Result[int, str]:
        return kungfu.Error("nope")

    assert await interop.run_lazy(kungfu.LazyCoroResult(succeed)) == Ok(3)
    assert await interop.run_lazy(kungfu.LazyCoroResult(fail)) == Err("nope")


@pytest.mark.asyncio
async def test_run_lazy_captures_raised_exception() -> None:
    async def crash() -> kungfu.Result[int, str]:
        raise RuntimeError("crashed")

    outcome = await interop.run_lazy(kungfu.LazyCoroResult(crash))

    assert outcome.is_err()
    assert isinstance(outcome.unwrap_err(), RuntimeError)


@pytest.mark.asyncio
async def test_run_lazy_of_to_lazy() -> None:
    assert await interop.run_lazy(interop.to_lazy(err("kept"))) == Err("kept")


@pytest.mark.asyncio
async def test_run_lazy_lets_caller_timeout_propagate() -> None:
    async def slow() -> kungfu.Result[int, str]:
        await asyncio.sleep(1)
        return kungfu.Ok(1)

    with pytest.raises(TimeoutError):
        async with asyncio.timeout(0.01):
            await interop.run_lazy(kungfu.LazyCoroResult(slow))
