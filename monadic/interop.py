"""
Interop with kungfu
===================

Async pipelines built on kungfu produce kungfu.Result / LazyCoroResult.
These helpers move outcomes across the boundary in both directions.

Example:
    from monadic import interop

    outcome = await interop.run_lazy(fetch_user(42))   # monadic Result
    lazy = interop.to_lazy(ok(user))                    # kungfu LazyCoroResult
"""

from __future__ import annotations

from typing import assert_never

import kungfu

from .result import Err, Ok, Result, from_awaitable


def from_kungfu[T, E](result: kungfu.Result[T, E], /) -> Result[T, E]:
    """kungfu Ok/Error -> Ok/Err."""
    match result:
        case kungfu.Ok(value):
            return Ok(value)
        case kungfu.Error(error):
            return Err(error)
        case _ as unreachable:
            assert_never(unreachable)


def to_kungfu[T, E](result: Result[T, E], /) -> kungfu.Result[T, E]:
    """Ok/Err -> kungfu Ok/Error."""
    match result:
        case Ok(value):
            return kungfu.Ok(value)
        case Err(error):
            return kungfu.Error(error)
        case _ as unreachable:
            assert_never(unreachable)


def to_lazy[T, E](result: Result[T, E], /) -> kungfu.LazyCoroResult[T, E]:
    """
    Lift an already computed Result into a kungfu lazy computation.

    NOTE: This is NOT lazy with respect to the Result itself, it is already
          computed. Only the conversion happens on await.
    """

    async def run() -> kungfu.Result[T, E]:
        return to_kungfu(result)

    return kungfu.LazyCoroResult(run)


async def run_lazy[T, E](
    lazy: kungfu.LazyCoroResult[T, E],
    /,
) -> Result[T, E | BaseException]:
    """
    Await a LazyCoroResult and convert its outcome.

    An Error result becomes Err(error). An exception raised while running
    the computation (or its cancellation) becomes Err(exc).
    """
    outcome: Result[kungfu.Result[T, E], BaseException] = await from_awaitable(lazy())
    match outcome:
        case Ok(inner):
            return from_kungfu(inner)
        case Err(exc):
            return Err(exc)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "from_kungfu",
    "to_kungfu",
    "to_lazy",
    "run_lazy",
)
