"""
Result - success / failure container
====================================

Result[T, E] = Ok[T, E] | Err[T, E]

Mirrors Maybe, but the failure side carries a payload. Because of that the
fallback callbacks of map_or_else / unwrap_or_else receive the error, while
Maybe's take no argument.

Monadic laws:
- Left identity: ok(a).bind(f) == f(a)
- Right identity: m.bind(ok) == m
- Associativity: m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))

Applicative ap is left-biased: when both sides are Err, the receiver's
error wins.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Awaitable, Callable

from ._errors import UnwrapError
from ._types import ERR_TAG, OK_TAG, ErrObject, Fn, OkObject
from .maybe import Just, Maybe, Nothing

log = logging.getLogger(__name__)


@typing.final
class Ok[T, E]:
    """Success variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: typing.Any) -> typing.NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> typing.NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> T:
        """The success value."""
        return self._value

    # Probes

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    # Functor operations

    def map[U](self, f: Fn[T, U], /) -> Result[U, E]:
        """Apply f to the success value."""
        return Ok(f(self._value))

    def map_err[F](self, f: Fn[E, F], /) -> Result[T, F]:
        """f is never called; the value is carried into a new Ok."""
        return Ok(self._value)

    def map_or[U](self, f: Fn[T, U], default: U, /) -> U:
        return f(self._value)

    def map_or_else[U](self, f: Fn[T, U], on_err: Fn[E, U], /) -> U:
        return f(self._value)

    # Applicative / Monad operations

    def ap[A, U](self: Ok[Callable[[A], U], E], other: Result[A, E], /) -> Result[U, E]:
        """Apply the contained function to other's success value."""
        return other.map(self._value)

    def bind[U](self, f: Fn[T, Result[U, E]], /) -> Result[U, E]:
        """Monadic bind (>>=): continue the chain with f."""
        return f(self._value)

    def and_then[U](self, f: Fn[T, Result[U, E]], /) -> Result[U, E]:
        """Alias for bind()."""
        return self.bind(f)

    # Extraction

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> E:
        raise UnwrapError("unwrap_err", "Call unwrap_err on Ok!", self._value)

    def unwrap_or(self, default: T, /) -> T:
        return self._value

    def unwrap_or_else(self, f: Fn[E, T], /) -> T:
        return self._value

    def expect(self, message: str, /) -> T:
        return self._value

    def expect_err(self, message: str, /) -> E:
        raise UnwrapError("expect_err", f"{message}: {self._value}", self._value)

    # Folds

    def match[R](self, on_ok: Fn[T, R], on_err: Fn[E, R], /) -> R:
        return on_ok(self._value)

    def do[R1, R2](self, on_ok: Fn[T, R1], on_err: Fn[E, R2], /) -> R1 | R2:
        return on_ok(self._value)

    # Conversions

    def to_maybe(self) -> Maybe[T]:
        """Ok(v) -> Just(v)."""
        return Just(self._value)

    def to_json(self) -> OkObject[T]:
        return {"_tag": OK_TAG, "_value": self._value}

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ok):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((OK_TAG, self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


@typing.final
class Err[T, E]:
    """Failure variant."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E, /) -> None:
        object.__setattr__(self, "_error", error)

    def __setattr__(self, name: str, value: typing.Any) -> typing.NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> typing.NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def error(self) -> E:
        """The error payload."""
        return self._error

    # Probes

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    # Functor operations

    def map[U](self, f: Fn[T, U], /) -> Result[U, E]:
        """f is never called; the error is carried into a new Err."""
        return Err(self._error)

    def map_err[F](self, f: Fn[E, F], /) -> Result[T, F]:
        """Apply f to the error payload."""
        return Err(f(self._error))

    def map_or[U](self, f: Fn[T, U], default: U, /) -> U:
        return default

    def map_or_else[U](self, f: Fn[T, U], on_err: Fn[E, U], /) -> U:
        return on_err(self._error)

    # Applicative / Monad operations

    def ap[A, U](self, other: Result[A, E], /) -> Result[U, E]:
        """Short-circuit: the receiver's error wins over other's."""
        return Err(self._error)

    def bind[U](self, f: Fn[T, Result[U, E]], /) -> Result[U, E]:
        return Err(self._error)

    def and_then[U](self, f: Fn[T, Result[U, E]], /) -> Result[U, E]:
        return self.bind(f)

    # Extraction

    def unwrap(self) -> T:
        # NOTE: the payload stays out of the message, use expect() to include it.
        raise UnwrapError("unwrap", "Call unwrap on Err!", self._error)

    def unwrap_err(self) -> E:
        return self._error

    def unwrap_or(self, default: T, /) -> T:
        return default

    def unwrap_or_else(self, f: Fn[E, T], /) -> T:
        """Compute a fallback value from the error."""
        return f(self._error)

    def expect(self, message: str, /) -> T:
        raise UnwrapError("expect", f"{message}: {self._error}", self._error)

    def expect_err(self, message: str, /) -> E:
        return self._error

    # Folds

    def match[R](self, on_ok: Fn[T, R], on_err: Fn[E, R], /) -> R:
        return on_err(self._error)

    def do[R1, R2](self, on_ok: Fn[T, R1], on_err: Fn[E, R2], /) -> R1 | R2:
        return on_err(self._error)

    # Conversions

    def to_maybe(self) -> Maybe[T]:
        """
        Err(e) -> Nothing().

        NOTE: the error payload is dropped. Use match() or map_err() first
              if it must survive the conversion.
        """
        return Nothing()

    def to_json(self) -> ErrObject[E]:
        return {"_tag": ERR_TAG, "_msg": self._error}

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Err):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((ERR_TAG, self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T, E] | Err[T, E]


# Constructors
def ok[T, E](value: T, /) -> Result[T, E]:
    """Wrap a value in Ok."""
    return Ok(value)


def err[T, E](error: E, /) -> Result[T, E]:
    """Wrap an error in Err."""
    return Err(error)


def is_result(obj: object, /) -> typing.TypeGuard[Result[typing.Any, typing.Any]]:
    """True for Ok and Err instances."""
    return isinstance(obj, (Ok, Err))


async def from_awaitable[T](awaitable: Awaitable[T], /) -> Result[T, BaseException]:
    """
    Await an operation and capture its outcome as a Result.

    **When to use:** Bridge between exception-based async code and Result.
    Completion becomes Ok(value), a raised exception becomes Err(exc).

    Example:
        from monadic import from_awaitable

        result = await from_awaitable(client.get(url))
        body = result.map(lambda response: response.text).unwrap_or("")

    NOTE: Cancellation of the awaited operation is reported as
          Err(CancelledError) like any other failure, there is no third
          outcome. Cancellation of the calling task itself is re-raised.
    """
    try:
        return Ok(await awaitable)
    except asyncio.CancelledError as exc:
        # Cancellation aimed at the calling task (timeout, TaskGroup) must propagate.
        task = asyncio.current_task()
        if task is not None and task.cancelling() > 0:
            raise
        log.debug("awaitable cancelled: %r", exc)
        return Err(exc)
    except Exception as exc:
        log.debug("awaitable failed: %r", exc)
        return Err(exc)


__all__ = (
    "Result",
    "Ok",
    "Err",
    "ok",
    "err",
    "is_result",
    "from_awaitable",
)
