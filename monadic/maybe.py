"""
Maybe - optional value container
================================

Maybe[T] = Just[T] | Nothing[T]

A closed union of two final classes. Every combinator is implemented once
per variant, so there is no branching on "is this present" inside the
methods themselves. Code that consumes a Maybe directly should use
structural pattern matching with assert_never on the fall-through arm:

    match m:
        case Just(value):
            ...
        case Nothing():
            ...
        case _ as unreachable:
            assert_never(unreachable)

Functor / Applicative / Monad laws hold for map / ap / bind:
- Identity: m.map(identity) == m
- Composition: m.map(f).map(g) == m.map(lambda x: g(f(x)))
- Left identity: just(a).bind(f) == f(a)
- Right identity: m.bind(just) == m
- Associativity: m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._errors import UnwrapError
from ._types import JUST_TAG, NOTHING_TAG, Fn, JustObject, NothingObject, Thunk

if typing.TYPE_CHECKING:
    from .result import Result


@typing.final
class Just[T]:
    """Maybe variant holding exactly one value."""

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
        """The contained value."""
        return self._value

    # Probes

    def is_just(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    # Functor operations

    def map[B](self, f: Fn[T, B], /) -> Maybe[B]:
        """Apply f to the contained value."""
        return Just(f(self._value))

    def map_or[B](self, f: Fn[T, B], default: B, /) -> B:
        return f(self._value)

    def map_or_else[B](self, f: Fn[T, B], default: Thunk[B], /) -> B:
        return f(self._value)

    # Applicative / Monad operations

    def ap[A, B](self: Just[Callable[[A], B]], other: Maybe[A], /) -> Maybe[B]:
        """Apply the contained function to other's value."""
        return other.map(self._value)

    def bind[B](self, f: Fn[T, Maybe[B]], /) -> Maybe[B]:
        """Monadic bind (>>=): f decides whether the chain continues."""
        return f(self._value)

    def and_then[B](self, f: Fn[T, Maybe[B]], /) -> Maybe[B]:
        """Alias for bind()."""
        return self.bind(f)

    # Extraction

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T, /) -> T:
        return self._value

    def unwrap_or_else(self, f: Thunk[T], /) -> T:
        return self._value

    def expect(self, message: str, /) -> T:
        return self._value

    # Folds

    def match[R](self, on_just: Fn[T, R], on_nothing: Thunk[R], /) -> R:
        return on_just(self._value)

    def do[R1, R2](self, on_just: Fn[T, R1], on_nothing: Thunk[R2], /) -> R1 | R2:
        return on_just(self._value)

    # Conversions

    def to_result[E](self, error: E, /) -> Result[T, E]:
        """Just(v) -> Ok(v)."""
        from .result import Ok

        return Ok(self._value)

    def to_json(self) -> JustObject[T]:
        return {"_tag": JUST_TAG, "_value": self._value}

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Just):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((JUST_TAG, self._value))

    def __repr__(self) -> str:
        return f"Just({self._value!r})"


@typing.final
class Nothing[T]:
    """Maybe variant holding no value."""

    __slots__ = ()
    __match_args__ = ()

    # Probes

    def is_just(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    # Functor operations

    def map[B](self, f: Fn[T, B], /) -> Maybe[B]:
        """f is never called."""
        return Nothing()

    def map_or[B](self, f: Fn[T, B], default: B, /) -> B:
        return default

    def map_or_else[B](self, f: Fn[T, B], default: Thunk[B], /) -> B:
        return default()

    # Applicative / Monad operations

    def ap[A, B](self, other: Maybe[A], /) -> Maybe[B]:
        return Nothing()

    def bind[B](self, f: Fn[T, Maybe[B]], /) -> Maybe[B]:
        return Nothing()

    def and_then[B](self, f: Fn[T, Maybe[B]], /) -> Maybe[B]:
        return self.bind(f)

    # Extraction

    def unwrap(self) -> T:
        raise UnwrapError("unwrap", "Call unwrap on Nothing!")

    def unwrap_or(self, default: T, /) -> T:
        return default

    def unwrap_or_else(self, f: Thunk[T], /) -> T:
        return f()

    def expect(self, message: str, /) -> T:
        raise UnwrapError("expect", message)

    # Folds

    def match[R](self, on_just: Fn[T, R], on_nothing: Thunk[R], /) -> R:
        return on_nothing()

    def do[R1, R2](self, on_just: Fn[T, R1], on_nothing: Thunk[R2], /) -> R1 | R2:
        return on_nothing()

    # Conversions

    def to_result[E](self, error: E, /) -> Result[T, E]:
        """Nothing -> Err(error)."""
        from .result import Err

        return Err(error)

    def to_json(self) -> NothingObject:
        return {"_tag": NOTHING_TAG}

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nothing):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(NOTHING_TAG)

    def __repr__(self) -> str:
        return "Nothing()"


type Maybe[T] = Just[T] | Nothing[T]


# Constructors
def just[T](value: T, /) -> Maybe[T]:
    """Wrap a value in Just."""
    return Just(value)


def nothing[T]() -> Maybe[T]:
    """Create an empty Maybe."""
    return Nothing()


def from_nullable[T](value: T | None, /) -> Maybe[T]:
    """
    None becomes Nothing, anything else becomes Just.

    Falsy values are still present:
        from_nullable(0)     # Just(0)
        from_nullable(None)  # Nothing()
    """
    if value is None:
        return Nothing()
    return Just(value)


def is_maybe(obj: object, /) -> typing.TypeGuard[Maybe[typing.Any]]:
    """True for Just and Nothing instances."""
    return isinstance(obj, (Just, Nothing))


__all__ = (
    "Maybe",
    "Just",
    "Nothing",
    "just",
    "nothing",
    "from_nullable",
    "is_maybe",
)
