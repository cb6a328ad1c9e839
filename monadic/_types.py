"""
Core type definitions for monadic.

Aliases and wire-record shapes shared by Maybe, Result and the serde bridge.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Fn = single-argument transformation used by map / bind / match
type Fn[T, R] = Callable[[T], R]

# Thunk = zero-argument callable, evaluated only when its branch is taken
type Thunk[R] = Callable[[], R]

# ============================================================================
# Discriminants
# ============================================================================

JUST_TAG: typing.Final = "Just"
NOTHING_TAG: typing.Final = "Nothing"
OK_TAG: typing.Final = "Ok"
ERR_TAG: typing.Final = "Err"

# ============================================================================
# Wire records
# ============================================================================

# NOTE: key order is part of the contract: _tag first, payload second.
#       dict literals in to_json() keep insertion order, json.dumps keeps it too.


class JustObject[T](typing.TypedDict):
    _tag: typing.Literal["Just"]
    _value: T


class NothingObject(typing.TypedDict):
    _tag: typing.Literal["Nothing"]


class OkObject[T](typing.TypedDict):
    _tag: typing.Literal["Ok"]
    _value: T


class ErrObject[E](typing.TypedDict):
    _tag: typing.Literal["Err"]
    _msg: E


__all__ = (
    # Type aliases
    "Fn",
    "Thunk",
    # Tags
    "JUST_TAG",
    "NOTHING_TAG",
    "OK_TAG",
    "ERR_TAG",
    # Wire records
    "JustObject",
    "NothingObject",
    "OkObject",
    "ErrObject",
)
