"""
Maybe and Result containers with a uniform combinator algebra.

Core building blocks for explicit "value or absence" and
"success or failure" handling without exceptions or None checks.

Architecture:
- Maybe[T] = Just[T] | Nothing[T]
- Result[T, E] = Ok[T, E] | Err[T, E]
- serde: canonical JSON wire records and total decoders
- interop: conversions to/from kungfu Result / LazyCoroResult
"""

import logging

# Core types
from ._types import Fn, Thunk

# Maybe
from .maybe import Just, Maybe, Nothing, from_nullable, is_maybe, just, nothing

# Result
from .result import Err, Ok, Result, err, from_awaitable, is_result, ok

# Serialization bridge
from . import serde
from .serde import (
    ContainerEncoder,
    decode_maybe_from_object,
    decode_maybe_from_string,
    decode_result_from_object,
    decode_result_from_string,
    dumps,
    to_object,
)

# kungfu interop
from . import interop

# Errors
from ._errors import UnwrapError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Fn",
    "Thunk",
    # Maybe
    "Maybe",
    "Just",
    "Nothing",
    "just",
    "nothing",
    "from_nullable",
    "is_maybe",
    # Result
    "Result",
    "Ok",
    "Err",
    "ok",
    "err",
    "is_result",
    "from_awaitable",
    # Serialization
    "serde",
    "ContainerEncoder",
    "to_object",
    "dumps",
    "decode_maybe_from_object",
    "decode_maybe_from_string",
    "decode_result_from_object",
    "decode_result_from_string",
    # Interop
    "interop",
    # Errors
    "UnwrapError",
)
