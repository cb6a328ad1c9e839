"""
Serialization bridge
====================

Canonical wire records:

    Just(v)    {"_tag":"Just","_value":v}
    Nothing()  {"_tag":"Nothing"}
    Ok(v)      {"_tag":"Ok","_value":v}
    Err(e)     {"_tag":"Err","_msg":e}

Encoding is total and deterministic. Decoding never raises: malformed text
and unknown discriminants come back as Err(str), so the decoders return a
Result wrapping the decoded container.

NOTE: only the discriminant is validated. A record with a known _tag and a
      missing payload field decodes with None as its payload.
"""

from __future__ import annotations

import json
import logging
import typing
from collections.abc import Mapping

from ._types import ERR_TAG, JUST_TAG, NOTHING_TAG, OK_TAG
from .maybe import Just, Maybe, Nothing
from .result import Err, Ok, Result

log = logging.getLogger(__name__)

type Container = Maybe[typing.Any] | Result[typing.Any, typing.Any]

_MAYBE_ERROR: typing.Final = "Cannot parse to a Maybe"
_RESULT_ERROR: typing.Final = "Cannot parse to a Result"


# ============================================================================
# Encode
# ============================================================================


def to_object(container: Container, /) -> dict[str, typing.Any]:
    """Wire record of a Maybe or Result. Payloads are left as-is."""
    return dict(container.to_json())


class ContainerEncoder(json.JSONEncoder):
    """
    JSONEncoder that renders Maybe / Result as their wire records.

    Containers nested in lists, dicts or other containers are handled too,
    because json calls default() again for the payload.

    Example:
        json.dumps({"user": just(42)}, cls=ContainerEncoder)
        # '{"user": {"_tag": "Just", "_value": 42}}'
    """

    def default(self, o: typing.Any) -> typing.Any:
        if isinstance(o, (Just, Nothing, Ok, Err)):
            return o.to_json()
        return super().default(o)


def dumps(obj: typing.Any, /, **kwargs: typing.Any) -> str:
    """
    json.dumps with ContainerEncoder and compact separators.

    Example:
        dumps(ok(1))         # '{"_tag":"Ok","_value":1}'
        dumps(err("boom"))   # '{"_tag":"Err","_msg":"boom"}'

    Extra keyword arguments go to json.dumps unchanged.
    """
    kwargs.setdefault("cls", ContainerEncoder)
    kwargs.setdefault("separators", (",", ":"))
    return json.dumps(obj, **kwargs)


# ============================================================================
# Decode
# ============================================================================


def _tag_of(record: object) -> object:
    if not isinstance(record, Mapping):
        return None
    return record.get("_tag")


def _parse_text(text: str) -> Result[typing.Any, str]:
    try:
        return Ok(json.loads(text))
    except (ValueError, TypeError, RecursionError) as exc:
        log.debug("cannot parse container text: %s", exc)
        return Err(str(exc))


def decode_maybe_from_object[T](record: typing.Any, /) -> Result[Maybe[T], str]:
    """
    Build a Maybe from its wire record.

    Example:
        decode_maybe_from_object({"_tag": "Just", "_value": 1})  # Ok(Just(1))
        decode_maybe_from_object({"_tag": "bogus"})  # Err("Cannot parse to a Maybe")
    """
    match _tag_of(record):
        case "Just":
            return Ok(Just(record.get("_value")))
        case "Nothing":
            return Ok(Nothing())
        case tag:
            log.debug("unknown Maybe tag %r (expected %s or %s)", tag, JUST_TAG, NOTHING_TAG)
            return Err(_MAYBE_ERROR)


def decode_maybe_from_string[T](text: str, /) -> Result[Maybe[T], str]:
    """Parse JSON text and decode it as a Maybe."""
    return _parse_text(text).bind(decode_maybe_from_object)


def decode_result_from_object[T, E](record: typing.Any, /) -> Result[Result[T, E], str]:
    """
    Build a Result from its wire record.

    Example:
        decode_result_from_object({"_tag": "Err", "_msg": "boom"})  # Ok(Err("boom"))
    """
    match _tag_of(record):
        case "Ok":
            return Ok(Ok(record.get("_value")))
        case "Err":
            return Ok(Err(record.get("_msg")))
        case tag:
            log.debug("unknown Result tag %r (expected %s or %s)", tag, OK_TAG, ERR_TAG)
            return Err(_RESULT_ERROR)


def decode_result_from_string[T, E](text: str, /) -> Result[Result[T, E], str]:
    """Parse JSON text and decode it as a Result."""
    return _parse_text(text).bind(decode_result_from_object)


__all__ = (
    "Container",
    "ContainerEncoder",
    "to_object",
    "dumps",
    "decode_maybe_from_object",
    "decode_maybe_from_string",
    "decode_result_from_object",
    "decode_result_from_string",
)
