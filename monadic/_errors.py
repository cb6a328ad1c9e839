from __future__ import annotations

import typing


class UnwrapError(Exception):
    """unwrap/expect family called on the wrong variant."""

    method: str
    payload: typing.Any

    def __init__(self, method: str, message: str, payload: typing.Any = None) -> None:
        self.method = method
        self.payload = payload
        super().__init__(message)

__all__ = ("UnwrapError",)
