"""Pytest configuration and fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class Spy:
    """Callable test double that records every call and returns a fixed value."""

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def spy() -> Spy:
    """Spy returning "spied"; assert on .called / .calls."""
    return Spy(returns="spied")
