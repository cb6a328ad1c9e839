from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from monadic import Result, err, ok  # noqa: E402


class ServiceUnavailable(Exception):
    """Raised by FakeHTTPClient, the way third-party clients raise."""


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str | None = None


def _seed_users() -> dict[int, User]:
    return {
        1: User(id=1, name="ada", email="ada@example.com"),
        2: User(id=2, name="grace"),
    }


@dataclass(slots=True)
class FakeRepository:
    users: dict[int, User] = field(default_factory=_seed_users)

    def find(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def load(self, user_id: int) -> Result[User, str]:
        user = self.users.get(user_id)
        if user is None:
            return err(f"user {user_id} not found")
        return ok(user)


@dataclass(slots=True)
class FakeHTTPClient:
    delay_seconds: float = 0.0
    failures_before_ok: int = 0

    async def get_user(self, user_id: int) -> User:
        await asyncio.sleep(self.delay_seconds)
        if self.failures_before_ok > 0:
            self.failures_before_ok -= 1
            raise ServiceUnavailable("503: Service Unavailable")
        return User(id=user_id, name=f"user:{user_id}@http")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
