from __future__ import annotations

from _infra import FakeHTTPClient, ServiceUnavailable, User, banner, run

import kungfu

from monadic import from_awaitable, interop


async def fetch_user_impl(client: FakeHTTPClient, user_id: int) -> kungfu.Result[User, str]:
    # A kungfu-based pipeline step: returns Result instead of raising.
    try:
        return kungfu.Ok(await client.get_user(user_id))
    except ServiceUnavailable as exc:
        return kungfu.Error(str(exc))


async def main() -> None:
    banner("03_async_interop: from_awaitable + kungfu LazyCoroResult")

    flaky = FakeHTTPClient(failures_before_ok=1)

    first = await from_awaitable(flaky.get_user(1))
    second = await from_awaitable(flaky.get_user(1))
    print("first:", first.map_err(str))
    print("second:", second.map(lambda user: user.name))

    lazy = kungfu.LazyCoroResult(lambda: fetch_user_impl(FakeHTTPClient(), 7))
    outcome = await interop.run_lazy(lazy)
    print("kungfu ->", outcome.map(lambda user: user.name))


if __name__ == "__main__":
    run(main)
