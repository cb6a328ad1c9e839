from __future__ import annotations

from _infra import FakeRepository, User, banner, run

from monadic import Err, Maybe, Ok, from_nullable, just


def email_domain(user: User) -> Maybe[str]:
    # Locality: plain function returning Maybe, no branching on None here.
    return from_nullable(user.email).map(lambda email: email.split("@")[1])


async def main() -> None:
    banner("01_quickstart: from_nullable + bind + to_result + match")

    repo = FakeRepository()

    for user_id in (1, 2, 3):
        domain = (
            from_nullable(repo.find(user_id))
            .bind(email_domain)
            .to_result(f"no email domain for user {user_id}")
        )
        match domain:
            case Ok(value):
                print(f"user {user_id}: {value}")
            case Err(reason):
                print(f"user {user_id}: {reason}")

    add = just(lambda a: lambda b: a + b)
    print("applicative:", add.ap(just(40)).ap(just(2)).unwrap_or(0))

    greeting = repo.load(2).map(lambda user: f"hello, {user.name}").unwrap_or("hello, stranger")
    print(greeting)


if __name__ == "__main__":
    run(main)
