from __future__ import annotations

from _infra import FakeRepository, banner, run

from monadic import decode_result_from_string, dumps, nothing


async def main() -> None:
    banner("02_json_wire: dumps + total decoders")

    repo = FakeRepository()
    outcomes = [repo.load(1).map(lambda user: user.name), repo.load(9), nothing()]

    for outcome in outcomes:
        print(dumps(outcome))

    for text in ('{"_tag":"Ok","_value":"ada"}', '{"_tag":"bogus"}', "not json"):
        decoded = decode_result_from_string(text)
        print(text, "->", decoded.map_or_else(repr, lambda reason: f"rejected: {reason}"))


if __name__ == "__main__":
    run(main)
