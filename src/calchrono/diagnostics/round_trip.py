from __future__ import annotations

import argparse
import random
from typing import List

import calchrono


def parse_chronologies(s: str) -> List[str]:
    # "iso,hijrah" -> ["iso", "hijrah"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    name: str,
    N: int,
    start: int,
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """epoch day -> fields -> epoch day, and fields -> epoch day -> fields."""
    random.seed(seed)
    chrono = calchrono.get_chronology(name)
    failures = 0

    for _ in range(N):
        n0 = random.randint(start, end)
        d = chrono.date_from_epoch_day(n0)
        n1 = d.to_epoch_day()
        back = chrono.date(d.proleptic_year, d.month, d.day)
        if n1 != n0 or back != d:
            failures += 1
            print("\nFAIL")
            print("chronology:", name)
            print("epoch_day:", n0)
            print("fields:", (d.proleptic_year, d.month, d.day))
            print("epoch_day back:", n1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: epoch day -> fields -> epoch day.")
    p.add_argument("--chronologies", type=str, default="iso,hijrah", help="Comma-separated chronology list.")
    p.add_argument("--N", type=int, default=20000, help="Trials per chronology.")
    p.add_argument("--start", type=int, default=-3_000_000, help="First epoch day.")
    p.add_argument("--end", type=int, default=3_000_000, help="Last epoch day.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per chronology.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for name in parse_chronologies(args.chronologies):
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(
            name, N=args.N, start=args.start, end=args.end, seed=args.seed, max_failures=args.max_failures
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
