from __future__ import annotations

import argparse

import calchrono


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the 30-year Hijrah cycle: leap positions, year lengths, cumulative days."
    )
    p.add_argument("--cycle", type=int, default=48, help="Zero-based cycle number (default 48: AH 1441-1470).")
    args = p.parse_args(argv)

    hijrah = calchrono.HIJRAH
    base = args.cycle * hijrah.p.cycle_years

    print(f"{'pos':>3}  {'year AH':>8}  {'leap':>4}  {'days':>4}  {'before':>6}  first day (ISO)")
    total = 0
    for k, leap, length, before in hijrah.cycle_table():
        first = hijrah.date(base + k, 1, 1)
        iso = calchrono.convert(first, calchrono.ISO)
        print(
            f"{k:>3}  {base + k:>8}  {'*' if leap else '':>4}  {length:>4}  {before:>6}  "
            f"{iso.proleptic_year:04d}-{iso.month:02d}-{iso.day:02d}"
        )
        total += length

    print()
    print(f"cycle total = {total} days (expected {hijrah.p.cycle_days})")
    return 0 if total == hijrah.p.cycle_days else 1


if __name__ == "__main__":
    raise SystemExit(main())
