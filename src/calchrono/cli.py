from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import Tuple

logger = logging.getLogger(__name__)

_YMD_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    m = _YMD_RE.match(s.strip())
    if not m:
        raise SystemExit(f"Expected Y-M-D (year may be negative), got '{s}'")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_date(d, attrs=()) -> None:
    import calchrono

    print(d)
    print(f"  proleptic   = {d.proleptic_year:04d}-{d.month:02d}-{d.day:02d}")
    print(f"  epoch_day   = {d.to_epoch_day()}")
    print(f"  leap_year   = {d.is_leap_year}")
    if attrs:
        for k, v in calchrono.date_attributes(d, attrs).items():
            print(f"  {k:<11} = {v}")


def cmd_date(argv: list[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono date", description="Validate and describe a date")
    p.add_argument("chronology", help="chronology name, e.g. iso or hijrah")
    p.add_argument("date", help="Y-M-D proleptic year (negative allowed)")
    p.add_argument("--era", type=int, default=None, help="era ordinal; year is then the year-of-era")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    _print_date(calchrono.date_of(args.chronology, y, m, d, era=args.era), tuple(args.attr))
    return 0


def cmd_convert(argv: list[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono convert", description="Convert a date between chronologies")
    p.add_argument("source")
    p.add_argument("target")
    p.add_argument("date", help="Y-M-D in the source chronology")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    src = calchrono.date_of(args.source, y, m, d)
    out = calchrono.convert(src, args.target)
    print(f"{src}  ->  {out}")
    return 0


def cmd_epoch_day(argv: list[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono epoch-day", description="Date fields of an epoch day")
    p.add_argument("chronology")
    p.add_argument("epoch_day", type=int)
    args = p.parse_args(argv)

    _print_date(calchrono.date_from_epoch_day(args.chronology, args.epoch_day))
    return 0


def cmd_leap(argv: list[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono leap", description="List leap years in a range")
    p.add_argument("chronology")
    p.add_argument("--from-year", type=int, default=1440)
    p.add_argument("--to-year", type=int, default=1470)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")
    years = [y for y in range(args.from_year, args.to_year + 1) if calchrono.is_leap_year(args.chronology, y)]
    print(" ".join(str(y) for y in years))
    return 0


def _parse_time_value(text: str, date_text: str | None, chronology: str):
    import calchrono

    t = calchrono.LocalTime.parse(text)
    if date_text is None:
        return t
    y, m, d = _parse_ymd(date_text)
    return calchrono.LocalDateTime(calchrono.date_of(chronology, y, m, d), t)


def cmd_add(argv: list[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono add", description="Add an amount of a time unit")
    p.add_argument("unit", help="Nanos, Micros, Millis, Seconds, Minutes, Hours or HalfDays")
    p.add_argument("amount", type=int)
    p.add_argument("time", help="HH:MM[:SS[.fffffffff]]")
    p.add_argument("--date", default=None, help="Y-M-D; makes the value a date-time (carries days)")
    p.add_argument("--chronology", default="iso")
    args = p.parse_args(argv)

    value = _parse_time_value(args.time, args.date, args.chronology)
    print(calchrono.add(value, args.amount, args.unit))
    return 0


def cmd_between(argv: list[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono between", description="Whole units between two values")
    p.add_argument("unit")
    p.add_argument("start", help="HH:MM[:SS[.fffffffff]]")
    p.add_argument("end", help="HH:MM[:SS[.fffffffff]]")
    p.add_argument("--start-date", default=None, help="Y-M-D for start (requires --end-date)")
    p.add_argument("--end-date", default=None, help="Y-M-D for end (requires --start-date)")
    p.add_argument("--chronology", default="iso")
    args = p.parse_args(argv)

    if (args.start_date is None) != (args.end_date is None):
        raise SystemExit("--start-date and --end-date go together")
    a = _parse_time_value(args.start, args.start_date, args.chronology)
    b = _parse_time_value(args.end, args.end_date, args.chronology)
    print(calchrono.between(a, b, args.unit))
    return 0


COMMANDS = {
    "date": cmd_date,
    "convert": cmd_convert,
    "epoch-day": cmd_epoch_day,
    "leap": cmd_leap,
    "add": cmd_add,
    "between": cmd_between,
}


def _dispatch(cmd: str, argv: list[str]) -> int:
    from calchrono.core.errors import CalchronoError

    logger.debug("command %s %s", cmd, argv)
    try:
        return COMMANDS[cmd](argv)
    except (CalchronoError, KeyError) as e:
        print(f"calchrono {cmd}: error: {e}", file=sys.stderr)
        return 2


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calchrono", description="ISO and Hijrah calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("date", help="Validate and describe a date")
    sub.add_parser("convert", help="Convert a date between chronologies")
    sub.add_parser("epoch-day", help="Date fields of an epoch day")
    sub.add_parser("leap", help="List leap years in a range")
    sub.add_parser("add", help="Add an amount of a time unit to a time or date-time")
    sub.add_parser("between", help="Whole units between two times or date-times")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "cycle-table", "leap-years"],
        help="Which diagnostic to run",
    )

    verbose = bool(argv) and argv[0] in ("-v", "--verbose")
    if verbose:
        argv = argv[1:]
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    # Subcommands own their parsers so negative amounts and options pass through intact.
    if argv and argv[0] in COMMANDS:
        return _dispatch(argv[0], argv[1:])

    args, rest = p.parse_known_args(argv)
    logger.debug("command %s %s", args.cmd, rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calchrono.diagnostics.round_trip",
            "cycle-table": "calchrono.diagnostics.cycle_table",
            "leap-years": "calchrono.diagnostics.leap_years",
        }
        return _run_module_main(tool_map[args.tool], rest)

    return _dispatch(args.cmd, rest)


if __name__ == "__main__":
    raise SystemExit(main())
