from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.date import Date
from .core.errors import GregcalError

log = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4,}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> Date:
    """argparse type: YYYY-MM-DD, with a leading '-' for negative years."""
    neg = s.startswith("-")
    try:
        y, m, d = map(int, s.lstrip("-").split("-"))
        return Date.ymd(-y if neg else y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}: {e}") from e


def _setup_logging(level: str | None) -> None:
    from .config import load_settings

    name = (level or load_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s  [%(levelname)s]  %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


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


def cmd_info(argv: list[str]) -> int:
    import gregcal

    p = argparse.ArgumentParser(prog="gregcal info", description="Break a date down into its calendar attributes")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD, non-negative years only (see format --date=)")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = gregcal.date_info(args.date, attributes=tuple(args.attr))
    for k, v in info.items():
        print(f"{k:<14} {v}")
    return 0


def cmd_format(argv: list[str]) -> int:
    import gregcal

    p = argparse.ArgumentParser(prog="gregcal format", description="Render a date through a template")
    p.add_argument("template", help='e.g. "{:E}, {:D} {:M} {:Y}"')
    g = p.add_mutually_exclusive_group()
    g.add_argument("--date", type=_parse_ymd, help="YYYY-MM-DD (default: today); negative years as --date=-0044-03-15")
    g.add_argument("--yd", nargs=2, type=int, metavar=("YEAR", "DAY"), help="ordinal date")
    args = p.parse_args(argv)

    if args.date is not None:
        when = args.date
    elif args.yd:
        when = Date.yd(*args.yd)
    else:
        when = gregcal.today()

    print(gregcal.format_date(when, args.template))
    return 0


def cmd_today(argv: list[str]) -> int:
    import gregcal

    p = argparse.ArgumentParser(prog="gregcal today", description="Print today's (UTC) date")
    p.add_argument("--format", dest="template", default=None, help="template (default: $GREGCAL_FORMAT)")
    args = p.parse_args(argv)

    print(gregcal.format_date(gregcal.today(), args.template))
    return 0


def cmd_tz(argv: list[str]) -> int:
    import gregcal

    p = argparse.ArgumentParser(prog="gregcal tz", description="Print the local timezone name")
    p.parse_args(argv)

    tz = gregcal.local_timezone()
    if tz is None:
        print("unknown")
        return 1
    print(tz)
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `gregcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_info(argv)

    p = argparse.ArgumentParser(prog="gregcal", description="Proleptic Gregorian date toolkit CLI.")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ... (default: $GREGCAL_LOG_LEVEL)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("info", help="Break a date down into its calendar attributes")
    sub.add_parser("format", help="Render a date through a template")
    sub.add_parser("today", help="Print today's (UTC) date")
    sub.add_parser("tz", help="Print the local timezone name")
    sub.add_parser("pretty-month", help="Print month calendars (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "weekday-frequency"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.log_level)
    log.debug("command %s, args %s", args.cmd, rest)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "format":
        return cmd_format(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "tz":
        return cmd_tz(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("gregcal.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "gregcal.diagnostics.round_trip",
            "weekday-frequency": "gregcal.diagnostics.weekday_frequency",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return _dispatch(argv)
    except GregcalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
