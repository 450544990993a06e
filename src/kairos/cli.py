from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from pathlib import Path
from typing import Optional

from .config import ClockConfig, parse_window_mode
from .core.errors import KairosError
from .core.time import Instant, ms_to_datetime

_INT_RE = re.compile(r"^[+-]?\d+$")


def _parse_at(s: Optional[str]) -> Optional[Instant]:
    """--at accepts Unix ms or an ISO-8601 instant."""
    if s is None:
        return None
    if _INT_RE.match(s):
        return int(s)
    return s


def _iso(ms: int) -> str:
    return ms_to_datetime(ms).isoformat().replace("+00:00", "Z")


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


def cmd_now(argv: list[str]) -> int:
    import kairos

    p = argparse.ArgumentParser(prog="kairos now", description="Current (or given) instant in Kairos time")
    p.add_argument("--at", default=None, help="Unix ms or ISO-8601 instant (default: now)")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    at = _parse_at(args.at)
    mu = kairos.micro_pulse_eternal(at)
    today = kairos.pulse_today(at)
    counters = kairos.display_counters(at)
    m = kairos.moment_info(at, attributes=tuple(args.attr))
    sol, ete = counters.solar, counters.eternal

    print(f"Eternal pulse      : {mu // 1_000_000}  ({mu} micro-pulses)")
    print(f"Eternal beat:step  : {m.beat}:{m.step:02d}")
    print(f"Solar pulse today  : {today.pulse_today}  ({today.day_percent:.4f}% of day)")
    print(f"Solar beat:step    : {today.beat}:{today.step:02d}  ({today.percent_into_step:.2f}% into step)")
    print(f"Arc                : {kairos.solar_arc_name(at)}")
    print()
    print(f"Eternal  : {ete.day_name}, day {ete.day_in_month1} of {ete.month_name} "
          f"(month {ete.month1}), week {ete.week_in_month1}, year {ete.year_index}  [day #{ete.day1}]")
    print(f"Solar    : {sol.day_name}, day {sol.day_in_month1} of {sol.month_name} "
          f"(month {sol.month1}), week {sol.week_in_month1}, year {sol.year_index}  [day #{sol.day1}]")
    if m.attributes:
        print()
        for k, v in m.attributes.items():
            print(f"{k:18s} : {v}")
    return 0


def cmd_window(argv: list[str]) -> int:
    import kairos

    p = argparse.ArgumentParser(prog="kairos window", description="Active sunrise-to-sunrise window")
    p.add_argument("--at", default=None, help="Unix ms or ISO-8601 instant (default: now)")
    args = p.parse_args(argv)

    at = _parse_at(args.at)
    w = kairos.solar_window(at)
    ms = kairos.get_clock().solar_window_ms(at)
    print(f"Mode          : {kairos.clock_info()['mode']}")
    print(f"Last sunrise  : {_iso(ms['last_sunrise_ms'])}  (micro {w.last})")
    print(f"Next sunrise  : {_iso(ms['next_sunrise_ms'])}  (micro {w.next})")
    print(f"Now           : micro {w.now}  ({w.micro_into_day} into day)")
    return 0


def cmd_sunrise(argv: list[str]) -> int:
    import kairos

    p = argparse.ArgumentParser(prog="kairos sunrise", description="Show or set the sunrise offset")
    sub = p.add_subparsers(dest="action", required=True)
    sub.add_parser("show", help="Print the persisted offset (seconds after UTC midnight)")
    sub.add_parser("now", help="The sun rose now")
    p_set = sub.add_parser("set", help="Set from local wall time HH:MM[:SS[.fff]]")
    p_set.add_argument("time")
    args = p.parse_args(argv)

    if args.action == "now":
        kairos.set_sunrise_now()
    elif args.action == "set":
        if kairos.set_sunrise_from_local(args.time) is None:
            print(f"Not a valid HH:MM[:SS[.fff]] time: {args.time!r}; offset unchanged", file=sys.stderr)
            return 2

    print(f"Sunrise offset: {kairos.sunrise_offset()} s after UTC midnight")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="kairos", description="Kairos harmonic clock and calendar CLI.")
    p.add_argument("--mode", default=None, help="Window mode: daily | genesis (default: $KAIROS_WINDOW_MODE or daily)")
    p.add_argument("--state", default=None, help="JSON state file for the sunrise offset (default: $KAIROS_STATE_FILE)")
    p.add_argument("-v", "--verbose", action="count", default=0)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("now", help="Current instant in Kairos time")
    sub.add_parser("window", help="Active solar window")
    sub.add_parser("sunrise", help="Show or set the sunrise offset")
    sub.add_parser("month", help="Print Kairos month calendars (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "grid-coverage", "drift-plot"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    try:
        config = ClockConfig.from_env()
        if args.mode is not None:
            config = config.tweak(window_mode=parse_window_mode(args.mode))
        if args.state is not None:
            config = config.tweak(state_path=Path(args.state))
    except KairosError as e:
        raise SystemExit(f"kairos: {e}")

    level = logging.DEBUG if args.verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    import kairos
    kairos.configure(config)

    try:
        if args.cmd == "now":
            return cmd_now(rest)

        if args.cmd == "window":
            return cmd_window(rest)

        if args.cmd == "sunrise":
            return cmd_sunrise(rest)

        if args.cmd == "month":
            return _run_module_main("kairos.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "kairos.diagnostics.round_trip",
                "grid-coverage": "kairos.diagnostics.grid_coverage",
                "drift-plot": "kairos.diagnostics.drift_plot",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except KairosError as e:
        print(f"kairos: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
