from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from ganttlab.config import Settings
from ganttlab.modes import MODES, build_chart
from ganttlab.parse import MalformedLogError, NumericPolicy, read_log_file
from ganttlab.render import ChartRenderer, JsonChartRenderer
from ganttlab.series import MalformedVmIdError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ganttlab", description="Gantt charts from scheduling logs"
    )
    p.add_argument("log_file", type=Path)
    # Not restricted with `choices`: an unknown mode is a silent no-op.
    p.add_argument("mode", help=f"One of: {', '.join(MODES)}")
    p.add_argument(
        "--strict-numbers",
        action="store_true",
        help="Reject non-numeric time/priority fields instead of reading them as 0",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return p


def main(argv: list[str] | None = None, *, renderer: ChartRenderer | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ValueError as e:
        sys.stderr.write(f"ganttlab: {e}\n")
        return 1
    if args.strict_numbers:
        settings = replace(settings, numeric_policy=NumericPolicy.STRICT)

    try:
        log = read_log_file(args.log_file, numeric_policy=settings.numeric_policy)
    except MalformedLogError as e:
        sys.stderr.write(f"ganttlab: malformed log {args.log_file}: {e}\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"ganttlab: cannot read {args.log_file}: {e}\n")
        return 1

    if args.mode not in MODES:
        logger.debug("unknown mode %r; nothing to render", args.mode)
        return 0

    try:
        chart = build_chart(log, args.mode)
    except MalformedVmIdError as e:
        sys.stderr.write(f"ganttlab: {e}\n")
        return 1

    out = (renderer or JsonChartRenderer()).render(chart, settings.output_base_name)
    logger.info("wrote %s chart with %d series to %s", args.mode, len(chart.series), out)
    return 0
