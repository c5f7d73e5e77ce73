from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import load_config
from .engine import run_check
from .errors import TimelockUserError
from .render import NO_RESULTS_MESSAGE, render_json, render_table
from .run_context import ExecutionTimer, RunContext
from .vcs import VcsFactory
from .version import tool_version

OUTPUT_FORMATS = ("table", "json")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="timelock",
        description="Report version-controlled files left unchanged since a given date",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--debug",
        action="store_true",
        help="debug logging on stderr (same as TIMELOCK_DEBUG=1)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_check = sub.add_parser("check", help="Checks for files unchanged since a specified date.")
    sp_check.add_argument(
        "path",
        nargs="?",
        default=".",
        help="the directory path to check",
    )
    sp_check.add_argument(
        "-c", "--config",
        help="path to the configuration file",
    )
    sp_check.add_argument(
        "-o", "--output-format",
        choices=OUTPUT_FORMATS,
        default="table",
        help="output format",
    )
    return p


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug or os.environ.get("TIMELOCK_DEBUG") else logging.WARNING
    root_logger = logging.getLogger("timelock")
    root_logger.setLevel(level)
    if not root_logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root_logger.addHandler(h)


def _cmd_check(ns: argparse.Namespace, factory: VcsFactory, timer: ExecutionTimer) -> int:
    directory = Path(ns.path).resolve()
    cfg = load_config(ns.config)
    vcs = factory.create(cfg.vcs, directory)
    ctx = RunContext(root=directory, config=cfg, vcs=vcs, timer=timer)

    rows = run_check(ctx)

    if not rows:
        sys.stdout.write(NO_RESULTS_MESSAGE + "\n")
    elif ns.output_format == "json":
        sys.stdout.write(render_json(rows))
    else:
        sys.stdout.write(render_table(rows))

    if ns.output_format != "json":
        sys.stdout.write(f"Execution time: {ctx.timer.elapsed():.2f} seconds\n")
    return 0


def main(argv: list[str] | None = None, factory: Optional[VcsFactory] = None) -> int:
    timer = ExecutionTimer()
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.debug)

    try:
        if ns.cmd == "check":
            return _cmd_check(ns, factory or VcsFactory(), timer)
    except TimelockUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 1

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
