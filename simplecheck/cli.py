"""Command-line runner for check blocks.

Usage::

    simplecheck run <module-or-file.py> [--config FILE] [--strict] [-v]
    simplecheck list <module-or-file.py>

Importing the target registers its ``@check_block`` functions; ``run`` then
executes them in registration order. The test summary is printed when the
interpreter exits.
"""

from __future__ import annotations

import argparse
import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from simplecheck.core import log
from simplecheck.core.config import load_config
from simplecheck.core.errors import SimpleCheckError
from simplecheck.registry import get_registry, run_check_blocks
from simplecheck.report import get_aggregator


def load_target(target: str) -> ModuleType:
    """Import *target*, either a dotted module name or a path to a ``.py`` file."""
    path = Path(target)
    if path.suffix != ".py":
        return importlib.import_module(target)

    if not path.is_file():
        raise SimpleCheckError(f"No such file: {target}")
    name = path.stem
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise SimpleCheckError(f"Cannot load {target}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)
    return module


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------

def _cmd_run(args: argparse.Namespace) -> int:
    if args.config:
        load_config(args.config)
    # create the aggregator up front so the summary is printed even without checks
    aggregator = get_aggregator()
    load_target(args.target)
    run_check_blocks()
    if args.strict and not aggregator.all_passed:
        return 1
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    load_target(args.target)
    names = get_registry().names()
    for name in names:
        print(f"  {name}")
    print(f"\n{len(names)} block(s)")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simplecheck",
        description="Run registered check blocks",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug diagnostics")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("run", help="Import a target and run its check blocks")
    p.add_argument("target", help="Dotted module name or path to a .py file")
    p.add_argument("--config", default=None, help="YAML file with epsilon / precision")
    p.add_argument("--strict", action="store_true", help="Exit with status 1 when a check failed")

    p = sub.add_parser("list", help="List the check blocks a target registers")
    p.add_argument("target", help="Dotted module name or path to a .py file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry-point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log.set_level(log.DEBUG)

    dispatch = {
        "run": _cmd_run,
        "list": _cmd_list,
    }
    handler = dispatch.get(args.command or "")
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except SimpleCheckError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
