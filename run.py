"""Command line front-end for the route compiler.

Usage (example):
    python run.py act1.txt act2.txt --build build.json --output route.json

All documents are compiled in order against one shared route state. The
compiled routes are written as JSON; diagnostics go to the log on stderr.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from routebook import (
    initialize_route_lookup,
    initialize_route_state,
    parse_route,
    load_build_data,
    load_registry,
    RouteDiagnostic,
    WorldDataError,
)
from routebook.config import get_log_level, get_strict_default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile route documents into steps.")
    parser.add_argument("routes", nargs="+", type=Path, help="route documents, in play order")
    parser.add_argument("--build", type=Path, default=None, help="build data JSON (class + required gems)")
    parser.add_argument("--world", type=Path, default=None, help="directory with the world tables")
    parser.add_argument("--output", type=Path, default=None, help="write JSON here instead of stdout")
    parser.add_argument("--strict", action="store_true", default=get_strict_default(),
                        help="exit with status 1 when any diagnostic is produced")
    return parser


def compile_files(args: argparse.Namespace, diagnostics: List[RouteDiagnostic]) -> list:
    registry = load_registry(args.world)
    build_data = load_build_data(args.build) if args.build else None
    lookup = initialize_route_lookup(build_data, registry)
    state = initialize_route_state()
    documents = [p.read_text(encoding="utf-8") for p in args.routes]
    routes = parse_route(documents, lookup, state, diagnostics)
    return [[asdict(step) for step in route] for route in routes]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    diagnostics: List[RouteDiagnostic] = []
    try:
        payload = compile_files(args, diagnostics)
    except (WorldDataError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)

    if args.strict and diagnostics:
        print(f"{len(diagnostics)} diagnostic(s) reported", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
