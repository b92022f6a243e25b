"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

from .session import ConverterConfig, ConverterSession


LOG_LEVEL_ENV = "PHRASE_UNITS_LOG_LEVEL"


def _configure_logging() -> None:
    level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrase-units",
        description="Convert lengths, weights and temperatures, e.g. '5 km to mi'.",
    )
    parser.add_argument("phrase", nargs="*", help="phrase to convert; starts an interactive session when omitted")
    parser.add_argument("--list", action="store_true", help="list supported units and exit")
    return parser


def list_units(session: ConverterSession) -> List[str]:
    lines: List[str] = []
    for family, units in session.registry.families().items():
        lines.append(f"{family}:")
        for unit in units:
            lines.append(f"  {unit.singular} ({', '.join(unit.names[1:])})")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    _configure_logging()
    args = _build_arg_parser().parse_args(argv)
    session = ConverterSession(ConverterConfig())

    if args.list:
        print("\n".join(list_units(session)))
        return 0
    if args.phrase:
        output = session.handle(" ".join(args.phrase))
        if output is not None:
            print(output)
        return 0
    session.run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
