"""One-shot command line checker: analyze a single password and exit."""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from dataclasses import replace
from typing import Sequence

from block_check.application.analyzer import AnalysisFailure, PasswordAnalyzer
from block_check.config import load_config

APP_NAME = "block-check"
EXIT_OK = 0
EXIT_REJECTED = 1


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Report the largest block of identical adjacent characters in a password",
    )
    parser.add_argument(
        "password",
        nargs="?",
        help="Password to check (read from stdin when omitted)",
    )
    parser.add_argument("--env-file", default=".env", help="Path to env file")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def read_candidate(*, mask_input: bool) -> str:
    if mask_input and sys.stdin.isatty():
        return getpass.getpass("Enter Password: ")
    return sys.stdin.readline().rstrip("\r\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(args.env_file)
    if args.log_level:
        config = replace(config, log_level=args.log_level.upper())

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(APP_NAME)

    try:
        analyzer = PasswordAnalyzer(config.policy)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    candidate = args.password
    if candidate is None:
        candidate = read_candidate(mask_input=config.mask_input)

    result = analyzer.analyze(candidate)
    logger.debug("Analysis finished, ok=%s", result.ok)

    if args.json:
        stream = sys.stderr if isinstance(result, AnalysisFailure) else sys.stdout
        print(json.dumps(result.to_dict()), file=stream)
        return EXIT_OK if result.ok else EXIT_REJECTED

    if isinstance(result, AnalysisFailure):
        print(f"Error: {result.error}", file=sys.stderr)
        return EXIT_REJECTED

    print(f"The largest block is {result.run_length}.")
    print(result.feedback.message)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
