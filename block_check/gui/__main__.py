"""CLI entrypoint for GUI host runtime."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from block_check.config import load_config
from block_check.gui.host import GuiHost


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the password checker GUI host")
    parser.add_argument("--env-file", default=".env", help="Path to env file")
    parser.add_argument("--adapter", help="GUI adapter name (terminal or jsonl)")
    parser.add_argument(
        "--show-input",
        action="store_true",
        help="Echo typed passwords instead of masking them",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_config(args.env_file)

    if args.adapter:
        config = replace(config, adapter_name=args.adapter)
    if args.show_input:
        config = replace(config, mask_input=False)
    if args.log_level:
        config = replace(config, log_level=args.log_level.upper())

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        host = GuiHost(config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    try:
        host.start()
    except KeyboardInterrupt:
        pass
    finally:
        host.stop()


if __name__ == "__main__":
    main()
