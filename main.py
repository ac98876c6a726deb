#!/usr/bin/env python3
"""nyaa: browse torrent listings and send them to a download client."""

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path

from core.config import ConfigManager
from core.config.manager import CONFIG_DIR
from ui.app import NyaaApp

__version__ = "0.6.4"


def configure_logging(debug: bool, log_dir: Path = CONFIG_DIR) -> None:
    """Log to a rotating file when debugging; stay silent otherwise (the TUI owns stderr)."""
    if not debug:
        logging.disable(logging.CRITICAL)
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / "debug.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nyaa",
        description="nyaa: browse torrent listings from the terminal",
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="Config file (default: ~/.config/nyaa/config.yaml)"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Write a debug log to ~/.config/nyaa/debug.log"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    app = NyaaApp(config_manager=ConfigManager(args.config))
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
