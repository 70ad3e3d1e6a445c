#!/usr/bin/env python3
"""
tplan: edit a todo.txt file in a full-screen terminal UI.

Thin facade: argument parsing, logging setup, error reporting.
"""

import argparse
import logging
import os
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError

from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from infrastructure.file_repository import TodoFileError

from .tui_app import cmd_tui, TodoTUI
from .tui_themes import THEMES, DEFAULT_THEME

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    return build_cli_parser(themes=THEMES, default_theme=DEFAULT_THEME)


def configure_logging(log_file) -> None:
    """Log to a file only; the full-screen UI owns stdout/stderr."""
    if not log_file:
        return
    logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("tplan"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    configure_logging(args.log_file or os.environ.get("TPLAN_LOG_FILE"))
    try:
        return cmd_tui(args)
    except TodoFileError as exc:
        logging.getLogger("tplan").error("%s", exc)
        print(f"tplan: {exc}", file=sys.stderr)
        return 1


__all__ = ["main", "build_parser", "configure_logging", "cmd_tui", "TodoTUI", "THEMES", "DEFAULT_THEME"]


if __name__ == "__main__":
    sys.exit(main())
