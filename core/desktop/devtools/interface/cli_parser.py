"""CLI parser construction for the tplan TUI."""

import argparse
from typing import Any, Mapping


def build_parser(themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tplan",
        description="tplan: full-screen editor for a plain-text todo file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "keys: j/k move · space done · e edit · i/a insert/append · x delete · q quit\n"
            "file: --file > $TPLAN_FILE > ~/.tplan_config.yaml 'file' > ~/Documents/todo.txt"
        ),
    )
    parser.add_argument("-f", "--file", metavar="FILE", help="todo.txt file to open")
    parser.add_argument("--theme", choices=list(themes.keys()), default=None, help=f"palette (default: {default_theme})")
    parser.add_argument("--log-file", metavar="PATH", help="write debug log to PATH (also $TPLAN_LOG_FILE)")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser
