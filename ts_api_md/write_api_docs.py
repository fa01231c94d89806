"""Write TypeScript class API documentation into a Markdown document.

Classes are read from a declaration file (for example ``index.d.ts``) and each
one is rendered between its ``<!-- START CLASS API: Name -->`` and
``<!-- END CLASS API: Name -->`` markers.
"""

import argparse
import logging
from pathlib import Path

from ts_api_md.load_config import DEFAULT_CONFIG_FILE, load_config
from ts_api_md.run_update import run_update

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    ap = argparse.ArgumentParser(
        description="Insert TypeScript class API docs between Markdown markers.",
    )
    ap.add_argument(
        "source",
        nargs="?",
        type=Path,
        help="TypeScript declaration file (.d.ts/.ts/.tsx)",
    )
    ap.add_argument(
        "document",
        nargs="?",
        type=Path,
        help="Markdown document containing the class API markers",
    )
    ap.add_argument(
        "classes",
        nargs="*",
        help="Class names to write (default: 'classes' from config)",
    )
    ap.add_argument(
        "--all",
        action="store_true",
        help="Also write every class that has a start marker in the document",
    )
    ap.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Render sections and report outcomes without writing the document",
    )
    ap.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: 'log_level' from config)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the documentation update."""
    args = build_parser().parse_args(argv)
    level = args.log_level or load_config(args.config)["log_level"]
    logging.basicConfig(level=str(level).upper(), format=LOG_FORMAT)
    return run_update(args)


if __name__ == "__main__":
    raise SystemExit(main())
