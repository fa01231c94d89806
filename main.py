"""Main orchestration script for writing TypeScript class API docs into Markdown."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the API documentation update configured in ts_api_md.yml."""
    parser = argparse.ArgumentParser(
        description="Write class API sections into the configured Markdown document."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before writing documentation",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render sections and report outcomes without writing the document",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with documentation update.\n")

    print("--- Writing class API sections ---")
    cmd: list[str | Path] = [
        sys.executable,
        "-m",
        "ts_api_md.write_api_docs",
        "--all",
    ]
    if args.dry_run:
        cmd.append("--dry-run")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)


if __name__ == "__main__":
    main()
