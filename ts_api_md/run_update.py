"""Orchestration logic for writing class API sections into a document."""

import argparse
import logging
from pathlib import Path
from typing import Any

from ts_api_md.class_markers import discover_marker_class_names
from ts_api_md.class_not_found_error import ClassNotFoundError
from ts_api_md.declaration_extractor import DeclarationExtractor
from ts_api_md.document_updater import DocumentUpdater
from ts_api_md.load_config import load_config
from ts_api_md.update_outcome import UpdateOutcome

logger = logging.getLogger(__name__)


def resolve_settings(args: argparse.Namespace) -> dict[str, Any]:
    """Merge command line arguments over the loaded configuration."""
    config = load_config(args.config)
    if args.source:
        config["source"] = str(args.source)
    if args.document:
        config["document"] = str(args.document)
    if args.classes:
        config["classes"] = list(args.classes)
    if args.all:
        config["discover_classes"] = True
    if args.log_level:
        config["log_level"] = args.log_level
    return config


def class_names_to_write(config: dict[str, Any], document: Path) -> list[str]:
    """Return configured class names, plus discovered ones when enabled."""
    names = [str(n) for n in config.get("classes") or []]
    if config.get("discover_classes"):
        text = document.read_text(encoding="utf-8")
        for name in discover_marker_class_names(text):
            if name not in names:
                names.append(name)
    return names


def run_update(args: argparse.Namespace) -> int:
    """Execute the update for every requested class, one after another."""
    config = resolve_settings(args)
    if not config.get("source"):
        msg = "No TypeScript source given (argument or 'source' in config)"
        raise SystemExit(msg)
    if not config.get("document"):
        msg = "No Markdown document given (argument or 'document' in config)"
        raise SystemExit(msg)

    source = Path(config["source"])
    document = Path(config["document"])
    for p in (source, document):
        if not p.is_file():
            msg = f"File not found: {p}"
            raise SystemExit(msg)

    class_names = class_names_to_write(config, document)
    if not class_names:
        print(f"No classes to write into {document}")
        return 0

    extractor = DeclarationExtractor.from_path(source)
    known = set(extractor.class_names())
    unknown = [name for name in class_names if name not in known]
    if unknown:
        msg = f"Classes not found in {source}: {', '.join(unknown)}"
        raise SystemExit(msg)

    updater = DocumentUpdater(extractor)
    outcomes: list[UpdateOutcome] = []
    for name in class_names:
        try:
            outcomes.append(
                updater.update_class_section(document, name, dry_run=args.dry_run)
            )
        except ClassNotFoundError as exc:
            raise SystemExit(str(exc)) from exc

    failed = [o.class_name for o in outcomes if not o.ok]
    written = len(outcomes) - len(failed)
    print(f"Wrote {written}/{len(outcomes)} class sections into: {document}")
    if failed:
        print(f"Markers not found for: {', '.join(failed)}")
        return 1
    return 0
