"""Writes rendered class API sections into Markdown documents."""

import logging
from pathlib import Path

from ts_api_md.class_markers import splice_between_markers
from ts_api_md.declaration_extractor import DeclarationExtractor
from ts_api_md.render_class_section import render_class_section
from ts_api_md.update_outcome import UpdateOutcome, UpdateStatus

logger = logging.getLogger(__name__)


class DocumentUpdater:
    """Replaces the marked class sections of a document with fresh API docs.

    Each call reads the document once and writes it at most once. Calls for
    the same document must not overlap.
    """

    def __init__(self, extractor: DeclarationExtractor) -> None:
        """Initialize the updater with the extractor providing class data."""
        self.extractor = extractor

    def render(self, class_name: str) -> str:
        """Render the Markdown section for a class."""
        return render_class_section(self.extractor.get_class_description(class_name))

    def update_class_section(
        self, file_path: str | Path, class_name: str, *, dry_run: bool = False
    ) -> UpdateOutcome:
        """Rewrite the section between the class markers of a document."""
        path = Path(file_path)
        content = self.render(class_name)

        # Keep the document's own line endings
        with open(path, encoding="utf-8", newline="") as f:
            data = f.read()
        newline = "\r\n" if "\r\n" in data else "\n"
        updated = splice_between_markers(data, class_name, content, newline)
        if updated is None:
            logger.error(
                "Start and/or end markers not found for %s in %s", class_name, path
            )
            return UpdateOutcome(class_name, UpdateStatus.MARKERS_NOT_FOUND, path)

        if dry_run:
            logger.info("Dry run: not writing content for %s", class_name)
            logger.debug("Rendered section for %s:\n%s", class_name, content)
        else:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(updated)
            logger.info("Content for %s inserted successfully.", class_name)
        return UpdateOutcome(class_name, UpdateStatus.UPDATED, path)
