"""Utilities for locating class API marker comments in a document."""

import re

START_MARKER = "<!-- START CLASS API: {name} -->"
END_MARKER = "<!-- END CLASS API: {name} -->"

START_MARKER_RE = re.compile(r"<!-- START CLASS API: (.+?) -->")


def class_markers(class_name: str) -> tuple[str, str]:
    """Return the literal start and end markers for a class."""
    return START_MARKER.format(name=class_name), END_MARKER.format(name=class_name)


def splice_between_markers(
    text: str, class_name: str, content: str, newline: str = "\n"
) -> str | None:
    """Replace everything between a class's markers with a newline and content.

    Both markers are kept. The end marker must follow the start marker.
    Line breaks of the inserted text use ``newline``; text outside the markers
    is left as is. Returns None when either marker is missing.
    """
    start_marker, end_marker = class_markers(class_name)
    start = text.find(start_marker)
    if start == -1:
        return None
    inner_start = start + len(start_marker)
    end = text.find(end_marker, inner_start)
    if end == -1:
        return None
    inserted = newline + content.replace("\n", newline)
    return text[:inner_start] + inserted + text[end:]


def discover_marker_class_names(text: str) -> list[str]:
    """Return class names of all start markers, in document order."""
    names: list[str] = []
    for match in START_MARKER_RE.finditer(text):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names
