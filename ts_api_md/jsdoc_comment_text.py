"""Utility for extracting the description part of a JSDoc comment."""

import re

JSDOC_TAG_RE = re.compile(r"^@\w")


def is_jsdoc(comment: str) -> bool:
    """Return True for ``/** ... */`` block comments (but not ``/**/``)."""
    return comment.startswith("/**") and comment.endswith("*/") and comment != "/**/"


def jsdoc_comment_text(comment: str) -> str | None:
    """Return the free text of a JSDoc comment, without its block tags.

    Gutter asterisks are removed, everything from the first block tag
    (``@param``, ``@returns`` ...) onwards is dropped and surrounding blank
    lines are trimmed. Returns None when no text remains.
    """
    body = comment.removeprefix("/**").removesuffix("*/")
    lines: list[str] = []
    for raw_line in body.splitlines():
        line = raw_line.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        if JSDOC_TAG_RE.match(line.strip()):
            break
        lines.append(line.rstrip())
    text = "\n".join(lines).strip()
    return text or None
