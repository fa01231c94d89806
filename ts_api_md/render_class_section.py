"""Logic for rendering a class description as a Markdown API section."""

from ts_api_md.member_sort_key import member_sort_key
from ts_api_md.models import ClassDescription, MemberRecord


def md_heading(level: int, label: str) -> str:
    """Generate a Markdown ATX heading line."""
    return f"{'#' * level} {label}\n"


def md_description(description: str | None) -> str:
    """Render a description line, or a blank line when there is none."""
    return f"{description}\n" if description is not None else "\n"


def md_list_item(title: str, description: str | None) -> str:
    """Render a ``- `title`: description`` list line."""
    return f"- `{title}`: {description if description is not None else ''}\n"


def render_member_map(label: str, members: dict[str, MemberRecord]) -> str:
    """Render a sorted member list under a heading, or a blank line if empty."""
    if not members:
        return "\n"
    lines = [md_heading(4, label)]
    for name in sorted(members, key=member_sort_key):
        record = members[name]
        lines.append(md_list_item(record.title, record.description))
    return "".join(lines) + "\n"


def render_class_section(description: ClassDescription) -> str:
    """Render the full API section for one class."""
    ctor = description.constructor
    parts = [
        md_heading(3, description.title),
        md_description(description.description),
        md_heading(4, "Constructor"),
        md_list_item(ctor.title, ctor.description) if ctor.title else "\n",
        render_member_map("Properties", description.properties),
        render_member_map("Accessors", description.accessors),
        render_member_map("Methods", description.methods),
    ]
    return "".join(parts)
