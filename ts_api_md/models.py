"""Data models for extracted class documentation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MemberRecord:
    """A public property, accessor or method of a class."""

    title: str  # Declaration text as written in the source
    secondary_type: str  # Declared type or return type, "unknown" if missing
    is_static: bool
    description: str | None = None


@dataclass(frozen=True)
class ConstructorSummary:
    """The first constructor declared directly on a class."""

    title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ClassDescription:
    """Everything rendered into a class API section."""

    title: str
    description: str | None
    constructor: ConstructorSummary
    properties: dict[str, MemberRecord] = field(default_factory=dict)
    accessors: dict[str, MemberRecord] = field(default_factory=dict)
    methods: dict[str, MemberRecord] = field(default_factory=dict)
