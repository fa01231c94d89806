"""Parser-neutral view of the classes declared in a source file.

The extractor only talks to these records, so any parser able to produce them
can stand in for the tree-sitter adapter in ``ts_source_tree``.
"""

from dataclasses import dataclass, field
from typing import Literal, Protocol

MemberKind = Literal["property", "accessor", "method", "constructor"]


@dataclass(frozen=True)
class MemberNode:
    """A single class member as declared in the source."""

    name: str
    kind: MemberKind
    text: str
    scope: str | None = None  # public/protected/private, None when unspecified
    is_static: bool = False
    type_text: str | None = None  # Property type or return type
    doc: str | None = None  # Description of the leading JSDoc comment

    @property
    def is_public(self) -> bool:
        """Return True if the member belongs to the public API."""
        if self.name.startswith("#"):
            return False
        return self.scope is None or self.scope == "public"


@dataclass(frozen=True)
class ClassNode:
    """A class declaration together with its members."""

    name: str
    type_parameters: list[str] = field(default_factory=list)
    base_class: str | None = None
    doc: str | None = None
    members: list[MemberNode] = field(default_factory=list)

    def members_of_kind(self, kind: MemberKind) -> list[MemberNode]:
        """Return members of one kind in declaration order."""
        return [m for m in self.members if m.kind == kind]


class SourceTree(Protocol):
    """Capabilities the extractor needs from a parsed source file."""

    def classes(self) -> list[ClassNode]:
        """Return all top-level class declarations."""
        ...

    def find_class(self, name: str) -> ClassNode | None:
        """Return the class with exactly this name, or None."""
        ...
