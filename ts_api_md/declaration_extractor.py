"""Extraction of class documentation from a parsed source tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ts_api_md.class_not_found_error import ClassNotFoundError
from ts_api_md.class_registry import ClassRegistry
from ts_api_md.models import ClassDescription, ConstructorSummary, MemberRecord
from ts_api_md.ts_source_tree import TsSourceTree

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from ts_api_md.source_tree import ClassNode, MemberKind, MemberNode, SourceTree

logger = logging.getLogger(__name__)

UNKNOWN_TYPE = "unknown"


def typed_class_name(node: ClassNode) -> str:
    """Return the class name with its type parameters, e.g. ``Map<K, V>``."""
    if node.type_parameters:
        return f"{node.name}<{', '.join(node.type_parameters)}>"
    return node.name


def member_record(member: MemberNode) -> MemberRecord:
    """Convert a declared member into its documentation record."""
    return MemberRecord(
        title=member.text,
        secondary_type=member.type_text or UNKNOWN_TYPE,
        is_static=member.is_static,
        description=member.doc,
    )


class DeclarationExtractor:
    """Builds ``ClassDescription`` objects for the classes of one source.

    The source tree is loaded on first use and every description is cached in
    the extractor's own registry.
    """

    def __init__(
        self,
        load_source: Callable[[], SourceTree],
        registry: ClassRegistry | None = None,
        origin: str | None = None,
    ) -> None:
        """Initialize the extractor with a source loader and a registry."""
        self._load_source = load_source
        self._source: SourceTree | None = None
        self.registry = registry if registry is not None else ClassRegistry()
        self.origin = origin

    @classmethod
    def from_path(cls, path: str | Path) -> DeclarationExtractor:
        """Create an extractor for a TypeScript file, parsed lazily."""
        p = Path(path)
        return cls(lambda: TsSourceTree.from_path(p), origin=str(p))

    @property
    def source(self) -> SourceTree:
        """Return the parsed source tree, loading it on first access."""
        if self._source is None:
            logger.debug("Loading source %s", self.origin or "<memory>")
            self._source = self._load_source()
        return self._source

    def class_names(self) -> list[str]:
        """Return the names of all classes declared in the source."""
        return [c.name for c in self.source.classes()]

    def get_class_description(self, class_name: str) -> ClassDescription:
        """Return the description of a class, resolving it on first request."""
        cached = self.registry.get(class_name)
        if cached is not None:
            return cached

        node = self.source.find_class(class_name)
        if node is None:
            raise ClassNotFoundError(class_name, self.origin)

        description = self._describe(node)
        self.registry.put(class_name, description)
        return description

    def _describe(self, node: ClassNode) -> ClassDescription:
        constructors = node.members_of_kind("constructor")
        ctor = constructors[0] if constructors else None
        return ClassDescription(
            title=typed_class_name(node),
            description=node.doc,
            constructor=ConstructorSummary(
                title=ctor.text if ctor else None,
                description=ctor.doc if ctor else None,
            ),
            properties=self._public_members(node, "property"),
            accessors=self._public_members(node, "accessor"),
            methods=self._public_members(node, "method"),
        )

    def _public_members(
        self, node: ClassNode, kind: MemberKind
    ) -> dict[str, MemberRecord]:
        """Merge public members of a class and its ancestors, nearest first."""
        merged: dict[str, MemberRecord] = {}
        for cls_node in self._ancestry(node):
            for member in cls_node.members_of_kind(kind):
                if member.is_public and member.name not in merged:
                    merged[member.name] = member_record(member)
        return merged

    def _ancestry(self, node: ClassNode) -> Iterator[ClassNode]:
        """Yield a class followed by its base classes declared in the source."""
        seen: set[str] = set()
        current: ClassNode | None = node
        while current is not None and current.name not in seen:
            seen.add(current.name)
            yield current
            if current.base_class is None:
                return
            base = self.source.find_class(current.base_class)
            if base is None:
                logger.debug(
                    "Base class %s of %s is not declared in the source",
                    current.base_class,
                    current.name,
                )
            current = base
