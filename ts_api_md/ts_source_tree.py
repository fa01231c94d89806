"""TypeScript source adapter built on tree-sitter.

Parses declaration files (``.d.ts``), plain ``.ts`` and ``.tsx`` sources and
exposes their top-level classes as ``ClassNode`` records.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import tree_sitter as ts
import tree_sitter_typescript as tsts

from ts_api_md.jsdoc_comment_text import is_jsdoc, jsdoc_comment_text
from ts_api_md.source_tree import ClassNode, MemberKind, MemberNode

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

TS_LANGUAGE = ts.Language(tsts.language_typescript())
TSX_LANGUAGE = ts.Language(tsts.language_tsx())

CLASS_NODE_TYPES = {"class_declaration", "abstract_class_declaration"}
# `declare class ...` and `export class ...` wrap the class node
WRAPPER_NODE_TYPES = {"ambient_declaration", "export_statement"}
METHOD_NODE_TYPES = {
    "method_definition",
    "method_signature",
    "abstract_method_signature",
}
FIELD_NODE_TYPES = {"public_field_definition"}
# Nodes that may sit between a declaration and its doc comment
LEADING_TRIVIA_TYPES = {"comment", "decorator"}


def _text(node: ts.Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def _has_token(node: ts.Node, *tokens: str) -> bool:
    return any(child.type in tokens for child in node.children)


def _annotation_text(node: ts.Node | None) -> str | None:
    """Return the type of a ``: T`` annotation without the colon."""
    text = _text(node).strip()
    if text.startswith(":"):
        text = text[1:].strip()
    return text or None


def _leading_doc(node: ts.Node) -> str | None:
    """Return the description of the first JSDoc comment right before a node."""
    comments: list[str] = []
    sibling = node.prev_sibling
    while sibling is not None and sibling.type in LEADING_TRIVIA_TYPES:
        if sibling.type == "comment":
            comments.append(_text(sibling))
        sibling = sibling.prev_sibling
    for comment in reversed(comments):
        if is_jsdoc(comment):
            return jsdoc_comment_text(comment)
    return None


def _iter_classes(
    parent: ts.Node, anchor: ts.Node | None = None
) -> Iterator[tuple[ts.Node, ts.Node]]:
    """Yield (class node, node carrying its doc comment) pairs."""
    for child in parent.named_children:
        if child.type in CLASS_NODE_TYPES:
            yield child, anchor or child
        elif child.type in WRAPPER_NODE_TYPES:
            yield from _iter_classes(child, anchor or child)


def _base_class_name(class_node: ts.Node) -> str | None:
    for heritage in class_node.named_children:
        if heritage.type != "class_heritage":
            continue
        for clause in heritage.named_children:
            if clause.type == "extends_clause":
                value = _text(clause.child_by_field_name("value"))
                # `extends ns.Base<T>` resolves against the local `Base`
                value = value.split("<", 1)[0].strip()
                return value.rsplit(".", 1)[-1] or None
    return None


def _type_parameters(class_node: ts.Node) -> list[str]:
    params = class_node.child_by_field_name("type_parameters")
    if params is None:
        return []
    return [_text(p) for p in params.named_children if p.type == "type_parameter"]


def _declaration_text(node: ts.Node) -> str:
    text = _text(node)
    # Signatures and fields own their terminating semicolon
    if node.type != "method_definition":
        nxt = node.next_sibling
        if nxt is not None and nxt.type == ";":
            text += ";"
    return text


def _scope(node: ts.Node) -> str | None:
    for child in node.named_children:
        if child.type == "accessibility_modifier":
            return _text(child)
    return None


def _member(node: ts.Node) -> MemberNode | None:
    name = _text(node.child_by_field_name("name"))
    if not name:
        return None

    kind: MemberKind
    if node.type in FIELD_NODE_TYPES:
        kind = "property"
        type_node = node.child_by_field_name("type")
    elif node.type in METHOD_NODE_TYPES:
        if _has_token(node, "set"):
            return None
        if name == "constructor":
            kind = "constructor"
        elif _has_token(node, "get", "static get"):
            kind = "accessor"
        else:
            kind = "method"
        type_node = node.child_by_field_name("return_type")
    else:
        return None

    return MemberNode(
        name=name,
        kind=kind,
        text=_declaration_text(node),
        scope=_scope(node),
        is_static=_has_token(node, "static", "static get"),
        type_text=_annotation_text(type_node),
        doc=_leading_doc(node),
    )


def _without_overloads(
    declared: list[tuple[ts.Node, MemberNode]],
) -> list[MemberNode]:
    """Drop overload signatures of methods that have an implementation."""
    implemented = {
        (m.name, m.is_static)
        for node, m in declared
        if node.type == "method_definition" and m.kind in ("method", "constructor")
    }
    return [
        m
        for node, m in declared
        if node.type != "method_signature"
        or m.kind not in ("method", "constructor")
        or (m.name, m.is_static) not in implemented
    ]


def _class(class_node: ts.Node, anchor: ts.Node) -> ClassNode:
    declared: list[tuple[ts.Node, MemberNode]] = []
    body = class_node.child_by_field_name("body")
    if body is not None:
        for child in body.named_children:
            member = _member(child)
            if member is not None:
                declared.append((child, member))
    members = _without_overloads(declared)
    return ClassNode(
        name=_text(class_node.child_by_field_name("name")),
        type_parameters=_type_parameters(class_node),
        base_class=_base_class_name(class_node),
        doc=_leading_doc(anchor),
        members=members,
    )


class TsSourceTree:
    """Top-level classes of one parsed TypeScript source."""

    def __init__(self, classes: list[ClassNode], origin: str | None = None) -> None:
        """Initialize the tree from already converted class records."""
        self._classes = classes
        self._by_name: dict[str, ClassNode] = {}
        for c in classes:
            self._by_name.setdefault(c.name, c)
        self.origin = origin

    @classmethod
    def from_text(
        cls, text: str, *, tsx: bool = False, origin: str | None = None
    ) -> TsSourceTree:
        """Parse TypeScript source text."""
        parser = ts.Parser(TSX_LANGUAGE if tsx else TS_LANGUAGE)
        tree = parser.parse(text.encode("utf-8"))
        if tree.root_node.has_error:
            logger.warning(
                "Syntax errors in %s; output may be incomplete", origin or "<text>"
            )
        classes = [
            _class(node, anchor) for node, anchor in _iter_classes(tree.root_node)
        ]
        logger.debug("Parsed %d classes from %s", len(classes), origin or "<text>")
        return cls(classes, origin=origin)

    @classmethod
    def from_path(cls, path: str | Path) -> TsSourceTree:
        """Read and parse a TypeScript file."""
        p = Path(path)
        return cls.from_text(
            p.read_text(encoding="utf-8"),
            tsx=p.suffix.lower() == ".tsx",
            origin=str(p),
        )

    def classes(self) -> list[ClassNode]:
        """Return all top-level class declarations in source order."""
        return list(self._classes)

    def find_class(self, name: str) -> ClassNode | None:
        """Return the first class declared with exactly this name."""
        return self._by_name.get(name)
