"""Generic YAML node tree: document, mapping, sequence and scalar nodes.

Mappings keep their entries as a flat alternating key/value sequence in
source order, so ``children[0]`` is the first key and ``children[1]`` its
value.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from emojigate.models.errors import SourceSpan, StructureError

PAIR_SIZE = 2


class NodeKind(StrEnum):
    DOCUMENT = "document"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


@dataclass(frozen=True)
class YamlNode:
    """A node in the parsed YAML tree."""

    kind: NodeKind
    value: str | None = None
    children: tuple[YamlNode, ...] = ()
    span: SourceSpan | None = None

    # -- constructors --------------------------------------------------------

    @classmethod
    def document(cls, *children: YamlNode) -> YamlNode:
        return cls(NodeKind.DOCUMENT, children=children)

    @classmethod
    def mapping(cls, *children: YamlNode, span: SourceSpan | None = None) -> YamlNode:
        return cls(NodeKind.MAPPING, children=children, span=span)

    @classmethod
    def sequence(cls, *children: YamlNode, span: SourceSpan | None = None) -> YamlNode:
        return cls(NodeKind.SEQUENCE, children=children, span=span)

    @classmethod
    def scalar(cls, value: str, span: SourceSpan | None = None) -> YamlNode:
        return cls(NodeKind.SCALAR, value=value, span=span)

    # -- queries -------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        """True for a document with no content (empty or comment-only input)."""
        return self.kind is NodeKind.DOCUMENT and not self.children

    @property
    def text(self) -> str:
        """Scalar value, or ``""`` for non-scalar nodes."""
        if self.kind is NodeKind.SCALAR and self.value is not None:
            return self.value
        return ""


def iter_pairs(mapping: YamlNode, path: str) -> Iterator[tuple[YamlNode, YamlNode]]:
    """Yield ``(key, value)`` pairs of a mapping node in source order.

    Raises ``StructureError`` when the node is not a mapping or its flat
    child list has odd length.
    """
    if mapping.kind is not NodeKind.MAPPING:
        raise StructureError(f"'{path}' must be a mapping", path=path, span=mapping.span)
    children = mapping.children
    if len(children) % PAIR_SIZE != 0:
        raise StructureError(
            f"'{path}' has a key without a value; every key must have configuration set",
            path=path,
            span=mapping.span,
        )
    for i in range(0, len(children), PAIR_SIZE):
        yield children[i], children[i + 1]


def find_value(mapping: YamlNode, key: str, path: str) -> YamlNode | None:
    """Return the value of the first scalar key equal to *key*, or ``None``."""
    for key_node, value_node in iter_pairs(mapping, path):
        if key_node.kind is NodeKind.SCALAR and key_node.value == key:
            return value_node
    return None
