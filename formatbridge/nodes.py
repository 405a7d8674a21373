"""
Document tree nodes for the YAML stream parser.

The parser builds an explicit tree instead of mutating dicts and lists
in place, so every node's kind is known while the document is still
being assembled (a ``key:`` placeholder can be promoted from an empty
mapping to a sequence once its first child line is seen).

- ScalarNode: an atomic value (str, int, float, bool, None).
- MappingNode: ordered ``str -> Node`` entries.
- SequenceNode: ordered list of nodes.

``to_plain()`` converts a finished tree into dict/list/scalar values
ready for ``json.dumps``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Scalar = Union[str, int, float, bool, None]


@dataclass
class ScalarNode:
    value: Scalar


@dataclass
class MappingNode:
    entries: dict[str, Node] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class SequenceNode:
    items: list[Node] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


Node = Union[ScalarNode, MappingNode, SequenceNode]


def node_from_value(value: Any) -> Node:
    """Wrap a coerced scalar as a node.

    The empty-object placeholder (``{}``) becomes an empty MappingNode.
    """
    if isinstance(value, dict):
        return MappingNode()
    return ScalarNode(value)


def to_plain(node: Node) -> Any:
    """Convert a node tree to plain Python values."""
    if isinstance(node, MappingNode):
        return {key: to_plain(child) for key, child in node.entries.items()}
    if isinstance(node, SequenceNode):
        return [to_plain(child) for child in node.items]
    return node.value
