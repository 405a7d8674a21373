"""
YAML stream parser for formatbridge.

Parses a restricted, block-style YAML subset into one plain value per
document. Supported:

- multi-document streams separated by ``---`` lines
- ``key: value`` mappings nested by indentation
- ``- value`` sequences, indented under their key or at the key's own
  column (``key:\\n- a``)
- a sequence as the document root
- ``#`` comment lines and blank lines (ignored entirely)

Not supported: anchors/aliases, block scalars (``|``, ``>``), flow
collections, tags, multi-line strings and quoted keys. Sequence items
are scalars: ``- name: x`` yields the string ``"name: x"``, and lines
nested under an item are rejected.

Document boundaries:
  If the stream contains at least one ``---`` marker, content before
  the first marker raises InvalidDocumentStreamError. Without any
  marker, the whole input is one document. An empty document between
  two markers is dropped; the last document is always emitted, so
  empty input yields ``[{}]``.

Nesting algorithm:
  ``ParseContext`` holds a stack of open scopes, each remembering its
  indentation column and its container node. A ``key:`` line with no
  inline value leaves an empty-mapping placeholder and a pending key;
  the next content line decides whether a child scope opens (a mapping,
  or a sequence when the line is a ``-`` item) and pushes it. A dedent
  pops scopes until the line's column matches an open scope. Nothing
  else pushes or pops, so every popped scope is a child of the one
  beneath it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from formatbridge.exceptions import InvalidDocumentStreamError, MalformedStructureError
from formatbridge.nodes import MappingNode, SequenceNode, node_from_value, to_plain
from formatbridge.parsers.base import BaseParser, ParseResult
from formatbridge.parsers.scalars import coerce_scalar

logger = logging.getLogger(__name__)

DOCUMENT_MARKER = "---"
COMMENT_PREFIX = "#"


@dataclass
class Scope:
    """An open block: its indentation column and its container."""
    indent: int
    node: MappingNode | SequenceNode


@dataclass
class PendingKey:
    """A ``key:`` line whose child block has not been seen yet."""
    parent: MappingNode
    key: str
    indent: int


@dataclass
class ParseContext:
    """Mutable state for one document.

    ``root`` is created by the first content line: a sequence when that
    line is a ``-`` item, a mapping otherwise. ``scopes[0]`` is always
    the root scope.
    """
    root: MappingNode | SequenceNode | None = None
    scopes: list[Scope] = field(default_factory=list)
    pending: PendingKey | None = None

    @property
    def top(self) -> Scope:
        return self.scopes[-1]

    def is_empty(self) -> bool:
        return self.root is None or len(self.root) == 0

    def finish(self) -> Any:
        if self.root is None:
            return {}
        return to_plain(self.root)


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_item(text: str) -> bool:
    return text == "-" or text.startswith("- ")


def _error(lineno: int, line: str, message: str) -> MalformedStructureError:
    return MalformedStructureError(f"Invalid YAML on line {lineno}: {message}: {line!r}")


def _open_pending(ctx: ParseContext, indent: int, is_item: bool) -> None:
    """Resolve the pending key against the line that follows it."""
    pending = ctx.pending
    ctx.pending = None
    if is_item and indent >= pending.indent:
        sequence = SequenceNode()
        pending.parent.entries[pending.key] = sequence
        ctx.scopes.append(Scope(indent, sequence))
    elif indent > pending.indent:
        ctx.scopes.append(Scope(indent, pending.parent.entries[pending.key]))
    # otherwise the key keeps its empty-mapping placeholder


def _dedent(ctx: ParseContext, indent: int, is_item: bool) -> bool:
    """Close scopes deeper than *indent*. Returns True if any were closed."""
    popped = False
    while len(ctx.scopes) > 1 and ctx.top.indent > indent:
        ctx.scopes.pop()
        popped = True
    # A compact sequence shares its key's column; a non-item line there
    # belongs to the enclosing mapping.
    if (
        not is_item
        and len(ctx.scopes) > 1
        and isinstance(ctx.top.node, SequenceNode)
        and ctx.top.indent == indent
        and ctx.scopes[-2].indent == indent
    ):
        ctx.scopes.pop()
    return popped


def _process_line(ctx: ParseContext, lineno: int, line: str) -> None:
    indent = _indent_of(line)
    text = line.strip()
    is_item = _is_item(text)

    if ctx.root is None:
        ctx.root = SequenceNode() if is_item else MappingNode()
        ctx.scopes.append(Scope(indent, ctx.root))

    if ctx.pending is not None:
        _open_pending(ctx, indent, is_item)
    dedented = _dedent(ctx, indent, is_item)

    top = ctx.top
    if indent > top.indent:
        if dedented:
            raise _error(lineno, line, "indentation does not match any enclosing block")
        if isinstance(top.node, SequenceNode):
            raise _error(lineno, line, "content nested under a sequence item is not supported")
        raise _error(lineno, line, "unexpected indentation")
    if indent < top.indent:
        raise _error(lineno, line, "indentation does not match any enclosing block")

    if is_item:
        if not isinstance(top.node, SequenceNode):
            raise _error(lineno, line, "sequence item where a mapping entry was expected")
        top.node.items.append(node_from_value(coerce_scalar(text[2:].strip())))
        return

    if isinstance(top.node, SequenceNode):
        raise _error(lineno, line, "mapping entry inside a sequence")

    key, colon, value_text = text.partition(":")
    key = key.strip()
    if not colon:
        raise _error(lineno, line, "expected 'key: value' but found no ':'")
    if not key:
        raise _error(lineno, line, "empty mapping key")

    value_text = value_text.strip()
    if value_text:
        top.node.entries[key] = node_from_value(coerce_scalar(value_text))
    else:
        top.node.entries[key] = MappingNode()
        ctx.pending = PendingKey(parent=top.node, key=key, indent=indent)


class YamlStreamParser(BaseParser):
    """Parser for multi-document streams of the supported YAML subset."""

    format_name = "yaml"

    def parse(self, text: str) -> ParseResult:
        lines = text.split("\n")
        uses_markers = any(line.strip() == DOCUMENT_MARKER for line in lines)

        documents: list[Any] = []
        ctx: ParseContext | None = None if uses_markers else ParseContext()
        content_lines = 0

        for lineno, line in enumerate(lines, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_PREFIX):
                continue

            if stripped == DOCUMENT_MARKER:
                if ctx is not None and not ctx.is_empty():
                    documents.append(ctx.finish())
                    logger.debug("Closed document %d at line %d", len(documents), lineno)
                ctx = ParseContext()
                continue

            if ctx is None:
                raise InvalidDocumentStreamError(
                    f"Invalid YAML stream: missing '{DOCUMENT_MARKER}' document start "
                    f"marker before line {lineno}: {line!r}"
                )

            _process_line(ctx, lineno, line)
            content_lines += 1

        # With markers, the first marker has always set ctx by now.
        documents.append(ctx.finish())

        logger.info(
            "Parsed YAML stream: %d document(s), %d content line(s)",
            len(documents),
            content_lines,
        )
        return ParseResult(value=documents, format_name=self.format_name, line_count=content_lines)


def parse_yaml_stream(text: str) -> list[Any]:
    """Parse a YAML-subset stream into a list of documents."""
    return YamlStreamParser().parse(text).value
