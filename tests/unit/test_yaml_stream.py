"""
Unit tests for the YAML stream parser (formatbridge.parsers.yaml_stream).

Covers document boundaries, indentation-driven nesting, sequences
(indented and compact), placeholders, and every structural error.
"""

from __future__ import annotations

import pytest

from formatbridge.exceptions import InvalidDocumentStreamError, MalformedStructureError
from formatbridge.parsers.yaml_stream import YamlStreamParser, parse_yaml_stream


# ---------------------------------------------------------------------------
# Document boundaries
# ---------------------------------------------------------------------------

class TestDocuments:
    """Tests for '---' handling and the single-document fallback."""

    def test_single_document_without_marker(self):
        assert parse_yaml_stream("a: 1\nb: true\nc: null") == [{"a": 1, "b": True, "c": None}]

    def test_single_document_with_marker(self):
        assert parse_yaml_stream("---\na: 1\n") == [{"a": 1}]

    def test_two_documents_are_independent(self):
        docs = parse_yaml_stream("---\na: 1\nshared: x\n---\nb: 2\n")
        assert docs == [{"a": 1, "shared": "x"}, {"b": 2}]
        assert "a" not in docs[1]

    def test_multi_document_sample(self, multi_doc_yaml: str):
        docs = parse_yaml_stream(multi_doc_yaml)
        assert len(docs) == 2
        assert docs[0]["company"] == "spacelift"
        assert docs[0]["domain"] == ["devops", "devsecops"]
        assert docs[0]["published"] is True
        assert docs[1]["xmas-fifth-day"]["partridges"] == {
            "count": 1,
            "location": '"a pear tree"',
        }
        assert docs[1]["xmas-fifth-day"]["turtle-doves"] == "two"
        assert "company" not in docs[1]

    def test_content_before_first_marker_raises(self):
        with pytest.raises(InvalidDocumentStreamError, match="missing '---'"):
            parse_yaml_stream("a: 1\n---\nb: 2\n")

    def test_comments_and_blanks_before_marker_are_fine(self):
        assert parse_yaml_stream("# header\n\n---\na: 1\n") == [{"a": 1}]

    def test_empty_document_between_markers_is_dropped(self):
        assert parse_yaml_stream("---\n---\na: 1\n") == [{"a": 1}]

    def test_trailing_marker_emits_empty_last_document(self):
        assert parse_yaml_stream("---\na: 1\n---\n") == [{"a": 1}, {}]

    def test_empty_input_yields_one_empty_document(self):
        assert parse_yaml_stream("") == [{}]

    def test_indented_marker_is_still_a_marker(self):
        assert parse_yaml_stream("---\na: 1\n  ---\nb: 2") == [{"a": 1}, {"b": 2}]

    def test_crlf_line_endings(self):
        assert parse_yaml_stream("---\r\na: 1\r\nb:\r\n  c: x\r\n") == [{"a": 1, "b": {"c": "x"}}]


# ---------------------------------------------------------------------------
# Mappings and nesting
# ---------------------------------------------------------------------------

class TestMappings:
    """Tests for key: value lines and nested mappings."""

    def test_nested_mapping(self):
        text = "server:\n  name: main\n  port: 80\nenv: prod\n"
        assert parse_yaml_stream(text) == [{"server": {"name": "main", "port": 80}, "env": "prod"}]

    def test_deep_nesting_and_multi_level_dedent(self):
        text = "a:\n  b:\n    c:\n      d: 1\ne: 2\n"
        assert parse_yaml_stream(text) == [{"a": {"b": {"c": {"d": 1}}}, "e": 2}]

    def test_dedent_by_one_level(self):
        text = "a:\n  b:\n    c: 1\n  d: 2\n"
        assert parse_yaml_stream(text) == [{"a": {"b": {"c": 1}, "d": 2}}]

    def test_four_space_indentation(self):
        text = "a:\n    b: 1\n    c:\n        d: 2\ne: 3\n"
        assert parse_yaml_stream(text) == [{"a": {"b": 1, "c": {"d": 2}}, "e": 3}]

    def test_key_without_children_is_empty_object(self):
        assert parse_yaml_stream("a:\nb: 1\n") == [{"a": {}, "b": 1}]

    def test_key_without_children_at_end(self):
        assert parse_yaml_stream("a: 1\nb:\n") == [{"a": 1, "b": {}}]

    def test_value_split_on_first_colon(self):
        assert parse_yaml_stream("url: http://example.com:8080\n") == [
            {"url": "http://example.com:8080"}
        ]

    def test_duplicate_key_last_wins(self):
        assert parse_yaml_stream("a: 1\na: 2\n") == [{"a": 2}]

    def test_key_order_is_preserved(self):
        (doc,) = parse_yaml_stream("z: 1\na: 2\nm: 3\n")
        assert list(doc) == ["z", "a", "m"]

    def test_comment_lines_inside_nested_block(self):
        text = "a:\n  # note\n  b: 1\n# top-level note\nc: 2\n"
        assert parse_yaml_stream(text) == [{"a": {"b": 1}, "c": 2}]

    def test_whole_document_indented(self):
        assert parse_yaml_stream("  a: 1\n  b: 2\n") == [{"a": 1, "b": 2}]


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------

class TestSequences:
    """Tests for '- item' lines."""

    def test_indented_sequence(self):
        text = "langs:\n  - JavaScript\n  - TypeScript\nnext: 1\n"
        assert parse_yaml_stream(text) == [{"langs": ["JavaScript", "TypeScript"], "next": 1}]

    def test_compact_sequence_at_key_column(self):
        text = "langs:\n- a\n- b\nnext: 1\n"
        assert parse_yaml_stream(text) == [{"langs": ["a", "b"], "next": 1}]

    def test_sequence_items_are_coerced(self):
        text = "items:\n  - 1\n  - true\n  - null\n  - x\n"
        assert parse_yaml_stream(text) == [{"items": [1, True, None, "x"]}]

    def test_item_with_colon_stays_a_string(self):
        text = "ports:\n  - http: 80\n  - ssh: 22\n"
        assert parse_yaml_stream(text) == [{"ports": ["http: 80", "ssh: 22"]}]

    def test_bare_dash_is_empty_object_item(self):
        assert parse_yaml_stream("items:\n  -\n  - a\n") == [{"items": [{}, "a"]}]

    def test_sequence_inside_nested_mapping(self):
        text = "api:\n  methods:\n    - GET\n    - POST\n  rate_limit: 500\nz: 0\n"
        assert parse_yaml_stream(text) == [
            {"api": {"methods": ["GET", "POST"], "rate_limit": 500}, "z": 0}
        ]

    def test_compact_sequence_inside_nested_mapping(self):
        text = "a:\n  b:\n  - x\n  c: 1\n"
        assert parse_yaml_stream(text) == [{"a": {"b": ["x"], "c": 1}}]

    def test_sequence_as_document_root(self):
        assert parse_yaml_stream("---\n- a\n- 2\n") == [["a", 2]]

    def test_sequences_in_separate_documents_do_not_leak(self):
        docs = parse_yaml_stream("---\nx:\n  - 1\n---\ny:\n  - 2\n")
        assert docs == [{"x": [1]}, {"y": [2]}]


# ---------------------------------------------------------------------------
# Structural errors
# ---------------------------------------------------------------------------

class TestErrors:
    """Malformed input raises MalformedStructureError with the line number."""

    def test_key_line_without_colon(self):
        with pytest.raises(MalformedStructureError, match="line 2.*no ':'"):
            parse_yaml_stream("a: 1\njust text\n")

    def test_empty_key(self):
        with pytest.raises(MalformedStructureError, match="empty mapping key"):
            parse_yaml_stream(": value\n")

    def test_unexpected_indentation(self):
        with pytest.raises(MalformedStructureError, match="line 2.*unexpected indentation"):
            parse_yaml_stream("a: 1\n  b: 2\n")

    def test_dedent_to_unknown_column(self):
        with pytest.raises(MalformedStructureError, match="line 3.*does not match"):
            parse_yaml_stream("a:\n    b: 1\n  c: 2\n")

    def test_content_nested_under_sequence_item(self):
        text = "dbs:\n  - name: postgres\n    type: SQL\n"
        with pytest.raises(MalformedStructureError, match="line 3.*nested under a sequence item"):
            parse_yaml_stream(text)

    def test_mapping_entry_inside_indented_sequence(self):
        with pytest.raises(MalformedStructureError, match="mapping entry inside a sequence"):
            parse_yaml_stream("a:\n  - x\n  b: 1\n")

    def test_item_in_mapping(self):
        with pytest.raises(MalformedStructureError, match="sequence item where a mapping"):
            parse_yaml_stream("a: 1\n- x\n")

    def test_mapping_entry_after_root_sequence(self):
        with pytest.raises(MalformedStructureError, match="mapping entry inside a sequence"):
            parse_yaml_stream("- a\nb: 1\n")


# ---------------------------------------------------------------------------
# ParseResult
# ---------------------------------------------------------------------------

class TestParseResult:

    def test_result_fields(self):
        result = YamlStreamParser().parse("---\n# c\na: 1\n\nb:\n  - x\n")
        assert result.format_name == "yaml"
        assert result.line_count == 3
        assert result.value == [{"a": 1, "b": ["x"]}]

    def test_parser_is_reusable(self):
        parser = YamlStreamParser()
        assert parser.parse("a: 1").value == [{"a": 1}]
        assert parser.parse("b: 2").value == [{"b": 2}]
