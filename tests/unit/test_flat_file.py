"""
Unit tests for the flat-file parser (formatbridge.parsers.flat_file).
"""

from __future__ import annotations

import pytest

from formatbridge.exceptions import MalformedStructureError, MissingArgumentError
from formatbridge.parsers.flat_file import FlatFileParser, parse_flat_file


class TestParseFlatFile:
    """Tests for parse_flat_file()."""

    def test_basic_table(self):
        assert parse_flat_file("h1,h2\nv1,v2", ",") == [{"h1": "v1", "h2": "v2"}]

    def test_header_and_cells_are_trimmed(self, albums_csv: str):
        records = parse_flat_file(albums_csv, ",")
        assert len(records) == 3
        assert records[0] == {"album": "The White Stripes", "year": "1999", "US_peak_chart_post": "-"}
        assert records[2]["US_peak_chart_post"] == "6"

    def test_values_stay_strings(self):
        (record,) = parse_flat_file("n,flag\n42,true", ",")
        assert record == {"n": "42", "flag": "true"}

    def test_blank_lines_skipped_everywhere(self):
        text = "\n\na;b\n\n1;2\n   \n3;4\n\n"
        assert parse_flat_file(text, ";") == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_multi_character_separator(self):
        assert parse_flat_file("a::b\n1::2", "::") == [{"a": "1", "b": "2"}]

    def test_crlf_input(self):
        assert parse_flat_file("a,b\r\n1,2\r\n", ",") == [{"a": "1", "b": "2"}]

    def test_header_only(self):
        assert parse_flat_file("a,b\n", ",") == []

    def test_empty_text(self):
        assert parse_flat_file("", ",") == []

    def test_row_order_preserved(self):
        records = parse_flat_file("k\n3\n1\n2", ",")
        assert [r["k"] for r in records] == ["3", "1", "2"]

    def test_empty_cells_kept(self):
        assert parse_flat_file("a,b,c\n1,,3", ",") == [{"a": "1", "b": "", "c": "3"}]

    def test_tab_separator_keeps_empty_edge_cells(self):
        text = "a\tb\n1\t\n\t2\n"
        assert parse_flat_file(text, "\t") == [{"a": "1", "b": ""}, {"a": "", "b": "2"}]


class TestFieldCountMismatch:
    """Rows must have exactly the header's field count."""

    def test_too_many_fields(self):
        with pytest.raises(MalformedStructureError, match="line 3.*1,2,3"):
            parse_flat_file("a,b\n1,2\n1,2,3\n", ",")

    def test_too_few_fields(self):
        with pytest.raises(MalformedStructureError, match="expected 2 fields, found 1"):
            parse_flat_file("a,b\nonly\n", ",")

    def test_no_partial_result_on_error(self):
        parser = FlatFileParser(",")
        with pytest.raises(MalformedStructureError):
            parser.parse("a,b\n1,2\nbad\n")


class TestSeparatorValidation:

    def test_missing_separator(self):
        with pytest.raises(MissingArgumentError):
            parse_flat_file("a,b", None)

    def test_empty_separator(self):
        with pytest.raises(MissingArgumentError):
            FlatFileParser("")

    def test_result_metadata(self):
        result = FlatFileParser(",").parse("a\n\n1\n2\n")
        assert result.format_name == "flat_file"
        assert result.line_count == 3
