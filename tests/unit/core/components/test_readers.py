"""
Unit tests for the case-table parser and reader component.
"""

import tempfile
from pathlib import Path

from translitqa.core.components import CaseTableReader, parse_records, split_record

FIXTURES = Path(__file__).parents[3] / "fixtures"


class TestSplitRecord:
    """Test the single-line field scanner."""

    def test_plain_fields_are_trimmed(self):
        assert split_record(" a , b,c ,d") == ["a", "b", "c", "d"]

    def test_quoted_field_keeps_delimiter(self):
        assert split_record('"a,b",c,d,e') == ["a,b", "c", "d", "e"]

    def test_quotes_are_dropped_not_kept(self):
        assert split_record('"hello"') == ["hello"]

    def test_doubled_quotes_are_not_unescaped(self):
        # Each quote toggles quoted mode, so "" simply disappears.
        assert split_record('"He said ""hi"""') == ["He said hi"]

    def test_unbalanced_quote_swallows_rest_of_line(self):
        assert split_record('a,"b,c,d') == ["a", "b,c,d"]

    def test_empty_fields_preserved(self):
        assert split_record("a,,,") == ["a", "", "", ""]

    def test_trailing_carriage_return_is_trimmed(self):
        assert split_record("a,b,c,d\r") == ["a", "b", "c", "d"]


class TestParseRecords:
    """Test whole-table parsing."""

    def test_header_is_skipped(self):
        text = "id,name,input,expected\nPos_1,n,i,e\n"
        assert parse_records(text) == [["Pos_1", "n", "i", "e"]]

    def test_blank_lines_are_ignored(self):
        text = "\n\nid,name,input,expected\n\n   \nPos_1,n,i,e\n\n"
        assert parse_records(text) == [["Pos_1", "n", "i", "e"]]

    def test_short_rows_are_dropped(self):
        text = "header\na,b,c\na,b,c,d\n"
        assert parse_records(text) == [["a", "b", "c", "d"]]

    def test_extra_columns_are_kept_on_the_record(self):
        records = parse_records("header\na,b,c,d,e,f\n")
        assert records == [["a", "b", "c", "d", "e", "f"]]

    def test_header_only_yields_nothing(self):
        assert parse_records("TC ID,Test Case Name,Input,Expected Output\n") == []

    def test_empty_text_yields_nothing(self):
        assert parse_records("") == []

    def test_each_well_formed_row_yields_one_record(self):
        rows = [f"Pos_{i},desc {i},input {i},out {i}" for i in range(25)]
        records = parse_records("\n".join(["header"] + rows))
        assert len(records) == 25
        assert [r[0] for r in records] == [f"Pos_{i}" for i in range(25)]


class TestCaseTableReader:
    """Test the reader component."""

    def test_reader_creation(self):
        reader = CaseTableReader()
        assert reader.name == "case_table_reader"

    def test_validate_input_valid_file(self):
        reader = CaseTableReader()
        assert reader.validate_input(FIXTURES / "sample_cases.csv") == []

    def test_validate_input_invalid(self):
        reader = CaseTableReader()

        errors = reader.validate_input("/nonexistent/cases.csv")
        assert "does not exist" in errors[0]

        with tempfile.TemporaryDirectory() as temp_dir:
            errors = reader.validate_input(temp_dir)
            assert "not a file" in errors[0]

        errors = reader.validate_input(123)
        assert "must be a file path" in errors[0]

    def test_read_fixture(self):
        reader = CaseTableReader()

        result = reader.read(str(FIXTURES / "sample_cases.csv"))

        assert result.success
        assert result.metadata["lines_read"] == 8
        assert result.metadata["records_parsed"] == 7
        assert result.metadata["records_dropped"] == 1
        assert result.data[1][:4] == [
            "Pos_0002",
            "Greeting, with comma",
            "oyaata kohomadha, yaaluvaa?",
            "ඔයාට කොහොමද, යාලුවා?",
        ]

    def test_read_missing_file_reports_error(self):
        reader = CaseTableReader()

        result = reader.read("/nonexistent/cases.csv")

        assert not result.success
        assert result.data == []
        assert "Failed to read case table" in result.errors[0]

    def test_process_delegates_to_read(self):
        reader = CaseTableReader()
        result = reader.process(str(FIXTURES / "sample_cases.csv"))
        assert result.metadata["source_path"].endswith("sample_cases.csv")
