"""Unit tests for the streaming CSV record reader."""

import types

import pytest

from recipecorpus.ingest.csv_reader import (
    CSV_COLUMNS,
    iter_csv_records,
    read_csv_records,
    split_csv_record,
)
from recipecorpus.ingest.exceptions import InputFileError, MalformedRecordError


class TestSplitCsvRecord:
    """Tests for split_csv_record function."""

    def test_plain_fields(self):
        """Test splitting on commas."""
        assert split_csv_record("a,b,c") == ["a", "b", "c"]

    def test_quoted_comma(self):
        """Test that commas inside quotes do not split."""
        assert split_csv_record('1,"a, b",c') == ["1", "a, b", "c"]

    def test_doubled_quote(self):
        """Test that a doubled quote inside a quoted field is a literal quote."""
        assert split_csv_record('"say ""hi"", ok"') == ['say "hi", ok']

    def test_empty_record(self):
        """Test an empty record is a single empty field."""
        assert split_csv_record("") == [""]

    def test_newline_outside_quotes_rejected(self):
        """Test two rows joined by stray inch marks."""
        with pytest.raises(MalformedRecordError):
            split_csv_record('2,12" pizza,desc\n3,a 9" pan,desc')

    def test_oversized_record_rejected(self):
        """Test the record length limit."""
        with pytest.raises(MalformedRecordError) as exc_info:
            split_csv_record("x" * 20, max_chars=10)

        assert "limit is 10" in str(exc_info.value)

    def test_large_field_accepted(self):
        """Test a field larger than the csv module's stock limit."""
        big = "x" * 200_000
        assert split_csv_record(f'1,"{big}"') == ["1", big]


class TestIterCsvRecords:
    """Tests for iter_csv_records function."""

    def test_header_skipped(self):
        """Test that the first record is not yielded."""
        assert list(iter_csv_records(["h1,h2", "a,b"], width=2)) == [["a", "b"]]

    def test_header_only(self):
        """Test input with nothing but a header."""
        assert list(iter_csv_records(["h1,h2"], width=2)) == []

    def test_multiline_field_reassembled(self):
        """Test that a quoted field spanning lines becomes one record."""
        lines = ["id,name,description", '1,x,"line one', 'line two"', "2,y,z"]
        records = list(iter_csv_records(lines, width=3))

        assert records == [["1", "x", "line one\nline two"], ["2", "y", "z"]]

    def test_trailing_newlines_stripped(self):
        """Test lines as produced by iterating a file."""
        assert list(iter_csv_records(["h\n", "a\r\n"], width=1)) == [["a"]]

    def test_short_rows_padded(self):
        """Test that short rows are padded with empty strings."""
        assert list(iter_csv_records(["a,b,c", "1"], width=3)) == [["1", "", ""]]

    def test_blank_lines_skipped(self):
        """Test that blank records are ignored."""
        assert list(iter_csv_records(["h", "", "a", "  "], width=1)) == [["a"]]

    def test_blank_line_before_header(self):
        """Test that leading blank lines do not take the header's place."""
        assert list(iter_csv_records(["", "id,name", "1,a"], width=2)) == [["1", "a"]]

    def test_stray_inch_marks_skipped(self, caplog):
        """Test that a record which fails to split is skipped, not fatal."""
        lines = ["id,name,description", "1,a", '2,12" pizza,x', '3,a 9" pan,x', "4,b"]

        records = list(iter_csv_records(lines, width=3))

        assert records == [["1", "a", ""], ["4", "b", ""]]
        assert "Skipping malformed record 2" in caplog.text

    def test_runaway_quote_cut_off(self, caplog):
        """Test that an unbalanced quote only swallows up to the size limit."""
        lines = ["id,name", "1,a", '2,"broken', "x" * 30, "x" * 30, "3,b"]

        records = list(iter_csv_records(lines, width=2, max_chars=50))

        assert records == [["1", "a"], ["3", "b"]]
        assert "Cutting off unbalanced record" in caplog.text
        assert "Skipping malformed record 2" in caplog.text

    def test_unterminated_record_dropped(self, caplog):
        """Test that an unbalanced record at end of input is dropped with a warning."""
        records = list(iter_csv_records(["h", "a", '"never closed'], width=1))

        assert records == [["a"]]
        assert "unterminated" in caplog.text

    def test_is_lazy(self):
        """Test that records are produced before the input is exhausted."""

        def lines():
            yield "h1,h2"
            yield "a,b"
            raise RuntimeError("read past the first record")

        records = iter_csv_records(lines(), width=2)

        assert isinstance(records, types.GeneratorType)
        assert next(records) == ["a", "b"]


class TestReadCsvRecords:
    """Tests for read_csv_records function."""

    def test_reads_sample_file(self, recipes_csv):
        """Test reading every data record of the sample file."""
        records = list(read_csv_records(recipes_csv))

        assert len(records) == 6
        assert all(len(fields) == len(CSV_COLUMNS) for fields in records)
        assert records[0][0] == "101"
        assert records[1][2] == "hearty and warm\nfreezes well"

    def test_missing_file(self, tmp_path):
        """Test that a missing input raises InputFileError."""
        missing = tmp_path / "missing.csv"

        with pytest.raises(InputFileError) as exc_info:
            next(read_csv_records(missing))

        assert exc_info.value.path == str(missing)
        assert "missing.csv" in str(exc_info.value)

    def test_early_close(self, recipes_csv):
        """Test that a consumer can stop after the first record."""
        records = read_csv_records(recipes_csv)

        first = next(records)
        records.close()

        assert first[1] == "spaghetti with meat sauce"
        with pytest.raises(StopIteration):
            next(records)
