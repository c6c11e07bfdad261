"""Tests for the CSV record reader."""

import io
from pathlib import Path

import pytest

from cckgen.csv_input.reader import open_records, read_records
from cckgen.exceptions import InputReadError, RecordSchemaError


def _read(text: str, skip_header: bool = True) -> list:
    return list(read_records(io.StringIO(text, newline=""), skip_header=skip_header))


class TestReadRecords:
    def test_skips_header(self) -> None:
        records = _read("id,fixtureId,description,va\n1,F1,Downlight,150W\n")
        assert len(records) == 1
        assert records[0].fixture_id == "F1"
        assert records[0].description == "Downlight"
        assert records[0].wattage_text == "150W"

    def test_without_header_keeps_first_row(self) -> None:
        records = _read("1,F1,Downlight,150W\n2,F2,Strip,40W\n", skip_header=False)
        assert [r.fixture_id for r in records] == ["F1", "F2"]

    def test_empty_input_with_header_fails(self) -> None:
        with pytest.raises(InputReadError, match="header"):
            _read("")

    def test_empty_input_without_header_is_empty(self) -> None:
        assert _read("", skip_header=False) == []

    def test_header_only_yields_nothing(self) -> None:
        assert _read("id,fixtureId,description,va\n") == []

    def test_line_numbers(self) -> None:
        records = _read("h,h,h,h\n1,A,a,1\n2,B,b,2\n")
        assert [r.line_number for r in records] == [2, 3]

    def test_leading_whitespace_trimmed(self) -> None:
        records = _read("1,  F1,   Downlight, 150W\n", skip_header=False)
        assert records[0].fields == ["1", "F1", "Downlight", "150W"]

    def test_stray_quote_kept_literally(self) -> None:
        records = _read('1,F1,6" Downlight,150W\n', skip_header=False)
        assert records[0].description == '6" Downlight'

    def test_quoted_field_with_comma(self) -> None:
        records = _read('1,F1,"Downlight, 6in",150W\n', skip_header=False)
        assert records[0].description == "Downlight, 6in"

    def test_blank_lines_skipped(self) -> None:
        records = _read("h,h,h,h\n\n1,F1,Downlight,150W\n\n")
        assert len(records) == 1

    def test_short_record_fails(self) -> None:
        with pytest.raises(RecordSchemaError) as exc_info:
            _read("h,h,h,h\n1,F1,Downlight\n")
        assert exc_info.value.line_number == 2
        assert exc_info.value.record == ["1", "F1", "Downlight"]
        assert "Downlight" in str(exc_info.value)

    def test_long_record_fails(self) -> None:
        with pytest.raises(RecordSchemaError):
            _read("1,F1,Downlight,150W,extra\n", skip_header=False)

    def test_records_before_bad_row_are_yielded(self) -> None:
        it = read_records(
            io.StringIO("h,h,h,h\n1,F1,a,1\n2,F2\n", newline=""),
        )
        assert next(it).fixture_id == "F1"
        with pytest.raises(RecordSchemaError):
            next(it)


class TestOpenRecords:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputReadError, match="Error opening file"):
            with open_records(tmp_path / "missing.csv"):
                pass

    def test_reads_file(self, write_csv) -> None:
        path = write_csv("h,h,h,h\r\n1,F1,Downlight,150W\r\n")
        with open_records(path) as records:
            rows = list(records)
        assert rows[0].fields == ["1", "F1", "Downlight", "150W"]


class TestLenientQuotes:
    def test_text_after_closing_quote_joins_field(self) -> None:
        records = _read('1,F1,"a"b,150W\n', skip_header=False)
        assert records[0].fields == ["1", "F1", "ab", "150W"]


def test_open_records_tolerates_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "cp1252.csv"
    path.write_bytes(b"1,F1,6\x94 Can,150W\n")
    with open_records(path, skip_header=False) as records:
        rows = list(records)
    assert rows[0].description.encode("utf-8", "surrogateescape") == b"6\x94 Can"
