"""Stream fixed-width records out of a fixture CSV export."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from cckgen.exceptions import InputReadError, RecordSchemaError
from cckgen.models import CsvRecord

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 4


def _rows(stream: TextIO) -> Iterator[tuple[int, list[str]]]:
    """Yield (line number, fields) for every non-blank row."""
    # The csv module is lenient about stray quotes when strict is off:
    # a quote inside an unquoted field is kept as a literal character.
    reader = csv.reader(stream, skipinitialspace=True, strict=False)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except (csv.Error, OSError, UnicodeDecodeError) as e:
            raise InputReadError(
                f"Error reading record at line {reader.line_num}: {e}"
            ) from e
        if not row:
            continue
        yield reader.line_num, row


def read_records(
    stream: TextIO,
    skip_header: bool = True,
) -> Iterator[CsvRecord]:
    """Yield data records from a CSV text stream.

    Args:
        stream: Open text stream (opened with ``newline=""``).
        skip_header: Discard the first record before yielding.

    Raises:
        InputReadError: The stream is unreadable, or a header was expected
            but the stream holds no record.
        RecordSchemaError: A data record does not have exactly four fields.
    """
    rows = _rows(stream)

    if skip_header:
        header = next(rows, None)
        if header is None:
            raise InputReadError("Error reading header: input is empty")
        logger.debug("Skipped header at line %d: %s", header[0], header[1])

    for line_number, fields in rows:
        if len(fields) != FIELDS_PER_RECORD:
            raise RecordSchemaError(
                f"Error reading record: {fields} line {line_number}: "
                f"expected {FIELDS_PER_RECORD} fields, got {len(fields)}",
                line_number=line_number,
                record=fields,
            )
        yield CsvRecord(line_number=line_number, fields=fields)


@contextmanager
def open_records(
    path: str | Path,
    skip_header: bool = True,
    encoding: str = "utf-8",
) -> Iterator[Iterator[CsvRecord]]:
    """Open a CSV file and yield its record iterator.

    The file is closed when the ``with`` block exits, including on error.
    """
    path = Path(path)
    try:
        stream = open(
            path, newline="", encoding=encoding, errors="surrogateescape",
        )
    except OSError as e:
        raise InputReadError(f"Error opening file: {path}: {e}") from e

    with stream:
        logger.info("Reading fixtures from %s", path)
        yield read_records(stream, skip_header=skip_header)
