"""Streaming reader for the recipe CSV export.

Quoted fields in the export may contain raw newlines, so a physical line is
not a record. Lines are buffered until the record's double quotes balance,
then the logical record is split into fields.
"""

import csv
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from recipecorpus.ingest.exceptions import InputFileError, MalformedRecordError
from recipecorpus.logging_config import get_logger

logger = get_logger(__name__)

CSV_COLUMNS: tuple[str, ...] = (
    "id",
    "name",
    "description",
    "ingredients",
    "ingredients_raw_str",
    "serving_size",
    "servings",
    "steps",
    "tags",
    "search_terms",
)

# A stray quote can swallow the rest of the file; records past this size are
# cut off and rejected instead.
MAX_RECORD_CHARS = 1024 * 1024

# Records never exceed MAX_RECORD_CHARS, so neither can a single field
csv.field_size_limit(max(csv.field_size_limit(), MAX_RECORD_CHARS))


def split_csv_record(record: str, max_chars: int = MAX_RECORD_CHARS) -> list[str]:
    """
    Split one logical CSV record into fields.

    Commas inside quotes are not separators and ``""`` inside a quoted field
    is a literal quote.

    Raises:
        MalformedRecordError: If the record is longer than ``max_chars`` or
            is not valid CSV (e.g. a newline outside quotes after two stray
            inch marks were joined into one record).
    """
    if not record:
        return [""]
    if len(record) > max_chars:
        raise MalformedRecordError(f"record is {len(record)} characters, limit is {max_chars}")
    try:
        return next(csv.reader([record]))
    except csv.Error as e:
        raise MalformedRecordError(str(e)) from e


def iter_logical_records(
    lines: Iterable[str],
    max_chars: int = MAX_RECORD_CHARS,
) -> Iterator[str]:
    """
    Yield the raw text of each data record, without splitting it.

    Blank records are skipped. The first non-blank record is the header and
    is consumed without being yielded. A record still unbalanced after
    ``max_chars`` characters is emitted as it stands (splitting it then
    fails) and reading resumes at the next line.
    """
    buffer: list[str] = []
    size = 0
    quote_count = 0
    header_seen = False

    for line in lines:
        line = line.rstrip("\r\n")
        buffer.append(line)
        size += len(line) + 1
        quote_count += line.count('"')

        # Record is complete only once its quotes balance
        if quote_count % 2 != 0 and size - 1 <= max_chars:
            continue

        if quote_count % 2 != 0:
            logger.warning(
                f"Cutting off unbalanced record after {len(buffer)} lines "
                f"({size - 1} characters)"
            )

        record = "\n".join(buffer)
        buffer = []
        size = 0
        quote_count = 0

        if not record.strip():
            continue

        if not header_seen:
            header_seen = True
            continue

        yield record

    if buffer:
        logger.warning(
            f"Dropping unterminated record at end of input ({len(buffer)} buffered lines)"
        )


def iter_csv_records(
    lines: Iterable[str],
    width: int = len(CSV_COLUMNS),
    max_chars: int = MAX_RECORD_CHARS,
) -> Iterator[list[str]]:
    """
    Yield one field list per logical record.

    The first record is the header and is consumed without being yielded.
    Short data rows are padded with empty strings up to ``width``. Records
    that cannot be split are logged and skipped.

    Args:
        lines: Physical lines, with or without trailing newlines.
        width: Number of columns a data row is expected to have.
        max_chars: Longest logical record accepted.
    """
    for index, record in enumerate(iter_logical_records(lines, max_chars), start=1):
        try:
            fields = split_csv_record(record, max_chars)
        except MalformedRecordError as e:
            logger.warning(f"Skipping malformed record {index}: {e}")
            continue

        if len(fields) < width:
            fields.extend([""] * (width - len(fields)))
        yield fields


def _open_input(path: Path) -> TextIO:
    try:
        return path.open("r", encoding="utf-8", errors="replace", newline="")
    except OSError as e:
        raise InputFileError(str(path), e) from e


def read_logical_records(
    path: str | Path,
    max_chars: int = MAX_RECORD_CHARS,
) -> Iterator[str]:
    """Open a recipe CSV and lazily yield the raw text of its data records."""
    path = Path(path)
    with _open_input(path) as handle:
        logger.debug(f"Reading recipe records from {path}")
        yield from iter_logical_records(handle, max_chars)


def read_csv_records(
    path: str | Path,
    width: int = len(CSV_COLUMNS),
    max_chars: int = MAX_RECORD_CHARS,
) -> Iterator[list[str]]:
    """
    Open a recipe CSV and lazily yield its data records.

    The file is opened before the first record is produced, so a missing or
    unreadable input raises ``InputFileError`` on the first ``next()``. The
    handle is closed when the records are exhausted, on error, or when the
    consumer closes the generator.
    """
    path = Path(path)
    with _open_input(path) as handle:
        logger.debug(f"Reading recipe records from {path}")
        yield from iter_csv_records(handle, width=width, max_chars=max_chars)
