"""
Table Exporter

Writes a normalized Table as comma-separated text: one header record with
the columns in order, then one record per row. Fields containing the
delimiter, quote character or line breaks are quoted, so the output reads
back unchanged with any conforming CSV reader.
"""

import csv
import io
import logging
import os
from pathlib import Path
from typing import IO, Union

from .config import settings
from .exceptions import WriteFailedError
from .models import Table

logger = logging.getLogger(__name__)

Sink = Union[str, os.PathLike, IO]


def _write(table: Table, stream: IO[str]) -> None:
    writer = csv.writer(stream)
    writer.writerow(table.columns)
    for row in table.rows:
        writer.writerow([row.get(column, "") for column in table.columns])
    stream.flush()


def _is_binary(sink: IO) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(sink, "mode", "")


def export(table: Table, sink: Sink) -> None:
    """
    Export a table as CSV.

    Args:
        table: Normalized table
        sink: File path, or an open text or binary file object. File
              objects are flushed but left open.

    Raises:
        WriteFailedError: If the destination cannot be written
    """
    try:
        if isinstance(sink, (str, os.PathLike)):
            with open(sink, "w", newline="", encoding="utf-8") as stream:
                _write(table, stream)
        elif _is_binary(sink):
            stream = io.TextIOWrapper(sink, encoding="utf-8", newline="")
            try:
                _write(table, stream)
            finally:
                stream.detach()
        else:
            _write(table, sink)
    except (OSError, ValueError) as e:
        # ValueError: I/O operation on closed file
        logger.error("Failed to export CSV: %s", e)
        raise WriteFailedError(f"Failed to write CSV: {e}")


def export_csv(table: Table, path: Union[str, os.PathLike] = None) -> Path:
    """Export a table to a CSV file, defaulting to the configured file name."""
    target = Path(path or settings.csv_filename)
    export(table, target)
    logger.info("Exported %d rows to %s", len(table), target)
    return target


def to_csv_text(table: Table) -> str:
    """Return the CSV text of a table."""
    buffer = io.StringIO(newline="")
    export(table, buffer)
    return buffer.getvalue()
