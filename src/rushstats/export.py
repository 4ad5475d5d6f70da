"""CSV export of the visible, sorted players table."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import Callable, Sequence

from rushstats.config import column_keys
from rushstats.models import Record


logger = logging.getLogger(__name__)

Downloader = Callable[[bytes, str], None]


class ExportUnavailableError(RuntimeError):
    """Raised when there are no records to export."""


def export_filename(title: str) -> str:
    return f"{title}.csv"


def _export_headers(records: Sequence[Record], columns: Sequence[str]) -> list[str]:
    present = {field for record in records for field in record}
    return [column for column in columns if column in present]


def serialize_records(
    records: Sequence[Record],
    title: str,
    *,
    columns: Sequence[str] | None = None,
) -> bytes:
    """Render records as CSV bytes in table column order.

    Cells are written as received (``"1,043"`` stays ``"1,043"``); fields a
    record lacks are left empty.
    """

    if not records:
        raise ExportUnavailableError(f"No records to export for {title!r}")

    headers = _export_headers(records, columns if columns is not None else column_keys())
    if not headers:
        raise ExportUnavailableError(f"Records for {title!r} have no displayed columns")

    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n")
    writer.writerow(headers)
    for record in records:
        writer.writerow(["" if record.get(header) is None else record.get(header) for header in headers])

    return buffer.getvalue().encode("utf-8")


class CsvExport:
    """One export of an ordered record set, generated once and downloadable."""

    def __init__(self, records: Sequence[Record], title: str):
        self.records = tuple(records)
        self.title = title
        self.payload: bytes | None = None

    @property
    def filename(self) -> str:
        return export_filename(self.title)

    def generate(self) -> bytes:
        self.payload = serialize_records(self.records, self.title)
        return self.payload

    def download(self, downloader: Downloader) -> None:
        payload = self.payload if self.payload is not None else self.generate()
        logger.info("Exporting %s rows to %s", len(self.records), self.filename)
        downloader(payload, self.filename)


class DirectoryDownloader:
    """Download facility that saves exports under a local directory."""

    def __init__(self, directory: Path):
        self.directory = directory

    def __call__(self, payload: bytes, filename: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / Path(filename).name
        target.write_bytes(payload)
        logger.info("Saved export to %s", target)


__all__ = [
    "CsvExport",
    "DirectoryDownloader",
    "Downloader",
    "ExportUnavailableError",
    "export_filename",
    "serialize_records",
]
