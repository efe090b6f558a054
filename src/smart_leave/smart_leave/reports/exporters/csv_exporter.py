from __future__ import annotations

import csv
import io

from ...core.enums import ExportFormat
from .base import Table, TableExporter


def sanitize(value) -> str:
    """Make a value safe for unquoted CSV: commas and line breaks become spaces."""
    if value is None:
        return ""
    return str(value).replace(",", " ").replace("\r", " ").replace("\n", " ")


class CsvExporter(TableExporter):
    """Header row of column headers, one line per row, no quoting."""

    format = ExportFormat.CSV

    def render(self, table: Table) -> str:
        out = io.StringIO()
        writer = csv.writer(out, quoting=csv.QUOTE_NONE, quotechar=None, lineterminator="\n")
        writer.writerow([c.header for c in table.columns])
        for row in table.rows:
            writer.writerow([sanitize(v) for v in table.values(row)])
        return out.getvalue()
