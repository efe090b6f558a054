from __future__ import annotations

from ...core.enums import ExportFormat
from .base import Table, TableExporter

SEPARATOR = "-" * 40


class TxtExporter(TableExporter):
    """Human readable report: a banner, then one labelled block per row."""

    format = ExportFormat.TXT

    def render(self, table: Table) -> str:
        width = max((len(c.label) for c in table.columns), default=0)
        lines = [f"===== {table.title} =====", ""]
        if not table.rows:
            lines.append("(no records)")
        for row in table.rows:
            for col, value in zip(table.columns, table.values(row)):
                lines.append(f"{col.label.ljust(width)} : {'' if value is None else value}")
            lines.append(SEPARATOR)
        return "\n".join(lines) + "\n"
