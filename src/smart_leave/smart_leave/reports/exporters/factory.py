from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import ExportFormat
from ...core.exceptions import ValidationError
from .base import TableExporter
from .csv_exporter import CsvExporter
from .txt_exporter import TxtExporter


@dataclass
class ExporterFactory:
    """Factory Pattern: choose the exporter for a requested format."""

    def for_format(self, fmt) -> TableExporter:
        try:
            fmt = ExportFormat(str(getattr(fmt, "value", fmt)).lower())
        except ValueError:
            raise ValidationError(f"Unsupported export format: {fmt}")

        if fmt == ExportFormat.CSV:
            return CsvExporter()
        return TxtExporter()
