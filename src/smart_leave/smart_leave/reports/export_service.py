from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, timestamp_for_file
from ..core.exceptions import ExportError
from .exporters.base import Table
from .exporters.factory import ExporterFactory

logger = logging.getLogger(__name__)


class ExportService:
    """Serialize report tables into timestamped files under one directory."""

    def __init__(
        self,
        export_dir,
        *,
        factory: Optional[ExporterFactory] = None,
        clock: Callable = now_local,
    ):
        self._export_dir = Path(export_dir)
        self._factory = factory or ExporterFactory()
        self._clock = clock

    def render(self, tables: Sequence[Table], fmt) -> str:
        return self._factory.for_format(fmt).render_all(tables)

    def _write_new(self, prefix: str, extension: str, content: str) -> Path:
        stem = f"{prefix}_{timestamp_for_file(self._clock())}"
        path = self._export_dir / f"{stem}.{extension}"
        n = 1
        while True:
            try:
                with path.open("x", encoding="utf-8") as fh:
                    fh.write(content)
                return path
            except FileExistsError:
                path = self._export_dir / f"{stem}_{n}.{extension}"
                n += 1

    def export(self, tables: Sequence[Table], fmt, *, prefix: str) -> Path:
        exporter = self._factory.for_format(fmt)
        content = exporter.render_all(tables)

        try:
            self._export_dir.mkdir(parents=True, exist_ok=True)
            path = self._write_new(prefix, exporter.format.value, content)
        except OSError as e:
            logger.error("export of %s failed: %s", prefix, e)
            raise ExportError(f"Failed to save file: {e}") from e

        logger.info("saved %s", path)
        return path
