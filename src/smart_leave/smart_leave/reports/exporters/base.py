from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Sequence

from ...core.enums import ExportFormat


@dataclass(frozen=True)
class Column:
    key: str
    header: str
    label: str


@dataclass(frozen=True)
class Table:
    title: str
    columns: Sequence[Column]
    rows: Sequence[dict] = field(default_factory=list)

    def values(self, row: dict) -> list[Any]:
        return [row.get(c.key, "") for c in self.columns]


class TableExporter(ABC):
    """Exporter interface (Strategy Pattern for report formats)."""

    format: ExportFormat

    @abstractmethod
    def render(self, table: Table) -> str:
        raise NotImplementedError

    def render_all(self, tables: Sequence[Table]) -> str:
        return "\n".join(self.render(t) for t in tables)
