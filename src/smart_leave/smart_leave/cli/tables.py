from __future__ import annotations

from typing import Sequence


def fit(value, width: int) -> str:
    text = "" if value is None else str(value)
    if len(text) > width:
        return text[: width - 1] + "…"
    return text.ljust(width)


def _border(widths: Sequence[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _line(cols: Sequence, widths: Sequence[int]) -> str:
    return "|" + "|".join(f" {fit(c, w)} " for c, w in zip(cols, widths)) + "|"


def render_table(headers: Sequence[str], widths: Sequence[int], rows: Sequence[Sequence], *, empty: str = "None") -> str:
    """Fixed-width ASCII table; an empty table gets a single placeholder row."""
    border = _border(widths)
    lines = [border, _line(headers, widths), border]
    if not rows:
        lines.append(_line([empty] + [""] * (len(widths) - 1), widths))
    for row in rows:
        lines.append(_line(row, widths))
    lines.append(border)
    return "\n".join(lines)
