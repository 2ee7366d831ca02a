"""Text renderers for payloads and dataset summaries.

Tables are drawn as monospace text inside `<pre>` blocks; charts are sent separately as images
(see `src.bot.charts`). All dynamic text is HTML-escaped; messages are sent with HTML parse mode.
Rendered payload text never exceeds Telegram's message length limit.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from html import escape

from src.intent.schema import CellValue, Dataset, ResponsePayload

CHART_TITLE = "📊 Визуализация"
TABLE_TITLE = "📋 Результаты"
TELEGRAM_TEXT_LIMIT = 4096
ELLIPSIS = "…"


def format_value(value: object) -> str:
    """Format a cell value; integral floats are shown without a fractional part."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _table_columns(rows: Sequence[Mapping[str, CellValue]]) -> list[str]:
    columns: list[str] = []
    for row in rows:
        for column in row:
            if column not in columns:
                columns.append(column)
    return columns


def render_table(rows: Sequence[Mapping[str, CellValue]]) -> str:
    """Render rows as an aligned text grid (header, separator, one line per row)."""

    columns = _table_columns(rows)
    if not columns:
        return ""

    cells = [[format_value(row.get(column, "")) for column in columns] for row in rows]
    widths = [
        max(len(column), *(len(line[idx]) for line in cells)) for idx, column in enumerate(columns)
    ]

    lines = [
        " | ".join(column.ljust(width) for column, width in zip(columns, widths)),
        "-+-".join("-" * width for width in widths),
    ]
    lines.extend(
        " | ".join(cell.ljust(width) for cell, width in zip(line, widths)).rstrip() for line in cells
    )
    return "\n".join(lines)


def escape_truncated(text: str, limit: int) -> str:
    """HTML-escape `text`, cutting it so the escaped result is at most `limit` characters."""

    escaped = escape(text)
    if len(escaped) <= limit:
        return escaped
    if limit < len(ELLIPSIS):
        return ""

    parts: list[str] = []
    size = 0
    for char in text:
        piece = escape(char)
        if size + len(piece) > limit - len(ELLIPSIS):
            break
        parts.append(piece)
        size += len(piece)
    return "".join(parts) + ELLIPSIS


def _pre(text: str) -> str:
    return f"<pre>{escape(text)}</pre>"


def render_payload(payload: ResponsePayload, limit: int = TELEGRAM_TEXT_LIMIT) -> str:
    """Render a payload's table section and message as HTML, within `limit` characters.

    The chart is not part of the text; the message is shortened when the reply would not fit.
    """

    sections: list[str] = []
    if payload.table:
        sections.append(f"<b>{TABLE_TITLE}</b>\n{_pre(render_table(payload.table))}")

    used = sum(len(section) + 2 for section in sections)
    sections.append(escape_truncated(payload.message, max(limit - used, 0)))
    return "\n\n".join(sections)


def render_dataset(dataset: Dataset, preview_rows: int = 5) -> str:
    """Render the loaded dataset summary with a preview of its first rows."""

    summary = f"✅ Загружено: {dataset.rows} строк, {dataset.columns} колонок"
    preview = dataset.preview(preview_rows)
    if not preview:
        return summary
    return f"{summary}\n{_pre(render_table(preview))}"
