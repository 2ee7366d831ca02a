"""Demo fixtures.

Every "result" shown by the demo comes from these constants. Nothing here is computed from user
data; the values only need to look plausible.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from src.intent.schema import CellValue, Row

FixtureRows = tuple[Mapping[str, CellValue], ...]


def _read_only(*rows: Row) -> FixtureRows:
    """Wrap rows in read-only views; payloads and datasets validate them into fresh dicts."""

    return tuple(MappingProxyType(row) for row in rows)


SAMPLE_ROWS: FixtureRows = _read_only(
    {"id": 1, "name": "Product A", "sales": 1200, "revenue": 15000, "date": "2024-01"},
    {"id": 2, "name": "Product B", "sales": 800, "revenue": 12000, "date": "2024-01"},
    {"id": 3, "name": "Product C", "sales": 1500, "revenue": 18000, "date": "2024-02"},
    {"id": 4, "name": "Product D", "sales": 500, "revenue": 8000, "date": "2024-02"},
    {"id": 5, "name": "Product E", "sales": 2000, "revenue": 25000, "date": "2024-03"},
    {"id": 6, "name": "Product F", "sales": 1100, "revenue": 14200, "date": "2024-03"},
    {"id": 7, "name": "Product G", "sales": 950, "revenue": 11800, "date": "2024-04"},
    {"id": 8, "name": "Product H", "sales": 1750, "revenue": 21500, "date": "2024-04"},
    {"id": 9, "name": "Product I", "sales": 1300, "revenue": 16400, "date": "2024-05"},
    {"id": 10, "name": "Product J", "sales": 1010, "revenue": 13100, "date": "2024-05"},
    {"id": 11, "name": "Product K", "sales": 1450, "revenue": 17300, "date": "2024-05"},
    {"id": 12, "name": "Product L", "sales": 1450, "revenue": 20469, "date": "2024-05"},
)

UPLOADED_ROW_COUNT = 150
UPLOADED_COLUMN_COUNT = 5
UPLOADED_SAMPLE: FixtureRows = _read_only(
    {"id": 1, "name": "Product A", "sales": 1200, "revenue": 15000, "date": "2024-01"},
    {"id": 2, "name": "Product B", "sales": 800, "revenue": 12000, "date": "2024-02"},
    {"id": 3, "name": "Product C", "sales": 1500, "revenue": 18000, "date": "2024-03"},
)

# (column, title, average, min, max)
COLUMN_STATISTICS: tuple[tuple[str, str, float, float, float], ...] = (
    ("sales", "Sales", 1250.5, 500, 2000),
    ("revenue", "Revenue", 15230.8, 8000, 25000),
)

SALES_TREND: tuple[tuple[str, float], ...] = (
    ("2024-01", 1000),
    ("2024-02", 1200),
    ("2024-03", 1500),
    ("2024-04", 1400),
    ("2024-05", 1600),
)

STATISTICS_MESSAGE = "Средние значения по числовым колонкам"
CHART_MESSAGE = "График тренда продаж"
GENERIC_MESSAGE_TEMPLATE = 'Обработан запрос: "{query}"'
ERROR_MESSAGE = "Ошибка обработки запроса"
