"""Response assembler.

Builds a `ResponsePayload` for a classified category. Statistics and chart payloads are static
fixtures regardless of the loaded dataset; only generic payloads sample the dataset rows.
"""

from __future__ import annotations

from pydantic import ValidationError

from src.analytics import fixtures
from src.intent.schema import (
    BarPoint,
    Category,
    Chart,
    ChartKind,
    Dataset,
    LinePoint,
    ResponsePayload,
)

DEFAULT_TABLE_ROWS = 10


class AssemblyError(RuntimeError):
    """Raised when a payload cannot be constructed for a category."""


def _statistics_payload() -> ResponsePayload:
    table = tuple(
        {"column": column, "average": average, "min": minimum, "max": maximum}
        for column, _title, average, minimum, maximum in fixtures.COLUMN_STATISTICS
    )
    chart = Chart(
        kind=ChartKind.bar,
        points=tuple(
            BarPoint(label=title, value=average)
            for _column, title, average, _min, _max in fixtures.COLUMN_STATISTICS
        ),
    )
    return ResponsePayload(
        kind=Category.statistics,
        message=fixtures.STATISTICS_MESSAGE,
        table=table,
        chart=chart,
    )


def _chart_payload() -> ResponsePayload:
    chart = Chart(
        kind=ChartKind.line,
        points=tuple(LinePoint(x=bucket, y=value) for bucket, value in fixtures.SALES_TREND),
    )
    return ResponsePayload(kind=Category.chart, message=fixtures.CHART_MESSAGE, chart=chart)


def _generic_payload(query: str, dataset: Dataset | None, table_rows: int) -> ResponsePayload:
    rows = dataset.preview(table_rows) if dataset is not None else fixtures.SAMPLE_ROWS[:table_rows]
    return ResponsePayload(
        kind=Category.generic,
        message=fixtures.GENERIC_MESSAGE_TEMPLATE.format(query=query),
        table=rows,
    )


def error_payload() -> ResponsePayload:
    """Return the fixed error payload (no table, no chart)."""

    return ResponsePayload(kind=Category.error, message=fixtures.ERROR_MESSAGE)


def assemble(
        category: Category,
        original_query: str,
        dataset: Dataset | None = None,
        *,
        table_rows: int = DEFAULT_TABLE_ROWS,
) -> ResponsePayload:
    """Build the response payload for a category.

    Args:
        category: The classified category.
        original_query: The query text as submitted; echoed verbatim by generic payloads.
        dataset: The currently loaded dataset. `None` means the default demo fixture.
        table_rows: How many dataset rows a generic payload shows.

    Raises:
        AssemblyError: If the payload cannot be constructed (e.g. malformed dataset state).
    """

    if table_rows < 1:
        raise AssemblyError("table_rows must be a positive integer")

    try:
        if category == Category.statistics:
            return _statistics_payload()
        if category == Category.chart:
            return _chart_payload()
        if category == Category.generic:
            return _generic_payload(original_query, dataset, table_rows)
        if category == Category.error:
            return error_payload()
    except (ValidationError, AttributeError, TypeError) as exc:
        raise AssemblyError(f"cannot assemble {category} payload: {exc}") from exc

    raise AssemblyError(f"unsupported category: {category!r}")
