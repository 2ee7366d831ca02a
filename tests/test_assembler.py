"""Tests for the response assembler."""

from __future__ import annotations

import pytest

from src.analytics import fixtures
from src.analytics.assembler import AssemblyError, assemble, error_payload
from src.intent.schema import BarPoint, Category, ChartKind, Dataset, LinePoint


def test_statistics_payload_has_table_and_bar_chart() -> None:
    payload = assemble(Category.statistics, "покажи средние продажи")

    assert payload.kind == Category.statistics
    assert payload.message == "Средние значения по числовым колонкам"
    assert payload.table is not None and len(payload.table) >= 2
    for row in payload.table:
        assert {"column", "average", "min", "max"} <= set(row)

    assert payload.chart is not None
    assert payload.chart.kind == ChartKind.bar
    assert payload.chart.points == (
        BarPoint(label="Sales", value=1250.5),
        BarPoint(label="Revenue", value=15230.8),
    )
    assert [p.value for p in payload.chart.points] == [row["average"] for row in payload.table]


def test_chart_payload_is_five_point_line_without_table() -> None:
    payload = assemble(Category.chart, "создай график тренда")

    assert payload.kind == Category.chart
    assert payload.table is None
    assert payload.chart is not None
    assert payload.chart.kind == ChartKind.line
    assert len(payload.chart.points) == 5
    assert all(isinstance(p, LinePoint) for p in payload.chart.points)
    assert [p.x for p in payload.chart.points] == sorted(p.x for p in payload.chart.points)


def test_generic_payload_echoes_query_and_samples_dataset() -> None:
    query = 'что такое "выручка"?'
    payload = assemble(Category.generic, query)

    assert payload.kind == Category.generic
    assert query in payload.message
    assert payload.chart is None
    assert payload.table == fixtures.SAMPLE_ROWS[:10]


def test_generic_payload_uses_loaded_dataset() -> None:
    dataset = Dataset(rows=2, columns=1, sample=({"x": 1}, {"x": 2}))
    payload = assemble(Category.generic, "hello", dataset, table_rows=1)
    assert payload.table == ({"x": 1},)


def test_static_payloads_ignore_loaded_dataset() -> None:
    dataset = Dataset(rows=1, columns=1, sample=({"x": 1},))
    assert assemble(Category.statistics, "average", dataset) == assemble(Category.statistics, "average")
    assert assemble(Category.chart, "chart", dataset) == assemble(Category.chart, "chart")


def test_error_payload_has_no_content() -> None:
    for payload in (assemble(Category.error, "anything"), error_payload()):
        assert payload.kind == Category.error
        assert payload.message == "Ошибка обработки запроса"
        assert payload.table is None
        assert payload.chart is None


def test_generic_payload_with_empty_dataset_is_an_assembly_error() -> None:
    with pytest.raises(AssemblyError):
        assemble(Category.generic, "hello", Dataset(rows=0, columns=0))


def test_invalid_table_rows_is_an_assembly_error() -> None:
    with pytest.raises(AssemblyError):
        assemble(Category.generic, "hello", table_rows=0)


def test_unknown_category_is_an_assembly_error() -> None:
    with pytest.raises(AssemblyError):
        assemble("nonsense", "hello")  # type: ignore[arg-type]


def test_fixture_rows_are_read_only() -> None:
    with pytest.raises(TypeError):
        fixtures.SAMPLE_ROWS[0]["sales"] = 0  # type: ignore[index]


def test_payload_rows_do_not_alias_fixtures() -> None:
    payload = assemble(Category.generic, "hello")
    assert payload.table is not None

    payload.table[0]["sales"] = 0

    assert fixtures.SAMPLE_ROWS[0]["sales"] == 1200
    assert assemble(Category.generic, "hello").table[0]["sales"] == 1200  # type: ignore[index]
