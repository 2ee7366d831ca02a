"""Tests for the keyword-based intent classifier."""

from __future__ import annotations

import pytest

from src.intent.classifier import EmptyQueryError, classify, classify_with_match
from src.intent.schema import Category


@pytest.mark.parametrize(
    "query",
    [
        "покажи средние продажи",
        "Средние значения",
        "СРЕДНЕЕ по выручке",
        "what is the average revenue?",
        "AVERAGE",
        "xxсреднxx",
    ],
)
def test_statistics_keywords(query: str) -> None:
    assert classify(query) == Category.statistics


@pytest.mark.parametrize(
    "query",
    [
        "создай график тренда",
        "Построй ГРАФИК",
        "show me a chart",
        "тренд по месяцам",
        "sales trend",
    ],
)
def test_chart_keywords(query: str) -> None:
    assert classify(query) == Category.chart


@pytest.mark.parametrize("query", ["hello world", "найди аномалии", "?", "42"])
def test_generic_fallback(query: str) -> None:
    assert classify(query) == Category.generic


def test_statistics_wins_over_chart() -> None:
    assert classify("график средних продаж") == Category.statistics
    assert classify("chart of the average") == Category.statistics


def test_error_is_never_selected_by_keywords() -> None:
    assert classify("error ошибка") != Category.error


def test_blank_query_is_rejected() -> None:
    with pytest.raises(EmptyQueryError):
        classify("   ")
    with pytest.raises(EmptyQueryError):
        classify_with_match("")
