"""Response payload and dataset schema (Pydantic models).

This schema is the contract between the response assembler and the presentation layer. Payloads
are frozen value objects, validated once at construction and discarded after rendering.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

CellValue = int | float | str
Row = dict[str, CellValue]


class Category(StrEnum):
    """Classified intent of a user query."""

    statistics = "statistics"
    chart = "chart"
    generic = "generic"
    error = "error"


class ChartKind(StrEnum):
    """Supported chart visualizations."""

    bar = "bar"
    line = "line"


class BarPoint(BaseModel):
    """A labeled bar of a bar chart."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    label: str = Field(min_length=1)
    value: float


class LinePoint(BaseModel):
    """A point of a line series; `x` is an ordered bucket label (e.g. `2024-01`)."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    x: str = Field(min_length=1)
    y: float


class Chart(BaseModel):
    """A chart descriptor: kind plus an ordered, non-empty sequence of points."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ChartKind
    points: tuple[BarPoint, ...] | tuple[LinePoint, ...]

    @model_validator(mode="after")
    def validate_points_match_kind(self) -> Chart:
        """Bar charts carry `BarPoint`s only; line charts carry `LinePoint`s only."""

        if not self.points:
            raise ValueError("chart requires at least one point")

        expected = BarPoint if self.kind == ChartKind.bar else LinePoint
        if not all(isinstance(p, expected) for p in self.points):
            raise ValueError(f"{self.kind} chart requires {expected.__name__} points")
        return self


class ResponsePayload(BaseModel):
    """The structured result of processing one query.

    Table rows are validated into fresh dicts owned by the payload; they must not be mutated.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Category
    message: str = Field(min_length=1)
    table: tuple[Row, ...] | None = None
    chart: Chart | None = None

    @model_validator(mode="after")
    def validate_content(self) -> ResponsePayload:
        """Enforce the payload content invariant.

        Error payloads carry neither table nor chart; every other payload carries at least one
        non-empty table or chart.
        """

        if self.kind == Category.error:
            if self.table is not None or self.chart is not None:
                raise ValueError("error payloads must not carry a table or chart")
            return self

        if not self.table and self.chart is None:
            raise ValueError(f"{self.kind} payload requires a non-empty table or a chart")
        return self


class Dataset(BaseModel):
    """Summary of the currently loaded tabular data."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rows: int = Field(ge=0)
    columns: int = Field(ge=0)
    sample: tuple[Row, ...] = ()

    def preview(self, limit: int) -> tuple[Row, ...]:
        """Return the first `limit` sample rows."""

        return self.sample[:limit]

