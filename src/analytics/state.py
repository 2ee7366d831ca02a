"""Explicit application state.

One `AppState` value describes everything the presentation layer shows for a chat: the loaded
dataset, the last query and its results, and the pending flags. Pipelines never mutate a state;
they return a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from src.intent.schema import Dataset, ResponsePayload


class Phase(StrEnum):
    """Position of a query submission in its state machine."""

    idle = "idle"
    classifying = "classifying"
    assembling = "assembling"
    delivered = "delivered"
    failed = "failed"


@dataclass(frozen=True)
class AppState:
    """Per-chat application state."""

    dataset: Dataset
    query: str = ""
    results: ResponsePayload | None = None
    loading: bool = False
    uploading: bool = False
    phase: Phase = Phase.idle
    upload_error: str | None = None

    def evolve(self, **changes: object) -> AppState:
        """Return a copy of the state with `changes` applied."""

        return replace(self, **changes)  # type: ignore[arg-type]
