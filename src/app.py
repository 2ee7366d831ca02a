"""Application composition root.

This module wires together configuration and the per-chat session store for the bot runtime.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from src.analytics.loader import initial_state
from src.analytics.state import AppState
from src.config.settings import Settings


class SessionStore:
    """In-memory per-chat `AppState` registry (lost on restart)."""

    def __init__(self) -> None:
        self._states: dict[int, AppState] = {}

    def get(self, chat_id: int) -> AppState:
        """Return the chat state, creating the startup state on first access."""

        state = self._states.get(chat_id)
        if state is None:
            state = initial_state()
            self._states[chat_id] = state
        return state

    def set(self, chat_id: int, state: AppState) -> None:
        self._states[chat_id] = state

    def update(self, chat_id: int, change: Callable[[AppState], AppState]) -> AppState:
        """Apply `change` to the current chat state, store and return the result.

        Pipelines finish after an `await`; merging into the current state keeps updates made by
        another pipeline of the same chat in the meantime.
        """

        state = change(self.get(chat_id))
        self._states[chat_id] = state
        return state


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    sessions: SessionStore = field(default_factory=SessionStore)


def create_app(settings: Settings) -> App:
    """Create the application container."""

    return App(settings=settings)
