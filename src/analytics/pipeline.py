"""Query submission pipeline.

Runs one submission through `idle -> classifying -> assembling -> delivered`. Any fault raised
while classifying or assembling moves the submission to `failed`, the fixed error payload is
delivered and the state returns to `idle`. `complete_submission` never raises.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from time import monotonic

from src.analytics.assembler import DEFAULT_TABLE_ROWS, assemble, error_payload
from src.analytics.state import AppState, Phase
from src.intent.classifier import classify_with_match
from src.intent.normalize import is_blank

logger = logging.getLogger(__name__)

DEFAULT_QUERY_DELAY_S = 1.5

TransitionHook = Callable[[Phase], None]


def _noop(_phase: Phase) -> None:
    return None


def start_submission(state: AppState, text: str | None) -> AppState | None:
    """Accept a query for processing.

    Returns:
        The pending state (`loading=True`, `phase=classifying`), or `None` if the query is blank
        or another submission is still in flight. Blank queries never reach the classifier.
    """

    if is_blank(text):
        return None
    if state.loading:
        logger.info("submission rejected: another query is in flight")
        return None
    return state.evolve(query=text, loading=True, phase=Phase.classifying)


async def complete_submission(
        state: AppState,
        *,
        delay_s: float = DEFAULT_QUERY_DELAY_S,
        table_rows: int = DEFAULT_TABLE_ROWS,
        on_transition: TransitionHook | None = None,
) -> AppState:
    """Process a pending submission and return the delivered state."""

    notify = on_transition or _noop
    started = monotonic()
    notify(Phase.classifying)

    # noinspection PyBroadException
    try:
        await asyncio.sleep(delay_s)
        match = classify_with_match(state.query)

        notify(Phase.assembling)
        payload = assemble(match.category, state.query, state.dataset, table_rows=table_rows)
    except Exception:
        # Pipeline boundary: every fault becomes the error payload.
        logger.exception("query processing failed")
        notify(Phase.failed)
        notify(Phase.idle)
        return state.evolve(results=error_payload(), loading=False, phase=Phase.idle)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled category=%s keyword=%s latency_ms=%d",
        match.category,
        match.keyword,
        latency_ms,
    )
    notify(Phase.delivered)
    return state.evolve(results=payload, loading=False, phase=Phase.delivered)


async def submit_query(
        state: AppState,
        text: str | None,
        *,
        delay_s: float = DEFAULT_QUERY_DELAY_S,
        table_rows: int = DEFAULT_TABLE_ROWS,
        on_transition: TransitionHook | None = None,
) -> AppState:
    """Submit a query and wait for its payload (available as `results` on the returned state).

    Blank queries and submissions made while another is in flight return `state` unchanged.
    """

    pending = start_submission(state, text)
    if pending is None:
        return state
    return await complete_submission(
        pending,
        delay_s=delay_s,
        table_rows=table_rows,
        on_transition=on_transition,
    )
