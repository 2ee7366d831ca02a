"""Mock dataset loader.

Uploads are simulated: the file name is checked against the supported formats, a fixed delay
elapses, and a fixed dataset summary is returned. File contents are never read.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import PurePath

from src.analytics import fixtures
from src.analytics.state import AppState
from src.intent.schema import Dataset

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: tuple[str, ...] = (".csv", ".xlsx", ".xls")
DEFAULT_UPLOAD_DELAY_S = 1.0


class UploadError(ValueError):
    """Raised when an uploaded file cannot be loaded."""


def default_dataset() -> Dataset:
    """Return the demo dataset available before any upload."""

    return Dataset(
        rows=len(fixtures.SAMPLE_ROWS),
        columns=len(fixtures.SAMPLE_ROWS[0]) if fixtures.SAMPLE_ROWS else 0,
        sample=fixtures.SAMPLE_ROWS,
    )


def initial_state(dataset: Dataset | None = None) -> AppState:
    """Create the startup state with the demo dataset loaded."""

    return AppState(dataset=dataset if dataset is not None else default_dataset())


def validate_file_name(file_name: str | None) -> str:
    """Validate that the file name has a supported extension and return it stripped."""

    name = (file_name or "").strip()
    if not name:
        raise UploadError("file name is missing")

    suffix = PurePath(name).suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise UploadError(f"unsupported file type: {suffix or '<none>'}")
    return name


async def load_dataset(file_name: str | None, *, delay_s: float = DEFAULT_UPLOAD_DELAY_S) -> Dataset:
    """Simulate loading a CSV/Excel file and return its dataset summary.

    Raises:
        UploadError: If the file name is missing or has an unsupported extension.
    """

    name = validate_file_name(file_name)
    await asyncio.sleep(delay_s)

    logger.info("dataset loaded file=%s rows=%d", name, fixtures.UPLOADED_ROW_COUNT)
    return Dataset(
        rows=fixtures.UPLOADED_ROW_COUNT,
        columns=fixtures.UPLOADED_COLUMN_COUNT,
        sample=fixtures.UPLOADED_SAMPLE,
    )


def start_upload(state: AppState) -> AppState | None:
    """Mark an upload as pending.

    Returns:
        The pending state, or `None` if an upload is already in flight.
    """

    if state.uploading:
        return None
    return state.evolve(uploading=True, upload_error=None)


async def complete_upload(
        state: AppState,
        file_name: str | None,
        *,
        delay_s: float = DEFAULT_UPLOAD_DELAY_S,
) -> AppState:
    """Run the loader and return the resulting state.

    Upload faults are logged and recorded in `upload_error`; the previous dataset is kept and the
    loader returns to its ready state.
    """

    try:
        dataset = await load_dataset(file_name, delay_s=delay_s)
    except UploadError as exc:
        logger.warning("upload failed file=%s reason=%s", file_name, exc)
        return state.evolve(uploading=False, upload_error=str(exc))

    return state.evolve(dataset=dataset, uploading=False, upload_error=None)
