"""aiogram message handlers.

Text messages are analytics queries, documents are dataset uploads. Each chat has its own
`AppState`; at most one query and one upload are in flight per chat. On any internal error the
user receives the fixed error message and the details are only logged.
"""

from __future__ import annotations

import logging

from aiogram.types import BufferedInputFile, Message

from src.analytics.assembler import error_payload
from src.analytics.loader import complete_upload, start_upload
from src.analytics.pipeline import complete_submission, start_submission
from src.analytics.state import Phase
from src.app import App
from src.bot.charts import render_chart_png
from src.bot.render import CHART_TITLE, render_dataset, render_payload

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "📊 <b>NLP Data Analytics</b>\n"
    "Анализ данных через естественный язык. Загрузите CSV/Excel файл или задайте вопрос.\n\n"
    "💡 <b>Демо режим:</b> используются примерные данные для демонстрации.\n\n"
    "Примеры: «покажи средние продажи», «создай график тренда», «найди аномалии»\n"
    "/data: текущий набор данных"
)
PROCESSING_TEXT = "⏳ Анализирую запрос..."
BUSY_TEXT = "Предыдущий запрос ещё обрабатывается, подождите."
UPLOADING_TEXT = "Загрузка..."
UPLOAD_BUSY_TEXT = "Файл уже загружается, подождите."
UPLOAD_FAILED_TEXT = "Не удалось загрузить файл. Поддерживаются CSV и Excel файлы."
CHART_FILENAME = "chart.png"


def _is_command_text(text: str) -> bool:
    return text.lstrip().startswith("/")


async def handle_start(message: Message, app: App) -> None:
    """Reply with the introduction and example queries."""

    app.sessions.get(message.chat.id)
    await message.answer(WELCOME_TEXT)


async def handle_data(message: Message, app: App) -> None:
    """Reply with the summary of the chat's currently loaded dataset."""

    state = app.sessions.get(message.chat.id)
    await message.answer(render_dataset(state.dataset, app.settings.dataset_preview_rows))


async def handle_query(message: Message, app: App) -> None:
    """Run the query pipeline for a text message and reply with the chart image and text."""

    chat_id = message.chat.id
    raw_text = message.text or ""
    if _is_command_text(raw_text):
        await message.answer(WELCOME_TEXT)
        return

    state = app.sessions.get(chat_id)
    pending = start_submission(state, raw_text)
    if pending is None:
        if state.loading:
            await message.answer(BUSY_TEXT)
        return

    app.sessions.set(chat_id, pending)
    result_text = render_payload(error_payload())
    chart_png: bytes | None = None

    # noinspection PyBroadException
    try:
        await message.answer(PROCESSING_TEXT)
        delivered = await complete_submission(
            pending,
            delay_s=app.settings.query_delay_s,
            table_rows=app.settings.result_table_rows,
        )
        app.sessions.update(
            chat_id,
            lambda current: current.evolve(
                query=delivered.query,
                results=delivered.results,
                loading=False,
                phase=delivered.phase,
            ),
        )
        payload = delivered.results
        if payload is not None:
            result_text = render_payload(payload)
            if payload.chart is not None:
                chart_png = render_chart_png(payload.chart, title=payload.message)
    except Exception:
        # Handler boundary: the user always gets a reply and the chat is never left loading.
        logger.exception("query handler failed")
        chart_png = None
        app.sessions.update(
            chat_id,
            lambda current: current.evolve(
                results=error_payload(),
                loading=False,
                phase=Phase.idle,
            ),
        )

    if chart_png is not None:
        await message.answer_photo(
            BufferedInputFile(chart_png, filename=CHART_FILENAME),
            caption=CHART_TITLE,
        )
    await message.answer(result_text)


async def handle_document(message: Message, app: App) -> None:
    """Run the (simulated) upload pipeline for a document and reply with the dataset summary."""

    chat_id = message.chat.id
    pending = start_upload(app.sessions.get(chat_id))
    if pending is None:
        await message.answer(UPLOAD_BUSY_TEXT)
        return

    app.sessions.set(chat_id, pending)
    reply = UPLOAD_FAILED_TEXT

    # noinspection PyBroadException
    try:
        await message.answer(UPLOADING_TEXT)
        file_name = message.document.file_name if message.document is not None else None
        loaded = await complete_upload(pending, file_name, delay_s=app.settings.upload_delay_s)
        current = app.sessions.update(
            chat_id,
            lambda state: state.evolve(
                dataset=loaded.dataset,
                uploading=False,
                upload_error=loaded.upload_error,
            ),
        )
        if current.upload_error is None:
            reply = render_dataset(current.dataset, app.settings.dataset_preview_rows)
    except Exception as exc:
        # Handler boundary: the loader always returns to its ready state.
        logger.exception("upload handler failed")
        app.sessions.update(
            chat_id,
            lambda state: state.evolve(uploading=False, upload_error=str(exc) or type(exc).__name__),
        )

    await message.answer(reply)
