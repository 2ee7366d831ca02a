"""Bot router composition."""

from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command, CommandStart

from src.bot.handlers import handle_data, handle_document, handle_query, handle_start

router = Router(name="root")
router.message.register(handle_start, CommandStart())
router.message.register(handle_start, Command("help"))
router.message.register(handle_data, Command("data"))
router.message.register(handle_document, F.document)
router.message.register(handle_query, F.text)
