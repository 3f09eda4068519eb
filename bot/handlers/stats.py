"""
Stats Handlers

Handles /stats command: a competitor's records, ranks and percentiles.
"""

import asyncio
import logging

import aiohttp
from aiogram import Router, F
from aiogram.filters import Command, CommandObject
from aiogram.fsm.context import FSMContext
from aiogram.types import Message, CallbackQuery

from keyboards.stats import get_stats_keyboard
from services.api_client import api_client, APIError
from states.lookup import StatsStates
from utils.callbacks import CallbackPrefix
from utils.formatters import format_profile, quote

logger = logging.getLogger(__name__)

router = Router()


ASK_ID_TEXT = (
    "Send a WCA ID, e.g. <code>2012PARK03</code>\n"
    "/cancel to stop"
)


async def show_stats(message: Message, competitor_id: str):
    """Fetch a profile and replace a progress message with it."""
    progress = await message.answer("⏳ Loading rankings...")

    try:
        data = await api_client.competitors.get_profile(competitor_id.strip())
    except APIError as e:
        logger.info(f"Profile {competitor_id}: {e}")
        await progress.edit_text(f"❌ {quote(e.detail)}")
        return
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Backend request failed: {e!r}")
        await progress.edit_text("❌ Service unavailable. Try again later.")
        return

    competitor = data["competitor"]
    await progress.edit_text(
        format_profile(data),
        reply_markup=get_stats_keyboard(competitor["competitor_id"], competitor["profile_url"]),
    )


@router.message(Command("stats"))
async def cmd_stats(message: Message, state: FSMContext, command: CommandObject):
    """Handle /stats [ID]; without an ID, ask for one."""
    await state.clear()

    if not command.args:
        await state.set_state(StatsStates.waiting_for_id)
        await message.answer(ASK_ID_TEXT)
        return

    await show_stats(message, command.args)


@router.message(StatsStates.waiting_for_id, F.text, ~F.text.startswith("/"))
async def handle_id_input(message: Message, state: FSMContext):
    """Handle WCA ID input after /stats."""
    await state.clear()
    await show_stats(message, message.text)


@router.callback_query(F.data.startswith(f"{CallbackPrefix.STATS}:show:"))
async def handle_show_stats(callback: CallbackQuery, state: FSMContext):
    """Open a competitor's stats from a comparison."""
    await callback.answer()
    await state.clear()

    competitor_id = callback.data.split(":")[2]
    await show_stats(callback.message, competitor_id)
