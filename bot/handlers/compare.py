"""
Compare Handlers

Handles /compare command and the Compare button under /stats.
"""

import asyncio
import logging

import aiohttp
from aiogram import Router, F
from aiogram.filters import Command, CommandObject
from aiogram.fsm.context import FSMContext
from aiogram.types import Message, CallbackQuery

from keyboards.stats import get_comparison_keyboard
from services.api_client import api_client, APIError
from states.lookup import CompareStates
from utils.callbacks import CallbackPrefix
from utils.formatters import format_comparison, quote

logger = logging.getLogger(__name__)

router = Router()


ASK_FIRST_TEXT = (
    "<b>⚔️ Head to head</b>\n\n"
    "Send the first WCA ID, e.g. <code>2012PARK03</code>\n"
    "/cancel to stop"
)


def ask_second_text(first_id: str) -> str:
    return (
        f"First competitor: <code>{quote(first_id)}</code>\n\n"
        "Now send the second WCA ID\n"
        "/cancel to stop"
    )


async def show_comparison(message: Message, first_id: str, second_id: str):
    """Fetch a comparison and replace a progress message with it."""
    progress = await message.answer("⏳ Comparing...")

    try:
        data = await api_client.competitors.compare(first_id.strip(), second_id.strip())
    except APIError as e:
        logger.info(f"Compare {first_id} vs {second_id}: {e}")
        await progress.edit_text(f"❌ {quote(e.detail)}")
        return
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Backend request failed: {e!r}")
        await progress.edit_text("❌ Service unavailable. Try again later.")
        return

    await progress.edit_text(
        format_comparison(data),
        reply_markup=get_comparison_keyboard(
            data["first"]["competitor_id"],
            data["second"]["competitor_id"],
        ),
    )


@router.message(Command("compare"))
async def cmd_compare(message: Message, state: FSMContext, command: CommandObject):
    """Handle /compare [ID1 ID2]; missing IDs are asked for one by one."""
    await state.clear()
    ids = (command.args or "").split()

    if len(ids) >= 2:
        await show_comparison(message, ids[0], ids[1])
        return

    if len(ids) == 1:
        await state.update_data(first_id=ids[0])
        await state.set_state(CompareStates.waiting_for_second)
        await message.answer(ask_second_text(ids[0]))
        return

    await state.set_state(CompareStates.waiting_for_first)
    await message.answer(ASK_FIRST_TEXT)


@router.callback_query(F.data.startswith(f"{CallbackPrefix.COMPARE}:with:"))
async def handle_compare_with(callback: CallbackQuery, state: FSMContext):
    """Compare button under /stats: the shown competitor is the first."""
    await callback.answer()
    first_id = callback.data.split(":")[2]

    await state.clear()
    await state.update_data(first_id=first_id)
    await state.set_state(CompareStates.waiting_for_second)
    await callback.message.answer(ask_second_text(first_id))


@router.message(CompareStates.waiting_for_first, F.text, ~F.text.startswith("/"))
async def handle_first_id(message: Message, state: FSMContext):
    """Handle the first WCA ID."""
    first_id = message.text.strip()

    await state.update_data(first_id=first_id)
    await state.set_state(CompareStates.waiting_for_second)
    await message.answer(ask_second_text(first_id))


@router.message(CompareStates.waiting_for_second, F.text, ~F.text.startswith("/"))
async def handle_second_id(message: Message, state: FSMContext):
    """Handle the second WCA ID and run the comparison."""
    data = await state.get_data()
    first_id = data.get("first_id")
    await state.clear()

    if not first_id:
        await message.answer(ASK_FIRST_TEXT)
        await state.set_state(CompareStates.waiting_for_first)
        return

    await show_comparison(message, first_id, message.text)
