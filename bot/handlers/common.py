"""
Common Handlers

Basic commands: /start, /help, /cancel
"""

import logging
from aiogram import Router
from aiogram.types import Message
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

logger = logging.getLogger(__name__)

router = Router()


WELCOME_TEXT = """
👋 <b>Cubify Stats</b>

Personal records, rankings and percentiles for WCA competitors.

<b>Commands:</b>
/stats — competitor stats
/compare — head-to-head comparison
/help — help
"""


@router.message(Command("start"))
async def cmd_start(message: Message, state: FSMContext):
    """Handle /start command."""
    await state.clear()
    logger.info(f"/start from {message.from_user.id}")
    await message.answer(WELCOME_TEXT)


@router.message(Command("help"))
async def cmd_help(message: Message):
    """Handle /help command."""
    await message.answer(
        "<b>How to use the bot:</b>\n\n"
        "1. Find a WCA ID on the competitor's WCA page (e.g. <code>2012PARK03</code>)\n"
        "2. Send /stats with the ID\n"
        "3. Tap Compare to race them against someone else\n\n"
        "<b>Commands:</b>\n"
        "/start — start over\n"
        "/help — this help\n"
        "/cancel — cancel the current operation\n"
        "/stats [ID] — records with NR/CR/WR and percentiles\n"
        "/compare [ID1 ID2] — head-to-head on world rank\n\n"
        "<b>Comparison scores:</b>\n"
        "• Shared events — only events both have results in\n"
        "• All events — a result the opponent lacks scores a point\n\n"
        "<i>Top X% is the share of the leaderboard ranked at or above the competitor.</i>"
    )


@router.message(Command("cancel"))
async def cmd_cancel(message: Message, state: FSMContext):
    """Handle /cancel command."""
    current_state = await state.get_state()

    if current_state is None:
        await message.answer("Nothing to cancel. Send /stats to look someone up.")
        return

    await state.clear()
    await message.answer("Cancelled.")
