"""
Stats Keyboards

Inline keyboards for /stats and /compare results.
"""

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from utils.callbacks import CallbackPrefix


def get_stats_keyboard(competitor_id: str, profile_url: str) -> InlineKeyboardMarkup:
    """
    Get keyboard under a competitor's stats.

    Args:
        competitor_id: WCA ID shown in the message
        profile_url: Public profile page on the WCA website
    """
    return InlineKeyboardMarkup(inline_keyboard=[[
        InlineKeyboardButton(
            text="⚔️ Compare",
            callback_data=f"{CallbackPrefix.COMPARE}:with:{competitor_id}"
        ),
        InlineKeyboardButton(
            text="🌐 WCA profile",
            url=profile_url
        ),
    ]])


def get_comparison_keyboard(first_id: str, second_id: str) -> InlineKeyboardMarkup:
    """Get keyboard under a comparison: open either competitor's stats."""
    return InlineKeyboardMarkup(inline_keyboard=[[
        InlineKeyboardButton(
            text=f"📊 {first_id}",
            callback_data=f"{CallbackPrefix.STATS}:show:{first_id}"
        ),
        InlineKeyboardButton(
            text=f"📊 {second_id}",
            callback_data=f"{CallbackPrefix.STATS}:show:{second_id}"
        ),
    ]])
