"""
Cubify Stats Telegram Bot

Entry point for the bot.
"""

import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import BotCommand

from config import settings
from handlers import common, stats, compare
from services.api_client import api_client


# === Logging Setup ===
logging.basicConfig(
    level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


BOT_COMMANDS = [
    BotCommand(command="start", description="Start / restart"),
    BotCommand(command="help", description="Help"),
    BotCommand(command="stats", description="Competitor stats"),
    BotCommand(command="compare", description="Head-to-head comparison"),
    BotCommand(command="cancel", description="Cancel the current operation"),
]


async def on_startup(bot: Bot):
    """Startup hook."""
    logger.info("Starting Cubify Stats Bot...")

    # Set bot commands menu
    await bot.set_my_commands(BOT_COMMANDS)
    logger.info("Bot commands menu set")

    # Check backend health
    healthy = await api_client.health_check()
    if healthy:
        logger.info("Backend is healthy")
    else:
        logger.warning("Backend health check failed - bot will start anyway")

    # Get bot info
    me = await bot.get_me()
    logger.info(f"Bot started: @{me.username}")


async def on_shutdown(bot: Bot):
    """Shutdown hook."""
    logger.info("Shutting down...")
    await api_client.close()


async def main():
    """Main entry point."""
    # Create bot
    bot = Bot(
        token=settings.token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML)
    )

    # Create dispatcher
    dp = Dispatcher(storage=MemoryStorage())

    # Register routers
    dp.include_router(common.router)
    dp.include_router(stats.router)
    dp.include_router(compare.router)

    # Register startup/shutdown hooks
    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)

    # Start polling
    logger.info("Starting polling...")
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
