"""
main.py
-------
Entry point for the Files Telegram bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Build the FileDispatcher with its collaborators.
    - Start the bot with long polling or a webhook server.
"""

import traceback

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    ContextTypes,
    MessageHandler,
    filters,
)

from config import (
    TELEGRAM_BOT_TOKEN,
    USE_WEBHOOK,
    WEBHOOK_LISTEN,
    WEBHOOK_PATH,
    WEBHOOK_PORT,
    WEBHOOK_URL,
)
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from handlers.files_handler import DISPATCHER_KEY, handle_message
from services.file_dispatcher import FileDispatcher
from services.telegram_sender import TelegramSender
from utils.logger import get_logger

logger = get_logger(__name__)


async def post_init(application: Application) -> None:
    """Wire the dispatcher to the running bot and register the commands menu."""
    application.bot_data[DISPATCHER_KEY] = FileDispatcher(
        sender=TelegramSender(application.bot)
    )

    commands = [
        BotCommand("start", "Get a shared file or show help"),
        BotCommand("upload", "Upload a new file"),
        BotCommand("list", "List your files"),
        BotCommand("delete", "Delete one of your files"),
        BotCommand("cancel", "Cancel the current operation"),
        BotCommand("setlanguage", "Change the bot language"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log store and delivery failures raised while handling an update."""
    tb = "".join(
        traceback.format_exception(None, context.error, context.error.__traceback__)
    )
    update_repr = update.to_dict() if isinstance(update, Update) else str(update)
    logger.error(
        f"Exception while handling an update: {context.error}\n"
        f"update = {update_repr}\n{tb}"
    )


def build_application() -> Application:
    app = (
        Application.builder()
        .token(TELEGRAM_BOT_TOKEN)
        .concurrent_updates(True)
        .post_init(post_init)
        .build()
    )
    app.add_handler(
        MessageHandler(
            (filters.TEXT | filters.Document.ALL) & filters.UpdateType.MESSAGE,
            handle_message,
        )
    )
    app.add_error_handler(error_handler)
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = build_application()

    # ── 3. Receive updates ────────────────────────────────
    if USE_WEBHOOK:
        logger.info(f"Listening for webhook updates on {WEBHOOK_LISTEN}:{WEBHOOK_PORT}/{WEBHOOK_PATH}")
        app.run_webhook(
            listen=WEBHOOK_LISTEN,
            port=WEBHOOK_PORT,
            url_path=WEBHOOK_PATH,
            webhook_url=f"{WEBHOOK_URL.rstrip('/')}/{WEBHOOK_PATH}",
            allowed_updates=["message"],
        )
    else:
        logger.info("Files bot is polling. Press Ctrl+C to stop.")
        app.run_polling(allowed_updates=["message"])

    # ── 4. Cleanup on shutdown ────────────────────────────
    close_pool()
    logger.info("Files bot stopped.")


if __name__ == "__main__":
    main()
