"""Application entry point.

Main module that initializes and runs the Telegram bot application in
long-polling mode. Configures logging, wires components through the DI
container, preloads the portfolio cache on startup and releases HTTP
resources on shutdown.
"""

import logging

from telegram import Update
from telegram.ext import Application

from .config import config
from .core.container import Container, build_container

# Logging
logging.basicConfig(
    format="%(asctime)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.bot.log_level.upper(), logging.INFO),
)
# httpx logs full request URLs, which contain the bot token
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


async def initialize_resources(container: Container) -> None:
    """Preload repositories and commits into the shared cache."""
    await container.menu_engine().warm_up()
    logger.info("Bot started successfully.")


async def cleanup_resources(container: Container) -> None:
    """Cleanup application resources."""
    try:
        await container.github_service().close()
    except Exception as e:
        logger.warning(f"Error during cleanup: {e}")


def build_application(container: Container) -> Application:
    """Create the Telegram application with handlers and lifecycle hooks."""

    async def post_init(application: Application) -> None:
        await initialize_resources(container)

    async def post_shutdown(application: Application) -> None:
        await cleanup_resources(container)

    app = (
        Application.builder()
        .token(config.bot.bot_token)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )
    container.bot_handlers().register(app)
    return app


def main() -> None:
    """Main application entry point.

    Initializes the Telegram bot application with proper configuration,
    registers command, callback and message handlers, and starts long polling.

    Raises:
        RuntimeError: If BOT_TOKEN or ADMIN_CHAT_ID environment variable is not set.
    """
    if not config.bot.bot_token:
        raise RuntimeError("Set BOT_TOKEN environment variable")
    if config.bot.admin_chat_id is None:
        raise RuntimeError("Set ADMIN_CHAT_ID environment variable")

    container = build_container(config)
    app = build_application(container)

    logger.info("Starting long polling")
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
