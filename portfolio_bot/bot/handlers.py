"""Telegram bot handlers for the portfolio menus.

Thin dispatch layer: handlers unpack updates, delegate to the menu engine or
the request relay, and push the resulting screens back through the bot API.
Transport failures are logged and never propagate out of a handler.
"""

import logging

from telegram import CallbackQuery, Update
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from .keyboards import build_keyboard
from .menu import MenuEngine
from .request_relay import RequestRelay
from .types import RenderResult
from .utils import safe_delete_message

logger = logging.getLogger(__name__)


class BotHandlers:
    """Update handlers bound to the shared menu engine and request relay."""

    def __init__(self, menu_engine: MenuEngine, request_relay: RequestRelay) -> None:
        self.menu_engine = menu_engine
        self.request_relay = request_relay

    def register(self, application: Application) -> None:
        """Register all handlers on the application.

        Command handlers come first so that the message handler only sees
        plain messages and unknown commands. Edited messages are not handled.
        """
        application.add_handler(CommandHandler("start", self.start))
        application.add_handler(CommandHandler("accept", self.request_relay.accept_command))
        application.add_handler(CommandHandler("decline", self.request_relay.decline_command))
        application.add_handler(CallbackQueryHandler(self.handle_callback))
        application.add_handler(
            MessageHandler(filters.UpdateType.MESSAGE, self.request_relay.handle_message)
        )

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /start command.

        Removes the command message and sends the main menu.

        Args:
            update: Telegram update object containing message data.
            context: Bot context for accessing application instance.
        """
        chat = update.effective_chat
        message = update.effective_message
        if chat is None or message is None:
            return

        if update.effective_user:
            logger.info(f"Received /start command from user {update.effective_user.id}")

        await safe_delete_message(context.bot, chat.id, message.message_id)

        screen = self.menu_engine.main_menu()
        try:
            await context.bot.send_message(
                chat_id=chat.id,
                text=screen["text"],
                parse_mode=ParseMode.HTML,
                reply_markup=build_keyboard(screen["keyboard"]),
            )
        except TelegramError as e:
            logger.warning(f"Failed to send start message: {e}")

    async def handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle inline keyboard presses.

        Args:
            update: Telegram update object containing the callback query.
            context: Bot context.
        """
        query = update.callback_query
        chat = update.effective_chat
        if query is None or chat is None:
            return

        event = query.data or ""
        logger.info(f"Received callback query from user {query.from_user.id}: {event}")

        try:
            await query.answer()
        except TelegramError as e:
            logger.debug(f"Failed to answer callback query: {e}")

        loading = self.menu_engine.loading_screen(event)
        if loading is not None:
            await self._edit(query, loading)

        screen = await self.menu_engine.handle(event, chat.id)
        if screen is None:
            return

        await self._edit(query, screen)

    async def _edit(self, query: CallbackQuery, screen: RenderResult) -> None:
        try:
            await query.edit_message_text(
                text=screen["text"],
                parse_mode=ParseMode.HTML,
                reply_markup=build_keyboard(screen["keyboard"]),
            )
        except TelegramError as e:
            logger.warning(f"Failed to render {screen['screen']}: {e}")
