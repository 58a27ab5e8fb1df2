"""Job request relay for the Telegram bot.

A chat that opens the Request screen is marked as awaiting. Its next text
message is forwarded to the administrator, the mark is cleared and a
confirmation is sent back; both the request and the confirmation are deleted
after the cleanup delay. Messages from chats that are not awaiting are
deleted right away.

The administrator answers with ``/accept <chat_id>`` or
``/decline <chat_id> <reason>``.
"""

import logging
from html import escape

from telegram import Update
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from ..core.locks import ReadWriteLock
from .messages import (
    REQUEST_ACCEPTED,
    REQUEST_CONFIRMATION,
    REQUEST_DECLINED,
    REQUEST_TO_ADMIN,
)
from .utils import safe_delete_message, schedule_deletion

logger = logging.getLogger(__name__)


class AwaitingRequests:
    """Set of chats whose next message is a job request."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._chats: set[int] = set()

    async def mark(self, chat_id: int) -> None:
        async with self._lock.write():
            self._chats.add(chat_id)

    async def clear(self, chat_id: int) -> None:
        async with self._lock.write():
            self._chats.discard(chat_id)

    async def consume(self, chat_id: int) -> bool:
        """Clear the mark and report whether it was set."""
        async with self._lock.write():
            if chat_id not in self._chats:
                return False
            self._chats.discard(chat_id)
            return True


class RequestRelay:
    """Forwards job requests to the administrator and handles the answers."""

    def __init__(
        self,
        admin_chat_id: int,
        awaiting: AwaitingRequests,
        cleanup_delay_seconds: int = 120,
    ) -> None:
        """Initialize request relay.

        Args:
            admin_chat_id: Chat receiving relayed requests and allowed to answer them.
            awaiting: Shared set of chats in request mode.
            cleanup_delay_seconds: Delay before relay messages are deleted.
        """
        self.admin_chat_id = admin_chat_id
        self.awaiting = awaiting
        self.cleanup_delay_seconds = cleanup_delay_seconds

    @property
    def cleanup_minutes(self) -> int:
        return max(1, self.cleanup_delay_seconds // 60)

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle any non-command message.

        Text from an awaiting chat is relayed as a job request; everything
        else is deleted.

        Args:
            update: Telegram update object.
            context: Bot context.
        """
        chat = update.effective_chat
        message = update.effective_message
        if chat is None or message is None:
            return

        if message.text and await self.awaiting.consume(chat.id):
            await self._relay_request(update, context)
            return

        await safe_delete_message(context.bot, chat.id, message.message_id)

    async def _relay_request(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat = update.effective_chat
        message = update.effective_message
        user = update.effective_user
        if chat is None or message is None:
            return

        user_id = user.id if user else chat.id
        username = (user.username if user else None) or "unknown"
        logger.info(f"Relaying job request from user {user_id}")

        try:
            await context.bot.send_message(
                chat_id=self.admin_chat_id,
                text=REQUEST_TO_ADMIN.format(
                    username=escape(username), user_id=user_id, text=escape(message.text or "")
                ),
                parse_mode=ParseMode.HTML,
            )
        except TelegramError as e:
            logger.error(f"Failed to send request message to admin: {e}")

        try:
            confirmation = await context.bot.send_message(
                chat_id=chat.id,
                text=REQUEST_CONFIRMATION.format(minutes=self.cleanup_minutes),
                parse_mode=ParseMode.HTML,
            )
        except TelegramError as e:
            logger.error(f"Failed to send confirmation message: {e}")
            return

        schedule_deletion(
            context.job_queue,
            chat.id,
            [confirmation.message_id, message.message_id],
            self.cleanup_delay_seconds,
        )

    async def accept_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle ``/accept <chat_id>`` from the administrator."""
        target = self._parse_target(update, context, "accept")
        if target is None:
            return

        await self._notify(context, target, REQUEST_ACCEPTED.format(minutes=self.cleanup_minutes))
        logger.info(f"Request from chat {target} accepted")

    async def decline_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle ``/decline <chat_id> <reason>`` from the administrator."""
        target = self._parse_target(update, context, "decline")
        if target is None:
            return

        reason = " ".join((context.args or [])[1:])
        text = REQUEST_DECLINED.format(reason=escape(reason), minutes=self.cleanup_minutes)
        await self._notify(context, target, text)
        logger.info(f"Request from chat {target} declined")

    def _parse_target(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE, command: str
    ) -> int | None:
        """Validate sender and extract the target chat id of an admin command."""
        user = update.effective_user
        if user is None or user.id != self.admin_chat_id:
            logger.warning(
                f"Ignoring /{command} from non-admin user {user.id if user else 'unknown'}"
            )
            return None

        args = context.args or []
        if not args:
            logger.error(f"Invalid /{command} command format")
            return None

        try:
            return int(args[0])
        except ValueError:
            logger.error(f"Invalid user ID in /{command} command: {args[0]!r}")
            return None

    async def _notify(self, context: ContextTypes.DEFAULT_TYPE, chat_id: int, text: str) -> None:
        try:
            sent = await context.bot.send_message(
                chat_id=chat_id, text=text, parse_mode=ParseMode.HTML
            )
        except TelegramError as e:
            logger.error(f"Failed to notify chat {chat_id}: {e}")
            return

        schedule_deletion(
            context.job_queue, chat_id, [sent.message_id], self.cleanup_delay_seconds
        )
