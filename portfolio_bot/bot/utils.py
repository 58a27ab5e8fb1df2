"""Bot utility functions.

Best-effort wrappers around transport calls whose failure must never
interrupt update handling, and scheduling of delayed message cleanup.
"""

import logging

from telegram import Bot
from telegram.error import TelegramError
from telegram.ext import ContextTypes, JobQueue

from .types import CleanupJobData

logger = logging.getLogger(__name__)


async def safe_delete_message(bot: Bot, chat_id: int, message_id: int) -> bool:
    """Delete a message, ignoring transport failures.

    Args:
        bot: Bot instance used to call the API.
        chat_id: Chat containing the message.
        message_id: Message to delete.

    Returns:
        True if the message was deleted, False otherwise.
    """
    try:
        await bot.delete_message(chat_id=chat_id, message_id=message_id)
        return True
    except TelegramError as e:
        logger.debug(f"Could not delete message {message_id} in chat {chat_id}: {e}")
        return False


async def delete_messages_job(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Job callback deleting the messages listed in the job payload."""
    job = context.job
    data: CleanupJobData | None = job.data if job else None  # type: ignore[assignment]
    if not data:
        return

    for message_id in data["message_ids"]:
        await safe_delete_message(context.bot, data["chat_id"], message_id)


def schedule_deletion(
    job_queue: JobQueue | None,
    chat_id: int,
    message_ids: list[int],
    delay_seconds: float,
) -> None:
    """Schedule deletion of messages after a delay.

    The job runs detached from update handling and touches nothing but the
    bot API when it fires.

    Args:
        job_queue: Application job queue, None if the job-queue extra is missing.
        chat_id: Chat containing the messages.
        message_ids: Messages to delete.
        delay_seconds: Delay before deletion.
    """
    if job_queue is None:
        logger.warning(f"Job queue unavailable; messages {message_ids} will not be deleted")
        return

    data: CleanupJobData = {"chat_id": chat_id, "message_ids": list(message_ids)}
    job_queue.run_once(
        delete_messages_job,
        when=delay_seconds,
        data=data,
        name=f"cleanup-{chat_id}-{'-'.join(str(m) for m in message_ids)}",
    )
