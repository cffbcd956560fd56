"""Handlers shared by both bots."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from .messages import CALLBACK_ANSWER, CALLBACK_NOTICE

logger = logging.getLogger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised while handling an update."""
    logger.error("Exception while handling update %s", update, exc_info=context.error)


async def handle_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Acknowledge an inline button press and echo it into the chat.

    Args:
        update: Telegram update object containing the callback query.
        context: Bot context for sending the notice.
    """
    query = update.callback_query
    if query is None:
        return

    data = query.data or ""
    await query.answer(CALLBACK_ANSWER.format(data=data))

    if query.message is None:
        return

    username = query.from_user.username if query.from_user else None
    await context.bot.send_message(
        chat_id=query.message.chat.id,
        text=CALLBACK_NOTICE.format(username=username, data=data),
    )
