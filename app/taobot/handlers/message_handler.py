# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 19:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Turn Telegram messages into inbound events
"""
from loguru import logger
from telegram import Update
from telegram.ext import ContextTypes, MessageHandler, filters

from models import InboundMessage
from taobot.channel import EventChannel
from taobot.services.participant_roster import ParticipantRoster
from taobot.services.telegram_chat import (
    GROUP_CHAT_TYPES,
    TelegramChat,
    participant_from_user,
)


def _track_sender(update: Update, roster: ParticipantRoster):
    chat = update.effective_chat
    user = update.effective_user
    if not chat or not user or user.is_bot:
        return
    if chat.type in GROUP_CHAT_TYPES:
        roster.add(chat.id, participant_from_user(user))


def build_message_handler(channel: EventChannel, roster: ParticipantRoster) -> MessageHandler:
    async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.effective_message
        if not message:
            return

        _track_sender(update, roster)

        body = message.text or message.caption or ""
        if not body.strip():
            return

        logger.debug(f"Inbound message in chat {message.chat_id}: {body[:64]!r}")
        channel.publish(
            InboundMessage(body=body, chat=TelegramChat(message, context.bot, roster))
        )

    return MessageHandler(
        (filters.TEXT | filters.CAPTION) & ~filters.UpdateType.EDITED, handle_message
    )
