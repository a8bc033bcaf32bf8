# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 16:18
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : ChatHandle implementation backed by the Telegram Bot API
"""
import html
from typing import List, Sequence

from loguru import logger
from telegram import Bot, Message, User
from telegram.constants import ChatType, ParseMode
from telegram.error import TelegramError

from models import Participant
from taobot.services.participant_roster import ParticipantRoster

GROUP_CHAT_TYPES = (ChatType.GROUP, ChatType.SUPERGROUP)

# Telegram text limit per message
MAX_MESSAGE_LENGTH = 4096

# Invisible link text, one per mentioned user
MENTION_PLACEHOLDER = "\u200b"


def participant_from_user(user: User) -> Participant:
    return Participant(id=user.id, display_name=user.full_name or user.username or str(user.id))


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """Cut text into chunks of at most limit characters, preferring line breaks"""
    chunks = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        chunks.append(text[:cut])
        text = text[cut:].lstrip("\n")
    if text or not chunks:
        chunks.append(text)
    return chunks


def render_mentions(text: str, mentions: Sequence[int]) -> str:
    links = "".join(f'<a href="tg://user?id={uid}">{MENTION_PLACEHOLDER}</a>' for uid in mentions)
    return f"{html.escape(text)}{links}"


class TelegramChat:
    def __init__(self, message: Message, bot: Bot, roster: ParticipantRoster):
        self._message = message
        self._bot = bot
        self._roster = roster

    @property
    def chat_id(self) -> int:
        return self._message.chat_id

    @property
    def is_group(self) -> bool:
        return self._message.chat.type in GROUP_CHAT_TYPES

    async def reply(self, text: str) -> List[Message]:
        return [await self._message.reply_text(chunk) for chunk in split_message(text)]

    async def _seed_roster(self):
        try:
            administrators = await self._bot.get_chat_administrators(self.chat_id)
        except TelegramError as e:
            logger.warning(f"Failed to fetch administrators of chat {self.chat_id}: {e}")
            return

        self._roster.add_many(
            self.chat_id,
            [participant_from_user(admin.user) for admin in administrators if not admin.user.is_bot],
        )
        self._roster.mark_seeded(self.chat_id)

    async def participants(self) -> List[Participant]:
        if not self._roster.is_seeded(self.chat_id):
            await self._seed_roster()
        return self._roster.members(self.chat_id)

    async def send_message(self, text: str, mentions: Sequence[int]) -> Message:
        return await self._bot.send_message(
            chat_id=self.chat_id, text=render_mentions(text, mentions), parse_mode=ParseMode.HTML
        )
