# -*- coding: utf-8 -*-
"""
Chat member update handlers keeping the participant roster current
"""
from typing import List

from loguru import logger
from telegram import Update
from telegram.ext import ChatMemberHandler, ContextTypes

from taobot.services.participant_roster import ParticipantRoster, is_active_member
from taobot.services.telegram_chat import participant_from_user


def build_chat_member_handlers(roster: ParticipantRoster) -> List[ChatMemberHandler]:
    async def handle_chat_member_update(
        update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Track users joining or leaving a group"""
        chat_member_update = update.chat_member
        if not chat_member_update:
            return

        user = chat_member_update.new_chat_member.user
        chat_id = chat_member_update.chat.id
        old_status = chat_member_update.old_chat_member.status
        new_status = chat_member_update.new_chat_member.status

        if user.is_bot:
            return

        logger.debug(
            f"Chat member update in {chat_id}: user {user.id} {old_status} -> {new_status}"
        )

        was_active = is_active_member(chat_member_update.old_chat_member)
        is_active = is_active_member(chat_member_update.new_chat_member)

        if not was_active and is_active:
            logger.info(f"User {user.id} joined chat {chat_id}")
            roster.add(chat_id, participant_from_user(user))
        elif was_active and not is_active:
            logger.info(f"User {user.id} left/removed from chat {chat_id}")
            roster.remove(chat_id, user.id)

    async def handle_my_chat_member_update(
        update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Forget a group once the bot is no longer part of it"""
        if not update.my_chat_member:
            return

        chat = update.my_chat_member.chat
        old_status = update.my_chat_member.old_chat_member.status
        new_status = update.my_chat_member.new_chat_member.status

        if old_status != new_status:
            logger.info(
                f"Bot membership changed in {chat.type} '{chat.title or chat.id}': "
                f"{old_status} -> {new_status}"
            )

        if not is_active_member(update.my_chat_member.new_chat_member):
            roster.forget_chat(chat.id)

    return [
        ChatMemberHandler(handle_chat_member_update, ChatMemberHandler.CHAT_MEMBER),
        ChatMemberHandler(handle_my_chat_member_update, ChatMemberHandler.MY_CHAT_MEMBER),
    ]
