# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/22 17:44
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Tests for the Telegram update handlers
"""
from unittest.mock import AsyncMock, Mock

import pytest
from telegram import Chat, ChatMemberUpdated, Message, Update, User
from telegram.ext import ContextTypes

from models import InboundMessage, Participant
from taobot.channel import EventChannel
from taobot.handlers import build_chat_member_handlers, build_message_handler
from taobot.services.participant_roster import ParticipantRoster
from taobot.services.telegram_chat import TelegramChat


@pytest.fixture
def channel():
    return Mock(spec=EventChannel)


@pytest.fixture
def roster():
    return ParticipantRoster()


@pytest.fixture
def context():
    context = AsyncMock(spec=ContextTypes.DEFAULT_TYPE)
    context.bot = AsyncMock()
    return context


def _update(text=None, caption=None, chat_type="group", user_is_bot=False) -> Mock:
    chat = Mock(spec=Chat)
    chat.id = -100
    chat.type = chat_type

    user = Mock(spec=User)
    user.id = 42
    user.is_bot = user_is_bot
    user.full_name = "Hu Tao"
    user.username = "hutao"

    message = AsyncMock(spec=Message)
    message.text = text
    message.caption = caption
    message.chat = chat
    message.chat_id = chat.id

    update = Mock(spec=Update)
    update.effective_message = message
    update.effective_chat = chat
    update.effective_user = user
    return update


class TestMessageHandler:
    @pytest.mark.asyncio
    async def test_publishes_inbound_message(self, channel, roster, context):
        handler = build_message_handler(channel, roster)

        await handler.callback(_update(text=".tao hello"), context)

        channel.publish.assert_called_once()
        event = channel.publish.call_args.args[0]
        assert isinstance(event, InboundMessage)
        assert event.body == ".tao hello"
        assert isinstance(event.chat, TelegramChat)

    @pytest.mark.asyncio
    async def test_caption_is_used_as_body(self, channel, roster, context):
        await build_message_handler(channel, roster).callback(
            _update(caption="nice translate to german"), context
        )

        assert channel.publish.call_args.args[0].body == "nice translate to german"

    @pytest.mark.asyncio
    async def test_blank_message_is_ignored(self, channel, roster, context):
        await build_message_handler(channel, roster).callback(_update(text="   "), context)

        channel.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_group_sender_joins_roster(self, channel, roster, context):
        await build_message_handler(channel, roster).callback(_update(text="hi"), context)

        assert roster.members(-100) == [Participant(id=42, display_name="Hu Tao")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "chat_type, is_bot", [("private", False), ("group", True)]
    )
    async def test_private_or_bot_sender_not_tracked(
        self, channel, roster, context, chat_type, is_bot
    ):
        await build_message_handler(channel, roster).callback(
            _update(text="hi", chat_type=chat_type, user_is_bot=is_bot), context
        )

        assert roster.members(-100) == []


def _member_update(
    old_status: str, new_status: str, user_is_bot: bool = False, new_is_member: bool = True
) -> Mock:
    user = User(id=7, first_name="Om", is_bot=user_is_bot)

    chat_member = Mock(spec=ChatMemberUpdated)
    chat_member.chat = Mock(spec=Chat)
    chat_member.chat.id = -100
    chat_member.chat.type = "supergroup"
    chat_member.chat.title = "interns"
    chat_member.old_chat_member = Mock(status=old_status, user=user)
    chat_member.new_chat_member = Mock(status=new_status, user=user, is_member=new_is_member)

    update = Mock(spec=Update)
    update.chat_member = chat_member
    update.my_chat_member = chat_member
    return update


class TestChatMemberHandlers:
    @pytest.mark.asyncio
    async def test_join_and_leave(self, roster, context):
        member_handler, _ = build_chat_member_handlers(roster)

        await member_handler.callback(_member_update("left", "member"), context)
        assert [p.id for p in roster.members(-100)] == [7]

        await member_handler.callback(_member_update("member", "kicked"), context)
        assert roster.members(-100) == []

    @pytest.mark.asyncio
    async def test_restricted_member_still_in_chat_joins(self, roster, context):
        member_handler, _ = build_chat_member_handlers(roster)

        await member_handler.callback(
            _member_update("left", "restricted", new_is_member=True), context
        )

        assert [p.id for p in roster.members(-100)] == [7]

    @pytest.mark.asyncio
    async def test_restricted_user_outside_chat_is_not_a_participant(self, roster, context):
        member_handler, _ = build_chat_member_handlers(roster)

        await member_handler.callback(
            _member_update("left", "restricted", new_is_member=False), context
        )
        assert roster.members(-100) == []

        roster.add(-100, Participant(id=7))
        await member_handler.callback(
            _member_update("member", "restricted", new_is_member=False), context
        )
        assert roster.members(-100) == []

    @pytest.mark.asyncio
    async def test_bots_are_ignored(self, roster, context):
        member_handler, _ = build_chat_member_handlers(roster)

        await member_handler.callback(_member_update("left", "member", user_is_bot=True), context)

        assert roster.members(-100) == []

    @pytest.mark.asyncio
    async def test_bot_removed_from_group_forgets_roster(self, roster, context):
        _, my_member_handler = build_chat_member_handlers(roster)
        roster.add(-100, Participant(id=1))
        roster.mark_seeded(-100)

        await my_member_handler.callback(_member_update("member", "left"), context)

        assert roster.members(-100) == []
        assert not roster.is_seeded(-100)
