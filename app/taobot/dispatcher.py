# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 17:05
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Route classified commands to the services handling them
"""
from loguru import logger

from models import (
    BroadcastCommand,
    Command,
    InboundMessage,
    PromptCommand,
    TranslateCommand,
)
from prompts import GROUP_ONLY_REPLY, PROMPT_USAGE_HINT, TRANSLATE_USAGE_HINT
from taobot.services.broadcast_service import GroupBroadcaster
from taobot.services.command_parser import parse_command
from taobot.services.prompt_responder import PromptResponder


class CommandDispatcher:
    def __init__(self, responder: PromptResponder, broadcaster: GroupBroadcaster):
        self._responder = responder
        self._broadcaster = broadcaster

    async def dispatch(self, message: InboundMessage) -> Command:
        """Handle one inbound message. Returns the command it was classified as."""
        command = parse_command(message.body)
        chat = message.chat

        if isinstance(command, PromptCommand):
            if not command.prompt:
                logger.info("Empty prompt command, replying with usage hint")
                await chat.reply(PROMPT_USAGE_HINT)
            else:
                await self._responder.respond(command.prompt, chat)

        elif isinstance(command, BroadcastCommand):
            if chat.is_group:
                await self._broadcaster.broadcast(chat)
            else:
                logger.info("Broadcast requested outside of a group chat")
                await chat.reply(GROUP_ONLY_REPLY)

        elif isinstance(command, TranslateCommand):
            if not command.source_text:
                logger.info("Translate command without source text, replying with usage hint")
                await chat.reply(TRANSLATE_USAGE_HINT)
            else:
                await self._responder.respond(
                    command.source_text, chat, target_language=command.target_language
                )

        return command
