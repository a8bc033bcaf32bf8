# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 11:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Ask the model and deliver its answer to the chat
"""
from typing import Protocol

from loguru import logger

from gemini import describe_upstream_error
from models import ReplyTarget
from prompts import FALLBACK_REPLY, TRANSLATION_PROMPT_TEMPLATE

DEFAULT_LANGUAGE = "en"


class ModelSession(Protocol):
    async def send(self, text: str) -> str: ...


class SessionFactory(Protocol):
    def start_session(self) -> ModelSession: ...


class PromptResponder:
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    async def respond(
        self, prompt: str, reply_target: ReplyTarget, target_language: str = DEFAULT_LANGUAGE
    ) -> None:
        """
        Answer a prompt in a fresh seeded session.

        When a target language other than English is given, the answer is
        translated in a second turn of the same session and only the
        translation is delivered. Failures never leave this method: the user
        gets the fallback reply instead.

        Args:
            prompt: Non-empty user prompt
            reply_target: Where the final text is delivered
            target_language: Language name as typed by the user
        """
        try:
            session = self._session_factory.start_session()
            text = await session.send(prompt)

            if target_language and target_language != DEFAULT_LANGUAGE:
                logger.debug(f"Translating answer to {target_language}")
                text = await session.send(
                    TRANSLATION_PROMPT_TEMPLATE.format(target_language=target_language, text=text)
                )

            await reply_target.reply(text)
        except Exception as err:
            logger.error(f"Error generating response: {err}")
            logger.error(f"Error details: {describe_upstream_error(err)}")
            try:
                await reply_target.reply(FALLBACK_REPLY)
            except Exception as reply_err:
                logger.error(f"Failed to deliver fallback reply: {reply_err}")
