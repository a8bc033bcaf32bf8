# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/20 22:31
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Seeded chat sessions on top of google-generativeai
"""
from typing import Iterable, List

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from loguru import logger

from models import GenerationSettings, SeedTurn


class GeminiSession:
    """One independent exchange with the model. Never shared between requests."""

    def __init__(self, chat_session):
        self._chat = chat_session

    async def send(self, text: str) -> str:
        response = await self._chat.send_message_async(text)
        return response.text


class GeminiSessionFactory:
    def __init__(
        self,
        api_key: str,
        model_name: str,
        system_instruction: str,
        generation_settings: GenerationSettings,
        seed: Iterable[SeedTurn],
    ):
        genai.configure(api_key=api_key)

        self.model_name = model_name
        self.generation_settings = generation_settings
        self.seed = tuple(seed)

        self._model = genai.GenerativeModel(
            model_name=model_name,
            system_instruction=system_instruction,
            generation_config=genai.GenerationConfig(
                temperature=generation_settings.temperature,
                top_p=generation_settings.top_p,
                top_k=generation_settings.top_k,
                max_output_tokens=generation_settings.max_output_tokens,
            ),
        )
        logger.debug(f"Gemini model ready: {model_name} (seed turns: {len(self.seed)})")

    def _seed_history(self) -> List[dict]:
        return [turn.to_content() for turn in self.seed]

    def start_session(self) -> GeminiSession:
        """Open a fresh chat preloaded with the full conversation seed"""
        return GeminiSession(self._model.start_chat(history=self._seed_history()))


def describe_upstream_error(err: BaseException) -> str:
    """Best-effort extraction of the error payload returned by the Google API"""
    if isinstance(err, google_exceptions.GoogleAPICallError):
        if err.errors:
            return f"{err.code} {err.message} {err.errors}"
        return f"{err.code} {err.message}"
    return str(err)
