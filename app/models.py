# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/20 21:06
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Shared data model of the bot
"""

from enum import Enum
from typing import Any, List, Literal, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class GenerationSettings(BaseModel):
    """Sampling parameters applied to every model call."""

    model_config = ConfigDict(frozen=True)

    temperature: float = 0.4
    top_p: float = 0.95
    top_k: int = 64
    max_output_tokens: int = 2000


class SeedTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"]
    text: str

    def to_content(self) -> dict:
        return {"role": self.role, "parts": [self.text]}


class Participant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Platform identity, used as the mention target")
    display_name: str = Field(default="")


@runtime_checkable
class ReplyTarget(Protocol):
    async def reply(self, text: str) -> Any: ...


@runtime_checkable
class ChatHandle(ReplyTarget, Protocol):
    """What the bot needs from the chat a message arrived in."""

    @property
    def is_group(self) -> bool: ...

    async def participants(self) -> Sequence[Participant]: ...

    async def send_message(self, text: str, mentions: Sequence[int]) -> Any: ...


class InboundMessage(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    body: str
    chat: Any = Field(description="ChatHandle of the originating chat, also the reply target")


class LifecycleEvent(str, Enum):
    AUTHENTICATED = "authenticated"
    """
    The bot token was accepted by the platform
    """

    READY = "ready"
    """
    Updates are being received
    """

    DISCONNECTED = "disconnected"
    """
    Update delivery stopped
    """

    AUTH_FAILURE = "auth_failure"
    """
    The platform rejected the bot token
    """


class CommandType(str, Enum):
    PROMPT = "prompt"
    BROADCAST = "broadcast"
    TRANSLATE = "translate"
    NOOP = "noop"


class Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: CommandType


class PromptCommand(Command):
    type: Literal[CommandType.PROMPT] = CommandType.PROMPT
    prompt: str = Field(description="Text after the command prefix, may be empty")


class BroadcastCommand(Command):
    type: Literal[CommandType.BROADCAST] = CommandType.BROADCAST


class TranslateCommand(Command):
    type: Literal[CommandType.TRANSLATE] = CommandType.TRANSLATE
    source_text: str
    target_language: str


class NoOp(Command):
    type: Literal[CommandType.NOOP] = CommandType.NOOP


BatchPlan = List[List[Participant]]
