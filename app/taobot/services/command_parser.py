# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 10:12
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Classify raw message text into bot commands
"""
from typing import Callable, List, Optional, Tuple

from loguru import logger

from models import BroadcastCommand, Command, NoOp, PromptCommand, TranslateCommand

PROMPT_PREFIX = ".tao"
BROADCAST_KEYWORD = ".tagall"
TRANSLATE_KEYWORD = "translate to"


def _match_prompt(body: str, lowered: str) -> Optional[Command]:
    if not lowered.startswith(PROMPT_PREFIX):
        return None
    # The prompt keeps the sender's casing
    return PromptCommand(prompt=body[len(PROMPT_PREFIX) :].strip())


def _match_broadcast(body: str, lowered: str) -> Optional[Command]:
    if BROADCAST_KEYWORD not in lowered:
        return None
    return BroadcastCommand()


def _match_translate(body: str, lowered: str) -> Optional[Command]:
    if TRANSLATE_KEYWORD not in lowered:
        return None

    # Everything up to the next keyword occurrence names the language
    segment = lowered.split(TRANSLATE_KEYWORD)[1]
    source_text = lowered.replace(f"{TRANSLATE_KEYWORD}{segment}", "", 1).strip()
    return TranslateCommand(source_text=source_text, target_language=segment.strip())


# Evaluated in order, the first match wins
COMMAND_PRIORITY: List[Tuple[str, Callable[[str, str], Optional[Command]]]] = [
    ("prompt", _match_prompt),
    ("broadcast", _match_broadcast),
    ("translate", _match_translate),
]


def parse_command(body: str) -> Command:
    lowered = body.lower()
    for name, matcher in COMMAND_PRIORITY:
        if command := matcher(body, lowered):
            logger.debug(f"Message classified as {name} command")
            return command
    return NoOp()
