# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 15:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : In-memory group member tracking.

The Bot API has no "list members" method, so participants are collected from
what the bot observes: senders of group messages, chat member updates and the
administrator list of the chat.
"""
from typing import Dict, Iterable, List, Set

from loguru import logger

from models import Participant

ACTIVE_STATUSES = ("member", "administrator", "creator")


def is_active_member(chat_member) -> bool:
    """Restricted users count only while they are still in the chat"""
    if chat_member.status == "restricted":
        return bool(chat_member.is_member)
    return chat_member.status in ACTIVE_STATUSES


class ParticipantRoster:
    def __init__(self):
        # dicts keep first-seen order
        self._members: Dict[int, Dict[int, Participant]] = {}
        self._seeded_chats: Set[int] = set()

    def add(self, chat_id: int, participant: Participant):
        members = self._members.setdefault(chat_id, {})
        if participant.id not in members:
            members[participant.id] = participant
            logger.debug(f"Roster of chat {chat_id}: +{participant.id}")

    def add_many(self, chat_id: int, participants: Iterable[Participant]):
        for participant in participants:
            self.add(chat_id, participant)

    def remove(self, chat_id: int, user_id: int):
        if self._members.get(chat_id, {}).pop(user_id, None):
            logger.debug(f"Roster of chat {chat_id}: -{user_id}")

    def members(self, chat_id: int) -> List[Participant]:
        return list(self._members.get(chat_id, {}).values())

    def is_seeded(self, chat_id: int) -> bool:
        return chat_id in self._seeded_chats

    def mark_seeded(self, chat_id: int):
        self._seeded_chats.add(chat_id)

    def forget_chat(self, chat_id: int):
        self._members.pop(chat_id, None)
        self._seeded_chats.discard(chat_id)
