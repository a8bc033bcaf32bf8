# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 14:25
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Mention every participant of a group in rate-limited batches
"""
import asyncio
from typing import Awaitable, Callable, Sequence

from loguru import logger

from models import BatchPlan, ChatHandle, Participant
from prompts import BROADCAST_TEXT


def plan_batches(participants: Sequence[Participant], batch_size: int) -> BatchPlan:
    """Split participants into ordered, contiguous chunks of at most batch_size"""
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return [
        list(participants[i : i + batch_size]) for i in range(0, len(participants), batch_size)
    ]


class GroupBroadcaster:
    def __init__(
        self,
        batch_size: int = 500,
        delay: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.batch_size = batch_size
        self.delay = delay
        self._sleep = sleep

    async def broadcast(self, chat: ChatHandle) -> None:
        """
        Send one "@everyone" message per batch, pausing between batches.

        Send failures propagate to the caller, remaining batches are skipped.
        """
        participants = await chat.participants()
        plan = plan_batches(participants, self.batch_size)
        logger.info(f"Broadcasting to {len(participants)} participants in {len(plan)} batches")

        for index, batch in enumerate(plan):
            await chat.send_message(BROADCAST_TEXT, mentions=[p.id for p in batch])
            logger.debug(f"Sent broadcast batch {index + 1}/{len(plan)} ({len(batch)} mentions)")

            if index + 1 < len(plan):
                await self._sleep(self.delay)
