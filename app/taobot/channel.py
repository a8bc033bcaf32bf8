# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 18:30
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Single inbound event stream between the platform and the dispatcher
"""
import asyncio
from typing import Awaitable, Callable, Union

from loguru import logger

from models import InboundMessage, LifecycleEvent
from taobot.task_manager import BackgroundTasks

Event = Union[InboundMessage, LifecycleEvent]

_CLOSED = object()


def log_lifecycle_event(event: LifecycleEvent):
    if event == LifecycleEvent.AUTHENTICATED:
        logger.success("Client is authenticated!")
    elif event == LifecycleEvent.READY:
        logger.success("Client is ready!")
    elif event == LifecycleEvent.DISCONNECTED:
        logger.warning("Client is disconnected!")
    elif event == LifecycleEvent.AUTH_FAILURE:
        logger.error("Client authentication failed!")


class EventChannel:
    """
    Platform callbacks publish, one consumer reads.

    Message events are handed to the message handler as independent background
    tasks so slow model calls never hold up the stream. Lifecycle events go to
    the lifecycle sink.
    """

    def __init__(
        self,
        on_message: Callable[[InboundMessage], Awaitable[object]],
        tasks: BackgroundTasks,
        on_lifecycle: Callable[[LifecycleEvent], None] = log_lifecycle_event,
    ):
        self._on_message = on_message
        self._on_lifecycle = on_lifecycle
        self._tasks = tasks
        self._queue: asyncio.Queue = asyncio.Queue()

    def publish(self, event: Event):
        self._queue.put_nowait(event)

    def close(self):
        """Stop the consumer once every event published so far has been routed"""
        self._queue.put_nowait(_CLOSED)

    async def run(self):
        while True:
            event = await self._queue.get()
            if event is _CLOSED:
                logger.debug("Event channel closed")
                return

            if isinstance(event, LifecycleEvent):
                self._on_lifecycle(event)
            elif isinstance(event, InboundMessage):
                self._tasks.spawn(self._on_message(event), name="handle_message")
            else:
                logger.warning(f"Dropping unknown event: {event!r}")
