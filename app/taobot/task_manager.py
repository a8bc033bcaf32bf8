# -*- coding: utf-8 -*-
"""
Task registry for non-blocking message processing
"""
import asyncio
from typing import Awaitable, Set

from loguru import logger


class BackgroundTasks:
    """Keeps a strong reference to every in-flight task and reports their failures."""

    def __init__(self):
        self._active_tasks: Set[asyncio.Task] = set()

    def __len__(self) -> int:
        return len(self._active_tasks)

    def spawn(self, coro: Awaitable[None], name: str = "unknown") -> asyncio.Task:
        """
        Run a coroutine as a background task.

        Failures are the top-level boundary of the bot: they are logged with a
        traceback and never re-raised.
        """
        task = asyncio.create_task(self._execute(coro, name), name=name)
        self._active_tasks.add(task)
        logger.info(f"Started non-blocking {name} task (Active tasks: {len(self._active_tasks)})")
        return task

    async def _execute(self, coro: Awaitable[None], name: str):
        current_task = asyncio.current_task()
        try:
            await coro
            logger.debug(f"Completed {name} task")
        except Exception as e:
            logger.exception(f"Error in {name} task: {e}")
        finally:
            if current_task:
                self._active_tasks.discard(current_task)

    async def drain(self, timeout: float) -> bool:
        """
        Let in-flight tasks finish within timeout, cancel whatever is left.

        Returns:
            True if nothing had to be cancelled
        """
        if not self._active_tasks:
            return True

        logger.info(f"Draining {len(self._active_tasks)} message tasks (timeout {timeout}s)")
        _, pending = await asyncio.wait(set(self._active_tasks), timeout=timeout)
        if not pending:
            return True

        logger.warning(f"Cancelling {len(pending)} message tasks still running after {timeout}s")
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        return False
