# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/22 10:20
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
import asyncio
import json
import signal
import sys
from contextlib import suppress

from loguru import logger
from telegram import Update
from telegram.error import InvalidToken

from gemini import GeminiSessionFactory
from models import LifecycleEvent
from prompts import CONVERSATION_SEED
from settings import settings
from taobot.channel import EventChannel, log_lifecycle_event
from taobot.dispatcher import CommandDispatcher
from taobot.handlers import build_chat_member_handlers, build_message_handler
from taobot.services.broadcast_service import GroupBroadcaster
from taobot.services.http_server import build_http_server, create_http_app
from taobot.services.participant_roster import ParticipantRoster
from taobot.services.prompt_responder import PromptResponder
from taobot.task_manager import BackgroundTasks
from utils import init_log

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def build_dispatcher(system_instruction: str) -> CommandDispatcher:
    if not settings.GEMINI_API_KEY.get_secret_value():
        logger.warning("GEMINI_API_KEY is not set, every prompt will get the fallback reply")

    session_factory = GeminiSessionFactory(
        api_key=settings.GEMINI_API_KEY.get_secret_value(),
        model_name=settings.GEMINI_MODEL,
        system_instruction=system_instruction,
        generation_settings=settings.generation_settings,
        seed=CONVERSATION_SEED,
    )
    broadcaster = GroupBroadcaster(
        batch_size=settings.TAGALL_BATCH_SIZE, delay=settings.TAGALL_BATCH_DELAY
    )
    return CommandDispatcher(PromptResponder(session_factory), broadcaster)


def _install_shutdown_handlers(http_server) -> None:
    loop = asyncio.get_running_loop()

    def request_shutdown(signum: int):
        logger.info(f"Receiving {signal.Signals(signum).name}, shutting down...")
        http_server.should_exit = True

    for signum in SHUTDOWN_SIGNALS:
        # Not available on Windows event loops
        with suppress(NotImplementedError):
            loop.add_signal_handler(signum, request_shutdown, signum)


def _remove_shutdown_handlers() -> None:
    loop = asyncio.get_running_loop()
    for signum in SHUTDOWN_SIGNALS:
        with suppress(NotImplementedError):
            loop.remove_signal_handler(signum)


async def serve(system_instruction: str) -> None:
    """
    Run the Telegram poller, the event consumer and the HTTP listener until
    SIGINT / SIGTERM.

    Shutdown order: stop polling, stop the application, drain the event
    channel, then give in-flight message tasks SHUTDOWN_TIMEOUT seconds before
    cancelling them.
    """
    tasks = BackgroundTasks()
    roster = ParticipantRoster()
    dispatcher = build_dispatcher(system_instruction)

    channel = EventChannel(
        on_message=dispatcher.dispatch, tasks=tasks, on_lifecycle=log_lifecycle_event
    )
    consumer = asyncio.create_task(channel.run(), name="event_channel")

    application = settings.get_default_application()
    application.add_handler(build_message_handler(channel, roster))
    for handler in build_chat_member_handlers(roster):
        application.add_handler(handler)

    http_server = build_http_server(create_http_app(), settings.PORT)
    _install_shutdown_handlers(http_server)

    try:
        try:
            await application.initialize()
        except InvalidToken:
            channel.publish(LifecycleEvent.AUTH_FAILURE)
            raise
        channel.publish(LifecycleEvent.AUTHENTICATED)

        await application.start()
        await application.updater.start_polling(allowed_updates=Update.ALL_TYPES)
        channel.publish(LifecycleEvent.READY)

        logger.success(f"Server is running on port {settings.PORT}")
        await http_server.serve()
    finally:
        if application.updater and application.updater.running:
            await application.updater.stop()
        if application.running:
            await application.stop()
            channel.publish(LifecycleEvent.DISCONNECTED)
        await application.shutdown()

        channel.close()
        await consumer

        await tasks.drain(timeout=settings.SHUTDOWN_TIMEOUT)
        _remove_shutdown_handlers()


def main() -> None:
    """Start the bot."""
    init_log(level=settings.LOG_LEVEL, timezone=settings.LOG_TIMEZONE, log_dir=settings.LOG_DIR)

    sp = settings.model_dump(mode="json")

    s = json.dumps(sp, indent=2, ensure_ascii=False)
    logger.success(f"Loading settings: {s}")

    try:
        system_instruction = settings.load_system_instruction()
    except OSError as e:
        logger.error(f"Failed to load system instruction: {e}")
        sys.exit(1)

    try:
        asyncio.run(serve(system_instruction))
    except InvalidToken as e:
        logger.error(f"Telegram rejected the bot token: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
