# -*- coding: utf-8 -*-
# Time       : 2025/8/20 22:10
# Author     : QIN2DIM
# GitHub     : https://github.com/QIN2DIM
# Description:
from __future__ import annotations

import sys
from pathlib import Path
from zoneinfo import ZoneInfo

from loguru import logger

STDOUT_FORMAT = (
    "<g>{time:YYYY-MM-DD HH:mm:ss}</g> | "
    "<lvl>{level:<8}</lvl>    | "
    "<c>{name}</c>:<c>{function}</c>:<c>{line}</c> | "
    "<n>{message}</n>"
)


def _localize(timezone: str):
    tz = ZoneInfo(timezone)

    def _filter(record):
        record["time"] = record["time"].astimezone(tz)
        return record

    return _filter


def init_log(level: str = "DEBUG", timezone: str = "UTC", log_dir: Path | None = None):
    """
    Route loguru to stdout and, when log_dir is given, to rotating files.

    runtime.log keeps everything down to TRACE, error.log only ERROR and above.
    """
    localize = _localize(timezone)

    logger.remove()
    logger.add(
        sink=sys.stdout,
        colorize=True,
        level=level.upper(),
        format=STDOUT_FORMAT,
        diagnose=False,
        filter=localize,
    )

    if log_dir:
        for filename, file_level in (("runtime.log", "TRACE"), ("error.log", "ERROR")):
            logger.add(
                sink=log_dir.joinpath(filename),
                level=file_level,
                rotation="5 MB",
                retention="7 days",
                encoding="utf8",
                diagnose=False,
                filter=localize,
            )
    return logger
