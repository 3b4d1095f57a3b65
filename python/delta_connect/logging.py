# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
from datetime import datetime
import logging
import colorlog
from typing_extensions import override

# below DEBUG; used to dump whole relation protos
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    "info": logging.INFO,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "debug": logging.DEBUG,
}


def str2level(level: str) -> int:
    return _LEVELS.get(level.lower(), TRACE)


class LogFormatter(colorlog.ColoredFormatter):
    @override
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None):
        ct = datetime.fromtimestamp(record.created).astimezone()
        return ct.strftime(datefmt or "%Y-%m-%d %H:%M:%S %z")


def init_logger(level: str, name: str | None = None) -> logging.Logger:
    """Attach a colored stderr handler to ``name`` (the root logger by default).

    Calling it again for the same logger only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(str2level(level))
    if any(isinstance(h, colorlog.StreamHandler) for h in logger.handlers):
        return logger
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        LogFormatter(
            "[%(asctime)s] %(bold)s [%(name)s:%(lineno)d] %(log_color)s %(levelname)s %(reset)s - %(message)s",
            log_colors={
                "TRACE": "light_black",
                "DEBUG": "light_black",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
            },
            secondary_log_colors={},
        )
    )
    logger.addHandler(handler)
    return logger

