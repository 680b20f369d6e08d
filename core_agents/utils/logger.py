# Beginner summary: This file gives drivers and wrappers one call to get a console logger for agent activity.
from __future__ import annotations

import logging

# Example output:
# 2026-02-23 23:54:11,432 | DEBUG | core_agents.agents.base_agent | RepeatChoiceAgent -> training mode
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    """
    Return a console logger for an agent driver or wrapper.

    `level` takes either a logging constant or its name ("DEBUG", "info", ...),
    so it can come straight from a config file or command line.

    The agent modules themselves only use logging.getLogger(__name__); call
    get_logger("core_agents", "DEBUG") from the application to see their
    mode switches, since child loggers propagate up to it.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(name)
    # One handler per logger, however many times this is called.
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
