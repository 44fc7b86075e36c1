# src/tagscan/utils/configure_logging.py
import logging
import sys
from typing import Dict, Optional, Union

from tagscan.utils.config_manager import config_manager

Level = Union[str, int]

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


def _to_level(level: Level, fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(
        general_level: Level = 'INFO',
        module_specific_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None,
        stream=None,
) -> logging.Handler:
    """
    Configures the root logger with a single stream handler, plus per-logger
    level overrides. Meant for host applications and scripts; tagscan never
    touches handlers on import.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    # Silenced loggers default to CRITICAL when the level name is unknown
    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))

    return handler


def configure_from_settings(stream=None) -> logging.Handler:
    """Configures logging with the level stored under 'logging.level'."""
    level = config_manager.get_nested("logging.level", "WARNING")
    return configure_logger(general_level=level, stream=stream)
