"""Project-wide logging utilities that honour `MapConfig`."""

import logging
from typing import Optional

from . import config as pb_config


def get_logger(name: Optional[str] = None,
               config: Optional[pb_config.MapConfig] = None) -> logging.Logger:
    """Return a logger configured according to the map configuration.

    Without a config the process-wide level is applied. An explicit
    config belongs to one map and loggers are shared between maps, so it
    can only lower the logger's level; each map filters its own records
    against its config (see ``PersistentMap``).

    Args:
        name: Dotted suffix under the ``persistentbst`` namespace
        config: Per-map configuration (defaults to the environment-derived one)

    Returns:
        logging.Logger named ``persistentbst`` or ``persistentbst.<name>``
    """
    logger_name = "persistentbst" if name is None else f"persistentbst.{name}"
    logger = logging.getLogger(logger_name)
    if config is None:
        logger.setLevel(pb_config.default_config().log_level)
        return logger

    level = logging.getLevelName(config.log_level)
    if logger.level == logging.NOTSET or level < logger.level:
        logger.setLevel(level)
    return logger
