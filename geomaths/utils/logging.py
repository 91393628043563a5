"""Package-wide logger for geomaths"""

__all__ = ['LOGGER', 'set_log_level', 'warn_once']

import logging
from typing import Union

LOGGER = logging.getLogger('geomaths')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def set_log_level(level: Union[int, str]) -> None:
    """
    Sets the verbosity of the geomaths logger, e.g. 'INFO' to see which
    geodesic algorithm is in use.

    Args:
        level:
            A logging level name or number
    """
    LOGGER.setLevel(level)


def warn_once(warning: str, *args):
    """Logs a warning the first time a given (formatted) message is seen"""
    message = warning % args if args else warning
    if message not in _WARNINGS:
        LOGGER.warning(message)
        _WARNINGS.add(message)
