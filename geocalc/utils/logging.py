"""Logging utility for geocalc"""

__all__ = ['LOGGER', 'clear_warnings', 'warn_once']

import logging

LOGGER = logging.getLogger('geocalc')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def clear_warnings():
    """Forget every message logged by warn_once, so that each may be logged again"""
    _WARNINGS.clear()
