"""
Colored console logging for quarrel.
Wraps a standard library logger so that library users can still configure
handlers and levels the usual way.
"""
import logging
import os
import sys
from enum import Enum


class Color(Enum):
    """ANSI color codes used for console output"""
    RESET = '\033[0m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'


class Logger:
    """
    Thin colored front end over logging.getLogger('quarrel').

    Usage:
        from quarrel.util.logger import logger, Color

        logger.print(Color.CYAN, "Some message")
        logger.warning("Something looks off")
    """

    def __init__(self, name: str = 'quarrel', level=None):
        self._logger = logging.getLogger(name)
        if level is None:
            level = os.environ.get('QUARREL_LOG_LEVEL')
        if level is not None:
            self.set_level(level)
        self.use_color = sys.stdout.isatty()

    def set_level(self, level):
        """
        Set the logging threshold.

        :param level: A logging level number or name (e.g. 'DEBUG')
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.WARNING
        self._logger.setLevel(level)

    @property
    def level(self) -> int:
        return self._logger.level

    def _colorize(self, color: Color, msg: str) -> str:
        if not self.use_color:
            return msg
        return f"{color.value}{msg}{Color.RESET.value}"

    def print(self, color: Color, msg: str):
        """Print a message to stdout in the given color, regardless of level"""
        print(self._colorize(color, msg))

    def debug(self, msg: str):
        self._logger.debug(msg)

    def info(self, msg: str):
        self._logger.info(msg)

    def success(self, msg: str):
        self._logger.info(self._colorize(Color.GREEN, msg))

    def warning(self, msg: str):
        self._logger.warning(self._colorize(Color.YELLOW, msg))

    def error(self, msg: str):
        self._logger.error(self._colorize(Color.RED, msg))


logger = Logger()
