"""Process-wide logging setup: colored console lines and an optional warning log file."""

import os
import logging
from logging import Logger
from typing import Dict, Optional, Union
from src.utility.path_finder import Finder

LevelLike = Union[int, str]

RESET_COLOR = "\033[0m"
LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}

CONSOLE_FORMAT = "%(colored_levelname)s %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
TRUTHY = ("1", "true", "yes", "on")


class ColorFormatter(logging.Formatter):
    """Console formatter exposing `colored_levelname` to the format string."""

    def __init__(self, fmt: str = CONSOLE_FORMAT, colors: Optional[Dict[str, str]] = None):
        super().__init__(fmt)
        self.colors = LEVEL_COLORS if colors is None else colors

    def format(self, record: logging.LogRecord) -> str:
        label = f"{record.levelname}:".ljust(9)
        color = self.colors.get(record.levelname)
        record.colored_levelname = f"{color}{label}{RESET_COLOR}" if color else label
        return super().format(record)


def resolve_level(level: LevelLike) -> int:
    """Accept a logging constant or a level name such as 'debug'."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


class AppLogger:
    """
    Configure the root logger once; hand out named loggers everywhere else.

        AppLogger.from_env()                     # app bootstrap
        logger = AppLogger.get_logger(__name__)  # any module
    """

    _configured: bool = False

    @classmethod
    def init(
        cls,
        level: LevelLike = logging.INFO,
        log_to_file: bool = False,
        filename: str = "prompt_backend.log",
    ) -> None:
        """Install the handlers. Later calls are ignored."""
        if cls._configured:
            return
        cls._configured = True

        numeric_level = resolve_level(level)
        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColorFormatter())
        root_logger.addHandler(console_handler)

        if log_to_file:
            file_path = Finder().get_directory("logs") / filename
            file_handler = logging.FileHandler(file_path, encoding="utf-8")
            file_handler.setLevel(logging.WARNING)
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            root_logger.addHandler(file_handler)

    @classmethod
    def from_env(cls) -> None:
        """Configure from LOG_LEVEL (default INFO) and LOG_TO_FILE (default off)."""
        cls.init(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_to_file=os.getenv("LOG_TO_FILE", "false").strip().lower() in TRUTHY,
        )

    @staticmethod
    def get_logger(name: Optional[str] = None) -> Logger:
        """Named logger; use instead of logging.getLogger()."""
        return logging.getLogger(name if name is not None else __name__)
