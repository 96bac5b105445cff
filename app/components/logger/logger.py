import logging
import sys

from app.components.logger.logger_interface import LoggerInterface

_ROOT_LOGGER_NAME = "vision_lab"


class Logger(LoggerInterface):
    def __init__(self, log_format: str, log_level: str) -> None:
        self.log_format = log_format
        self.log_level = log_level.upper()

        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Invalid log level: {log_level}")

        self._root = logging.getLogger(_ROOT_LOGGER_NAME)
        self._root.setLevel(level)

        # Re-bootstrapping must not stack handlers
        if not self._root.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(self.log_format))
            self._root.addHandler(handler)

    def get_logger(self, name: str) -> logging.Logger:
        return self._root.getChild(name)
