import logging

from mobile_chat.components.logger.logger_interface import LoggerInterface

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Logger(LoggerInterface):
    """Hands out stdlib loggers that share one handler and level."""

    def __init__(self, log_format: str | None = None, log_level: str = "INFO") -> None:
        self.log_format: str = log_format or DEFAULT_LOG_FORMAT
        self.log_level: int = self._parse_level(log_level)
        self._handler: logging.Handler = logging.StreamHandler()
        self._handler.setFormatter(logging.Formatter(self.log_format))

    @staticmethod
    def _parse_level(log_level: str) -> int:
        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            raise ValueError(f"Invalid log level: {log_level}")
        return level

    def get_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.log_level)
        if self._handler not in logger.handlers:
            logger.addHandler(self._handler)
        logger.propagate = False
        return logger
