import logging
from typing import Optional

from movie_catalog.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    def __init__(self, name: str = "movie_catalog", logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(name)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)
