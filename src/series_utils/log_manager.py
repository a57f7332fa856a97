import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from series_config.singleton import Singleton
from series_config.env_vars import EnvVars


class LogManager(metaclass=Singleton):

    def __init__(self, log_filename: str = "series_builder.log"):
        self._loggers: Dict[str, logging.Logger] = {}
        self._handler: logging.Handler | None = None
        log_path = EnvVars().log_path
        self._log_dir = Path(log_path) if log_path else None
        self._setup_base_config(log_filename)


    def _setup_base_config(self, log_filename: str):
        """Initialize the shared handler: rotating file when LOG_PATH is set, stderr otherwise."""
        if self._log_dir is not None:
            try:
                self._log_dir.mkdir(parents=True, exist_ok=True)
                self._handler = RotatingFileHandler(
                    self._log_dir / log_filename,
                    maxBytes=10485760,
                    backupCount=5
                )
            except OSError:
                self._handler = None

        if self._handler is None:
            self._handler = logging.StreamHandler()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s - [%(filename)s:%(lineno)d]'
        )
        self._handler.setFormatter(formatter)


    @staticmethod
    def _resolve_level(level) -> int:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
        return level

    def get_logger(self, name: str) -> logging.Logger:
        if name not in self._loggers:
            logger = logging.getLogger(name)
            logger.setLevel(self._resolve_level(EnvVars().log_level))

            # Remove any existing handlers
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)

            logger.addHandler(self._handler)

            # Prevent propagation to root logger
            logger.propagate = False

            self._loggers[name] = logger

        return self._loggers[name]
