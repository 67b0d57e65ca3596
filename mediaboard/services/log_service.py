"""Logging service"""

import logging
from collections import deque
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List

from ..config import settings


class LogService:
    """Centralized logging service"""

    LOG_TYPES = ("error", "info")

    def __init__(self, log_dir: Path = None):
        self.log_dir = log_dir or settings.LOGS_DIR
        self.log_dir.mkdir(exist_ok=True, parents=True)

        self.error_logger = self._setup_logger("error", logging.ERROR)
        self.info_logger = self._setup_logger("info", logging.INFO)

    def _setup_logger(self, name: str, level: int) -> logging.Logger:
        """Setup a logger with rotating file handler"""
        logger = logging.getLogger(f"mediaboard.{name}")
        logger.setLevel(level)

        # Prevent duplicate handlers
        if logger.handlers:
            return logger

        # 10MB max, 3 backups
        handler = RotatingFileHandler(
            self.log_dir / f"{name}.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
        )
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

        logger.addHandler(handler)
        return logger

    def error(self, message: str, **kwargs):
        """Log error message"""
        self.error_logger.error(message, extra=kwargs)

    def warning(self, message: str, **kwargs):
        """Log a degraded-but-handled condition"""
        self.info_logger.warning(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message"""
        self.info_logger.info(message, extra=kwargs)

    def get_logs(self, log_type: str = "error", limit: int = 100) -> List[str]:
        """Read last N lines from log file"""
        if log_type not in self.LOG_TYPES:
            raise ValueError(f"Unknown log type: {log_type}")

        log_file = self.log_dir / f"{log_type}.log"
        if not log_file.exists():
            return []

        with open(log_file, "r") as f:
            tail = deque(f, maxlen=limit)
        return [line.rstrip("\n") for line in tail]


# Global log service instance
log_service = LogService()
