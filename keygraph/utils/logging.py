# keygraph/utils/logging.py
"""
Logging configuration manager for the keyboard graph compiler.
Implements a configurable logging system with:
  - Rotating file logs with size limits (10MB, 5 backups)
  - Console output with customizable levels
  - Timestamp-based log files
  - UTF-8 encoding support

Configuration options via config:
    logging:
        console_level: Minimum level for console output
        file_level: Minimum level for file output
        format: Log message format string
    paths:
        logs_dir: Directory for log files

Usage:
    manager = LoggingManager(config)
    manager.setup_logging()
    logger = LoggingManager.getLogger(__name__)
    logger.info("Message")
"""
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from pathlib import Path
from typing import Dict, Union, Optional
import traceback

from keygraph.utils.config import Config

class LoggingManager:
    def __init__(self, config: Union[Dict, Config, None] = None):
        """Initialize LoggingManager with config."""
        if config is None:
            config = Config()
        self.config = config if isinstance(config, Config) else Config(**config)
        self.log_file: Optional[Path] = None

    @classmethod
    def getLogger(cls, name: str) -> logging.Logger:
        """Get a logger instance."""
        return logging.getLogger(name)

    @staticmethod
    def handle_error(e: Exception,
                     context: str = "",
                     logger: Optional[logging.Logger] = None) -> None:
        """Standardized error handling with logging."""
        if logger is None:
            logger = logging.getLogger(__name__)

        error_msg = f"{context}: {str(e)}" if context else str(e)
        logger.error(error_msg)
        logger.debug(traceback.format_exc())

    def setup_logging(self) -> None:
        """Initialize and configure logging system with rotation."""
        try:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

            log_dir = Path(self.config.paths.logs_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

            root_logger = logging.getLogger()
            root_logger.setLevel(logging.DEBUG)
            root_logger.handlers.clear()

            root_logger.addHandler(self._create_file_handler(log_dir, timestamp))
            root_logger.addHandler(self._create_console_handler())

            logger = logging.getLogger(__name__)
            logger.info(f"Logging initialized - writing to {self.log_file}")
            logger.debug("Debug logging enabled")

        except Exception as e:
            # Fallback to basic configuration
            logging.basicConfig(
                level=logging.INFO,
                format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            logger = logging.getLogger(__name__)
            logger.error(f"Error setting up logging: {str(e)}")
            logger.debug(traceback.format_exc())

    def _create_file_handler(self, log_dir: Path, timestamp: str) -> logging.Handler:
        """Create rotating file handler with detailed formatting."""
        self.log_file = log_dir / f"keygraph_{timestamp}.log"
        file_handler = RotatingFileHandler(
            self.log_file,
            maxBytes=10*1024*1024,  # 10MB per file
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(getattr(logging, self.config.logging.file_level))
        file_handler.setFormatter(logging.Formatter(self.config.logging.format))
        return file_handler

    def _create_console_handler(self) -> logging.Handler:
        """Create console handler with standard formatting."""
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, self.config.logging.console_level))
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        return console_handler
