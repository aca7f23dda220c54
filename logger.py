"""
Logging module for the Slack mention bot
Provides leveled logging to the console and rotating log files
"""
import logging
import sys
import os
from datetime import datetime
from typing import Dict, List, Optional
from logging.handlers import QueueHandler, QueueListener
import queue
import threading

from concurrent_log_handler import ConcurrentRotatingFileHandler

from config import config


LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5

# Thread-safe singleton for logger initialization
_logger_lock = threading.Lock()
_initialized_loggers: Dict[str, logging.Logger] = {}
_queue_listener: Optional[QueueListener] = None
_log_queue: Optional[queue.Queue] = None


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for terminal output"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Work on a copy so file handlers sharing the record don't get escape codes
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        return super().format(record)


def _resolve_level(name: str) -> str:
    """Pick the configured level for a logger name"""
    if "slack" in name.lower():
        return config.slack_log_level
    return config.log_level


def _build_handlers(logs_dir: str) -> List[logging.Handler]:
    """Create console, app.log and error.log handlers"""
    handlers: List[logging.Handler] = []
    file_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler with colors (only if enabled)
    if config.console_logging_enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(console_handler)

    # Main app log file (all levels)
    app_handler = ConcurrentRotatingFileHandler(
        os.path.join(logs_dir, "app.log"),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT
    )
    app_handler.setFormatter(file_formatter)
    handlers.append(app_handler)

    # Error log file (ERROR and CRITICAL only)
    error_handler = ConcurrentRotatingFileHandler(
        os.path.join(logs_dir, "error.log"),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(file_formatter)
    handlers.append(error_handler)

    return handlers


def setup_logger(
    name: str = "mention_bot",
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    use_queue: bool = True  # Use QueueHandler pattern by default
) -> logging.Logger:
    """
    Set up a logger with specified configuration

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging to file
        use_queue: Whether to use QueueHandler for thread-safe logging

    Returns:
        Configured logger instance
    """
    global _queue_listener, _log_queue

    # Thread-safe check for existing logger
    with _logger_lock:
        if name in _initialized_loggers:
            return _initialized_loggers[name]

        logger = logging.getLogger(name)

        if level is None:
            level = _resolve_level(name)

        # Unknown level names fall back to INFO
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        # Prevent propagation to avoid duplicate messages
        logger.propagate = False

        # Clear any existing handlers to ensure clean setup
        logger.handlers.clear()

        # Create logs directory if it doesn't exist
        logs_dir = config.log_directory
        os.makedirs(logs_dir, exist_ok=True)

        if use_queue:
            if _log_queue is None:
                # Initialize the queue and listener once (shared across all loggers)
                _log_queue = queue.Queue(-1)  # Unbounded queue
                _queue_listener = QueueListener(
                    _log_queue, *_build_handlers(logs_dir), respect_handler_level=True
                )
                _queue_listener.start()
            logger.addHandler(QueueHandler(_log_queue))
        else:
            # Direct handler setup (less thread-safe but simpler)
            for handler in _build_handlers(logs_dir):
                logger.addHandler(handler)

        # Custom file handler if specified (in addition to defaults)
        if log_file:
            custom_handler = logging.FileHandler(log_file)
            custom_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(custom_handler)

        # Store the logger in our thread-safe cache
        _initialized_loggers[name] = logger

        return logger


class LoggerMixin:
    """Mixin class to provide logging capabilities to other classes"""

    @property
    def logger(self) -> logging.Logger:
        """Get or create a logger for this class"""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(
                name=f"mention_bot.{self.__class__.__name__}"
            )
        return self._logger

    def log_debug(self, message: str, **kwargs):
        """Log debug message"""
        self.logger.debug(message, extra=kwargs)

    def log_info(self, message: str, **kwargs):
        """Log info message"""
        self.logger.info(message, extra=kwargs)

    def log_warning(self, message: str, **kwargs):
        """Log warning message"""
        self.logger.warning(message, extra=kwargs)

    def log_error(self, message: str, exc_info=False, **kwargs):
        """Log error message"""
        self.logger.error(message, exc_info=exc_info, extra=kwargs)

    def log_critical(self, message: str, exc_info=False, **kwargs):
        """Log critical message"""
        self.logger.critical(message, exc_info=exc_info, extra=kwargs)


# Main logger instance
main_logger = setup_logger("mention_bot")


def log_session_start():
    """Log session start marker"""
    main_logger.info("=" * 60)
    main_logger.info(f"Session started at {datetime.now().isoformat()}")
    main_logger.info(f"Log Level: {config.log_level}")
    main_logger.info(f"Slack Log Level: {config.slack_log_level}")
    main_logger.info(f"Reply Channel: {config.slack_channel_id or '(not set)'}")
    main_logger.info("=" * 60)


def log_session_end():
    """Log session end marker"""
    main_logger.info("=" * 60)
    main_logger.info(f"Session ended at {datetime.now().isoformat()}")
    main_logger.info("=" * 60)

    # Stop the queue listener if it exists
    global _queue_listener
    if _queue_listener:
        _queue_listener.stop()
        _queue_listener = None
