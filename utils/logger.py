"""
Log Utils
"""
import logging
import logging.handlers
import os
import structlog
from typing import Optional, Any
from configs.settings import settings

class CustomLogger:
    """Custom Logger class, supports error parameters and structlog style"""

    def __init__(self, name: str = None):
        self._logger = logging.getLogger(name or __name__)
        self._struct_logger = structlog.get_logger(name or __name__)

        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
        self._logger.setLevel(log_level)

    def _log(self, level: int, message: str, error: Optional[Any] = None, **kwargs):
        if error is not None:
            kwargs["error"] = str(error)
        self._struct_logger.log(level, message, **kwargs)

    def debug(self, message: str, error: Optional[Any] = None, **kwargs):
        """Debug log"""
        self._log(logging.DEBUG, message, error, **kwargs)

    def info(self, message: str, error: Optional[Any] = None, **kwargs):
        """Info log"""
        self._log(logging.INFO, message, error, **kwargs)

    def warning(self, message: str, error: Optional[Any] = None, **kwargs):
        """Warning log"""
        self._log(logging.WARNING, message, error, **kwargs)

    def error(self, message: str, error: Optional[Any] = None, **kwargs):
        """Error log, attaches the traceback when called with an exception"""
        if isinstance(error, BaseException):
            kwargs.setdefault("exc_info", error)
        self._log(logging.ERROR, message, error, **kwargs)

    def critical(self, message: str, error: Optional[Any] = None, **kwargs):
        """Critical error log"""
        if isinstance(error, BaseException):
            kwargs.setdefault("exc_info", error)
        self._log(logging.CRITICAL, message, error, **kwargs)

    def exception(self, message: str, **kwargs):
        """Exception log (automatically includes stack information)"""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)

def setup_logging():
    """Setup logging configuration"""
    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # Human readable locally, one JSON object per line in CloudWatch
    renderer = structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handlers = []

    # File handler, off by default: Lambda only allows writes under /tmp
    if settings.log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.log_max_size,
            backupCount=settings.log_backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True  # The Lambda runtime installs its own root handler
    )
    logging.getLogger().setLevel(log_level)

    # botocore logs every request at DEBUG
    for noisy in ("botocore", "boto3", "urllib3", "PIL"):
        logging.getLogger(noisy).setLevel(max(log_level, logging.INFO))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger("setup").debug(
        "Logging setup completed - Level: %s, File: %s, Handlers: %d",
        settings.log_level, settings.log_file, len(handlers)
    )

def get_logger(name: str = None) -> CustomLogger:
    """Get custom logger"""
    return CustomLogger(name)

# Initialize logging
setup_logging()
