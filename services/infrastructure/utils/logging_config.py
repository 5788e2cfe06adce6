"""
Logging configuration for MDResume application.

Handles:
- File handler with timestamped 72-hour rotation
- Console handler that tolerates closed streams
- Unified formatter with ANSI colors and a 4-letter source tag
"""

import os
import sys
import logging
import re
from logging.handlers import BaseRotatingHandler
from datetime import datetime, timedelta
from typing import Literal
from config.settings import config


_CLOSED_STREAM_PHRASES = (
    "closed file", "i/o operation", "bad file descriptor",
    "operation on closed", "stream is closed"
)


def _is_closed_stream_error(error: Exception) -> bool:
    error_str = str(error).lower()
    return any(phrase in error_str for phrase in _CLOSED_STREAM_PHRASES)


def _is_stream_usable(stream) -> bool:
    """
    Check if a stream can be written to without triggering errors.

    Safe to call on a closed stream.
    """
    if stream is None:
        return False
    try:
        if getattr(stream, 'closed', False):
            return False
        return hasattr(stream, 'write')
    except (AttributeError, ValueError, OSError):
        return False


class TimestampedRotatingFileHandler(BaseRotatingHandler):
    """
    File handler that starts a new timestamped log file every interval_hours.

    Each file is named after the start of its period, e.g.
    logs/app.2025-01-15_00-00-00.log
    """

    def __init__(self, base_filename, interval_hours=72, backup_count=10, encoding='utf-8'):
        self.base_filename = base_filename
        self.interval_hours = interval_hours
        self.backup_count = backup_count
        self.interval_seconds = interval_hours * 3600

        self.current_period_start = self._get_period_start()
        current_filename = self._get_current_filename()

        log_dir = os.path.dirname(current_filename)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        BaseRotatingHandler.__init__(self, current_filename, 'a', encoding=encoding, delay=False)
        self.next_rotation_time = self.current_period_start + timedelta(hours=interval_hours)

    def _get_period_start(self) -> datetime:
        seconds_since_epoch = (datetime.now() - datetime(1970, 1, 1)).total_seconds()
        periods_passed = int(seconds_since_epoch / self.interval_seconds)
        return datetime.fromtimestamp(periods_passed * self.interval_seconds)

    def _base_name(self) -> str:
        base_name = os.path.basename(self.base_filename)
        return base_name[:-4] if base_name.endswith('.log') else base_name

    def _get_current_filename(self) -> str:
        timestamp_str = self.current_period_start.strftime('%Y-%m-%d_%H-%M-%S')
        base_dir = os.path.dirname(self.base_filename) or '.'
        return os.path.join(base_dir, f"{self._base_name()}.{timestamp_str}.log")

    def shouldRollover(self, record):  # pylint: disable=invalid-name
        """Time-based rotation; the record is not inspected."""
        del record
        return datetime.now() >= self.next_rotation_time

    def doRollover(self):  # pylint: disable=invalid-name
        """Close the current file and open the next period's file."""
        if self.stream:
            self.stream.close()

        self._cleanup_old_files()

        self.current_period_start = self._get_period_start()
        self.next_rotation_time = self.current_period_start + timedelta(hours=self.interval_hours)
        self.baseFilename = self._get_current_filename()
        self.stream = self._open()

    def emit(self, record):
        """Emit a record, reopening the file once if the stream was closed."""
        if not _is_stream_usable(self.stream):
            try:
                self.stream = self._open()
            except (ValueError, OSError):
                return

        try:
            super().emit(record)
        except (ValueError, OSError, AttributeError, RuntimeError) as error:
            if not _is_closed_stream_error(error):
                raise
            try:
                self.stream = self._open()
                super().emit(record)
            except (ValueError, OSError, AttributeError, RuntimeError):
                return

    def _cleanup_old_files(self) -> None:
        """Remove old log files beyond backup_count."""
        base_dir = os.path.dirname(self.base_filename) or '.'
        prefix = self._base_name() + '.'

        log_files = []
        try:
            for filename in os.listdir(base_dir):
                if filename.startswith(prefix) and filename.endswith('.log'):
                    filepath = os.path.join(base_dir, filename)
                    try:
                        log_files.append((os.path.getmtime(filepath), filepath))
                    except OSError:
                        continue
        except OSError:
            return

        log_files.sort()
        if len(log_files) > self.backup_count:
            for _, filepath in log_files[:-self.backup_count]:
                try:
                    os.remove(filepath)
                except OSError:
                    pass


class SafeStreamHandler(logging.StreamHandler):
    """StreamHandler that drops records when its stream has been closed."""

    def emit(self, record):
        if not _is_stream_usable(self.stream):
            return
        try:
            super().emit(record)
        except (ValueError, OSError, AttributeError, RuntimeError) as error:
            if _is_closed_stream_error(error):
                return
            raise


class UnifiedFormatter(logging.Formatter):
    """Unified logging formatter with ANSI color support."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARN': '\033[33m',     # Yellow
        'ERROR': '\033[31m',    # Red
        'CRIT': '\033[35m',     # Magenta
        'RESET': '\033[0m',
        'BOLD': '\033[1m',
    }

    LEVELS = {
        'DEBUG': 'DEBUG',
        'INFO': 'INFO',
        'WARNING': 'WARN',
        'ERROR': 'ERROR',
        'CRITICAL': 'CRIT'
    }

    # Logger name prefix -> source tag, first match wins
    SOURCE_TAGS = (
        ('__main__', 'MAIN'),
        ('routers', 'API'),
        ('services.markdown', 'MKDN'),
        ('services.export', 'EXPT'),
        ('services.infrastructure.utils.browser', 'BRWS'),
        ('services', 'SERV'),
        ('config', 'CONF'),
        ('uvicorn', 'SRVR'),
        ('asyncio', 'ASYN'),
    )

    def __init__(self, fmt=None, datefmt=None, style: Literal['%', '{', '$'] = '%', validate=True, **_kwargs):
        """Accepts and ignores Uvicorn's use_colors; colors are handled in format()."""
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)

    @classmethod
    def source_tag(cls, name: str) -> str:
        for prefix, tag in cls.SOURCE_TAGS:
            if name == prefix or name.startswith(prefix + '.'):
                return tag
        return name[:4].upper()

    def format(self, record):
        timestamp = self.formatTime(record, '%H:%M:%S')

        level_name = self.LEVELS.get(record.levelname, record.levelname)
        color = self.COLORS.get(level_name, '')
        reset = self.COLORS['RESET']
        if level_name == 'CRIT':
            colored_level = f"{self.COLORS['BOLD']}{color}{level_name.ljust(5)}{reset}"
        else:
            colored_level = f"{color}{level_name.ljust(5)}{reset}"

        source = self.source_tag(record.name).ljust(4)
        pid = os.getpid()

        message = re.sub(r' +', ' ', record.getMessage().lstrip())
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"[{timestamp}] {colored_level} | {source} | [{pid}] {message}"


class UvicornInvalidRequestFilter(logging.Filter):
    """Downgrade uvicorn 'Invalid HTTP request' warnings to DEBUG."""
    def filter(self, record):
        if record.levelno == logging.WARNING:
            message = record.getMessage()
            if 'Invalid HTTP request' in message or 'invalid request' in message.lower():
                record.levelno = logging.DEBUG
                record.levelname = 'DEBUG'
        return True


def setup_logging():
    """
    Configure all logging for the application.

    Sets up:
    - Console and file handlers with the unified formatter
    - Root level from LOG_LEVEL (VERBOSE_LOGGING forces DEBUG)
    - Uvicorn loggers routed through the same handlers
    - Quieter third-party HTTP and browser loggers
    """
    unified_formatter = UnifiedFormatter()
    handlers = []

    # stdout can be closed in uvicorn reload workers
    if _is_stream_usable(sys.stdout):
        console_handler = SafeStreamHandler(sys.stdout)
        console_handler.setFormatter(unified_formatter)
        handlers.append(console_handler)

    try:
        file_handler = TimestampedRotatingFileHandler(
            os.path.join("logs", "app.log"),
            interval_hours=72,
            backup_count=10,
            encoding="utf-8"
        )
        file_handler.setFormatter(unified_formatter)
        handlers.append(file_handler)
    except OSError:
        if not handlers:
            handlers.append(logging.NullHandler())

    if config.verbose_logging:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, config.log_level, logging.INFO)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    for uvicorn_logger_name in ['uvicorn', 'uvicorn.error']:
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers = []
        for handler in handlers:
            uvicorn_logger.addHandler(handler)
        uvicorn_logger.addFilter(UvicornInvalidRequestFilter())
        uvicorn_logger.propagate = False

    # Only show HTTP client internals when HTTP_DEBUG is set
    http_debug_enabled = os.getenv('HTTP_DEBUG', '').lower() in ('1', 'true', 'yes')
    http_level = logging.DEBUG if http_debug_enabled else logging.WARNING
    for name in ('httpx', 'httpcore', 'asyncio', 'markdown_it'):
        logging.getLogger(name).setLevel(http_level)

    logger = logging.getLogger(__name__)
    if os.getenv('UVICORN_WORKER_ID') is None:
        logger.debug("Logging initialized: %s", logging.getLevelName(log_level))

    return logger
