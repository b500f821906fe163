"""
Structured event logging for codec operations.

Every encode/decode run through the command line is written as one line with
consistent columns, so a log can be scanned by eye or split on '|'.

Log Format:
    | Timestamp          | Level   | Event      | Size     | Data
    Example:
    [-] 2024-01-01T12:00:00Z | INFO    | ENCODE     | 3        | TWFu

Environment Variables:
    PRINT_CODEC_LOGS: "true"/"false" - Enable console output of logs
    B64_LOG_FILE: Path of the log file (default: logs/codec.log)
"""

import logging
import os
from datetime import datetime, timezone

from b64codec import config

HEADER = f"  | {'Timestamp':<20} | {'Level':<7} | {'Event':<12} | {'Size':<8} | {'Data'}\n"
HEADER += '~'*len(HEADER)

LOGGER_NAME = "b64codec.events"

class Level:
    """Log level constants for consistent level naming."""
    LEVEL_INFO = 'INFO'
    LEVEL_WARNING = 'WARNING'
    LEVEL_ERROR = 'ERROR'

class Event:
    """
    Event type constants.

    ENCODE/DECODE - Successful conversions
    DECODE_FAILED - Strict decoding rejected the input
    FILE_READ_ERR - Input file could not be read
    FILE_WRITE_ERR - Output file could not be written
    USAGE_ERROR - Bad command line arguments
    """
    ENCODE = 'ENCODE'
    DECODE = 'DECODE'
    DECODE_FAILED = 'DECODE_FAIL'
    FILE_READ_FAILED = 'FILE_READ_ERR'
    FILE_WRITE_FAILED = 'FILE_WRITE_ERR'
    USAGE_ERROR = 'USAGE_ERR'


class Logger:
    """Structured logger writing fixed-column lines to the codec log file."""

    def __init__(self, log_file=None):
        """
        Args:
            log_file: Path of the log file (default: B64_LOG_FILE setting)
        """
        self.log_file = log_file or config.log_file()
        self.LOG_TO_CONSOLE = config.print_logs()
        self._logger = logging.getLogger(LOGGER_NAME)
        self._handler = None

    def configure_logger(self):
        """
        Attach a file handler for the log file, writing the column header
        first if the file is new or empty.
        """
        log_dir = os.path.dirname(self.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        if not os.path.exists(self.log_file) or os.path.getsize(self.log_file) == 0:
            with open(self.log_file, 'w') as log_file:
                log_file.write(HEADER + '\n')

        if self.LOG_TO_CONSOLE:
            print(HEADER)

        target = os.path.abspath(self.log_file)
        for handler in self._logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
                return

        self._handler = logging.FileHandler(self.log_file, mode='a')
        self._handler.setFormatter(logging.Formatter('%(message)s'))
        self._logger.addHandler(self._handler)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

    def close(self):
        """Detach and close the handler this instance added in configure_logger."""
        if self._handler is None:
            return
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    def log_event(self, level, event, size=0, message='N/A'):
        """
        Log a codec event.

        Args:
            level: Log level from Level class
            event: Event type from Event class
            size: Input size in bytes or characters
            message: Additional event information, cut to 20 characters

        Symbols:
            [-] Info
            [!] Warning
            [x] Error
        """
        level_symbol = {
            Level.LEVEL_INFO: "[-]",
            Level.LEVEL_WARNING: "[!]",
            Level.LEVEL_ERROR: "[x]"
        }.get(level.upper(), "[-]")

        timestamp = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
        message = message.replace('\n', '')
        log_message = f"{level_symbol} {timestamp:<20} | {level:<7} | {event:<12} | {size:<8} | {message:.20s}"
        log_function = getattr(self._logger, level.lower(), self._logger.info)
        log_function(log_message)

        if self.LOG_TO_CONSOLE:
            print(log_message)
