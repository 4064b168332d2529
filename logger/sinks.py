import sys
from datetime import datetime
from typing import Protocol, TextIO

import logfire

from constants import LOG_DATETIME_FORMAT
from enums import LoggerCategory


class LogSink(Protocol):
    def write_log(self, category: LoggerCategory, message: str) -> None: ...


class LogfireSink:
    """Forward log messages to logfire at the level matching their category."""

    def __init__(self, logfire_instance: logfire.Logfire | None = None):
        self._logfire = logfire_instance or logfire

    def write_log(self, category: LoggerCategory, message: str) -> None:
        # Messages are passed as an attribute so braces in payloads are not
        # treated as template placeholders.
        if category == LoggerCategory.ERROR:
            self._logfire.error("{message}", message=message)
        elif category == LoggerCategory.INFO:
            self._logfire.info("{message}", message=message)
        else:
            self._logfire.debug("{message}", message=message)


class ConsoleSink:
    """Write timestamped log lines to a text stream.

    Example:
        2017-05-24 19:40:55.025 +07:00 [Info] message

    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @staticmethod
    def format_message(
        category: LoggerCategory, message: str, now: datetime | None = None
    ) -> str:
        """Render a log line with a millisecond timestamp and UTC offset.

        Args:
            category: The log category.
            message: The message text.
            now: The timestamp to use, defaults to the current local time.

        Returns:
            Formatted log line.

        """
        now = now or datetime.now().astimezone()
        timestamp = now.strftime(LOG_DATETIME_FORMAT)[:-3]
        offset = now.strftime("%z")
        if offset:
            offset = f" {offset[:3]}:{offset[3:]}"
        return f"{timestamp}{offset} [{category}] {message}"

    def write_log(self, category: LoggerCategory, message: str) -> None:
        stream = self._stream or sys.stderr
        stream.write(self.format_message(category=category, message=message) + "\n")
        stream.flush()
