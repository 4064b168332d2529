import copy
import traceback
from collections.abc import Iterable

from enums import LoggerCategory
from logger.sinks import LogfireSink, LogSink


class Logger:
    """Logging handle that fans every message out to all registered sinks.

    Each client holds its own handle. Loggers created with `child` share the
    parent's sink list, so `register_sinks` on either affects both.
    """

    def __init__(self, sinks: Iterable[LogSink] | None = None, name: str | None = None):
        self._sinks: list[LogSink] = list(sinks) if sinks else [LogfireSink()]
        self.name = name

    @property
    def sinks(self) -> list[LogSink]:
        return list(self._sinks)

    def register_sinks(self, *sinks: LogSink) -> None:
        """Replace the registered sinks.

        Args:
            sinks: The new sinks. Ignored when empty.

        """
        if sinks:
            self._sinks.clear()
            self._sinks.extend(sinks)

    def child(self, name: str) -> "Logger":
        """Create a logger that shares these sinks under a nested name.

        Args:
            name: Name appended to this logger's name, joined with a dot.

        Returns:
            Logger writing to the same sink list.

        """
        logger = copy.copy(self)
        logger.name = f"{self.name}.{name}" if self.name else name
        return logger

    def debug(self, message: str, *args: object) -> None:
        self.write(LoggerCategory.DEBUG, message, *args)

    def info(self, message: str, *args: object) -> None:
        self.write(LoggerCategory.INFO, message, *args)

    def error(self, message: str, *args: object) -> None:
        self.write(LoggerCategory.ERROR, message, *args)

    def exception(self, error: BaseException) -> None:
        """Log the innermost cause of an exception chain with its traceback.

        Args:
            error: The exception to log.

        """
        while error.__cause__ is not None:
            error = error.__cause__

        stack = "".join(traceback.format_tb(error.__traceback__))
        self.write(
            LoggerCategory.ERROR,
            f"Exception: {type(error).__name__}: {error} \n {stack}".rstrip(),
        )

    def write(self, category: LoggerCategory, message: str, *args: object) -> None:
        if args:
            message = message.format(*args)
        if self.name:
            message = f"{self.name}: {message}"

        for sink in self._sinks:
            sink.write_log(category=category, message=message)
