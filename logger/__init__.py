from logger.logger import Logger
from logger.setup import configure_logging
from logger.sinks import ConsoleSink, LogfireSink, LogSink

__all__ = ["ConsoleSink", "LogSink", "LogfireSink", "Logger", "configure_logging"]
