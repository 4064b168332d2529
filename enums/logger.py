from enum import StrEnum


class LoggerCategory(StrEnum):
    DEBUG = "Debug"
    INFO = "Info"
    ERROR = "Error"
