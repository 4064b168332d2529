from enum import StrEnum, auto


class ApiResultStatus(StrEnum):
    SUCCESS = auto()
    NO_INTERNET_CONNECTION = auto()
    UNAUTHORIZED = auto()
    INTERNAL_PROBLEM = auto()
