from enums.http import HttpMethod
from enums.logger import LoggerCategory
from enums.result import ApiResultStatus

__all__ = ["ApiResultStatus", "HttpMethod", "LoggerCategory"]
