from schemas.request import RequestDescriptor
from schemas.result import ApiResult

__all__ = ["ApiResult", "RequestDescriptor"]
