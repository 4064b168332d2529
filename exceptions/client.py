from exceptions.base import BaseError


class UriResolutionError(BaseError):
    def __init__(self, message: str = "Request URI could not be resolved"):
        super().__init__(message=message)


class PayloadDecodeError(BaseError):
    def __init__(self, message: str = "Response payload could not be decoded"):
        super().__init__(message=message)


class PayloadEncodeError(BaseError):
    def __init__(self, message: str = "Request payload could not be encoded"):
        super().__init__(message=message)


class RequestCancelledError(BaseError):
    def __init__(self, message: str = "Request was cancelled"):
        super().__init__(message=message)


class ResponseReadError(BaseError):
    def __init__(self, message: str = "Response body could not be read"):
        super().__init__(message=message)
