import httpx

from constants import UTF8
from logger import Logger


class DiagnosticTracer:
    """Debug tracing of requests and responses, enabled by `verbose`.

    Tracing only reads values that the dispatcher has already materialized,
    so it never changes what a call returns.
    """

    def __init__(self, logger: Logger, verbose: bool = False):
        self.logger = logger
        self.verbose = verbose

    def trace_request(self, request: httpx.Request) -> None:
        if not self.verbose:
            return
        self.logger.debug(f"{request.method} {request.url}")
        self.logger.debug(f"Headers: {self._format_headers(request.headers)}")

    def trace_payload(self, payload: bytes) -> None:
        if not self.verbose:
            return
        self.logger.debug(payload.decode(UTF8, errors="replace"))

    def trace_status(self, response: httpx.Response) -> None:
        if not self.verbose:
            return
        self.logger.debug(f"{response.status_code} {response.reason_phrase}".rstrip())

    def trace_body(self, response: httpx.Response) -> None:
        if not self.verbose:
            return
        self.logger.debug(response.text)

    def trace_exception(self, error: BaseException) -> None:
        if not self.verbose:
            return
        self.logger.debug(f"{type(error).__name__}: {error}")

    @staticmethod
    def _format_headers(headers: httpx.Headers) -> str:
        return "; ".join(f"{name}: {value}" for name, value in headers.items())
