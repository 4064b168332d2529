from http import HTTPStatus

import httpx

from enums import ApiResultStatus

UNAUTHORIZED_STATUS_CODES = frozenset({HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN})

# Raised by the transport before any response arrives: DNS failures, refused
# or reset connections and timeouts. Failures while reading a body are
# re-raised by the client as ResponseReadError and never reach this tuple.
CONNECTIVITY_ERRORS = (httpx.NetworkError, httpx.TimeoutException)

# Waiting for a free pooled connection is local exhaustion, not lost connectivity.
LOCAL_ERRORS = (httpx.PoolTimeout,)


def classify_status_code(status_code: int) -> ApiResultStatus:
    """Map an HTTP status code to a result status.

    Args:
        status_code: The HTTP status code of a received response.

    Returns:
        SUCCESS for 2xx, UNAUTHORIZED for 401/403, INTERNAL_PROBLEM otherwise.

    """
    if HTTPStatus.OK <= status_code < HTTPStatus.MULTIPLE_CHOICES:
        return ApiResultStatus.SUCCESS
    if status_code in UNAUTHORIZED_STATUS_CODES:
        return ApiResultStatus.UNAUTHORIZED
    return ApiResultStatus.INTERNAL_PROBLEM


def classify_response(response: httpx.Response) -> ApiResultStatus:
    return classify_status_code(status_code=response.status_code)


def classify_exception(error: BaseException) -> ApiResultStatus:
    """Map a dispatch failure to a result status.

    Args:
        error: The failure raised while dispatching a request.

    Returns:
        NO_INTERNET_CONNECTION for failures to reach the host, INTERNAL_PROBLEM
        for anything else, including pool timeouts.

    """
    if isinstance(error, LOCAL_ERRORS):
        return ApiResultStatus.INTERNAL_PROBLEM
    if isinstance(error, CONNECTIVITY_ERRORS):
        return ApiResultStatus.NO_INTERNET_CONNECTION
    return ApiResultStatus.INTERNAL_PROBLEM


def classify(outcome: httpx.Response | BaseException) -> ApiResultStatus:
    if isinstance(outcome, httpx.Response):
        return classify_response(response=outcome)
    return classify_exception(error=outcome)
