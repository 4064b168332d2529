import httpx
import pytest

from client import classify, classify_exception, classify_response, classify_status_code
from enums import ApiResultStatus
from exceptions import PayloadDecodeError, RequestCancelledError, ResponseReadError

REQUEST = httpx.Request(method="GET", url="https://api.example.com/")


@pytest.mark.parametrize("status_code", [200, 201, 202, 204, 299])
def test_success_codes(status_code: int) -> None:
    assert classify_status_code(status_code) == ApiResultStatus.SUCCESS


@pytest.mark.parametrize("status_code", [401, 403])
def test_unauthorized_codes(status_code: int) -> None:
    assert classify_status_code(status_code) == ApiResultStatus.UNAUTHORIZED


@pytest.mark.parametrize("status_code", [100, 199, 300, 302, 400, 404, 409, 500, 503])
def test_other_codes_are_internal_problem(status_code: int) -> None:
    assert classify_status_code(status_code) == ApiResultStatus.INTERNAL_PROBLEM


def test_classify_response_uses_status_code() -> None:
    response = httpx.Response(status_code=403, request=REQUEST)

    assert classify_response(response) == ApiResultStatus.UNAUTHORIZED


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("Connection refused", request=REQUEST),
        httpx.ConnectTimeout("Timed out", request=REQUEST),
        httpx.ReadTimeout("Timed out", request=REQUEST),
        httpx.ReadError("Connection reset", request=REQUEST),
    ],
)
def test_connectivity_errors(error: Exception) -> None:
    assert classify_exception(error) == ApiResultStatus.NO_INTERNET_CONNECTION


@pytest.mark.parametrize(
    "error",
    [
        httpx.UnsupportedProtocol("Unsupported protocol", request=REQUEST),
        httpx.RemoteProtocolError("Bad response", request=REQUEST),
        httpx.PoolTimeout("No free connection", request=REQUEST),
        PayloadDecodeError(),
        ResponseReadError(),
        RequestCancelledError(),
        ValueError("boom"),
    ],
)
def test_other_errors_are_internal_problem(error: Exception) -> None:
    assert classify_exception(error) == ApiResultStatus.INTERNAL_PROBLEM


def test_classify_is_idempotent() -> None:
    outcomes = [
        httpx.Response(status_code=200, request=REQUEST),
        httpx.Response(status_code=401, request=REQUEST),
        httpx.Response(status_code=500, request=REQUEST),
        httpx.ConnectError("Connection refused", request=REQUEST),
        RuntimeError("boom"),
    ]

    first = [classify(outcome) for outcome in outcomes]
    second = [classify(outcome) for outcome in outcomes]

    assert first == second
    assert first == [
        ApiResultStatus.SUCCESS,
        ApiResultStatus.UNAUTHORIZED,
        ApiResultStatus.INTERNAL_PROBLEM,
        ApiResultStatus.NO_INTERNET_CONNECTION,
        ApiResultStatus.INTERNAL_PROBLEM,
    ]
