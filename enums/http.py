from enum import StrEnum


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
