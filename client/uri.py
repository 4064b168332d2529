import httpx

from constants import URL_SEPARATOR
from exceptions import UriResolutionError


def _parse(value: str) -> httpx.URL | None:
    if any(char.isspace() or not char.isprintable() for char in value):
        return None
    try:
        return httpx.URL(value)
    except httpx.InvalidURL:
        return None


def normalize_base_url(value: str | None) -> httpx.URL | None:
    """Turn a configured base endpoint into an absolute URL ending in `/`.

    Args:
        value: The configured base endpoint.

    Returns:
        Absolute base URL ending with a separator, or None when the value is
        blank or not an absolute URL.

    """
    if value is None or not value.strip():
        return None

    value = value.strip()
    if not value.endswith(URL_SEPARATOR):
        value += URL_SEPARATOR

    url = _parse(value)
    if url is None or not url.is_absolute_url:
        return None
    return url


def resolve_uri(base_url: httpx.URL | None, path: str) -> httpx.URL:
    """Resolve the target URI of a request.

    Args:
        base_url: The normalized base endpoint, if any.
        path: An absolute URI or a reference relative to the base endpoint.

    Returns:
        The absolute request URI.

    Raises:
        UriResolutionError: If the path is malformed, or relative without a
            base endpoint.

    """
    url = _parse(path)
    if url is None:
        raise UriResolutionError(message=f"Malformed request URI: {path!r}")

    if url.is_absolute_url:
        return url

    if base_url is None:
        raise UriResolutionError(
            message=f"Relative request URI {path!r} requires a base URL"
        )
    return base_url.join(url)
