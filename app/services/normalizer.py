"""Target URL normalisation and hostname derivation."""

from urllib.parse import urlparse

DEFAULT_SCHEME_PREFIX = "http://"


class InvalidTargetUrl(ValueError):
    """Raised when no hostname can be derived from the target URL."""


def normalize_url(raw_url: str) -> str:
    """Return *raw_url* with ``http://`` prepended unless it already starts with ``http``.

    This is a purely syntactic transform: ``example.com`` becomes
    ``http://example.com`` while ``https://example.com`` and even
    ``httpbin.org`` (which already starts with ``http``) are left untouched.
    """
    if raw_url.startswith("http"):
        return raw_url
    return f"{DEFAULT_SCHEME_PREFIX}{raw_url}"


def target_hostname(url: str) -> str:
    """Return the lower-cased hostname of *url*.

    Raises:
        InvalidTargetUrl: if *url* cannot be parsed or has no hostname.
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError as exc:
        raise InvalidTargetUrl(f"Invalid URL: {url}") from exc
    if not hostname:
        raise InvalidTargetUrl(f"Invalid URL: {url}")
    return hostname
