"""
URL Sanitizer for Logging

Turns any value into a string that is safe to write to logs:
- Sensitive query parameter values are replaced with a marker
- Overlong URLs are truncated
- Anything that is not a parseable URL becomes a fixed placeholder

sanitize_url() never raises.
"""

from typing import Iterable, Union
from urllib.parse import quote_plus, unquote_plus

from smmsg.core.validators import normalize_url, parse_url

SENSITIVE_PARAMS = frozenset({"password", "token", "key", "secret", "api_key", "auth"})
MAX_LOGGED_URL_LENGTH = 200

REDACTED = "[REDACTED]"
TRUNCATION_MARKER = "...[TRUNCATED]"
INVALID_URL = "[INVALID_URL]"
MALFORMED_URL = "[MALFORMED_URL]"


def redact_query(query: str, sensitive_params: Union[str, Iterable[str]] = SENSITIVE_PARAMS) -> str:
    """
    Replace the values of sensitive parameters in a raw query string.

    Parameter names are form-decoded and compared case-insensitively.
    Every other pair keeps its original position and encoding.

    Args:
        query: Raw query string, without the leading "?"
        sensitive_params: Parameter names to redact, in any case; a single
            name may be passed as a plain string

    Returns:
        The query string with sensitive values replaced by "%5BREDACTED%5D"
    """
    if isinstance(sensitive_params, str):
        sensitive_params = (sensitive_params,)
    sensitive_names = frozenset(name.lower() for name in sensitive_params)

    if not query:
        return query

    redacted_value = quote_plus(REDACTED)
    pairs = []
    for pair in query.split("&"):
        name = pair.partition("=")[0]
        if unquote_plus(name).lower() in sensitive_names:
            pair = f"{name}={redacted_value}"
        pairs.append(pair)

    return "&".join(pairs)


def sanitize_url(
    url,
    sensitive_params: Union[str, Iterable[str]] = SENSITIVE_PARAMS,
    max_length: int = MAX_LOGGED_URL_LENGTH,
) -> str:
    """
    Produce a log-safe representation of a URL.

    Redaction happens before reconstruction, and truncation last, so a
    long URL may be cut in the middle of a redaction marker.

    Args:
        url: The URL to sanitize (anything; non-strings give a placeholder)
        sensitive_params: Parameter names to redact, in any case; a single
            name may be passed as a plain string
        max_length: Length above which the result is truncated

    Returns:
        Sanitized URL, "[INVALID_URL]" or "[MALFORMED_URL]"
    """
    if not url or not isinstance(url, str):
        return INVALID_URL

    try:
        parts = parse_url(url)
    except ValueError:
        return MALFORMED_URL

    sanitized = normalize_url(parts, query=redact_query(parts.query, sensitive_params))

    if len(sanitized) > max_length:
        return sanitized[:max_length] + TRUNCATION_MARKER
    return sanitized
