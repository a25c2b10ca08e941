"""
Request URL Validators

This module decides whether an incoming request URL is acceptable.
Validation is a pure function of its input: it never raises and never
logs. Callers get back either a ``Valid`` or an ``Invalid`` result and
decide what to do with it.

Checks, in order (first failure wins):
- Presence and type
- Length (DoS protection)
- Structural parse
- Protocol (HTTPS only)
- Domain allow-list (optional, disabled unless a domain set is passed)
- Suspicious content patterns, matched against the raw string

Security Considerations:
- Pattern matching runs on the raw, unparsed URL so that query strings
  and fragments are screened too
- The pattern list is a denylist and therefore incomplete; enable the
  domain allow-list for a structural guarantee
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

MAX_URL_LENGTH = 2048
ALLOWED_SCHEME = "https"

# Schemes that carry an authority component and must have a host
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Characters left as-is when normalizing, besides letters, digits and "_.-~"
PATH_SAFE = "!$%&'()*+,/:;=@[\\]^|"
QUERY_SAFE = "!$%&()*+,/:;=?@[\\]^`{|}"
FRAGMENT_SAFE = "!#$%&'()*+,/:;=?@[\\]^{|}"

SUSPICIOUS_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"javascript:",
        r"data:",
        r"vbscript:",
        r"<script",
        r"on\w+=",
        r"\\x",
        r"%00",
    )
)


@dataclass(frozen=True)
class Valid:
    """Accepted URL, in normalized form."""
    url: str

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Rejected URL. ``reason`` is meant for operators, not callers."""
    reason: str

    @property
    def is_valid(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]


def encode_host(hostname: str) -> str:
    """
    Return the ASCII form of a hostname, punycoding internationalized labels.

    Raises:
        ValueError: If a label cannot be IDNA-encoded
    """
    if hostname.isascii():
        return hostname
    try:
        return hostname.encode("idna").decode("ascii")
    except UnicodeError as e:
        raise ValueError(f"Invalid internationalized host: {e}") from e


def parse_url(url: str) -> SplitResult:
    """
    Structurally parse an absolute URL.

    Args:
        url: The URL string to parse

    Returns:
        The split URL components

    Raises:
        ValueError: If the string is not a well-formed absolute URL
    """
    parts = urlsplit(url.strip())

    if not parts.scheme:
        raise ValueError("URL has no scheme")

    if parts.scheme.lower() in DEFAULT_PORTS:
        hostname = parts.hostname
        if not hostname or any(char.isspace() for char in hostname):
            raise ValueError("URL has no valid host")
        encode_host(hostname)
        # Accessing .port raises ValueError for out-of-range or non-numeric ports
        parts.port

    return parts


def normalize_url(parts: SplitResult, query: Optional[str] = None) -> str:
    """
    Rebuild a URL string from parsed components.

    Lowercases the scheme and host, punycodes internationalized hosts,
    drops the scheme's default port, turns an empty path into "/" for
    schemes with an authority, percent-encodes characters that may not
    appear raw in the path, query or fragment, and omits empty query and
    fragment markers. Existing percent-escapes are left as they are.

    Args:
        parts: Components returned by parse_url()
        query: Replacement query string (defaults to parts.query)

    Returns:
        Normalized URL string
    """
    scheme = parts.scheme.lower()
    netloc = parts.netloc
    path = parts.path
    fragment = parts.fragment

    if query is None:
        query = parts.query

    if scheme in DEFAULT_PORTS:
        host = encode_host(parts.hostname)
        if ":" in host:
            host = f"[{host}]"

        port = parts.port
        if port is not None and port != DEFAULT_PORTS[scheme]:
            host = f"{host}:{port}"

        userinfo, has_userinfo, _ = netloc.rpartition("@")
        netloc = f"{userinfo}@{host}" if has_userinfo else host
        path = quote(path or "/", safe=PATH_SAFE)
        query = quote(query, safe=QUERY_SAFE)
        fragment = quote(fragment, safe=FRAGMENT_SAFE)

    return urlunsplit((scheme, netloc, path, query, fragment))


def is_host_allowed(hostname: str, allowed_domains: Iterable[str]) -> bool:
    """
    Check a hostname against a domain allow-list.

    A host is allowed when it equals an entry or is a subdomain of it
    ("api.example.com" matches "example.com", "badexample.com" does not).
    """
    hostname = hostname.lower()
    for domain in allowed_domains:
        domain = domain.lower()
        if hostname == domain or hostname.endswith("." + domain):
            return True
    return False


def validate_url(
    url,
    allowed_domains: Optional[Iterable[str]] = None,
    max_length: int = MAX_URL_LENGTH,
) -> ValidationResult:
    """
    Validate a request URL.

    Args:
        url: The candidate URL (anything; non-strings are rejected)
        allowed_domains: Permitted hosts/suffixes. None disables the check.
        max_length: Maximum allowed length (default: 2048 per RFC 7230)

    Returns:
        Valid with the normalized URL, or Invalid with a reason
    """
    if not url or not isinstance(url, str):
        return Invalid("URL is required and must be a string")

    if len(url) > max_length:
        return Invalid("URL exceeds maximum length")

    try:
        parts = parse_url(url)
    except ValueError:
        return Invalid("Malformed URL")

    if parts.scheme.lower() != ALLOWED_SCHEME:
        return Invalid("Invalid protocol. Only HTTPS is allowed")

    if allowed_domains is not None and not is_host_allowed(parts.hostname, allowed_domains):
        return Invalid("Domain not allowed")

    if any(pattern.search(url) for pattern in SUSPICIOUS_PATTERNS):
        return Invalid("URL contains suspicious content")

    return Valid(normalize_url(parts))
