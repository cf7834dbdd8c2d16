import re
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Schemes that need an authority (host) to be well-formed.
_HIERARCHICAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def is_valid_url(value) -> bool:
    """
    Absolute-URL well-formedness check.

    Accepts ``https://example.com`` and ``mailto:info@example.com``,
    rejects relative paths, bare words and anything containing whitespace.
    """
    if not isinstance(value, str):
        return False

    candidate = value.strip()

    if not candidate or any(ch.isspace() for ch in candidate):
        return False

    try:
        parts = urlsplit(candidate)
        # port is parsed lazily and raises on garbage
        parts.port
    except ValueError:
        return False

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False

    if parts.scheme.lower() in _HIERARCHICAL_SCHEMES:
        return bool(parts.hostname)

    return bool(candidate[len(parts.scheme) + 1:])
