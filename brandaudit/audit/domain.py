"""Hostname normalization for comparing result links with an official site."""

import re
from urllib.parse import urlparse

_VALID_HOST_RE = re.compile(r"^[\w.\-:\[\]]+$")


def normalize_domain(raw: str) -> str:
    """
    Reduce a URL or bare host to a lowercase hostname without a leading "www.".

    Inputs that do not parse to a usable host come back lowercased verbatim.
    """
    raw = raw or ""
    candidate = raw if "http" in raw.lower() else f"https://{raw}"
    try:
        host = urlparse(candidate).hostname
    except ValueError:
        return raw.lower()

    if not host or not _VALID_HOST_RE.match(host):
        return raw.lower()

    host = host.lower()
    return host[4:] if host.startswith("www.") else host
