"""
URL resolution for links found on a SERP.

Related-search links are usually relative ("/search?q=..."), so they are
resolved against the hostname the page was fetched from.
"""

from typing import Optional
from urllib.parse import urljoin, urlparse


ABSOLUTE_SCHEMES = ("http", "https")


def resolve_absolute_url(href: Optional[str], hostname: Optional[str]) -> Optional[str]:
    """
    Resolve a possibly relative href against a hostname.

    Args:
        href: Raw href attribute value
        hostname: Host the SERP was served from, e.g. "www.google.com"

    Returns:
        str: Absolute URL, or None when href is empty, uses a non-http
        scheme, or is relative without a hostname to resolve it against
    """
    if not href:
        return None

    href = href.strip()
    if not href:
        return None

    scheme = urlparse(href).scheme
    if scheme in ABSOLUTE_SCHEMES:
        return href

    # Non-navigable schemes such as javascript: or mailto:
    if scheme:
        return None

    # Protocol-relative
    if href.startswith("//"):
        return f"https:{href}"

    if not hostname:
        return None

    base = hostname if "://" in hostname else f"https://{hostname}"
    return urljoin(f"{base.rstrip('/')}/", href)
