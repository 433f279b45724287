"""
Exceptions raised by the SERP extractors.

Absence of an optional field is never an error. These are reserved for
malformed required fields and bad configuration.
"""

from typing import List


class SerpExtractionError(Exception):
    """Base class for extraction failures."""
    pass


class ConfigurationError(SerpExtractionError):
    """Raised when extractor configuration is missing or invalid."""
    pass


class UnresolvableUrlError(SerpExtractionError):
    """Raised when a link that must be navigable has no resolvable URL."""

    def __init__(self, title: str, href: str = None, hostname: str = None):
        self.title = title
        self.href = href
        self.hostname = hostname
        super().__init__(
            f"Cannot resolve URL for '{title}' "
            f"(href={href!r}, hostname={hostname!r})"
        )


class RelatedQueriesError(SerpExtractionError):
    """
    Raised after a related-queries batch in which some anchors failed.

    Carries the items that did extract so callers can keep partial results.
    """

    def __init__(self, items: List, errors: List[UnresolvableUrlError]):
        self.items = items
        self.errors = errors
        super().__init__(
            f"{len(errors)} related quer{'y' if len(errors) == 1 else 'ies'} "
            f"without a resolvable URL ({len(items)} extracted)"
        )
