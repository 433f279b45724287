"""
Related Queries Extractor

Parses the "Related searches" block into title/URL pairs. Unlike every
other field on the page, a related query is useless without a navigable
link, so an anchor whose URL cannot be resolved is an error.
"""

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from serp_extract.dom import attr_or_none, node_text
from serp_extract.exceptions import RelatedQueriesError, UnresolvableUrlError
from serp_extract.models import RelatedItem
from serp_extract.url_resolver import resolve_absolute_url
from runner.logging_setup import get_logger

logger = get_logger("related_extractor")


# The container id moved from #brs to #bres on 2021-02-25. Both are queried
# together; a page carries one or the other.
RELATED_ANCHOR_SELECTOR = "#brs a, #bres a"


def parse_related_anchor(anchor: Tag, hostname: Optional[str]) -> RelatedItem:
    """
    Parse one related-query anchor.

    Raises:
        UnresolvableUrlError: If the anchor has no href or it cannot be made absolute
    """
    title = node_text(anchor)
    href = attr_or_none(anchor, "href")
    url = resolve_absolute_url(href, hostname)
    if url is None:
        raise UnresolvableUrlError(title, href=href, hostname=hostname)
    return RelatedItem(title=title, url=url)


def extract_related_queries(soup: BeautifulSoup, hostname: Optional[str] = None) -> List[RelatedItem]:
    """
    Extract related queries in page order.

    Every anchor is processed even when an earlier one fails.

    Args:
        soup: Parsed SERP
        hostname: Host to resolve relative links against

    Returns:
        List of RelatedItem

    Raises:
        RelatedQueriesError: If any anchor lacked a resolvable URL. The error
            carries the items that did extract and one UnresolvableUrlError
            per failed anchor.
    """
    items = []
    errors = []

    for anchor in soup.select(RELATED_ANCHOR_SELECTOR):
        try:
            items.append(parse_related_anchor(anchor, hostname))
        except UnresolvableUrlError as e:
            logger.warning(f"Skipping related query: {e}")
            errors.append(e)

    if errors:
        raise RelatedQueriesError(items, errors)

    logger.debug(f"Extracted {len(items)} related queries")
    return items
