"""
Organic Result Extractor

Parses unpaid results from a Google SERP:
- Title, URL, displayed URL, snippet and its emphasized keywords
- Sitelinks (three historical layouts, see sitelinks.py)
- Inline product info (rating, review count, price)

Result containers are found with an ordered chain of layout strategies.
Only the first layout that matches anything is used; results are never
merged across layouts.
"""

from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from serp_extract.dom import (
    attr_or_none,
    joined_text,
    node_text,
    select_first,
    select_visible,
    text_or_none,
)
from serp_extract.extractors.sitelinks import extract_organic_sitelinks
from serp_extract.layouts import LayoutStrategy, css, first_matching
from serp_extract.models import ProductInfo, SearchResult
from serp_extract.patterns import parse_product_info_text
from runner.logging_setup import get_logger

logger = get_logger("organic_extractor")


# Transient UI overlays (A/B tested action-menu dropdown) inside a result
OVERLAY_SELECTOR = "div.action-menu"

# Inline product info blob, pre-2021 and 2021-01 class names
PRODUCT_INFO_SELECTOR = ".dhIWPd, .fG8Fp"

SNIPPET_SELECTOR = ".IsZvec"
EMPHASIS_SELECTOR = ".IsZvec em, .IsZvec b"


def _select_2021_containers(soup: Tag) -> List[Tag]:
    # Matching one level deeper is more precise; step back up to the
    # container so both layouts hand the same shape to the parser.
    anchors = soup.select(".g .tF2Cxc > .yuRUbf")
    return [anchor.parent for anchor in anchors if anchor.parent is not None]


RESULT_LAYOUTS = (
    LayoutStrategy(name="legacy", select=css(".g .rc")),
    LayoutStrategy(name="2021-01", select=_select_2021_containers),
)


def extract_product_info(container: Tag, excluded: Sequence[Tag] = ()) -> Optional[ProductInfo]:
    """
    Rating, review count and price from a result's product-info blob.

    Returns:
        ProductInfo, or None when the result has no product-info block or
        nothing in it parses
    """
    blob = joined_text(select_visible(container, PRODUCT_INFO_SELECTOR, excluded), " ", excluded)
    if not blob:
        return None
    info = parse_product_info_text(blob)
    return None if info.is_empty() else info


def parse_organic_result(container: Tag) -> SearchResult:
    """
    Parse one normalized organic result container.

    Overlay menus are skipped at read time; the tree is not modified.
    Emphasized keywords keep page order; empty <em>/<b> texts are dropped.
    """
    excluded = container.select(OVERLAY_SELECTOR)

    snippets = select_visible(container, SNIPPET_SELECTOR, excluded)
    emphasized = [
        node_text(node, excluded)
        for node in select_visible(container, EMPHASIS_SELECTOR, excluded)
    ]

    return SearchResult(
        title=text_or_none(node_text(select_first(container, "h3", excluded), excluded)),
        url=attr_or_none(select_first(container, "a", excluded), "href"),
        displayed_url=text_or_none(node_text(select_first(container, "cite", excluded), excluded)),
        description=text_or_none(joined_text(snippets, excluded=excluded)),
        emphasized_keywords=[keyword for keyword in emphasized if keyword],
        site_links=extract_organic_sitelinks(container, excluded),
        product_info=extract_product_info(container, excluded),
    )


def extract_organic_results(soup: BeautifulSoup) -> List[SearchResult]:
    """
    Extract organic results in page order.

    Args:
        soup: Parsed SERP

    Returns:
        List of SearchResult, empty when no layout matched
    """
    layout, containers = first_matching(RESULT_LAYOUTS, soup)
    if layout is None:
        logger.debug("No organic result layout matched")
        return []

    results = [parse_organic_result(container) for container in containers]

    missing_urls = sum(1 for result in results if result.url is None)
    if missing_urls:
        logger.warning(f"{missing_urls} organic results without a link href")

    logger.debug(f"Organic layout '{layout.name}': {len(results)} results")
    return results
