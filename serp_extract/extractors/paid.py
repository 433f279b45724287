"""
Paid Result Extractor

Parses text ads from the top/bottom ad regions of a Google SERP. Ads look
like organic results but are anchored differently and carry tracking links
that must not be mistaken for sitelinks.
"""

from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from serp_extract.dom import (
    attr_or_none,
    is_within,
    joined_text,
    node_text,
    parent_if,
    select_first,
    select_visible,
    text_or_none,
)
from serp_extract.extractors.sitelinks import sibling_description
from serp_extract.layouts import LayoutStrategy, css, largest_matching
from serp_extract.models import Ad, SiteLink
from runner.logging_setup import get_logger

logger = get_logger("paid_extractor")


# Listed newest first: largest_matching() gives ties to the earlier entry
AD_LAYOUTS = (
    LayoutStrategy(name="current", select=css("#tads > div")),
    LayoutStrategy(name="legacy", select=css(".ads-fr")),
)

# Seller-rating widget, its links are not sitelinks
SELLER_RATING_SELECTOR = "w-ad-seller-rating"

# Attributes that mark the main ad link and tracking anchors
TRACKING_ATTRIBUTES = ("data-pcu", "ping")

HEADING_SELECTOR = "div[role=heading]"

# The displayed URL is the third span under the ad link; the first two hold
# the "Ad" label. Observed on the 2021 layout only, do not generalize.
AD_LABEL_SPAN_OFFSET = 2
DISPLAYED_URL_SPANS_SELECTOR = ":scope > div > span"

DESCRIPTION_SELECTOR = ".MUxGbd.yDYNvb.lyLwlc > span"
# Older layouts: the description is the second node of this chain
POSITIONAL_DESCRIPTION_SELECTOR = ":scope > div > div > div > div > div"
POSITIONAL_DESCRIPTION_INDEX = 1


def _is_tracking_anchor(anchor: Tag) -> bool:
    return any(anchor.has_attr(name) for name in TRACKING_ATTRIBUTES)


def extract_ad_sitelinks(
    ad: Tag,
    primary_link: Optional[Tag] = None,
    excluded: Sequence[Tag] = (),
) -> List[SiteLink]:
    """
    Sitelinks of one ad: anchors that are neither tracking links nor the ad link.
    """
    site_links = []
    for anchor in select_visible(ad, "a", excluded):
        if _is_tracking_anchor(anchor) or anchor is primary_link:
            continue
        site_links.append(SiteLink(
            title=text_or_none(node_text(anchor, excluded)),
            url=attr_or_none(anchor, "href"),
            description=sibling_description(anchor, excluded),
        ))
    return site_links


def _description_nodes(ad: Tag, excluded: Sequence[Tag]) -> List[Tag]:
    nodes = select_visible(ad, DESCRIPTION_SELECTOR, excluded)
    if nodes:
        return nodes

    positional = select_visible(ad, POSITIONAL_DESCRIPTION_SELECTOR, excluded)
    if len(positional) > POSITIONAL_DESCRIPTION_INDEX:
        return [positional[POSITIONAL_DESCRIPTION_INDEX]]
    return []


def _displayed_url(link: Optional[Tag], excluded: Sequence[Tag]) -> Optional[str]:
    if link is None:
        return None
    spans = select_visible(link, DISPLAYED_URL_SPANS_SELECTOR, excluded)
    if len(spans) <= AD_LABEL_SPAN_OFFSET:
        return None
    return text_or_none(node_text(spans[AD_LABEL_SPAN_OFFSET], excluded))


def parse_ad(ad: Tag) -> Ad:
    """
    Parse one ad container. Seller-rating widgets are skipped at read time.

    Empty <em>/<b> texts are dropped from the emphasized keywords.
    """
    excluded = ad.select(SELLER_RATING_SELECTOR)

    heading = select_first(ad, HEADING_SELECTOR, excluded)
    link = parent_if(heading, "a")
    if link is not None and is_within(link, excluded):
        link = None

    description_nodes = _description_nodes(ad, excluded)
    emphasized = []
    for node in description_nodes:
        emphasized.extend(node_text(em, excluded) for em in select_visible(node, "em, b", excluded))

    return Ad(
        title=text_or_none(node_text(heading, excluded)),
        url=attr_or_none(link, "href"),
        displayed_url=_displayed_url(link, excluded),
        description=text_or_none(joined_text(description_nodes, excluded=excluded)),
        emphasized_keywords=[keyword for keyword in emphasized if keyword],
        site_links=extract_ad_sitelinks(ad, primary_link=link, excluded=excluded),
    )


def extract_paid_results(soup: BeautifulSoup) -> List[Ad]:
    """
    Extract text ads in page order.

    Both ad-region selectors are evaluated and the one with more matches is
    used, since either may match a few decoy nodes.

    Args:
        soup: Parsed SERP

    Returns:
        List of Ad, possibly empty
    """
    layout, containers = largest_matching(AD_LAYOUTS, soup)
    if not containers:
        return []

    ads = [parse_ad(container) for container in containers]
    logger.debug(f"Ad layout '{layout.name}': {len(ads)} ads")
    return ads
