"""
Paid Product Extractor

Parses shopping units from the right-hand commercial block. The unit has
no labelled fields: after the heading come the price lines, and the last
element is the merchant's displayed URL.
"""

from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag

from serp_extract.dom import attr_or_none, node_text, text_or_none
from serp_extract.models import ProductInfo
from runner.logging_setup import get_logger

logger = get_logger("products_extractor")


PRODUCT_UNIT_SELECTOR = ".commercial-unit-desktop-rhs .pla-unit"
HEADING_SELECTOR = '[role="heading"]'


def parse_product_unit(unit: Tag) -> ProductInfo:
    """
    Parse one shopping unit.

    Siblings following the heading keep their order: every one but the last
    is a raw price string, the last is the displayed URL.
    """
    heading = unit.select_one(HEADING_SELECTOR)
    if heading is None:
        logger.debug("Product unit without heading")
        return ProductInfo(prices=[])

    siblings = heading.find_next_siblings()
    displayed_url_node = siblings[-1] if siblings else None
    prices = [node_text(sibling) for sibling in siblings[:-1]]

    return ProductInfo(
        title=text_or_none(node_text(heading)),
        url=attr_or_none(heading.select_one("a"), "href"),
        displayed_url=(
            text_or_none(node_text(displayed_url_node.select_one("span")))
            if displayed_url_node is not None else None
        ),
        prices=prices,
    )


def extract_paid_products(soup: BeautifulSoup) -> List[ProductInfo]:
    """
    Extract shopping units in page order.

    Args:
        soup: Parsed SERP

    Returns:
        List of ProductInfo with title, url, displayed_url and prices
    """
    products = [parse_product_unit(unit) for unit in soup.select(PRODUCT_UNIT_SELECTOR)]
    logger.debug(f"Extracted {len(products)} paid products")
    return products
