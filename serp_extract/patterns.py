"""
Free-text value parsing for SERP snippets.

Ratings, review counts, prices and result totals are not exposed as
dedicated fields on the page. They are pulled out of visible text with the
patterns below. Every function is pure: text in, value (or None) out.
"""

import re
from typing import Optional

from serp_extract.models import ProductInfo


# "Rating: 4.5"
RATING_PATTERN = re.compile(r"Rating: (\d+(?:\.\d+)?)")

# "1,234 reviews"
REVIEW_COUNT_PATTERN = re.compile(r"(\d[\d,]*) reviews")

# "$1,299.99"
PRICE_PATTERN = re.compile(r"\$(\d[\d,]*(?:\.\d+)?)")

# Digit runs with ".", "," or whitespace group separators, e.g. "6 730 000 000"
NUMBER_RUN_PATTERN = re.compile(r"\d[\d.,\s]*")

# Timing suffix such as "(0.30 seconds)" starts at the first bracket
TIMING_SUFFIX_SEPARATOR = "("


def strip_thousands_separators(value: str) -> str:
    """Remove "," group separators from a numeric string."""
    return value.replace(",", "")


def parse_rating(text: Optional[str]) -> Optional[float]:
    """Return the float following "Rating: ", or None."""
    if not text:
        return None
    match = RATING_PATTERN.search(text)
    if not match:
        return None
    return float(match.group(1))


def parse_review_count(text: Optional[str]) -> Optional[int]:
    """Return the integer preceding " reviews", or None."""
    if not text:
        return None
    match = REVIEW_COUNT_PATTERN.search(text)
    if not match:
        return None
    return int(strip_thousands_separators(match.group(1)))


def parse_price(text: Optional[str]) -> Optional[float]:
    """Return the first dollar amount with the currency sign stripped, or None."""
    if not text:
        return None
    match = PRICE_PATTERN.search(text)
    if not match:
        return None
    return float(strip_thousands_separators(match.group(1)))


def parse_product_info_text(text: Optional[str]) -> ProductInfo:
    """
    Parse an inline product-info blob into a ProductInfo.

    Rating, review count and price are matched independently; any of them
    may be missing.

    "Rating: 4.5 · 1,234 reviews · $19.99" gives rating=4.5,
    number_of_reviews=1234 and price=19.99.
    """
    return ProductInfo(
        rating=parse_rating(text),
        number_of_reviews=parse_review_count(text),
        price=parse_price(text),
    )


def parse_result_count(text: Optional[str]) -> int:
    """
    Parse a result-stats line into the total number of results.

    Anything from the first "(" on is timing info and is dropped. Of the
    remaining digit runs the longest one is the total; shorter runs are page
    numbers. Separators of any locale are discarded.

    Args:
        text: e.g. "About 6,730,000,000 results (0.30 seconds)"

    Returns:
        int: the total, or 0 when no number is present
    """
    if not text:
        return 0

    head = text.split(TIMING_SUFFIX_SEPARATOR, 1)[0]
    runs = NUMBER_RUN_PATTERN.findall(head)
    if not runs:
        return 0

    # max() keeps the first of equally long runs
    longest = max(runs, key=len)
    digits = re.sub(r"\D", "", longest)
    return int(digits) if digits else 0
