"""Total result count ("About 6,730,000,000 results (0.30 seconds)")."""

from bs4 import BeautifulSoup

from serp_extract.dom import node_text
from serp_extract.patterns import parse_result_count
from runner.logging_setup import get_logger

logger = get_logger("total_results_extractor")


# Checked in order; the id changed from resultStats to result-stats
RESULT_STATS_SELECTORS = ("#resultStats", "#result-stats")


def extract_total_results(soup: BeautifulSoup) -> int:
    """
    Extract the total number of results.

    Args:
        soup: Parsed SERP

    Returns:
        int: Total results, 0 when the stats line is missing or has no number
    """
    text = ""
    for selector in RESULT_STATS_SELECTORS:
        text = node_text(soup.select_one(selector))
        if text:
            break

    total = parse_result_count(text)
    logger.debug(f"Total results: {total} (from {text!r})")
    return total
