"""
SERP Parser Module

Parses a saved Google Search Engine Results Page into a SerpSnapshot:
- Organic results (with sitelinks and inline product info)
- Paid results (text ads)
- Paid products (shopping units)
- Total result count
- Related searches
- People also ask

The HTML is parsed once and every extractor reads the same tree. Fetching
the page is the caller's job.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup

from serp_extract.config import ExtractorConfig, get_config
from serp_extract.exceptions import RelatedQueriesError
from serp_extract.extractors import (
    extract_organic_results,
    extract_paid_products,
    extract_paid_results,
    extract_people_also_ask,
    extract_related_queries,
    extract_total_results,
)
from serp_extract.models import SerpSnapshot
from runner.logging_setup import get_logger, setup_logging

logger = get_logger("serp_parser")


class SerpParser:
    """
    Parser for Google Search Engine Results Pages.

    Each field is handled by a stateless extractor that knows the page
    layouts seen for it over time and falls back between them.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        """
        Initialize SERP parser.

        Args:
            config: Extractor settings (default: from environment)
        """
        self.config = config or get_config()
        logger.debug(f"SerpParser initialized (html_parser={self.config.html_parser})")

    def make_soup(self, html: str) -> BeautifulSoup:
        """Parse raw HTML with the configured backend."""
        return BeautifulSoup(html or "", self.config.html_parser)

    def parse_soup(self, soup: BeautifulSoup, hostname: Optional[str] = None) -> SerpSnapshot:
        """
        Run every extractor against an already parsed SERP.

        Args:
            soup: Parsed SERP
            hostname: Host the page came from (default: configured hostname)

        Returns:
            SerpSnapshot: Parsed SERP data
        """
        if hostname is None:
            hostname = self.config.default_hostname

        snapshot = SerpSnapshot(
            organic_results=extract_organic_results(soup),
            paid_results=extract_paid_results(soup),
            paid_products=extract_paid_products(soup),
            total_results=extract_total_results(soup),
            people_also_ask=extract_people_also_ask(soup),
        )

        try:
            snapshot.related_queries = extract_related_queries(soup, hostname)
        except RelatedQueriesError as e:
            logger.warning(f"Related queries partially extracted: {e}")
            snapshot.related_queries = e.items
            snapshot.errors.extend(str(error) for error in e.errors)

        logger.info(
            f"Parsed SERP: "
            f"{len(snapshot.organic_results)} organic, "
            f"{len(snapshot.paid_results)} ads, "
            f"{len(snapshot.paid_products)} products, "
            f"{len(snapshot.related_queries)} related, "
            f"{len(snapshot.people_also_ask)} PAA, "
            f"total={snapshot.total_results}, "
            f"errors={len(snapshot.errors)}"
        )

        return snapshot

    def parse(self, html: str, hostname: Optional[str] = None) -> SerpSnapshot:
        """
        Parse a Google SERP page.

        Args:
            html: Raw HTML of the SERP
            hostname: Host the page came from (default: configured hostname)

        Returns:
            SerpSnapshot: Parsed SERP data
        """
        return self.parse_soup(self.make_soup(html), hostname)


# Module-level singleton
_serp_parser_instance = None


def get_serp_parser() -> SerpParser:
    """Get or create the singleton SerpParser instance."""
    global _serp_parser_instance

    if _serp_parser_instance is None:
        _serp_parser_instance = SerpParser()

    return _serp_parser_instance


def main(argv=None) -> int:
    """Demo: parse a saved SERP file and print the snapshot as JSON."""
    arg_parser = argparse.ArgumentParser(
        description="Extract structured records from a saved Google SERP HTML file."
    )
    arg_parser.add_argument("html_file", help="Path to the saved SERP HTML")
    arg_parser.add_argument("--hostname", default=None, help="Host the page was fetched from")
    arg_parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    args = arg_parser.parse_args(argv)

    if args.log_level:
        setup_logging("serp_parser", log_level=args.log_level.upper())

    path = Path(args.html_file)
    if not path.is_file():
        logger.error(f"File not found: {path}")
        return 1

    snapshot = get_serp_parser().parse(path.read_text(encoding="utf-8"), hostname=args.hostname)
    json.dump(snapshot.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
