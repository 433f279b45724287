"""serp_extract – layout-resilient record extraction from Google result pages."""

from serp_extract.models import (
    Ad,
    PeopleAlsoAsk,
    ProductInfo,
    RelatedItem,
    SearchResult,
    SerpSnapshot,
    SiteLink,
)
from serp_extract.exceptions import (
    ConfigurationError,
    RelatedQueriesError,
    SerpExtractionError,
    UnresolvableUrlError,
)
from serp_extract.extractors import (
    extract_organic_results,
    extract_paid_products,
    extract_paid_results,
    extract_people_also_ask,
    extract_related_queries,
    extract_total_results,
)
from serp_extract.url_resolver import resolve_absolute_url
from serp_extract.serp_parser import SerpParser, get_serp_parser

__all__ = [
    "Ad",
    "PeopleAlsoAsk",
    "ProductInfo",
    "RelatedItem",
    "SearchResult",
    "SerpSnapshot",
    "SiteLink",
    "ConfigurationError",
    "RelatedQueriesError",
    "SerpExtractionError",
    "UnresolvableUrlError",
    "extract_organic_results",
    "extract_paid_products",
    "extract_paid_results",
    "extract_people_also_ask",
    "extract_related_queries",
    "extract_total_results",
    "resolve_absolute_url",
    "SerpParser",
    "get_serp_parser",
]
