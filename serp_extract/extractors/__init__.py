"""
SERP Extractors

Stateless functions over a parsed SERP (BeautifulSoup tree):
- organic: organic results with sitelinks and inline product info
- paid: text ads
- products: shopping units
- total_results: result count
- related: related searches
- people_also_ask: PAA questions

None of them modifies the tree, so they can run in any order, or
concurrently, against the same document.
"""

from .organic import extract_organic_results
from .paid import extract_paid_results
from .products import extract_paid_products
from .total_results import extract_total_results
from .related import extract_related_queries
from .people_also_ask import extract_people_also_ask

__all__ = [
    "extract_organic_results",
    "extract_paid_results",
    "extract_paid_products",
    "extract_total_results",
    "extract_related_queries",
    "extract_people_also_ask",
]
