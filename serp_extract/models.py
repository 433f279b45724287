"""
SERP record models.

Plain dataclasses produced by the extractors. Attributes are snake_case;
to_dict() emits the camelCase keys consumers of the JSON output expect.
Absent values stay None and are never replaced by sentinel strings.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SiteLink:
    """A secondary link nested under an organic result or an ad."""
    title: Optional[str]
    url: Optional[str]
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
        }


@dataclass
class ProductInfo:
    """
    Product data attached to a result, or a standalone shopping unit.

    Every field is optional; a missing field means the layout did not carry it.
    """
    title: Optional[str] = None
    url: Optional[str] = None
    displayed_url: Optional[str] = None
    rating: Optional[float] = None
    number_of_reviews: Optional[int] = None
    price: Optional[float] = None
    prices: Optional[List[str]] = None

    def is_empty(self) -> bool:
        """True when no field was extracted."""
        return not self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting absent fields."""
        data = {
            "title": self.title,
            "url": self.url,
            "displayedUrl": self.displayed_url,
            "rating": self.rating,
            "numberOfReviews": self.number_of_reviews,
            "price": self.price,
            "prices": list(self.prices) if self.prices is not None else None,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class SearchResult:
    """A single organic result."""
    title: Optional[str]
    url: Optional[str]
    displayed_url: Optional[str] = None
    description: Optional[str] = None
    emphasized_keywords: List[str] = field(default_factory=list)
    site_links: List[SiteLink] = field(default_factory=list)
    product_info: Optional[ProductInfo] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "url": self.url,
            "displayedUrl": self.displayed_url,
            "description": self.description,
            "emphasizedKeywords": list(self.emphasized_keywords),
            "siteLinks": [link.to_dict() for link in self.site_links],
            "productInfo": self.product_info.to_dict() if self.product_info else None,
        }


@dataclass
class Ad:
    """A paid result. Same shape as SearchResult without product info."""
    title: Optional[str]
    url: Optional[str]
    displayed_url: Optional[str] = None
    description: Optional[str] = None
    emphasized_keywords: List[str] = field(default_factory=list)
    site_links: List[SiteLink] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "url": self.url,
            "displayedUrl": self.displayed_url,
            "description": self.description,
            "emphasizedKeywords": list(self.emphasized_keywords),
            "siteLinks": [link.to_dict() for link in self.site_links],
        }


@dataclass
class RelatedItem:
    """A related search suggestion. url is always absolute."""
    title: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"title": self.title, "url": self.url}


@dataclass
class PeopleAlsoAsk:
    """A "People also ask" question with its expanded answer, if present."""
    question: str
    answer: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "question": self.question,
            "answer": self.answer,
            "url": self.url,
            "title": self.title,
        }


@dataclass
class SerpSnapshot:
    """Everything extracted from one results page."""
    organic_results: List[SearchResult] = field(default_factory=list)
    paid_results: List[Ad] = field(default_factory=list)
    paid_products: List[ProductInfo] = field(default_factory=list)
    total_results: int = 0
    related_queries: List[RelatedItem] = field(default_factory=list)
    people_also_ask: List[PeopleAlsoAsk] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)  # Per-item extraction errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "organicResults": [r.to_dict() for r in self.organic_results],
            "paidResults": [ad.to_dict() for ad in self.paid_results],
            "paidProducts": [p.to_dict() for p in self.paid_products],
            "resultsTotal": self.total_results,
            "relatedQueries": [item.to_dict() for item in self.related_queries],
            "peopleAlsoAsk": [paa.to_dict() for paa in self.people_also_ask],
            "errors": list(self.errors),
        }
