"""
Organic Result Extractor Tests

Covers container layout selection, the three sitelink layouts, inline
product info and overlay filtering.

Run with: python3 -m pytest tests/test_organic_extractor.py -v
"""

from bs4 import BeautifulSoup

from serp_extract.extractors.organic import extract_organic_results
from serp_extract.extractors.sitelinks import SITELINK_LAYOUTS


class TestLegacyLayout:
    """.g .rc containers with <ul><li> sitelinks."""

    def test_results_in_page_order(self, organic_legacy_soup):
        results = extract_organic_results(organic_legacy_soup)

        assert [r.title for r in results] == ["Example Domain", "Second Result"]

    def test_core_fields(self, organic_legacy_soup):
        result = extract_organic_results(organic_legacy_soup)[0]

        assert result.url == "https://example.com/"
        assert result.displayed_url == "example.com"
        assert result.description == "The example domain is for illustrative use."
        assert result.emphasized_keywords == ["example", "illustrative"]

    def test_overlay_menu_ignored(self, organic_legacy_soup):
        result = extract_organic_results(organic_legacy_soup)[0]

        # The action-menu's cache link comes first in the markup
        assert "webcache" not in result.url
        assert all("webcache" not in (link.url or "") for link in result.site_links)

    def test_legacy_sitelinks(self, organic_legacy_soup):
        links = extract_organic_results(organic_legacy_soup)[0].site_links

        assert [(l.title, l.url, l.description) for l in links] == [
            ("About", "https://example.com/about", "About the example site"),
            ("Contact", "https://example.com/contact", "Reach us"),
        ]

    def test_product_info(self, organic_legacy_soup):
        first, second = extract_organic_results(organic_legacy_soup)

        assert first.product_info.rating == 4.5
        assert first.product_info.number_of_reviews == 1234
        assert first.product_info.price == 19.99
        assert second.product_info is None
        assert second.site_links == []


class Test2020Sitelinks:
    """.St3GK anchors with the div/h3/div description chain."""

    def test_only_2020_layout_used(self, organic_2020_soup):
        links = extract_organic_results(organic_2020_soup)[0].site_links

        assert [l.title for l in links] == ["Docs", "Blog", "Jobs"]

    def test_descriptions(self, organic_2020_soup):
        docs, blog, jobs = extract_organic_results(organic_2020_soup)[0].site_links

        assert docs.description == "Read the documentation API reference"
        assert docs.url == "https://example.org/docs"
        assert blog.description is None
        assert jobs.description is None


class Test2021Layout:
    """.tF2Cxc containers with a sibling sitelink table."""

    def test_container_normalized_to_parent(self, organic_2021_soup):
        results = extract_organic_results(organic_2021_soup)

        assert len(results) == 1
        result = results[0]
        assert result.title == "Example Net"
        assert result.url == "https://example.net/"
        assert result.displayed_url == "example.net"
        assert result.description == "Net example page"
        assert result.emphasized_keywords == ["example"]

    def test_table_sitelinks(self, organic_2021_soup):
        links = extract_organic_results(organic_2021_soup)[0].site_links

        assert [(l.title, l.url, l.description) for l in links] == [
            ("Alpha", "https://example.net/a", "Alpha desc"),
            ("Beta", "https://example.net/b", "Beta desc"),
            ("Gamma", "https://example.net/c", None),
        ]

    def test_product_info_without_price(self, organic_2021_soup):
        info = extract_organic_results(organic_2021_soup)[0].product_info

        assert info.rating == 3.9
        assert info.number_of_reviews == 87
        assert info.price is None
        assert info.to_dict() == {"rating": 3.9, "numberOfReviews": 87}


class TestSitelinkLayoutIsolation:
    """Exactly one sitelink layout matches each fixture."""

    def test_each_fixture_matches_one_layout(
        self, organic_legacy_soup, organic_2020_soup, organic_2021_soup
    ):
        expected = {
            "legacy": (organic_legacy_soup, ".g .rc", 2),
            "2020": (organic_2020_soup, ".g .rc", 3),
            "2021-01": (organic_2021_soup, ".g .tF2Cxc", 3),
        }

        for name, (soup, container_selector, count) in expected.items():
            container = soup.select_one(container_selector)
            excluded = container.select("div.action-menu")
            matched = {
                layout.name: len(layout.bind(excluded).matches(container))
                for layout in SITELINK_LAYOUTS
            }

            assert matched[name] == count
            assert [n for n, c in matched.items() if c] == [name]


class TestMissingData:
    """Absent fields are None, never an exception."""

    def test_missing_href(self):
        soup = BeautifulSoup(
            '<div class="g"><div class="rc"><a><h3>No link</h3></a></div></div>',
            "html.parser",
        )

        result = extract_organic_results(soup)[0]

        assert result.title == "No link"
        assert result.url is None
        assert result.displayed_url is None
        assert result.description is None
        assert result.emphasized_keywords == []

    def test_product_blob_without_values(self):
        soup = BeautifulSoup(
            '<div class="g"><div class="rc"><a href="https://example.com"><h3>T</h3></a>'
            '<div class="dhIWPd">In stock</div></div></div>',
            "html.parser",
        )

        assert extract_organic_results(soup)[0].product_info is None

    def test_empty_emphasis_dropped(self):
        soup = BeautifulSoup(
            '<div class="g"><div class="rc"><a href="https://example.com"><h3>T</h3></a>'
            '<div class="IsZvec"><em></em>plain <em>kept</em></div></div></div>',
            "html.parser",
        )

        assert extract_organic_results(soup)[0].emphasized_keywords == ["kept"]

    def test_empty_page(self, empty_soup):
        assert extract_organic_results(empty_soup) == []

    def test_idempotent_and_non_destructive(self, organic_legacy_soup):
        before = str(organic_legacy_soup)

        first = [r.to_dict() for r in extract_organic_results(organic_legacy_soup)]
        second = [r.to_dict() for r in extract_organic_results(organic_legacy_soup)]

        assert first == second
        assert str(organic_legacy_soup) == before
