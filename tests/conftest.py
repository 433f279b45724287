"""
Pytest configuration and shared SERP fixtures.

Each fixture is a trimmed-down copy of one historical Google layout, just
enough markup for the selectors that layout is recognized by.
"""

import pytest
from bs4 import BeautifulSoup


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: pure helper tests that need no SERP fixture"
    )


# Organic results, pre-2020 markup with <ul><li> sitelinks. The action-menu
# overlay also holds a <ul><li> and a link; neither may leak into results.
ORGANIC_LEGACY_HTML = """
<html><body><div id="search">
  <div class="g">
    <div class="rc">
      <div class="action-menu">
        <ul><li><a href="https://webcache.googleusercontent.com/search?q=cache">Cached</a></li></ul>
      </div>
      <div class="yuRUbf"><a href="https://example.com/"><h3>Example Domain</h3></a></div>
      <div class="TbwUpd"><cite>example.com</cite></div>
      <div class="IsZvec"><span>The <em>example</em> domain is for <b>illustrative</b> use.</span></div>
      <div class="dhIWPd">Rating: 4.5 · 1,234 reviews · $19.99</div>
      <ul>
        <li><h3><a href="https://example.com/about">About</a></h3><div>About the example site</div></li>
        <li><h3><a href="https://example.com/contact">Contact</a></h3><div>Reach us</div></li>
      </ul>
    </div>
  </div>
  <div class="g">
    <div class="rc">
      <div class="yuRUbf"><a href="https://second.example/"><h3>Second Result</h3></a></div>
      <cite>second.example</cite>
      <div class="IsZvec">Plain snippet</div>
    </div>
  </div>
</div></body></html>
"""

# 2020 markup: sitelinks are anchors inside .St3GK with a div/h3/div chain
ORGANIC_2020_HTML = """
<html><body><div id="search">
  <div class="g">
    <div class="rc">
      <div class="action-menu">
        <ul><li><a href="https://webcache.googleusercontent.com/search?q=cache">Cached</a></li></ul>
      </div>
      <div class="yuRUbf"><a href="https://example.org/"><h3>Example Org</h3></a></div>
      <cite>example.org</cite>
      <div class="IsZvec">Docs for example.org</div>
      <div class="St3GK">
        <div>
          <h3><div><a href="https://example.org/docs">Docs</a></div></h3>
          <div>Read the documentation</div>
          <div>API reference</div>
        </div>
        <div>
          <h3><div><a href="https://example.org/blog">Blog</a></div></h3>
        </div>
        <div><a href="https://example.org/jobs">Jobs</a></div>
      </div>
    </div>
  </div>
</div></body></html>
"""

# 2021-01 markup: container is .tF2Cxc; the sitelink table sits next to the
# result's grandparent
ORGANIC_2021_HTML = """
<html><body><div id="rso">
  <div class="hlcw0c">
    <div class="g">
      <div class="tF2Cxc">
        <div class="yuRUbf"><a href="https://example.net/"><h3>Example Net</h3><cite>example.net</cite></a></div>
        <div class="IsZvec"><span>Net <b>example</b> page</span></div>
        <div class="fG8Fp">Rating: 3.9 · 87 reviews</div>
      </div>
    </div>
  </div>
  <table class="jmjoTe"><tbody><tr>
    <td><div class="sld"><a href="https://example.net/a">Alpha</a><div class="s">Alpha desc</div></div></td>
    <td><div class="sld"><a href="https://example.net/b">Beta</a><div class="s">Beta desc</div></div></td>
    <td><div class="sld"><a href="https://example.net/c">Gamma</a></div></td>
  </tr></tbody></table>
</div></body></html>
"""

# Current ad region (#tads > div)
ADS_HTML = """
<html><body>
<div id="tads">
  <div class="uEierd">
    <div>
      <a href="https://shop.example/landing" data-pcu="https://shop.example/" ping="/url?sa=t">
        <div role="heading">Best Widgets - Shop Now</div>
        <div><span>Ad</span><span>·</span><span>shop.example/widgets</span></div>
      </a>
    </div>
    <div class="MUxGbd yDYNvb lyLwlc"><span>Buy <b>widgets</b> online with <em>free</em> shipping.</span></div>
    <w-ad-seller-rating><a href="https://shop.example/reviews">4.8 rating</a></w-ad-seller-rating>
    <div><h3><div><a href="https://shop.example/sale">Sale</a></div></h3><div>Up to 50% off</div></div>
    <div><a href="https://shop.example/new">New Arrivals</a></div>
    <a href="/aclk?sa=l" ping="/url?track">tracking</a>
  </div>
  <div class="uEierd">
    <div>
      <a href="https://other.example/" data-pcu="https://other.example/">
        <div role="heading">Other Shop</div>
        <div><span>Ad</span><span>·</span><span>other.example</span></div>
      </a>
    </div>
    <div class="MUxGbd yDYNvb lyLwlc"><span>Second ad copy</span></div>
  </div>
</div>
</body></html>
"""

# Shopping units in the right-hand column
PRODUCTS_HTML = """
<html><body>
<div class="commercial-unit-desktop-rhs">
  <div class="pla-unit">
    <div role="heading"><a href="https://store.example/p/1"><span>Widget Pro</span></a></div>
    <div>$19.99</div>
    <div>$24.99</div>
    <div><span>store.example</span><span>Free shipping</span></div>
  </div>
  <div class="pla-unit">
    <div role="heading"><a href="https://mart.example/p/9">Widget Mini</a></div>
    <div><span>mart.example</span></div>
  </div>
</div>
</body></html>
"""

RELATED_HTML = """
<html><body>
<div id="brs">
  <a href="/search?q=example+domain">example domain</a>
  <a href="https://www.google.com/search?q=example+org">example org</a>
</div>
</body></html>
"""

PEOPLE_ALSO_ASK_HTML = """
<html><body>
<div class="related-question-pair" data-q="What is an example domain?">
  <div role="button">What is an example domain?</div>
  <div class="hgKElc">A domain reserved for documentation.</div>
  <a href="https://www.iana.org/domains/example"><h3>Example Domains</h3></a>
</div>
<div class="related-question-pair">
  <div role="button">Who owns example.com?</div>
</div>
</body></html>
"""

RESULT_STATS_HTML = """
<html><body>
<div id="result-stats">About 6,730,000,000 results<nobr> (0.30 seconds)&nbsp;</nobr></div>
</body></html>
"""

EMPTY_HTML = "<html><head><title>Empty</title></head><body></body></html>"


def make_soup(html: str) -> BeautifulSoup:
    """Parse fixture HTML the same way SerpParser does by default."""
    return BeautifulSoup(html, "html.parser")


@pytest.fixture
def organic_legacy_soup():
    return make_soup(ORGANIC_LEGACY_HTML)


@pytest.fixture
def organic_2020_soup():
    return make_soup(ORGANIC_2020_HTML)


@pytest.fixture
def organic_2021_soup():
    return make_soup(ORGANIC_2021_HTML)


@pytest.fixture
def ads_soup():
    return make_soup(ADS_HTML)


@pytest.fixture
def products_soup():
    return make_soup(PRODUCTS_HTML)


@pytest.fixture
def related_soup():
    return make_soup(RELATED_HTML)


@pytest.fixture
def paa_soup():
    return make_soup(PEOPLE_ALSO_ASK_HTML)


@pytest.fixture
def empty_soup():
    return make_soup(EMPTY_HTML)


@pytest.fixture
def full_serp_html():
    """One page carrying every block the extractors know about."""
    return "".join([
        RESULT_STATS_HTML,
        ADS_HTML,
        ORGANIC_LEGACY_HTML,
        PRODUCTS_HTML,
        PEOPLE_ALSO_ASK_HTML,
        RELATED_HTML,
    ])


@pytest.fixture
def empty_serp_html():
    return EMPTY_HTML
