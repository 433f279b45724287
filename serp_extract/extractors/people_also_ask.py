"""
People Also Ask Extractor

Best-effort parsing of the "People also ask" accordion. Only questions that
were expanded in the fetched markup carry an answer and a source link.
"""

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from serp_extract.dom import attr_or_none, node_text, text_or_none
from serp_extract.layouts import LayoutStrategy, css, first_matching
from serp_extract.models import PeopleAlsoAsk
from runner.logging_setup import get_logger

logger = get_logger("paa_extractor")


# Multiple selectors for PAA sections (Google layout varies)
PAA_LAYOUTS = (
    LayoutStrategy(name="related-question-pair", select=css("div.related-question-pair")),
    LayoutStrategy(name="jsname", select=css("div[jsname='yEVEE']")),
    LayoutStrategy(name="data-q", select=css("div[data-q]")),
)

ANSWER_SELECTORS = ("div.hgKElc", "span.hgKElc", "div.kno-rdesc")


def _question_text(element: Tag) -> Optional[str]:
    question = attr_or_none(element, "data-q")
    if question:
        return question.strip() or None
    return text_or_none(node_text(element.select_one("div[role='button']")))


def parse_question(element: Tag) -> Optional[PeopleAlsoAsk]:
    """
    Parse one PAA entry.

    Returns:
        PeopleAlsoAsk, or None when the entry has no question text
    """
    question = _question_text(element)
    if not question:
        return None

    answer = None
    for selector in ANSWER_SELECTORS:
        answer = text_or_none(node_text(element.select_one(selector)))
        if answer:
            break

    source_link = element.select_one("a[href]")
    return PeopleAlsoAsk(
        question=question,
        answer=answer,
        url=attr_or_none(source_link, "href"),
        title=text_or_none(node_text(source_link.select_one("h3"))) if source_link else None,
    )


def extract_people_also_ask(soup: BeautifulSoup) -> List[PeopleAlsoAsk]:
    """
    Extract PAA questions in page order from the first layout that matches.

    Args:
        soup: Parsed SERP

    Returns:
        List of PeopleAlsoAsk, possibly empty
    """
    layout, elements = first_matching(PAA_LAYOUTS, soup)
    if layout is None:
        return []

    questions = []
    for element in elements:
        parsed = parse_question(element)
        if parsed is None:
            logger.debug(f"PAA entry without question text ({layout.name})")
            continue
        questions.append(parsed)

    return questions
