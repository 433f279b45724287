"""
Sitelink layouts for organic results, and the description lookup shared with ads.

Organic sitelinks come in three layouts, tried in this order:
- legacy:  <ul><li><h3><a/></h3><div>description</div></li></ul>
- 2020:    anchors inside .St3GK
- 2021-01: a <table> next to the result's grandparent, one td .sld per link

The first layout with at least one match wins; the others are not tried.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Sequence

from bs4.element import Tag

from serp_extract.dom import (
    attr_or_none,
    is_within,
    joined_text,
    node_text,
    parent_if,
    select_first,
    select_visible,
    sibling_elements,
    text_or_none,
)
from serp_extract.layouts import LayoutStrategy, first_matching
from serp_extract.models import SiteLink
from runner.logging_setup import get_logger

logger = get_logger("sitelinks")


def sibling_description(anchor: Tag, excluded: Sequence[Tag] = ()) -> Optional[str]:
    """
    Description block for a sitelink anchor.

    Walks a -> div -> h3 -> div and joins the text of that last div's direct
    <div> children. Returns None when the ancestor chain does not match;
    the newer layouts dropped the description entirely.
    """
    container = parent_if(parent_if(parent_if(anchor, "div"), "h3"), "div")
    if container is None:
        return None

    blocks = [
        child for child in container.find_all("div", recursive=False)
        if not is_within(child, excluded, stop=child)
    ]
    texts = [node_text(block, excluded) for block in blocks]
    return text_or_none(" ".join(text for text in texts if text))


@dataclass(frozen=True)
class SitelinkLayout:
    """A sitelink layout: item selector plus per-item parser."""
    name: str
    select: Callable[[Tag, Sequence[Tag]], List[Tag]]
    parse_item: Callable[[Tag, Sequence[Tag]], SiteLink]

    def bind(self, excluded: Sequence[Tag] = ()) -> LayoutStrategy:
        """LayoutStrategy for this layout that skips the excluded subtrees."""
        return LayoutStrategy(name=self.name, select=partial(self.select, excluded=excluded))


def _parse_legacy_item(item: Tag, excluded: Sequence[Tag]) -> SiteLink:
    return SiteLink(
        title=text_or_none(node_text(select_first(item, "h3", excluded), excluded)),
        url=attr_or_none(select_first(item, "h3 a", excluded), "href"),
        description=text_or_none(joined_text(select_visible(item, "div", excluded), excluded=excluded)),
    )


def _parse_2020_item(anchor: Tag, excluded: Sequence[Tag]) -> SiteLink:
    return SiteLink(
        title=text_or_none(node_text(anchor, excluded)),
        url=attr_or_none(anchor, "href"),
        description=sibling_description(anchor, excluded),
    )


def _parse_2021_item(cell: Tag, excluded: Sequence[Tag]) -> SiteLink:
    link = cell.select_one("a")
    return SiteLink(
        title=text_or_none(node_text(link)),
        url=attr_or_none(link, "href"),
        description=text_or_none(joined_text(cell.select(".s"))),
    )


def _select_legacy_items(container: Tag, excluded: Sequence[Tag] = ()) -> List[Tag]:
    return select_visible(container, "ul li", excluded)


def _select_2020_anchors(container: Tag, excluded: Sequence[Tag] = ()) -> List[Tag]:
    return select_visible(container, ".St3GK a", excluded)


def _select_2021_cells(container: Tag, excluded: Sequence[Tag] = ()) -> List[Tag]:
    # The sitelink table is a sibling of the result's grandparent
    grandparent = container.parent.parent if container.parent is not None else None
    if grandparent is None:
        return []
    cells = []
    for table in sibling_elements(grandparent, "table"):
        cells.extend(table.select("td .sld"))
    return cells


SITELINK_LAYOUTS = (
    SitelinkLayout(name="legacy", select=_select_legacy_items, parse_item=_parse_legacy_item),
    SitelinkLayout(name="2020", select=_select_2020_anchors, parse_item=_parse_2020_item),
    SitelinkLayout(name="2021-01", select=_select_2021_cells, parse_item=_parse_2021_item),
)

_LAYOUTS_BY_NAME = {layout.name: layout for layout in SITELINK_LAYOUTS}


def extract_organic_sitelinks(container: Tag, excluded: Sequence[Tag] = ()) -> List[SiteLink]:
    """
    Sitelinks under one organic result container.

    Args:
        container: Normalized organic result node
        excluded: Overlay subtrees to ignore

    Returns:
        List of SiteLink from the first layout that matched, possibly empty
    """
    strategies = [layout.bind(excluded) for layout in SITELINK_LAYOUTS]
    strategy, items = first_matching(strategies, container)
    if strategy is None:
        return []

    logger.debug(f"Sitelink layout '{strategy.name}' matched {len(items)} items")
    layout = _LAYOUTS_BY_NAME[strategy.name]
    return [layout.parse_item(item, excluded) for item in items]
