"""
Read-only helpers over a BeautifulSoup tree.

SERP containers carry decoy subtrees (action-menu dropdowns, seller-rating
widgets) whose text would corrupt extracted fields. Instead of decompose()-ing
them, which would mutate a tree other extractors may be reading, the helpers
here take an optional list of excluded nodes and skip anything inside them.
"""

from typing import Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


def is_within(node, excluded: Sequence[Tag], stop: Optional[Tag] = None) -> bool:
    """
    Check whether node is one of the excluded nodes or a descendant of one.

    Args:
        node: Tag or string to test
        excluded: Nodes whose subtrees are off limits
        stop: Do not walk above this ancestor

    Returns:
        bool: True if node sits inside an excluded subtree
    """
    if not excluded:
        return False

    excluded_ids = {id(ex) for ex in excluded}
    current = node
    while current is not None:
        if id(current) in excluded_ids:
            return True
        if current is stop:
            break
        current = current.parent
    return False


def select_visible(root: Tag, selector: str, excluded: Sequence[Tag] = ()) -> List[Tag]:
    """root.select(selector) without matches that fall inside excluded subtrees."""
    if root is None:
        return []
    return [
        match for match in root.select(selector)
        if not is_within(match, excluded, stop=root)
    ]


def select_first(root: Tag, selector: str, excluded: Sequence[Tag] = ()) -> Optional[Tag]:
    """First visible match of selector, or None."""
    matches = select_visible(root, selector, excluded)
    return matches[0] if matches else None


def node_text(node: Optional[Tag], excluded: Sequence[Tag] = ()) -> str:
    """
    Visible text of node with whitespace collapsed.

    Strings inside excluded subtrees, comments and doctypes are skipped.
    Strings are concatenated without a separator, as the browser renders
    adjacent inline elements.
    """
    if node is None:
        return ""

    if isinstance(node, NavigableString):
        return " ".join(str(node).split())

    parts = []
    for descendant in node.descendants:
        if not isinstance(descendant, NavigableString):
            continue
        if isinstance(descendant, PreformattedString):
            continue
        if excluded and is_within(descendant, excluded, stop=node):
            continue
        parts.append(str(descendant))

    return " ".join("".join(parts).split())


def top_level(nodes: Iterable[Tag]) -> List[Tag]:
    """Drop nodes nested inside another node of the same list."""
    nodes = list(nodes)
    return [
        node for node in nodes
        if not any(other is not node and is_within(node, [other]) for other in nodes)
    ]


def joined_text(nodes: Iterable[Tag], separator: str = "", excluded: Sequence[Tag] = ()) -> str:
    """Text of several nodes joined; nested matches are counted once."""
    texts = [node_text(node, excluded) for node in top_level(nodes)]
    return separator.join(text for text in texts if text)


def text_or_none(text: Optional[str]) -> Optional[str]:
    """Map empty text to None."""
    return text if text else None


def attr_or_none(node: Optional[Tag], name: str) -> Optional[str]:
    """
    Attribute value of node, or None when the node or attribute is missing.

    Multi-valued attributes (class) are joined with spaces.
    """
    if node is None:
        return None
    value = node.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def parent_if(node: Optional[Tag], name: str) -> Optional[Tag]:
    """The direct parent of node when it is a <name> element, else None."""
    if node is None:
        return None
    parent = node.parent
    if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup) and parent.name == name:
        return parent
    return None


def sibling_elements(node: Optional[Tag], name: Optional[str] = None) -> List[Tag]:
    """All element siblings of node in document order, optionally by tag name."""
    if node is None:
        return []
    before = list(reversed(node.find_previous_siblings(name)))
    after = node.find_next_siblings(name)
    return before + after
