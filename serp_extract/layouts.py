"""
Layout strategies.

The results page has shipped several incompatible HTML structures for the
same logical content. Each known structure is a named LayoutStrategy: a pure
function from a root node to the matching nodes. Extractors keep an ordered
tuple of strategies and pick one with first_matching() (strict priority) or
largest_matching() (biggest match set wins).
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from bs4.element import Tag


@dataclass(frozen=True)
class LayoutStrategy:
    """A named selector for one historical page layout."""
    name: str
    select: Callable[[Tag], List[Tag]]

    def matches(self, root: Tag) -> List[Tag]:
        """Nodes this layout recognizes under root."""
        if root is None:
            return []
        return list(self.select(root))


def css(selector: str) -> Callable[[Tag], List[Tag]]:
    """Selector function for a plain CSS selector."""
    def _select(root: Tag) -> List[Tag]:
        return root.select(selector)
    return _select


def first_matching(
    strategies: Sequence[LayoutStrategy],
    root: Tag,
) -> Tuple[Optional[LayoutStrategy], List[Tag]]:
    """
    Use the first strategy that yields at least one node.

    Returns:
        (strategy, nodes), or (None, []) when no layout matched
    """
    for strategy in strategies:
        nodes = strategy.matches(root)
        if nodes:
            return strategy, nodes
    return None, []


def largest_matching(
    strategies: Sequence[LayoutStrategy],
    root: Tag,
) -> Tuple[Optional[LayoutStrategy], List[Tag]]:
    """
    Use the strategy with the most matches. Ties go to the earlier strategy.

    Returns:
        (strategy, nodes); (None, []) only when strategies is empty
    """
    best: Optional[LayoutStrategy] = None
    best_nodes: List[Tag] = []
    for strategy in strategies:
        nodes = strategy.matches(root)
        if best is None or len(nodes) > len(best_nodes):
            best, best_nodes = strategy, nodes
    return best, best_nodes
