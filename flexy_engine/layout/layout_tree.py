"""
Layout tree construction.

The layout tree is an arena: nodes live in a list and refer to each other by
index (their handle). Each node keeps the style record handed to the layout
engine and the element it was built from, so results can be mapped back to
elements at render time.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from ..model.style import Layout

logger = logging.getLogger(__name__)


@dataclass
class LayoutNode:
    """One solver-facing node."""

    handle: int
    style: Layout
    children: List[int] = field(default_factory=list)
    element: Any = None


class LayoutTree:
    """Indexed store of layout nodes."""

    def __init__(self):
        self.nodes: List[LayoutNode] = []
        self.root: Optional[int] = None

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, handle: int) -> LayoutNode:
        return self.nodes[handle]

    def add(self, style: Layout, children: List[int], element: Any) -> int:
        """
        Append a node to the arena.

        Args:
            style: Style record of the node
            children: Handles of already added child nodes, in order
            element: Element the node was built from

        Returns:
            int: Handle of the new node
        """
        handle = len(self.nodes)
        self.nodes.append(LayoutNode(handle, style, list(children), element))
        return handle

    def children_of(self, handle: int) -> List[LayoutNode]:
        return [self.nodes[child] for child in self.nodes[handle].children]

    def walk(self, handle: Optional[int] = None) -> Iterator[int]:
        """Yield node handles in pre-order, starting at the root by default."""
        start = self.root if handle is None else handle
        if start is None:
            return
        stack = [start]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self.nodes[current].children))


def extract_style(layout: Any) -> Layout:
    """
    Get the style record of an element's layout.

    Markup elements already carry a Layout; host styles are read through their
    accessors.
    """
    if isinstance(layout, Layout):
        return layout
    return Layout.from_style(layout)


class LayoutTreeBuilder:
    """Converts an element tree (markup or host) into a LayoutTree."""

    def build(self, element: Any) -> LayoutTree:
        """
        Build the layout tree of an element tree.

        Args:
            element: Root element; anything with ``get_layout()`` and
                ``get_children()``

        Returns:
            LayoutTree: Arena whose ``root`` is the handle of the root node
        """
        tree = LayoutTree()
        tree.root = self._add(tree, element)
        logger.debug(f"Built layout tree with {len(tree)} nodes")
        return tree

    def _add(self, tree: LayoutTree, element: Any) -> int:
        children = [self._add(tree, child) for child in element.get_children()]
        style = extract_style(element.get_layout())
        return tree.add(style, children, element)