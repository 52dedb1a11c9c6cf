"""
Layout invocation.

The flex constraint solver is an external collaborator. It is reached through
the LayoutEngine interface: it receives the layout tree plus the available
size and answers with the absolute geometry of every node.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..errors import LayoutSolverError
from ..model.style import Geometry
from .layout_tree import LayoutTree

logger = logging.getLogger(__name__)


class LayoutEngine(ABC):
    """Interface of a flexbox layout solver."""

    @abstractmethod
    def compute_layout(self, tree: LayoutTree, available_width: Optional[float],
                       available_height: Optional[float]) -> Mapping[int, Geometry]:
        """
        Solve the layout of a tree.

        Args:
            tree: Layout tree to solve
            available_width: Width constraint, ``None`` when unconstrained
            available_height: Height constraint, ``None`` when unconstrained

        Returns:
            Mapping[int, Geometry]: Absolute geometry per node handle
        """


@dataclass
class GeometryNode:
    """Solved node: the element, its geometry and the solved children."""

    handle: int
    element: Any
    geometry: Geometry
    children: List['GeometryNode'] = field(default_factory=list)

    def walk(self):
        """Yield the nodes of this subtree in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


def available_size(value: Optional[float]) -> Optional[float]:
    """Map a host size component to a constraint; non-positive means unconstrained."""
    if value is None or value <= 0:
        return None
    return float(value)


class LayoutInvoker:
    """Runs a layout engine over a layout tree."""

    def __init__(self, engine: LayoutEngine):
        self.engine = engine

    def compute(self, tree: LayoutTree, available_width: Optional[float] = None,
                available_height: Optional[float] = None) -> GeometryNode:
        """
        Compute the geometry tree of a layout tree.

        Args:
            tree: Layout tree built by LayoutTreeBuilder
            available_width: Available width; absent or non-positive means
                unconstrained
            available_height: Available height; absent or non-positive means
                unconstrained

        Returns:
            GeometryNode: Root of a geometry tree shaped like the layout tree

        Raises:
            LayoutSolverError: If the engine fails or leaves a node unsolved
        """
        if tree.root is None:
            raise LayoutSolverError("Cannot compute the layout of an empty tree")

        width = available_size(available_width)
        height = available_size(available_height)
        logger.debug(f"Computing layout for {len(tree)} nodes (available: {width} x {height})")

        try:
            geometries = self.engine.compute_layout(tree, width, height)
        except LayoutSolverError:
            raise
        except Exception as e:
            raise LayoutSolverError(f"Layout engine failed: {e}") from e

        if geometries is None:
            raise LayoutSolverError("Layout engine returned no result")
        return self._collect(tree, tree.root, geometries)

    def _collect(self, tree: LayoutTree, handle: int, geometries: Mapping[int, Geometry]) -> GeometryNode:
        try:
            geometry = geometries[handle]
        except (KeyError, IndexError):
            raise LayoutSolverError(f"Layout engine produced no geometry for node {handle}") from None
        node = tree[handle]
        children = [self._collect(tree, child, geometries) for child in node.children]
        return GeometryNode(handle, node.element, geometry, children)
