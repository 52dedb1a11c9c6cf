"""
Result renderer.
This module walks a solved geometry tree and materializes it as host widgets.
"""

import logging
from typing import Any, Callable, Optional

from ..errors import RenderError
from ..host import WidgetFactory, WidgetHandle
from ..layout.invoker import GeometryNode
from ..model.elements import Box, Element, Image, Text
from ..model.style import Vector2

logger = logging.getLogger(__name__)

Materializer = Callable[[Any, Vector2, Vector2], WidgetHandle]


class ResultRenderer:
    """Turns a geometry tree into a widget tree."""

    def __init__(self, widget_factory: Optional[WidgetFactory] = None,
                 materializer: Optional[Materializer] = None):
        """
        Initialize the renderer.

        Args:
            widget_factory: Factory used for elements parsed from markup
            materializer: Optional callable ``(element, position, size)``
                replacing the default materialization entirely
        """
        self.widget_factory = widget_factory
        self.materializer = materializer

    def materialize(self, element: Any, position: Vector2, size: Vector2) -> WidgetHandle:
        """
        Create the widget of one element.

        Markup elements go through the widget factory; host elements render
        themselves.

        Args:
            element: Element to materialize
            position: Absolute position of the element
            size: Size of the element

        Returns:
            WidgetHandle: The host widget

        Raises:
            RenderError: If a markup element has no factory to render it
        """
        if self.materializer is not None:
            return self.materializer(element, position, size)

        if isinstance(element, Element):
            factory = self.widget_factory
            if factory is None:
                raise RenderError(f"No widget factory available to render <{element.tag_name}>")
            if isinstance(element, Box):
                return factory.create_box(element, position, size)
            elif isinstance(element, Text):
                return factory.create_text(element, position, size)
            elif isinstance(element, Image):
                return factory.create_image(element, position, size)
            raise RenderError(f"Unsupported element type: {type(element).__name__}")

        render = getattr(element, 'render', None)
        if render is None:
            raise RenderError(f"Element {element!r} cannot be rendered")
        return render(position, size)

    def render(self, node: GeometryNode) -> WidgetHandle:
        """
        Render a geometry subtree.

        The node's widget is created first, then every child is rendered and
        attached under it in order.

        Args:
            node: Root of the geometry subtree

        Returns:
            WidgetHandle: Widget of the subtree root
        """
        geometry = node.geometry
        widget = self.materialize(node.element, geometry.position, geometry.size)

        for child in node.children:
            child_widget = self.render(child)
            widget.add_child_widget(child_widget)

        return widget

    def render_into(self, node: GeometryNode, container: Any, flatten: bool = False) -> None:
        """
        Render a geometry tree directly into a host container.

        Args:
            node: Root of the geometry tree
            container: Host widget receiving the result
            flatten: Attach every widget straight into the container, in
                pre-order, instead of nesting them under their parents; the
                geometry is absolute so both produce the same placement
        """
        if not flatten:
            container.add_child_widget(self.render(node))
            return

        count = 0
        for current in node.walk():
            geometry = current.geometry
            widget = self.materialize(current.element, geometry.position, geometry.size)
            container.add_child_widget(widget)
            count += 1
        logger.debug(f"Attached {count} widgets into container")
