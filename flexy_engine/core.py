"""
Core Flexy Engine implementation.

This module provides the FlexyEngine class that ties markup parsing, layout
tree building, layout solving and widget rendering together and exposes the
entry points used by hosts.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from flexy_engine.errors import FlexyError
from flexy_engine.host import WidgetFactory, WidgetHandle
from flexy_engine.layout import GeometryNode, LayoutEngine, LayoutInvoker, LayoutTreeBuilder
from flexy_engine.model.elements import Element
from flexy_engine.parser import MarkupParser, parse_dimension
from flexy_engine.rendering import ResultRenderer
from flexy_engine.template_loader import TemplateLoader
from flexy_engine.utils.config import Config
from flexy_engine.utils.logging import PhaseTimer, log_exception

logger = logging.getLogger(__name__)


class FlexyEngine:
    """
    Flexy Engine integrates markup parsing, layout and rendering.

    Every render call rebuilds the layout tree and solves it from scratch;
    nothing is cached between calls.
    """

    def __init__(self, layout_engine: Optional[LayoutEngine] = None,
                 widget_factory: Optional[WidgetFactory] = None,
                 config: Optional[Config] = None):
        """
        Initialize the Flexy Engine.

        Args:
            layout_engine: Flexbox solver used by the render entry points
            widget_factory: Host factory for widgets of markup elements
            config: Configuration (defaults from ``~/.flexy/config.json``)
        """
        self.config = config or Config()
        self.layout_engine = layout_engine

        self.parser = MarkupParser(self.config.get('markup.tree_builder', 'html.parser'))
        self.templates = TemplateLoader(
            self.config.get('templates.directory'),
            self.config.get('templates.extension', '.html'),
            parser=self.parser,
        )
        self.tree_builder = LayoutTreeBuilder()
        self.renderer = ResultRenderer(widget_factory)
        self.flatten_into_container = bool(self.config.get('rendering.flatten_into_container', False))
        logger.debug("Flexy Engine initialized")

    def parse_markup(self, markup: str) -> Element:
        """
        Parse a markup string into an element tree.

        Raises:
            ParseError: If the markup is invalid
        """
        try:
            return self.parser.parse(markup)
        except FlexyError as e:
            log_exception(logger, e, "Error parsing markup")
            raise

    def load_template(self, name: str) -> Element:
        """
        Load a named template from the templates directory.

        Args:
            name: Template name without extension

        Returns:
            Element: Root of the template's element tree

        Raises:
            TemplateNotFound: If the template does not exist
            ParseError: If the template markup is invalid
        """
        try:
            return self.templates.load(name)
        except FlexyError as e:
            log_exception(logger, e, f"Error loading template '{name}'")
            raise

    def render_element(self, element: Any, size: Sequence[float]) -> WidgetHandle:
        """
        Lay out an element tree within a size and render it.

        Args:
            element: Root element (markup or host)
            size: ``(width, height)``; non-positive components are unconstrained

        Returns:
            WidgetHandle: Root widget of the rendered tree
        """
        timer = PhaseTimer(logger, "render_element")
        geometry = self._solve(element, size[0], size[1], timer)
        with timer.phase("render"):
            widget = self.renderer.render(geometry)
        logger.debug(f"Layout pass finished in {timer.total() * 1000:.2f} ms")
        return widget

    def render_dom(self, element: Any, container: Any) -> None:
        """
        Lay out an element tree within a container and render into it.

        Args:
            element: Root element (markup or host)
            container: Host widget providing ``get_size()`` and
                ``add_child_widget()``
        """
        width, height = container.get_size()
        timer = PhaseTimer(logger, "render_dom")
        geometry = self._solve(element, width, height, timer)
        with timer.phase("render"):
            self.renderer.render_into(geometry, container, flatten=self.flatten_into_container)
        logger.debug(f"Layout pass finished in {timer.total() * 1000:.2f} ms")

    def parse_dimension(self, text: str) -> Tuple[float, int]:
        """
        Parse a dimension literal into the host ``(value, unit_tag)`` form.

        Raises:
            InvalidLiteral: If the literal is malformed
        """
        return parse_dimension(text).to_host()

    def _solve(self, element: Any, width: Optional[float], height: Optional[float],
               timer: PhaseTimer) -> GeometryNode:
        if self.layout_engine is None:
            raise FlexyError("No layout engine configured")

        try:
            with timer.phase("build"):
                tree = self.tree_builder.build(element)
            with timer.phase("solve"):
                return LayoutInvoker(self.layout_engine).compute(tree, width, height)
        except FlexyError as e:
            log_exception(logger, e, "Error computing layout")
            raise
