"""
Element tree produced by the markup parser.

Elements are immutable value trees. They expose the same ``get_layout`` /
``get_children`` accessors as host elements so the layout-tree builder can
treat both uniformly.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .style import Color, Layout


@dataclass(frozen=True)
class Element:
    """Base element: a style record and an ordered tuple of children."""

    layout: Layout = field(default_factory=Layout)
    children: Tuple['Element', ...] = ()

    tag_name = 'element'

    def get_layout(self) -> Layout:
        return self.layout

    def get_children(self) -> Tuple['Element', ...]:
        return self.children

    def _properties(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Describe this element and its subtree as plain data.

        Returns:
            Dict[str, Any]: Tag, element properties, layout and children
        """
        result = {'tag': self.tag_name}
        result.update({key: value for key, value in self._properties().items() if value is not None})
        result['layout'] = self.layout.to_dict()
        if self.children:
            result['children'] = [child.to_dict() for child in self.children]
        return result


@dataclass(frozen=True)
class Box(Element):
    """Container element."""

    background_color: Optional[Color] = None

    tag_name = 'box'

    def _properties(self) -> Dict[str, Any]:
        return {'background-color': _hex(self.background_color)}


@dataclass(frozen=True)
class Text(Element):
    """Literal text content."""

    content: str = ''
    font_size: Optional[int] = None
    color: Optional[Color] = None

    tag_name = 'text'

    def _properties(self) -> Dict[str, Any]:
        return {'content': self.content, 'font-size': self.font_size, 'color': _hex(self.color)}


@dataclass(frozen=True)
class Image(Element):
    """Image taken from a texture atlas."""

    atlas: str = ''
    part: Optional[str] = None
    tint: Optional[Color] = None
    nine_slice: bool = False

    tag_name = 'img'

    def _properties(self) -> Dict[str, Any]:
        return {
            'atlas': self.atlas,
            'part': self.part,
            'tint': _hex(self.tint),
            'nine-slice': self.nine_slice,
        }


def _hex(color: Optional[Color]) -> Optional[str]:
    return color.to_hex() if color is not None else None


def count_elements(element: Any) -> int:
    """Count the nodes of an element tree (markup or host)."""
    return 1 + sum(count_elements(child) for child in element.get_children())
