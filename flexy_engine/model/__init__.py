"""
Data model: style records and the element tree.
"""

from .style import (
    AUTO, Color, Dimension, DimensionUnit, Edges, FlexAlign, FlexDirection,
    FlexWrap, Geometry, Layout, PositionType, Vector2,
)
from .elements import Box, Element, Image, Text, count_elements

__all__ = [
    'AUTO', 'Color', 'Dimension', 'DimensionUnit', 'Edges', 'FlexAlign',
    'FlexDirection', 'FlexWrap', 'Geometry', 'Layout', 'PositionType', 'Vector2',
    'Box', 'Element', 'Image', 'Text', 'count_elements',
]
