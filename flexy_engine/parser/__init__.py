"""
Markup and literal parsers.
"""

from .attributes import AttributeReader
from .literals import parse_color, parse_dimension, parse_number
from .markup_parser import MarkupParser, NodeKind, parse
from .style_builder import LAYOUT_ATTRIBUTES, build_layout

__all__ = [
    'AttributeReader', 'parse_color', 'parse_dimension', 'parse_number',
    'MarkupParser', 'NodeKind', 'parse', 'LAYOUT_ATTRIBUTES', 'build_layout',
]
