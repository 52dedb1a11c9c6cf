"""
Flexy Engine - declarative markup to flexbox layout to host widgets.
"""

import logging

from flexy_engine.core import FlexyEngine
from flexy_engine.errors import (
    EmptyDocument, FlexyError, InvalidHostValue, InvalidLiteral, LiteralError,
    LayoutSolverError, ParseError, SelfClosingTag, TemplateError, TemplateNotFound,
    UnexpectedTag,
)
from flexy_engine.layout import LayoutEngine
from flexy_engine.model import Box, Color, Dimension, Element, Image, Layout, Text
from flexy_engine.parser import parse as parse_markup
from flexy_engine.parser import parse_color, parse_dimension

# Package information
__version__ = "0.3.0"
__description__ = "Markup compiler and flexbox layout bridge for host UI toolkits"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'FlexyEngine', 'LayoutEngine',
    'Box', 'Color', 'Dimension', 'Element', 'Image', 'Layout', 'Text',
    'parse_markup', 'parse_color', 'parse_dimension',
    'FlexyError', 'ParseError', 'EmptyDocument', 'UnexpectedTag', 'SelfClosingTag',
    'InvalidLiteral', 'LiteralError',
    'TemplateError', 'TemplateNotFound', 'InvalidHostValue', 'LayoutSolverError',
]
