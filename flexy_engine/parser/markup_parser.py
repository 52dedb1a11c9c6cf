"""
Markup parser implementation.
This module turns the Flexy markup dialect into a typed element tree.

Supported tags are ``box``, ``text`` and ``img``; tokenization is delegated to
BeautifulSoup (``html.parser`` by default, ``html5lib`` on request).
"""

import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction
from html5lib.constants import voidElements

from ..errors import (
    EmptyDocument, InvalidLiteral, MultipleRoots, ParseError, SelfClosingTag, UnexpectedTag,
)
from ..model.elements import Box, Element, Image, Text
from .attributes import AttributeReader
from .style_builder import build_layout

logger = logging.getLogger(__name__)

TREE_BUILDERS = ('html.parser', 'html5lib')

# Tokenizer node types that never produce an element
_NON_CONTENT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)

# Control characters that upset the tokenizers
_CONTROL_CHARS = ''.join(chr(code) for code in range(0x20) if chr(code) not in '\t\n\r')

_COMMENT = re.compile(r'<!--.*?-->', re.DOTALL)
_SELF_CLOSING_TAG = re.compile(r'<([A-Za-z][A-Za-z0-9-]*)(?:\s(?:[^>"\']|"[^"]*"|\'[^\']*\')*)?/\s*>')


class NodeKind(Enum):
    """Closed set of tokenizer node kinds the parser dispatches on."""
    TAG = "tag"
    RAW = "raw"
    COMMENT = "comment"


def node_kind(node) -> NodeKind:
    """Classify a BeautifulSoup node."""
    if isinstance(node, Tag):
        return NodeKind.TAG
    if isinstance(node, _NON_CONTENT_STRINGS):
        return NodeKind.COMMENT
    if isinstance(node, NavigableString):
        return NodeKind.RAW
    raise ParseError(f"Unsupported markup node: {type(node).__name__}")


def _is_content(node) -> bool:
    kind = node_kind(node)
    if kind == NodeKind.COMMENT:
        return False
    if kind == NodeKind.RAW:
        return bool(str(node).strip())
    return True


class MarkupParser:
    """Recursive-descent parser from Flexy markup to an Element tree."""

    def __init__(self, tree_builder: str = 'html.parser'):
        """
        Initialize the markup parser.

        Args:
            tree_builder: BeautifulSoup tree builder used for tokenization,
                ``'html.parser'`` or ``'html5lib'``
        """
        if tree_builder not in TREE_BUILDERS:
            raise ValueError(f"Unsupported tree builder: {tree_builder}")
        self.tree_builder = tree_builder
        self._tag_parsers: Dict[str, Callable[[Tag], Optional[Element]]] = {
            'box': self._parse_box,
            'img': self._parse_image,
            'text': self._parse_text,
        }
        logger.debug(f"Markup parser initialized (tree builder: {tree_builder})")

    def parse(self, markup: str) -> Element:
        """
        Parse a markup document into an element tree.

        Args:
            markup: Markup document with exactly one top-level node

        Returns:
            Element: Root of the element tree

        Raises:
            ParseError: If the document is empty, has several roots, uses an
                unknown tag or carries a malformed attribute value
        """
        if isinstance(markup, bytes):
            markup = markup.decode('utf-8')
        markup = self._clean_markup(markup)
        if self.tree_builder == 'html5lib':
            self._check_self_closing(markup)

        roots = [node for node in self._top_level_nodes(markup) if _is_content(node)]
        if not roots:
            raise EmptyDocument()
        if len(roots) > 1:
            raise MultipleRoots(len(roots))

        element = self._parse_node(roots[0])
        if element is None:
            # The only root was dropped (an <img> without an atlas)
            raise EmptyDocument("Markup document root produced no element")
        return element

    def _clean_markup(self, markup: str) -> str:
        """
        Remove characters that confuse the tokenizers.

        Args:
            markup: Markup to clean

        Returns:
            str: Cleaned markup
        """
        if markup.startswith('\ufeff'):
            logger.debug("Removing BOM marker from the beginning of markup")
            markup = markup[1:]
        return markup.translate({ord(char): None for char in _CONTROL_CHARS})

    def _check_self_closing(self, markup: str) -> None:
        """
        Reject ``<tag/>`` on non-void tags.

        html5lib ignores the slash on such tags and keeps them open, which would
        swallow the following siblings as children.

        Raises:
            SelfClosingTag: For the first offending tag outside comments
        """
        for match in _SELF_CLOSING_TAG.finditer(_COMMENT.sub('', markup)):
            name = match.group(1).lower()
            if name not in voidElements:
                raise SelfClosingTag(name)

    def _top_level_nodes(self, markup: str) -> List:
        dom = BeautifulSoup(markup, self.tree_builder)
        if self.tree_builder == 'html5lib':
            # html5lib wraps fragments into <html><head/><body>...</body></html>
            return list(dom.body.contents) if dom.body is not None else []
        return list(dom.contents)

    def _parse_node(self, node) -> Optional[Element]:
        kind = node_kind(node)
        if kind == NodeKind.TAG:
            return self._parse_tag(node)
        if kind == NodeKind.RAW:
            text = str(node)
            if not text.strip():
                return None
            return Text(content=text)
        return None

    def _parse_tag(self, tag: Tag) -> Optional[Element]:
        parse = self._tag_parsers.get(tag.name)
        if parse is None:
            raise UnexpectedTag(tag.name)
        try:
            return parse(tag)
        except InvalidLiteral as e:
            if e.tag is None:
                e.tag = tag.name
            raise

    def _parse_children(self, tag: Tag) -> tuple:
        children = []
        for child in tag.children:
            element = self._parse_node(child)
            if element is not None:
                children.append(element)
        return tuple(children)

    def _parse_box(self, tag: Tag) -> Box:
        attrs = AttributeReader(tag.attrs, tag.name)
        children = self._parse_children(tag)
        return Box(
            layout=build_layout(attrs),
            children=children,
            background_color=attrs.get_color('background-color'),
        )

    def _parse_image(self, tag: Tag) -> Optional[Image]:
        attrs = AttributeReader(tag.attrs, tag.name)
        atlas = attrs.get_str('atlas')
        if atlas is None:
            logger.debug("Skipping <img> without an atlas attribute")
            return None
        nine_slice = attrs.get_bool('nine-slice')
        return Image(
            layout=build_layout(attrs),
            atlas=atlas,
            part=attrs.get_str('part'),
            tint=attrs.get_color('tint'),
            nine_slice=bool(nine_slice),
        )

    def _parse_text(self, tag: Tag) -> Text:
        attrs = AttributeReader(tag.attrs, tag.name)
        parts = []
        for child in tag.children:
            kind = node_kind(child)
            if kind == NodeKind.TAG:
                raise UnexpectedTag(child.name)
            if kind == NodeKind.RAW:
                parts.append(str(child))
        return Text(
            layout=build_layout(attrs),
            content=''.join(parts),
            font_size=attrs.get_int('font-size'),
            color=attrs.get_color('color'),
        )


def parse(markup: str, tree_builder: str = 'html.parser') -> Element:
    """Parse markup with a one-off parser."""
    return MarkupParser(tree_builder).parse(markup)
