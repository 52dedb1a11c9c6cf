"""Tests for the markup parser."""
import unittest

from flexy_engine.errors import (
    EmptyDocument, InvalidEnumValue, MalformedBoolean, MalformedNumber, MissingPrefix,
    MultipleRoots, ParseError, SelfClosingTag, UnexpectedTag,
)
from flexy_engine.model import (
    Box, Color, Dimension, FlexDirection, Image, Layout, Text, count_elements,
)
from flexy_engine.parser.markup_parser import MarkupParser


class MarkupParserTest(unittest.TestCase):
    """Parsing with the default html.parser tokenizer."""

    def setUp(self) -> None:
        self.parser = MarkupParser()

    def test_box_with_text_child(self) -> None:
        root = self.parser.parse('<box flex-grow="1">hello</box>')
        self.assertIsInstance(root, Box)
        self.assertEqual(root.layout.flex_grow, 1.0)
        self.assertEqual(root.children, (Text(content="hello"),))

    def test_children_keep_source_order(self) -> None:
        root = self.parser.parse(
            '<box><text>a</text><box></box><text>b</text><box><text>c</text></box></box>'
        )
        self.assertEqual(len(root.children), 4)
        self.assertEqual([type(child) for child in root.children], [Text, Box, Text, Box])
        self.assertEqual(root.children[0].content, "a")
        self.assertEqual(root.children[2].content, "b")
        self.assertEqual(root.children[3].children[0].content, "c")

    def test_indentation_does_not_create_text_nodes(self) -> None:
        markup = """
        <box flex-direction="column">
            <text>first</text>
            <text>second</text>
        </box>
        """
        root = self.parser.parse(markup)
        self.assertEqual(root.layout.flex_direction, FlexDirection.COLUMN)
        self.assertEqual([child.content for child in root.children], ["first", "second"])

    def test_comments_are_skipped(self) -> None:
        root = self.parser.parse('<!-- header --><box><!-- note --><text>a</text></box>')
        self.assertEqual(len(root.children), 1)

    def test_text_tag_attributes(self) -> None:
        root = self.parser.parse(
            '<box><text font-size="18" color="#ff8800" width="50%">Title</text></box>'
        )
        text = root.children[0]
        self.assertEqual(text.content, "Title")
        self.assertEqual(text.font_size, 18)
        self.assertEqual(text.color, Color(255, 136, 0, 255))
        self.assertEqual(text.layout.width, Dimension.percent(50))

    def test_raw_text_has_no_overrides(self) -> None:
        text = self.parser.parse('<box>plain</box>').children[0]
        self.assertIsNone(text.font_size)
        self.assertIsNone(text.color)
        self.assertEqual(text.layout, Layout())

    def test_box_background_color(self) -> None:
        root = self.parser.parse('<box background-color="#102030"></box>')
        self.assertEqual(root.background_color, Color(16, 32, 48))
        self.assertIsNone(self.parser.parse('<box></box>').background_color)

    def test_malformed_background_color_is_not_ignored(self) -> None:
        with self.assertRaises(MissingPrefix) as ctx:
            self.parser.parse('<box background-color="blue"></box>')
        self.assertEqual(ctx.exception.attribute, 'background-color')
        self.assertEqual(ctx.exception.tag, 'box')

    def test_image(self) -> None:
        root = self.parser.parse(
            '<box><img atlas="hud" part="frame" tint="#00ff00" nine-slice="true" height="32pt"/></box>'
        )
        image = root.children[0]
        self.assertIsInstance(image, Image)
        self.assertEqual(image.atlas, "hud")
        self.assertEqual(image.part, "frame")
        self.assertEqual(image.tint, Color(0, 255, 0))
        self.assertTrue(image.nine_slice)
        self.assertEqual(image.layout.height, Dimension.point(32))

    def test_image_defaults(self) -> None:
        image = self.parser.parse('<box><img atlas="hud"/></box>').children[0]
        self.assertIsNone(image.part)
        self.assertIsNone(image.tint)
        self.assertFalse(image.nine_slice)

    def test_image_without_atlas_is_dropped(self) -> None:
        root = self.parser.parse('<box><img/></box>')
        self.assertIsInstance(root, Box)
        self.assertEqual(len(root.children), 0)

    def test_image_without_atlas_keeps_siblings(self) -> None:
        root = self.parser.parse('<box><text>a</text><img part="x"/><text>b</text></box>')
        self.assertEqual([child.content for child in root.children], ["a", "b"])

    def test_malformed_nine_slice(self) -> None:
        with self.assertRaises(MalformedBoolean):
            self.parser.parse('<box><img atlas="hud" nine-slice="yes"/></box>')

    def test_unknown_tag(self) -> None:
        with self.assertRaises(UnexpectedTag) as ctx:
            self.parser.parse('<card>x</card>')
        self.assertEqual(ctx.exception.tag, "card")

    def test_unknown_nested_tag_fails_whole_parse(self) -> None:
        with self.assertRaises(UnexpectedTag) as ctx:
            self.parser.parse('<box><text>ok</text><box><div></div></box></box>')
        self.assertEqual(ctx.exception.tag, "div")

    def test_tag_inside_text_is_rejected(self) -> None:
        with self.assertRaises(UnexpectedTag) as ctx:
            self.parser.parse('<box><text>a<card>b</card></text></box>')
        self.assertEqual(ctx.exception.tag, "card")

    def test_supported_tag_inside_text_is_rejected(self) -> None:
        with self.assertRaises(UnexpectedTag) as ctx:
            self.parser.parse('<text>a<box></box></text>')
        self.assertEqual(ctx.exception.tag, "box")

    def test_comment_inside_text_is_skipped(self) -> None:
        self.assertEqual(self.parser.parse('<text>a<!-- note -->b</text>').content, "ab")

    def test_self_closing_box_keeps_siblings(self) -> None:
        root = self.parser.parse('<box><box/><text>a</text></box>')
        self.assertEqual([type(child) for child in root.children], [Box, Text])

    def test_nested_literal_error_propagates(self) -> None:
        with self.assertRaises(MalformedNumber) as ctx:
            self.parser.parse('<box><box><text font-size="big">x</text></box></box>')
        self.assertEqual(ctx.exception.tag, "text")
        self.assertEqual(ctx.exception.attribute, "font-size")

    def test_layout_error_propagates(self) -> None:
        with self.assertRaises(InvalidEnumValue):
            self.parser.parse('<box><box align-items="middle"></box></box>')

    def test_empty_document(self) -> None:
        for markup in ("", "   \n ", "<!-- only a comment -->"):
            with self.subTest(markup=markup):
                with self.assertRaises(EmptyDocument):
                    self.parser.parse(markup)

    def test_root_image_without_atlas_is_empty(self) -> None:
        with self.assertRaises(EmptyDocument):
            self.parser.parse('<img/>')

    def test_multiple_roots(self) -> None:
        with self.assertRaises(MultipleRoots) as ctx:
            self.parser.parse('<box></box><box></box>')
        self.assertEqual(ctx.exception.count, 2)

    def test_all_failures_are_parse_errors(self) -> None:
        for markup in ('<card/>', '', '<box width="12"></box>'):
            with self.subTest(markup=markup):
                with self.assertRaises(ParseError):
                    self.parser.parse(markup)

    def test_raw_text_root(self) -> None:
        self.assertEqual(self.parser.parse("just text"), Text(content="just text"))

    def test_bytes_input(self) -> None:
        root = self.parser.parse('<box><text>é</text></box>'.encode('utf-8'))
        self.assertEqual(root.children[0].content, "é")

    def test_byte_order_mark_is_removed(self) -> None:
        root = self.parser.parse('\ufeff<box></box>')
        self.assertIsInstance(root, Box)

    def test_node_count(self) -> None:
        root = self.parser.parse('<box><box><text>a</text></box><img atlas="x"/></box>')
        self.assertEqual(count_elements(root), 4)

    def test_rejects_unknown_tree_builder(self) -> None:
        with self.assertRaises(ValueError):
            MarkupParser('lxml-xml')


class Html5libMarkupParserTest(unittest.TestCase):
    """The html5lib tokenizer produces the same trees for well-formed markup."""

    def setUp(self) -> None:
        self.parser = MarkupParser('html5lib')

    def test_box_with_text_child(self) -> None:
        root = self.parser.parse('<box flex-grow="1">hello</box>')
        self.assertIsInstance(root, Box)
        self.assertEqual(root.layout.flex_grow, 1.0)
        self.assertEqual(root.children, (Text(content="hello"),))

    def test_nested_tree(self) -> None:
        root = self.parser.parse(
            '<box flex-direction="column"><text font-size="12">a</text><box><text>b</text></box></box>'
        )
        self.assertEqual(root.layout.flex_direction, FlexDirection.COLUMN)
        self.assertEqual(len(root.children), 2)
        self.assertEqual(root.children[0].font_size, 12)
        self.assertEqual(root.children[1].children[0].content, "b")

    def test_unknown_tag(self) -> None:
        with self.assertRaises(UnexpectedTag):
            self.parser.parse('<card>x</card>')

    def test_empty_document(self) -> None:
        with self.assertRaises(EmptyDocument):
            self.parser.parse('')

    def test_self_closing_box_is_rejected(self) -> None:
        with self.assertRaises(SelfClosingTag) as ctx:
            self.parser.parse('<box><box/><text>a</text></box>')
        self.assertEqual(ctx.exception.tag, "box")
        self.assertIsInstance(ctx.exception, ParseError)

    def test_self_closing_with_attributes_is_rejected(self) -> None:
        with self.assertRaises(SelfClosingTag):
            self.parser.parse('<box><text color="#ffffff" /></box>')

    def test_explicit_close_tags_keep_siblings(self) -> None:
        root = self.parser.parse('<box><box></box><text>a</text></box>')
        self.assertEqual([type(child) for child in root.children], [Box, Text])

    def test_self_closing_image_is_accepted(self) -> None:
        root = self.parser.parse('<box><img atlas="hud"/><text>a</text></box>')
        self.assertEqual([type(child) for child in root.children], [Image, Text])

    def test_self_closing_inside_comment_is_ignored(self) -> None:
        root = self.parser.parse('<box><!-- <box/> --><text>a</text></box>')
        self.assertEqual(root.children, (Text(content="a"),))

    def test_tag_inside_text_is_rejected(self) -> None:
        with self.assertRaises(UnexpectedTag) as ctx:
            self.parser.parse('<box><text>a<card>b</card></text></box>')
        self.assertEqual(ctx.exception.tag, "card")


if __name__ == '__main__':
    unittest.main()
