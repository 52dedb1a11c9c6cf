"""Tests for loading named templates."""
import os
import shutil
import tempfile
import unittest

from flexy_engine.errors import EmptyDocument, TemplateError, TemplateNotFound
from flexy_engine.model import Box, Text
from flexy_engine.parser import MarkupParser
from flexy_engine.template_loader import TemplateLoader


class TemplateLoaderTest(unittest.TestCase):

    def setUp(self) -> None:
        self.directory = tempfile.mkdtemp()
        self.loader = TemplateLoader(self.directory)

    def tearDown(self) -> None:
        shutil.rmtree(self.directory)

    def write(self, filename: str, markup: str) -> None:
        with open(os.path.join(self.directory, filename), 'w', encoding='utf-8') as f:
            f.write(markup)

    def test_load(self) -> None:
        self.write('menu.html', '<box flex-direction="column"><text>Start</text></box>')
        root = self.loader.load('menu')
        self.assertIsInstance(root, Box)
        self.assertEqual(root.children, (Text(content='Start'),))

    def test_name_may_carry_the_extension(self) -> None:
        self.write('menu.html', '<text>x</text>')
        self.assertEqual(self.loader.path_for('menu.html'), self.loader.path_for('menu'))

    def test_custom_extension(self) -> None:
        self.write('menu.flexy', '<text>x</text>')
        loader = TemplateLoader(self.directory, extension='.flexy')
        self.assertEqual(loader.load('menu').content, 'x')

    def test_missing_template(self) -> None:
        with self.assertRaises(TemplateNotFound) as ctx:
            self.loader.load('nope')
        self.assertEqual(ctx.exception.name, 'nope')
        self.assertTrue(ctx.exception.path.endswith('nope.html'))
        self.assertIsInstance(ctx.exception, FileNotFoundError)

    def test_rejects_names_outside_the_directory(self) -> None:
        for name in ('', '..', '../secret', os.path.join('sub', 'menu')):
            with self.subTest(name=name):
                with self.assertRaises(TemplateError):
                    self.loader.path_for(name)

    def test_parse_errors_propagate(self) -> None:
        self.write('empty.html', '   ')
        with self.assertRaises(EmptyDocument):
            self.loader.load('empty')

    def test_uses_the_given_parser(self) -> None:
        parser = MarkupParser('html5lib')
        loader = TemplateLoader(self.directory, parser=parser)
        self.assertIs(loader.parser, parser)


if __name__ == '__main__':
    unittest.main()
