"""Tests for the JSON configuration."""
import json
import os
import shutil
import tempfile
import unittest

from flexy_engine.utils.config import DEFAULTS, Config


class ConfigTest(unittest.TestCase):

    def setUp(self) -> None:
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, 'config.json')

    def tearDown(self) -> None:
        shutil.rmtree(self.temp_dir)

    def test_defaults_without_file(self) -> None:
        config = Config(self.path)
        self.assertEqual(config.get_all(), DEFAULTS)
        self.assertEqual(config.get('markup.tree_builder'), 'html.parser')
        self.assertFalse(config.get('rendering.flatten_into_container'))

    def test_file_values_are_merged_over_defaults(self) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({'markup': {'tree_builder': 'html5lib'}}, f)
        config = Config(self.path)
        self.assertEqual(config.get('markup.tree_builder'), 'html5lib')
        self.assertEqual(config.get('templates.extension'), '.html')

    def test_invalid_file_falls_back_to_defaults(self) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write('{not json')
        self.assertEqual(Config(self.path).get_all(), DEFAULTS)

    def test_non_object_file_falls_back_to_defaults(self) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump([1, 2], f)
        self.assertEqual(Config(self.path).get_all(), DEFAULTS)

    def test_get_and_set(self) -> None:
        config = Config(self.path)
        self.assertEqual(config.get('missing.key', 'fallback'), 'fallback')
        config.set('custom.nested.value', 3)
        self.assertEqual(config.get('custom.nested.value'), 3)
        config.set('custom.nested', 'flat')
        self.assertIsNone(config.get('custom.nested.value'))

    def test_save_and_reload(self) -> None:
        config = Config(self.path)
        config.set('rendering.flatten_into_container', True)
        config.save()
        self.assertTrue(Config(self.path).get('rendering.flatten_into_container'))

    def test_defaults_are_not_shared(self) -> None:
        config = Config(self.path)
        config.set('markup.tree_builder', 'html5lib')
        self.assertEqual(DEFAULTS['markup']['tree_builder'], 'html.parser')


if __name__ == '__main__':
    unittest.main()
