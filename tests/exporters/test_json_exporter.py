import json
import os
import shutil
import tempfile
import unittest
from datetime import date
from decimal import Decimal

from tabular_export.builders.grid_builder import GridBuilder
from tabular_export.config.models import JsonOptions
from tabular_export.exporters.json_exporter import JsonExporter


class TestJsonExporter(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_nested_array_output(self):
        builder = GridBuilder()
        builder.set_header([['Name', 'Qty']])
        builder.add_rows([['Bolt', 4], ['Nut', 10]])
        builder.set_index_list([1, 2])
        path = builder.export_json('items', self.tmp_dir, include_index_start=True)

        self.assertEqual(path, os.path.join(self.tmp_dir, 'items.json'))
        with open(path, encoding='utf-8') as f:
            text = f.read()
        self.assertEqual(json.loads(text), [['Name', 'Qty'], [1, 2], ['Bolt', 4], ['Nut', 10]])
        # pretty-printed with four-space indentation
        self.assertIn('\n    [\n        "Name",', text)

    def test_overwrites_existing_file(self):
        exporter = JsonExporter()
        path = exporter.export([['first', 'much longer content']], 'data', self.tmp_dir)
        exporter.export([['second']], 'data', self.tmp_dir)
        with open(path, encoding='utf-8') as f:
            self.assertEqual(json.load(f), [['second']])

    def test_database_values_are_stringified(self):
        path = JsonExporter().export([[Decimal('1.50'), date(2025, 1, 16)]], 'db', self.tmp_dir)
        with open(path, encoding='utf-8') as f:
            self.assertEqual(json.load(f), [['1.50', '2025-01-16']])

    def test_custom_indent(self):
        path = JsonExporter(JsonOptions(indent=2)).export([['x']], 'compact', self.tmp_dir)
        with open(path, encoding='utf-8') as f:
            self.assertEqual(f.read(), '[\n  [\n    "x"\n  ]\n]')

    def test_without_directory_uses_filename(self):
        cwd = os.getcwd()
        os.chdir(self.tmp_dir)
        try:
            path = JsonExporter().export([['x']], 'local')
            self.assertEqual(path, 'local.json')
            self.assertTrue(os.path.isfile(os.path.join(self.tmp_dir, 'local.json')))
        finally:
            os.chdir(cwd)


if __name__ == '__main__':
    unittest.main()
