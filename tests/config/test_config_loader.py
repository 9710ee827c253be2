import json
import os
import shutil
import tempfile
import unittest

from pydantic import ValidationError

from tabular_export.config.config_loader import ExportConfigLoader
from tabular_export.config.models import CsvOptions, ExcelOptions


class TestExportConfigLoader(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def _write_profile(self, content):
        path = os.path.join(self.tmp_dir, 'profile.json')
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(content, f)
        return path

    def test_camel_case_profile(self):
        path = self._write_profile({
            "outputDir": "exports/monthly",
            "includeIndexStart": True,
            "header": [["Name", "Total"]],
            "footer": [["Generated &amp; checked"]],
            "indexList": [3, 4],
            "mergeRegions": ["A1:B1"],
            "csv": {"delimiter": ";", "addBom": True},
            "excel": {"fontSize": 11, "sheetTitle": "Monthly"},
            "json": {"indent": 2},
        })
        loader = ExportConfigLoader(path)

        self.assertEqual(loader.get_output_dir(), "exports/monthly")
        self.assertTrue(loader.get_profile().include_index_start)
        self.assertFalse(loader.get_profile().include_index_end)
        self.assertEqual(loader.get_header(), [["Name", "Total"]])
        self.assertEqual(loader.get_footer(), [["Generated &amp; checked"]])
        self.assertEqual(loader.get_index_list(), [3, 4])
        self.assertEqual(loader.get_merge_regions(), ["A1:B1"])
        self.assertEqual(loader.get_csv_options().delimiter, ";")
        self.assertTrue(loader.get_csv_options().add_bom)
        self.assertEqual(loader.get_excel_options().font_size, 11)
        self.assertEqual(loader.get_excel_options().sheet_title, "Monthly")
        self.assertEqual(loader.get_json_options().indent, 2)

    def test_empty_profile_uses_defaults(self):
        loader = ExportConfigLoader(self._write_profile({}))
        self.assertEqual(loader.get_csv_options(), CsvOptions())
        self.assertEqual(loader.get_excel_options().font_size, 13)
        self.assertEqual(loader.get_merge_regions(), [])
        self.assertIsNone(loader.get_output_dir())

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            ExportConfigLoader(os.path.join(self.tmp_dir, 'missing.json'))

    def test_invalid_options_raise(self):
        path = self._write_profile({"csv": {"delimiter": ";;"}})
        with self.assertRaises(ValidationError):
            ExportConfigLoader(path)


class TestOptionModels(unittest.TestCase):

    def test_csv_defaults(self):
        options = CsvOptions()
        self.assertEqual(options.delimiter, ',')
        self.assertEqual(options.quotechar, '"')
        self.assertEqual(options.escapechar, '\\')
        self.assertFalse(options.add_bom)

    def test_csv_without_doubling_needs_escapechar(self):
        with self.assertRaises(ValidationError):
            CsvOptions(doublequote=False, escapechar=None)
        with self.assertRaises(ValidationError):
            CsvOptions(doublequote=False, escapechar='')
        self.assertIsNone(CsvOptions(escapechar=None).escapechar)

    def test_font_size_must_be_positive(self):
        with self.assertRaises(ValidationError):
            ExcelOptions(font_size=0)


if __name__ == '__main__':
    unittest.main()
