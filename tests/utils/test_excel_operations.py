import unittest
from openpyxl import Workbook

from tabular_export.utils.excel_operations import apply_merge_regions, set_default_font_size, write_rows


class TestExcelOperations(unittest.TestCase):

    def setUp(self):
        self.wb = Workbook()
        self.ws = self.wb.active

    def tearDown(self):
        self.wb.close()

    def test_write_rows(self):
        count = write_rows(self.ws, [['a', 1], ['b'], []])
        self.assertEqual(count, 3)
        self.assertEqual(self.ws['A1'].value, 'a')
        self.assertEqual(self.ws['B1'].value, 1)
        self.assertEqual(self.ws['A2'].value, 'b')

    def test_apply_merge_regions(self):
        write_rows(self.ws, [['Title', None, None], ['x', 'y', 'z']])
        apply_merge_regions(self.ws, ['A1:C1', 'A2:A3'])
        merged = [str(r) for r in self.ws.merged_cells.ranges]
        self.assertIn('A1:C1', merged)
        self.assertIn('A2:A3', merged)

    def test_invalid_merge_region_raises(self):
        with self.assertRaises(ValueError):
            apply_merge_regions(self.ws, ['not a range'])

    def test_set_default_font_size(self):
        set_default_font_size(self.wb, 13)
        self.assertEqual(self.wb._fonts[0].size, 13)
        self.ws['A1'] = 'value'
        self.assertEqual(self.ws['A1'].font.size, 13)


if __name__ == '__main__':
    unittest.main()
