from __future__ import annotations

import unittest

from lineseek.offsets import DEFAULT_CAPACITY, LineOffsetTable


class LineOffsetTableTests(unittest.TestCase):
    def test_new_table_is_presized_and_empty(self) -> None:
        table = LineOffsetTable()
        self.assertEqual(table.capacity, DEFAULT_CAPACITY)
        self.assertNotIn(0, table)
        with self.assertRaises(LookupError):
            table[0]

    def test_record_and_lookup(self) -> None:
        table = LineOffsetTable(4)
        table.record(0, 0)
        table.record(1, 17)
        self.assertEqual(table[0], 0)
        self.assertEqual(table[1], 17)
        self.assertIn(1, table)
        self.assertNotIn(2, table)

    def test_capacity_doubles_until_line_fits(self) -> None:
        table = LineOffsetTable(3)
        table.record(3, 40)
        self.assertEqual(table.capacity, 6)
        table.record(20, 99)
        self.assertEqual(table.capacity, 24)
        self.assertEqual(table[3], 40)
        self.assertEqual(table[20], 99)
        self.assertNotIn(19, table)

    def test_capacity_is_at_least_one(self) -> None:
        table = LineOffsetTable(0)
        self.assertEqual(table.capacity, 1)
        table.record(1, 5)
        self.assertEqual(table.capacity, 2)

    def test_invalid_entries_are_rejected(self) -> None:
        table = LineOffsetTable(2)
        with self.assertRaises(IndexError):
            table.record(-1, 0)
        with self.assertRaises(ValueError):
            table.record(0, -3)
        self.assertNotIn(-1, table)
        self.assertNotIn("0", table)


if __name__ == "__main__":
    unittest.main()
