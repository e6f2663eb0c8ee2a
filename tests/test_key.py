import os
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bstdict import Key, Record


class KeyTest(unittest.TestCase):
    def test_label_is_lowercased(self):
        self.assertEqual(Key("Apple", 1).label, "apple")
        self.assertEqual(Key("Apple", 1), Key("apple", 1))
        self.assertEqual(Key("APPLE", 1).compare(Key("apple", 1)), 0)

    def test_label_orders_before_type(self):
        self.assertEqual(Key("a", 9).compare(Key("b", 1)), -1)
        self.assertEqual(Key("b", 1).compare(Key("a", 9)), 1)

    def test_type_breaks_label_ties(self):
        self.assertEqual(Key("a", 1).compare(Key("a", 2)), -1)
        self.assertEqual(Key("a", 2).compare(Key("a", 1)), 1)
        self.assertEqual(Key("a", 2).compare(Key("a", 2)), 0)

    def test_rich_comparisons_follow_compare(self):
        keys = [Key("pear", 2), Key("Apple", 3), Key("apple", 1), Key("fig", 1)]
        ordered = sorted(keys)
        self.assertEqual(
            [(k.label, k.type) for k in ordered],
            [("apple", 1), ("apple", 3), ("fig", 1), ("pear", 2)],
        )
        self.assertLess(Key("apple", 1), Key("apple", 2))
        self.assertEqual(len({Key("Fig", 1), Key("fig", 1)}), 1)

    def test_key_is_immutable(self):
        key = Key("apple", 1)
        with self.assertRaises(AttributeError):
            key.label = "pear"
        with self.assertRaises(AttributeError):
            key.type = 2


class RecordTest(unittest.TestCase):
    def test_accessors(self):
        record = Record(Key("Cat", 1), "a small feline")
        self.assertEqual(record.key, Key("cat", 1))
        self.assertEqual(record.data, "a small feline")

    def test_record_is_immutable(self):
        record = Record(Key("cat", 1), "a small feline")
        with self.assertRaises(AttributeError):
            record.key = Key("dog", 1)
        with self.assertRaises(AttributeError):
            record.data = "changed"


if __name__ == "__main__":
    unittest.main()
