import os
import unittest
from unittest import mock

from utility_ocr.config import load_settings


class TestLoadSettings(unittest.TestCase):
    def test_requires_input_path(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                load_settings()

    def test_defaults(self):
        with mock.patch.dict(os.environ, {"INPUT_PATH": "photos"}, clear=True):
            s = load_settings()
        self.assertEqual(s.input_path, "photos")
        self.assertEqual(s.mode, "receipt")
        self.assertEqual(s.bill_type, "electricity")
        self.assertEqual(s.ocr_lang_meter, "eng")
        self.assertEqual(s.ocr_lang_receipt, "heb+eng")
        self.assertIsNone(s.labels_path)
        self.assertIsNone(s.catalog_path)
        self.assertFalse(s.do_threshold)

    def test_overrides(self):
        env = {
            "INPUT_PATH": "photos",
            "MODE": "Meter",
            "BILL_TYPE": "water",
            "LIMIT": "5",
            "DO_THRESHOLD": "1",
            "LABELS_PATH": "labels.jsonl",
            "MIN_WIDTH": "800",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            s = load_settings()
        self.assertEqual(s.mode, "meter")
        self.assertEqual(s.bill_type, "water")
        self.assertEqual(s.limit, 5)
        self.assertEqual(s.min_width, 800)
        self.assertTrue(s.do_threshold)
        self.assertEqual(s.labels_path, "labels.jsonl")

    def test_rejects_unknown_values(self):
        with mock.patch.dict(os.environ, {"INPUT_PATH": "x", "MODE": "invoice"}, clear=True):
            with self.assertRaises(ValueError):
                load_settings()
        with mock.patch.dict(os.environ, {"INPUT_PATH": "x", "BILL_TYPE": "gas"}, clear=True):
            with self.assertRaises(ValueError):
                load_settings()


if __name__ == "__main__":
    unittest.main()
