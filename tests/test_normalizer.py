import unittest

from utility_ocr.errors import InvalidInput
from utility_ocr.normalizer import GLYPH_DIGIT_MAP, normalize


class TestNormalize(unittest.TestCase):
    def test_collapses_whitespace(self):
        self.assertEqual(normalize("  Total \n\t Due:   12  "), "Total Due: 12")
        self.assertEqual(normalize("  O 1\n2 ", "bare_number"), "0 1 2")

    def test_free_mode_strips_digit_commas(self):
        self.assertEqual(normalize("Amount due 1,234.50"), "Amount due 1234.50")
        self.assertEqual(normalize("1,2,3"), "123")
        # only a comma sitting between two digits
        self.assertEqual(normalize("water, 12 , 5"), "water, 12 , 5")

    def test_free_mode_normalizes_quotes(self):
        self.assertEqual(normalize("סה״כ לתשלום"), 'סה"כ לתשלום')
        self.assertEqual(normalize("קוט׳ש"), "קוט'ש")
        self.assertEqual(normalize("“total”"), '"total"')

    def test_bare_number_glyph_correction(self):
        self.assertEqual(normalize("O1234", "bare_number"), "01234")
        self.assertEqual(normalize("l2S4|B o", "bare_number"), "125418 0")

    def test_glyph_correction_only_in_bare_number_mode(self):
        self.assertEqual(normalize("O1234", "free"), "O1234")
        self.assertNotEqual(normalize("O1234", "free"), normalize("O1234", "bare_number"))

    def test_idempotent(self):
        samples = [
            "  Total Due: 1,234.50\n subtotal 45,00 ",
            "סה״כ   לתשלום: ‏412.90 ₪",
            "O1 2l4 S",
            "",
        ]
        for mode in ("free", "bare_number"):
            for s in samples:
                once = normalize(s, mode)
                self.assertEqual(normalize(once, mode), once)

    def test_none_and_empty(self):
        self.assertEqual(normalize(None), "")
        self.assertEqual(normalize("", "bare_number"), "")
        self.assertEqual(normalize(" \n "), "")

    def test_non_string_rejected(self):
        with self.assertRaises(InvalidInput):
            normalize(1234)
        with self.assertRaises(InvalidInput):
            normalize(b"1234", "bare_number")

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            normalize("12", "numbers")

    def test_custom_glyph_map(self):
        self.assertEqual(normalize("Z1O", "bare_number", {"Z": "2"}), "21O")

    def test_glyph_map_is_read_only(self):
        with self.assertRaises(TypeError):
            GLYPH_DIGIT_MAP["g"] = "9"


if __name__ == "__main__":
    unittest.main()
