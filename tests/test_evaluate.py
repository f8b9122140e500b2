import unittest

from utility_ocr.evaluate import amount_close, evaluate_one, summarize


class TestEvaluate(unittest.TestCase):
    def test_amount_close(self):
        self.assertTrue(amount_close(412.9, "412.90"))
        self.assertTrue(amount_close(412.9, 412.905))
        self.assertFalse(amount_close(412.9, 413))
        self.assertFalse(amount_close(None, 10))
        self.assertFalse(amount_close(10.0, "n/a"))

    def test_evaluate_one_skips_unlabelled(self):
        rows = evaluate_one(
            {"total_bill": 412.9, "consumption": None},
            {"total_bill": 412.9, "consumption": 530, "meter_reading": ""},
        )
        self.assertEqual([r.field for r in rows], ["total_bill", "consumption"])
        self.assertTrue(rows[0].ok)
        self.assertFalse(rows[1].ok)
        self.assertEqual(rows[1].expected, 530.0)

    def test_summarize(self):
        rows = evaluate_one({"total_bill": 10.0}, {"total_bill": 10})
        rows += evaluate_one({"total_bill": None}, {"total_bill": 20})
        s = summarize(rows)["total_bill"]
        self.assertEqual(s["rows"], 2)
        self.assertEqual(s["ok"], 1)
        self.assertEqual(s["missing"], 1)
        self.assertAlmostEqual(s["acc"], 0.5)


if __name__ == "__main__":
    unittest.main()
