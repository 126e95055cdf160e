import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mpin_checker.core.demographic_matcher import (
    Demographics,
    check_demographics,
    date_variations,
    matches,
)


class TestDateVariations(unittest.TestCase):
    def test_order(self):
        self.assertEqual(date_variations("1990-02-15"), [
            "1502", "0215", "9002", "9015", "0290", "1590",
            "150290", "021590", "900215", "901502",
        ])

    def test_malformed_does_not_raise(self):
        self.assertEqual(len(date_variations("abc")), 10)
        self.assertEqual(len(date_variations("")), 10)


class TestMatches(unittest.TestCase):
    def test_four_digit(self):
        for pin in ["1502", "0215", "9002", "9015", "0290", "1590"]:
            self.assertTrue(matches(pin, "1990-02-15"), pin)
        self.assertFalse(matches("1990", "1990-02-15"))
        self.assertFalse(matches("7392", "1990-02-15"))

    def test_six_digit(self):
        for pin in ["150290", "021590", "900215", "901502"]:
            self.assertTrue(matches(pin, "1990-02-15"), pin)
        self.assertFalse(matches("199002", "1990-02-15"))
        self.assertFalse(matches("739284", "1990-02-15"))

    def test_other_lengths(self):
        self.assertFalse(matches("15029", "1990-02-15"))
        self.assertFalse(matches("", "1990-02-15"))

    def test_absent_date(self):
        self.assertFalse(matches("0215", ""))
        self.assertFalse(matches("0215", None))

    def test_not_calendar_validated(self):
        self.assertTrue(matches("3002", "1990-02-30"))
        self.assertTrue(matches("4513", "1990-13-45"))

    def test_malformed_date(self):
        self.assertFalse(matches("1234", "not-a-date"))
        self.assertFalse(matches("1234", "12"))


class TestCheckDemographics(unittest.TestCase):
    def test_order_and_independence(self):
        demographics = Demographics(dob="1990-02-15", spouse_dob="1985-02-15", anniversary="2000-02-15")
        self.assertEqual(check_demographics("0215", demographics), [
            "DEMOGRAPHIC_DOB_SELF",
            "DEMOGRAPHIC_DOB_SPOUSE",
            "DEMOGRAPHIC_ANNIVERSARY",
        ])

    def test_single_match(self):
        demographics = Demographics(dob="1990-02-15", spouse_dob="1985-03-12", anniversary="2010-06-14")
        self.assertEqual(check_demographics("0614", demographics), ["DEMOGRAPHIC_ANNIVERSARY"])
        self.assertEqual(check_demographics("7392", demographics), [])

    def test_empty_and_absent(self):
        self.assertEqual(check_demographics("0215", Demographics(dob="", spouse_dob="")), [])
        self.assertEqual(check_demographics("0215", Demographics()), [])
        self.assertEqual(check_demographics("0215", None), [])

    def test_from_dict_keys(self):
        self.assertEqual(
            Demographics.from_dict({"dob": "1990-02-15", "spouseDob": "1985-03-12"}),
            Demographics(dob="1990-02-15", spouse_dob="1985-03-12"),
        )
        self.assertEqual(
            Demographics.from_dict({"spouse_dob": "1985-03-12"}),
            Demographics(spouse_dob="1985-03-12"),
        )
        self.assertEqual(Demographics.from_dict(None), Demographics())

    def test_from_dict_blank_camel_case_falls_back(self):
        for blank in [None, ""]:
            demographics = Demographics.from_dict({"spouseDob": blank, "spouse_dob": "1985-03-12"})
            self.assertEqual(demographics.spouse_dob, "1985-03-12")
            self.assertEqual(check_demographics("0312", demographics), ["DEMOGRAPHIC_DOB_SPOUSE"])


if __name__ == '__main__':
    unittest.main()
