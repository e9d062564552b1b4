import unittest

from threat_entities.errors import FormatError
from threat_entities.models import ValidationOutcome
from threat_entities.output import (
    EXIT_OK,
    EXIT_REJECTED,
    exit_code_from_outcomes,
    format_pretty,
    outcome_record,
)

OK = ValidationOutcome(value="8.8.8.8", fingerprint="f" * 64)
BAD = ValidationOutcome(value=None, fingerprint=None, error=FormatError("invalid IP: x"))


class TestOutputHelpers(unittest.TestCase):
    def test_exit_code_from_outcomes(self):
        self.assertEqual(exit_code_from_outcomes([OK, OK]), EXIT_OK)
        self.assertEqual(exit_code_from_outcomes([OK, BAD]), EXIT_REJECTED)
        self.assertEqual(exit_code_from_outcomes([]), EXIT_OK)

    def test_outcome_record(self):
        self.assertEqual(
            outcome_record("x", BAD),
            {"input": "x", "value": None, "fingerprint": None, "error": "invalid IP: x"},
        )

    def test_format_pretty(self):
        self.assertIn("8.8.8.8", format_pretty("8.8.8.8", OK))
        self.assertIn("invalid IP: x", format_pretty("x", BAD))


if __name__ == "__main__":
    unittest.main()
