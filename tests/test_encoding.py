import unittest

from threat_entities.errors import FormatError
from threat_entities.validators.encoding import (
    validate_base64,
    validate_hexadecimal,
    validate_uuid,
)


class TestHexadecimal(unittest.TestCase):
    def test_reencoded_lowercase(self):
        self.assertEqual(validate_hexadecimal("DEADBEEF")[0], "deadbeef")

    def test_invalid(self):
        for value in ("abc", "zz", "de ad"):
            with self.subTest(value=value), self.assertRaises(FormatError):
                validate_hexadecimal(value)


class TestBase64(unittest.TestCase):
    def test_input_is_canonical(self):
        self.assertEqual(validate_base64("aGVsbG8=")[0], "aGVsbG8=")

    def test_invalid(self):
        for value in ("aGVsbG8", "a$b=", "aGVs bG8="):
            with self.subTest(value=value), self.assertRaises(FormatError):
                validate_base64(value)


class TestUUID(unittest.TestCase):
    def test_canonical_dashed_lowercase(self):
        self.assertEqual(
            validate_uuid("F47AC10B-58CC-4372-A567-0E02B2C3D479")[0],
            "f47ac10b-58cc-4372-a567-0e02b2c3d479",
        )
        self.assertEqual(
            validate_uuid("f47ac10b58cc4372a5670e02b2c3d479")[0],
            "f47ac10b-58cc-4372-a567-0e02b2c3d479",
        )

    def test_braced_and_urn_layouts(self):
        for raw in (
            "{F47AC10B-58CC-4372-A567-0E02B2C3D479}",
            "urn:uuid:f47ac10b-58cc-4372-a567-0e02b2c3d479",
        ):
            with self.subTest(raw=raw):
                self.assertEqual(validate_uuid(raw)[0], "f47ac10b-58cc-4372-a567-0e02b2c3d479")

    def test_invalid(self):
        for value in (
            "not-a-uuid",
            "f47ac10b-58cc-4372-a567",
            "-".join("f47ac10b58cc4372a5670e02b2c3d479"),
            "{f47ac10b58cc4372a5670e02b2c3d479}",
            "f47ac10b58cc-4372-a567-0e02b2c3d479",
            "",
        ):
            with self.subTest(value=value), self.assertRaises(FormatError):
                validate_uuid(value)


if __name__ == "__main__":
    unittest.main()
