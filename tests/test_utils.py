import unittest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cf_geolocation.utils import is_alpha2_code, is_cf_country_code, is_valid_ip


class TestIpValidation(unittest.TestCase):
    def test_valid_addresses(self):
        for value in ['8.8.8.8', '203.0.113.1', '::', '::1', 'fe80::1', '2001:db8::ff00:42:8329']:
            with self.subTest(value=value):
                self.assertTrue(is_valid_ip(value))

    def test_invalid_addresses(self):
        for value in [None, '', 'invalid-ip', '256.0.0.1', '1.2.3', '1.2.3.4.5', '01.2.3.4', 'fe80::1%eth0', '192.168.0.0/24', 16843009]:
            with self.subTest(value=value):
                self.assertFalse(is_valid_ip(value))


class TestCountryCodes(unittest.TestCase):
    def test_cf_country_is_strict(self):
        self.assertTrue(is_cf_country_code('US'))
        for value in [None, '', 'us', 'Us', 'U', 'USA', '12', 'US\n']:
            with self.subTest(value=value):
                self.assertFalse(is_cf_country_code(value))

    def test_alpha2_is_case_insensitive(self):
        for value in ['US', 'us', 'uS']:
            self.assertTrue(is_alpha2_code(value))
        for value in [None, '', 'u', 'usa', '1a', 'ü1']:
            with self.subTest(value=value):
                self.assertFalse(is_alpha2_code(value))


if __name__ == '__main__':
    unittest.main()
