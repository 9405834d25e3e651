import unittest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flask import Flask, request

from cf_geolocation.request_view import FlaskRequestView, RequestView, StaticRequestView


class TestStaticRequestView(unittest.TestCase):
    def test_headers_and_client_ip(self):
        view = StaticRequestView({'CF-IPCountry': 'US'}, '203.0.113.1')
        self.assertIsInstance(view, RequestView)
        self.assertEqual(view.get_header('CF-IPCountry'), 'US')
        self.assertIsNone(view.get_header('CF-Connecting-IP'))
        self.assertEqual(view.client_ip, '203.0.113.1')

    def test_defaults_are_empty(self):
        view = StaticRequestView()
        self.assertIsNone(view.get_header('CF-IPCountry'))
        self.assertIsNone(view.client_ip)

    def test_headers_are_copied(self):
        headers = {'CF-IPCountry': 'US'}
        view = StaticRequestView(headers)
        headers['CF-IPCountry'] = 'GB'
        self.assertEqual(view.get_header('CF-IPCountry'), 'US')


class TestFlaskRequestView(unittest.TestCase):
    def setUp(self):
        self.app = Flask(__name__)

    def test_reads_werkzeug_request(self):
        with self.app.test_request_context(
            '/',
            headers={'CF-Connecting-IP': '8.8.8.8', 'CF-IPCountry': 'US'},
            environ_base={'REMOTE_ADDR': '198.51.100.7'},
        ):
            view = FlaskRequestView(request)
            self.assertIsInstance(view, RequestView)
            self.assertEqual(view.get_header('CF-Connecting-IP'), '8.8.8.8')
            self.assertEqual(view.get_header('CF-IPCountry'), 'US')
            self.assertEqual(view.client_ip, '198.51.100.7')

    def test_missing_header_is_none(self):
        with self.app.test_request_context('/', environ_base={'REMOTE_ADDR': '198.51.100.7'}):
            self.assertIsNone(FlaskRequestView(request).get_header('CF-IPCountry'))


if __name__ == '__main__':
    unittest.main()
