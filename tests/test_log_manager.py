import unittest
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cf_geolocation import log_manager


class TestLogManager(unittest.TestCase):
    def setUp(self):
        log_manager.clear_logs()
        self.addCleanup(log_manager.clear_logs)

    def test_handler_installed_once(self):
        log_manager.setup_memory_logging()
        log_manager.setup_memory_logging('Europe/Istanbul')
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, log_manager.MemoryLogHandler)]
        self.assertEqual(len(handlers), 1)

    def test_records_buffered(self):
        handler = log_manager.MemoryLogHandler()
        record = logging.LogRecord('cf_geolocation.test', logging.WARNING, __file__, 1, 'lookup failed', None, None)
        handler.emit(record)
        logs = log_manager.get_live_logs()
        self.assertEqual(len(logs), 1)
        self.assertIn('WARNING - cf_geolocation.test - lookup failed', logs[0])

    def test_timezone_rendering(self):
        record = logging.LogRecord('x', logging.INFO, __file__, 1, 'msg', None, None)
        record.created = 0
        utc = log_manager.TimezoneFormatter(tz_name='UTC')
        istanbul = log_manager.TimezoneFormatter(tz_name='Europe/Istanbul')
        self.assertEqual(utc.formatTime(record, '%H:%M'), '00:00')
        self.assertEqual(istanbul.formatTime(record, '%H:%M'), '02:00')

    def test_unknown_timezone_falls_back_to_utc(self):
        formatter = log_manager.TimezoneFormatter(tz_name='Mars/Olympus')
        record = logging.LogRecord('x', logging.INFO, __file__, 1, 'msg', None, None)
        record.created = 0
        self.assertEqual(formatter.formatTime(record, '%H:%M'), '00:00')


if __name__ == '__main__':
    unittest.main()
