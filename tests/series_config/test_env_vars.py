import logging
import os
import sys
import tempfile
import threading
import unittest
from logging.handlers import RotatingFileHandler

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from series_config.env_vars import EnvVars
from series_config.singleton import Singleton
from series_utils.log_manager import LogManager

ENV_KEYS = ('SERIES_DEFAULT_TIME_TYPE', 'SERIES_DATE_TIMEZONE', 'LOG_LEVEL', 'LOG_PATH')


class EnvTestCase(unittest.TestCase):

    def setUp(self):
        self._saved = {key: os.environ.pop(key, None) for key in ENV_KEYS}
        Singleton.reset('EnvVars')

    def tearDown(self):
        for key, value in self._saved.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        Singleton.reset('EnvVars')


class TestEnvVars(EnvTestCase):

    def test_defaults(self):
        env = EnvVars()
        self.assertEqual(env.default_time_type, 'mysql')
        self.assertEqual(env.date_timezone, 'UTC')
        self.assertEqual(env.log_level, 'INFO')
        self.assertIsNone(env.log_path)

    def test_environment_overrides(self):
        os.environ['SERIES_DEFAULT_TIME_TYPE'] = 'plain'
        env = EnvVars()
        self.assertEqual(env.default_time_type, 'plain')

    def test_singleton(self):
        self.assertIs(EnvVars(), EnvVars())

    def test_default_time_type_used_by_builder(self):
        from series_builder.series_builder import SeriesBuilder

        os.environ['SERIES_DEFAULT_TIME_TYPE'] = 'plain'
        result = SeriesBuilder().build([{'t': 5, 'v': 1}], [{'time': 't', 'data': 'v'}])
        self.assertEqual(result[0]['data'], [[5, 1]])


class TestLogManager(EnvTestCase):

    def setUp(self):
        super().setUp()
        Singleton.reset('LogManager')

    def tearDown(self):
        Singleton.reset('LogManager')
        super().tearDown()

    def test_stream_handler_without_log_path(self):
        logger = LogManager().get_logger('TestStream')
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.StreamHandler)
        self.assertFalse(logger.propagate)

    def test_file_handler_with_log_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            os.environ['LOG_PATH'] = tmp
            Singleton.reset('EnvVars')
            manager = LogManager()
            logger = manager.get_logger('TestFile')
            self.assertIsInstance(logger.handlers[0], RotatingFileHandler)
            logger.handlers[0].close()
            logger.removeHandler(logger.handlers[0])

    def test_level_from_environment(self):
        os.environ['LOG_LEVEL'] = 'debug'
        self.assertEqual(LogManager().get_logger('TestLevel').level, logging.DEBUG)

    def test_unknown_level_falls_back_to_info(self):
        os.environ['LOG_LEVEL'] = 'chatty'
        self.assertEqual(LogManager().get_logger('TestFallback').level, logging.INFO)

    def test_log_manager_created_before_env_vars(self):
        Singleton.reset('EnvVars')
        worker = threading.Thread(target=LogManager, daemon=True)
        worker.start()
        worker.join(timeout=5)
        self.assertFalse(worker.is_alive())
        self.assertIs(LogManager().get_logger('TestNested').handlers[0], LogManager()._handler)


if __name__ == '__main__':
    unittest.main()
