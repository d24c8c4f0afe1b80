import os
import tempfile
from decimal import Decimal
from unittest import TestCase, mock

from lndpay.lib.configure import check_or_create_configuration
from lndpay import settings


class TestConfiguration(TestCase):
    def test_create_configuration(self):
        with tempfile.TemporaryDirectory() as directory:
            home_dir = os.path.join(directory, '.lndpay')

            with mock.patch('builtins.print'):
                self.assertTrue(check_or_create_configuration(home_dir))
            self.assertFalse(check_or_create_configuration(home_dir))

            config = settings.read_config(os.path.join(home_dir, 'config.ini'))
            self.assertEqual('localhost:10009',
                             config['network']['lnd_grpc_host'])
            self.assertTrue(
                config['network']['tls_cert_file'].endswith('tls.cert'))
            self.assertIn('api_url', config['settlement'])

    def test_missing_config_file(self):
        with tempfile.TemporaryDirectory() as directory:
            self.assertRaises(
                FileNotFoundError, check_or_create_configuration, directory)

    def test_home_dir(self):
        home_dir = settings.home_dir
        self.addCleanup(settings.set_lndpay_home_dir, home_dir)

        settings.set_lndpay_home_dir('/srv/lndpay')
        self.assertEqual('/srv/lndpay/config.ini', settings.config_path())
        self.assertEqual(
            '/srv/lndpay/lndpay.log',
            settings.logger_config['handlers']['file']['filename'])

        with mock.patch.dict(os.environ, {'LNDPAY_HOME': 'relative'}):
            self.assertRaises(ValueError, settings.set_lndpay_home_dir)

    def test_loglevel(self):
        home_dir = settings.home_dir
        self.addCleanup(settings.set_lndpay_home_dir, home_dir)

        with tempfile.TemporaryDirectory() as directory:
            settings.set_lndpay_home_dir(directory)
            self.assertEqual(
                'INFO', settings.logger_config['handlers']['default']['level'])

            with open(os.path.join(directory, 'config.ini'), 'w') as f:
                f.write("[logging]\nloglevel = debug\n")
            settings.set_lndpay_home_dir(directory)
            self.assertEqual(
                'DEBUG', settings.logger_config['handlers']['default']['level'])
            # the file log keeps everything
            self.assertEqual(
                'DEBUG', settings.logger_config['handlers']['file']['level'])

    def test_parse_env(self):
        with mock.patch.dict(os.environ, {'LNDPAY_TEST_AMOUNT': '0.0001',
                                          'LNDPAY_TEST_INT': '3'}):
            self.assertEqual(
                Decimal('0.0001'),
                settings.parse_env('LNDPAY_TEST_AMOUNT', '0', Decimal))
            self.assertEqual(3, settings.parse_env('LNDPAY_TEST_INT', '0', int))
        self.assertEqual(
            8, settings.parse_env('LNDPAY_TEST_MISSING', '8', int))
