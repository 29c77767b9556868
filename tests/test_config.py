import os
import unittest
from unittest.mock import patch

from geocoding_provider import config
from geocoding_provider.adapters import RequestsAdapter
from geocoding_provider.exceptions import InvalidCredentials


class TestConfig(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        self.assertIsNone(config.get_api_key())
        self.assertEqual("api.geocod.io", config.get_host())
        self.assertEqual(10.0, config.get_timeout())

    @patch.dict(os.environ, {"GEOCODIO_TIMEOUT": "soon"}, clear=True)
    def test_bad_timeout_falls_back(self):
        self.assertEqual(10.0, config.get_timeout())

    @patch.dict(
        os.environ,
        {
            "GEOCODIO_API_KEY": "9999",
            "GEOCODIO_HOST": "localhost:8080",
            "GEOCODIO_TIMEOUT": "2.5",
        },
        clear=True,
    )
    def test_get_provider_from_env(self):
        provider = config.get_provider()

        self.assertEqual("9999", provider.api_key)
        self.assertEqual("localhost:8080", provider.host)
        self.assertIsInstance(provider.adapter, RequestsAdapter)
        self.assertEqual(2.5, provider.adapter.timeout)

    @patch.dict(os.environ, {"GEOCODIO_API_KEY": "9999"}, clear=True)
    def test_arguments_override_env(self):
        provider = config.get_provider(api_key="1234", host="example.com")

        self.assertEqual("1234", provider.api_key)
        self.assertEqual("example.com", provider.host)

    @patch.dict(os.environ, {}, clear=True)
    def test_get_provider_requires_key(self):
        with self.assertRaises(InvalidCredentials):
            config.get_provider()


if __name__ == "__main__":
    unittest.main()
