import unittest

from geocoding_provider.exceptions import (
    GeocodingException,
    InvalidCredentials,
    NoResult,
    TransportError,
    before_send,
)


class TestExceptions(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(NoResult, GeocodingException))
        self.assertTrue(issubclass(InvalidCredentials, GeocodingException))
        self.assertFalse(issubclass(TransportError, GeocodingException))

    def test_before_send_drops_no_result(self):
        error = NoResult("Could not find results for given query: http://example")
        hint = {"exc_info": (NoResult, error, None)}

        self.assertIsNone(before_send({"level": "error"}, hint))  # type: ignore

    def test_before_send_keeps_other_errors(self):
        event = {"level": "error"}
        error = TransportError("connection refused")
        hint = {"exc_info": (TransportError, error, None)}

        self.assertEqual(event, before_send(event, hint))  # type: ignore

    def test_before_send_keeps_events_without_exception(self):
        event = {"level": "error", "message": "something happened"}

        self.assertEqual(event, before_send(event, {}))  # type: ignore


if __name__ == "__main__":
    unittest.main()
