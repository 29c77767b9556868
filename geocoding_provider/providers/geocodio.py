import json
import logging
import re
from decimal import Decimal
from typing import Any
from urllib.parse import quote_plus

from geocoding_provider.adapters import HttpAdapter, mask_api_key
from geocoding_provider.exceptions import (
    GeocodingException,
    InvalidCredentials,
    NoResult,
)
from geocoding_provider.providers.base import BaseProvider
from geocoding_provider.types import GeocodeResult, RawApiResponse, RawResult

GEOCODE_ENDPOINT_URL = "http://{host}/v1/geocode?q={query}&api_key={api_key}"
REVERSE_ENDPOINT_URL = "http://{host}/v1/reverse?q={latitude},{longitude}&api_key={api_key}"

# What Geocodio puts in "error" when the key is rejected
INVALID_API_KEY_ERROR = "invalid api key"


def parse_zipcode(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = re.match(r"\s*(\d+)", str(value))
    return int(match.group(1)) if match else None


def format_coordinate(value: float) -> str:
    # Plain decimal notation, "5e-05" is not a valid query coordinate
    return format(Decimal(repr(float(value))), "f")


def normalize_result(result: RawResult, url: str) -> GeocodeResult:
    if not isinstance(result, dict):
        raise GeocodingException(f"Malformed result for query: {url}")

    location = result.get("location") or {}
    try:
        latitude = float(location["lat"])
        longitude = float(location["lng"])
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodingException(
            f"Result without usable coordinates for query: {url}"
        ) from e

    components = result.get("address_components") or {}
    if not isinstance(components, dict):
        components = {}
    return {
        "latitude": latitude,
        "longitude": longitude,
        "bounds": None,
        "street_number": components.get("number") or "",
        "street_name": components.get("formatted_street") or "",
        "zipcode": parse_zipcode(components.get("zip")),
        "city": components.get("city"),
        "county": components.get("county"),
        "region": components.get("state"),
        "country": components.get("country"),
        "country_code": None,
        "timezone": None,
        "formatted_address": result.get("formatted_address"),
    }


class GeocodioProvider(BaseProvider):
    """Geocoder backed by the Geocodio API (https://www.geocod.io).

    Only the US and Canada are covered by the upstream service. The provider
    never supplies bounds, country codes or timezones.
    """

    HOST = "api.geocod.io"

    def __init__(self, adapter: HttpAdapter, api_key: str, host: str | None = None):
        super().__init__(adapter)
        self._api_key = api_key
        self._host = host or self.HOST

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def host(self) -> str:
        return self._host

    def get_name(self) -> str:
        return "geocodio"

    def geocode(self, query: str) -> list[GeocodeResult]:
        url = GEOCODE_ENDPOINT_URL.format(
            host=self._host, query=quote_plus(query), api_key=self._api_key
        )
        return self._execute_query(url)

    def reverse(self, latitude: float, longitude: float) -> list[GeocodeResult]:
        url = REVERSE_ENDPOINT_URL.format(
            host=self._host,
            latitude=format_coordinate(latitude),
            longitude=format_coordinate(longitude),
            api_key=self._api_key,
        )
        return self._execute_query(url)

    def _execute_query(self, url: str) -> list[GeocodeResult]:
        content = self.adapter.get(url)
        if not content:
            raise NoResult(f"Could not find results for given query: {url}")

        try:
            data: RawApiResponse = json.loads(content)
        except ValueError:
            logging.debug(f"Could not decode response from {mask_api_key(url)}")
            data = {}
        if not isinstance(data, dict):
            data = {}

        error = data.get("error")
        if error:
            if INVALID_API_KEY_ERROR in str(error).lower():
                raise InvalidCredentials("Invalid API Key")
            logging.warning(f"Geocodio returned an error: {error}")

        results = data.get("results") or []
        if not isinstance(results, list) or not results:
            raise NoResult(f"Could not find results for given query: {url}")

        logging.debug(f"Geocodio returned {len(results)} result(s)")
        return [normalize_result(result, url) for result in results]
