import os

from geocoding_provider.adapters import RequestsAdapter
from geocoding_provider.exceptions import InvalidCredentials
from geocoding_provider.providers.geocodio import GeocodioProvider

DEFAULT_TIMEOUT = 10.0


def get_api_key() -> str | None:
    return os.getenv("GEOCODIO_API_KEY") or None


def get_host() -> str:
    return os.getenv("GEOCODIO_HOST") or GeocodioProvider.HOST


def get_timeout() -> float:
    try:
        return float(os.getenv("GEOCODIO_TIMEOUT", DEFAULT_TIMEOUT))
    except ValueError:
        return DEFAULT_TIMEOUT


def get_provider(
    api_key: str | None = None, host: str | None = None
) -> GeocodioProvider:
    api_key = api_key or get_api_key()
    if not api_key:
        raise InvalidCredentials("No API key provided, set GEOCODIO_API_KEY")

    adapter = RequestsAdapter(timeout=get_timeout())
    return GeocodioProvider(adapter, api_key, host=host or get_host())
