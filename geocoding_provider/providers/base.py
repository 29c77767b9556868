from abc import ABC, abstractmethod

from geocoding_provider.adapters import HttpAdapter
from geocoding_provider.types import Address, Coordinates, GeocodeQuery, GeocodeResult


class BaseProvider(ABC):
    def __init__(self, adapter: HttpAdapter):
        self.adapter = adapter

    @abstractmethod
    def geocode(self, query: str) -> list[GeocodeResult]:
        pass

    @abstractmethod
    def reverse(self, latitude: float, longitude: float) -> list[GeocodeResult]:
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    def get_geocoded_data(self, query: str) -> list[GeocodeResult]:
        return self.geocode(query)

    def get_reversed_data(
        self, coordinates: Coordinates | tuple[float, float]
    ) -> list[GeocodeResult]:
        latitude, longitude = coordinates
        return self.reverse(latitude, longitude)

    def lookup(self, query: GeocodeQuery) -> list[GeocodeResult]:
        if isinstance(query, Address):
            return self.geocode(query.text)
        if isinstance(query, Coordinates):
            return self.reverse(query.latitude, query.longitude)
        raise TypeError(f"Unsupported query type: {type(query).__name__}")
