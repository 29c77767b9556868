from typing import NamedTuple, NotRequired, TypedDict

from geopy.location import Location
from geopy.point import Point


class Address(NamedTuple):
    text: str


class Coordinates(NamedTuple):
    latitude: float
    longitude: float

    @classmethod
    def parse(cls, value: "str | Point | tuple[float, float]") -> "Coordinates":
        """Accept anything geopy understands as a point, e.g. "37.33, -122.03"."""
        point = Point(value)
        return cls(point.latitude, point.longitude)


GeocodeQuery = Address | Coordinates


class RawLocation(TypedDict, total=False):
    lat: float
    lng: float


class RawAddressComponents(TypedDict, total=False):
    number: str
    formatted_street: str
    city: str
    county: str
    state: str
    zip: str
    country: str


class RawResult(TypedDict, total=False):
    location: RawLocation
    address_components: RawAddressComponents
    formatted_address: str


class RawApiResponse(TypedDict, total=False):
    error: str
    results: list[RawResult]


class GeocodeResult(TypedDict):
    latitude: float
    longitude: float
    bounds: None
    street_number: str
    street_name: str
    zipcode: int | None
    city: str | None
    county: str | None
    region: str | None
    country: str | None
    country_code: None
    timezone: None
    formatted_address: NotRequired[str | None]


def to_location(result: GeocodeResult) -> Location:
    address = result.get("formatted_address")
    if not address:
        street = " ".join(
            part for part in (result["street_number"], result["street_name"]) if part
        )
        parts = [
            street,
            result["city"],
            result["region"],
            str(result["zipcode"]) if result["zipcode"] is not None else None,
            result["country"],
        ]
        address = ", ".join(part for part in parts if part)
    return Location(
        address, Point(result["latitude"], result["longitude"]), dict(result)
    )
