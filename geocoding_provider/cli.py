#!/usr/bin/env python3

import argparse
import json
import logging
import os
import sys

import sentry_sdk
from dotenv import load_dotenv

from geocoding_provider.adapters import mask_api_key
from geocoding_provider.config import get_provider
from geocoding_provider.exceptions import (
    GeocodingException,
    InvalidCredentials,
    NoResult,
    TransportError,
    before_send,
)
from geocoding_provider.types import Coordinates, GeocodeResult, to_location

EXIT_NO_RESULT = 1
EXIT_INVALID_CREDENTIALS = 2
EXIT_TRANSPORT_ERROR = 3
EXIT_MALFORMED_RESPONSE = 4


def init_sentry() -> None:
    sentry_dsn = os.getenv("SENTRY_DSN")
    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            release=os.getenv("GIT_COMMIT"),
            before_send=before_send,
        )


def format_result(result: GeocodeResult) -> str:
    location = to_location(result)
    return f"{location.latitude},{location.longitude}\t{location.address}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Look up addresses or coordinates with the Geocodio API"
    )
    parser.add_argument(
        "address",
        nargs="*",
        help="Free text address to geocode, e.g. 1 Infinite Loop Cupertino, CA 95014",
    )
    parser.add_argument(
        "--reverse",
        type=str,
        metavar="LAT,LNG",
        help="Reverse geocode a coordinate pair instead of an address",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        help="Geocodio API key (defaults to GEOCODIO_API_KEY)",
    )
    parser.add_argument(
        "--host",
        type=str,
        help="API host (defaults to GEOCODIO_HOST or api.geocod.io)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the normalized results as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose mode (debug logging)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    # Load the .env file of our choice if specified before the regular .env can load
    load_dotenv(os.getenv("ENV"))
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="[%(asctime)s] %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    init_sentry()

    if not args.reverse and not args.address:
        parser.error("an address or --reverse LAT,LNG is required")

    try:
        provider = get_provider(api_key=args.api_key, host=args.host)
        if args.reverse:
            try:
                coordinates = Coordinates.parse(args.reverse)
            except ValueError as e:
                parser.error(f"invalid coordinates {args.reverse!r}: {e}")
            results = provider.get_reversed_data(coordinates)
        else:
            results = provider.get_geocoded_data(" ".join(args.address))
    except NoResult as e:
        logging.error(mask_api_key(str(e)))
        return EXIT_NO_RESULT
    except InvalidCredentials as e:
        logging.error(str(e))
        return EXIT_INVALID_CREDENTIALS
    except GeocodingException as e:
        sentry_sdk.capture_exception(e)
        logging.error(mask_api_key(str(e)))
        return EXIT_MALFORMED_RESPONSE
    except TransportError as e:
        sentry_sdk.capture_exception(e)
        logging.error(f"Got exception while geocoding: {repr(e)}", exc_info=e)
        return EXIT_TRANSPORT_ERROR

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        for result in results:
            print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
