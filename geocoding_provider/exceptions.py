from sentry_sdk.types import Event, Hint


class BaseException(Exception): ...


class GeocodingException(BaseException): ...


class NoResult(GeocodingException): ...


class InvalidCredentials(GeocodingException): ...


class TransportError(BaseException): ...


def before_send(event: Event, hint: Hint):
    exc_type, exc_value, tb = hint.get("exc_info", [None, None, None])
    # An empty result set is an answer from the upstream, not a fault
    if exc_type is not None and issubclass(exc_type, NoResult):
        return None

    return event
