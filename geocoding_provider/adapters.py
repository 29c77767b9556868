import logging
import re
from abc import ABC, abstractmethod

import requests

from geocoding_provider.exceptions import TransportError

DEFAULT_USER_AGENT = "geocoding-provider/0.1"


def mask_api_key(url: str) -> str:
    return re.sub(r"(api_key=)[^&]*", r"\1***", url)


class HttpAdapter(ABC):
    @abstractmethod
    def get(self, url: str) -> str:
        pass


class RequestsAdapter(HttpAdapter):
    def __init__(
        self,
        timeout: float = 10,
        session: requests.Session | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def get(self, url: str) -> str:
        logging.debug(f"GET {mask_api_key(url)}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {mask_api_key(url)} failed: {e}") from e

        # Error statuses still carry a JSON body (a bad key comes back as a 403)
        if response.status_code >= 400:
            logging.debug(
                f"Got HTTP {response.status_code} from {mask_api_key(url)}: {response.text}"
            )
        return response.text
