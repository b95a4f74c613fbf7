import requests
import urllib3
from typing import Callable, Optional

from linkscout import config
from linkscout.domain.http_response import HttpResponse
from linkscout.exceptions import HttpFetchError


def build_session(
    max_redirects: int = config.HTTP_MAX_REDIRECTS,
    verify_tls: bool = config.HTTP_VERIFY_TLS,
) -> requests.Session:
    """Return a `requests.Session` that follows at most `max_redirects` hops."""
    session = requests.Session()
    session.max_redirects = max_redirects
    session.verify = verify_tls
    if not verify_tls:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    return session


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection, so tests never
    touch the network and the HTTP library can be swapped.
    """

    def __init__(
        self,
        user_agent: str,
        http_client: Optional[Callable] = None,
        timeout: int = config.HTTP_TIMEOUT_SECONDS,
        verify_tls: bool = config.HTTP_VERIFY_TLS,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.verify_tls = verify_tls
        # only a session built here is owned, and closed, by this service
        self._session: Optional[requests.Session] = None
        if http_client is None:
            self._session = build_session(verify_tls=verify_tls)
            http_client = self._session.get
        self.http_client = http_client

    def close(self) -> None:
        """Release pooled connections of the owned session, if any."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return response with status code, body text, and Content-Type."""
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(
                url,
                headers=headers,
                # (connect, read)
                timeout=(self.timeout, self.timeout),
                verify=self.verify_tls,
                allow_redirects=True,
            )
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Extract Content-Type if response has headers; let real exceptions bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        return HttpResponse(resp.status_code, resp.text, ct)
