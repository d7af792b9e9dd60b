"""
HTTP transport built on a requests Session.
Handles base URL, authentication headers, retries and timeouts.
Follows Single Responsibility Principle - only moves JSON over HTTP.
"""

from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.exceptions import MaxRetryError, ReadTimeoutError
from urllib3.util.retry import Retry

from mochow_client.config.client_config import ClientConfiguration
from mochow_client.utils.logger import LoggerMixin
from .base import ITransport, TransportError, TransportTimeoutError


def _is_exhausted_read_timeout(error: requests.exceptions.ConnectionError) -> bool:
    reason = error.args[0] if error.args else None
    return isinstance(reason, MaxRetryError) and isinstance(reason.reason, ReadTimeoutError)


class HttpTransport(ITransport, LoggerMixin):
    """
    Sends JSON requests to the service and returns decoded JSON responses.

    The service reports errors inside the body (``code``/``msg``), often with a
    non-2xx status, so the HTTP status is not turned into an exception.
    """

    def __init__(self, config: ClientConfiguration, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            config: Client configuration
            session: Optional pre-built session (tests inject a mock)
        """
        self.config = config
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a session with retry strategy and auth headers."""
        session = requests.Session()
        # urllib3 only retries idempotent verbs, so POST (insert, search, ...) is
        # sent once and only DELETE is retried
        retry_strategy = Retry(
            total=self.config.max_retries,
            backoff_factor=self.config.retry_backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update(self.config.headers)
        return session

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]],
        body: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        url = f"{self.config.base_url}{path}"
        self.logger.debug(f"{method} {url} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params or {},
                json=body or {},
                timeout=self.config.timeout_seconds,
            )
        except requests.exceptions.Timeout as e:
            self.logger.warning(f"{method.lower()} {path} request was timeout")
            raise TransportTimeoutError(f"{method} {path} timed out after {self.config.timeout_seconds}s") from e
        except requests.exceptions.ConnectionError as e:
            # A read timeout that used up its retries arrives wrapped in MaxRetryError
            if _is_exhausted_read_timeout(e):
                self.logger.warning(f"{method.lower()} {path} request was timeout after retries")
                raise TransportTimeoutError(
                    f"{method} {path} timed out after {self.config.timeout_seconds}s and retries"
                ) from e
            self.logger.error(f"{method} {path} failed: {str(e)}")
            raise TransportError(f"{method} {path} failed: {str(e)}") from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{method} {path} failed: {str(e)}")
            raise TransportError(f"{method} {path} failed: {str(e)}") from e

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"{method} {path} returned a non-JSON body (HTTP {response.status_code})")
            raise TransportError(
                f"{method} {path} returned a non-JSON body (HTTP {response.status_code})"
            ) from e

        if not isinstance(data, dict):
            raise TransportError(f"{method} {path} returned {type(data).__name__}, expected an object")
        return data

    def post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return self._request("POST", path, params, body)

    def delete(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return self._request("DELETE", path, params, body)

    def close(self) -> None:
        """Close the underlying session."""
        if self.session is not None:
            self.session.close()
            self.logger.debug("HTTP session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
