"""
WAAPI Client

Synchronous JSON-over-HTTP client for the Wwise Authoring API. One POST
per call, no retry; the caller's thread blocks until the body is read.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .config import Settings, settings as default_settings
from .models import QueryRequest
from .exceptions import (
    InvalidResponseBodyError,
    NotAnObjectError,
    SendFailedError,
    ServiceError,
)

logger = logging.getLogger(__name__)


class WaapiClient:
    """
    Client for the WAAPI HTTP endpoint.

    Example:
        with WaapiClient() as client:
            result = client.query("$ from type Sound", ["name", "id"])
            for obj in result.get("return", []):
                print(obj["name"])
    """

    def __init__(
        self,
        url: str = None,
        timeout: tuple = None,
        settings: Settings = None
    ):
        """
        Initialize the WAAPI client.

        Args:
            url: WAAPI HTTP endpoint, defaults to the configured one
            timeout: (connect, read) timeout in seconds
            settings: Settings to read defaults from
        """
        self.settings = settings or default_settings
        self.url = url or self.settings.waapi_url
        self.timeout = timeout or self.settings.timeout
        self._session = None

    def _get_session(self) -> requests.Session:
        """Get or create requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "Content-Type": "application/json",
                "Accept": "application/json"
            })
        return self._session

    def call(
        self,
        uri: str,
        args: Dict[str, Any] = None,
        options: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """
        Call a WAAPI function.

        Args:
            uri: WAAPI function identifier, e.g. ``ak.wwise.core.getInfo``
            args: Function arguments
            options: Function options

        Returns:
            The response JSON object, unmodified

        Raises:
            SendFailedError: The request could not be completed
            ServiceError: The service answered with an HTTP error status
            InvalidResponseBodyError: The body is not JSON
            NotAnObjectError: The body is JSON but not an object
        """
        envelope = {
            "uri": uri,
            "options": options or {},
            "args": args or {}
        }
        logger.debug("POST %s %s", self.url, envelope)

        try:
            response = self._get_session().post(
                self.url,
                json=envelope,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            connect_timeout, read_timeout = self.timeout
            logger.error("Request to %s timed out: %s", self.url, e)
            raise SendFailedError(
                f"Request timed out (connect {connect_timeout}s, read {read_timeout}s): {e}",
                details={"url": self.url}
            )
        except requests.exceptions.ConnectionError as e:
            logger.error("Failed to connect to %s: %s", self.url, e)
            raise SendFailedError(
                f"Failed to connect to {self.url}: {e}",
                details={"url": self.url}
            )
        except requests.exceptions.RequestException as e:
            logger.error("Request to %s failed: %s", self.url, e)
            raise SendFailedError(f"Request failed: {e}", details={"url": self.url})

        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """Parse the response body and raise on anything but a JSON object."""
        if response.status_code >= 400:
            # WAAPI reports errors as a JSON object with a message
            try:
                error_data = response.json()
            except (ValueError, RecursionError):
                error_data = None
            if isinstance(error_data, dict) and error_data.get("message"):
                message = str(error_data["message"])
            else:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("Service returned HTTP %s: %s", response.status_code, message)
            raise ServiceError(
                message,
                status_code=response.status_code,
                details=error_data if isinstance(error_data, dict) else {}
            )

        try:
            result = response.json()
        except (ValueError, RecursionError) as e:
            # RecursionError: nesting deeper than the decoder can follow
            logger.error("Failed to read response body: %s", e)
            raise InvalidResponseBodyError(f"Failed to decode response body: {e}")

        if not isinstance(result, dict):
            raise NotAnObjectError(
                f"Expected a JSON object, got {type(result).__name__}"
            )

        return result

    # =========================================================================
    # WAAPI Functions
    # =========================================================================

    def query(self, clause: str, projection: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Run a WAQL query.

        Args:
            clause: WAQL query, forwarded verbatim
            projection: Fields to return, in order; None for the service default

        Returns:
            The response JSON object, conventionally with a ``return`` array
        """
        request = QueryRequest(clause=clause, projection=projection)
        return self.call(self.settings.waql_uri, args=request.args(), options=request.options())

    def get_info(self) -> Dict[str, Any]:
        """Return information about the running Wwise instance."""
        return self.call(self.settings.info_uri)

    def close(self):
        """Close the client session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
