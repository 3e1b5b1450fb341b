"""
This module defines the HttpGateway used for every call to the utility API.
"""
import logging
from typing import Any, Dict, Optional

import requests

from ..config import REQUEST_TIMEOUT
from ..exceptions import RequestError, ResponseDecodeError

# Get a logger instance for this module
logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class HttpGateway:
    """Sends JSON POST requests and returns the decoded JSON body."""

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initializes the HttpGateway.

        Args:
            timeout: Connect and read timeout in seconds for each request.
            session: An optional requests session to send through. Without
                one each call goes through requests.post.
        """
        self.timeout = timeout
        self.session = session

    def send(
        self,
        url: str,
        payload: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        POSTs the payload as JSON and returns the decoded response body.

        Args:
            url: The endpoint URL.
            payload: A JSON-serializable request body.
            headers: Extra headers merged over the JSON defaults.

        Returns:
            The decoded JSON value.

        Raises:
            RequestError: On transport failure or a non-2xx status.
            ResponseDecodeError: If a 2xx body is not valid JSON.
        """
        final_headers = dict(DEFAULT_HEADERS)
        if headers:
            final_headers.update(headers)

        post = self.session.post if self.session is not None else requests.post
        try:
            response = post(url, json=payload, headers=final_headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise RequestError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code <= 299:
            logger.warning(f"{url} answered {response.status_code} {response.reason}")
            raise RequestError(
                f"{response.status_code}: {response.reason}",
                status_code=response.status_code,
                reason=response.reason,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{url} returned a body that is not JSON: {e}")
            raise ResponseDecodeError(
                f"Invalid JSON from {url}: {e}",
                status_code=response.status_code,
                reason=response.reason,
            ) from e
