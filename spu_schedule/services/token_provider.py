"""
This module defines the TokenProvider that holds the guest bearer token.
"""
import logging
import threading
from typing import Dict, Optional

from ..config import AUTH_URL, GUEST_PASSWORD, GUEST_USERNAME
from ..exceptions import AuthError, ResponseDecodeError
from ..responses import parse_access_token
from .http_gateway import HttpGateway

# Get a logger instance for this module
logger = logging.getLogger(__name__)


class TokenProvider:
    """
    Fetches the guest token on first use and hands out the cached header.

    One instance is meant to be shared by every session in the process.
    The token is never refreshed; an expired token shows up as a
    RequestError from whichever call used it.
    """

    def __init__(
        self,
        gateway: HttpGateway,
        auth_url: str = AUTH_URL,
        username: str = GUEST_USERNAME,
        password: str = GUEST_PASSWORD,
    ):
        self.gateway = gateway
        self.auth_url = auth_url
        self.username = username
        self.password = password
        self._header: Optional[str] = None
        self._lock = threading.Lock()

    def get_header(self) -> str:
        """
        Returns the Authorization header value, "Bearer <token>".

        Raises:
            RequestError: If the auth endpoint answers with a non-2xx status.
            AuthError: If the response carries no usable token.
        """
        if self._header is None:
            with self._lock:
                if self._header is None:
                    self._header = f"Bearer {self._request_token()}"
        return self._header

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": self.get_header()}

    def reset(self) -> None:
        """Drops the cached token so the next call authenticates again."""
        with self._lock:
            self._header = None

    def _request_token(self) -> str:
        payload = {
            "grant_type": "password",
            "username": self.username,
            "password": self.password,
        }
        try:
            response = self.gateway.send(self.auth_url, payload)
        except ResponseDecodeError as e:
            raise AuthError(f"Could not parse token response: {e}") from e
        token = parse_access_token(response)
        logger.info("Obtained guest access token.")
        return token


_default_provider: Optional[TokenProvider] = None
_default_lock = threading.Lock()


def default_token_provider(gateway: Optional[HttpGateway] = None) -> TokenProvider:
    """
    Returns the process-wide TokenProvider, creating it on first call.

    The gateway argument is only used when the provider is created.
    """
    global _default_provider
    with _default_lock:
        if _default_provider is None:
            _default_provider = TokenProvider(gateway or HttpGateway())
        return _default_provider
