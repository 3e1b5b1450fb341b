"""
This module provides a factory for creating and configuring the application's core components.
"""
import threading
from typing import Optional

from spu_schedule.facade import ResolutionSession
from spu_schedule.services.account_service import AccountResolver
from spu_schedule.services.calendar_service import CalendarBuilder
from spu_schedule.services.http_gateway import HttpGateway
from spu_schedule.services.token_provider import TokenProvider

from .config import Settings, load_settings
from .logging_config import setup_logging

_token_provider: Optional[TokenProvider] = None
_token_lock = threading.Lock()


def initialize_app(log_level: Optional[str] = None, settings: Optional[Settings] = None):
    """
    Initializes the application by setting up logging.
    """
    settings = settings or load_settings()
    setup_logging(log_level or settings.log_level)


def create_token_provider(gateway: HttpGateway, settings: Settings) -> TokenProvider:
    """
    Returns the application's TokenProvider, creating it on first call.
    """
    global _token_provider
    with _token_lock:
        if _token_provider is None:
            _token_provider = TokenProvider(
                gateway,
                auth_url=settings.auth_url,
                username=settings.guest_username,
                password=settings.guest_password,
            )
        return _token_provider


def create_session(
    address: str,
    settings: Optional[Settings] = None,
    token_provider: Optional[TokenProvider] = None,
) -> ResolutionSession:
    """
    Returns a ResolutionSession for the address, configured from the environment.
    """
    settings = settings or load_settings()
    gateway = HttpGateway(timeout=settings.request_timeout)
    provider = token_provider or create_token_provider(gateway, settings)
    resolver = AccountResolver(
        address,
        gateway,
        provider,
        premise_code_url=settings.premise_code_url,
        account_code_url=settings.account_code_url,
        services_url=settings.services_url,
    )
    builder = CalendarBuilder(
        gateway,
        provider,
        calendar_url=settings.calendar_url,
        timezone=settings.timezone,
    )
    return ResolutionSession(
        address,
        gateway=gateway,
        token_provider=provider,
        resolver=resolver,
        calendar_builder=builder,
    )
