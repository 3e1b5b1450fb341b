"""
This module defines the ResolutionSession, the entry point that turns an
address into a collection schedule.
"""

import logging
from datetime import date
from typing import Mapping, Optional, Union

from .exceptions import SpuError
from .models import Account, CollectionCalendar, CollectionDay, ServicePointMap
from .services.account_service import AccountResolver
from .services.calendar_service import CalendarBuilder
from .services.http_gateway import HttpGateway
from .services.token_provider import TokenProvider, default_token_provider

logger = logging.getLogger(__name__)


class ResolutionSession:
    """
    One end-to-end run from address to schedule.

    The session owns its Account, service points and calendar. The token
    provider is injected so that sessions can share one bearer token.
    """

    def __init__(
        self,
        address: str,
        gateway: Optional[HttpGateway] = None,
        token_provider: Optional[TokenProvider] = None,
        resolver: Optional[AccountResolver] = None,
        calendar_builder: Optional[CalendarBuilder] = None,
    ):
        self.address = address
        self.gateway = gateway or HttpGateway()
        self.token_provider = token_provider or default_token_provider(self.gateway)
        self.resolver = resolver or AccountResolver(address, self.gateway, self.token_provider)
        self.calendar_builder = calendar_builder or CalendarBuilder(self.gateway, self.token_provider)

        self._account: Optional[Account] = None
        self._service_points: Optional[ServicePointMap] = None
        self._calendar: Optional[CollectionCalendar] = None

    def resolve(self) -> CollectionCalendar:
        """
        Resolves the account and builds its calendar. Later calls return the
        calendar built by the first successful call.

        Raises:
            AddressNotFoundError: If the address is not recognized.
            AccountNotFoundError: If no account is registered at the premise.
            AuthError: If no bearer token could be obtained.
            RequestError: If any HTTP call fails.
        """
        if self._calendar is not None:
            return self._calendar

        logger.info(f"Resolving collection schedule for '{self.address}'.")
        try:
            account, service_points = self.resolver.resolve()
            calendar = self.calendar_builder.build(account, service_points)
        except SpuError as e:
            logger.warning(f"Could not resolve schedule for '{self.address}': {e}")
            raise

        self._account = account
        self._service_points = service_points
        self._calendar = calendar
        return calendar

    @property
    def account(self) -> Account:
        self.resolve()
        return self._account

    @property
    def service_points(self) -> ServicePointMap:
        self.resolve()
        return dict(self._service_points)

    @property
    def calendar(self) -> CollectionCalendar:
        return self.resolve()

    def next_collection_day(self, today: Union[str, date, None] = None) -> CollectionDay:
        """
        Returns the first collection day on or after today.

        Raises:
            NoUpcomingScheduleError: If the schedule has no such day.
        """
        return self.resolve().next_collection_day(today)

    def collection_schedule(self) -> Mapping[str, CollectionDay]:
        return self.resolve().schedule()


def resolve_schedule(
    address: str,
    gateway: Optional[HttpGateway] = None,
    token_provider: Optional[TokenProvider] = None,
) -> ResolutionSession:
    """Resolves an address and returns the session holding its schedule."""
    session = ResolutionSession(address, gateway=gateway, token_provider=token_provider)
    session.resolve()
    return session
