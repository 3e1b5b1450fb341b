"""
This module defines the CalendarBuilder, which fetches collection dates for
an account and folds them into a CollectionCalendar.
"""
import logging

from ..config import CALENDAR_URL, CUSTOMER_ID, TIMEZONE
from ..exceptions import ResponseFormatError
from ..models import Account, CollectionCalendar, ServicePointMap
from ..responses import parse_calendar
from .http_gateway import HttpGateway
from .token_provider import TokenProvider

# Get a logger instance for this module
logger = logging.getLogger(__name__)


class CalendarBuilder:
    """Builds the collection calendar of a resolved account."""

    def __init__(
        self,
        gateway: HttpGateway,
        token_provider: TokenProvider,
        calendar_url: str = CALENDAR_URL,
        timezone: str = TIMEZONE,
    ):
        self.gateway = gateway
        self.token_provider = token_provider
        self.calendar_url = calendar_url
        self.timezone = timezone

    def build(self, account: Account, service_points: ServicePointMap) -> CollectionCalendar:
        """
        Requests the dates of every service point and merges them by day.

        Args:
            account: The resolved account.
            service_points: Service description -> servicePointId.

        Returns:
            The CollectionCalendar for the account.

        Raises:
            RequestError: If the calendar call fails.
            ResponseFormatError: If a service point has no entry in the response.
        """
        payload = {
            "customerId": CUSTOMER_ID,
            "accountContext": {
                "accountNumber": account.account_number,
                "personId": account.person_id,
                "companyCd": account.company_code,
            },
            "servicePoints": list(service_points.values()),
        }
        response = self.gateway.send(
            self.calendar_url, payload, self.token_provider.auth_headers()
        )
        dates_by_point = parse_calendar(response)

        calendar = CollectionCalendar(timezone=self.timezone)
        for description, service_point_id in service_points.items():
            if service_point_id not in dates_by_point:
                raise ResponseFormatError(
                    f"Calendar response has no dates for service point {service_point_id} ({description})"
                )
            calendar.add_days(description, dates_by_point[service_point_id])

        logger.info(
            f"Built calendar with {len(calendar)} collection days for account {account.account_number}."
        )
        return calendar
