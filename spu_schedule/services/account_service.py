"""
This module defines the AccountResolver, which turns an address into a
solid-waste account and its service points.
"""
import logging
from enum import Enum
from typing import Optional, Tuple

from ..config import ACCOUNT_CODE_URL, CUSTOMER_ID, PREMISE_CODE_URL, SERVICES_URL
from ..exceptions import ResolutionOrderError, SpuError
from ..models import Account, ServicePointMap
from ..responses import parse_account_number, parse_premise_code, parse_service_summary
from .http_gateway import HttpGateway
from .token_provider import TokenProvider

# Get a logger instance for this module
logger = logging.getLogger(__name__)


class ResolverState(Enum):
    PENDING = "pending"
    PREMISE_RESOLVED = "premise_resolved"
    ACCOUNT_RESOLVED = "account_resolved"
    SERVICE_POINTS_RESOLVED = "service_points_resolved"


class AccountResolver:
    """
    Resolves one address through three dependent lookups:
    premise code, account number, then service points.

    Each step is its own method and may only run once the previous step
    has completed.
    """

    def __init__(
        self,
        address: str,
        gateway: HttpGateway,
        token_provider: TokenProvider,
        premise_code_url: str = PREMISE_CODE_URL,
        account_code_url: str = ACCOUNT_CODE_URL,
        services_url: str = SERVICES_URL,
    ):
        self.address = address
        self.gateway = gateway
        self.token_provider = token_provider
        self.premise_code_url = premise_code_url
        self.account_code_url = account_code_url
        self.services_url = services_url

        self.state = ResolverState.PENDING
        self.premise_code: Optional[str] = None
        self.account_number: Optional[str] = None
        self.person_id: Optional[str] = None
        self.company_code: Optional[str] = None
        self.service_points: Optional[ServicePointMap] = None

    def _require(self, expected: ResolverState, step: str) -> None:
        if self.state is not expected:
            raise ResolutionOrderError(
                f"Cannot run {step} while resolver is {self.state.value}, expected {expected.value}"
            )

    def resolve_premise(self) -> str:
        """
        Looks up the premise code for the address.

        Raises:
            AddressNotFoundError: If the API returns no matching address.
        """
        self._require(ResolverState.PENDING, "premise lookup")
        response = self.gateway.send(
            self.premise_code_url,
            {"address": {"addressLine1": self.address, "city": "", "zip": ""}},
        )
        self.premise_code = parse_premise_code(response, self.address)
        self.state = ResolverState.PREMISE_RESOLVED
        logger.info(f"Found premise code {self.premise_code} for '{self.address}'.")
        return self.premise_code

    def resolve_account(self) -> str:
        """
        Looks up the account number registered at the premise.

        Raises:
            AccountNotFoundError: If no account number is returned.
        """
        self._require(ResolverState.PREMISE_RESOLVED, "account lookup")
        response = self.gateway.send(
            self.account_code_url,
            {"address": {"premCode": self.premise_code}},
        )
        self.account_number = parse_account_number(response, self.premise_code)
        self.state = ResolverState.ACCOUNT_RESOLVED
        logger.info(f"Found account {self.account_number} for premise {self.premise_code}.")
        return self.account_number

    def resolve_service_points(self) -> ServicePointMap:
        """Looks up the account's service points. This call needs the bearer token."""
        self._require(ResolverState.ACCOUNT_RESOLVED, "service point lookup")
        payload = {
            "customerId": CUSTOMER_ID,
            "accountContext": {
                "accountNumber": self.account_number,
                "personId": None,
                "companyCd": None,
                "serviceAddress": None,
            },
        }
        response = self.gateway.send(
            self.services_url, payload, self.token_provider.auth_headers()
        )
        summary = parse_service_summary(response)
        self.service_points = summary.service_points
        self.person_id = summary.person_id
        self.company_code = summary.company_code
        self.state = ResolverState.SERVICE_POINTS_RESOLVED
        logger.info(
            f"Account {self.account_number} has service points for: {', '.join(self.service_points)}."
        )
        return self.service_points

    def account(self) -> Account:
        """Returns the resolved Account. Only valid once every step has run."""
        self._require(ResolverState.SERVICE_POINTS_RESOLVED, "account access")
        return Account(
            address=self.address,
            account_number=self.account_number,
            premise_code=self.premise_code,
            person_id=self.person_id,
            company_code=self.company_code,
        )

    def resolve(self) -> Tuple[Account, ServicePointMap]:
        """
        Runs every remaining step in order.

        Returns:
            The resolved Account and its service point mapping.

        Raises:
            SpuError: Whatever the failing step raised. Nothing partial is returned.
        """
        try:
            if self.state is ResolverState.PENDING:
                self.resolve_premise()
            if self.state is ResolverState.PREMISE_RESOLVED:
                self.resolve_account()
            if self.state is ResolverState.ACCOUNT_RESOLVED:
                self.resolve_service_points()
        except SpuError as e:
            logger.warning(f"Resolution of '{self.address}' stopped at {self.state.value}: {e}")
            raise
        return self.account(), dict(self.service_points)
