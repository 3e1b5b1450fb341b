"""
This module decodes the JSON bodies returned by the utility API.

Each function checks the fields one endpoint is expected to return and
raises the matching error instead of letting a KeyError or TypeError leak
out of the resolution pipeline.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .exceptions import (
    AccountNotFoundError,
    AddressNotFoundError,
    AuthError,
    ResponseFormatError,
)
from .models import ServicePointMap


@dataclass(frozen=True)
class ServiceSummary:
    """Decoded body of the swsummary endpoint."""

    service_points: ServicePointMap
    person_id: Optional[str]
    company_code: Optional[str]


def _field(payload: Any, key: str, endpoint: str) -> Any:
    if not isinstance(payload, dict) or key not in payload:
        raise ResponseFormatError(f"{endpoint} response is missing '{key}'")
    return payload[key]


def _required_str(payload: Any, key: str, endpoint: str) -> str:
    value = _field(payload, key, endpoint)
    if not isinstance(value, str) or not value:
        raise ResponseFormatError(f"{endpoint} response field '{key}' is not a non-empty string")
    return value


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def parse_access_token(payload: Any) -> str:
    """Returns the bearer token from the auth endpoint."""
    token = payload.get("access_token") if isinstance(payload, dict) else None
    if not isinstance(token, str) or not token:
        raise AuthError("Token response did not contain an access_token")
    return token


def parse_premise_code(payload: Any, address: str) -> str:
    """Returns the premise code of the first address match."""
    matches = _field(payload, "address", "findaddress")
    if not isinstance(matches, list):
        raise ResponseFormatError("findaddress response 'address' is not a list")
    if not matches:
        raise AddressNotFoundError(address)
    premise_code = _field(matches[0], "premCode", "findaddress")
    if premise_code in (None, ""):
        raise AddressNotFoundError(address)
    return str(premise_code)


def parse_account_number(payload: Any, premise_code: str) -> str:
    """Returns the account number registered at a premise."""
    account = payload.get("account") if isinstance(payload, dict) else None
    if account is None:
        raise AccountNotFoundError(premise_code)
    account_number = _field(account, "accountNumber", "findAccount")
    if account_number in (None, ""):
        raise AccountNotFoundError(premise_code)
    return str(account_number)


def parse_service_summary(payload: Any) -> ServiceSummary:
    """Returns the service points and account context from swsummary."""
    context = _field(payload, "accountContext", "swsummary")
    if not isinstance(context, dict):
        raise ResponseFormatError("swsummary response 'accountContext' is not an object")
    summary = _field(payload, "accountSummaryType", "swsummary")
    sw_services = _field(summary, "swServices", "swsummary")
    if not isinstance(sw_services, list) or not sw_services:
        raise ResponseFormatError("swsummary response has no solid waste services")
    services = _field(sw_services[0], "services", "swsummary")
    if not isinstance(services, list):
        raise ResponseFormatError("swsummary response 'services' is not a list")

    service_points: ServicePointMap = {}
    for service in services:
        description = _required_str(service, "description", "swsummary")
        service_point_id = _required_str(service, "servicePointId", "swsummary")
        service_points[description] = service_point_id

    return ServiceSummary(
        service_points=service_points,
        person_id=_optional_str(context.get("personId")),
        company_code=_optional_str(context.get("companyCd")),
    )


def parse_calendar(payload: Any) -> Dict[str, List[str]]:
    """Returns the servicePointId -> date strings mapping from solidwastecalendar."""
    calendar = _field(payload, "calendar", "solidwastecalendar")
    if not isinstance(calendar, dict):
        raise ResponseFormatError("solidwastecalendar response 'calendar' is not an object")
    for service_point_id, dates in calendar.items():
        if not isinstance(dates, list):
            raise ResponseFormatError(
                f"solidwastecalendar dates for service point {service_point_id} are not a list"
            )
    return calendar
