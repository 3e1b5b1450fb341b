"""
This module defines custom exceptions for the collection schedule resolver.
"""
from typing import Optional


class SpuError(Exception):
    """Base class for every error raised while resolving a schedule."""

    pass


class AddressNotFoundError(SpuError):
    """The premise lookup did not recognize the address."""

    def __init__(self, address: str):
        super().__init__(f"Unable to recognize address: {address}")
        self.address = address


class AccountNotFoundError(SpuError):
    """The account lookup returned no account number for a premise code."""

    def __init__(self, premise_code: str):
        super().__init__(f"Unable to locate an account for premise {premise_code}")
        self.premise_code = premise_code


class RequestError(SpuError):
    """
    An HTTP call failed.

    Carries the status code and reason when the server answered, both are
    None for transport failures.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ResponseDecodeError(RequestError):
    """A successful response whose body is not valid JSON."""

    pass


class ResponseFormatError(RequestError):
    """A JSON response that lacks an expected field or has the wrong shape."""

    pass


class AuthError(SpuError):
    """Token acquisition returned no usable token."""

    pass


class NoUpcomingScheduleError(SpuError):
    """The calendar has no collection day on or after today."""

    pass


class ResolutionOrderError(RuntimeError):
    """A resolver step was called before the step it depends on."""

    pass
