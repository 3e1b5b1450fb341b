"""
This module contains configuration settings for the application.

Values come from environment variables and fall back to the resolver's
fixed defaults.
"""
import os
from dataclasses import dataclass

from spu_schedule import config as defaults


@dataclass(frozen=True)
class Settings:
    api_base_url: str = defaults.API_BASE_URL
    guest_username: str = defaults.GUEST_USERNAME
    guest_password: str = defaults.GUEST_PASSWORD
    timezone: str = defaults.TIMEZONE
    request_timeout: float = defaults.REQUEST_TIMEOUT
    log_level: str = "INFO"

    @property
    def auth_url(self) -> str:
        return f"{self.api_base_url}/auth/guest"

    @property
    def premise_code_url(self) -> str:
        return f"{self.api_base_url}/serviceorder/findaddress"

    @property
    def account_code_url(self) -> str:
        return f"{self.api_base_url}/serviceorder/findAccount"

    @property
    def services_url(self) -> str:
        return f"{self.api_base_url}/guest/swsummary"

    @property
    def calendar_url(self) -> str:
        return f"{self.api_base_url}/solidwastecalendar"


def load_settings() -> Settings:
    """Reads the SPU_* environment variables."""
    return Settings(
        api_base_url=os.environ.get("SPU_API_BASE_URL", defaults.API_BASE_URL).rstrip("/"),
        guest_username=os.environ.get("SPU_GUEST_USERNAME", defaults.GUEST_USERNAME),
        guest_password=os.environ.get("SPU_GUEST_PASSWORD", defaults.GUEST_PASSWORD),
        timezone=os.environ.get("SPU_TIMEZONE", defaults.TIMEZONE),
        request_timeout=float(os.environ.get("SPU_REQUEST_TIMEOUT", defaults.REQUEST_TIMEOUT)),
        log_level=os.environ.get("SPU_LOG_LEVEL", "INFO").upper(),
    )
