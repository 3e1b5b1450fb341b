"""
This module contains the fixed settings of the schedule resolver.

Nothing here is read from the environment; the application layer passes
overrides to the service constructors instead.
"""

# Remote utility API
API_BASE_URL = "https://myutilities.seattle.gov/rest"

AUTH_URL = f"{API_BASE_URL}/auth/guest"
PREMISE_CODE_URL = f"{API_BASE_URL}/serviceorder/findaddress"
ACCOUNT_CODE_URL = f"{API_BASE_URL}/serviceorder/findAccount"
SERVICES_URL = f"{API_BASE_URL}/guest/swsummary"
CALENDAR_URL = f"{API_BASE_URL}/solidwastecalendar"

# Guest credentials used to obtain the bearer token
GUEST_USERNAME = "guest"
GUEST_PASSWORD = "guest"
CUSTOMER_ID = "guest"

# Collection dates are calendar days in this timezone
TIMEZONE = "America/Los_Angeles"

# Per-request timeout in seconds
REQUEST_TIMEOUT = 10.0
