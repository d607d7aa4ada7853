"""Deployment environments of the payment API."""

from __future__ import annotations

from enum import Enum

_BASE_URLS = {
    "Sandbox": "https://sandbox.zainpay.ng",
    "Production": "https://api.zainpay.ng",
}


class Environment(Enum):
    """Where requests are sent."""

    LOCALBOX = "Localbox"
    SANDBOX = "Sandbox"
    PRODUCTION = "Production"

    def base_url(self) -> str:
        """Return the base URL of this environment, without a trailing slash."""
        try:
            return _BASE_URLS[self.value]
        except KeyError:
            raise ValueError(f"no base URL is known for the {self.value} environment") from None