"""
VAT Error Hierarchy

Both error kinds are caller-input errors: an unsupported country code or a
rate category the country does not levy. They subclass ValueError so existing
invalid-argument handling keeps working.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import Dict, List, Optional


class VATError(ValueError):
    """Base error for all VAT lookups and calculations."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnknownCountryError(VATError):
    """The country code does not match any entry in the rate table."""

    def __init__(self, country_code: str, available: Optional[List[str]] = None):
        self.country_code = country_code
        self.available = available or []
        super().__init__(
            f"Invalid country code '{country_code}'.",
            {"country_code": country_code, "available": self.available},
        )


class RateNotAvailableError(VATError):
    """The country has no value for the requested rate category."""

    def __init__(self, country_code: str, rate_type: str):
        self.country_code = country_code
        self.rate_type = rate_type
        super().__init__(
            f"Country '{country_code}' has no VAT rate for type '{rate_type}'.",
            {"country_code": country_code, "rate_type": rate_type},
        )
