"""
europe_vat - EU VAT rates and calculations

Static VAT rate table for the EU member states plus helpers to add VAT to a
net amount or remove it from a gross amount.

Usage:
    from europe_vat import add_tax, subtract_tax, RateType

    add_tax(100, "DE").total                           # 119.0
    subtract_tax(49, "ES", RateType.REDUCED).net_amount

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .errors import VATError, UnknownCountryError, RateNotAvailableError
from .models import RateType, RateRecord, CountryRate, AddTaxResult, SubtractTaxResult
from .rates import (
    get_country_rates,
    get_all_standard_rates,
    get_all,
    list_available_countries,
    is_supported,
    RATES_EFFECTIVE_DATE,
)
from .calculator import resolve_rate, add_tax, subtract_tax

__version__ = "1.0.0"

__all__ = [
    "add_tax",
    "subtract_tax",
    "resolve_rate",
    "get_country_rates",
    "get_all_standard_rates",
    "get_all",
    "list_available_countries",
    "is_supported",
    "RATES_EFFECTIVE_DATE",
    "RateType",
    "RateRecord",
    "CountryRate",
    "AddTaxResult",
    "SubtractTaxResult",
    "VATError",
    "UnknownCountryError",
    "RateNotAvailableError",
]
