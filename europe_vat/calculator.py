"""
EU VAT Calculator

Adds VAT to a net amount or removes it from a gross amount for a country and
rate category. Amounts are plain floats; no rounding is applied, display
rounding is left to the caller.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import Union

from europe_vat.errors import RateNotAvailableError
from europe_vat.models import AddTaxResult, RateType, SubtractTaxResult
from europe_vat.rates import get_country_rates
from europe_vat.utils.logging_config import setup_logger

logger = setup_logger(__name__)


def resolve_rate(
    country_code: str,
    rate_type: Union[RateType, str] = RateType.STANDARD
) -> float:
    """
    Return the rate as full percent (0..100) for a country and rate category.

    Unrecognized categories fall back to the standard rate.

    Args:
        country_code: 2-letter EU country code, any case
        rate_type: Rate category (default: RateType.STANDARD)

    Returns:
        Rate in percent, e.g. 13.5

    Raises:
        UnknownCountryError: If the country is not supported
        RateNotAvailableError: If the country has no rate of this category
    """
    country = get_country_rates(country_code)

    # Loose spellings such as "reduced" resolve to their category here and do
    # not take the standard-rate fallback below
    category = RateType.normalize(rate_type)
    if category is None:
        logger.warning(
            f"Unrecognized rate type {rate_type!r} for {country.code}, "
            f"using {RateType.STANDARD.value}",
            extra={"vat_context": f"{{'country': '{country.code}', 'rate_type': {rate_type!r}}}"},
        )
        category = RateType.STANDARD

    reduced = country.reduced_rate or ()

    if category is RateType.SUPER_REDUCED:
        rate = country.super_reduced_rate
    elif category is RateType.REDUCED:
        rate = reduced[0] if len(reduced) > 0 else None
    elif category is RateType.REDUCED2:
        rate = reduced[1] if len(reduced) > 1 else None
    elif category is RateType.PARKING:
        rate = country.parking_rate
    else:
        rate = country.standard_rate

    if rate is None:
        logger.debug(f"{country.code} has no {category.value}")
        raise RateNotAvailableError(country.code, category.value)

    return rate


def add_tax(
    net_amount: float,
    country_code: str,
    rate_type: Union[RateType, str] = RateType.STANDARD
) -> AddTaxResult:
    """
    Add VAT to a net amount.

    Args:
        net_amount: Amount excluding VAT
        country_code: 2-letter EU country code, any case
        rate_type: Rate category (default: RateType.STANDARD)

    Returns:
        AddTaxResult with tax_rate, tax_amount and total

    Raises:
        UnknownCountryError: If the country is not supported
        RateNotAvailableError: If the country has no rate of this category
    """
    net = float(net_amount)
    rate = resolve_rate(country_code, rate_type)
    rate_percent = rate / 100

    tax_amount = net * rate_percent
    total = net + tax_amount

    logger.debug(f"add_tax {net} @ {rate}% ({country_code}): tax={tax_amount}, total={total}")

    return AddTaxResult(tax_rate=rate, tax_amount=tax_amount, total=total)


def subtract_tax(
    gross_amount: float,
    country_code: str,
    rate_type: Union[RateType, str] = RateType.STANDARD
) -> SubtractTaxResult:
    """
    Remove VAT from a gross amount.

    Args:
        gross_amount: Amount including VAT
        country_code: 2-letter EU country code, any case
        rate_type: Rate category (default: RateType.STANDARD)

    Returns:
        SubtractTaxResult with tax_rate, tax_amount and net_amount

    Raises:
        UnknownCountryError: If the country is not supported
        RateNotAvailableError: If the country has no rate of this category
    """
    gross = float(gross_amount)
    rate = resolve_rate(country_code, rate_type)
    rate_percent = rate / 100

    net_amount = gross / (1 + rate_percent)
    tax_amount = gross - net_amount

    logger.debug(f"subtract_tax {gross} @ {rate}% ({country_code}): tax={tax_amount}, net={net_amount}")

    return SubtractTaxResult(tax_rate=rate, tax_amount=tax_amount, net_amount=net_amount)
