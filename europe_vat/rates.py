"""
EU VAT Rate Table

Static, read-only table of VAT rates for the EU member states. There are four
kinds of rate (super-reduced, reduced, standard, parking); only the standard
rate is levied everywhere. Rates not levied by a country are None.

Country codes follow the EU convention: "EL" for Greece, "UK" for the United
Kingdom.

References:
- European Commission, "VAT rates applied in the Member States of the
  European Union", situation at 1st January 2017

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import date
from types import MappingProxyType
from typing import Dict, List, Mapping

from europe_vat.errors import UnknownCountryError
from europe_vat.models import CountryRate, RateRecord
from europe_vat.utils.logging_config import setup_logger

logger = setup_logger(__name__)


RATES_EFFECTIVE_DATE = date(2017, 1, 1)
RATES_SOURCE_URL = (
    "http://ec.europa.eu/taxation_customs/resources/documents/taxation/vat/"
    "how_vat_works/rates/vat_rates_en.pdf"
)


# Insertion order is the published table order
_COUNTRIES: Mapping[str, RateRecord] = MappingProxyType({
    "BE": RateRecord(name="Belgium", reduced_rate=(6, 12), standard_rate=21, parking_rate=12),
    "BG": RateRecord(name="Bulgaria", reduced_rate=(9,), standard_rate=20),
    "CZ": RateRecord(name="Czech Republic", reduced_rate=(10, 15), standard_rate=21),
    "DK": RateRecord(name="Denmark", standard_rate=25),
    "DE": RateRecord(name="Germany", reduced_rate=(7,), standard_rate=19),
    "EE": RateRecord(name="Estonia", reduced_rate=(9,), standard_rate=20),
    "IE": RateRecord(
        name="Ireland",
        super_reduced_rate=4.8,
        reduced_rate=(9, 13.5),
        standard_rate=23,
        parking_rate=13.5,
    ),
    "EL": RateRecord(name="Greece", reduced_rate=(6, 13), standard_rate=24),
    "ES": RateRecord(name="Spain", super_reduced_rate=4, reduced_rate=(10,), standard_rate=21),
    "FR": RateRecord(name="France", super_reduced_rate=2.1, reduced_rate=(5.5, 10), standard_rate=20),
    "HR": RateRecord(name="Croatia", reduced_rate=(5, 13), standard_rate=25),
    "IT": RateRecord(name="Italy", super_reduced_rate=4, reduced_rate=(5, 10), standard_rate=22),
    "CY": RateRecord(name="Cyprus", reduced_rate=(5, 9), standard_rate=19),
    "LV": RateRecord(name="Latvia", reduced_rate=(12,), standard_rate=21),
    "LT": RateRecord(name="Lithuania", reduced_rate=(5, 9), standard_rate=21),
    "LU": RateRecord(
        name="Luxembourg",
        super_reduced_rate=3,
        reduced_rate=(8,),
        standard_rate=17,
        parking_rate=14,
    ),
    "HU": RateRecord(name="Hungary", reduced_rate=(5, 18), standard_rate=27),
    "MT": RateRecord(name="Malta", reduced_rate=(5, 7), standard_rate=18),
    "NL": RateRecord(name="Netherlands", reduced_rate=(6,), standard_rate=21),
    "AT": RateRecord(name="Austria", reduced_rate=(10, 13), standard_rate=20, parking_rate=13),
    "PL": RateRecord(name="Poland", reduced_rate=(5, 8), standard_rate=23),
    "PT": RateRecord(name="Portugal", reduced_rate=(6, 13), standard_rate=23, parking_rate=13),
    "RO": RateRecord(name="Romania", reduced_rate=(5, 9), standard_rate=19),
    "SI": RateRecord(name="Slovenia", reduced_rate=(9.5,), standard_rate=22),
    "SK": RateRecord(name="Slovakia", reduced_rate=(10,), standard_rate=20),
    "FI": RateRecord(name="Finland", reduced_rate=(10, 14), standard_rate=24),
    "SE": RateRecord(name="Sweden", reduced_rate=(6, 12), standard_rate=25),
    "UK": RateRecord(name="United Kingdom", reduced_rate=(5,), standard_rate=20),
})


def _normalize_code(country_code) -> str:
    if not isinstance(country_code, str):
        raise UnknownCountryError(str(country_code), available=list_available_countries())
    return country_code.strip().upper()


def get_country_rates(country_code: str) -> CountryRate:
    """
    Return all rates for a country.

    Args:
        country_code: 2-letter EU country code, any case

    Returns:
        CountryRate with the normalized (uppercase) code filled in

    Raises:
        UnknownCountryError: If the code is not a supported EU country
    """
    code = _normalize_code(country_code)
    record = _COUNTRIES.get(code)

    if record is None:
        logger.debug(f"Rejected unknown country code '{code}'")
        raise UnknownCountryError(code, available=list_available_countries())

    return CountryRate(code=code, **record.model_dump())


def get_all_standard_rates() -> Dict[str, float]:
    """
    Return the standard rate of every supported country.

    Returns:
        Mapping of country code to standard rate, in table order
    """
    return {
        code: record.standard_rate
        for code, record in _COUNTRIES.items()
    }


def get_all() -> Dict[str, RateRecord]:
    """
    Return every country with all its rates.

    The code is the key, so the records themselves carry no code field.
    """
    return dict(_COUNTRIES)


def list_available_countries() -> List[str]:
    """
    Get list of all supported country codes.

    Returns:
        Sorted country codes (e.g., ["AT", "BE", ...])
    """
    return sorted(_COUNTRIES.keys())


def is_supported(country_code: str) -> bool:
    """Check whether a country code (any case) is in the rate table."""
    if not isinstance(country_code, str):
        return False
    return country_code.strip().upper() in _COUNTRIES
