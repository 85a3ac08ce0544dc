"""
VAT Rate and Result Data Models

Defines the records shared by the rate table and the tax calculator:
- RateType: The five EU rate categories
- RateRecord: All rates levied by one country
- CountryRate: A RateRecord together with its country code
- AddTaxResult / SubtractTaxResult: Output of the tax arithmetic

Attribute names are snake_case; dumping with by_alias=True produces the
camelCase keys of the published rate format (standardRate, taxAmount, ...).

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class RateType(str, Enum):
    """EU VAT rate categories."""

    SUPER_REDUCED = "RATE_SUPER_REDUCED"
    REDUCED = "RATE_REDUCED"      # First reduced rate
    REDUCED2 = "RATE_REDUCED2"    # Second reduced rate, where a country has two
    STANDARD = "RATE_STANDARD"
    PARKING = "RATE_PARKING"

    @classmethod
    def normalize(cls, value: Union['RateType', str, None]) -> Optional['RateType']:
        """Normalize a rate category from various spellings.

        Accepts members, values ("RATE_REDUCED"), names ("REDUCED") and loose
        forms ("reduced", "super-reduced", "Super Reduced").

        Returns:
            The matching RateType, or None if the value is not recognized.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        clean_value = value.strip().upper().replace(" ", "").replace("-", "").replace("_", "")
        if clean_value.startswith("RATE"):
            clean_value = clean_value[len("RATE"):]

        type_map = {
            "SUPERREDUCED": cls.SUPER_REDUCED,
            "REDUCED": cls.REDUCED,
            "REDUCED1": cls.REDUCED,
            "REDUCED2": cls.REDUCED2,
            "STANDARD": cls.STANDARD,
            "PARKING": cls.PARKING,
        }
        return type_map.get(clean_value)


def _check_percentage(value: float) -> float:
    if not 0 <= value < 100:
        raise ValueError(f"VAT rate must be within [0, 100), got {value}")
    return value


class _VATModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RateRecord(_VATModel):
    """
    VAT rates levied by a single country.

    Only the standard rate is mandatory. A country may have no reduced rate,
    one, or two; the tuple is never empty.
    """

    name: str
    super_reduced_rate: Optional[float] = None
    reduced_rate: Optional[Tuple[float, ...]] = None
    standard_rate: float
    parking_rate: Optional[float] = None

    @field_validator('super_reduced_rate', 'standard_rate', 'parking_rate')
    @classmethod
    def validate_rate(cls, v):
        if v is None:
            return v
        return _check_percentage(v)

    @field_validator('reduced_rate')
    @classmethod
    def validate_reduced_rate(cls, v):
        if v is None:
            return v
        if not 1 <= len(v) <= 2:
            raise ValueError(f"reduced_rate must hold 1 or 2 rates, got {len(v)}")
        for rate in v:
            _check_percentage(rate)
        return v


class CountryRate(RateRecord):
    """A country's rates together with its 2-letter code."""

    code: str

    @field_validator('code')
    @classmethod
    def validate_code(cls, v):
        if len(v) != 2 or not v.isalpha() or not v.isupper():
            raise ValueError(f"Country code must be two uppercase letters, got '{v}'")
        return v


class AddTaxResult(_VATModel):
    """Result of adding VAT to a net amount."""

    tax_rate: float
    tax_amount: float
    total: float


class SubtractTaxResult(_VATModel):
    """Result of removing VAT from a gross amount."""

    tax_rate: float
    tax_amount: float
    net_amount: float
