"""
EU VAT Calculator - Usage Example

Demonstrates adding and subtracting VAT and reading the rate table.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from europe_vat import (
    RateType,
    add_tax,
    subtract_tax,
    get_country_rates,
    get_all_standard_rates,
    get_all,
    RATES_EFFECTIVE_DATE,
)


def _format_rate(rate):
    if rate is None:
        return "-"
    if isinstance(rate, tuple):
        return ", ".join(f"{r:g}" for r in rate)
    return f"{rate:g}"


def main():
    """Demonstrate EU VAT calculator usage."""

    print("=" * 70)
    print(f"EU VAT Calculator - Demo (rates as of {RATES_EFFECTIVE_DATE:%d %B %Y})")
    print("=" * 70)
    print()

    print("=" * 70)
    print("ADDING AND SUBTRACTING TAX")
    print("=" * 70)

    result = add_tax(100, "DE")
    print("\nadd_tax(100, 'DE'):")
    print(f"  Rate:   {result.tax_rate:>12g}%")
    print(f"  Tax:    €{result.tax_amount:>12,.2f}")
    print(f"  Total:  €{result.total:>12,.2f}")

    result = subtract_tax(49, "ES", RateType.REDUCED)
    print("\nsubtract_tax(49, 'ES', RateType.REDUCED):")
    print(f"  Rate:   {result.tax_rate:>12g}%")
    print(f"  Tax:    €{result.tax_amount:>12,.2f}")
    print(f"  Net:    €{result.net_amount:>12,.2f}")

    # Country codes can be any case
    result = add_tax(36.95, "hu")
    print("\nadd_tax(36.95, 'hu'):")
    print(f"  Rate:   {result.tax_rate:>12g}%")
    print(f"  Tax:    €{result.tax_amount:>12,.2f}")
    print(f"  Total:  €{result.total:>12,.2f}")
    print()

    print("=" * 70)
    print("RATES FOR ONE COUNTRY")
    print("=" * 70)
    country = get_country_rates("LU")
    print(f"{country.name} ({country.code})")
    print(f"  Super-reduced: {_format_rate(country.super_reduced_rate)}")
    print(f"  Reduced:       {_format_rate(country.reduced_rate)}")
    print(f"  Standard:      {_format_rate(country.standard_rate)}")
    print(f"  Parking:       {_format_rate(country.parking_rate)}")
    print()

    print("=" * 70)
    print("STANDARD RATES")
    print("=" * 70)
    for code, rate in get_all_standard_rates().items():
        print(f"  {code}: {rate:>6g}%")
    print()

    print("=" * 70)
    print("ALL RATES")
    print("=" * 70)
    print(f"  {'Code':<6}{'Country':<18}{'Super':>8}{'Reduced':>12}{'Standard':>10}{'Parking':>9}")
    for code, record in get_all().items():
        print(
            f"  {code:<6}{record.name:<18}"
            f"{_format_rate(record.super_reduced_rate):>8}"
            f"{_format_rate(record.reduced_rate):>12}"
            f"{_format_rate(record.standard_rate):>10}"
            f"{_format_rate(record.parking_rate):>9}"
        )

    print()
    print("=" * 70)


if __name__ == "__main__":
    main()
