"""
Display helpers: turn raw estimator output into what the results card shows.

The estimators return unrounded floats. Everything here is presentation:
whole-dollar currency strings and pie chart slices.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .config import settings

CHART_SLICES = [
    ("Materials", "materials"),
    ("Labor", "labor"),
    ("Add-ons", "addons"),
]


def whole_units(value: float) -> int:
    """Round to the nearest whole unit, halves up (matches the form's rounding)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(value: float) -> str:
    """7500.4 → '$7,500'. Whole dollars with thousands separators."""
    return f"${whole_units(value):,}"


def format_cost_range(low: float, high: float) -> str:
    """'$5,000 - $10,000'"""
    return f"{format_currency(low)} - {format_currency(high)}"


def format_sq_ft(value: float) -> str:
    """1647 → '1,647 sq ft'"""
    return f"{whole_units(value):,} sq ft"


def build_display(breakdown: dict) -> dict:
    """
    Returns the EstimateDisplay dict:
        {materials, labor, addons, range, estimate}
    """
    return {
        "materials": format_currency(breakdown["materials"]),
        "labor": format_currency(breakdown["labor"]),
        "addons": format_currency(breakdown["addons"]),
        "range": format_cost_range(breakdown["total_low"], breakdown["total_high"]),
        "estimate": format_currency(breakdown["total_mid"]),
    }


def build_chart(breakdown: dict) -> list:
    """Pie chart slices. Empty slices are dropped (no add-ons → two slices)."""
    return [
        {"name": name, "value": breakdown[key]}
        for name, key in CHART_SLICES
        if breakdown[key] > 0
    ]


def build_disclaimer() -> str:
    return (
        f"This is an estimate based on {settings.PRICING_YEAR} {settings.PRICING_REGION} averages. "
        f"Actual costs may vary due to site inspection, current market fluctuations, "
        f"and specific requirements. For a firm quote, contact {settings.COMPANY_NAME} "
        f"({settings.COMPANY_CONTACT_URL})."
    )


def clamp_roof_size(roof_size: float, max_size: Optional[float] = None) -> tuple:
    """
    Returns (size, clamped). Sizes above the cap are pulled down to it
    rather than rejected, the same way the form input behaves.
    """
    cap = settings.MAX_ROOF_SIZE if max_size is None else max_size
    if roof_size > cap:
        return cap, True
    return roof_size, False
