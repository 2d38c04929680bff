"""
Tests for the roofing cost estimator (cost_estimator.py).

Tests:
1-4.   Reference scenarios: exact totals and breakdown
5-9.   Adjustment chain: complexity, commercial premium, repair reduction, add-ons
10-14. Insufficient input returns None
15-17. Invariants across every catalog material and option combination
"""

import itertools

import pytest

from roofcalc.calculators.cost_estimator import CostEstimator, estimate
from roofcalc.calculators.material_lookup import MATERIAL_PRICING
from roofcalc.models import Complexity, JobType, RoofingType


# ============================================================
# Reference scenarios
# ============================================================

def test_residential_asphalt_new_simple():
    """1000 sq ft asphalt at $5-$10 with no adjustments."""
    result = estimate("residential", 1000, "asphalt", "new", "simple", False, False)
    assert result["total_low"] == pytest.approx(5000)
    assert result["total_mid"] == pytest.approx(7500)
    assert result["total_high"] == pytest.approx(10000)
    assert result["materials"] == pytest.approx(4500)
    assert result["labor"] == pytest.approx(3000)
    assert result["addons"] == 0


def test_replacement_with_tearoff_adds_per_sqft():
    result = estimate("residential", 1000, "asphalt", "replacement", "simple", True, False)
    assert result["addons"] == pytest.approx(1500)
    assert result["total_low"] == pytest.approx(6500)
    assert result["total_mid"] == pytest.approx(9000)
    assert result["total_high"] == pytest.approx(11500)


def test_commercial_tpo_complex_with_permits():
    """6000 mid × 1.16 labor × 1.10 commercial + $500 permits = 8156."""
    result = estimate("commercial", 1000, "tpo", "new", "complex", False, True)
    assert result["addons"] == pytest.approx(500)
    assert result["total_mid"] == pytest.approx(8156)
    assert result["total_low"] == pytest.approx(5604)
    assert result["total_high"] == pytest.approx(10708)


def test_breakdown_split_includes_addons():
    """60/40 split is taken from total_mid, add-ons and all."""
    result = estimate("commercial", 1000, "tpo", "new", "complex", False, True)
    assert result["materials"] == pytest.approx(8156 * 0.6)
    assert result["labor"] == pytest.approx(8156 * 0.4)
    assert result["materials"] + result["labor"] == pytest.approx(result["total_mid"])


# ============================================================
# Adjustment chain
# ============================================================

def test_medium_complexity_labor_factor():
    """medium → 1 + 0.2 × 0.4 = 1.08 on all three totals."""
    result = estimate("residential", 1000, "asphalt", "new", "medium")
    assert result["total_low"] == pytest.approx(5400)
    assert result["total_mid"] == pytest.approx(8100)
    assert result["total_high"] == pytest.approx(10800)


def test_commercial_premium_applied_after_complexity():
    base = estimate("commercial", 500, "pvc", "new", "simple")
    # 500 × $5-$9, mid $7, then × 1.10
    assert base["total_low"] == pytest.approx(2750)
    assert base["total_mid"] == pytest.approx(3850)
    assert base["total_high"] == pytest.approx(4950)


def test_repair_reduces_base_but_not_addons():
    """Repair × 0.6 happens before the $500 permit fee is added."""
    result = estimate("residential", 1000, "asphalt", "repair", "simple", False, True)
    assert result["total_low"] == pytest.approx(3500)
    assert result["total_mid"] == pytest.approx(5000)
    assert result["total_high"] == pytest.approx(6500)
    assert result["addons"] == pytest.approx(500)
    assert result["materials"] == pytest.approx(3000)
    assert result["labor"] == pytest.approx(2000)


def test_tearoff_only_counts_for_replacement():
    for job_type in ("new", "repair"):
        result = estimate("residential", 1000, "asphalt", job_type, "simple", True, False)
        assert result["addons"] == 0, job_type
    result = estimate("residential", 1000, "asphalt", "replacement", "simple", True, True)
    assert result["addons"] == pytest.approx(2000)


def test_addons_do_not_scale_with_complexity_or_category():
    result = estimate("commercial", 2000, "metal", "replacement", "complex", True, True)
    assert result["addons"] == pytest.approx(2000 * 1.5 + 500)


# ============================================================
# Insufficient input
# ============================================================

def test_zero_or_negative_roof_size_returns_none():
    assert estimate("residential", 0, "asphalt") is None
    assert estimate("residential", -100, "asphalt") is None
    assert estimate("residential", None, "asphalt") is None


def test_empty_material_returns_none():
    assert estimate("residential", 1000, "") is None
    assert estimate("residential", 1000, None) is None


def test_material_from_other_roofing_type_returns_none():
    assert estimate("residential", 1000, "tpo") is None
    assert estimate("commercial", 1000, "slate") is None
    assert estimate("commercial", 1000, "nonexistent") is None


def test_unknown_complexity_returns_none():
    assert estimate("residential", 1000, "asphalt", "new", "extreme") is None


def test_unknown_job_type_returns_none():
    """Unknown job types are not silently priced as new installs."""
    assert estimate("residential", 1000, "asphalt", "demolition") is None
    assert estimate("residential", 1000, "asphalt", "") is None
    assert estimate("residential", 1000, "asphalt", JobType.REPAIR) is not None



# ============================================================
# Invariants
# ============================================================

def _all_requests(roof_size=1234.5):
    for roofing_type, materials in MATERIAL_PRICING.items():
        for material, job_type, complexity, tearoff, permits in itertools.product(
            materials,
            ("new", "replacement", "repair"),
            ("simple", "medium", "complex"),
            (False, True),
            (False, True),
        ):
            yield (roofing_type, roof_size, material, job_type, complexity, tearoff, permits)


def test_totals_ordered_and_non_negative():
    for request in _all_requests():
        result = estimate(*request)
        assert result is not None, request
        assert result["total_low"] <= result["total_mid"] <= result["total_high"], request
        assert all(value >= 0 for value in result.values()), request


def test_breakdown_sums_to_total_mid():
    """materials + labor always equal total_mid; with no add-ons the three parts do."""
    for request in _all_requests():
        result = estimate(*request)
        assert result["materials"] + result["labor"] == pytest.approx(result["total_mid"]), request
        if result["addons"] == 0:
            parts = result["materials"] + result["labor"] + result["addons"]
            assert parts == pytest.approx(result["total_mid"]), request


def test_estimate_is_deterministic_and_accepts_enums():
    estimator = CostEstimator()
    first = estimator.estimate(
        RoofingType.COMMERCIAL, 1000, "tpo", JobType.NEW, Complexity.COMPLEX, False, True,
    )
    second = estimator.estimate("commercial", 1000, "tpo", "new", "complex", False, True)
    assert first == second
    assert estimator.estimate("commercial", 1000, "tpo") == estimator.estimate("commercial", 1000, "tpo")
