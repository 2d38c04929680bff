"""
Roofing cost estimator.

Pure math, no I/O. Area × catalog price range, then a fixed chain of
adjustments. The chain order matters because add-ons are additive:

    complexity (labor share) → commercial premium → repair reduction → add-ons

Input: roofing type, roof size (sq ft), material code, job type,
       complexity, tear-off flag, permits flag
Output: CostBreakdown dict, or None when the form is missing required input
"""

import logging
from typing import Optional

from ..models import JobType, normalize_choice
from .material_lookup import MaterialLookup

logger = logging.getLogger(__name__)


class CostEstimator:
    """
    Maps an estimate request to a low / mid / high cost range
    plus a materials / labor / add-ons split of the mid total.
    """

    # Extra labor per complexity tier (fraction of labor cost)
    COMPLEXITY_MULTIPLIERS = {
        "simple": 0.0,
        "medium": 0.2,
        "complex": 0.4,
    }
    JOB_TYPES = frozenset(job.value for job in JobType)

    LABOR_SHARE = 0.4           # Labor's share of installed cost
    MATERIALS_SHARE = 0.6

    COMMERCIAL_PREMIUM = 1.10   # +10% for commercial scale
    REPAIR_FACTOR = 0.6         # Repairs priced at 60% of a full install

    TEAROFF_PER_SQFT = 1.50     # Average of $1-$2/sq ft
    PERMIT_FEE = 500.00         # Average of $400-$600

    def __init__(self, lookup: Optional[MaterialLookup] = None):
        self.lookup = lookup or MaterialLookup()

    def estimate(self, roofing_type, roof_size, material, job_type="new",
                 complexity="simple", tearoff=False, permits=False) -> Optional[dict]:
        """
        Returns a CostBreakdown dict:
            {
                materials: float,
                labor: float,
                addons: float,
                total_low: float,
                total_mid: float,
                total_high: float,
            }

        Returns None (not an error) when roof_size is missing or <= 0,
        complexity or job_type is not a known choice,
        material is empty, or the material is not sold under roofing_type.
        """
        if not roof_size or roof_size <= 0 or not material:
            return None

        price_range = self.lookup.get_price_range(roofing_type, material)
        if price_range is None:
            logger.debug("Material %r not in %r catalog", material, roofing_type)
            return None

        tier = normalize_choice(complexity)
        if tier not in self.COMPLEXITY_MULTIPLIERS:
            logger.debug("Unknown complexity %r", complexity)
            return None

        job = normalize_choice(job_type)
        if job not in self.JOB_TYPES:
            logger.debug("Unknown job type %r", job_type)
            return None

        low_price, high_price = price_range
        mid_price = (low_price + high_price) / 2

        base_low = roof_size * low_price
        base_mid = roof_size * mid_price
        base_high = roof_size * high_price

        # Complexity only touches the labor share of the blended base
        labor_factor = self._labor_factor(tier)
        base_low *= labor_factor
        base_mid *= labor_factor
        base_high *= labor_factor

        if normalize_choice(roofing_type) == "commercial":
            base_low *= self.COMMERCIAL_PREMIUM
            base_mid *= self.COMMERCIAL_PREMIUM
            base_high *= self.COMMERCIAL_PREMIUM

        addons = self._calculate_addons(roof_size, job, tearoff, permits)

        # Add-ons were priced above and are not reduced for repairs
        if job == "repair":
            base_low *= self.REPAIR_FACTOR
            base_mid *= self.REPAIR_FACTOR
            base_high *= self.REPAIR_FACTOR

        total_low = base_low + addons
        total_mid = base_mid + addons
        total_high = base_high + addons

        # NOTE: the 60/40 split is taken from total_mid *including* add-ons,
        # so materials + labor == total_mid and addons is reported alongside.
        # Kept for output compatibility with published estimates.
        return {
            "materials": total_mid * self.MATERIALS_SHARE,
            "labor": total_mid * self.LABOR_SHARE,
            "addons": addons,
            "total_low": total_low,
            "total_mid": total_mid,
            "total_high": total_high,
        }

    def _labor_factor(self, tier: str) -> float:
        """1 + labor share × complexity multiplier. simple → 1.0, complex → 1.16."""
        return 1 + self.COMPLEXITY_MULTIPLIERS[tier] * self.LABOR_SHARE

    def _calculate_addons(self, roof_size: float, job: str, tearoff: bool, permits: bool) -> float:
        """
        Tear-off only applies to replacements (nothing to tear off on new work).
        Permits are a flat fee for any job type.
        """
        addons = 0.0
        if tearoff and job == "replacement":
            addons += roof_size * self.TEAROFF_PER_SQFT
        if permits:
            addons += self.PERMIT_FEE
        return addons


_ESTIMATOR = CostEstimator()


def estimate(roofing_type, roof_size, material, job_type="new",
             complexity="simple", tearoff=False, permits=False) -> Optional[dict]:
    """Module-level entry point. See CostEstimator.estimate."""
    return _ESTIMATOR.estimate(
        roofing_type, roof_size, material, job_type, complexity, tearoff, permits,
    )
