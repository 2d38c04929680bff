"""
Roof size helper: estimates roof area from the home's footprint.

Treats the footprint as a square, adds the eave overhang around the
perimeter, then scales for pitch and ordering waste.

Input: footprint (sq ft), overhang (inches), pitch
Output: roof size in whole sq ft (0 when no footprint was given)
"""

import logging
import math

from ..models import normalize_choice

logger = logging.getLogger(__name__)


class RoofSizeCalculator:

    PITCH_MULTIPLIERS = {
        "flat": 1.0,
        "low": 1.1,
        "medium": 1.3,
        "steep": 1.5,
    }
    WASTE_FACTOR = 1.125    # 12.5% average waste

    def calculate(self, footprint, overhang=0.0, pitch="flat") -> int:
        """
        Returns estimated roof size in sq ft, rounded to the nearest foot.
        0 when there is no footprint or the inputs overflow to inf/nan.
        """
        if not footprint or footprint <= 0:
            return 0

        overhang_in = max(overhang or 0.0, 0.0)
        perimeter_ft = self.square_perimeter(footprint)
        overhang_sqft = perimeter_ft * self.inches_to_feet(overhang_in)

        key = normalize_choice(pitch)
        pitch_multiplier = self.PITCH_MULTIPLIERS.get(key)
        if pitch_multiplier is None:
            logger.warning("Unknown pitch %r, assuming flat", pitch)
            pitch_multiplier = self.PITCH_MULTIPLIERS["flat"]

        area = (footprint + overhang_sqft) * pitch_multiplier * self.WASTE_FACTOR
        if not math.isfinite(area):
            logger.warning("Roof size not finite for footprint %r, overhang %r", footprint, overhang)
            return 0
        return self.round_half_up(area)

    def square_perimeter(self, area_sqft: float) -> float:
        """Perimeter of a square with the given area."""
        return 4 * math.sqrt(area_sqft)

    def inches_to_feet(self, inches: float) -> float:
        """Convert inches to feet."""
        return inches / 12.0

    def round_half_up(self, value: float) -> int:
        """Halves round up (2.5 → 3). Built-in round() rounds halves to even."""
        return int(math.floor(value + 0.5))


_CALCULATOR = RoofSizeCalculator()


def estimate_area(footprint, overhang=0.0, pitch="flat") -> int:
    """Module-level entry point. See RoofSizeCalculator.calculate."""
    return _CALCULATOR.calculate(footprint, overhang, pitch)
