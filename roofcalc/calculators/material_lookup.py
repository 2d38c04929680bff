"""
Roofing material price catalog.

Installed cost per square foot (materials + labor), 2025 Torrance, CA averages.
Each material belongs to exactly one roofing type. "metal" and "asphalt" appear
under both types with different prices; they are separate entries.

All prices are (low, high) per square foot.
"""

import logging

from ..models import normalize_choice

logger = logging.getLogger(__name__)

MATERIAL_PRICING = {
    "residential": {
        "asphalt": (5, 10),
        "clay": (11, 25),
        "metal": (7, 20),
        "wood": (8, 15),
        "slate": (15, 40),
        "membrane": (7, 12),
    },
    "commercial": {
        "tpo": (4, 8),
        "pvc": (5, 9),
        "epdm": (4, 9),
        "modified": (4.5, 9),
        "bur": (5.5, 10),
        "metal": (8, 15),
        "asphalt": (7, 10),
    },
}

MATERIAL_LABELS = {
    "residential": {
        "asphalt": "Asphalt Shingles",
        "clay": "Clay/Concrete Tile",
        "metal": "Metal",
        "wood": "Wood Shake/Shingles",
        "slate": "Slate",
        "membrane": "Flat Membrane (EPDM/TPO)",
    },
    "commercial": {
        "tpo": "TPO Membrane",
        "pvc": "PVC Membrane",
        "epdm": "EPDM Rubber",
        "modified": "Modified Bitumen",
        "bur": "Built-Up Roofing (BUR)",
        "metal": "Metal",
        "asphalt": "Asphalt Shingles",
    },
}


def format_price(price: float) -> str:
    """5 → '$5', 4.5 → '$4.5'. No trailing .0 on whole-dollar prices."""
    return f"${price:g}"


class MaterialLookup:
    """
    Read-only view over MATERIAL_PRICING / MATERIAL_LABELS.

    Estimators go through this class so they never index the tables directly
    and never have to guess whether a material belongs to a roofing type.
    """

    def roofing_types(self) -> list:
        """Roofing types in catalog order."""
        return list(MATERIAL_PRICING.keys())

    def has_material(self, roofing_type, material) -> bool:
        """True only if material is listed under this roofing type."""
        return self.get_price_range(roofing_type, material) is not None

    def get_price_range(self, roofing_type, material):
        """
        Returns (low, high) price per sq ft, or None if the material
        is not sold under this roofing type.
        """
        materials = MATERIAL_PRICING.get(normalize_choice(roofing_type), {})
        return materials.get(normalize_choice(material))

    def get_material_name(self, roofing_type, material):
        """Plain display name, e.g. 'TPO Membrane'. None if unknown."""
        labels = MATERIAL_LABELS.get(normalize_choice(roofing_type), {})
        return labels.get(normalize_choice(material))

    def get_label(self, roofing_type, material):
        """
        Name plus price range for the material dropdown:
        'Asphalt Shingles ($5-$10/sq ft)'. None if unknown.
        """
        price_range = self.get_price_range(roofing_type, material)
        if price_range is None:
            return None
        name = self.get_material_name(roofing_type, material)
        low, high = price_range
        return f"{name} ({format_price(low)}-{format_price(high)}/sq ft)"

    def list_materials(self, roofing_type) -> list:
        """
        Returns the material options for a roofing type, in catalog order:
        [{"code", "label", "low_price", "high_price"}, ...]
        Unknown roofing type → [].
        """
        key = normalize_choice(roofing_type)
        materials = MATERIAL_PRICING.get(key)
        if materials is None:
            logger.debug("No materials for roofing type %r", roofing_type)
            return []
        return [
            {
                "code": code,
                "label": self.get_label(key, code),
                "low_price": low,
                "high_price": high,
            }
            for code, (low, high) in materials.items()
        ]


_LOOKUP = MaterialLookup()


def list_materials(roofing_type) -> list:
    """Material options for the estimate form's material dropdown."""
    return _LOOKUP.list_materials(roofing_type)
