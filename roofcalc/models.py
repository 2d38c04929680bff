import enum


# --- Enums for form choices ---
# str-based so plain strings from the form compare equal to members.

class RoofingType(str, enum.Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class JobType(str, enum.Enum):
    NEW = "new"
    REPLACEMENT = "replacement"
    REPAIR = "repair"


class Complexity(str, enum.Enum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class Pitch(str, enum.Enum):
    FLAT = "flat"
    LOW = "low"
    MEDIUM = "medium"
    STEEP = "steep"


def normalize_choice(value) -> str:
    """
    Returns the plain lowercase string for a form choice.
    Accepts enum members, raw strings, or None (→ "").
    """
    if isinstance(value, enum.Enum):
        value = value.value
    if value is None:
        return ""
    return str(value).strip().lower()
