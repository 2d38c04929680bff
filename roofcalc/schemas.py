from pydantic import BaseModel, Field
from typing import Optional, List
from .config import settings
from .models import RoofingType, JobType, Complexity, Pitch

# Longest eave overhang the helper accepts, in inches
MAX_OVERHANG_IN = 120.0


class MaterialOption(BaseModel):
    code: str
    label: str
    low_price: float
    high_price: float


# Defaults mirror a freshly reset estimate form
class EstimateRequest(BaseModel):
    roofing_type: RoofingType = RoofingType.RESIDENTIAL
    roof_size: float = Field(0.0, ge=0, allow_inf_nan=False)
    material: str = ""
    job_type: JobType = JobType.NEW
    complexity: Complexity = Complexity.SIMPLE
    tearoff: bool = False
    permits: bool = False


class CostBreakdown(BaseModel):
    materials: float
    labor: float
    addons: float
    total_low: float
    total_mid: float
    total_high: float


class EstimateDisplay(BaseModel):
    materials: str
    labor: str
    addons: str
    range: str
    estimate: str


class ChartSlice(BaseModel):
    name: str
    value: float


class EstimateResponse(BaseModel):
    applicable: bool
    roof_size: float
    roof_size_clamped: bool = False
    breakdown: Optional[CostBreakdown] = None
    display: Optional[EstimateDisplay] = None
    chart: List[ChartSlice] = []
    message: Optional[str] = None
    disclaimer: str


class RoofSizeRequest(BaseModel):
    footprint: float = Field(0.0, ge=0, le=settings.MAX_ROOF_SIZE, allow_inf_nan=False)
    overhang: float = Field(0.0, ge=0, le=MAX_OVERHANG_IN, allow_inf_nan=False)
    pitch: Pitch = Pitch.FLAT


class RoofSizeResponse(BaseModel):
    roof_size: int
    display: str
    message: Optional[str] = None
