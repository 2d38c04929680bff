"""
Estimate API: the calculator form's two actions.

POST /api/estimate   "Get Estimate", cost range + breakdown for a roof
POST /api/roof-size  roof size helper, footprint/overhang/pitch → sq ft
"""

import logging

from fastapi import APIRouter

from .. import schemas
from ..calculators.cost_estimator import CostEstimator
from ..calculators.roof_size import RoofSizeCalculator
from ..display import build_chart, build_disclaimer, build_display, clamp_roof_size, format_sq_ft

logger = logging.getLogger(__name__)

router = APIRouter(tags=["estimates"])

# Stateless, shared across requests
estimator = CostEstimator()
size_calculator = RoofSizeCalculator()


@router.post("/estimate", response_model=schemas.EstimateResponse)
def create_estimate(request: schemas.EstimateRequest):
    """
    Price a roofing job.

    Missing size or material is not an error: the response comes back
    with applicable=False and a message for the form to show.
    """
    roof_size, clamped = clamp_roof_size(request.roof_size)
    if clamped:
        logger.info("Roof size %.0f over cap, clamped to %.0f", request.roof_size, roof_size)

    response = {
        "applicable": False,
        "roof_size": roof_size,
        "roof_size_clamped": clamped,
        "disclaimer": build_disclaimer(),
    }

    if not roof_size or not request.material:
        response["message"] = "Please fill in roof size and select a material"
        return response

    breakdown = estimator.estimate(
        request.roofing_type,
        roof_size,
        request.material,
        job_type=request.job_type,
        complexity=request.complexity,
        tearoff=request.tearoff,
        permits=request.permits,
    )
    if breakdown is None:
        response["message"] = (
            f"Material '{request.material}' is not available for "
            f"{request.roofing_type.value} roofing"
        )
        return response

    response.update({
        "applicable": True,
        "breakdown": breakdown,
        "display": build_display(breakdown),
        "chart": build_chart(breakdown),
    })
    return response


@router.post("/roof-size", response_model=schemas.RoofSizeResponse)
def estimate_roof_size(request: schemas.RoofSizeRequest):
    """Roof size helper. The result can be fed back in as roof_size."""
    if not request.footprint:
        return {
            "roof_size": 0,
            "display": format_sq_ft(0),
            "message": "Please enter the home footprint",
        }

    roof_size = size_calculator.calculate(request.footprint, request.overhang, request.pitch)
    return {
        "roof_size": roof_size,
        "display": format_sq_ft(roof_size),
    }
