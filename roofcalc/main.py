from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import materials, estimates

logger = logging.getLogger("roofcalc")

app = FastAPI(
    title=settings.APP_NAME,
    description=(
        f"Instant roofing cost estimates for {settings.PRICING_REGION} "
        f"({settings.PRICING_YEAR} pricing)"
    ),
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(materials.router, prefix="/api")
app.include_router(estimates.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "roofing-cost-calculator"}


@app.on_event("startup")
def log_pricing_dataset():
    """Record which pricing dataset this process is serving."""
    logger.info(
        "Serving %s pricing for %s (max roof size %.0f sq ft)",
        settings.PRICING_YEAR, settings.PRICING_REGION, settings.MAX_ROOF_SIZE,
    )
