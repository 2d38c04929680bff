from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Roofing Cost Calculator"
    COMPANY_NAME: str = "Torrance Roofing Masters"
    COMPANY_CONTACT_URL: str = "https://torranceroofingmasters.com/contact/"

    # Pricing dataset: prices in material_lookup.py are tied to this region/year
    PRICING_REGION: str = "Torrance, CA"
    PRICING_YEAR: int = 2025

    # Largest roof the estimate form accepts; bigger values are clamped, not rejected
    MAX_ROOF_SIZE: float = 50000.0

    class Config:
        env_file = ".env"


settings = Settings()
