"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Real Estate Listings"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # MongoDB
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "realestate"
    OWNERS_COLLECTION: str = "owners"
    PROPERTIES_COLLECTION: str = "properties"
    PROPERTY_IMAGES_COLLECTION: str = "propertyImages"
    PROPERTY_TRACES_COLLECTION: str = "propertyTraces"

    # Listing pagination
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100

    CORS_ORIGINS: list[str] = ["*"]

    # Fixture endpoints under /api/seed, disable outside demo deployments
    ENABLE_SEED_ENDPOINTS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    # Base URL used by realestate.client when none is passed explicitly
    API_BASE_URL: str = "http://localhost:8000/api"


settings = Settings()
