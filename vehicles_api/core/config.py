from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Vehicles API"
    app_env: str = "development"

    # Database (SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vehicles_dev.db",
        alias="DATABASE_URL",
    )

    # Downstream services
    pricing_service_url: str = Field(
        default="http://localhost:8082", alias="PRICING_SERVICE_URL",
    )
    maps_service_url: str = Field(
        default="http://localhost:9191", alias="MAPS_SERVICE_URL",
    )
    http_timeout: float = Field(default=10.0, alias="HTTP_TIMEOUT")  # seconds

    # Currency attached to every stored price record
    price_currency: str = Field(default="USD", alias="PRICE_CURRENCY")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

settings = Settings()
