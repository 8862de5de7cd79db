"""Application configuration."""
from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str

    # Pricing
    tax_rate: Decimal = Decimal("0.16")

    # Remote services
    customer_service_url: str = "http://localhost:8081"
    payment_service_url: str = "http://localhost:8082"
    inventory_service_url: str = "http://localhost:8083"
    http_timeout_seconds: float = 5.0

    # Messaging
    redis_url: str = "redis://localhost:6379/0"
    shipment_queue: str = "INBOUND_SHIPMENT_ORDER"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
