import os

from pricingdb.commons.config.app_config import AppConfig


def create_app_config() -> AppConfig:
    """
    Create AppConfig for local environment
    """
    # allow db endpoint (host:port) be overridden in docker compose
    db_endpoint: str = os.getenv("PRICING_DB_ENDPOINT", "localhost:5432")

    return AppConfig(
        ENVIRONMENT="local",
        DEBUG=True,
        DB_URL=os.getenv(
            "PRICING_DB_URL", f"postgresql://pricing_user@{db_endpoint}/pricingdb"
        ),
        DB_SCHEMA="public",
        DB_ECHO=True,
    )
