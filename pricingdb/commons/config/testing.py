import os

from pricingdb.commons.config.app_config import AppConfig


def create_app_config() -> AppConfig:
    """
    Create AppConfig for testing environment
    """
    return AppConfig(
        ENVIRONMENT="testing",
        DEBUG=True,
        # in-memory sqlite by default, whose only schema is "main"
        DB_URL=os.getenv("PRICING_DB_URL", "sqlite://"),
        DB_SCHEMA=os.getenv("PRICING_DB_SCHEMA", "main"),
    )
