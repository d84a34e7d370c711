from dataclasses import dataclass
from typing import Optional

from typing_extensions import final


@final
@dataclass(frozen=True)
class AppConfig:
    """
    A config class contains all necessary config key-values to bootstrap the pricing database.
    For local/testing environments, there are corresponding factories of this AppConfig class:
    - local: local.py::create_app_config
    - testing: testing.py::create_app_config
    """

    ENVIRONMENT: str
    DEBUG: bool

    # SQLAlchemy database url
    DB_URL: str

    # Schema the "public" table definitions are mapped to when executing statements,
    # None maps them to the connection's default schema
    DB_SCHEMA: Optional[str] = "public"

    # Log all statements issued by the engine
    DB_ECHO: bool = False

    def __post_init__(self):
        if not self.DB_URL:
            raise ValueError(f"DB_URL should not be empty but found={self.DB_URL!r}")
