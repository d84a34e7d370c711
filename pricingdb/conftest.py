import os

import pytest
from sqlalchemy.engine import Engine

os.environ["ENVIRONMENT"] = "testing"

from pricingdb.commons.config.app_config import AppConfig  # noqa: E402
from pricingdb.commons.config.utils import init_app_config  # noqa: E402
from pricingdb.data_setup import DataSetup, create_db_engine  # noqa: E402


@pytest.fixture
def app_config() -> AppConfig:
    return init_app_config()


#####################
# DB Fixtures
#####################
@pytest.fixture
def db_engine(app_config: AppConfig) -> Engine:
    engine = create_db_engine(app_config)
    yield engine
    engine.dispose()


@pytest.fixture
def data_setup(db_engine: Engine) -> DataSetup:
    return DataSetup(db_engine)
