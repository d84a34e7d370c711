import os
from typing import Callable, Mapping

from pricingdb.commons.config.app_config import AppConfig
from pricingdb.commons.config.local import create_app_config as LOCAL
from pricingdb.commons.config.testing import create_app_config as TESTING

_CONFIG_MAP: Mapping[str, Callable[..., AppConfig]] = {
    "local": LOCAL,
    "testing": TESTING,
}


def init_app_config() -> AppConfig:
    environment = os.getenv("ENVIRONMENT", None)
    assert environment is not None, (
        "ENVIRONMENT is not set through environment variable, "
        f"valid ENVIRONMENT includes {list(_CONFIG_MAP.keys())}"
    )

    config_key = environment.lower()
    assert (
        config_key in _CONFIG_MAP
    ), f"Cannot find AppConfig specified by environment={config_key}"

    return _CONFIG_MAP[config_key]()
