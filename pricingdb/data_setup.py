from typing import Iterable, List, Tuple

import sqlalchemy
from sqlalchemy.engine import Engine

from pricingdb.commons.config.app_config import AppConfig
from pricingdb.commons.context.logger import get_logger
from pricingdb.commons.database.error_handlers import translate_db_error
from pricingdb.core.payment_method.model import PAYMENT_METHOD_SEEDS, PaymentMethod
from pricingdb.models.public import payment_method, public

log = get_logger(__name__)


def create_db_engine(app_config: AppConfig) -> Engine:
    """
    Create the engine described by app_config. Statements against the "public" table definitions
    run in app_config.DB_SCHEMA.
    """
    engine = sqlalchemy.create_engine(app_config.DB_URL, echo=app_config.DB_ECHO)
    return engine.execution_options(
        schema_translate_map={public.schema: app_config.DB_SCHEMA}
    )


class DataSetup:
    """
    Used to create the tables and the reference payment methods.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self) -> List[PaymentMethod]:
        self.create_tables()
        return self.create_payment_methods(PAYMENT_METHOD_SEEDS)

    @translate_db_error
    def create_tables(self):
        # drop existing tables first
        with self.engine.begin() as connection:
            public.drop_all(connection)
            public.create_all(connection)
        log.info("created tables", tables=sorted(public.tables.keys()))

    @translate_db_error
    def create_payment_methods(
        self, seeds: Iterable[Tuple[str, float]]
    ) -> List[PaymentMethod]:
        values = [
            {
                payment_method.description.name: description,
                payment_method.charge.name: charge,
            }
            for description, charge in seeds
        ]
        if values:
            with self.engine.begin() as connection:
                connection.execute(payment_method.table.insert(), values)
        log.info("created payment methods", count=len(values))
        return self.list_payment_methods()

    @translate_db_error
    def list_payment_methods(self) -> List[PaymentMethod]:
        stmt = sqlalchemy.select(*payment_method.columns).order_by(payment_method.id)
        with self.engine.connect() as connection:
            rows = connection.execute(stmt).mappings().all()
        return [PaymentMethod.from_row(row) for row in rows]
