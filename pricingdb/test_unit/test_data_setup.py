import pytest
import sqlalchemy
from sqlalchemy.engine import Engine

from pricingdb.commons.config.app_config import AppConfig
from pricingdb.commons.core.errors import DatabaseErrorCode, DBOperationError
from pricingdb.core.payment_method.model import PaymentMethod
from pricingdb.data_setup import DataSetup, create_db_engine
from pricingdb.models.public import payment_method


def test_execute_creates_reference_payment_methods(data_setup: DataSetup):
    payment_methods = data_setup.execute()

    assert payment_methods == [
        PaymentMethod(id=1, description="Cash", charge=0.0),
        PaymentMethod(id=2, description="Cheque", charge=2.5),
        PaymentMethod(id=3, description="Card", charge=1.5),
    ]


def test_execute_recreates_tables(data_setup: DataSetup):
    data_setup.execute()
    payment_methods = data_setup.execute()

    assert [pm.id for pm in payment_methods] == [1, 2, 3]


def test_create_payment_methods_generates_ids(data_setup: DataSetup):
    data_setup.create_tables()

    assert data_setup.create_payment_methods([]) == []
    created = data_setup.create_payment_methods([("Voucher", 3.0), ("Bank", 0.5)])

    assert [(pm.id, pm.description, pm.charge) for pm in created] == [
        (1, "Voucher", 3.0),
        (2, "Bank", 0.5),
    ]


def test_self_join_on_seeded_data(data_setup: DataSetup, db_engine: Engine):
    data_setup.execute()
    cheaper = payment_method.as_("cheaper")
    dearer = payment_method.as_("dearer")
    stmt = (
        sqlalchemy.select(cheaper.description, dearer.description)
        .select_from(cheaper.table.join(dearer.table, cheaper.charge < dearer.charge))
        .order_by(cheaper.charge, dearer.charge)
    )

    with db_engine.connect() as connection:
        rows = connection.execute(stmt).all()

    assert [tuple(row) for row in rows] == [
        ("Cash", "Card"),
        ("Cash", "Cheque"),
        ("Card", "Cheque"),
    ]


def test_missing_table_translated(data_setup: DataSetup):
    with pytest.raises(DBOperationError) as e:
        data_setup.list_payment_methods()

    assert e.value.error_code == DatabaseErrorCode.DB_OPERATION_ERROR
    assert e.value.retryable
    assert "payment_method" in e.value.error_message


def test_create_db_engine_maps_public_schema(app_config: AppConfig):
    engine = create_db_engine(app_config)
    try:
        assert engine.get_execution_options()["schema_translate_map"] == {
            "public": "main"
        }
    finally:
        engine.dispose()
