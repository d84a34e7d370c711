import importlib.util
from pathlib import Path
from types import ModuleType

import sqlalchemy
from alembic.migration import MigrationContext
from alembic.operations import Operations

from pricingdb.models.public import payment_method

MIGRATION_FILE = (
    Path(__file__).resolve().parents[2]
    / "migrations"
    / "public"
    / "versions"
    / "3d1f0a9c7b52_create_payment_method_table.py"
)


def _load_migration() -> ModuleType:
    spec = importlib.util.spec_from_file_location("create_payment_method", MIGRATION_FILE)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_create_payment_method_migration():
    migration = _load_migration()
    engine = sqlalchemy.create_engine("sqlite://")

    with engine.begin() as connection:
        with Operations.context(MigrationContext.configure(connection)):
            migration.upgrade()

        inspector = sqlalchemy.inspect(connection)
        columns = inspector.get_columns("payment_method")
        assert [c["name"] for c in columns] == [
            c.name for c in payment_method.columns
        ]
        assert not any(c["nullable"] for c in columns)
        assert inspector.get_pk_constraint("payment_method")[
            "constrained_columns"
        ] == ["id"]
        assert [i["name"] for i in inspector.get_indexes("payment_method")] == [
            "primary_key_d"
        ]

        with Operations.context(MigrationContext.configure(connection)):
            migration.downgrade()

        assert not sqlalchemy.inspect(connection).has_table("payment_method")

    engine.dispose()
