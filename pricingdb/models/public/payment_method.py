from dataclasses import dataclass
from typing import List

from sqlalchemy import (
    BigInteger,
    Column,
    Double,
    Identity,
    Index,
    PrimaryKeyConstraint,
    String,
)
from sqlalchemy.dialects import sqlite
from sqlalchemy.sql.schema import SchemaItem
from typing_extensions import final

from pricingdb.commons.database.model import TableDefinition
from pricingdb.commons.utils.dataclass_extensions import column_field, no_init_field


@final
@dataclass(frozen=True, eq=False)
class PaymentMethodTable(TableDefinition):
    name: str = no_init_field("payment_method")
    id: Column = column_field(
        lambda: Column(
            "id",
            # sqlite only auto increments an INTEGER primary key
            BigInteger().with_variant(sqlite.INTEGER(), "sqlite"),
            Identity(),
            nullable=False,
        )
    )
    description: Column = column_field(
        lambda: Column("description", String(255), nullable=False)
    )
    charge: Column = column_field(
        lambda: Column("charge", Double(), nullable=False)
    )

    def additional_schema_args(self) -> List[SchemaItem]:
        return [
            PrimaryKeyConstraint("id", name="constraint_d"),
            Index("primary_key_d", "id", unique=True),
        ]
