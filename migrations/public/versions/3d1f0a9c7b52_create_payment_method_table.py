"""create payment_method table

Revision ID: 3d1f0a9c7b52
Revises:
Create Date: 2018-08-20 10:14:05.118243

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3d1f0a9c7b52"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "payment_method",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            sa.Identity(),
            nullable=False,
        ),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("charge", sa.Double(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="constraint_d"),
    )
    op.create_index("primary_key_d", "payment_method", ["id"], unique=True)


def downgrade():
    op.drop_index("primary_key_d", table_name="payment_method")
    op.drop_table("payment_method")
