"""Transaction pool baseline

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "transaction_pool",
        sa.Column("entry_id", sa.Text(), primary_key=True),
        sa.Column("source_currency", sa.String(length=3), nullable=False),
        sa.Column("destination_currency", sa.String(length=3), nullable=False),
        sa.Column("buy_price", sa.Numeric(), nullable=False),
        sa.Column("sell_price", sa.Numeric(), nullable=False),
        sa.Column("cap_amount", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at_utc",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.CheckConstraint("buy_price > 0", name="ck_transaction_pool_buy_price_positive"),
        sa.CheckConstraint("sell_price > 0", name="ck_transaction_pool_sell_price_positive"),
        sa.CheckConstraint("cap_amount > 0", name="ck_transaction_pool_cap_amount_positive"),
    )
    op.create_index(
        "ix_transaction_pool_currency_pair",
        "transaction_pool",
        ["source_currency", "destination_currency"],
    )
    op.create_index("ix_transaction_pool_created_at_utc", "transaction_pool", ["created_at_utc"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_transaction_pool_created_at_utc", table_name="transaction_pool")
    op.drop_index("ix_transaction_pool_currency_pair", table_name="transaction_pool")
    op.drop_table("transaction_pool")
