"""create accounts, expenses and revenues

Revision ID: 5e2a9c71d3b0
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5e2a9c71d3b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

account_type = sa.Enum("WALLET", "CHECKING", "SAVINGS", name="account_type")
expense_category = sa.Enum(
    "FOOD", "EDUCATION", "LEISURE", "HOUSING", "CLOTHING", "HEALTH", "TRANSPORT", "OTHER",
    name="expense_category",
)
revenue_category = sa.Enum("SALARY", "GIFT", "PRIZE", "OTHER", name="revenue_category")


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("balance", sa.Numeric(18, 2), nullable=False),
        sa.Column("account_type", account_type, nullable=False),
        sa.Column("financial_institution", sa.String(length=255), nullable=False),
        sa.Column("version", sa.Integer(), server_default=sa.text("1"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("value", sa.Numeric(18, 2), nullable=False),
        sa.Column("occurred", sa.Date(), nullable=False),
        sa.Column("expected", sa.Date(), nullable=False),
        sa.Column("account", sa.Integer(), nullable=False),
        sa.Column("category", expense_category, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_expenses_occurred", "expenses", ["occurred"])
    op.create_index("ix_expenses_category", "expenses", ["category"])

    op.create_table(
        "revenues",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("value", sa.Numeric(18, 2), nullable=False),
        sa.Column("occurred", sa.Date(), nullable=False),
        sa.Column("expected", sa.Date(), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("account", sa.Integer(), nullable=False),
        sa.Column("category", revenue_category, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_revenues_occurred", "revenues", ["occurred"])
    op.create_index("ix_revenues_category", "revenues", ["category"])


def downgrade() -> None:
    op.drop_index("ix_revenues_category", table_name="revenues")
    op.drop_index("ix_revenues_occurred", table_name="revenues")
    op.drop_table("revenues")
    op.drop_index("ix_expenses_category", table_name="expenses")
    op.drop_index("ix_expenses_occurred", table_name="expenses")
    op.drop_table("expenses")
    op.drop_table("accounts")
    bind = op.get_bind()
    revenue_category.drop(bind, checkfirst=True)
    expense_category.drop(bind, checkfirst=True)
    account_type.drop(bind, checkfirst=True)
