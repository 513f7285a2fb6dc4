"""initial schema

Revision ID: 5c1e2a7d9b30
Revises:
Create Date: 2026-10-18 09:12:41.207315

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e2a7d9b30"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create the brands, products, offers, customers and orders tables."""

    # -- brands --
    op.create_table(
        "brands",
        sa.Column("brand_id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        *_timestamps(),
    )

    # -- products --
    op.create_table(
        "products",
        sa.Column("product_id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False),
        sa.Column(
            "term",
            sa.Enum("monthly", "annually", name="term", native_enum=False, length=50),
            nullable=False,
        ),
        sa.Column(
            "brand_id",
            sa.Integer,
            sa.ForeignKey("brands.brand_id"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_products_brand_id", "products", ["brand_id"])

    # -- offers --
    op.create_table(
        "offers",
        sa.Column("offer_id", sa.Integer, primary_key=True),
        sa.Column(
            "product_id",
            sa.Integer,
            sa.ForeignKey("products.product_id"),
            nullable=False,
        ),
        sa.Column("description", sa.String(100), nullable=True),
        sa.Column("price", sa.Numeric(6, 2), nullable=False),
        sa.Column("number_of_terms", sa.Integer, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_offers_product_id", "offers", ["product_id"])

    # -- customers --
    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Integer, primary_key=True),
        sa.Column("email_address", sa.String(100), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_customers_email_address", "customers", ["email_address"])

    # -- orders --
    op.create_table(
        "orders",
        sa.Column("order_id", sa.Integer, primary_key=True),
        sa.Column(
            "offer_id",
            sa.Integer,
            sa.ForeignKey("offers.offer_id"),
            nullable=False,
        ),
        sa.Column(
            "customer_id",
            sa.Integer,
            sa.ForeignKey("customers.customer_id"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
        sa.Column("cancelled", sa.Boolean, nullable=False),
        sa.Column("paid", sa.Boolean, nullable=False),
        sa.Column("reason", sa.String(50), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_orders_offer_id", "orders", ["offer_id"])
    op.create_index("ix_orders_customer_id", "orders", ["customer_id"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("orders")
    op.drop_table("customers")
    op.drop_table("offers")
    op.drop_table("products")
    op.drop_table("brands")
