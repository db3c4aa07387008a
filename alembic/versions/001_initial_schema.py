"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2024-03-01

Creates all initial tables for the commission engine:
- Hotels
- Commission agreements and tier rules
- Bookings
- Commission calculations
"""

from typing import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create all database tables."""

    # ==================== HOTELS ====================
    op.create_table(
        "hotels",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="STANDARD"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now()),
    )

    # ==================== AGREEMENTS ====================
    op.create_table(
        "commission_agreements",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("hotel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("hotels.id"), nullable=False, index=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("base_rate", sa.Numeric(7, 4)),
        sa.Column("flat_amount", sa.Numeric(12, 2)),
        sa.Column("preferred_bonus", sa.Numeric(7, 4)),
        sa.Column("valid_from", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("valid_to", sa.DateTime(timezone=True)),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "(type = 'PERCENTAGE' AND base_rate IS NOT NULL) OR (type = 'FLAT_FEE' AND flat_amount IS NOT NULL)",
            name="ck_commission_agreements_terms",
        ),
    )

    op.create_table(
        "tier_rules",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "commission_agreement_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("commission_agreements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("min_bookings", sa.Integer, nullable=False),
        sa.Column("bonus_rate", sa.Numeric(7, 4), nullable=False),
        sa.CheckConstraint("min_bookings >= 1", name="ck_tier_rules_min_bookings"),
    )

    # ==================== BOOKINGS ====================
    op.create_table(
        "bookings",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("hotel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("hotels.id"), nullable=False, index=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(20), server_default="PENDING", index=True),
        sa.Column("booking_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), index=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # ==================== CALCULATIONS ====================
    op.create_table(
        "commission_calculations",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("booking_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("bookings.id"), nullable=False, unique=True),
        sa.Column("hotel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("hotels.id"), nullable=False, index=True),
        sa.Column(
            "commission_agreement_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("commission_agreements.id"),
            nullable=False,
        ),
        sa.Column("base_amount", sa.Numeric(18, 6), nullable=False),
        sa.Column("base_rate", sa.Numeric(7, 4)),
        sa.Column("preferred_bonus", sa.Numeric(18, 6)),
        sa.Column("tier_bonus", sa.Numeric(18, 6)),
        sa.Column("total_amount", sa.Numeric(18, 6), nullable=False),
        sa.Column("calculation_details", postgresql.JSONB),
        sa.Column("calculated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, index=True),
    )


def downgrade() -> None:
    """Drop all database tables in reverse order."""
    op.drop_table("commission_calculations")
    op.drop_table("bookings")
    op.drop_table("tier_rules")
    op.drop_table("commission_agreements")
    op.drop_table("hotels")
