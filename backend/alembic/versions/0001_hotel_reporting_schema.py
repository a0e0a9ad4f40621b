"""Hotel rooms, reservations and consumption.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


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
    sector_enum = sa.Enum("hospitality", "health", "beauty", name="sector")
    room_status_enum = sa.Enum(
        "available", "occupied", "maintenance", "cleaning", name="roomstatus"
    )
    reservation_status_enum = sa.Enum(
        "pending",
        "confirmed",
        "checked_in",
        "checked_out",
        "cancelled",
        name="reservationstatus",
    )

    op.create_table(
        "professionals",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("sector", sector_enum, nullable=False),
        sa.Column("user_id", sa.Uuid(as_uuid=True)),
        *_timestamps(),
    )

    op.create_table(
        "hotel_rooms",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "professional_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("professionals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("room_number", sa.String(length=32), nullable=False),
        sa.Column("room_type", sa.String(length=64), nullable=False),
        sa.Column("status", room_status_enum, nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        *_timestamps(),
    )
    op.create_index("ix_hotel_rooms_professional", "hotel_rooms", ["professional_id"])

    op.create_table(
        "hotel_reservations",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "room_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("hotel_rooms.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("guest_name", sa.String(length=255), nullable=False),
        sa.Column("guest_email", sa.String(length=320)),
        sa.Column("check_in_date", sa.Date(), nullable=False),
        sa.Column("check_out_date", sa.Date(), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2)),
        sa.Column("num_guests", sa.Integer()),
        sa.Column("status", reservation_status_enum, nullable=False),
        sa.Column("notes", sa.String(length=1024)),
        *_timestamps(),
    )
    op.create_index(
        "ix_hotel_reservations_check_in", "hotel_reservations", ["check_in_date"]
    )

    op.create_table(
        "hotel_consumption_items",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "professional_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("professionals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=120)),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        *_timestamps(),
    )

    op.create_table(
        "hotel_consumption",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "reservation_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("hotel_reservations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "item_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("hotel_consumption_items.id", ondelete="SET NULL"),
        ),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("unit_price", sa.Numeric(10, 2)),
        sa.Column("total_price", sa.Numeric(10, 2)),
        sa.Column("consumed_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_hotel_consumption_consumed_at", "hotel_consumption", ["consumed_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_hotel_consumption_consumed_at", table_name="hotel_consumption")
    op.drop_table("hotel_consumption")
    op.drop_table("hotel_consumption_items")
    op.drop_index("ix_hotel_reservations_check_in", table_name="hotel_reservations")
    op.drop_table("hotel_reservations")
    op.drop_index("ix_hotel_rooms_professional", table_name="hotel_rooms")
    op.drop_table("hotel_rooms")
    op.drop_table("professionals")
    bind = op.get_bind()
    for name in ("reservationstatus", "roomstatus", "sector"):
        sa.Enum(name=name).drop(bind, checkfirst=True)
