"""Initial schema: stores, customers, admin users, login-as-customer tables

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "stores",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("base_url", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        schema="public",
    )
    op.create_index("ix_stores_code", "stores", ["code"], unique=True, schema="public")

    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("firstname", sa.String(length=255), nullable=False),
        sa.Column("lastname", sa.String(length=255), nullable=False),
        sa.Column("store_id", sa.Integer(), nullable=False),
        sa.Column(
            "assistance_allowed", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["store_id"], ["public.stores.id"]),
        sa.PrimaryKeyConstraint("id"),
        schema="public",
    )
    op.create_index("ix_customers_email", "customers", ["email"], schema="public")
    op.create_index("ix_customers_store_id", "customers", ["store_id"], schema="public")

    op.create_table(
        "admin_users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=40), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_superuser", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("acl_resources", JSONB(), nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        schema="public",
    )
    op.create_index(
        "ix_admin_users_username", "admin_users", ["username"], unique=True, schema="public"
    )

    # Pending secrets; no unique constraint on admin_id (superseded by delete-then-insert)
    op.create_table(
        "login_as_customer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("admin_id", sa.Integer(), nullable=False),
        sa.Column("secret_hash", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["customer_id"], ["public.customers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["admin_id"], ["public.admin_users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        schema="public",
    )
    op.create_index(
        "ix_login_as_customer_customer_id", "login_as_customer", ["customer_id"], schema="public"
    )
    op.create_index(
        "ix_login_as_customer_admin_id", "login_as_customer", ["admin_id"], schema="public"
    )
    op.create_index(
        "ix_login_as_customer_secret_hash",
        "login_as_customer",
        ["secret_hash"],
        unique=True,
        schema="public",
    )

    op.create_table(
        "login_as_customer_admin_state",
        sa.Column("admin_id", sa.Integer(), nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["admin_id"], ["public.admin_users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["customer_id"], ["public.customers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("admin_id"),
        schema="public",
    )

    # Audit entries outlive the admin and customer rows they mention (no FKs)
    op.create_table(
        "login_as_customer_audit_log",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("admin_id", sa.Integer(), nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("store_id", sa.Integer(), nullable=True),
        sa.Column("action", sa.String(length=50), nullable=False),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        sa.Column("request_id", sa.String(length=36), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        schema="public",
    )
    op.create_index(
        "ix_login_as_customer_audit_admin_created",
        "login_as_customer_audit_log",
        ["admin_id", sa.text("created_at DESC")],
        schema="public",
    )
    op.create_index(
        "ix_login_as_customer_audit_customer_created",
        "login_as_customer_audit_log",
        ["customer_id", sa.text("created_at DESC")],
        schema="public",
    )


def downgrade() -> None:
    op.drop_table("login_as_customer_audit_log", schema="public")
    op.drop_table("login_as_customer_admin_state", schema="public")
    op.drop_table("login_as_customer", schema="public")
    op.drop_table("admin_users", schema="public")
    op.drop_table("customers", schema="public")
    op.drop_table("stores", schema="public")
