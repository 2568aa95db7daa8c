"""add_user_fields

Revision ID: 8b4e6d2c5a31
Revises: 3f1c2a9d7b10
Create Date: 2026-09-14 10:30:00.905114

"""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import BOOLEAN, TIMESTAMP, VARCHAR

# revision identifiers, used by Alembic.
revision = "8b4e6d2c5a31"
down_revision = "3f1c2a9d7b10"
branch_labels = None
depends_on = None


def upgrade():
    op.add_column(
        "users",
        sa.Column(
            "is_email_verified",
            BOOLEAN,
            nullable=False,
            server_default=sa.text("false"),
        ),
    )
    op.add_column(
        "users",
        sa.Column(
            "is_active",
            BOOLEAN,
            nullable=False,
            server_default=sa.text("true"),
        ),
    )
    op.add_column("users", sa.Column("otp", VARCHAR(6), nullable=True))
    op.add_column(
        "users",
        sa.Column("otp_expires_at", TIMESTAMP(timezone=True), nullable=True),
    )
    op.add_column(
        "users",
        sa.Column(
            "role",
            VARCHAR(20),
            nullable=False,
            server_default="user",
        ),
    )
    op.create_check_constraint(
        "check_users_role",
        "users",
        "role IN ('admin', 'user')",
    )
    op.create_check_constraint(
        "check_users_otp_length",
        "users",
        "otp IS NULL OR LENGTH(otp) = 6",
    )
    op.create_index("idx_users_role", "users", ["role"], unique=False)
    op.create_index("idx_users_is_active", "users", ["is_active"], unique=False)


def downgrade():
    op.drop_index("idx_users_is_active", table_name="users")
    op.drop_index("idx_users_role", table_name="users")
    op.drop_constraint("check_users_otp_length", "users", type_="check")
    op.drop_constraint("check_users_role", "users", type_="check")
    op.drop_column("users", "role")
    op.drop_column("users", "otp_expires_at")
    op.drop_column("users", "otp")
    op.drop_column("users", "is_active")
    op.drop_column("users", "is_email_verified")
