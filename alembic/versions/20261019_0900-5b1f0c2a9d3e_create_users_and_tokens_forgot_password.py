"""create_users_and_tokens_forgot_password

Revision ID: 5b1f0c2a9d3e
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5b1f0c2a9d3e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and tokens_forgot_password tables."""
    op.create_table(
        "users",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "email",
            sa.String(length=320),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password, or placeholder for social-only users",
        ),
        sa.Column(
            "is_email_validated",
            sa.Boolean(),
            nullable=False,
            comment="Email ownership verified (true for social sign-ups)",
        ),
        # Linked social accounts
        sa.Column(
            "facebook_account_id",
            sa.String(length=255),
            nullable=True,
            comment="Linked Facebook user id",
        ),
        sa.Column(
            "google_account_id",
            sa.String(length=255),
            nullable=True,
            comment="Linked Google user id",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("facebook_account_id"),
        sa.UniqueConstraint("google_account_id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "tokens_forgot_password",
        # Primary key and timestamp from BaseModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="Owning user",
        ),
        sa.Column(
            "value",
            sa.String(length=64),
            nullable=False,
            comment="Opaque token value",
        ),
        sa.Column(
            "expiration_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Absolute expiry of the token",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        op.f("ix_tokens_forgot_password_user_id"),
        "tokens_forgot_password",
        ["user_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop tokens_forgot_password and users tables."""
    op.drop_index(
        op.f("ix_tokens_forgot_password_user_id"),
        table_name="tokens_forgot_password",
    )
    op.drop_table("tokens_forgot_password")

    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
