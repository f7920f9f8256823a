"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed). Users
      created through social sign-in hold their own id instead, which no
      bcrypt comparison matches.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hash, or placeholder for social-only users
        is_email_validated: True when a social provider vouched for the email
        facebook_account_id: Linked Facebook user id (unique, nullable)
        google_account_id: Linked Google user id (unique, nullable)

    Constraints:
        - email unique: final guard against concurrent duplicate sign-ups
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password, or placeholder for social-only users",
    )

    is_email_validated: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Email ownership verified (true for social sign-ups)",
    )

    facebook_account_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        unique=True,
        default=None,
        comment="Linked Facebook user id",
    )

    google_account_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        unique=True,
        default=None,
        comment="Linked Google user id",
    )

    def __repr__(self) -> str:
        return (
            f"<UserModel("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"is_email_validated={self.is_email_validated}"
            f")>"
        )
