"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Account Linking:
    - A user is identified by email
    - At most one Facebook identity and one Google identity can be linked
    - Social sign-in links an identity by matching the verified email
"""

from dataclasses import dataclass

from src.domain.value_objects import Email, Id, PasswordHash


@dataclass(frozen=True)
class SocialAccount:
    """Linked social identity reference.

    Attributes:
        id: Account id at the social provider.
    """

    id: str


@dataclass
class User:
    """User domain entity.

    Created by sign-up or by a first social sign-in, mutated only to link a
    social account, never deleted.

    Attributes:
        id: Unique user identifier
        email: User email address
        password: Stored password hash (never plaintext)
        is_email_validated: True when a social provider vouched for the email
        facebook_account: Linked Facebook account, if any
        google_account: Linked Google account, if any

    Example:
        >>> user = User(
        ...     id=Id("0190f0c2-..."),
        ...     email=Email("user@example.com"),
        ...     password=PasswordHash("$2b$10$..."),
        ...     is_email_validated=False,
        ... )
        >>> user.has_google_account("1234")
        False
    """

    id: Id
    email: Email
    password: PasswordHash
    is_email_validated: bool = False
    facebook_account: SocialAccount | None = None
    google_account: SocialAccount | None = None

    def has_facebook_account(self, account_id: str) -> bool:
        """Check if the given Facebook account is already linked.

        Args:
            account_id: Facebook user id.

        Returns:
            bool: True if this exact account is linked.
        """
        return (
            self.facebook_account is not None
            and self.facebook_account.id == account_id
        )

    def has_google_account(self, account_id: str) -> bool:
        """Check if the given Google account is already linked.

        Args:
            account_id: Google user id.

        Returns:
            bool: True if this exact account is linked.
        """
        return (
            self.google_account is not None and self.google_account.id == account_id
        )
