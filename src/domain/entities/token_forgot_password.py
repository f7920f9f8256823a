"""Forgot-password token entity.

A short opaque token issued to a user who asked to reset their password.
Tokens have a fixed validity window counted from issuance. Consuming a token
is not handled here.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from src.core.constants import FORGOT_PASSWORD_TOKEN_TTL_HOURS_DEFAULT
from src.domain.value_objects import Id


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenForgotPassword:
    """Forgot-password token.

    Attributes:
        value: Opaque token string sent to the user.
        expiration_date: Absolute expiry (UTC).
        user_id: Owning user.
    """

    value: str
    expiration_date: datetime
    user_id: Id

    @classmethod
    def issue(
        cls,
        *,
        value: str,
        user_id: Id,
        ttl: timedelta = timedelta(hours=FORGOT_PASSWORD_TOKEN_TTL_HOURS_DEFAULT),
        now: datetime | None = None,
    ) -> "TokenForgotPassword":
        """Create a token expiring `ttl` after `now`.

        Args:
            value: Generated token string.
            user_id: Owning user.
            ttl: Validity window (2 hours unless configured otherwise).
            now: Issuance time, defaults to the current UTC time.

        Returns:
            TokenForgotPassword: New token.
        """
        issued_at = now or datetime.now(UTC)
        return cls(value=value, expiration_date=issued_at + ttl, user_id=user_id)

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expiration_date
