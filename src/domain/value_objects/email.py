"""Email value object with validation.

Two types live here:
- Email: trusted address (e.g. reconstituted from storage). The plain
  constructor trims and lowercases but never validates.
- ValidatedEmail: an Email that went through Email.validate. Only the
  factory can build one; operations that need a trusted address take it.
"""

from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from src.core.constants import (
    EMAIL_DOMAIN_LABEL_MAX_LENGTH,
    EMAIL_DOMAIN_MAX_LENGTH,
    EMAIL_LOCAL_PART_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import InvalidEmailError

# Only Email.validate holds this, so ValidatedEmail cannot be forged.
_VALIDATED = object()


@dataclass(frozen=True)
class Email:
    """Email address value object.

    Attributes:
        value: The email address, trimmed and lowercased.

    Example:
        >>> Email(" User@Example.com").value
        'user@example.com'
        >>> result = Email.validate("not-an-email")
        >>> result.is_failure()
        True
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize to trimmed lowercase.

        Use object.__setattr__ because dataclass is frozen.
        """
        object.__setattr__(self, "value", self.value.strip().lower())

    @property
    def domain(self) -> str:
        """Return the part after '@'."""
        return self.value.partition("@")[2]

    @classmethod
    def validate(cls, raw: str) -> Result["ValidatedEmail", InvalidEmailError]:
        """Validate a raw address.

        Checks, after trimming:
            - Not empty, at most 320 characters
            - Accepted by email-validator (syntax only, ASCII, no DNS lookup)
            - Local part 1..64 characters, domain 1..255 characters
            - Each dot-separated domain label at most 63 characters

        Args:
            raw: Untrusted address string.

        Returns:
            Success(ValidatedEmail) or Failure(InvalidEmailError).
        """
        candidate = raw.strip()
        if not cls._is_valid(candidate):
            return Failure(error=InvalidEmailError(email=raw))
        return Success(value=ValidatedEmail(candidate, _token=_VALIDATED))

    @staticmethod
    def _is_valid(candidate: str) -> bool:
        if not candidate or len(candidate) > EMAIL_MAX_LENGTH:
            return False
        try:
            validate_email(
                candidate, check_deliverability=False, allow_smtputf8=False
            )
        except EmailNotValidError:
            return False

        local_part, _, domain = candidate.partition("@")
        if not local_part or len(local_part) > EMAIL_LOCAL_PART_MAX_LENGTH:
            return False
        if not domain or len(domain) > EMAIL_DOMAIN_MAX_LENGTH:
            return False

        return all(
            len(label) <= EMAIL_DOMAIN_LABEL_MAX_LENGTH for label in domain.split(".")
        )

    def __str__(self) -> str:
        """Return email address as string.

        Returns:
            str: The email address.
        """
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.value}')"


@dataclass(frozen=True, repr=False)
class ValidatedEmail(Email):
    """Email that passed Email.validate.

    Raises:
        TypeError: When constructed directly instead of through Email.validate.
    """

    _token: object = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _VALIDATED:
            raise TypeError("ValidatedEmail can only be created by Email.validate")
        super().__post_init__()
