"""Password value objects.

Plaintext and hashed passwords are distinct types so that a hash can never be
compared or stored where plaintext is expected, and the other way around.

- Password.validate: the only way to obtain a ValidatedPassword.
- ValidatedPassword: trimmed plaintext that satisfies the password rules.
- PasswordHash: the stored hash produced by the hashing provider.
"""

from dataclasses import dataclass, field

from src.core.constants import PASSWORD_MAX_LENGTH, PASSWORD_MIN_LENGTH
from src.core.result import Failure, Result, Success
from src.domain.enums import InvalidPasswordMotive
from src.domain.errors import InvalidPasswordError

# Only Password.validate holds this, so ValidatedPassword cannot be forged.
_VALIDATED = object()


@dataclass(frozen=True)
class Password:
    """Plaintext password.

    Password Requirements (checked in this order, after trimming):
        - No whitespace inside
        - At most 30 characters
        - Not blank
        - At least 8 characters

    Attributes:
        value: The plaintext password.

    Example:
        >>> Password.validate("password1").is_success()
        True
        >>> Password.validate("short").error.motive
        <InvalidPasswordMotive.IS_LESS_THAN_8_CHARACTERS: 'is less than 8 characters'>
    """

    value: str

    @classmethod
    def validate(
        cls, raw: str
    ) -> Result["ValidatedPassword", InvalidPasswordError]:
        """Validate a plaintext password.

        Args:
            raw: Untrusted plaintext.

        Returns:
            Success(ValidatedPassword) holding the trimmed value, or
            Failure(InvalidPasswordError) naming the broken rule.
        """
        password = raw.strip()

        motive: InvalidPasswordMotive | None = None
        if any(char.isspace() for char in password):
            motive = InvalidPasswordMotive.HAS_SPACE
        elif len(password) > PASSWORD_MAX_LENGTH:
            motive = InvalidPasswordMotive.IS_MORE_THAN_30_CHARACTERS
        elif not password:
            motive = InvalidPasswordMotive.IS_BLANK
        elif len(password) < PASSWORD_MIN_LENGTH:
            motive = InvalidPasswordMotive.IS_LESS_THAN_8_CHARACTERS

        if motive is not None:
            return Failure(error=InvalidPasswordError(motive=motive))
        return Success(value=ValidatedPassword(password, _token=_VALIDATED))

    def __str__(self) -> str:
        """Return masked password.

        Never return plaintext password in logs or output.
        """
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{'*' * len(self.value)}')"


@dataclass(frozen=True, repr=False)
class ValidatedPassword(Password):
    """Plaintext password that passed Password.validate.

    Raises:
        TypeError: When constructed directly instead of through Password.validate.
    """

    _token: object = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _VALIDATED:
            raise TypeError(
                "ValidatedPassword can only be created by Password.validate"
            )


@dataclass(frozen=True)
class PasswordHash:
    """Hashed password as stored by the users repository.

    Attributes:
        value: Hash string (e.g. bcrypt '$2b$10$...').
    """

    value: str

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "PasswordHash('***')"
