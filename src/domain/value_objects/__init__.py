"""Domain value objects with validation.

Immutable value objects that enforce format constraints. Validation happens
only through the validate() factories, which return a Result.
"""

from src.domain.value_objects.email import Email, ValidatedEmail
from src.domain.value_objects.identifier import Id
from src.domain.value_objects.password import Password, PasswordHash, ValidatedPassword

__all__ = [
    "Email",
    "Id",
    "Password",
    "PasswordHash",
    "ValidatedEmail",
    "ValidatedPassword",
]
