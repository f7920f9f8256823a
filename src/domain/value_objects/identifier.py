"""Opaque identifier value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Id:
    """Opaque identifier (e.g. a UUID string). No validation, immutable.

    Attributes:
        value: Identifier string.
    """

    value: str

    def __str__(self) -> str:
        return self.value
