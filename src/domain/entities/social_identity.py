"""Verified identity returned by a social provider."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class SocialIdentity:
    """Identity vouched for by Facebook or Google.

    Attributes:
        id: Account id at the provider.
        email: Email the provider verified.
        name: Display name (empty when the provider does not return one).
    """

    id: str
    email: str
    name: str = ""
