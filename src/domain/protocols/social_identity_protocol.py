"""Social identity provider protocols.

Each provider turns a client-side access token into a verified identity.
Only the resulting identity matters to the use cases; the OAuth handshake is
the adapter's business.
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities import SocialIdentity
from src.domain.errors import (
    LoadUserFacebookApiError,
    LoadUserGoogleApiError,
    ProviderError,
)


class FacebookApiProtocol(Protocol):
    """Facebook identity loading."""

    async def load_user(
        self, access_token: str
    ) -> Result[SocialIdentity, ProviderError | LoadUserFacebookApiError]:
        """Resolve the Facebook identity owning `access_token`."""
        ...


class GoogleApiProtocol(Protocol):
    """Google identity loading."""

    async def load_user(
        self, access_token: str
    ) -> Result[SocialIdentity, ProviderError | LoadUserGoogleApiError]:
        """Resolve the Google identity owning `access_token`."""
        ...
