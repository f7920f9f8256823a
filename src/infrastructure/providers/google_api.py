"""Google identity adapter.

Implements GoogleApiProtocol with the OAuth2 userinfo endpoint:

    GET {userinfo_url}?alt=json&access_token=...

A non-200 answer or a payload without id or email is a
LoadUserGoogleApiError. Transport failures are a ProviderError naming the
google api.
"""

from src.core.result import Failure, Result, Success
from src.domain.entities import SocialIdentity
from src.domain.enums import ProviderMethod, ProviderName
from src.domain.errors import LoadUserGoogleApiError, ProviderError
from src.domain.protocols import HttpClientProtocol, LoggerProtocol


class GoogleApiAdapter:
    """Google userinfo identity loader.

    Args:
        http_client: Outbound HTTP client.
        logger: Structured logger.
        userinfo_url: OAuth2 userinfo endpoint.
    """

    def __init__(
        self,
        *,
        http_client: HttpClientProtocol,
        logger: LoggerProtocol,
        userinfo_url: str,
    ) -> None:
        self._http_client = http_client
        self._logger = logger
        self._userinfo_url = userinfo_url

    async def load_user(
        self, access_token: str
    ) -> Result[SocialIdentity, ProviderError | LoadUserGoogleApiError]:
        """Resolve the Google identity owning an access token.

        Args:
            access_token: Client-side Google OAuth2 access token.

        Returns:
            Success(SocialIdentity) or a failure.
        """
        result = await self._http_client.get(
            self._userinfo_url, {"alt": "json", "access_token": access_token}
        )
        if isinstance(result, Failure):
            return Failure(
                error=ProviderError(
                    name=ProviderName.GOOGLE_API,
                    method=ProviderMethod.LOAD_USER,
                    external_name=result.error.external_name,
                    cause=result.error.cause,
                )
            )

        response = result.value
        data = response.data
        if not response.is_ok or not data.get("id") or not data.get("email"):
            self._logger.warning(
                "Google identity lookup failed",
                status_code=response.status_code,
            )
            return Failure(
                error=LoadUserGoogleApiError(
                    details={
                        "status_code": response.status_code,
                        "error": data.get("error"),
                    }
                )
            )

        return Success(
            value=SocialIdentity(
                id=str(data["id"]),
                email=str(data["email"]),
                name=str(data.get("name", "")),
            )
        )
