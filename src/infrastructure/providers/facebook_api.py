"""Facebook identity adapter.

Implements FacebookApiProtocol against the Graph API.

Flow:
1. Get an app access token (client credentials grant)
2. Inspect the user token with debug_token to learn the user id
3. Read the user's id and email

A non-200 answer or a missing field at any step is a LoadUserFacebookApiError.
Transport failures are a ProviderError naming the facebook api.
"""

from typing import Any

from src.core.result import Failure, Result, Success
from src.domain.entities import SocialIdentity
from src.domain.enums import ProviderMethod, ProviderName
from src.domain.errors import LoadUserFacebookApiError, ProviderError
from src.domain.protocols import HttpClientProtocol, HttpResponse, LoggerProtocol

type FacebookLoadError = ProviderError | LoadUserFacebookApiError


class FacebookApiAdapter:
    """Facebook Graph API identity loader.

    Args:
        http_client: Outbound HTTP client.
        logger: Structured logger.
        base_url: Graph API base URL (e.g. "https://graph.facebook.com").
        client_id: Facebook app id.
        client_secret: Facebook app secret.
    """

    def __init__(
        self,
        *,
        http_client: HttpClientProtocol,
        logger: LoggerProtocol,
        base_url: str,
        client_id: str,
        client_secret: str,
    ) -> None:
        self._http_client = http_client
        self._logger = logger
        self._base_url = base_url.rstrip("/")
        self._client_id = client_id
        self._client_secret = client_secret

    async def load_user(
        self, access_token: str
    ) -> Result[SocialIdentity, FacebookLoadError]:
        """Resolve the Facebook identity owning a user access token.

        Args:
            access_token: Client-side Facebook user access token.

        Returns:
            Success(SocialIdentity) with an empty name, or a failure.
        """
        app_token_result = await self._call(
            "/oauth/access_token",
            {
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "grant_type": "client_credentials",
            },
            required=("access_token",),
            step="app_token",
        )
        if isinstance(app_token_result, Failure):
            return app_token_result
        app_token = str(app_token_result.value["access_token"])

        debug_result = await self._call(
            "/debug_token",
            {"access_token": app_token, "input_token": access_token},
            required=("data",),
            step="debug_token",
        )
        if isinstance(debug_result, Failure):
            return debug_result
        token_data = debug_result.value["data"]
        user_id = token_data.get("user_id") if isinstance(token_data, dict) else None
        if not user_id:
            self._logger.warning("Facebook token has no user", step="debug_token")
            return Failure(error=LoadUserFacebookApiError(details={"step": "debug_token"}))

        user_result = await self._call(
            f"/{user_id}",
            {"fields": "id,email", "access_token": access_token},
            required=("id", "email"),
            step="user",
        )
        if isinstance(user_result, Failure):
            return user_result
        data = user_result.value

        return Success(
            value=SocialIdentity(id=str(data["id"]), email=str(data["email"]), name="")
        )

    async def _call(
        self,
        path: str,
        params: dict[str, str],
        *,
        required: tuple[str, ...],
        step: str,
    ) -> Result[dict[str, Any], FacebookLoadError]:
        result = await self._http_client.get(f"{self._base_url}{path}", params)
        if isinstance(result, Failure):
            return Failure(
                error=ProviderError(
                    name=ProviderName.FACEBOOK_API,
                    method=ProviderMethod.LOAD_USER,
                    external_name=result.error.external_name,
                    cause=result.error.cause,
                )
            )
        return self._check(result.value, required=required, step=step)

    def _check(
        self, response: HttpResponse, *, required: tuple[str, ...], step: str
    ) -> Result[dict[str, Any], LoadUserFacebookApiError]:
        missing = [key for key in required if not response.data.get(key)]
        if response.is_ok and not missing:
            return Success(value=response.data)

        self._logger.warning(
            "Facebook identity lookup failed",
            step=step,
            status_code=response.status_code,
            missing_fields=missing,
        )
        return Failure(
            error=LoadUserFacebookApiError(
                details={
                    "step": step,
                    "status_code": response.status_code,
                    "error": response.data.get("error"),
                }
            )
        )
