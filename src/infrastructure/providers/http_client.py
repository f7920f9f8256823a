"""Outbound HTTP client (adapter).

Implements HttpClientProtocol with httpx. Any HTTP status is returned as a
Success; only transport failures (timeouts, connection errors) become a
ProviderError.

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
"""

from typing import Any

import httpx
import structlog

from src.core.constants import PROVIDER_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from src.core.result import Failure, Result, Success
from src.domain.enums import ProviderMethod, ProviderName
from src.domain.errors import ProviderError
from src.domain.protocols import HttpResponse

EXTERNAL_NAME = "httpx"


class HttpxClient:
    """httpx-backed GET client.

    Attributes:
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger.

    Example:
        >>> client = HttpxClient(timeout=10.0)
        >>> result = await client.get(
        ...     "https://www.googleapis.com/oauth2/v1/userinfo",
        ...     params={"alt": "json", "access_token": token},
        ... )
    """

    def __init__(self, *, timeout: float = PROVIDER_TIMEOUT_DEFAULT) -> None:
        self._timeout = timeout
        self._logger = structlog.get_logger("http_client")

    async def get(
        self, url: str, params: dict[str, str] | None = None
    ) -> Result[HttpResponse, ProviderError]:
        """Send a GET request.

        Args:
            url: Absolute URL.
            params: Optional query parameters.

        Returns:
            Success(HttpResponse) with the decoded JSON object (empty dict
            when the body is not a JSON object).
            Failure(ProviderError): On timeout or connection error.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            self._logger.warning("http_client_timeout", url=url, error=str(e))
            return Failure(error=self._transport_error(e))
        except httpx.RequestError as e:
            self._logger.warning("http_client_connection_error", url=url, error=str(e))
            return Failure(error=self._transport_error(e))

        return Success(
            value=HttpResponse(
                status_code=response.status_code,
                data=self._decode(response, url),
            )
        )

    def _decode(self, response: httpx.Response, url: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            self._logger.warning(
                "http_client_invalid_json",
                url=url,
                status_code=response.status_code,
                body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
            return {}
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _transport_error(error: httpx.HTTPError) -> ProviderError:
        return ProviderError(
            name=ProviderName.HTTP_CLIENT,
            method=ProviderMethod.GET,
            external_name=EXTERNAL_NAME,
            cause=error,
        )
