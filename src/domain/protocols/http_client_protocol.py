"""Outbound HTTP client protocol."""

from dataclasses import dataclass
from typing import Any, Protocol

from src.core.result import Result
from src.domain.errors import ProviderError


@dataclass(frozen=True, slots=True, kw_only=True)
class HttpResponse:
    """Decoded HTTP response.

    Attributes:
        status_code: HTTP status code.
        data: Decoded JSON body (empty dict when the body is not JSON).
    """

    status_code: int
    data: dict[str, Any]

    @property
    def is_ok(self) -> bool:
        return self.status_code == 200


class HttpClientProtocol(Protocol):
    """Outbound HTTP GET.

    Any HTTP status is a Success; only transport failures (timeouts, refused
    connections) are ProviderError.
    """

    async def get(
        self, url: str, params: dict[str, str] | None = None
    ) -> Result[HttpResponse, ProviderError]:
        ...
