"""Identifier generation service (adapter).

Implements IdGenerationProtocol with time-ordered UUIDv7 identifiers, which
keep primary key indexes append-mostly.
"""

from uuid_extensions import uuid7

from src.core.result import Result, Success
from src.domain.errors import ProviderError
from src.domain.value_objects import Id


class IdService:
    """UUIDv7 identifier generation."""

    async def generate_id(self) -> Result[Id, ProviderError]:
        return Success(value=Id(str(uuid7())))
