"""External identity providers and outbound HTTP."""

from src.infrastructure.providers.facebook_api import FacebookApiAdapter
from src.infrastructure.providers.google_api import GoogleApiAdapter
from src.infrastructure.providers.http_client import HttpxClient

__all__ = ["FacebookApiAdapter", "GoogleApiAdapter", "HttpxClient"]
