"""
Base API Client

Shared httpx plumbing for the P4W and R&L clients: one long-lived
AsyncClient per external system, reused across processing cycles.
"""
from typing import Dict, Optional
from abc import ABC
import httpx
import structlog

logger = structlog.get_logger()


class BaseApiClient(ABC):
    """
    Base class for outbound API clients.

    Handles:
    1. Base URL and API key header
    2. Timeout control
    3. HTTP client lifecycle

    Subclasses define `system_name` and `api_key_header`.
    """

    system_name: str = None
    api_key_header: str = None

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        if not self.system_name or not self.api_key_header:
            raise ValueError(
                f"{self.__class__.__name__} must define 'system_name' and 'api_key_header'"
            )

        self.base_url = base_url
        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers=self._build_default_headers(api_key),
            timeout=timeout,
            transport=transport,
        )

        logger.debug(f"Initialized {self.system_name} client", base_url=base_url)

    def _build_default_headers(self, api_key: str) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            self.api_key_header: api_key,
        }

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
        logger.debug(f"Closed {self.system_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
