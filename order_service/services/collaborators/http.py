"""Shared plumbing for HTTP collaborator clients."""
from typing import Optional

import httpx


class HttpServiceClient:
    """Base class for clients of a remote JSON service."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        """Open a client bound to the service base URL."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        )
