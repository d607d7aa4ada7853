"""HTTP transport to the payment API."""

from __future__ import annotations

from typing import Any

import httpx

from .environment import Environment
from .response import Response


class EngineError(Exception):
    """Raised when a request cannot be sent or its reply not received."""


class Engine:
    """Sends authenticated requests and wraps the replies in :class:`Response`."""

    def __init__(
        self,
        environment: Environment,
        merchant_key: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = environment.base_url()
        self.merchant_key = merchant_key
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def _headers(self, with_body: bool) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self.merchant_key}"}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def _send(self, method: str, path: str, body: Any = None, with_body: bool = False) -> Response:
        kwargs: dict[str, Any] = {"headers": self._headers(with_body)}
        if with_body:
            kwargs["json"] = body
        try:
            reply = await self._client.request(method, self.url_for(path), **kwargs)
        except httpx.HTTPError as exc:
            raise EngineError(f"{method} {path} failed: {exc}") from exc
        try:
            text: str | None = reply.text
        except (UnicodeDecodeError, httpx.HTTPError):
            text = None
        return Response(reply.status_code, text)

    async def get(self, path: str) -> Response:
        return await self._send("GET", path)

    async def post(self, path: str, body: Any) -> Response:
        return await self._send("POST", path, body, with_body=True)

    async def patch(self, path: str, body: Any) -> Response:
        return await self._send("PATCH", path, body, with_body=True)

    async def aclose(self) -> None:
        """Close the HTTP client if this engine created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Engine":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()