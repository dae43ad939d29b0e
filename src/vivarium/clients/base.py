# Record API client - thin httpx wrapper shared by the resource clients.
# Created: 2026-09-16

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx

logger = logging.getLogger(__name__)

TokenGetter = Callable[[], str | None]


class ApiError(RuntimeError):
    """The record API answered with an error, or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class ApiClient:
    """Authenticated JSON access to the record API.

    A new ``httpx.AsyncClient`` is opened per request so the client can be
    shared freely between the shell's views and the dashboard providers.
    ``transport`` is forwarded to httpx (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        *,
        token_getter: TokenGetter | None = None,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._token_getter = token_getter
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self._token_getter() if self._token_getter else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None if empty)."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.request(
                    method, url, params=params, json=json, headers=self._headers()
                )
        except httpx.HTTPError as e:
            raise ApiError(f"{method} {path} failed: {e}") from e

        if resp.status_code >= 400:
            detail = _error_detail(resp)
            logger.debug("%s %s -> %d %s", method, path, resp.status_code, detail)
            raise ApiError(
                f"{method} {path} returned {resp.status_code}",
                status_code=resp.status_code,
                detail=detail,
            )

        if not resp.content:
            return None
        return resp.json()

    async def get(self, path: str, **params: Any) -> Any:
        return await self.request("GET", path, params=params or None)

    async def post(self, path: str, payload: Any = None) -> Any:
        return await self.request("POST", path, json=payload)

    async def put(self, path: str, payload: Any = None) -> Any:
        return await self.request("PUT", path, json=payload)

    async def patch(self, path: str, payload: Any = None, **params: Any) -> Any:
        return await self.request("PATCH", path, json=payload, params=params or None)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)


def _error_detail(resp: httpx.Response) -> Any:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or None
    if isinstance(body, dict):
        return body.get("message") or body.get("detail") or body.get("error") or body
    return body
