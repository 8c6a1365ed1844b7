from __future__ import annotations

import asyncio
from decimal import InvalidOperation
from typing import Any, Callable, Optional, TypeVar

import aiohttp

from costtree.logging import get_logger
from costtree.models import Expense, Unit

T = TypeVar("T")


class ApiError(RuntimeError):
    def __init__(self, resource: str, message: str, status: Optional[int] = None) -> None:
        super().__init__(f"{resource}: {message}")
        self.resource = resource
        self.status = status


class MockApiClient:
    def __init__(self, session: aiohttp.ClientSession, base_url: str, timeout: float = 10.0) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._log = get_logger(__name__)

    async def fetch_json(self, resource: str) -> list[dict[str, Any]]:
        url = f"{self._base_url}/{resource}"
        self._log.info("api.fetch", resource=resource, url=url)
        try:
            async with self._session.get(url, timeout=self._timeout) as response:
                if response.status != 200:
                    self._log.warning("api.error", resource=resource, status=response.status)
                    raise ApiError(resource, f"unexpected status {response.status}", status=response.status)
                # mockapi does not always send application/json
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            self._log.warning("api.error", resource=resource, error=str(exc))
            raise ApiError(resource, f"request failed: {exc}") from exc
        except ValueError as exc:
            self._log.warning("api.error", resource=resource, error="invalid json")
            raise ApiError(resource, "response is not valid JSON") from exc

        if not isinstance(payload, list):
            raise ApiError(resource, f"expected a JSON list, got {type(payload).__name__}")
        return payload

    async def fetch_units(self, resource: str = "companies") -> list[Unit]:
        rows = await self.fetch_json(resource)
        return self._hydrate(resource, rows, Unit.from_payload)

    async def fetch_expenses(self, resource: str = "travels") -> list[Expense]:
        rows = await self.fetch_json(resource)
        return self._hydrate(resource, rows, Expense.from_payload)

    def _hydrate(self, resource: str, rows: list[dict[str, Any]], factory: Callable[[Any], T]) -> list[T]:
        try:
            return [factory(row) for row in rows]
        except KeyError as exc:
            self._log.warning("api.error", resource=resource, error="missing key", key=str(exc))
            raise ApiError(resource, f"record is missing key {exc}") from exc
        except (TypeError, InvalidOperation) as exc:
            self._log.warning("api.error", resource=resource, error="malformed record")
            raise ApiError(resource, f"malformed record: {exc}") from exc
