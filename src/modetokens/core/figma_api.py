"""
Figma REST API host.

Fetches a file's local variables with one ``GET /v1/files/:key/variables/local``
request and serves the export's queries from the resulting snapshot.

Usage::

    store = FigmaRestStore(FigmaVariablesClient(file_key, token))
    result = await export_variables(store)
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import HostQueryError
from .host import SnapshotStore
from .ir import COLOR_TYPE, Collection, Variable

logger = logging.getLogger(__name__)

FIGMA_API_BASE = "https://api.figma.com"
DEFAULT_TIMEOUT = 30.0


def _error_text(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(data, dict):
        for key in ("message", "err"):
            if isinstance(data.get(key), str):
                return str(data[key])
    return response.reason_phrase


class FigmaVariablesClient:
    """Thin async client for the Figma variables endpoint."""

    def __init__(
        self,
        file_key: str,
        token: str,
        *,
        api_base: str = FIGMA_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.file_key = file_key
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.api_base}/v1/files/{self.file_key}/variables/local"

    async def fetch_local_variables(self) -> dict[str, Any]:
        """
        Fetch the raw local-variables payload.

        Returns:
            Decoded JSON response body.

        Raises:
            HostQueryError: On transport errors, non-2xx responses or a body
                that is not a JSON object.
        """
        close_client = self._client is None
        client = self._client or httpx.AsyncClient(timeout=self.timeout)

        logger.info("Fetching local variables for Figma file %s", self.file_key)
        try:
            response = await client.get(self.url, headers={"X-Figma-Token": self.token})
        except httpx.HTTPError as e:
            raise HostQueryError(f"Figma API request failed: {e}") from e
        finally:
            if close_client:
                await client.aclose()

        if not response.is_success:
            raise HostQueryError(
                f"Figma API error: {_error_text(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise HostQueryError(f"Figma API returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise HostQueryError("Figma API returned an unexpected response body")
        if data.get("error"):
            raise HostQueryError(
                f"Figma API error: {data.get('message') or 'unknown error'}",
                status_code=data.get("status") if isinstance(data.get("status"), int) else None,
            )
        return data

    async def fetch_store(self) -> SnapshotStore:
        return SnapshotStore.from_payload(await self.fetch_local_variables())


class FigmaRestStore:
    """HostStore backed by the Figma REST API.

    The payload is fetched lazily on the first query, so a failing request
    surfaces inside the export run like any other host failure.
    """

    def __init__(self, client: FigmaVariablesClient) -> None:
        self._client = client
        self._snapshot: SnapshotStore | None = None

    async def _store(self) -> SnapshotStore:
        if self._snapshot is None:
            self._snapshot = await self._client.fetch_store()
        return self._snapshot

    async def get_local_variable_collections(self) -> list[Collection]:
        return await (await self._store()).get_local_variable_collections()

    async def get_local_variables(self, resolved_type: str = COLOR_TYPE) -> list[Variable]:
        return await (await self._store()).get_local_variables(resolved_type)

    async def get_variable_by_id(self, variable_id: str) -> Variable | None:
        return await (await self._store()).get_variable_by_id(variable_id)

    async def get_variable_collection_by_id(self, collection_id: str) -> Collection | None:
        return await (await self._store()).get_variable_collection_by_id(collection_id)
