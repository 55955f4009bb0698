"""
Variable host stores.

The exporter reads collections and variables through the async HostStore
protocol, one awaited query at a time. SnapshotStore answers those queries
from a Figma local-variables payload held in memory; it is what the CLI
builds from a JSON export and what the REST client hands back after its
single fetch.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from .errors import HostQueryError
from .ir import COLOR_TYPE, Collection, Variable

logger = logging.getLogger(__name__)


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class HostStore(Protocol):
    """Async query interface over the design file's variables."""

    async def get_local_variable_collections(self) -> list[Collection]:
        """All local collections in file order."""
        ...

    async def get_local_variables(self, resolved_type: str = COLOR_TYPE) -> list[Variable]:
        """All local variables of one resolved type in file order."""
        ...

    async def get_variable_by_id(self, variable_id: str) -> Variable | None:
        """Any variable, local or library, or None when unknown."""
        ...

    async def get_variable_collection_by_id(self, collection_id: str) -> Collection | None:
        """Any collection, local or library, or None when unknown."""
        ...


# =============================================================================
# Snapshot store
# =============================================================================


def _entries(raw: Any, label: str) -> list[Mapping[str, Any]]:
    """Accept either an id-keyed object (REST shape) or a plain list."""
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        items = list(raw.values())
    elif isinstance(raw, list):
        items = raw
    else:
        raise HostQueryError(f"Snapshot {label} must be an object or a list")
    for item in items:
        if not isinstance(item, Mapping):
            raise HostQueryError(f"Snapshot {label} entries must be objects")
    return items


class SnapshotStore:
    """In-memory HostStore over already-fetched collections and variables."""

    def __init__(
        self,
        collections: Iterable[Collection] = (),
        variables: Iterable[Variable] = (),
    ) -> None:
        self._collections: dict[str, Collection] = {c.id: c for c in collections}
        self._variables: dict[str, Variable] = {v.id: v for v in variables}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SnapshotStore:
        """Build a store from a Figma ``variables/local`` response.

        The ``{"meta": {...}}`` envelope is optional.

        Raises:
            HostQueryError: If the payload is not a variables export.
        """
        if not isinstance(payload, Mapping):
            raise HostQueryError("Snapshot payload must be a JSON object")
        meta = payload.get("meta", payload)
        if not isinstance(meta, Mapping) or "variableCollections" not in meta:
            raise HostQueryError(
                "Snapshot payload has no variableCollections; "
                "expected a Figma variables/local response"
            )

        try:
            collections = [
                Collection.model_validate(entry)
                for entry in _entries(meta.get("variableCollections"), "variableCollections")
            ]
            variables = [
                Variable.model_validate(entry)
                for entry in _entries(meta.get("variables"), "variables")
            ]
        except ValidationError as e:
            raise HostQueryError(f"Malformed variables snapshot: {e}") from e

        logger.debug(
            "Loaded snapshot with %d collections and %d variables",
            len(collections),
            len(variables),
        )
        return cls(collections, variables)

    @classmethod
    def from_file(cls, path: Path) -> SnapshotStore:
        """Load a store from a JSON file holding a variables payload."""
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise HostQueryError(f"Unable to read snapshot {path}: {e}") from e
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            raise HostQueryError(f"Invalid JSON in {path}: {e}") from e
        return cls.from_payload(payload)

    @property
    def collections(self) -> list[Collection]:
        return list(self._collections.values())

    @property
    def variables(self) -> list[Variable]:
        return list(self._variables.values())

    async def get_local_variable_collections(self) -> list[Collection]:
        return [c for c in self._collections.values() if not c.remote]

    async def get_local_variables(self, resolved_type: str = COLOR_TYPE) -> list[Variable]:
        return [
            v
            for v in self._variables.values()
            if v.resolved_type == resolved_type and not v.remote
        ]

    async def get_variable_by_id(self, variable_id: str) -> Variable | None:
        return self._variables.get(variable_id)

    async def get_variable_collection_by_id(self, collection_id: str) -> Collection | None:
        return self._collections.get(collection_id)
