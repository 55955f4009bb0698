"""
Plugin message protocol.

A presentation layer drives exports with two inbound messages:

- ``{"type": "start-export"}``: run one export
- ``{"type": "close"}``: shut the host down

Every run posts exactly one outbound message, either ``export-complete``
with the CSS or ``error`` with the failure text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .config import ExportConfig
from .events import EventSink
from .exporter import export_stylesheet
from .host import HostStore

logger = logging.getLogger(__name__)

START_EXPORT = "start-export"
CLOSE = "close"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"

PostMessage = Callable[[dict[str, Any]], None]


class ExportComplete(BaseModel):
    """Successful run: the stylesheet and what it was built from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["export-complete"] = "export-complete"
    css: str
    variable_count: int = Field(alias="variableCount")
    collection_name: str = Field(alias="collectionName")

    def to_message(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ExportFailed(BaseModel):
    """Failed run: the human-readable text of whatever aborted it."""

    model_config = ConfigDict(frozen=True)

    type: Literal["error"] = "error"
    message: str

    def to_message(self) -> dict[str, Any]:
        return self.model_dump()


async def run_export(
    store: HostStore,
    *,
    config: ExportConfig | None = None,
    sink: EventSink | None = None,
) -> dict[str, Any]:
    """
    Run one export and describe its outcome as a single outbound message.

    Any exception, including host query failures, becomes an ``error``
    message carrying the exception text.
    """
    logger.info("Starting semantic variables export...")
    try:
        result, css = await export_stylesheet(store, config=config, sink=sink)
    except Exception as e:
        logger.error("Error during export: %s", e)
        return ExportFailed(message=str(e) or UNKNOWN_ERROR_MESSAGE).to_message()

    logger.info("Export complete!")
    return ExportComplete(
        css=css,
        variable_count=result.variable_count,
        collection_name=result.collection_name,
    ).to_message()


class PluginSession:
    """Dispatches inbound messages and posts the outcome of each run."""

    def __init__(
        self,
        store: HostStore,
        post_message: PostMessage,
        *,
        on_close: Callable[[], None] | None = None,
        config: ExportConfig | None = None,
        sink: EventSink | None = None,
    ) -> None:
        self._store = store
        self._post_message = post_message
        self._on_close = on_close
        self._config = config
        self._sink = sink

    async def start_export(self) -> dict[str, Any]:
        message = await run_export(self._store, config=self._config, sink=self._sink)
        self._post_message(message)
        return message

    async def handle_message(self, message: Mapping[str, Any]) -> None:
        kind = message.get("type")
        if kind == START_EXPORT:
            await self.start_export()
        elif kind == CLOSE:
            if self._on_close is not None:
                self._on_close()
        else:
            logger.debug("Ignoring message of type %r", kind)
