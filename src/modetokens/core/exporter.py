"""
Export pipeline.

Selects the mode collection, filters candidates, resolves each candidate's
light and dark values and collects the variables that resolved in both
modes. Host queries are awaited one at a time, in order.
"""

from __future__ import annotations

import logging

from .config import ExportConfig
from .errors import NoDataError
from .events import EventKind, EventSink, ExportEvent, logging_sink
from .host import HostStore
from .ir import ExportResult, ResolvedVariable
from .resolver import AliasResolver
from .selector import clean_name, find_light_dark_modes, find_mode_collection, select_candidates
from .stylesheet import render_stylesheet

logger = logging.getLogger(__name__)


async def export_variables(
    store: HostStore,
    *,
    config: ExportConfig | None = None,
    sink: EventSink | None = None,
) -> ExportResult:
    """
    Resolve the exportable variables of the mode collection.

    Args:
        store: Host to read collections and variables from.
        config: Selection settings. Defaults to ``ExportConfig()``.
        sink: Receives diagnostic events. Defaults to ``logging_sink``.

    Returns:
        ExportResult with variables in host enumeration order.

    Raises:
        ConfigurationError: No mode collection, or it lacks Light/Dark modes.
        NoDataError: No candidate resolved in both modes.
    """
    config = config or ExportConfig()
    sink = sink or logging_sink

    collection = await find_mode_collection(store, sink, keyword=config.collection_keyword)
    light_mode, dark_mode = find_light_dark_modes(
        collection, light=config.light_mode, dark=config.dark_mode
    )
    candidates = await select_candidates(store, collection, sink, prefix=config.prefix)

    resolver = AliasResolver(
        store, sink, light_mode=config.light_mode, dark_mode=config.dark_mode
    )
    resolved: list[ResolvedVariable] = []

    for variable in candidates:
        light_value = await resolver.resolve(variable, light_mode.mode_id)
        dark_value = await resolver.resolve(variable, dark_mode.mode_id)

        if light_value is None or dark_value is None:
            sink(
                ExportEvent(
                    kind=EventKind.VARIABLE_SKIPPED,
                    message=(
                        f"Skipping {variable.name}: missing light ({light_value is not None}) "
                        f"or dark ({dark_value is not None}) value"
                    ),
                    variable_name=variable.name,
                    details={
                        "light": light_value is not None,
                        "dark": dark_value is not None,
                    },
                )
            )
            continue

        name = clean_name(variable.name, config.prefix)
        sink(
            ExportEvent(
                kind=EventKind.VARIABLE_EXPORTED,
                message=f"Successfully processed {variable.name} → --{name}",
                variable_name=variable.name,
            )
        )
        resolved.append(
            ResolvedVariable(
                name=variable.name,
                clean_name=name,
                light_value=light_value,
                dark_value=dark_value,
            )
        )

    if not resolved:
        raise NoDataError(
            f"No valid {config.prefix} color variables found. Make sure your "
            f"{config.prefix} variables have both Light and Dark mode values and "
            "properly resolve to color values."
        )

    logger.info("Resolved %d %s variables from %s", len(resolved), config.prefix, collection.name)
    return ExportResult(variables=resolved, collection_name=collection.name)


async def export_stylesheet(
    store: HostStore,
    *,
    config: ExportConfig | None = None,
    sink: EventSink | None = None,
) -> tuple[ExportResult, str]:
    """Run the export and render it; returns the result and the CSS text."""
    result = await export_variables(store, config=config, sink=sink)
    return result, render_stylesheet(result)
