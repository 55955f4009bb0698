"""
Collection selection and candidate filtering.

The semantic source of truth is the collection whose name contains
"mode"; it must define "Light" and "Dark" modes. Export candidates are the
color variables of that collection whose names sit under the ``base/``
prefix. Everything else is ignored, not reported as a failure.
"""

from __future__ import annotations

from .errors import ConfigurationError
from .events import EventKind, EventSink, ExportEvent, logging_sink
from .host import HostStore
from .ir import COLOR_TYPE, Collection, Mode, Variable

DEFAULT_COLLECTION_KEYWORD = "mode"
DEFAULT_PREFIX = "base/"


async def find_mode_collection(
    store: HostStore,
    sink: EventSink | None = None,
    *,
    keyword: str = DEFAULT_COLLECTION_KEYWORD,
) -> Collection:
    """Return the first local collection whose name contains *keyword*.

    Raises:
        ConfigurationError: If no collection name contains the keyword.
    """
    sink = sink or logging_sink
    collections = await store.get_local_variable_collections()
    wanted = keyword.lower()
    matches = [c for c in collections if wanted in c.name.lower()]

    label = keyword.capitalize()
    if not matches:
        raise ConfigurationError(
            f'No collection found with "{label}" in the name. '
            f'Please create a collection containing "{label}" in its name.',
            details={"collections": [c.name for c in collections]},
        )

    chosen = matches[0]
    if len(matches) > 1:
        sink(
            ExportEvent(
                kind=EventKind.AMBIGUOUS_COLLECTION,
                message=(
                    f'Found {len(matches)} collections with "{label}" in the name. '
                    f"Using the first one: {chosen.name}"
                ),
                details={"collections": [c.name for c in matches]},
            )
        )
    sink(
        ExportEvent(
            kind=EventKind.COLLECTION_SELECTED,
            message=f"Found collection: {chosen.name}",
            details={"collection_id": chosen.id},
        )
    )
    return chosen


def find_light_dark_modes(
    collection: Collection,
    *,
    light: str = "light",
    dark: str = "dark",
) -> tuple[Mode, Mode]:
    """Return the (light, dark) modes of a collection.

    Raises:
        ConfigurationError: If either mode is missing; the message lists the
            modes that were found.
    """
    light_mode = collection.find_mode(light)
    dark_mode = collection.find_mode(dark)
    if light_mode is None or dark_mode is None:
        found = ", ".join(collection.mode_names)
        raise ConfigurationError(
            f'Collection "{collection.name}" must have both "{light.capitalize()}" and '
            f'"{dark.capitalize()}" modes. Found modes: {found}',
            details={"modes": collection.mode_names},
        )
    return light_mode, dark_mode


async def select_candidates(
    store: HostStore,
    collection: Collection,
    sink: EventSink | None = None,
    *,
    prefix: str = DEFAULT_PREFIX,
) -> list[Variable]:
    """Color variables of *collection* named under *prefix*, in host order."""
    sink = sink or logging_sink
    all_variables = await store.get_local_variables(COLOR_TYPE)
    in_collection = [v for v in all_variables if v.variable_collection_id == collection.id]
    candidates = [v for v in in_collection if v.name.startswith(prefix)]

    sink(
        ExportEvent(
            kind=EventKind.CANDIDATES_SELECTED,
            message=(
                f"Found {len(in_collection)} color variables in collection, "
                f"{len(candidates)} {prefix} variables"
            ),
            details={"in_collection": len(in_collection), "candidates": len(candidates)},
        )
    )
    return candidates


def clean_name(name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Export-safe name: prefix stripped, remaining slashes become hyphens.

    >>> clean_name("base/sidebar/accent")
    'sidebar-accent'
    """
    if name.startswith(prefix):
        name = name[len(prefix) :]
    return name.replace("/", "-")
