"""
Alias resolution across collections.

A variable's value for a mode is either terminal (an RGB triple or a hex
string) or an alias to another variable, possibly in another collection
with its own mode ids. AliasResolver follows the chain to a terminal value
and converts it to OKLCH.

Mode ids never carry across collections, so the target mode of an alias is
chosen by mode *name*:

- target collection has "light" and "dark" modes: use the one whose name
  matches the current mode's name
- target collection has a single mode: use it
- otherwise: reuse the current mode id (only correct when both collections
  share mode ids; reported as a ``mode-fallback`` event)

The ``visited`` set is the only state threaded through recursion. It is
owned by one top-level resolution and stops reference cycles.
"""

from __future__ import annotations

from typing import Any

from .events import EventKind, EventSink, ExportEvent, logging_sink
from .host import HostStore
from .ir import AliasValue, Collection, HexValue, RGBValue, UnrecognizedValue, Variable
from .oklch import hex_to_oklch, rgb_to_hex

LIGHT_MODE_NAME = "light"
DARK_MODE_NAME = "dark"


class AliasResolver:
    """Resolves (variable, mode) pairs to ``oklch()`` strings."""

    def __init__(
        self,
        store: HostStore,
        sink: EventSink | None = None,
        *,
        light_mode: str = LIGHT_MODE_NAME,
        dark_mode: str = DARK_MODE_NAME,
    ) -> None:
        self._store = store
        self._sink = sink or logging_sink
        self._light_mode = light_mode.lower()
        self._dark_mode = dark_mode.lower()

    def _emit(
        self,
        kind: EventKind,
        message: str,
        variable: Variable,
        mode_id: str,
        **details: Any,
    ) -> None:
        self._sink(
            ExportEvent(
                kind=kind,
                message=message,
                variable_name=variable.name,
                mode_id=mode_id,
                details=details,
            )
        )

    async def resolve(
        self,
        variable: Variable,
        mode_id: str,
        visited: set[str] | None = None,
    ) -> str | None:
        """
        Resolve a variable's value for one mode to an OKLCH string.

        Args:
            variable: Variable to resolve.
            mode_id: Mode id within the variable's own collection.
            visited: Variable ids already on this resolution chain. Pass
                None for a top-level call; recursive calls share the set.

        Returns:
            ``oklch(L C H)`` string, or None when the chain ends in a missing
            value, a dangling alias, a cycle or an unusable value.
        """
        if visited is None:
            visited = set()

        if variable.id in visited:
            self._emit(
                EventKind.CYCLE,
                f"Circular reference detected for variable: {variable.name}",
                variable,
                mode_id,
                chain=sorted(visited),
            )
            return None
        visited.add(variable.id)

        self._emit(
            EventKind.RESOLVING,
            f"Resolving variable: {variable.name}, mode: {mode_id}",
            variable,
            mode_id,
        )

        value = variable.values_by_mode.get(mode_id)
        if value is None:
            self._emit(
                EventKind.MISSING_MODE,
                f"No value found for variable: {variable.name}, mode: {mode_id}",
                variable,
                mode_id,
            )
            return None

        if isinstance(value, RGBValue):
            hex_color = rgb_to_hex(value.r, value.g, value.b)
            oklch = hex_to_oklch(hex_color)
            self._emit(
                EventKind.RESOLVED,
                f"Resolved {variable.name} to final color: {hex_color} → {oklch}",
                variable,
                mode_id,
                hex=hex_color,
                oklch=oklch,
            )
            return oklch

        if isinstance(value, HexValue):
            oklch = hex_to_oklch(value.hex)
            self._emit(
                EventKind.RESOLVED,
                f"Resolved {variable.name} to final hex: {value.hex} → {oklch}",
                variable,
                mode_id,
                hex=value.hex,
                oklch=oklch,
            )
            return oklch

        if isinstance(value, AliasValue):
            return await self._resolve_alias(variable, mode_id, value, visited)

        self._report_unresolvable(variable, mode_id, value)
        return None

    async def _resolve_alias(
        self,
        variable: Variable,
        mode_id: str,
        alias: AliasValue,
        visited: set[str],
    ) -> str | None:
        target = await self._store.get_variable_by_id(alias.id)
        if target is None:
            self._emit(
                EventKind.DANGLING_ALIAS,
                f"Could not find aliased variable with ID: {alias.id} for {variable.name}",
                variable,
                mode_id,
                alias_id=alias.id,
            )
            return None

        target_collection = await self._store.get_variable_collection_by_id(
            target.variable_collection_id
        )
        if target_collection is None:
            self._emit(
                EventKind.MISSING_COLLECTION,
                f"Could not find collection for aliased variable: {target.name}",
                variable,
                mode_id,
                collection_id=target.variable_collection_id,
            )
            return None

        target_mode_id = await self._target_mode_id(variable, mode_id, target_collection)
        self._emit(
            EventKind.ALIAS_FOLLOWED,
            f"{variable.name} is an alias to {target.name} "
            f"in collection {target_collection.name}",
            variable,
            mode_id,
            target=target.name,
            target_mode_id=target_mode_id,
        )
        return await self.resolve(target, target_mode_id, visited)

    async def _target_mode_id(
        self,
        variable: Variable,
        mode_id: str,
        target_collection: Collection,
    ) -> str:
        """Pick the mode of the aliased variable's collection to read from."""
        light = target_collection.find_mode(self._light_mode)
        dark = target_collection.find_mode(self._dark_mode)

        if light is not None and dark is not None:
            current_collection = await self._store.get_variable_collection_by_id(
                variable.variable_collection_id
            )
            current_mode = current_collection.mode_by_id(mode_id) if current_collection else None
            current_name = current_mode.name.lower() if current_mode else None
            if current_name == self._light_mode:
                return light.mode_id
            if current_name == self._dark_mode:
                return dark.mode_id
            self._report_fallback(variable, mode_id, target_collection)
            return mode_id

        if len(target_collection.modes) == 1:
            only = target_collection.modes[0]
            self._emit(
                EventKind.SINGLE_MODE,
                f"Using single mode: {only.name} for collection: {target_collection.name}",
                variable,
                mode_id,
                target_mode_id=only.mode_id,
            )
            return only.mode_id

        self._report_fallback(variable, mode_id, target_collection)
        return mode_id

    def _report_fallback(
        self,
        variable: Variable,
        mode_id: str,
        target_collection: Collection,
    ) -> None:
        known = target_collection.mode_by_id(mode_id) is not None
        self._emit(
            EventKind.MODE_FALLBACK,
            f"No mode correlation for {variable.name} into collection "
            f"{target_collection.name}; reusing mode id {mode_id}"
            + ("" if known else " (unknown to that collection)"),
            variable,
            mode_id,
            collection=target_collection.name,
            mode_known=known,
        )

    def _report_unresolvable(
        self,
        variable: Variable,
        mode_id: str,
        value: UnrecognizedValue,
    ) -> None:
        if value.is_string:
            self._emit(
                EventKind.NON_HEX_STRING,
                f"Value {value.raw!r} for variable: {variable.name}, mode: {mode_id} "
                "is not a hex color",
                variable,
                mode_id,
            )
            return
        self._emit(
            EventKind.UNRECOGNIZED_VALUE,
            f"Could not resolve value for variable: {variable.name}, mode: {mode_id}, "
            f"value type: {value.raw_type}",
            variable,
            mode_id,
        )
