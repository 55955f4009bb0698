"""
Variable graph IR types.

Models the design tool's variable store (collections, modes, variables) and
the export products built from it. Host payloads use Figma's camelCase keys;
models accept those aliases as well as the snake_case field names.

Raw per-mode values are classified exactly once, when a Variable is built,
into the ColorValue tagged union. Everything downstream dispatches on the
``kind`` tag instead of probing value shapes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .oklch import is_hex_color

ALIAS_TYPE = "VARIABLE_ALIAS"
COLOR_TYPE = "COLOR"


# =============================================================================
# Color values
# =============================================================================


class RGBValue(BaseModel):
    """Terminal color as float channels in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rgb"] = "rgb"
    r: float
    g: float
    b: float
    a: float = 1.0


class HexValue(BaseModel):
    """Terminal color given as a validated ``#rgb`` / ``#rrggbb`` string."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hex"] = "hex"
    hex: str


class AliasValue(BaseModel):
    """Reference to another variable's value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["alias"] = "alias"
    id: str


class UnrecognizedValue(BaseModel):
    """Any value shape the exporter cannot turn into a color."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unrecognized"] = "unrecognized"
    raw_type: str
    raw: str | None = None

    @property
    def is_string(self) -> bool:
        return self.raw_type == "str"


ColorValue = Annotated[
    RGBValue | HexValue | AliasValue | UnrecognizedValue,
    Field(discriminator="kind"),
]

_color_value_adapter: TypeAdapter[ColorValue] = TypeAdapter(ColorValue)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def parse_color_value(raw: Any) -> RGBValue | HexValue | AliasValue | UnrecognizedValue:
    """Classify a raw host value into the ColorValue union.

    Accepted shapes:
    - ``{"r": .., "g": .., "b": .., "a": ..}`` -> RGBValue
    - ``{"type": "VARIABLE_ALIAS", "id": ..}`` -> AliasValue
    - ``"#abc"`` / ``"#aabbcc"`` -> HexValue
    - already-classified values (model instances or dumps with ``kind``)

    Anything else becomes an UnrecognizedValue; this never raises.
    """
    if isinstance(raw, RGBValue | HexValue | AliasValue | UnrecognizedValue):
        return raw

    if isinstance(raw, Mapping):
        if "kind" in raw:
            try:
                return _color_value_adapter.validate_python(dict(raw))
            except ValueError:
                return UnrecognizedValue(raw_type="dict")
        if all(_is_number(raw.get(channel)) for channel in ("r", "g", "b")):
            alpha = raw.get("a", 1.0)
            return RGBValue(
                r=raw["r"],
                g=raw["g"],
                b=raw["b"],
                a=alpha if _is_number(alpha) else 1.0,
            )
        if raw.get("type") == ALIAS_TYPE and isinstance(raw.get("id"), str):
            return AliasValue(id=raw["id"])
        return UnrecognizedValue(raw_type="dict")

    if isinstance(raw, str):
        if is_hex_color(raw):
            return HexValue(hex=raw)
        return UnrecognizedValue(raw_type="str", raw=raw)

    return UnrecognizedValue(raw_type=type(raw).__name__)


# =============================================================================
# Host store entities
# =============================================================================


class Mode(BaseModel):
    """A named variant dimension of a collection (e.g. Light / Dark)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode_id: str = Field(alias="modeId")
    name: str


class Collection(BaseModel):
    """A variable collection and its ordered modes.

    Mode ids are only meaningful inside their own collection; the same
    logical "Light" mode has a different id in every collection.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    modes: list[Mode] = Field(default_factory=list)
    default_mode_id: str | None = Field(default=None, alias="defaultModeId")
    remote: bool = False

    def find_mode(self, name: str) -> Mode | None:
        """Return the first mode whose name matches case-insensitively."""
        wanted = name.lower()
        for mode in self.modes:
            if mode.name.lower() == wanted:
                return mode
        return None

    def mode_by_id(self, mode_id: str) -> Mode | None:
        for mode in self.modes:
            if mode.mode_id == mode_id:
                return mode
        return None

    @property
    def mode_names(self) -> list[str]:
        return [mode.name for mode in self.modes]


class Variable(BaseModel):
    """A named variable with one value per mode of its collection."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    variable_collection_id: str = Field(alias="variableCollectionId")
    resolved_type: str = Field(default=COLOR_TYPE, alias="resolvedType")
    remote: bool = False
    values_by_mode: dict[str, ColorValue] = Field(default_factory=dict, alias="valuesByMode")

    @field_validator("values_by_mode", mode="before")
    @classmethod
    def _classify_values(cls, value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise ValueError("valuesByMode must be an object keyed by mode id")
        return {str(mode_id): parse_color_value(raw) for mode_id, raw in value.items()}


# =============================================================================
# Export products
# =============================================================================


class ResolvedVariable(BaseModel):
    """A variable with both light and dark values resolved to OKLCH."""

    model_config = ConfigDict(frozen=True)

    name: str
    clean_name: str = Field(description="Prefix stripped, slashes flattened to hyphens")
    light_value: str
    dark_value: str


class ExportResult(BaseModel):
    """Resolved variables in resolution order, plus their source collection."""

    model_config = ConfigDict(frozen=True)

    variables: list[ResolvedVariable] = Field(default_factory=list)
    collection_name: str

    @property
    def variable_count(self) -> int:
        return len(self.variables)
