"""Shared pytest fixtures for modetokens tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from modetokens.core.host import SnapshotStore

PRIMITIVES = "VariableCollectionId:1:0"
THEME = "VariableCollectionId:2:0"
MODE = "VariableCollectionId:3:0"

PRIMITIVE_MODE = "1:0"
THEME_LIGHT = "2:0"
THEME_DARK = "2:1"
MODE_LIGHT = "3:0"
MODE_DARK = "3:1"


def rgb(r: int, g: int, b: int) -> dict[str, float]:
    """Figma-style color value from 8-bit channels."""
    return {"r": r / 255, "g": g / 255, "b": b / 255, "a": 1}


def alias(variable_id: str) -> dict[str, str]:
    return {"type": "VARIABLE_ALIAS", "id": variable_id}


def collection(collection_id: str, name: str, modes: list[tuple[str, str]]) -> dict[str, Any]:
    return {
        "id": collection_id,
        "name": name,
        "modes": [{"modeId": mode_id, "name": mode_name} for mode_id, mode_name in modes],
        "defaultModeId": modes[0][0] if modes else None,
        "remote": False,
    }


def variable(
    variable_id: str,
    name: str,
    collection_id: str,
    values: dict[str, Any],
    resolved_type: str = "COLOR",
) -> dict[str, Any]:
    return {
        "id": variable_id,
        "name": name,
        "variableCollectionId": collection_id,
        "resolvedType": resolved_type,
        "valuesByMode": values,
        "remote": False,
    }


def payload(collections: list[dict[str, Any]], variables: list[dict[str, Any]]) -> dict[str, Any]:
    """Wrap entries in the Figma ``variables/local`` response envelope."""
    return {
        "status": 200,
        "error": False,
        "meta": {
            "variableCollections": {c["id"]: c for c in collections},
            "variables": {v["id"]: v for v in variables},
        },
    }


@pytest.fixture
def make_store() -> Callable[..., SnapshotStore]:
    """Build a SnapshotStore from collection and variable entries."""

    def _make(
        collections: list[dict[str, Any]], variables: list[dict[str, Any]]
    ) -> SnapshotStore:
        return SnapshotStore.from_payload(payload(collections, variables))

    return _make


@pytest.fixture
def design_payload() -> dict[str, Any]:
    """
    A three-collection design file.

    - "Tailwind Colors": single-mode primitives
    - "Theme": Light/Dark semantic surfaces aliasing primitives
    - "Mode": base/ variables aliasing both, plus variables that must be
      excluded or skipped
    """
    collections = [
        collection(PRIMITIVES, "Tailwind Colors", [(PRIMITIVE_MODE, "Value")]),
        collection(THEME, "Theme", [(THEME_LIGHT, "Light"), (THEME_DARK, "Dark")]),
        collection(MODE, "Mode", [(MODE_LIGHT, "Light"), (MODE_DARK, "Dark")]),
    ]
    variables = [
        variable("VariableID:1:1", "white", PRIMITIVES, {PRIMITIVE_MODE: rgb(255, 255, 255)}),
        variable("VariableID:1:2", "slate/50", PRIMITIVES, {PRIMITIVE_MODE: rgb(248, 250, 252)}),
        variable("VariableID:1:3", "slate/950", PRIMITIVES, {PRIMITIVE_MODE: rgb(2, 6, 23)}),
        variable(
            "VariableID:2:1",
            "base/surface",
            THEME,
            {THEME_LIGHT: alias("VariableID:1:1"), THEME_DARK: alias("VariableID:1:3")},
        ),
        variable(
            "VariableID:3:1",
            "base/background",
            MODE,
            {MODE_LIGHT: alias("VariableID:2:1"), MODE_DARK: alias("VariableID:2:1")},
        ),
        variable(
            "VariableID:3:2",
            "base/broken",
            MODE,
            {MODE_LIGHT: alias("VariableID:9:9"), MODE_DARK: "#000000"},
        ),
        variable(
            "VariableID:3:3",
            "base/foreground",
            MODE,
            {MODE_LIGHT: alias("VariableID:1:3"), MODE_DARK: alias("VariableID:1:2")},
        ),
        variable(
            "VariableID:3:4",
            "other/ignored",
            MODE,
            {MODE_LIGHT: rgb(255, 0, 0), MODE_DARK: rgb(0, 0, 255)},
        ),
        variable(
            "VariableID:3:5",
            "base/sidebar/accent",
            MODE,
            {MODE_LIGHT: "#f1f5f9", MODE_DARK: "#1e293b"},
        ),
        variable("VariableID:3:6", "base/partial", MODE, {MODE_LIGHT: "#fff"}),
        variable(
            "VariableID:3:7",
            "base/radius",
            MODE,
            {MODE_LIGHT: 10, MODE_DARK: 10},
            resolved_type="FLOAT",
        ),
    ]
    return payload(collections, variables)


@pytest.fixture
def design_store(design_payload: dict[str, Any]) -> SnapshotStore:
    return SnapshotStore.from_payload(design_payload)


@pytest.fixture
def snapshot_file(tmp_path: Path, design_payload: dict[str, Any]) -> Path:
    path = tmp_path / "variables.json"
    path.write_text(json.dumps(design_payload), encoding="utf-8")
    return path


@pytest.fixture
def figma() -> SimpleNamespace:
    """Payload builders and ids, for tests that assemble their own design files."""
    return SimpleNamespace(
        rgb=rgb,
        alias=alias,
        collection=collection,
        variable=variable,
        payload=payload,
        PRIMITIVES=PRIMITIVES,
        THEME=THEME,
        MODE=MODE,
        PRIMITIVE_MODE=PRIMITIVE_MODE,
        THEME_LIGHT=THEME_LIGHT,
        THEME_DARK=THEME_DARK,
        MODE_LIGHT=MODE_LIGHT,
        MODE_DARK=MODE_DARK,
    )
