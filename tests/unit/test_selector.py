"""Tests for mode collection selection and candidate filtering."""

from __future__ import annotations

import pytest

from modetokens.core.errors import ConfigurationError
from modetokens.core.events import EventCollector, EventKind
from modetokens.core.ir import Collection
from modetokens.core.selector import (
    clean_name,
    find_light_dark_modes,
    find_mode_collection,
    select_candidates,
)


class TestFindModeCollection:
    @pytest.mark.asyncio
    async def test_picks_collection_containing_mode(self, design_store) -> None:
        events = EventCollector()

        collection = await find_mode_collection(design_store, events)

        assert collection.name == "Mode"
        assert events.kinds() == [EventKind.COLLECTION_SELECTED]

    @pytest.mark.asyncio
    async def test_match_is_case_insensitive_substring(self, make_store, figma) -> None:
        store = make_store(
            [figma.collection("c1", "Semantic MODES", [("m1", "Light"), ("m2", "Dark")])], []
        )

        collection = await find_mode_collection(store, EventCollector())

        assert collection.id == "c1"

    @pytest.mark.asyncio
    async def test_no_matching_collection(self, make_store, figma) -> None:
        store = make_store([figma.collection("c1", "Primitives", [("m1", "Value")])], [])

        with pytest.raises(ConfigurationError, match='No collection found with "Mode"') as exc:
            await find_mode_collection(store, EventCollector())

        assert exc.value.details["collections"] == ["Primitives"]

    @pytest.mark.asyncio
    async def test_ambiguous_picks_first_and_warns(self, make_store, figma) -> None:
        store = make_store(
            [
                figma.collection("c1", "Brand Mode", [("m1", "Light"), ("m2", "Dark")]),
                figma.collection("c2", "Mode", [("m3", "Light"), ("m4", "Dark")]),
            ],
            [],
        )
        events = EventCollector()

        collection = await find_mode_collection(store, events)

        assert collection.id == "c1"
        [warning] = events.of_kind(EventKind.AMBIGUOUS_COLLECTION)
        assert warning.details["collections"] == ["Brand Mode", "Mode"]
        assert warning.is_warning

    @pytest.mark.asyncio
    async def test_remote_collections_are_not_candidates(self, make_store, figma) -> None:
        remote = figma.collection("c1", "Library Mode", [("m1", "Light"), ("m2", "Dark")])
        remote["remote"] = True
        store = make_store([remote], [])

        with pytest.raises(ConfigurationError):
            await find_mode_collection(store, EventCollector())

    @pytest.mark.asyncio
    async def test_custom_keyword(self, make_store, figma) -> None:
        store = make_store(
            [
                figma.collection("c1", "Mode", [("m1", "Light"), ("m2", "Dark")]),
                figma.collection("c2", "Semantic Theme", [("m3", "Light"), ("m4", "Dark")]),
            ],
            [],
        )

        collection = await find_mode_collection(store, EventCollector(), keyword="theme")

        assert collection.id == "c2"


class TestFindLightDarkModes:
    def test_returns_both_modes(self) -> None:
        collection = Collection(
            id="c1",
            name="Mode",
            modes=[{"modeId": "m2", "name": "Dark"}, {"modeId": "m1", "name": "light"}],
        )

        light, dark = find_light_dark_modes(collection)

        assert (light.mode_id, dark.mode_id) == ("m1", "m2")

    def test_missing_dark_lists_found_modes(self) -> None:
        collection = Collection(
            id="c1",
            name="Mode",
            modes=[{"modeId": "m1", "name": "Light"}, {"modeId": "m2", "name": "Dim"}],
        )

        with pytest.raises(ConfigurationError) as exc:
            find_light_dark_modes(collection)

        message = str(exc.value)
        assert 'Collection "Mode" must have both "Light" and "Dark" modes' in message
        assert "Found modes: Light, Dim" in message

    def test_custom_mode_names(self) -> None:
        collection = Collection(
            id="c1",
            name="Mode",
            modes=[{"modeId": "m1", "name": "Day"}, {"modeId": "m2", "name": "Night"}],
        )

        light, dark = find_light_dark_modes(collection, light="day", dark="night")

        assert (light.name, dark.name) == ("Day", "Night")


class TestSelectCandidates:
    @pytest.mark.asyncio
    async def test_filters_prefix_type_and_collection(self, design_store, figma) -> None:
        collection = await design_store.get_variable_collection_by_id(figma.MODE)
        events = EventCollector()

        candidates = await select_candidates(design_store, collection, events)

        # other/ignored has no prefix, base/radius is FLOAT, base/surface is in Theme
        assert [v.name for v in candidates] == [
            "base/background",
            "base/broken",
            "base/foreground",
            "base/sidebar/accent",
            "base/partial",
        ]
        [event] = events.of_kind(EventKind.CANDIDATES_SELECTED)
        assert event.details == {"in_collection": 6, "candidates": 5}

    @pytest.mark.asyncio
    async def test_prefix_is_case_sensitive(self, make_store, figma) -> None:
        store = make_store(
            [figma.collection(figma.MODE, "Mode", [("m1", "Light"), ("m2", "Dark")])],
            [
                figma.variable("v1", "Base/ring", figma.MODE, {"m1": "#fff"}),
                figma.variable("v2", "base", figma.MODE, {"m1": "#fff"}),
                figma.variable("v3", "base/ring", figma.MODE, {"m1": "#fff"}),
            ],
        )
        collection = await store.get_variable_collection_by_id(figma.MODE)

        candidates = await select_candidates(store, collection, EventCollector())

        assert [v.id for v in candidates] == ["v3"]


class TestCleanName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("base/background", "background"),
            ("base/sidebar/accent", "sidebar-accent"),
            ("base/chart/1/fill", "chart-1-fill"),
            ("base/card-foreground", "card-foreground"),
        ],
    )
    def test_strips_prefix_and_hyphenates(self, name: str, expected: str) -> None:
        assert clean_name(name) == expected

    def test_custom_prefix(self) -> None:
        assert clean_name("semantic/muted/foreground", "semantic/") == "muted-foreground"
