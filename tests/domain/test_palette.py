from __future__ import annotations

import pytest

from pretty_json_log.domain.palette import DEFAULT_LEVEL_KEY, LEVEL_STYLES, Palette, parse_level_styles


@pytest.mark.parametrize("token", ["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL", "PANIC"])
def test_known_levels_have_a_style(token: str) -> None:
    assert Palette().level_style(token) == LEVEL_STYLES[token]


@pytest.mark.parametrize("token", ["", "NOTICE", "99", DEFAULT_LEVEL_KEY])
def test_unknown_levels_fall_back(token: str) -> None:
    palette = Palette()

    assert palette.level_style(token) is None
    assert palette.default_level_style == LEVEL_STYLES[DEFAULT_LEVEL_KEY]


def test_with_level_styles_merges_without_mutating_original() -> None:
    original = Palette()
    updated = original.with_level_styles({"info": "green", "notice": "blue", "DEFAULT": "red"})

    assert updated.level_style("INFO") == "green"
    assert updated.level_style("NOTICE") == "blue"
    assert updated.default_level_style == "red"
    assert original.level_style("INFO") == LEVEL_STYLES["INFO"]


def test_with_level_styles_without_overrides_returns_same_palette() -> None:
    palette = Palette()

    assert palette.with_level_styles({}) is palette


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("INFO=green, ERROR = bold red", {"INFO": "green", "ERROR": "bold red"}),
        ("warn=yellow,,broken,=x,DEBUG=", {"WARN": "yellow"}),
        ("", {}),
        (None, {}),
    ],
)
def test_parse_level_styles(raw: str | None, expected: dict[str, str]) -> None:
    assert parse_level_styles(raw) == expected
