import pytest

from dungeon_config import DungeonConfig
from dungeon_models import RoomStyle
from themes import THEMES, Theme, resolve_theme, theme_keys


@pytest.mark.parametrize(
    "key,style",
    [
        ("dungeon", RoomStyle.RECTANGULAR),
        ("cave", RoomStyle.IRREGULAR),
        ("castle", RoomStyle.FORMAL),
        ("forest", RoomStyle.ORGANIC),
        ("rectangular", RoomStyle.RECTANGULAR),
        ("Organic", RoomStyle.ORGANIC),
        (RoomStyle.FORMAL, RoomStyle.FORMAL),
    ],
)
def test_resolve_theme(key, style):
    assert resolve_theme(key).room_style is style


def test_resolve_theme_passes_custom_themes_through():
    custom = Theme(key="crypt", name="Crypt", room_style=RoomStyle.IRREGULAR)

    assert resolve_theme(custom) is custom


def test_unknown_theme_lists_valid_keys():
    with pytest.raises(ValueError, match="dungeon"):
        resolve_theme("swamp")


def test_theme_keys_cover_registry_and_styles():
    keys = theme_keys()

    assert set(THEMES) <= set(keys)
    assert {style.value for style in RoomStyle} <= set(keys)


def test_config_resolves_theme():
    config = DungeonConfig(width=30, height=20, theme="cave")

    assert config.resolved_theme is THEMES["cave"]
    assert config.room_count == 8
    assert config.max_placement_attempts == 100


@pytest.mark.parametrize(
    "overrides",
    [
        {"width": -1},
        {"height": -5},
        {"room_count": -1},
        {"min_room_size": 0},
        {"min_room_size": 6, "max_room_size": 5},
        {"max_placement_attempts": 0},
        {"extra_corridor_count": -1},
        {"extra_corridor_min_rooms": -1},
        {"theme": "nowhere"},
    ],
)
def test_config_rejects_invalid_values(overrides):
    kwargs = dict(width=30, height=20)
    kwargs.update(overrides)

    with pytest.raises(ValueError):
        DungeonConfig(**kwargs)


def test_config_accepts_degenerate_sizes():
    config = DungeonConfig(width=0, height=0, room_count=0)

    assert config.width == 0
