"""Static theme registry mapping theme keys to room styles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple, Union

from dungeon_models import RoomStyle


@dataclass(frozen=True)
class Theme:
    """Named parameter set governing room and corridor shape.

    Only the room style is consumed by generation; colors and other
    presentation fields belong to the renderer.
    """

    key: str
    name: str
    room_style: RoomStyle


THEMES: Mapping[str, Theme] = {
    "dungeon": Theme(key="dungeon", name="Classic Dungeon", room_style=RoomStyle.RECTANGULAR),
    "cave": Theme(key="cave", name="Natural Caves", room_style=RoomStyle.IRREGULAR),
    "castle": Theme(key="castle", name="Castle Halls", room_style=RoomStyle.FORMAL),
    "forest": Theme(key="forest", name="Forest Ruins", room_style=RoomStyle.ORGANIC),
}

DEFAULT_THEME_KEY = "dungeon"

_THEMES_BY_STYLE: Dict[RoomStyle, Theme] = {theme.room_style: theme for theme in THEMES.values()}

ThemeLike = Union[Theme, RoomStyle, str]


def theme_keys() -> Tuple[str, ...]:
    """Theme keys plus the bare room-style names, which are accepted as aliases."""
    return tuple(THEMES) + tuple(style.value for style in RoomStyle)


def resolve_theme(theme: ThemeLike) -> Theme:
    """Look up a theme by key, room-style name, or ``RoomStyle`` member."""
    if isinstance(theme, Theme):
        return theme
    if isinstance(theme, RoomStyle):
        return _THEMES_BY_STYLE[theme]

    key = str(theme).strip().lower()
    if key in THEMES:
        return THEMES[key]
    try:
        style = RoomStyle(key)
    except ValueError as exc:
        valid = ", ".join(theme_keys())
        raise ValueError(f"Unknown theme {theme!r}; expected one of: {valid}") from exc
    return _THEMES_BY_STYLE[style]
