"""Creation of game objects by their editor name, and their editable properties."""

from __future__ import annotations

from typing import Any, Callable, NamedTuple

from flatpack.animation import HappyEnd
from flatpack.boss import Boss
from flatpack.entity import Entity
from flatpack.geometry import Vec2
from flatpack.pacman import PacMan
from flatpack.terrain import Terrain


class PropertyDescriptor(NamedTuple):
    """One editable property: its name, default text and how to set and read it."""

    name: str
    default_value: str
    setter: Callable[[Any, str], None]
    getter: Callable[[Any], str]


_CONSTRUCTORS: dict[str, Callable[[Vec2], Entity]] = {
    "pacman": PacMan,
    "ikeaman": Boss,
    "HappyEnd": HappyEnd,
}

_DESCRIPTOR_SOURCES: dict[str, Callable[[], list]] = {
    "pacman": PacMan.property_descriptors,
    "Terrain": Terrain.property_descriptors,
}


def create_object(kind: str, position, rotation: float = 0.0, world: Any = None) -> Entity | None:
    """Build the object registered under kind, or return None for an unknown kind."""
    constructor = _CONSTRUCTORS.get(kind)
    if constructor is None:
        return None
    obj = constructor(Vec2(*position))
    obj.name = kind
    obj.world = world
    return obj


def property_descriptors(kind: str) -> list[PropertyDescriptor]:
    """Editable properties of kind; kinds without any give an empty list."""
    source = _DESCRIPTOR_SOURCES.get(kind)
    if source is None:
        return []
    return [PropertyDescriptor(*entry) for entry in source()]