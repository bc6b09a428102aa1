"""The running game world: spawned objects, screen parts, movement and collisions."""

from __future__ import annotations

import math
from os import PathLike
from typing import Any

from flatpack.animation import HappyEnd
from flatpack.camera import Camera
from flatpack.collision import polygons_collide
from flatpack.entity import Background, Entity
from flatpack.factory import create_object, property_descriptors
from flatpack.geometry import Rect, Vec2
from flatpack.mapfile import PlacedObject, read_map
from flatpack.terrain import Terrain

MAX_SPEED_THRESHOLD = 200.0
MAX_SUBSTEPS = 10
CAMERA_SMOOTHNESS = 25.0

# Kinds that are drawn but never take part in collision checks.
_NON_COLLIDING = (Background, HappyEnd)


def _is_collider(obj: Entity) -> bool:
    return getattr(obj, "collidable", not isinstance(obj, _NON_COLLIDING))


class GameMap:
    """A level made of screen-sized parts, holding every live object."""

    def __init__(self, window_size) -> None:
        self.window_size = Vec2(*window_size)
        self.camera = Camera(self.window_size.x, self.window_size.y)
        self.camera.set_size(self.window_size)
        self.camera.set_position(self.window_size / 2.0)
        self.camera.set_zoom(1.0)
        self.camera.set_smoothness(CAMERA_SMOOTHNESS)
        self.current_part_x = 0
        self.current_part_y = 0
        self.player_ref: Any = None
        self.is_player_valid = True
        self.player_spawn_position = Vec2(0.0, 0.0)
        self.game_over = False
        self.original_objects: list[PlacedObject] = []
        self.all_objects: list[Entity] = []
        self.collision_objects: list[Entity] = []
        self.view_bounds = self.camera.view_bounds()

    def load(self, path: str | PathLike) -> None:
        """Read the placed objects of a level file; they are created by spawn_objects."""
        self.original_objects = read_map(path)

    def change_part(self, dx: int, dy: int, teleport: bool = False) -> None:
        """Move by whole screen parts."""
        self.current_part_x += dx
        self.current_part_y += dy
        self.camera.move_to_next_part(dx, dy, teleport)

    def teleport_to(self, x: int, y: int) -> None:
        """Jump straight to the given part."""
        self.current_part_x = x
        self.current_part_y = y
        size = self.camera.size
        self.camera.set_position(Vec2(x * size.x, y * size.y), True)

    def part_bounds(self) -> Rect:
        """World rectangle of the current screen part."""
        size = self.camera.size
        return Rect(self.current_part_x * size.x, self.current_part_y * size.y, size.x, size.y)

    def delete_objects(self) -> None:
        """Drop every live object and return the camera to the first part."""
        self.reset_camera()
        self.collision_objects.clear()
        self.all_objects.clear()

    def reset_camera(self) -> None:
        self.current_part_x = 0
        self.current_part_y = 0
        self.camera.set_position(self.camera.size / 2.0, True)

    def set_item_respawn_off(self, object_id: int) -> None:
        """Mark the placed object with object_id as not respawning."""
        for placed in self.original_objects:
            if placed.id == object_id:
                placed.respawn = False
                return

    def _build(self, placed: PlacedObject) -> Entity | None:
        if placed.kind == "Background":
            return Background(placed.x, placed.y, placed.width, placed.height, placed.texture_path)
        if placed.kind == "Terrain":
            terrain = Terrain(
                int(placed.x), int(placed.y), int(placed.width), int(placed.height),
                placed.texture_path,
            )
            terrain.name = "Terrain"
            return terrain
        obj = create_object(placed.kind, Vec2(placed.x, placed.y), 0.0, self)
        if (
            obj is not None
            and not placed.respawn
            and getattr(obj, "is_item", False)
            and self.player_ref is not None
        ):
            obj.position = self.player_ref.position
        return obj

    def spawn_objects(self) -> None:
        """Create a live object for every placed object of the loaded level."""
        for index, placed in enumerate(self.original_objects):
            obj = self._build(placed)
            if obj is None:
                continue
            for descriptor in property_descriptors(placed.kind):
                value = placed.properties.get(descriptor.name)
                if value is not None and descriptor.setter is not None:
                    descriptor.setter(obj, value)
            obj.id = index
            placed.id = index
            self.spawn(obj)

    def spawn(self, obj: Entity) -> Entity:
        """Add a live object to the world."""
        obj.world = self
        self.all_objects.append(obj)
        if _is_collider(obj):
            self.collision_objects.append(obj)
        return obj

    def spawn_named(self, name: str, x: float, y: float, rotation: float = 0.0) -> Entity | None:
        """Create and add an object by kind name; unknown kinds add nothing."""
        obj = create_object(name, Vec2(x, y), rotation, self)
        if obj is None:
            return None
        return self.spawn(obj)

    def _check_collisions(self, obj: Entity, last_check: bool) -> None:
        if not _is_collider(obj) or not obj.is_on_screen():
            return
        # The first registered collider is never tested against.
        for other in self.collision_objects[1:]:
            if other is obj:
                continue
            if not obj.bounds().intersects(other.bounds()):
                continue
            if polygons_collide(obj.corners(), other.corners()):
                if last_check:
                    other.on_collision(obj)
                    obj.on_collision(other)
                obj.collide(other)
                other.collide(obj)

    def update_objects(self, delta_time: float) -> None:
        """Advance the camera and every object, then move them and resolve collisions."""
        self.camera.update(delta_time)
        self.view_bounds = self.camera.view_bounds()

        for obj in list(self.all_objects):
            obj.update(delta_time)

        for obj in list(self.all_objects):
            speed = obj.velocity.length()
            if speed > MAX_SPEED_THRESHOLD:
                substeps = min(math.ceil(speed / MAX_SPEED_THRESHOLD), MAX_SUBSTEPS)
                step = delta_time / substeps
                start = obj.position
                velocity = obj.velocity
                for index in range(substeps):
                    obj.position = start + velocity * (step * (index + 1))
                    self._check_collisions(obj, index == substeps - 1)
            elif speed != 0:
                obj.position = obj.position + obj.velocity * delta_time
                self._check_collisions(obj, True)

    def remove_dead_objects(self) -> None:
        """Forget every object marked as dead."""
        self.all_objects = [obj for obj in self.all_objects if not obj.should_be_dead]
        live = {id(obj) for obj in self.all_objects}
        self.collision_objects = [obj for obj in self.collision_objects if id(obj) in live]

    def visible_objects(self) -> list[Entity]:
        """Objects in drawing order: lower priority layers first, ties by spawn order."""
        return sorted(self.all_objects, key=lambda obj: obj.priority_layer)