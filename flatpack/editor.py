"""Level editor state: the palette, the placed objects and the property editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Callable, Iterator

from flatpack.factory import property_descriptors
from flatpack.geometry import Rect, Vec2
from flatpack.mapfile import PlacedObject, read_map, write_map

ITEM_SIZE = 64.0
ITEM_SPACING = 10.0
MENU_START = Vec2(50.0, 50.0)
MIN_OBJECT_SIZE = 10
FIELD_WIDTH = 180.0
LINE_HEIGHT = 17.0
_IMAGE_DIR = "../imgs/"


def file_stem(path: str) -> str:
    """File name without directory (either slash) and without its last extension."""
    name = path[max(path.rfind("/"), path.rfind("\\")) + 1:]
    dot = name.rfind(".")
    return name[:dot] if dot != -1 else name


def wrap_text(text: str, max_width: float, measure: Callable[[str], float]) -> str:
    """Break text into lines no wider than max_width, one character at a time.

    A line always keeps at least one character, even if that character alone
    is wider than max_width.
    """
    wrapped: list[str] = []
    line = ""
    for char in text:
        if char == "\n":
            wrapped.append(line + "\n")
            line = ""
        elif line and measure(line + char) > max_width:
            wrapped.append(line + "\n")
            line = char
        else:
            line += char
    wrapped.append(line)
    return "".join(wrapped)


def _default_measure(text: str) -> float:
    return 8.0 * len(text)


class Palette:
    """The pick list of objects, terrain textures and backgrounds, in that order."""

    def __init__(self, object_paths, texture_paths, background_paths) -> None:
        self.object_names = [file_stem(path) for path in object_paths]
        self.texture_names = [file_stem(path) for path in texture_paths]
        self.background_names = [file_stem(path) for path in background_paths]
        self.texture_sizes: dict[str, tuple[int, int]] = {}
        self.selected_index = 0
        self.is_open = False

    def __len__(self) -> int:
        return len(self.object_names) + len(self.texture_names) + len(self.background_names)

    @property
    def names(self) -> list[str]:
        """Every entry in palette order."""
        return self.object_names + self.texture_names + self.background_names

    def is_object_selected(self) -> bool:
        return self.selected_index < len(self.object_names)

    def is_background_selected(self) -> bool:
        first = len(self.object_names) + len(self.texture_names)
        return first <= self.selected_index < first + len(self.background_names)

    def selected_name(self) -> str:
        """Name of the selected entry; IndexError when nothing valid is selected."""
        if self.is_object_selected():
            return self.object_names[self.selected_index]
        if self.is_background_selected():
            offset = len(self.object_names) + len(self.texture_names)
            return self.background_names[self.selected_index - offset]
        return self.texture_names[self.selected_index - len(self.object_names)]

    def item_rects(self, window_width: float) -> Iterator[Rect]:
        """Screen rectangles of the entries, laid out in rows that wrap at the window edge."""
        x, y = MENU_START
        for _ in range(len(self)):
            if x + ITEM_SIZE > window_width - MENU_START.x:
                x = MENU_START.x
                y += ITEM_SIZE + ITEM_SPACING
            yield Rect(x, y, ITEM_SIZE, ITEM_SIZE)
            x += ITEM_SIZE + ITEM_SPACING

    def item_at(self, x: float, y: float, window_width: float) -> int | None:
        """Index of the entry under the point, or None."""
        for index, rect in enumerate(self.item_rects(window_width)):
            if rect.contains(x, y):
                return index
        return None


class EditorMap:
    """The objects placed in a level being edited."""

    def __init__(self, palette: Palette, window_size) -> None:
        self.palette = palette
        self.window_size = Vec2(*window_size)
        self.objects: list[PlacedObject] = []
        self.mx = 0
        self.my = 0
        self.property_editor = PropertyEditor()

    def _texture_size(self, name: str, fallback: tuple[int, int]) -> tuple[int, int]:
        return self.palette.texture_sizes.get(name, fallback)

    def add_object(self, x: int, y: int, width: int, height: int, kind: str) -> PlacedObject:
        """Place a new object of kind; sizes below 10 are raised to 10."""
        width = max(width, MIN_OBJECT_SIZE)
        height = max(height, MIN_OBJECT_SIZE)
        palette = self.palette
        obj = PlacedObject(
            kind,
            x=x + self.mx * self.window_size.x,
            y=y + self.my * self.window_size.y,
        )

        if kind == "Background":
            if palette.is_background_selected():
                name = palette.selected_name()
                obj.texture_path = f"{_IMAGE_DIR}{name}.png"
                original_width, original_height = self._texture_size(name, (width, height))
                obj.properties["originalWidth"] = str(original_width)
                obj.properties["originalHeight"] = str(original_height)
                obj.width, obj.height = float(width), float(height)
        elif kind == "Terrain":
            texture_index = palette.selected_index - len(palette.object_names)
            if not palette.is_object_selected() and texture_index < len(palette.texture_names):
                obj.texture_path = f"{_IMAGE_DIR}{palette.texture_names[texture_index]}.png"
                obj.width, obj.height = float(width), float(height)
        elif kind in palette.object_names:
            obj.texture_path = f"{_IMAGE_DIR}{kind}.png"
            obj.x, obj.y = float(x), float(y)
            size = self._texture_size(kind, (width, height))
            obj.width, obj.height = float(size[0]), float(size[1])

        for descriptor in property_descriptors(kind):
            obj.properties[descriptor.name] = descriptor.default_value

        self.objects.append(obj)
        return obj

    def remove_object(self, index: int) -> PlacedObject | None:
        """Remove and return the object at index; out-of-range indices are ignored."""
        if 0 <= index < len(self.objects):
            return self.objects.pop(index)
        return None

    def update_object_property(self, index: int, name: str, value: str) -> None:
        """Set a property of the object at index; out-of-range indices are ignored."""
        if 0 <= index < len(self.objects):
            self.objects[index].properties[name] = value

    def load(self, path: str | PathLike) -> None:
        """Replace the placed objects with those in a map file."""
        self.objects = read_map(path)

    def save(self, path: str | PathLike) -> None:
        write_map(path, self.objects)


@dataclass
class PropertyEditor:
    """Text fields for editing the properties of one placed object."""

    measure: Callable[[str], float] = _default_measure
    selected_object: PlacedObject | None = None
    fields: list[tuple[str, str]] = field(default_factory=list)
    selected_field: int = -1
    is_open: bool = False

    def open_for(self, obj: PlacedObject | None) -> None:
        """Show one field per editable property of obj; None clears the editor."""
        self.selected_object = obj
        self.fields = []
        self.selected_field = -1
        if obj is None:
            return
        for descriptor in property_descriptors(obj.kind):
            value = obj.properties.setdefault(descriptor.name, "")
            self.fields.append((descriptor.name, value))
        self.is_open = True

    def select_field(self, index: int) -> None:
        """Focus a field; an index outside the fields removes the focus."""
        self.selected_field = index if 0 <= index < len(self.fields) else -1

    def handle_text_input(self, char: str) -> None:
        """Type a character into the focused field; backspace deletes the last one."""
        if self.selected_field == -1:
            return
        name, text = self.fields[self.selected_field]
        text = text[:-1] if char == "\b" else text + char
        self.fields[self.selected_field] = (name, text)

    def field_height(self, index: int) -> float:
        """Height of a field's box once its text is wrapped to the field width."""
        text = wrap_text(self.fields[index][1], FIELD_WIDTH, self.measure)
        return (text.count("\n") + 1) * LINE_HEIGHT + 20

    def apply_changes(self) -> None:
        """Write the field texts back into the selected object's properties."""
        if self.selected_object is None:
            return
        descriptors = property_descriptors(self.selected_object.kind)
        for descriptor, (_, text) in zip(descriptors, self.fields):
            self.selected_object.properties[descriptor.name] = text