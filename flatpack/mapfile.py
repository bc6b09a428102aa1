"""Reading and writing the binary level file format."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO, Iterable

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


class MapFormatError(ValueError):
    """The level data is truncated or malformed."""


@dataclass
class PlacedObject:
    """An object placed in a level, as stored in a map file."""

    kind: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    texture_path: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    id: int = -1
    respawn: bool = True


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise MapFormatError(f"expected {size} bytes, got {len(data)}")
    return data


def _read_int(stream: BinaryIO) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size))[0]


def _read_float(stream: BinaryIO) -> float:
    return _FLOAT.unpack(_read_exact(stream, _FLOAT.size))[0]


def _read_string(stream: BinaryIO) -> str:
    length = _read_int(stream)
    if length < 0:
        raise MapFormatError(f"negative string length {length}")
    return _read_exact(stream, length).decode("utf-8")


def _write_string(stream: BinaryIO, text: str) -> None:
    data = text.encode("utf-8")
    stream.write(_INT.pack(len(data)))
    stream.write(data)


def load_map(stream: BinaryIO) -> list[PlacedObject]:
    """Parse every placed object from a binary stream."""
    count = _read_int(stream)
    if count < 0:
        raise MapFormatError(f"negative object count {count}")
    objects = []
    for _ in range(count):
        kind = _read_string(stream)
        x, y, width, height = (_read_float(stream) for _ in range(4))
        texture_path = _read_string(stream)
        property_count = _read_int(stream)
        if property_count < 0:
            raise MapFormatError(f"negative property count {property_count}")
        properties = {}
        for _ in range(property_count):
            name = _read_string(stream)
            properties[name] = _read_string(stream)
        objects.append(PlacedObject(kind, x, y, width, height, texture_path, properties))
    return objects


def dump_map(stream: BinaryIO, objects: Iterable[PlacedObject]) -> None:
    """Write objects to a binary stream; properties are stored sorted by name."""
    objects = list(objects)
    stream.write(_INT.pack(len(objects)))
    for obj in objects:
        _write_string(stream, obj.kind)
        for value in (obj.x, obj.y, obj.width, obj.height):
            stream.write(_FLOAT.pack(value))
        _write_string(stream, obj.texture_path)
        stream.write(_INT.pack(len(obj.properties)))
        for name in sorted(obj.properties):
            _write_string(stream, name)
            _write_string(stream, obj.properties[name])


def read_map(path: str | PathLike) -> list[PlacedObject]:
    """Load a map file from disk."""
    with open(path, "rb") as stream:
        return load_map(stream)


def write_map(path: str | PathLike, objects: Iterable[PlacedObject]) -> None:
    """Save objects to a map file on disk."""
    with open(path, "wb") as stream:
        dump_map(stream, objects)