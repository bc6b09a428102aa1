"""Game-world model for a side-scrolling game: geometry, collisions, camera, entities, binary level files, an editor core and menu screens."""

__version__ = "0.1.0"