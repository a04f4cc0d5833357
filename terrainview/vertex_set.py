"""A set of vertices that stores each distinct vertex exactly once."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .vec import Vec2, Vec3

# Largest index value storable by the 16-bit index type used for drawing.
INDICE_MAX = 0xFFFF


@dataclass(frozen=True)
class IndexedVertex:
    """A vertex together with its index in the flattened arrays."""

    index: int
    position: Vec3
    texcoords: Vec2


class VertexSet:
    """Deduplicating vertex store; indices follow insertion order."""

    def __init__(self, size_hint: int = 0) -> None:
        if size_hint < 0:
            raise ValueError("size hint must not be negative")
        self.size_hint = size_hint
        self._vertices: dict[tuple[Vec3, Vec2], IndexedVertex] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices.values())

    def add_vertex(self, position: Vec3, texcoords: Vec2) -> IndexedVertex:
        """Return the stored vertex with these properties, adding it if new."""
        key = (position, texcoords)
        vertex = self._vertices.get(key)
        if vertex is None:
            vertex = IndexedVertex(len(self._vertices), position, texcoords)
            self._vertices[key] = vertex
        return vertex

    def get_vertex(self, position: Vec3, texcoords: Vec2) -> IndexedVertex | None:
        """Return the stored vertex with these properties, or None."""
        return self._vertices.get((position, texcoords))

    def flatten(self) -> tuple[np.ndarray, np.ndarray]:
        """Positions (n, 3) and texture coordinates (n, 2) as float32, by index."""
        n = len(self._vertices)
        positions = np.empty((n, 3), dtype=np.float32)
        texcoords = np.empty((n, 2), dtype=np.float32)
        for vertex in self._vertices.values():
            positions[vertex.index] = tuple(vertex.position)
            texcoords[vertex.index] = tuple(vertex.texcoords)
        return positions, texcoords