"""Terrain meshes: vertex groups sharing a material, chained with accessories."""

from __future__ import annotations

import warnings
from typing import Iterator

import numpy as np

from .sphere import BoundingSphere
from .vec import Vec2, Vec3
from .vertex_set import INDICE_MAX, VertexSet

# Storage sizes of the per-vertex and per-index records, in bytes.
POSITION_SIZE = 12  # three 32-bit floats
TEXCOORD_SIZE = 8  # two 32-bit floats
INDICE_SIZE = 2  # one 16-bit unsigned index
# Bookkeeping overhead accounted for a group and a mesh, in bytes.
VGROUP_STRUCT_SIZE = 128
MESH_STRUCT_SIZE = 184


class MeshError(Exception):
    """Raised when a mesh or one of its groups cannot do what was asked."""


class VGroup:
    """Triangles sharing one material, indexed into deduplicated vertices."""

    def __init__(self, material: str, n_triangles: int) -> None:
        if n_triangles < 0:
            raise ValueError("number of triangles must not be negative")
        self.material = material
        self.allocated_indices = n_triangles * 3
        self.indices: list[int] = []
        # Optimistic guess: 30% fewer distinct vertices than indices.
        self.vset: VertexSet | None = VertexSet(int(self.allocated_indices * 0.7))
        self.positions: np.ndarray | None = None
        self.texcoords: np.ndarray | None = None
        self.n_vertices = 0
        self.bs = BoundingSphere()

    @property
    def n_indices(self) -> int:
        return len(self.indices)

    @property
    def finished(self) -> bool:
        return self.positions is not None

    def add_vertex(self, v: Vec3, tex: Vec2) -> int:
        """Index of the vertex with these properties, adding it if new."""
        if self.vset is None:
            raise MeshError("cannot add vertices to a finished group")
        vertex = self.vset.add_vertex(v, tex)
        self.bs.expand_by(v)
        return vertex.index

    def add_triangle(
        self, v1: Vec3, t1: Vec2, v2: Vec3, t2: Vec2, v3: Vec3, t3: Vec2
    ) -> bool:
        """Add a triangle given its three positions and texture coordinates."""
        idx = [self.add_vertex(v1, t1), self.add_vertex(v2, t2), self.add_vertex(v3, t3)]
        for i in idx:
            if i > INDICE_MAX:
                warnings.warn(
                    f"group {self.material!r} has index value {i} greater than "
                    f"what can be stored in {INDICE_SIZE} bytes",
                    RuntimeWarning,
                    stacklevel=2,
                )
        self.indices.extend(idx)
        return True

    def get_size(self, data_only: bool = False) -> int:
        """Memory used by the group in bytes.

        With ``data_only`` only vertex data and used indices are counted;
        otherwise allocated indices and bookkeeping overhead are included.
        """
        size = (POSITION_SIZE + TEXCOORD_SIZE) * self.n_vertices
        if data_only:
            return size + INDICE_SIZE * self.n_indices
        return size + INDICE_SIZE * self.allocated_indices + VGROUP_STRUCT_SIZE

    def finish(self, gbs: BoundingSphere) -> bool:
        """Flatten the vertices into arrays and move the bounding sphere by
        the centre of ``gbs``. Returns False if already finished."""
        if self.finished:
            return False
        assert self.vset is not None
        self.positions, self.texcoords = self.vset.flatten()
        self.n_vertices = len(self.vset)
        self.vset = None
        c, g = self.bs.center, gbs.center
        self.bs.center = Vec3(c.x + g.x, c.y + g.y, c.z + g.z)
        return True


class Mesh:
    """A fixed number of group slots plus a chain of accessory meshes."""

    def __init__(self, size: int = 0) -> None:
        self.groups: list[VGroup | None] = []
        self.transformation = np.identity(4)
        self.bs = BoundingSphere()
        self.next: Mesh | None = None
        self.set_size(size)

    @property
    def n_groups(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator["Mesh"]:
        """Yield this mesh and then each accessory in the chain."""
        mesh: Mesh | None = self
        while mesh is not None:
            yield mesh
            mesh = mesh.next

    def add_accessory(self, accessory: "Mesh") -> None:
        """Append ``accessory`` at the end of the accessory chain."""
        last = self
        while last.next is not None:
            last = last.next
        last.next = accessory

    def set_size(self, size: int) -> None:
        """Resize the group slots; new slots are free, extra ones dropped."""
        if size < 0:
            raise ValueError("mesh size must not be negative")
        if size <= len(self.groups):
            del self.groups[size:]
        else:
            self.groups.extend([None] * (size - len(self.groups)))

    def add_vgroup(self, material: str, n_triangles: int) -> VGroup:
        """Create a group in the first free slot."""
        for i, group in enumerate(self.groups):
            if group is None:
                group = VGroup(material, n_triangles)
                self.groups[i] = group
                return group
        raise MeshError(f"no free group slot for {material!r} ({n_triangles} triangles)")

    def get_size(self, data_only: bool = False) -> int:
        """Memory used by the mesh's groups in bytes (accessories excluded)."""
        total = 0
        for group in self.groups:
            if group is not None:
                total += group.get_size(data_only)
            elif not data_only:
                total += VGROUP_STRUCT_SIZE
        if not data_only:
            total += MESH_STRUCT_SIZE
        return total

    def dump(self) -> None:
        """Print every group's indices and the vertex data they point at."""
        print(f"Dumping Mesh {id(self):#x}")
        for i, group in enumerate(self.groups):
            if group is None:
                continue
            if not group.finished:
                raise MeshError(f"group #{i} must be finished before dumping")
            print(f"Group #{i} ({group.material}) {group.n_indices} indices:")
            if group.n_indices % 3 != 0:
                print(
                    f"WARNING: Group #{i} as a number of vertices that don't "
                    "match a set of triangles"
                )
            assert group.positions is not None and group.texcoords is not None
            for j, idx in enumerate(group.indices):
                px, py, pz = group.positions[idx]
                tx, ty = group.texcoords[idx]
                print(
                    f"indice[{j}] -> Vertex[{idx}]: pos:{px:0.5f} {py:0.5f} {pz:0.5f} "
                    f"tex: {tx:0.5f} {ty:0.5f}"
                )
        print(f"Mesh {id(self):#x} dumped")