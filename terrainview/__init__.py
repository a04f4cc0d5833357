"""Terrain scenery building blocks: geodesy, quaternions, vertex sets, meshes, STG files, textures and a plane camera."""

__version__ = "0.1.0"

__all__ = [
    "dirs",
    "vec",
    "sphere",
    "geod",
    "quat",
    "misc",
    "vertex_set",
    "stg_object",
    "texture",
    "mesh",
    "plane",
]