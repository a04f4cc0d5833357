"""Resource directory layout, relative to an installation home."""

from __future__ import annotations

HOME = "."


def shader_dir(home: str = HOME, use_gles: bool = False) -> str:
    """Directory holding the shader sources for the selected GL flavour."""
    flavour = "gles" if use_gles else "gl"
    return f"{home}/shaders/{flavour}"


def sky_dir(home: str = HOME) -> str:
    """Directory holding the skybox face images."""
    return f"{home}/resources/skybox"


def terrain_dir(home: str = HOME) -> str:
    """Directory holding the scenery terrain tiles."""
    return f"{home}/resources/fg-scenery/Terrain"


def texture_dir(home: str = HOME, tiny: bool = False) -> str:
    """Directory holding the terrain textures, small or full size."""
    size = "small" if tiny else "full"
    return f"{home}/resources/fg-scenery/textures/{size}"