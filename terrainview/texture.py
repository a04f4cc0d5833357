"""Material name to texture image lookup and a cache of loaded textures."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from .dirs import texture_dir


class TextureError(Exception):
    """Raised when a texture image cannot be loaded."""


_TERRAIN = {
    "Freeway": "asphalt", "Railroad": "gravel", "Stream": "water-lake",
    "Watercourse": "water-lake", "Canal": "water-lake", "Urban": "city1",
    "DryCrop": "drycrop1", "IrrCrop": "irrcrop1", "ComplexCrop": "mixedcrop1",
    "NaturalCrop": "naturalcrop1", "CropGrass": "cropgrass1", "Grassland": "cropgrass1",
    "Scrub": "shrub1", "DeciduousForest": "deciduous1", "EvergreenForest": "forest1a",
    "MixedForest": "mixedforest", "Sclerophyllous": "shrub1", "Airport": "airport",
    "Grass": "airport", "BarrenCover": "rock", "Glacier": "glacier3",
    "GolfCourse": "golfcourse1", "Greenspace": "airport", "Heath": "deciduous1",
    "Industrial": "city1", "Lake": "water-lake", "OpenMining": "rock",
    "Orchard": "irrcrop1", "Road": "asphalt", "Rock": "rock", "Town": "Town1",
    "Transport": "gravel", "Vineyard": "irrcrop1",
    "AgroForest": "cropwood", "Asphalt": "asphalt", "BareTundraCover": "tundra",
    "Bog": "deciduous1", "BuiltUpCover": "city1", "Burnt": "lava1",
    "Cemetery": "tundra", "Construction": "city1", "CropWoodCover": "cropwood",
    "CropWood": "cropwood", "DeciduousBroadCover": "deciduous1",
    "DeciduousNeedleCover": "dec_evergreen", "Default": "forest1a",
    "Dirt": "rock", "Dump": "rock", "Estuary": "water-lake",
    "EvergreenBroadCover": "forest1a", "EvergreenNeedleCover": "evergreen",
    "FloodLand": "marsh2", "Gravel": "gravel", "HerbTundraCover": "herbtundra",
    "HerbTundra": "herbtundra", "HerbWetlandCover": "marsh2",
    "IntermittentReservoir": "sand1", "Island": "forest1a", "Lagoon": "water-lake",
    "Landmass": "forest1a", "Lava": "lava1", "Littoral": "tidal", "Marsh": "marsh2",
    "MixedCropPastureCover": "mixedcrop1", "MixedCrop": "mixedcrop1",
    "MixedTundraCover": "tundra", "Ocean": "water", "Olives": "irrcrop1",
    "PackIce": "packice1", "PolarIce": "glacier3", "Pond": "water-lake",
    "Port": "city1", "RainForest": "mixedforest", "Reservoir": "water-lake",
    "Rice": "irrcrop1", "Saline": "water-lake", "SaltMarsh": "marsh2",
    "Sand": "sand4", "SavannaCover": "savanna", "ShrubCover": "shrub1",
    "SnowCover": "snow1", "SomeSort": "forest1a", "Unknown": "unknown",
    "WoodedTundraCover": "evergreen", "WoodedWetlandCover": "marsh2",
    "SubUrban": "Town1",
}

_OTHER = {
    "BidirectionalTaper": "Symbols/bidirectional",
    "BlackSign": "Signs/black",
    "FramedSign": "Signs/framed",
    "RedSign": "Signs/red",
    "signcase": "Signs/signs_case",
    "SpecialSign": "Signs/special",
    "UnidirectionalTaperGreen": "Symbols/unidirectionalgreen",
    "UnidirectionalTaperRed": "Symbols/unidirectionalred",
    "UnidirectionalTaper": "Symbols/unidirectional",
    "YellowSign": "Signs/yellow",
    "pa_shoulder_f": "Runway/pa_shoulder_f1",
    "pc_heli": "Runway/pc_helipad",
    "pa_heli": "Runway/pa_helipad",
    "lf_solid_white_border": "Runway/lf_sng_solid_white_border",
}

_PC_DESIGNATORS = (
    "0l 0r 11 1c 1l 1r 2c 2l 2r 3c 3l 3r 4c 4r 5c 5r 6c 6r 7c 7r 8c 8r 9c 9r"
).split()
_PA_DESIGNATORS = (
    "0l 2l 2r 4r 0r 11 1c 1l 1r 2c 3c 3l 3r 4c 5c 5r 6c 6r 7c 7r 8c 8r 9c 9r"
).split()
_PC_MARKINGS = (
    "aim aim_uk centerline C L rest R taxiway threshold "
    "tz_one_a tz_one_b tz_three tz_two_a tz_two_b"
).split()
_PC_EXTRA = "dspl_arrows dspl_thresh no_threshold shoulder_f shoulder stopway".split()
_PA_EXTRA = (
    "aim centerline dspl_arrows dspl_thresh rest threshold C L no_threshold R "
    "shoulder stopway taxiway tiedown tz_one_a tz_one_b tz_three tz_two_a tz_two_b"
).split()
_LINE_FEATURES = (
    "lf_dbl_solid_yellow lf_runway_hold_border lf_broken_red_border "
    "lf_broken_white_border lf_broken_white lf_checkerboard_white "
    "lf_dbl_lane_queue_border lf_dbl_lane_queue lf_ils_hold_border lf_ils_hold "
    "lf_other_hold_border lf_other_hold lf_runway_hold "
    "lf_safetyzone_centerline_border lf_safetyzone_centerline lf_sng_broken_red "
    "lf_sng_broken_yellow_border lf_sng_broken_yellow lf_sng_lane_queue_border "
    "lf_sng_lane_queue lf_sng_solid_blue lf_sng_solid_green lf_sng_solid_orange "
    "lf_sng_solid_red lf_sng_solid_white lf_sng_solid_yellow_border "
    "lf_sng_solid_yellow lf_solid_blue_border lf_solid_green_border "
    "lf_solid_orange_border lf_solid_red_border"
).split()


def _build_material_files() -> dict[str, str]:
    files = {name: f"Terrain/{stem}.png" for name, stem in _TERRAIN.items()}
    files.update({name: f"{stem}.png" for name, stem in _OTHER.items()})
    runway_same = [
        *_LINE_FEATURES,
        "pc_tiedown", "grass_rwy", "dirt_rwy", "lakebed_taxiway",
        *(f"pa_{s}" for s in (*_PA_DESIGNATORS, *_PA_EXTRA)),
        *(f"pc_{s}" for s in (*_PC_DESIGNATORS, *_PC_MARKINGS, *_PC_EXTRA)),
    ]
    files.update({name: f"Runway/{name}.png" for name in runway_same})
    files.update(
        {f"dirt_rwy{s}": f"Runway/pc_{s}.png" for s in (*_PC_DESIGNATORS, *_PC_MARKINGS)}
    )
    return files


# Material name -> image path relative to the texture directory.
MATERIAL_FILES: dict[str, str] = _build_material_files()


def texture_file_for(name: str, tex_dir: str | None = None) -> str | None:
    """Image file used for material ``name``, or None for an unknown material."""
    rel = MATERIAL_FILES.get(name)
    if rel is None:
        return None
    base = texture_dir() if tex_dir is None else tex_dir
    return f"{base}/{rel}"


@dataclass
class Texture:
    """An RGB or RGBA image used to texture terrain."""

    filename: str
    name: str | None = None
    id: int = 0
    width: int = 0
    height: int = 0
    mode: str = ""
    pixels: bytes = b""

    @property
    def bytes_per_pixel(self) -> int:
        return len(self.mode)

    def load(self) -> "Texture":
        """Read the image file; only 3 or 4 bytes per pixel are accepted."""
        try:
            with Image.open(self.filename) as img:
                img.load()
                mode = img.mode
                if mode not in ("RGB", "RGBA"):
                    bpp = len(img.getbands())
                    raise TextureError(f"Unknown image format: {bpp} Bytes per pixel")
                self.width, self.height = img.size
                self.mode = mode
                self.pixels = img.tobytes()
        except OSError as exc:
            raise TextureError(f"couldn't load {self.filename}: {exc}") from exc
        return self


class TextureStore:
    """Loads textures on first use and hands back the same object afterwards."""

    def __init__(self, tex_dir: str | None = None) -> None:
        self.tex_dir = texture_dir() if tex_dir is None else tex_dir
        self._textures: list[Texture] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._textures)

    def get_by_name(self, name: str) -> Texture | None:
        """Texture for material ``name``, loading it if needed; None if unknown."""
        for texture in self._textures:
            if texture.name == name:
                return texture
        filename = texture_file_for(name, self.tex_dir)
        if filename is None:
            return None
        texture = Texture(filename, name).load()
        texture.id = self._next_id
        self._next_id += 1
        self._textures.append(texture)
        return texture

    def shutdown(self) -> None:
        """Drop every loaded texture."""
        self._textures.clear()