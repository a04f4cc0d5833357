# terrainview

Building blocks for preparing scenery terrain for rendering: geodetic
conversions, quaternion helpers, bounding spheres, de-duplicating vertex
sets, meshes made of per-material triangle groups, reading of `.stg` tile
descriptors, a texture store keyed by material name, and a plane that serves
as camera and computes its view matrix from a geodetic position and an
attitude.

## Installation

    pip install .

To run the tests, install the test extra and run pytest:

    pip install ".[test]"
    pytest

## Modules

- `terrainview.dirs`: resource directory layout relative to an installation
  home (default `"."`): `shader_dir(home, use_gles)`, `sky_dir(home)`,
  `terrain_dir(home)`, `texture_dir(home, tiny)`.
- `terrainview.vec`: frozen, iterable `Vec3` and `Vec2` dataclasses;
  `normalize(v)` returns a unit vector (or the zero vector for a vector too
  short to normalise) and `dist_sqr(a, b)` the squared distance.
- `terrainview.sphere`: `BoundingSphere`, empty while its radius is negative.
  `expand_by(v)` grows it just enough to contain a point.
- `terrainview.geod`: `geod_to_cart(latitude, longitude, altitude)` turns
  degrees and metres on the WGS84 ellipsoid into earth-centred `(X, Y, Z)`
  metres.
- `terrainview.quat`: quaternions as `(x, y, z, w)` tuples —
  `quat_from_euler` (radians), `quat_from_ypr` (degrees), `quat_from_lon_lat`
  (degrees), `quat_mul`, `quat_inv` (raises `ZeroDivisionError` for a zero
  quaternion) and `quat_to_mat4`, which returns a 4x4 numpy rotation matrix.
- `terrainview.misc`: `normalize_periodic(min_value, max_value, value)`
  wraps a value into `[min_value, max_value[`; `sized_unit_text` and
  `sized_unit_value` express a byte count in Bytes, KB, MB or GB;
  `mkdir_p(path, mode)` creates a directory and its parents;
  `create_path(filename)` creates the directories leading to a file and
  reports whether they exist.
- `terrainview.vertex_set`: `VertexSet` stores each distinct
  position/texture-coordinate pair once as an `IndexedVertex`, numbered in
  insertion order. `add_vertex` returns the existing vertex or a new one,
  `get_vertex` returns it or `None`, and `flatten()` returns float32 arrays
  of positions `(n, 3)` and texture coordinates `(n, 2)` ordered by index.
  `INDICE_MAX` is the largest index a 16-bit index type can hold.
- `terrainview.stg_object`: `StgObject` opens a `.stg` file and returns the
  data of `VERB data` lines. `get_value(verb, concat_base)` reads forward to
  the next matching line (prefixing the file's directory when `concat_base`
  is true) and returns `None` when none is left; `values` yields every
  remaining match; `rewind` goes back to the top. It is a context manager.
- `terrainview.texture`: `texture_file_for(name, tex_dir)` maps a material
  name to its image path (or `None`); `Texture.load()` reads an RGB or RGBA
  image with Pillow and raises `TextureError` otherwise; `TextureStore`
  loads a texture the first time its material is asked for, gives it an id,
  and returns the same object afterwards (`None` for unknown materials).
- `terrainview.mesh`: `VGroup` holds the triangles of one material, with a
  bounding sphere; `finish(gbs)` flattens its vertices into arrays and moves
  its sphere by the centre of `gbs`. A warning is issued for index values
  beyond `INDICE_MAX`. `Mesh` has a fixed number of group slots
  (`set_size`, `add_vgroup`, which raises `MeshError` when no slot is free),
  a chain of accessory meshes (`add_accessory`; iterating a mesh yields it
  and then its accessories), `get_size(data_only)` memory accounting and
  `dump()` to print finished groups.
- `terrainview.plane`: `Plane` keeps a geodetic position, its ECEF
  counterpart, an attitude and speeds. `set_position`, `set_attitude` and
  `update_position` (which derives an ECEF velocity over `dt` seconds) mark
  it dirty; `update_view()` then applies pending motion and rebuilds the
  4x4 `view` matrix. `dump()` prints its state.

## Example

    from terrainview.vec import Vec2, Vec3
    from terrainview.mesh import Mesh
    from terrainview.plane import Plane

    mesh = Mesh(1)
    group = mesh.add_vgroup("Grass", 1)
    group.add_triangle(
        Vec3(0.0, 0.0, 0.0), Vec2(0.0, 0.0),
        Vec3(1.0, 0.0, 0.0), Vec2(1.0, 0.0),
        Vec3(0.0, 1.0, 0.0), Vec2(0.0, 1.0),
    )
    group.finish(mesh.bs)
    print(group.n_vertices, group.indices, mesh.get_size(data_only=True))

    plane = Plane()
    plane.set_position(45.2, 5.8, 1000.0)
    plane.set_attitude(0.0, 5.0, 90.0)
    plane.update_view()
    print(plane.view)

## What this package does not do

It prepares data only. It opens no window and issues no drawing calls:
there are no shaders, no GPU buffers, no skybox and no frame loop, so
`Texture` objects carry pixel data and an id but are never uploaded, and a
`Mesh` is never drawn. It does not read binary terrain tiles, fetch scenery
files or choose which tiles surround a position; meshes are filled through
`Mesh.add_vgroup` and `VGroup.add_triangle`. There is no command to run.