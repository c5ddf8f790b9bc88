# softrender

Building blocks for a small software renderer, written with NumPy and Pillow.

## Modules

- `softrender.transforms`: 4×4 NumPy matrices. `view_matrix(eye_pos)`,
  `rotate_z(angle_deg)`, `spot_model_matrix(angle_deg)` (rotation about y, then
  scale 2.5) and `projection_matrix(eye_fov, aspect_ratio, z_near, z_far, flip_xy=False)`.
- `softrender.triangle`: `Triangle`, with per-vertex homogeneous positions,
  colours, texture coordinates and normals. Colours are given in 0–255 and stored
  in 0–1. `set_color` raises `ValueError` for values outside 0–255, and a vertex
  index other than 0, 1 or 2 raises `IndexError`.
- `softrender.texture`: `Texture`, an RGB image sampled with `color_at(u, v)`
  (nearest texel) or `color_bilinear(u, v)`. Coordinates are clamped to [0, 1].
  `Texture.from_file(path)` loads an image with Pillow. It also holds the
  `FragmentPayload` and `VertexPayload` data classes.
- `softrender.objgeom`: `Vector2`, `Vector3`, `Vertex`, `Material`, `Mesh`, vector
  helpers (`cross`, `dot`, `magnitude`, `angle_between`, `project`, `same_side`,
  `triangle_normal`, `in_triangle`) and OBJ text helpers (`split`, `tail`,
  `first_token`, `get_element`).
- `softrender.objtriangulate`: `vertices_from_face` builds vertices from an `f`
  line (`v`, `v/vt`, `v//vn` or `v/vt/vn`). `triangulate` ear-clips a polygon into
  triangle indices.
- `softrender.objloader`: `Loader`, which reads `.obj` files and the `.mtl`
  libraries they name.
- `softrender.raymath`: `Vec3`, `Vec2`, `MaterialType`, `Light`, `RayHit`, the
  abstract `SceneObject`, and the helpers `lerp`, `normalize`, `dot`, `cross`,
  `clamp`, `solve_quadratic`, `random_float` and `progress_bar`.
- `softrender.shapes`: `Sphere`, `MeshTriangle` (a mesh with a checkerboard diffuse
  colour), `ray_triangle_intersect` (Möller–Trumbore) and `Scene`, which holds
  render options, objects and lights.
- `softrender.optics`: `reflect`, `refract` (Snell's law, zero vector on total
  internal reflection) and `fresnel`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Transforms:

```python
from softrender.transforms import view_matrix, rotate_z, projection_matrix

mvp = projection_matrix(45, 1, 0.1, 50) @ view_matrix((0, 0, 5)) @ rotate_z(45)
```

Ray intersection and optics:

```python
from softrender.raymath import Vec3, Light, MaterialType
from softrender.shapes import Scene, Sphere
from softrender.optics import fresnel

scene = Scene(320, 240)
ball = Sphere(Vec3(0, 0, -8), 1.5)
ball.material_type = MaterialType.REFLECTION_AND_REFRACTION
scene.add(ball)
scene.add(Light(Vec3(-20, 70, 20), Vec3(0.5, 0.5, 0.5)))

direction = Vec3(0, 0, -1)
hit = ball.intersect(Vec3(0, 0, 0), direction)
if hit is not None:
    point = direction * hit.t_near
    normal, _ = ball.surface_properties(point, direction, hit.index, hit.uv)
    kr = fresnel(direction, normal, ball.ior)
```

Loading an OBJ file:

```python
from softrender.objloader import Loader

loader = Loader()
if loader.load_file("model.obj"):
    for mesh in loader.loaded_meshes:
        print(mesh.name, len(mesh.vertices), mesh.material.name)
```

`load_file` raises `ValueError` for a path that does not end in `.obj` and
`OSError` when the file cannot be read. It skips a material library that cannot
be read. Materials accumulate across loads, while meshes, vertices and indices are
replaced by each load.

## What the package does not do

The package has no rasterizer that fills a frame buffer, no fragment shaders, no
ray-tracing render loop and no image output of rendered frames. It installs no
command-line programs. It provides the matrices, geometry, textures, model
loading, intersection tests and optics from which such a renderer is built.

## Conventions

- Depth is a positive distance, and smaller values are nearer.
- Texture colours are returned in 0–255 as NumPy arrays.