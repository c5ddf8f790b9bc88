"""Spheres, triangle meshes and the scene that holds them for the ray tracer."""

import math
from dataclasses import dataclass, field

from softrender.raymath import (
    K_INFINITY,
    Light,
    RayHit,
    SceneObject,
    Vec2,
    Vec3,
    cross,
    dot,
    lerp,
    normalize,
    solve_quadratic,
)

CHECKER_SCALE = 5.0
CHECKER_DARK = Vec3(0.815, 0.235, 0.031)
CHECKER_LIGHT = Vec3(0.937, 0.937, 0.231)


def ray_triangle_intersect(v0, v1, v2, orig, direction):
    """Möller–Trumbore test; return ``(t, u, v)`` for a hit, otherwise None."""
    e1 = v1 - v0
    e2 = v2 - v0
    s = orig - v0
    s1 = cross(direction, e2)
    s2 = cross(s, e1)
    det = dot(s1, e1)
    if det == 0:
        return None
    inv = 1.0 / det
    t = inv * dot(s2, e2)
    b1 = inv * dot(s1, s)
    b2 = inv * dot(s2, direction)
    if t >= 0 and b1 > 0.0 and b2 > 0.0 and (1 - b1 - b2) > 0.0:
        return t, b1, b2
    return None


class Sphere(SceneObject):
    """A sphere given by its centre and radius."""

    def __init__(self, center, radius):
        super().__init__()
        self.center = center
        self.radius = float(radius)
        self.radius2 = self.radius * self.radius

    def intersect(self, orig, direction):
        """Return the nearest non-negative hit along the ray, or None."""
        offset = orig - self.center
        a = dot(direction, direction)
        b = 2 * dot(direction, offset)
        c = dot(offset, offset) - self.radius2
        roots = solve_quadratic(a, b, c)
        if roots is None:
            return None
        t0, t1 = roots
        if t0 < 0:
            t0 = t1
        if t0 < 0:
            return None
        return RayHit(t0)

    def surface_properties(self, point, direction, index, uv):
        """Return the outward unit normal at ``point`` and zero texture coordinates."""
        return normalize(point - self.center), Vec2()


class MeshTriangle(SceneObject):
    """A triangle mesh with per-vertex texture coordinates and a checker pattern."""

    def __init__(self, vertices, vertex_index, num_triangles, st_coordinates):
        super().__init__()
        indices = tuple(int(i) for i in vertex_index[: num_triangles * 3])
        if len(indices) != num_triangles * 3:
            raise ValueError("not enough vertex indices for the triangle count")
        max_index = max(indices, default=-1) + 1
        if len(vertices) < max_index or len(st_coordinates) < max_index:
            raise ValueError("vertex index refers past the given vertices")
        self.vertices = tuple(vertices[:max_index])
        self.vertex_index = indices
        self.num_triangles = num_triangles
        self.st_coordinates = tuple(st_coordinates[:max_index])

    def _corners(self, index):
        i0, i1, i2 = self.vertex_index[index * 3:index * 3 + 3]
        return (i0, i1, i2), (self.vertices[i0], self.vertices[i1], self.vertices[i2])

    def intersect(self, orig, direction):
        """Return the nearest triangle hit along the ray, or None."""
        best = None
        t_near = K_INFINITY
        for k in range(self.num_triangles):
            _, (v0, v1, v2) = self._corners(k)
            found = ray_triangle_intersect(v0, v1, v2, orig, direction)
            if found is not None and found[0] < t_near:
                t_near, u, v = found
                best = RayHit(t_near, k, Vec2(u, v))
        return best

    def surface_properties(self, point, direction, index, uv):
        """Return the face normal and interpolated texture coordinates of a hit."""
        (i0, i1, i2), (v0, v1, v2) = self._corners(index)
        e0 = normalize(v1 - v0)
        e1 = normalize(v2 - v1)
        normal = normalize(cross(e0, e1))
        st0, st1, st2 = (self.st_coordinates[i] for i in (i0, i1, i2))
        st = st0 * (1 - uv.x - uv.y) + st1 * uv.x + st2 * uv.y
        return normal, st

    def eval_diffuse_color(self, st):
        """Return the checkerboard colour at ``st``."""
        pattern = (math.fmod(st.x * CHECKER_SCALE, 1) > 0.5) ^ (
            math.fmod(st.y * CHECKER_SCALE, 1) > 0.5
        )
        return lerp(CHECKER_DARK, CHECKER_LIGHT, float(pattern))


@dataclass
class Scene:
    """Render options plus the objects and lights to trace against."""

    width: int = 1280
    height: int = 960
    fov: float = 90.0
    background_color: Vec3 = field(
        default_factory=lambda: Vec3(0.235294, 0.67451, 0.843137)
    )
    max_depth: int = 5
    epsilon: float = 0.00001
    objects: list = field(default_factory=list)
    lights: list = field(default_factory=list)

    def add(self, item):
        """Add a scene object or a light."""
        if isinstance(item, Light):
            self.lights.append(item)
        elif isinstance(item, SceneObject):
            self.objects.append(item)
        else:
            raise TypeError(f"cannot add {type(item).__name__} to a scene")