"""Vector types, helpers and the scene object base for the ray tracer."""

import enum
import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

K_INFINITY = 3.4028234663852886e38
BAR_WIDTH = 70


@dataclass(frozen=True)
class Vec3:
    """Immutable 3-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value):
        """Return a vector with every component equal to ``value``."""
        return cls(value, value, value)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other):
        return self * other

    def __truediv__(self, r):
        return Vec3(self.x / r, self.y / r, self.z / r)

    def __str__(self):
        return f"{self.x:g}, {self.y:g}, {self.z:g}"


@dataclass(frozen=True)
class Vec2:
    """Immutable 2-component vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value):
        """Return a vector with both components equal to ``value``."""
        return cls(value, value)

    def __iter__(self):
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, r):
        return Vec2(self.x * r, self.y * r)

    def __rmul__(self, r):
        return self * r


class MaterialType(enum.Enum):
    """How a surface interacts with light."""

    DIFFUSE_AND_GLOSSY = 0
    REFLECTION_AND_REFRACTION = 1
    REFLECTION = 2


@dataclass
class Light:
    """Point light; a number given for either field is spread over all components."""

    position: Vec3
    intensity: Vec3

    def __post_init__(self):
        if not isinstance(self.position, Vec3):
            self.position = Vec3.splat(float(self.position))
        if not isinstance(self.intensity, Vec3):
            self.intensity = Vec3.splat(float(self.intensity))


@dataclass(frozen=True)
class RayHit:
    """Distance along a ray to a hit, with the primitive index and barycentric uv."""

    t_near: float
    index: int = 0
    uv: Vec2 = field(default_factory=Vec2)


class SceneObject(ABC):
    """A renderable object with material properties."""

    def __init__(self):
        self.material_type = MaterialType.DIFFUSE_AND_GLOSSY
        self.ior = 1.3
        self.kd = 0.8
        self.ks = 0.2
        self.diffuse_color = Vec3.splat(0.2)
        self.specular_exponent = 25.0

    @abstractmethod
    def intersect(self, orig, direction):
        """Return the nearest RayHit along the ray, or None."""

    @abstractmethod
    def surface_properties(self, point, direction, index, uv):
        """Return ``(normal, st)`` at a hit point."""

    def eval_diffuse_color(self, st):
        """Return the diffuse colour at texture coordinates ``st``."""
        return self.diffuse_color


def lerp(a, b, t):
    """Linear interpolation between two vectors."""
    return a * (1 - t) + b * t


def normalize(v):
    """Return ``v`` scaled to unit length; a zero vector is returned unchanged."""
    mag2 = v.x * v.x + v.y * v.y + v.z * v.z
    if mag2 > 0:
        inv = 1 / math.sqrt(mag2)
        return Vec3(v.x * inv, v.y * inv, v.z * inv)
    return v


def dot(a, b):
    """Dot product."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a, b):
    """Cross product."""
    return Vec3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def clamp(lo, hi, v):
    """Clamp ``v`` into ``[lo, hi]``."""
    return max(lo, min(hi, v))


def solve_quadratic(a, b, c):
    """Return the real roots of ``a*x^2 + b*x + c`` in ascending order, or None."""
    discr = b * b - 4 * a * c
    if discr < 0:
        return None
    if discr == 0:
        x0 = x1 = -0.5 * b / a
    else:
        root = math.sqrt(discr)
        q = -0.5 * (b + root) if b > 0 else -0.5 * (b - root)
        x0 = q / a
        x1 = c / q
    return (x0, x1) if x0 <= x1 else (x1, x0)


def random_float():
    """Return a uniform random number in ``[0, 1)``."""
    return random.random()


def progress_bar(progress):
    """Return a text progress bar for a fraction between 0 and 1."""
    pos = int(BAR_WIDTH * progress)
    cells = "".join(
        "=" if i < pos else ">" if i == pos else " " for i in range(BAR_WIDTH)
    )
    return f"[{cells}] {int(progress * 100.0)} %"