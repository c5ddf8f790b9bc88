"""Geometry types and text helpers used by the OBJ loader."""

import math
import re
from dataclasses import dataclass, field

_BLANKS = " \t"
_STOI = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self * scalar


@dataclass(frozen=True)
class Vector3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self * scalar

    def __truediv__(self, scalar):
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)


@dataclass
class Vertex:
    """A model vertex: position, normal and texture coordinate."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    texture_coordinate: Vector2 = field(default_factory=Vector2)


@dataclass
class Material:
    """Material properties read from an .mtl file."""

    name: str = ""
    ka: Vector3 = field(default_factory=Vector3)
    kd: Vector3 = field(default_factory=Vector3)
    ks: Vector3 = field(default_factory=Vector3)
    ns: float = 0.0
    ni: float = 0.0
    d: float = 0.0
    illum: int = 0
    map_ka: str = ""
    map_kd: str = ""
    map_ks: str = ""
    map_ns: str = ""
    map_d: str = ""
    map_bump: str = ""


@dataclass
class Mesh:
    """A named list of vertices with triangle indices and a material."""

    vertices: list = field(default_factory=list)
    indices: list = field(default_factory=list)
    name: str = ""
    material: Material = field(default_factory=Material)


def cross(a, b):
    """Cross product."""
    return Vector3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def magnitude(v):
    """Euclidean length."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def dot(a, b):
    """Dot product."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def angle_between(a, b):
    """Angle in radians between two vectors; NaN when it is undefined."""
    denom = magnitude(a) * magnitude(b)
    if denom == 0:
        return math.nan
    cosine = dot(a, b) / denom
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine)


def project(a, b):
    """Projection of ``a`` onto ``b``."""
    bn = b / magnitude(b)
    return bn * dot(a, bn)


def same_side(p1, p2, a, b):
    """Whether ``p1`` and ``p2`` lie on the same side of the line through ``a`` and ``b``."""
    edge = b - a
    cp1 = cross(edge, p1 - a)
    cp2 = cross(edge, p2 - a)
    return dot(cp1, cp2) >= 0


def triangle_normal(t1, t2, t3):
    """Unnormalised cross-product normal of a triangle."""
    return cross(t2 - t1, t3 - t1)


def in_triangle(point, t1, t2, t3):
    """Whether ``point`` lies within the triangle's prism and on the plane through the origin along its normal."""
    within_prism = (
        same_side(point, t1, t2, t3)
        and same_side(point, t2, t1, t3)
        and same_side(point, t3, t1, t2)
    )
    if not within_prism:
        return False
    n = triangle_normal(t1, t2, t3)
    if magnitude(n) == 0:
        return False
    return magnitude(project(point, n)) == 0


def split(text, token):
    """Split ``text`` at ``token``; empty fields between repeated tokens are kept."""
    out = []
    temp = ""
    size = len(token)
    i = 0
    while i < len(text):
        if text[i:i + size] == token:
            if temp:
                out.append(temp)
                temp = ""
                i += size - 1
            else:
                out.append("")
        elif i + size >= len(text):
            temp += text[i:i + size]
            out.append(temp)
            break
        else:
            temp += text[i]
        i += 1
    return out


def tail(line):
    """Return the text after the first token, without surrounding blanks."""
    rest = line.lstrip(_BLANKS)
    match = re.search(r"[ \t]", rest)
    if match is None:
        return ""
    return rest[match.start():].strip(_BLANKS)


def first_token(line):
    """Return the first blank-separated token of ``line``."""
    rest = line.lstrip(_BLANKS)
    if not rest:
        return ""
    return re.split(r"[ \t]", rest, maxsplit=1)[0]


def get_element(elements, index):
    """Look up an OBJ index string: 1-based, or negative counting from the end."""
    match = _STOI.match(index)
    if match is None:
        raise ValueError(f"invalid index: {index!r}")
    idx = int(match.group(1))
    idx = len(elements) + idx if idx < 0 else idx - 1
    if not 0 <= idx < len(elements):
        raise IndexError(f"index {index!r} out of range for {len(elements)} elements")
    return elements[idx]