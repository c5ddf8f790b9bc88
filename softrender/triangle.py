"""Triangles with per-vertex position, colour, texture coordinate and normal."""

import numpy as np


def _check_index(index):
    if not 0 <= index < 3:
        raise IndexError(f"triangle vertex index must be 0, 1 or 2, got {index}")


class Triangle:
    """A triangle whose vertices v0, v1, v2 are in counter-clockwise order.

    Vertices are stored as homogeneous 4-vectors; a 3-vector given to
    ``set_vertex`` gets ``w = 1``. Colours are stored in ``[0, 1]``.
    """

    def __init__(self):
        self.v = np.zeros((3, 4))
        self.v[:, 3] = 1.0
        self.color = np.zeros((3, 3))
        self.tex_coords = np.zeros((3, 2))
        self.normal = np.zeros((3, 3))
        self.tex = None

    @property
    def a(self):
        """Position of the first vertex."""
        return self.v[0, :3].copy()

    @property
    def b(self):
        """Position of the second vertex."""
        return self.v[1, :3].copy()

    @property
    def c(self):
        """Position of the third vertex."""
        return self.v[2, :3].copy()

    def set_vertex(self, index, vertex):
        """Set the coordinates of vertex ``index`` from a 3- or 4-vector."""
        _check_index(index)
        values = np.asarray(vertex, dtype=float).ravel()
        if values.size == 3:
            values = np.append(values, 1.0)
        elif values.size != 4:
            raise ValueError(f"vertex must have 3 or 4 components, got {values.size}")
        self.v[index] = values

    def set_normal(self, index, normal):
        """Set the normal of vertex ``index``."""
        _check_index(index)
        values = np.asarray(normal, dtype=float).ravel()
        if values.size < 3:
            raise ValueError("normal must have 3 components")
        self.normal[index] = values[:3]

    def set_color(self, index, r, g, b):
        """Set the colour of vertex ``index`` from components in 0..255."""
        _check_index(index)
        if any(not 0.0 <= component <= 255.0 for component in (r, g, b)):
            raise ValueError("Invalid color values")
        self.color[index] = (r / 255.0, g / 255.0, b / 255.0)

    def set_tex_coord(self, index, s, t):
        """Set the texture coordinate of vertex ``index``."""
        _check_index(index)
        self.tex_coords[index] = (s, t)

    def set_normals(self, normals):
        """Set all three vertex normals."""
        for index, normal in enumerate(normals):
            self.set_normal(index, normal)

    def set_colors(self, colors):
        """Set all three vertex colours from 0..255 triples."""
        for index, (r, g, b) in enumerate(colors):
            self.set_color(index, r, g, b)

    def to_vector4(self):
        """Return the vertex positions as a (3, 4) array with ``w = 1``."""
        result = self.v.copy()
        result[:, 3] = 1.0
        return result

    def flat_color(self):
        """Return the first vertex colour scaled back to 0..255."""
        return self.color[0] * 255.0