"""Image textures and the payloads handed to shaders."""

import math
from dataclasses import dataclass, field

import numpy as np
from PIL import Image


class Texture:
    """An RGB image sampled by texture coordinates in ``[0, 1]``."""

    def __init__(self, image):
        data = np.asarray(image)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"expected a (height, width, 3) image, got {data.shape}")
        self.image_data = data
        self.height, self.width = data.shape[:2]

    @classmethod
    def from_file(cls, path):
        """Load a texture from an image file."""
        with Image.open(path) as image:
            return cls(np.array(image.convert("RGB")))

    def _pixel(self, row, col):
        row = min(max(int(row), 0), self.height - 1)
        col = min(max(int(col), 0), self.width - 1)
        return self.image_data[row, col].astype(float)

    def _image_coords(self, u, v):
        u = min(max(u, 0.0), 1.0)
        v = min(max(v, 0.0), 1.0)
        return u * self.width, (1 - v) * self.height

    def color_at(self, u, v):
        """Return the nearest texel colour (0..255) at ``(u, v)``."""
        u_img, v_img = self._image_coords(u, v)
        return self._pixel(v_img, u_img)

    def color_bilinear(self, u, v):
        """Return the bilinearly interpolated colour (0..255) at ``(u, v)``."""
        u_img, v_img = self._image_coords(u, v)
        left = math.floor(u_img)
        right = min(self.width, math.ceil(u_img))
        top = math.floor(v_img)
        bottom = min(self.height, math.ceil(v_img))

        ratio_x = (u_img - left) / (right - left) if right != left else 0.0
        ratio_y = (v_img - top) / (bottom - top) if bottom != top else 0.0

        c11 = self._pixel(top, left)
        c12 = self._pixel(top, right)
        c21 = self._pixel(bottom, left)
        c22 = self._pixel(bottom, right)

        c_top = c11 * (1 - ratio_x) + c12 * ratio_x
        c_bottom = c21 * (1 - ratio_x) + c22 * ratio_x
        return c_top * (1 - ratio_y) + c_bottom * ratio_y


@dataclass
class FragmentPayload:
    """Interpolated attributes of one fragment."""

    color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros(2))
    texture: Texture = None
    view_pos: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class VertexPayload:
    """Attributes of one vertex."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))