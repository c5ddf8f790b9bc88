"""Transform matrices, triangles, textures, an OBJ/MTL loader and ray-tracing geometry and optics."""

__version__ = "0.1.0"