"""Loading Wavefront OBJ models and their MTL material libraries."""

import logging
import os
import re
from dataclasses import replace

from softrender.objgeom import Material, Mesh, Vector2, Vector3, first_token, split, tail
from softrender.objtriangulate import triangulate, vertices_from_face

_log = logging.getLogger(__name__)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_BUMP_KEYS = ("map_Bump", "map_bump", "bump")
_MAP_KEYS = {
    "map_Ka": "map_ka",
    "map_Kd": "map_kd",
    "map_Ks": "map_ks",
    "map_Ns": "map_ns",
    "map_d": "map_d",
}
_COLOR_KEYS = {"Ka": "ka", "Kd": "kd", "Ks": "ks"}
_SCALAR_KEYS = {"Ns": "ns", "Ni": "ni", "d": "d"}


def _parse_int(text):
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _vector3(fields):
    return Vector3(float(fields[0]), float(fields[1]), float(fields[2]))


def _lines(path):
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\n")


class Loader:
    """Reads meshes, vertices, indices and materials from OBJ files.

    Materials accumulate across loads; meshes, vertices and indices are
    replaced by each ``load_file``.
    """

    def __init__(self):
        self.loaded_meshes = []
        self.loaded_vertices = []
        self.loaded_indices = []
        self.loaded_materials = []

    def load_file(self, path):
        """Load an .obj file; return whether any geometry was found.

        Raises ValueError when the path does not end in ``.obj`` and OSError
        when the file cannot be read. A material library that cannot be read
        is skipped.
        """
        path = os.fspath(path)
        if not path.endswith(".obj"):
            raise ValueError(f"not an .obj file: {path!r}")

        lines = list(_lines(path))

        self.loaded_meshes = []
        self.loaded_vertices = []
        self.loaded_indices = []

        positions = []
        tex_coords = []
        normals = []
        vertices = []
        indices = []
        mesh_mat_names = []
        listening = False
        mesh_name = ""

        for line in lines:
            token = first_token(line)

            if token in ("o", "g") or line.startswith("g"):
                named = tail(line) if token in ("o", "g") else "unnamed"
                if not listening:
                    listening = True
                    mesh_name = named
                elif indices and vertices:
                    self.loaded_meshes.append(
                        Mesh(vertices=list(vertices), indices=list(indices), name=mesh_name)
                    )
                    vertices.clear()
                    indices.clear()
                    mesh_name = tail(line)
                else:
                    mesh_name = named

            if token == "v":
                positions.append(_vector3(split(tail(line), " ")))
            elif token == "vt":
                fields = split(tail(line), " ")
                tex_coords.append(Vector2(float(fields[0]), float(fields[1])))
            elif token == "vn":
                normals.append(_vector3(split(tail(line), " ")))
            elif token == "f":
                face = vertices_from_face(line, positions, tex_coords, normals)
                vertices.extend(face)
                self.loaded_vertices.extend(face)
                for index in triangulate(face):
                    indices.append(len(vertices) - len(face) + index)
                    self.loaded_indices.append(len(self.loaded_vertices) - len(face) + index)
            elif token == "usemtl":
                mesh_mat_names.append(tail(line))
                if indices and vertices:
                    self.loaded_meshes.append(
                        Mesh(
                            vertices=list(vertices),
                            indices=list(indices),
                            name=f"{mesh_name}_2",
                        )
                    )
                    vertices.clear()
                    indices.clear()
            elif token == "mtllib":
                parts = split(path, "/")
                prefix = "".join(part + "/" for part in parts[:-1]) if len(parts) != 1 else ""
                material_path = prefix + tail(line)
                _log.debug("find materials in: %s", material_path)
                try:
                    self.load_materials(material_path)
                except (OSError, ValueError) as exc:
                    _log.debug("skipping material library %s: %s", material_path, exc)

        if indices and vertices:
            self.loaded_meshes.append(
                Mesh(vertices=list(vertices), indices=list(indices), name=mesh_name)
            )

        for mesh, material_name in zip(self.loaded_meshes, mesh_mat_names):
            found = next(
                (m for m in self.loaded_materials if m.name == material_name), None
            )
            if found is not None:
                mesh.material = replace(found)

        return bool(self.loaded_meshes or self.loaded_vertices or self.loaded_indices)

    def load_materials(self, path):
        """Read an .mtl file, append its materials and return the new ones.

        Raises ValueError when the path does not end in ``.mtl`` and OSError
        when the file cannot be read.
        """
        path = os.fspath(path)
        if not path.endswith(".mtl"):
            raise ValueError(f"not an .mtl file: {path!r}")

        loaded = []
        material = Material()
        listening = False

        for line in _lines(path):
            token = first_token(line)
            if token == "newmtl":
                if listening:
                    loaded.append(material)
                    material = Material()
                listening = True
                material.name = tail(line) if len(line) > 7 else "none"
            elif token in _COLOR_KEYS:
                fields = split(tail(line), " ")
                if len(fields) != 3:
                    continue
                setattr(material, _COLOR_KEYS[token], _vector3(fields))
            elif token in _SCALAR_KEYS:
                setattr(material, _SCALAR_KEYS[token], float(tail(line)))
            elif token == "illum":
                material.illum = _parse_int(tail(line))
            elif token in _MAP_KEYS:
                setattr(material, _MAP_KEYS[token], tail(line))
            elif token in _BUMP_KEYS:
                material.map_bump = tail(line)

        loaded.append(material)
        self.loaded_materials.extend(loaded)
        return loaded