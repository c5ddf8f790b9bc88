"""Turning OBJ face lines into vertices and polygons into triangle indices."""

from dataclasses import replace

from softrender.objgeom import (
    Vector2,
    Vector3,
    Vertex,
    cross,
    get_element,
    in_triangle,
    split,
    tail,
)


def vertices_from_face(line, positions, tex_coords, normals):
    """Build the vertices named by an ``f`` line.

    Each entry may be ``v``, ``v/vt``, ``v//vn`` or ``v/vt/vn``. When any
    entry lacks a normal, every vertex gets the cross-product normal of the
    first three positions.
    """
    vertices = []
    no_normal = False
    for entry in split(tail(line), " "):
        parts = split(entry, "/")
        if len(parts) == 1:
            vertices.append(
                Vertex(position=get_element(positions, parts[0]),
                       texture_coordinate=Vector2(0.0, 0.0))
            )
            no_normal = True
        elif len(parts) == 2:
            vertices.append(
                Vertex(position=get_element(positions, parts[0]),
                       texture_coordinate=get_element(tex_coords, parts[1]))
            )
            no_normal = True
        elif len(parts) == 3:
            tex = (
                get_element(tex_coords, parts[1]) if parts[1] != "" else Vector2(0.0, 0.0)
            )
            vertices.append(
                Vertex(position=get_element(positions, parts[0]),
                       normal=get_element(normals, parts[2]),
                       texture_coordinate=tex)
            )

    if no_normal:
        if len(vertices) < 3:
            raise ValueError("a face needs at least three vertices to derive a normal")
        a = vertices[0].position - vertices[1].position
        b = vertices[2].position - vertices[1].position
        normal = cross(a, b)
        vertices = [replace(vertex, normal=normal) for vertex in vertices]
    return vertices


def _matching(vertices, targets):
    """Yield the index of each vertex once per target position it equals."""
    for j, vertex in enumerate(vertices):
        for target in targets:
            if vertex.position == target:
                yield j


def triangulate(vertices):
    """Ear-clip a polygon into a flat list of triangle indices into ``vertices``."""
    if len(vertices) < 3:
        return []
    if len(vertices) == 3:
        return [0, 1, 2]

    indices = []
    remaining = list(vertices)
    while True:
        progressed = False
        i = 0
        while i < len(remaining):
            prev = remaining[i - 1].position
            cur = remaining[i].position
            nxt = remaining[(i + 1) % len(remaining)].position

            if len(remaining) == 3:
                indices.extend(_matching(vertices[:3], (cur, prev, nxt)))
                remaining.clear()
                progressed = True
                break
            if len(remaining) == 4:
                indices.extend(_matching(vertices, (cur, prev, nxt)))
                other = next(
                    (v.position for v in remaining if v.position not in (cur, prev, nxt)),
                    Vector3(),
                )
                indices.extend(_matching(vertices, (prev, nxt, other)))
                remaining.clear()
                progressed = True
                break

            blocked = any(
                in_triangle(v.position, prev, cur, nxt)
                and v.position not in (prev, cur, nxt)
                for v in vertices
            )
            if blocked:
                i += 1
                continue

            indices.extend(_matching(vertices, (cur, prev, nxt)))
            for j, vertex in enumerate(remaining):
                if vertex.position == cur:
                    del remaining[j]
                    break
            progressed = True
            i = 0

        if not indices or not remaining or not progressed:
            break
    return indices