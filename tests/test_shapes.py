import math

import pytest

from softrender.raymath import Light, Vec2, Vec3, dot
from softrender.shapes import MeshTriangle, Scene, Sphere, ray_triangle_intersect


def _length(v):
    return math.sqrt(dot(v, v))


def _floor():
    verts = [Vec3(-5, -3, -6), Vec3(5, -3, -6), Vec3(5, -3, -16), Vec3(-5, -3, -16)]
    st = [Vec2(0, 0), Vec2(1, 0), Vec2(1, 1), Vec2(0, 1)]
    return MeshTriangle(verts, [0, 1, 3, 1, 2, 3], 2, st)


def test_sphere_hit_lies_on_surface():
    sphere = Sphere(Vec3(0, 0, -5), 1)
    orig, direction = Vec3(0.2, 0.1, 0), Vec3(0, 0, -1)
    hit = sphere.intersect(orig, direction)
    point = orig + direction * hit.t_near
    assert _length(point - sphere.center) == pytest.approx(1.0)
    assert hit.t_near > 0


def test_sphere_from_inside_uses_far_root():
    sphere = Sphere(Vec3(0, 0, 0), 2)
    hit = sphere.intersect(Vec3(0, 0, 0), Vec3(1, 0, 0))
    assert hit.t_near == pytest.approx(2.0)


def test_sphere_miss_and_behind():
    sphere = Sphere(Vec3(0, 0, -5), 1)
    assert sphere.intersect(Vec3(0, 0, 0), Vec3(0, 1, 0)) is None
    assert sphere.intersect(Vec3(0, 0, 0), Vec3(0, 0, 1)) is None


def test_sphere_normal_is_unit_and_outward():
    sphere = Sphere(Vec3(1, 2, 3), 2)
    point = Vec3(1, 2, 5)
    normal, st = sphere.surface_properties(point, Vec3(0, 0, -1), 0, Vec2())
    assert _length(normal) == pytest.approx(1.0)
    assert dot(normal, point - sphere.center) > 0
    assert st == Vec2()


def test_mesh_hit_on_floor_plane():
    mesh = _floor()
    orig, direction = Vec3(0, 0, -10), Vec3(0, -1, 0)
    hit = mesh.intersect(orig, direction)
    assert hit.index in (0, 1)
    assert (orig + direction * hit.t_near).y == pytest.approx(-3.0)
    assert 0 < hit.uv.x < 1 and 0 < hit.uv.y < 1


def test_mesh_miss():
    assert _floor().intersect(Vec3(0, 0, -10), Vec3(0, 1, 0)) is None


def test_mesh_surface_properties():
    mesh = _floor()
    normal, st = mesh.surface_properties(Vec3(), Vec3(), 0, Vec2(0, 0))
    assert (normal.x, normal.y, normal.z) == pytest.approx((0.0, 1.0, 0.0))
    assert st == Vec2(0, 0)


def test_checker_pattern():
    mesh = _floor()
    assert mesh.eval_diffuse_color(Vec2(0.05, 0.05)) == pytest.approx(
        Vec3(0.815, 0.235, 0.031)
    ) or mesh.eval_diffuse_color(Vec2(0.05, 0.05)) == Vec3(0.815, 0.235, 0.031)
    light = mesh.eval_diffuse_color(Vec2(0.15, 0.05))
    assert tuple(light) == pytest.approx((0.937, 0.937, 0.231))
    assert tuple(mesh.eval_diffuse_color(Vec2(0.15, 0.15))) == pytest.approx(
        (0.815, 0.235, 0.031)
    )


def test_mesh_rejects_short_vertex_list():
    with pytest.raises(ValueError):
        MeshTriangle([Vec3(), Vec3()], [0, 1, 2], 1, [Vec2(), Vec2(), Vec2()])


def test_ray_triangle_parallel_and_edge():
    v0, v1, v2 = Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)
    assert ray_triangle_intersect(v0, v1, v2, Vec3(0.2, 0.2, 1), Vec3(1, 0, 0)) is None
    assert ray_triangle_intersect(v0, v1, v2, Vec3(0.5, 0.5, 1), Vec3(0, 0, -1)) is None
    t, u, v = ray_triangle_intersect(v0, v1, v2, Vec3(0.2, 0.3, 1), Vec3(0, 0, -1))
    assert (t, u, v) == pytest.approx((1.0, 0.2, 0.3))


def test_scene_add_and_defaults():
    scene = Scene(640, 480)
    sphere = Sphere(Vec3(), 1)
    light = Light(Vec3(1, 1, 1), 0.5)
    scene.add(sphere)
    scene.add(light)
    assert scene.objects == [sphere]
    assert scene.lights == [light]
    assert scene.max_depth == 5
    assert scene.background_color == Vec3(0.235294, 0.67451, 0.843137)
    with pytest.raises(TypeError):
        scene.add("not an object")