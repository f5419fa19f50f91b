import math

import pytest

from scintsim.polyhedron import Line, Plane, Polyhedron
from scintsim.vectors import Point, Vector


def _cube(half=2.0):
    points = [
        Point(0, 0, -half),
        Point(0, 0, half),
        Point(half, 0, 0),
        Point(-half, 0, 0),
        Point(0, half, 0),
        Point(0, -half, 0),
    ]
    normals = [
        Vector(0, 0, 1),
        Vector(0, 0, -1),
        Vector(-1, 0, 0),
        Vector(1, 0, 0),
        Vector(0, -1, 0),
        Vector(0, 1, 0),
    ]
    return Polyhedron(points, normals)


def _truncated_cube():
    points = [
        Point(0, 0, -2), Point(0, 0, 2), Point(2, 0, 0), Point(-2, 0, 0),
        Point(0, 2, 0), Point(0, -2, 0), Point(1.5, 1.5, 1.5),
        Point(-1.5, 1.5, 1.5), Point(1.5, -1.5, 1.5), Point(1.5, 1.5, -1.5),
        Point(-1.5, -1.5, 1.5), Point(1.5, -1.5, -1.5),
        Point(-1.5, 1.5, -1.5), Point(-1.5, -1.5, -1.5),
    ]
    normals = [
        Vector(0, 0, 1), Vector(0, 0, -1), Vector(-1, 0, 0), Vector(1, 0, 0),
        Vector(0, -1, 0), Vector(0, 1, 0), Vector(-1, -1, -1),
        Vector(1, -1, -1), Vector(-1, 1, -1), Vector(-1, -1, 1),
        Vector(1, 1, -1), Vector(-1, 1, 1), Vector(1, -1, 1), Vector(1, 1, 1),
    ]
    return Polyhedron(points, normals)


def _face(poly, normal):
    for face in poly.faces:
        if tuple(face.plane.normal) == pytest.approx(tuple(normal)):
            return face
    raise AssertionError("no such face")


def test_line_through_normalises_direction():
    line = Line.through(Point(), Vector(0, 3, 4))
    assert line.vector.mag2() == pytest.approx(1.0)


def test_line_intersection_example_both_ways():
    first = Line.through(Point(0, 0, 0), Vector(0, 2, 0))
    second = Line.through(Point(7, 1, 0), Vector(-2, 0, 0))
    assert tuple(first.intersection(second)) == pytest.approx((0, 1, 0))
    assert tuple(second.intersection(first)) == pytest.approx((0, 1, 0))


def test_parallel_lines():
    a = Line.through(Point(), Vector(1, 0, 0))
    b = Line.through(Point(0, 1, 0), Vector(2, 0, 0))
    assert a.is_parallel(b)
    assert a.do_not_cross(b)
    with pytest.raises(ValueError):
        a.intersection(b)


def test_skew_and_crossing_lines():
    a = Line.through(Point(0, 0, 0), Vector(1, 0, 0))
    skew = Line.through(Point(0, 0, 1), Vector(0, 1, 0))
    crossing = Line.through(Point(0, 3, 0), Vector(1, 1, 0))
    assert a.is_skew(skew)
    assert a.do_not_cross(skew)
    assert not a.is_skew(crossing)
    assert not a.do_not_cross(crossing)


def test_plane_sides():
    plane = Plane(Point(), Vector(0, 0, 5))
    assert plane.has_inside_strict(Point(0, 0, 1))
    assert not plane.has_inside(Point(0, 0, -1))
    on_plane = Point(1, 0, 0)
    assert plane.has_inside(on_plane)
    assert not plane.has_inside_strict(on_plane)
    assert plane.is_on_plane(on_plane)
    assert not plane.is_on_plane(Point(1, 0, 1))


def test_plane_normal_is_unit():
    assert Plane(Point(), Vector(0, 0, 5)).normal.mag2() == pytest.approx(1.0)


def test_plane_intersect_plane_lies_on_both():
    p = Plane(Point(0, 0, 0), Vector(-1, 0, 0))
    q = Plane(Point(1, 1, 1), Vector(-2, -2, 1))
    line = p.intersect_plane(q)
    assert line.vector.dot(p.normal) == pytest.approx(0.0, abs=1e-12)
    assert line.vector.dot(q.normal) == pytest.approx(0.0, abs=1e-12)
    for t in (0.0, 1.0, -2.5):
        point = line.point + t * line.vector
        assert (point - p.point).dot(p.normal) == pytest.approx(0.0, abs=1e-12)
        assert (point - q.point).dot(q.normal) == pytest.approx(0.0, abs=1e-12)


def test_plane_intersect_line_example():
    plane = Plane(Point(5, 2, 3), Vector(0, 0, 1))
    line = Line.through(Point(10, 10, 10), Vector(1, 2, 3))
    hit = plane.intersect_line(line)
    assert hit.z == pytest.approx(3.0)
    assert (hit - line.point).cross(line.vector).mag2() == pytest.approx(0.0, abs=1e-12)


def test_plane_intersect_parallel_line_is_none():
    plane = Plane(Point(), Vector(0, 0, 1))
    assert plane.intersect_line(Line.through(Point(0, 0, 1), Vector(1, 0, 0))) is None


def test_plane_moved_and_parallel():
    plane = Plane(Point(), Vector(0, 0, 1))
    moved = plane.moved(1, 2, 3)
    assert moved.point == Point(1, 2, 3)
    assert moved.normal == plane.normal
    assert plane.is_parallel(moved)
    assert not plane.is_parallel(Plane(Point(), Vector(1, 0, 0)))


def test_cube_faces_have_corner_vertices():
    cube = _cube()
    for face in cube.faces:
        assert len(face.vertices) == 4
        for vertex in face.vertices:
            assert tuple(abs(c) for c in vertex) == pytest.approx((2.0, 2.0, 2.0))
        assert len(set(face.vertices)) == 4


def test_face_area_constant_inside_and_contains():
    cube = _cube()
    face = _face(cube, Vector(-1, 0, 0))
    assert face.contains(face.middle)
    assert face.area(Point(2, 0.5, -1)) == pytest.approx(face.area(face.middle))
    assert face.contains(Point(2, 0.5, -1))
    assert not face.contains(Point(2, 5, 0))


def test_face_outline_is_closed():
    cube = _cube()
    wires = cube.wires()
    assert len(wires) == len(cube.faces)
    for outline in wires:
        assert len(outline) == 5
        assert outline[0] == outline[-1]


def test_face_is_parallel():
    cube = _cube()
    bottom = _face(cube, Vector(0, 0, 1))
    top = _face(cube, Vector(0, 0, -1))
    side = _face(cube, Vector(1, 0, 0))
    assert bottom.is_parallel(top)
    assert not bottom.is_parallel(side)


def test_cube_inside_checks():
    cube = _cube()
    assert cube.has_inside(Point(0, 0, 0))
    assert cube.has_inside_strict(Point(0, 0, 0))
    assert not cube.has_inside(Point(3, 0, 0))
    surface = Point(2, 0.5, 0.5)
    assert cube.has_inside(surface)
    assert not cube.has_inside_strict(surface)


def test_normal_on_face_and_corner():
    cube = _cube()
    assert tuple(cube.normal(Point(2, 0, 0))) == pytest.approx((-1, 0, 0))
    assert tuple(cube.normal(Point(2, 2, 2))) == pytest.approx((-1, -1, -1))
    assert tuple(cube.normal(Point(0, 0, 0))) == pytest.approx((0, 0, 0))


def test_line_intersections_with_cube():
    cube = _cube()
    line = Line.through(Point(), Vector(1, 0.5, 0.25))
    hits = cube.intersection(line)
    assert len(hits) == 2
    ahead = cube.positive_intersection(line)
    assert len(ahead) == 1
    first = cube.first_positive_intersection(line)
    assert first == ahead[0]
    assert first.x == pytest.approx(2.0)
    assert (first - line.point).cross(line.vector).mag2() == pytest.approx(0.0, abs=1e-12)


def test_first_positive_intersection_none_ahead():
    cube = _cube()
    with pytest.raises(ValueError):
        cube.first_positive_intersection(Line.through(Point(10, 0, 0), Vector(1, 0, 0)))


def test_move_cube():
    cube = _cube()
    cube.move(1, 0, 0)
    assert cube.has_inside(Point(2.5, 0, 0))
    assert not cube.has_inside(Point(-1.5, 0, 0))
    assert all(len(face.vertices) == 4 for face in cube.faces)


def test_rotate_cube():
    cube = _cube()
    probe = Point(2.7, 0, 0)
    assert not cube.has_inside(probe)
    cube.rotate(0, 0, math.pi / 4)
    assert cube.has_inside(probe)
    assert cube.has_inside(Point(0, 0, 0))
    assert all(len(face.vertices) == 4 for face in cube.faces)


def test_mismatched_points_and_normals():
    with pytest.raises(ValueError):
        Polyhedron([Point(), Point(1, 0, 0)], [Vector(1, 0, 0)])


def test_truncated_cube_invariants():
    solid = _truncated_cube()
    assert solid.has_inside(Point(0, 0, 0))
    assert not solid.has_inside(Point(1.9, 1.9, 1.9))
    for face in solid.faces:
        assert len(face.vertices) >= 3
        for vertex in face.vertices:
            assert solid.has_inside(vertex)
            assert face.plane.is_on_plane(vertex)