"""Lines, planes and convex polyhedra bounded by planes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, List, Optional

from .vectors import Point, Vector, move_point, rotate_point, rotate_vector

THRESHOLD = 1e-5


@dataclass(frozen=True)
class Line:
    """A straight line: every point ``point + t * vector``."""

    point: Point = Point()
    vector: Vector = Vector()

    @classmethod
    def through(cls, point: Point, vector: Vector) -> Line:
        """A line through ``point`` with the unit direction of ``vector``."""
        return cls(point, vector.unit())

    def intersection(self, other: Line) -> Point:
        """The point where this line meets ``other``.

        The lines are assumed to lie in one plane; parallel lines raise
        ValueError.
        """
        denominator = self.vector.cross(other.vector).mag2()
        if denominator == 0.0:
            raise ValueError("lines are parallel")
        offset = self.point - other.point
        t = math.sqrt(offset.cross(other.vector).mag2() / denominator)
        if self.vector.dot(other.point - self.point) < 0:
            t = -t
        return self.point + t * self.vector

    def is_parallel(self, other: Line) -> bool:
        return self.vector.unit().cross(other.vector.unit()).mag2() < THRESHOLD

    def is_skew(self, other: Line) -> bool:
        """True if the lines do not lie in one plane."""
        normal = self.vector.unit().cross(other.vector.unit())
        alignment = (self.point - other.point).unit().dot(normal)
        return not alignment**2 < THRESHOLD

    def do_not_cross(self, other: Line) -> bool:
        return self.is_parallel(other) or self.is_skew(other)


@dataclass(frozen=True)
class Plane:
    """A plane through ``point``; ``normal`` (kept at unit length) points inside."""

    point: Point
    normal: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", self.normal.unit())

    def is_parallel(self, other: Plane) -> bool:
        return self.normal.cross(other.normal).mag2() == 0

    def intersect_plane(self, other: Plane) -> Line:
        """The line common to both planes; its direction is not normalised."""
        direction = self.normal.cross(other.normal)
        b = self.normal.unit() * other.normal.dot(self.normal) - other.normal
        if (other.point - self.point).dot(b) < 0:
            b = -b
        denominator = b.dot(other.normal)
        if denominator == 0:
            raise ValueError("planes are parallel")
        t = -(self.point - other.point).dot(other.normal) / denominator
        return Line(self.point + t * b, direction)

    def intersect_line(self, line: Line) -> Optional[Point]:
        """Where ``line`` pierces the plane, or None if it runs parallel to it."""
        denominator = line.vector.dot(self.normal)
        if denominator == 0:
            return None
        t = -(line.point - self.point).dot(self.normal) / denominator
        return line.point + t * line.vector

    def _alignment(self, point: Point) -> float:
        return (point - self.point).unit().dot(self.normal.unit())

    def has_inside_strict(self, point: Point) -> bool:
        return self._alignment(point) > THRESHOLD

    def has_inside(self, point: Point) -> bool:
        return self._alignment(point) >= -THRESHOLD

    def is_on_plane(self, point: Point) -> bool:
        return self._alignment(point) ** 2 <= THRESHOLD

    def moved(self, x: float, y: float, z: float) -> Plane:
        """The same plane shifted by the given offsets."""
        return Plane(move_point(self.point, x, y, z), self.normal)


@dataclass
class Face:
    """A bounded face of a polyhedron: its plane and its ordered vertices."""

    plane: Plane
    reflective: float = 1.0
    vertices: List[Point] = field(default_factory=list)
    middle: Point = Point()

    def is_parallel(self, other: Face) -> bool:
        return self.plane.is_parallel(other.plane)

    def has_inside(self, point: Point) -> bool:
        return self.plane.has_inside(point)

    def has_inside_strict(self, point: Point) -> bool:
        return self.plane.has_inside_strict(point)

    def area(self, point: Point) -> float:
        """Twice the summed area of the triangles from ``point`` to each edge."""
        relative = [vertex - point for vertex in self.vertices]
        following = relative[1:] + relative[:1]
        return sum(math.sqrt(a.cross(b).mag2()) for a, b in zip(relative, following))

    def contains(self, point: Point) -> bool:
        """True if ``point`` lies within the face's outline."""
        if not self.vertices:
            return False
        count = len(self.vertices)
        return self.area(point) - self.area(self.middle) <= THRESHOLD * count * count

    def outline(self) -> List[Point]:
        """The vertices in order, closed by repeating the first one."""
        return self.vertices + self.vertices[:1]


class Polyhedron:
    """A convex solid: the region on the inner side of every face plane."""

    def __init__(self, points: Iterable[Point], normals: Iterable[Vector]) -> None:
        points = list(points)
        normals = list(normals)
        if len(points) != len(normals):
            raise ValueError("each face needs exactly one point and one normal")
        self.faces: List[Face] = [
            Face(Plane(point, normal)) for point, normal in zip(points, normals)
        ]
        self.generate_faces()

    def generate_faces(self) -> None:
        """Recompute every face's vertices from the face planes."""
        for face in self.faces:
            lines = [
                face.plane.intersect_plane(other.plane)
                for other in self.faces
                if other is not face and not face.is_parallel(other)
            ]
            candidates = [
                a.intersection(b)
                for a, b in combinations(lines, 2)
                if not a.do_not_cross(b)
            ]
            self._sort_vertices(face, [v for v in candidates if self.has_inside(v)])

    @staticmethod
    def _sort_vertices(face: Face, vertices: List[Point]) -> None:
        if not vertices:
            face.vertices = []
            face.middle = Point()
            return
        total = sum((vertex.to_vector() for vertex in vertices), Vector())
        middle = (total / len(vertices)).to_point()
        face.middle = middle
        relative = [vertex - middle for vertex in vertices]
        reference = relative[0]

        def angle(vector: Vector) -> float:
            norm = math.sqrt(reference.mag2() * vector.mag2())
            cosine = reference.dot(vector) / norm if norm else math.nan
            if reference.cross(vector).dot(face.plane.normal) < 0:
                return -cosine - 2
            return cosine

        angles = [angle(vector) for vector in relative]

        def key(index: int) -> tuple:
            value = angles[index]
            return (math.isnan(value), 0.0 if math.isnan(value) else -value)

        order = sorted(range(1, len(vertices)), key=key)
        face.vertices = [vertices[0]] + [vertices[i] for i in order]

    def normal(self, point: Point) -> Vector:
        """Sum of the inward normals of all faces that contain ``point``."""
        return sum(
            (face.plane.normal for face in self.faces if face.contains(point)),
            Vector(),
        )

    def has_inside(self, point: Point) -> bool:
        return all(face.has_inside(point) for face in self.faces)

    def has_inside_strict(self, point: Point) -> bool:
        return all(face.has_inside_strict(point) for face in self.faces)

    def intersection(self, line: Line) -> List[Point]:
        """Every point where ``line`` crosses a face."""
        points = []
        for face in self.faces:
            hit = face.plane.intersect_line(line)
            if hit is not None and face.contains(hit):
                points.append(hit)
        return points

    def positive_intersection(self, line: Line) -> List[Point]:
        """Crossings that lie ahead of ``line.point`` along its direction."""
        return [
            hit
            for hit in self.intersection(line)
            if (hit - line.point).dot(line.vector) > 0
        ]

    def first_positive_intersection(self, line: Line) -> Point:
        """The nearest crossing ahead of ``line.point``."""
        hits = self.positive_intersection(line)
        if not hits:
            raise ValueError("the line does not reach the surface ahead")
        return min(hits, key=lambda hit: (hit - line.point).mag2())

    def move(self, x: float, y: float, z: float) -> None:
        for face in self.faces:
            face.plane = face.plane.moved(x, y, z)
        self.generate_faces()

    def rotate(self, t_x: float, t_y: float, t_z: float) -> None:
        for face in self.faces:
            face.plane = Plane(
                rotate_point(face.plane.point, t_x, t_y, t_z),
                rotate_vector(face.plane.normal, t_x, t_y, t_z),
            )
        self.generate_faces()

    def wires(self) -> List[List[Point]]:
        """The closed outline of every face."""
        return [face.outline() for face in self.faces]