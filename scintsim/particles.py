"""Photons bouncing inside scintillator tiles, and the tile detector layout."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .polyhedron import Line, Polyhedron
from .vectors import Point, Vector, move_point, rotate_point, rotate_vector

RADIUS = math.tan(math.pi / 2 - math.pi / 14) * 25.6 / 2 + 2.5
"""Distance of the tile layer from the beam axis."""

TILES_PER_RING_SECTOR = (
    (-9.60, True, 0.0),
    (-3.20, False, 0.0),
    (3.20, False, 0.0),
    (9.60, True, math.pi),
)
SECTORS = 14
RING_PITCH = 6.22
RINGS_EACH_SIDE = 26


@dataclass
class Particle:
    """A photon moving in a straight line until it is reflected or absorbed."""

    position: Point = Point()
    velocity: Vector = Vector()
    created: float = 0.0
    lifetime: float = field(default=0.0, init=False)
    alive: bool = field(default=True, init=False)
    previous_position: Point = field(init=False)
    path: List[Point] = field(init=False)

    def __post_init__(self) -> None:
        self.previous_position = self.position
        self.path = [self.position]

    def kill(self) -> None:
        """Stop the particle where it is."""
        self.velocity = Vector()
        self.alive = False

    def reflect(self, normal: Vector) -> None:
        """Mirror the velocity at a surface with the given inward normal."""
        unit_normal = normal.unit()
        scalar = self.velocity.dot(unit_normal)
        if scalar > 0:
            scalar = -scalar
        self.velocity = self.velocity - (2 * scalar) * unit_normal

    def project(self, time: float) -> Point:
        """Where the particle would be after ``time`` on its current course."""
        return self.position + time * self.velocity

    def move(self, dt: float) -> None:
        """Advance a living particle by ``dt``."""
        if not self.alive:
            return
        self.previous_position = self.position
        self.position = self.project(dt)
        self.path.append(self.position)
        self.lifetime += dt


def _solid(points: List[Point], normals: List[Vector]) -> Polyhedron:
    return Polyhedron(points, normals)


def make_brick(
    xwidth: float = 1,
    ylength: float = 1,
    zheight: float = 1,
    xpos: float = 0,
    ypos: float = 0,
    zpos: float = 0,
) -> Polyhedron:
    """An axis-aligned box of the given size centred on (xpos, ypos, zpos)."""
    normals = [
        Vector(-1, 0, 0),
        Vector(0, -1, 0),
        Vector(0, 0, -1),
        Vector(1, 0, 0),
        Vector(0, 1, 0),
        Vector(0, 0, 1),
    ]
    shift_x, shift_y, shift_z = normals[3], normals[4], normals[5]
    points = [
        Point(xwidth / 2, 0, 0) + xpos * shift_x,
        Point(0, ylength / 2, 0) + ypos * shift_y,
        Point(0, 0, zheight / 2) + zpos * shift_z,
        Point(-xwidth / 2, 0, 0) + xpos * shift_x,
        Point(0, -ylength / 2, 0) + ypos * shift_y,
        Point(0, 0, -zheight / 2) + zpos * shift_z,
    ]
    return _solid(points, normals)


def edge_scintillator() -> Polyhedron:
    """The scintillator of an edge tile, with one side slanted."""
    points = [
        Point(0, 0, -2.5),
        Point(0, 0, 2.5),
        Point(3.15, 0, 0),
        Point(-3.15, 0, -2.5),
        Point(0, 3.105, 0),
        Point(0, -3.105, 0),
    ]
    normals = [
        Vector(0, 0, 1),
        Vector(0, 0, -1),
        Vector(-1, 0, 0),
        rotate_vector(Vector(1, 0, 0), 0, -math.pi / 14, 0),
        Vector(0, -1, 0),
        Vector(0, 1, 0),
    ]
    return _solid(points, normals)


def backstop() -> Polyhedron:
    """The support block behind one sector of tiles."""
    points = [
        move_point(Point(0, 0, -2.5), 0, 0, -5.1),
        move_point(Point(0, 0, 2.5), 0, 0, -5.1),
        Point(3.15 + 9.60, 0, 0),
        Point(-3.15 - 9.60, 0, -2.5),
        Point(0, 160, 0),
        Point(0, -160, 0),
    ]
    normals = [
        Vector(0, 0, 1),
        Vector(0, 0, -1),
        rotate_vector(Vector(-1, 0, 0), 0, math.pi / 14, 0),
        rotate_vector(Vector(1, 0, 0), 0, -math.pi / 14, 0),
        Vector(0, -1, 0),
        Vector(0, 1, 0),
    ]
    return _solid(points, normals)


class Tile:
    """A scintillator block with a silicon photomultiplier on its underside."""

    def __init__(
        self,
        position: Point = Point(),
        theta_x: float = 0.0,
        theta_y: float = 0.0,
        theta_z: float = 0.0,
        is_edge: bool = False,
    ) -> None:
        sipm = make_brick(3, 3, 0.1, 0, 0, -2.5)
        scintillator = edge_scintillator() if is_edge else make_brick(6.3, 6.21, 5, 0, 0, 0)
        for solid in (sipm, scintillator):
            solid.rotate(theta_x, theta_y, theta_z)
            solid.move(position.x, position.y, position.z)
        self.scintillator: Polyhedron = scintillator
        self.sipm: Polyhedron = sipm
        self.particles: List[Particle] = []

    def add_particle(self, position: Point, velocity: Vector, delay: float = 0.0) -> Particle:
        """Start a photon at ``position``, created ``delay`` after time zero."""
        particle = Particle(position, velocity, delay)
        self.particles.append(particle)
        return particle

    def path_find(self, time: float) -> None:
        """Follow every photon for ``time``."""
        for particle in self.particles:
            self.path_find_particle(particle, time)

    def path_find_particle(self, particle: Particle, time: float) -> None:
        """Follow one photon, reflecting it off the walls, for ``time``.

        A photon that reaches the photomultiplier is absorbed there.
        """
        if not particle.alive:
            return
        scintillator = self.scintillator
        projection = particle.project(time)
        while not scintillator.has_inside_strict(projection):
            line = Line(particle.position, particle.velocity)
            bounce = scintillator.first_positive_intersection(line)
            dt = math.sqrt((bounce - particle.position).mag2() / particle.velocity.mag2())
            # Rounding can leave the photon just outside; back it up until it is inside.
            step = 0.00001 * dt
            landing = particle.project(dt)
            while not scintillator.has_inside_strict(landing):
                if step == 0.0:
                    raise RuntimeError("photon is stuck on the surface")
                dt -= step
                landing = particle.project(dt)
            particle.move(dt)
            if self.sipm.has_inside(particle.position):
                particle.kill()
                break
            particle.reflect(scintillator.normal(bounce))
            time -= dt
            if time < 0:
                return
            projection = particle.project(time)
        particle.move(time)

    def rotate(self, t_x: float, t_y: float, t_z: float) -> None:
        """Rotate the tile and its photons' positions about the origin."""
        self.scintillator.rotate(t_x, t_y, t_z)
        self.sipm.rotate(t_x, t_y, t_z)
        for particle in self.particles:
            particle.position = rotate_point(particle.position, t_x, t_y, t_z)

    def catch_times(self) -> List[float]:
        """For each photon, its creation time plus how long it travelled."""
        return [p.lifetime + p.created for p in self.particles]


class Ring:
    """Fourteen sectors of four tiles around the beam axis at height ``ypos``."""

    def __init__(self, ypos: float) -> None:
        self.tiles: List[Tile] = []
        for sector in range(SECTORS):
            angle = -sector * math.pi / 7
            for x, is_edge, theta_z in TILES_PER_RING_SECTOR:
                tile = Tile(Point(x, ypos, RADIUS), 0, 0, theta_z, is_edge)
                tile.rotate(0, angle, 0)
                self.tiles.append(tile)


class Detector:
    """The full barrel: rings of tiles along the axis and their backstops."""

    def __init__(self) -> None:
        self.rings: List[Ring] = [
            Ring((i + 0.5) * RING_PITCH)
            for i in range(-RINGS_EACH_SIDE, RINGS_EACH_SIDE)
        ]
        self.backstops: List[Polyhedron] = []
        for sector in range(SECTORS):
            block = backstop()
            block.move(0, 0, RADIUS)
            block.rotate(0, -sector * math.pi / 7, 0)
            self.backstops.append(block)


def simulate_tile(
    is_edge: bool,
    half_photons: int = 250000,
    duration: float = 200.0,
    seed: Optional[int] = None,
) -> List[float]:
    """Emit photons along a short diagonal in a tile and return their catch times.

    Photons start at staggered times over ten time units with speed ten in
    random directions and are followed for ``duration``.
    """
    if half_photons <= 0:
        raise ValueError("half_photons must be positive")
    rng = np.random.default_rng(seed)
    tile = Tile(Point(), 0, 0, 0, is_edge)
    span = 2 * half_photons
    stop = half_photons if is_edge else half_photons + 1
    for i in range(-half_photons, stop):
        offset = 1 + 0.5 / span * i
        direction = Vector(*(float(v) for v in rng.normal(0.0, 1.0, size=3)))
        tile.add_particle(
            Point(offset, offset, offset),
            10 * direction.unit(),
            (i + half_photons) / span * 10,
        )
    tile.path_find(duration)
    return tile.catch_times()