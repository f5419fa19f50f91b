# scintsim

scintsim traces light through scintillator tiles. Each tile is modelled as a
convex polyhedron. Photons bounce around inside it until a small photodetector
brick absorbs them.

The package also does three smaller jobs:

- it generates and fits a Gaussian signal on a quadratic background;
- it plays blackjack on the console;
- it provides a small linked-list array.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `scintsim.vectors`

This module provides two immutable types, `Point` and `Vector`.

Arithmetic between them:

- `Point - Point` gives a `Vector`.
- `Point + Vector` gives a `Point`.
- `Point - Vector` gives a `Point`.
- Vectors can be added, subtracted and negated.
- Vectors can be scaled with `*` and `/`.

Methods:

- `Vector` has `dot`, `cross`, `unit` and `mag2`.
- The unit vector of a zero vector has NaN components.
- `Point` has `mag2` and `to_vector`.
- `Vector` has `to_point`.

Functions:

- `rotate_point(point, t_x, t_y, t_z)` returns a new, rotated point. The angles are in radians.
- `rotate_vector(vector, t_x, t_y, t_z)` does the same for a vector.
- `move_point(point, x, y, z)` returns a shifted point.

### `scintsim.polyhedron`

This module provides `Line`, `Plane`, `Face` and `Polyhedron`.

**Building a polyhedron.** Give one point and one inward-pointing normal for
each bounding plane. The constructor raises `ValueError` if the two lists
differ in length. `generate_faces` works out the vertices of every face and
puts them in order around the face. It runs on construction and again after
every `move` or `rotate`.

**Queries:**

- `has_inside(point)` and `has_inside_strict(point)` test whether a point is inside, allowing a tolerance of 1e-5.
- `normal(point)` returns the sum of the inward normals of every face that contains the point.
- `intersection(line)` returns every point where a line crosses a face.
- `positive_intersection(line)` keeps only the crossings ahead of the line's point.
- `first_positive_intersection(line)` returns the nearest crossing ahead. It raises `ValueError` if there is none.
- `wires()` returns the closed outline of each face as a list of points.

**Lines.** `Line.through(point, vector)` builds a line with a unit direction.

```python
from scintsim.vectors import Point, Vector
from scintsim.polyhedron import Polyhedron, Line

cube = Polyhedron(
    [Point(0, 0, -2), Point(0, 0, 2), Point(2, 0, 0),
     Point(-2, 0, 0), Point(0, 2, 0), Point(0, -2, 0)],
    [Vector(0, 0, 1), Vector(0, 0, -1), Vector(-1, 0, 0),
     Vector(1, 0, 0), Vector(0, -1, 0), Vector(0, 1, 0)],
)
hit = cube.first_positive_intersection(Line.through(Point(0, 0, 0), Vector(1, 1, 1)))
```

### `scintsim.particles`

This module traces photons through tiles.

**Solids.** Three functions build the individual solids:

- `make_brick` builds an axis-aligned box.
- `edge_scintillator` builds the scintillator of an edge tile, which has one slanted side.
- `backstop` builds the support block behind one sector of tiles.

**Particles.** A `Particle` has the methods `move`, `project`, `reflect` and
`kill`. It also records its path.

**Tiles.** A `Tile` combines a scintillator with a thin photodetector brick
placed under it.

- `Tile.add_particle(position, velocity, delay)` starts a photon.
- `Tile.path_find(time)` follows every photon, one after another, for the given time. A photon reflects off the walls. It is absorbed once it lands inside the photodetector.
- `Tile.catch_times()` returns each photon's lifetime plus its creation delay.
- `Tile.rotate` rotates the tile and the positions of its photons about the origin.

**Detector layout.**

- A `Ring` holds fourteen sectors of four tiles around the axis.
- A `Detector` holds 52 rings and fourteen backstops.

**Simulation.** `simulate_tile(is_edge, half_photons, duration, seed)` emits
photons in random directions from a short diagonal inside one tile. It
returns their catch times. It raises `ValueError` unless `half_photons` is
positive.

### `scintsim.spectrum`

This module works with a signal on a background. The model functions are:

- `signal` is a Gaussian peak.
- `background` is `a*x^2 + b*x + c`.
- `fit_function` is their sum.

All three take `params = (norm, mean, sigma, a, b, c)`.

The remaining functions:

- `generate_data` samples `steps + 1` evenly spaced `DataPoint`s and adds Gaussian noise. Each point's y error is 1.25 times the size of its noise.
- `write_data` stores points in a text file. The file starts with a `Signal data` header line, followed by tab-separated `x`, `y`, `x_error` and `y_error`.
- `read_data` reads that file back. It raises `ValueError` on a malformed file.
- `fit_data` performs a least-squares fit with SciPy. It weights points by their y errors when every error is positive.

### `scintsim.blackjack`

This module provides a console blackjack game, built from `Suit`, `Rank`,
`Card`, `new_deck`, `shuffle_deck` and `play_blackjack`.

Scoring:

- Picture cards and aces count ten.
- The dealer draws until reaching 17.
- The player loses on going over 21.
- The player wins on a higher score, or if the dealer goes over 21.

`play_blackjack` takes `read` and `write` callables, so a round can be played
without a terminal.

### `scintsim.linkedarray`

`LinkedArray(size)` holds integers in a singly linked chain.

- Positions count from 1.
- New slots start at zero.
- It supports `get`, `set`, `extend`, `len()` and iteration.
- Positions out of range raise `IndexError`.

## Commands

```
scintsim-spectrum [--lower L] [--upper U] [--steps N] [--randomness R] [--seed S] [--output FILE]
```

This command:

1. generates toy data (by default 101 points from -10 to 10);
2. prints the points;
3. writes them to `FILE` (default `data.txt`);
4. reads the file back, fits the model, and prints the fitted parameters.

```
scintsim-blackjack [--seed S]
```

This command plays rounds of blackjack on the terminal. On each turn, enter
`0` to hit or `1` to stand. After each round, enter `1` to play again. Any
other input, or end of input, stops the game.

## What it does not do

scintsim draws nothing. It produces no plots, histograms, 3D views or
animation frames. `Polyhedron.wires`, `Particle.path` and
`Tile.catch_times` return plain data, which you can pass to a plotting
library of your choice.

Spectrum data is stored only in the plain-text format described above.