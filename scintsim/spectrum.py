"""A Gaussian signal on a quadratic background: toy data, storage and fitting.

Parameters are always the six values (norm, mean, sigma, a, b, c): the
signal is ``norm * exp(-((x - mean) / sigma)**2 / 2)`` and the background
``a * x**2 + b * x + c``.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy.optimize import curve_fit

DEFAULT_PARAMS: Tuple[float, ...] = (5.0, 2.0, 0.5, 0.05, -1.0, 5.0)
FIT_START: Tuple[float, ...] = (5.0, 2.0, 0.5, 0.05, -0.5, 6.0)
PARAM_NAMES = ("norm", "mean", "sigma", "a", "b", "c")
DEFAULT_LOWER = -10.0
DEFAULT_UPPER = 10.0
DEFAULT_STEPS = 100
HEADER = "Signal data"


@dataclass(frozen=True)
class DataPoint:
    """One measured point with its uncertainties."""

    x: float
    y: float
    x_error: float = 0.0
    y_error: float = 0.0


def background(x, params: Sequence[float]):
    """Quadratic background a*x^2 + b*x + c."""
    a, b, c = params[3], params[4], params[5]
    return a * x * x + b * x + c


def signal(x, params: Sequence[float]):
    """Gaussian peak of height norm centred on mean."""
    norm, mean, sigma = params[0], params[1], params[2]
    z = (x - mean) / sigma
    return norm * np.exp(-0.5 * z * z)


def fit_function(x, params: Sequence[float]):
    """Signal plus background."""
    return signal(x, params) + background(x, params)


def generate_data(
    lower: float = DEFAULT_LOWER,
    upper: float = DEFAULT_UPPER,
    steps: int = DEFAULT_STEPS,
    params: Optional[Sequence[float]] = None,
    randomness: float = 1.0,
    rng: Union[np.random.Generator, int, None] = None,
) -> List[DataPoint]:
    """Sample ``steps + 1`` evenly spaced points with Gaussian scatter.

    Each y is shifted by a normal deviate of width ``randomness``; its
    error is 1.25 times the size of that shift.
    """
    if steps <= 0:
        raise ValueError("steps must be positive")
    if randomness < 0:
        raise ValueError("randomness must not be negative")
    params = DEFAULT_PARAMS if params is None else tuple(params)
    if len(params) != len(PARAM_NAMES):
        raise ValueError(f"expected {len(PARAM_NAMES)} parameters")
    generator = np.random.default_rng(rng)
    points = []
    for i in range(steps + 1):
        x = lower + i * (upper - lower) / steps
        noise = float(generator.normal(0.0, randomness))
        y = float(fit_function(x, params)) + noise
        points.append(DataPoint(x, y, 0.0, abs(1.25 * noise)))
    return points


def write_data(path: Union[str, Path], points: Iterable[DataPoint]) -> None:
    """Write points as a header line then tab-separated x, y, x_error, y_error."""
    lines = [HEADER]
    lines.extend(
        f"{p.x!r}\t{p.y!r}\t{p.x_error!r}\t{p.y_error!r}" for p in points
    )
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def read_data(path: Union[str, Path]) -> List[DataPoint]:
    """Read points written by :func:`write_data`."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if not lines or lines[0].strip() != HEADER:
        raise ValueError(f"{path}: missing '{HEADER}' header")
    points = []
    for number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) != 4:
            raise ValueError(f"{path}:{number}: expected 4 columns")
        try:
            x, y, x_error, y_error = (float(f) for f in fields)
        except ValueError as exc:
            raise ValueError(f"{path}:{number}: {exc}") from exc
        points.append(DataPoint(x, y, x_error, y_error))
    return points


def _model(x, *params):
    return fit_function(x, params)


def fit_data(
    points: Iterable[DataPoint], initial: Optional[Sequence[float]] = None
) -> Tuple[float, ...]:
    """Least-squares fit of signal plus background; returns the six parameters.

    Points are weighted by their y errors when every error is positive.
    """
    points = list(points)
    if len(points) < len(PARAM_NAMES):
        raise ValueError(f"need at least {len(PARAM_NAMES)} points to fit")
    start = FIT_START if initial is None else tuple(initial)
    x = np.array([p.x for p in points], dtype=float)
    y = np.array([p.y for p in points], dtype=float)
    errors = np.array([p.y_error for p in points], dtype=float)
    sigma = errors if np.all(errors > 0) else None
    best, _ = curve_fit(
        _model,
        x,
        y,
        p0=start,
        sigma=sigma,
        absolute_sigma=sigma is not None,
        maxfev=20000,
    )
    return tuple(float(v) for v in best)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Generate toy data, store it, read it back and fit it."""
    parser = argparse.ArgumentParser(
        prog="scintsim-spectrum",
        description="Generate and fit a Gaussian signal on a quadratic background.",
    )
    parser.add_argument("--lower", type=float, default=DEFAULT_LOWER)
    parser.add_argument("--upper", type=float, default=DEFAULT_UPPER)
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    parser.add_argument("--randomness", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="data.txt")
    args = parser.parse_args(argv)

    try:
        points = generate_data(
            args.lower, args.upper, args.steps, None, args.randomness, args.seed
        )
    except ValueError as exc:
        parser.error(str(exc))

    for p in points:
        print(f"{p.x:g}\t{p.y:g}\t{p.y_error:g}")
    write_data(args.output, points)
    fitted = fit_data(read_data(args.output))
    for name, value in zip(PARAM_NAMES, fitted):
        print(f"{name} = {value:.6g}")
    return 0