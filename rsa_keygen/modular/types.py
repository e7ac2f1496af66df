"""Named results of the modular arithmetic primitives."""

from typing import NamedTuple

from ..mpc.types import MPZ


class BezoutCoefficients(NamedTuple):
    """Result of the extended Euclidean algorithm: a*x + b*y == g."""

    g: MPZ
    x: MPZ
    y: MPZ
