"""Multi-precision computing module."""

from .MPC import MPC
from .abstract.IMPC import IMPC
from .types import MPZ, MPZ_TYPE, Integer, RandomState, T

__all__ = ["MPC", "IMPC", "MPZ", "MPZ_TYPE", "Integer", "RandomState", "T"]
