"""Modular arithmetic module."""

from .ModularArithmetic import ModularArithmetic
from .abstract.IModularArithmetic import IModularArithmetic
from .types import BezoutCoefficients

__all__ = ["ModularArithmetic", "IModularArithmetic", "BezoutCoefficients"]
