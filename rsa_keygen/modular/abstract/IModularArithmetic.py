from abc import ABC, abstractmethod
from ...mpc.types import MPZ, Integer
from ..types import BezoutCoefficients


class IModularArithmetic(ABC):
    """Abstract base class defining the interface for modular arithmetic primitives.

    All arguments are unsigned Integers, i.e. values in [0, 2^64).
    """

    @staticmethod
    @abstractmethod
    def gcd(a: Integer, b: Integer) -> MPZ:
        """Greatest common divisor by the Euclidean algorithm.

        The result does not depend on argument order and gcd(0, b) == b.

        Args:
            a (Integer): First operand
            b (Integer): Second operand

        Returns:
            MPZ: gcd(a, b)
        """

    @staticmethod
    @abstractmethod
    def extended_gcd(a: Integer, b: Integer) -> BezoutCoefficients:
        """Extended Euclidean algorithm.

        Args:
            a (Integer): First operand
            b (Integer): Second operand, may be 0

        Returns:
            BezoutCoefficients: (g, x, y) with a*x + b*y == g == gcd(a, b);
                x and y may be negative
        """

    @staticmethod
    @abstractmethod
    def power_mod(base: Integer, exponent: Integer, modulus: Integer) -> MPZ:
        """Compute base^exponent mod modulus by square-and-multiply.

        Args:
            base (Integer): Base value
            exponent (Integer): Exponent value
            modulus (Integer): Modulus, at least 1

        Returns:
            MPZ: Result in [0, modulus)
        """
