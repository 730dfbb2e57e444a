"""
Complex2D — Complex number and 2D rotation

Immutable Pydantic model for a complex number (real, imag). With unit magnitude
it represents a rotation of the plane by angle() radians; multiplying a vector
(reinterpreted as a complex number) by it rotates and scales the vector.

Unit magnitude is NOT enforced by the type. It is a precondition tracked by the
caller and checked only by inverted_normalized().

FORMULAS:
    (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    conj(a + bi)     = a - bi
    (a + bi)⁻¹       = conj(a + bi) / (a² + b²)
    rotation(θ)      = cos θ + i·sin θ
"""

import logging
import math

from pydantic import BaseModel, Field

from rigidmotion.core.domain.vec2 import Vec2
from rigidmotion.core.math.numerical_safeguards import (
    NAN,
    is_close,
    is_normalized_squared,
)

logger = logging.getLogger(__name__)


class Complex2D(BaseModel):
    """
    Complex number (real + imag·i).

    The default value (1, 0) is the identity rotation. Equality is fuzzy
    (see numerical_safeguards.is_close); a value holding NaN never compares
    equal, itself included.
    """

    real: float = Field(default=1.0, description="Real part (cosine of the angle for a rotation)")
    imag: float = Field(default=0.0, description="Imaginary part (sine of the angle for a rotation)")

    model_config = {"frozen": True}  # Immutable

    # Fuzzy equality is not transitive, so there is no consistent hash
    __hash__ = None

    def __init__(self, real: float = 1.0, imag: float = 0.0) -> None:
        super().__init__(real=real, imag=imag)

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def rotation(cls, angle_rad: float) -> "Complex2D":
        """
        Unit complex number rotating by angle_rad.

        Args:
            angle_rad: Rotation angle in radians (counterclockwise)

        Returns:
            Complex2D(cos θ, sin θ)

        Examples:
            >>> Complex2D.rotation(math.radians(120.0))
            Complex2D(-0.5, 0.866025)
        """
        return cls(math.cos(angle_rad), math.sin(angle_rad))

    @classmethod
    def from_vector(cls, vector: Vec2) -> "Complex2D":
        """Reinterpret a vector (x, y) as the complex number x + yi."""
        return cls(vector.x, vector.y)

    def to_vector(self) -> Vec2:
        """Reinterpret as a vector (real, imag)."""
        return Vec2(self.real, self.imag)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def __add__(self, other: "Complex2D") -> "Complex2D":
        return Complex2D(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: "Complex2D") -> "Complex2D":
        return Complex2D(self.real - other.real, self.imag - other.imag)

    def __neg__(self) -> "Complex2D":
        return Complex2D(-self.real, -self.imag)

    def __mul__(self, other: "Complex2D | float") -> "Complex2D":
        if isinstance(other, Complex2D):
            return Complex2D(
                self.real * other.real - self.imag * other.imag,
                self.real * other.imag + self.imag * other.real,
            )
        if isinstance(other, (int, float)):
            return Complex2D(self.real * other, self.imag * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Complex2D":
        if isinstance(scalar, (int, float)):
            return Complex2D(self.real * scalar, self.imag * scalar)
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Complex2D":
        # Division by zero raises ZeroDivisionError like any Python float
        return Complex2D(self.real / scalar, self.imag / scalar)

    def dot(self, other: "Complex2D") -> float:
        """Dot product of the two numbers seen as 2D vectors."""
        return self.real * other.real + self.imag * other.imag

    # =========================================================================
    # MAGNITUDE
    # =========================================================================

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def is_normalized(self) -> bool:
        """True if the magnitude is 1 within EPS_NORMALIZED_SQ."""
        return is_normalized_squared(self.length_squared())

    def normalized(self) -> "Complex2D":
        """Same direction, unit magnitude."""
        return self / self.length()

    # =========================================================================
    # CONJUGATE & INVERSE
    # =========================================================================

    def conjugated(self) -> "Complex2D":
        return Complex2D(self.real, -self.imag)

    def inverted(self) -> "Complex2D":
        """
        Multiplicative inverse: conj(z) / |z|².

        Raises:
            ZeroDivisionError: If the magnitude is exactly zero
        """
        return self.conjugated() / self.length_squared()

    def inverted_normalized(self) -> "Complex2D":
        """
        Inverse of a unit complex number: conj(z).

        Precondition: is_normalized(). On violation nothing is raised; the
        violation is logged at ERROR level and Complex2D(nan, nan) is returned,
        which compares unequal to itself.

        Returns:
            conj(z), or the NaN sentinel if z is not normalized
        """
        if not self.is_normalized():
            logger.error("Complex2D.inverted_normalized(): complex number must be normalized")
            return Complex2D(NAN, NAN)
        return self.conjugated()

    # =========================================================================
    # ROTATION INTERPRETATION
    # =========================================================================

    def angle(self) -> float:
        """Rotation angle in radians, in (-π, π]. Independent of magnitude."""
        return math.atan2(self.imag, self.real)

    def transform_vector(self, vector: Vec2) -> Vec2:
        """Rotate (and scale, if not normalized) a vector."""
        return (self * Complex2D.from_vector(vector)).to_vector()

    # =========================================================================
    # COMPARISON & DEBUG OUTPUT
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex2D):
            return NotImplemented
        return is_close(self.real, other.real) and is_close(self.imag, other.imag)

    def __repr__(self) -> str:
        return f"Complex2D({self.real:g}, {self.imag:g})"
