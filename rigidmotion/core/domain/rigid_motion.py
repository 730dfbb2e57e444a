"""
RigidMotion2D — Dual-complex number for 2D rigid-body motion

Immutable Pydantic model holding a pair (rotation_part, translation_part) of
Complex2D values. It represents the affine map

    p ↦ rotation_part · p + translation_part

where · is complex multiplication (rotation of p reinterpreted as a complex
number) and + is vector addition.

COMPOSITION:
    (r1, t1) * (r2, t2) = (r1·r2, r1·t2 + t1)

    a * b applies b first, then a. This is affine composition, not the literal
    dual-number ring product (r1·t2 + t1·r2): translation_part always holds the
    net translation vector, so translation() needs no extraction-time rotation.
    Composition is associative but not commutative.

CRITICAL INVARIANTS:
1. A valid rigid motion has |rotation_part| = 1; translation_part has no norm
   constraint and is never scaled by the rotation magnitude
2. General operations (multiply, inverted, conjugates) accept any magnitude
3. inverted_normalized() requires |rotation_part| = 1 and reports a violation
   through the logger plus a NaN result that is unequal to itself
4. Every operation returns a new value; nothing mutates
"""

import logging
from typing import Sequence

from pydantic import BaseModel, Field

from rigidmotion.core.domain.complex2d import Complex2D
from rigidmotion.core.domain.vec2 import Vec2
from rigidmotion.core.math.numerical_safeguards import (
    NAN,
    is_close,
    is_normalized_squared,
    is_zero,
)

logger = logging.getLogger(__name__)


# Homogeneous 3×3 matrix as rows
Matrix3 = tuple[
    tuple[float, float, float],
    tuple[float, float, float],
    tuple[float, float, float],
]


class RigidMotion2D(BaseModel):
    """
    Dual-complex number (rotation_part, translation_part).

    RigidMotion2D() is the identity ((1, 0), (0, 0)). Equality is pairwise
    fuzzy equality of the two Complex2D components.
    """

    rotation_part: Complex2D = Field(..., description="Rotation (unit complex number for a rigid motion)")
    translation_part: Complex2D = Field(..., description="Translation vector encoded as a complex number")

    model_config = {"frozen": True}  # Immutable

    # Fuzzy equality is not transitive, so there is no consistent hash
    __hash__ = None

    def __init__(
        self,
        rotation_part: Complex2D | None = None,
        translation_part: Complex2D | None = None,
    ) -> None:
        super().__init__(
            rotation_part=Complex2D() if rotation_part is None else rotation_part,
            translation_part=Complex2D(0.0, 0.0) if translation_part is None else translation_part,
        )

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def identity(cls) -> "RigidMotion2D":
        """Identity map: ((1, 0), (0, 0))."""
        return cls(Complex2D(1.0, 0.0), Complex2D(0.0, 0.0))

    @classmethod
    def from_parts(cls, rotation_part: Complex2D, translation_part: Complex2D) -> "RigidMotion2D":
        """Direct construction, no validation."""
        return cls(rotation_part, translation_part)

    @classmethod
    def from_translation(cls, vector: Vec2) -> "RigidMotion2D":
        """
        Pure translation by vector.

        Args:
            vector: Translation vector

        Returns:
            ((1, 0), (vector.x, vector.y))
        """
        return cls(Complex2D(1.0, 0.0), Complex2D.from_vector(vector))

    @classmethod
    def from_rotation(cls, angle_rad: float) -> "RigidMotion2D":
        """
        Pure rotation about the origin.

        Args:
            angle_rad: Rotation angle in radians (counterclockwise)

        Returns:
            (Complex2D.rotation(angle_rad), (0, 0))
        """
        return cls(Complex2D.rotation(angle_rad), Complex2D(0.0, 0.0))

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[float]]) -> "RigidMotion2D":
        """
        Build from a homogeneous 3×3 rigid transformation matrix.

        The matrix must have the form ((c, -s, tx), (s, c, ty), (0, 0, 1)) with
        c² + s² = 1. A matrix of the right shape that is not rigid is a
        precondition violation: it is logged at ERROR level and the NaN
        sentinel is returned, as in inverted_normalized().

        Args:
            matrix: Three rows of three floats

        Returns:
            ((c, s), (tx, ty)), or the NaN sentinel for a non-rigid matrix

        Raises:
            ValueError: If matrix is not 3×3
        """
        if len(matrix) != 3 or any(len(row) != 3 for row in matrix):
            raise ValueError(f"matrix must be 3x3, got {matrix!r}")

        c, s = matrix[0][0], matrix[1][0]
        rigid = (
            is_normalized_squared(c * c + s * s)
            and is_close(matrix[1][1], c)
            and is_close(matrix[0][1], -s)
            and is_zero(matrix[2][0])
            and is_zero(matrix[2][1])
            and is_close(matrix[2][2], 1.0)
        )
        if not rigid:
            logger.error("RigidMotion2D.from_matrix(): matrix must be a rigid transformation")
            return cls(Complex2D(NAN, NAN), Complex2D(NAN, NAN))

        return cls(Complex2D(c, s), Complex2D(matrix[0][2], matrix[1][2]))

    def to_matrix(self) -> Matrix3:
        """Homogeneous 3×3 matrix of the represented affine map, as rows."""
        c, s = self.rotation_part.real, self.rotation_part.imag
        return (
            (c, -s, self.translation_part.real),
            (s, c, self.translation_part.imag),
            (0.0, 0.0, 1.0),
        )

    # =========================================================================
    # COMPOSITION
    # =========================================================================

    def __mul__(self, other: "RigidMotion2D") -> "RigidMotion2D":
        """
        Affine composition: (r1, t1) * (r2, t2) = (r1·r2, r1·t2 + t1).

        (a * b)(p) = a(b(p)).
        """
        if not isinstance(other, RigidMotion2D):
            return NotImplemented
        return RigidMotion2D(
            self.rotation_part * other.rotation_part,
            self.rotation_part * other.translation_part + self.translation_part,
        )

    # =========================================================================
    # MAGNITUDE & NORMALIZATION
    # =========================================================================

    def length_squared(self) -> float:
        """
        Squared magnitude of rotation_part only.

        Measures how far the value is from a valid rigid motion; the
        translation does not contribute.
        """
        return self.rotation_part.length_squared()

    def length(self) -> float:
        return self.rotation_part.length()

    def is_normalized(self) -> bool:
        """True if |rotation_part| = 1 within tolerance."""
        return self.rotation_part.is_normalized()

    def normalized(self) -> "RigidMotion2D":
        """
        Divide rotation_part by its magnitude; translation_part is unchanged.

        Only the rotation carries a unit-norm constraint.
        """
        return RigidMotion2D(self.rotation_part.normalized(), self.translation_part)

    # =========================================================================
    # CONJUGATES
    # =========================================================================

    def complex_conjugated(self) -> "RigidMotion2D":
        """Conjugate both parts as ordinary complex numbers: (conj r, conj t)."""
        return RigidMotion2D(self.rotation_part.conjugated(), self.translation_part.conjugated())

    def dual_conjugated(self) -> "RigidMotion2D":
        """Negate the translation part: (r, -t)."""
        return RigidMotion2D(self.rotation_part, -self.translation_part)

    def conjugated(self) -> "RigidMotion2D":
        """
        Dual-number conjugate: (conj r, -conj t).

        The translation keeps its imaginary component and negates its real one.
        """
        return RigidMotion2D(self.rotation_part.conjugated(), -self.translation_part.conjugated())

    # =========================================================================
    # INVERSION
    # =========================================================================

    def inverted(self) -> "RigidMotion2D":
        """
        Inverse map for any nonzero rotation magnitude.

        Solving p = r·q + t for q gives q = r⁻¹·p - r⁻¹·t, hence
        (r⁻¹, -(r⁻¹·t)) with r⁻¹ = conj(r) / |r|².

        Returns:
            x such that self * x == x * self == identity()

        Raises:
            ZeroDivisionError: If rotation_part is exactly zero

        Examples:
            >>> RigidMotion2D(Complex2D(-1.0, 1.5), Complex2D(3.0, -7.5)).inverted()
            RigidMotion2D({-0.307692, -0.461538}, {4.38462, -0.923077})
        """
        rotation_inv = self.rotation_part.inverted()
        return RigidMotion2D(rotation_inv, -(rotation_inv * self.translation_part))

    def inverted_normalized(self) -> "RigidMotion2D":
        """
        Inverse of a valid rigid motion: (conj r, -(conj r · t)).

        Precondition: |rotation_part| = 1. On violation nothing is raised:
        Complex2D.inverted_normalized() logs the violation at ERROR level and
        the NaN it returns propagates into both parts, so the result compares
        unequal to itself.
        """
        rotation_inv = self.rotation_part.inverted_normalized()
        return RigidMotion2D(rotation_inv, -(rotation_inv * self.translation_part))

    # =========================================================================
    # RIGID-MOTION INTERPRETATION
    # =========================================================================

    def rotation_angle(self) -> float:
        """Rotation angle in radians, in (-π, π]. Scale invariant."""
        return self.rotation_part.angle()

    def translation(self) -> Vec2:
        """
        translation_part as a vector, untransformed.

        Composition keeps translation_part equal to the net translation:
        translation(t) * rotation(θ) has translation t, while
        rotation(θ) * translation(t) has translation t rotated by θ.
        """
        return self.translation_part.to_vector()

    def transform_point(self, point: Vec2) -> Vec2:
        """Apply the map to a point: rotation_part · point + translation_part."""
        return self.rotation_part.transform_vector(point) + self.translation()

    # =========================================================================
    # COMPARISON & DEBUG OUTPUT
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RigidMotion2D):
            return NotImplemented
        return self.rotation_part == other.rotation_part and self.translation_part == other.translation_part

    def __repr__(self) -> str:
        r, t = self.rotation_part, self.translation_part
        return f"RigidMotion2D({{{r.real:g}, {r.imag:g}}}, {{{t.real:g}, {t.imag:g}}})"
