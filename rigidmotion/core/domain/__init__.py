"""
Domain value objects.

Vec2 → Complex2D → RigidMotion2D, each an immutable Pydantic model with fuzzy
equality.
"""

from rigidmotion.core.domain.complex2d import Complex2D
from rigidmotion.core.domain.rigid_motion import Matrix3, RigidMotion2D
from rigidmotion.core.domain.vec2 import Vec2

__all__ = [
    "Vec2",
    "Complex2D",
    "Matrix3",
    "RigidMotion2D",
]
