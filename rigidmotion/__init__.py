"""
rigidmotion — dual-complex numbers for 2D rigid-body motion.
"""

from rigidmotion.core.domain import Complex2D, RigidMotion2D, Vec2

__version__ = "0.1.0"

__all__ = [
    "Vec2",
    "Complex2D",
    "RigidMotion2D",
]
