"""
Vec2 — 2D vector value object

Immutable Pydantic model. Points and translations of the plane are carried as
Vec2; every operation returns a new instance.
"""

import math

from pydantic import BaseModel, Field

from rigidmotion.core.math.numerical_safeguards import is_close


class Vec2(BaseModel):
    """2D vector (x, y). Equality is fuzzy."""

    x: float = Field(default=0.0, description="X component")
    y: float = Field(default=0.0, description="Y component")

    model_config = {"frozen": True}  # Immutable

    # Fuzzy equality is not transitive, so there is no consistent hash
    __hash__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x=x, y=y)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    # =========================================================================
    # COMPARISON & DEBUG OUTPUT
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return is_close(self.x, other.x) and is_close(self.y, other.y)

    def __repr__(self) -> str:
        return f"Vec2({self.x:g}, {self.y:g})"
