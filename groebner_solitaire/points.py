"""Points on the natural lattice N x N."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A lattice position ``(x, y)`` with non-negative integer coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))
        if self.x < 0 or self.y < 0:
            raise ValueError(f"lattice point must be non-negative, got ({self.x}, {self.y})")

    def is_southwest_of(self, other: "Point") -> bool:
        """Return ``True`` when ``self`` is componentwise ``<=`` ``other``."""

        return self.x <= other.x and self.y <= other.y

    def join(self, other: "Point") -> "Point":
        """Componentwise maximum; the lattice analogue of an lcm."""

        return Point(max(self.x, other.x), max(self.y, other.y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"( {self.x} , {self.y} )"


__all__ = ["Point"]
