"""Location entity for the GridCab application."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """
    Represents a point on the city grid.

    Attributes:
        x: Horizontal grid coordinate
        y: Vertical grid coordinate
    """
    x: int
    y: int

    def distance_to(self, other: "Location") -> float:
        """Get the straight-line distance to another location."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        """
        Build a location from a {"x", "y"} mapping.

        Raises:
            ValueError: If either coordinate is not an integer
        """
        x, y = data["x"], data["y"]
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Coordinate must be an integer, got {value!r}")
        return cls(x, y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def distance(a: Location, b: Location) -> float:
    """Euclidean distance between two grid locations."""
    return a.distance_to(b)
