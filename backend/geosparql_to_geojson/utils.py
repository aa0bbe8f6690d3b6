from dataclasses import dataclass
import numpy as np


Coordinate = list[float]
Ring = list[Coordinate]


def ring_to_array(ring: Ring) -> np.ndarray:
    # Only x and y take part in orientation and extent
    return np.array([coordinate[:2] for coordinate in ring], dtype=float).reshape(-1, 2)

def shoelace_sum(ring: Ring) -> float:
    """Signed sum of (x[i+1] - x[i]) * (y[i+1] + y[i]) over consecutive coordinates.

    The ring is taken as given: no closing edge is added between the last and the first coordinate.
    """
    coords = ring_to_array(ring)
    if len(coords) < 2:
        return 0.0
    x = coords[:, 0]
    y = coords[:, 1]
    return float(np.sum((x[1:] - x[:-1]) * (y[1:] + y[:-1])))


@dataclass(frozen=True)
class BoundingBox:
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @classmethod
    def from_ring(cls, ring: Ring) -> 'BoundingBox':
        coords = ring_to_array(ring)
        x_min, y_min = coords.min(axis=0)
        x_max, y_max = coords.max(axis=0)
        return cls(float(x_min), float(y_min), float(x_max), float(y_max))

    def strictly_contains(self, other: 'BoundingBox') -> bool:
        return (
            other.x_min > self.x_min and other.x_max < self.x_max
            and other.y_min > self.y_min and other.y_max < self.y_max
        )
