"""
Nearest-centroid scoring of affinity masks against reference centers.
"""

import math
from typing import Iterable, Iterator, Sequence, Tuple, Union

from .affinity import MASK_LENGTH
from .errors import ConfigurationError, DimensionError

Vector = Sequence[float]


def euclidean_distance(a: Vector, b: Vector) -> float:
    """Euclidean distance between two equal-length vectors."""
    total = 0.0
    for x, y in zip(a, b):
        diff = x - y
        total += diff * diff
    return math.sqrt(total)


class CenterSet:
    """Immutable, non-empty collection of reference centers."""

    def __init__(self, centers: Iterable[Vector], dimension: int = MASK_LENGTH):
        frozen = []
        for index, center in enumerate(centers):
            values = tuple(float(v) for v in center)
            if not all(math.isfinite(v) for v in values):
                raise ConfigurationError(f"Center {index} has a non-finite value")
            if len(values) != dimension:
                raise ConfigurationError(
                    f"Center {index} has {len(values)} values, expected {dimension}"
                )
            frozen.append(values)
        if not frozen:
            raise ConfigurationError("Reference center set is empty")
        self._centers: Tuple[Tuple[float, ...], ...] = tuple(frozen)
        self.dimension = dimension

    def __len__(self) -> int:
        return len(self._centers)

    def __iter__(self) -> Iterator[Tuple[float, ...]]:
        return iter(self._centers)

    def __getitem__(self, index: int) -> Tuple[float, ...]:
        return self._centers[index]

    def __repr__(self) -> str:
        return f"CenterSet({len(self)} centers, dimension={self.dimension})"

    def with_center(self, center: Vector) -> 'CenterSet':
        """Return a new set with one more center; this one is unchanged."""
        return CenterSet(self._centers + (tuple(center),), self.dimension)


class NearestCentroidScorer:
    """Minimum Euclidean distance from a mask to any reference center."""

    def __init__(self, centers: Union[CenterSet, Iterable[Vector]]):
        if not isinstance(centers, CenterSet):
            centers = CenterSet(centers)
        self.centers = centers

    @classmethod
    def load(cls, centers: Union[CenterSet, Iterable[Vector]]) -> 'NearestCentroidScorer':
        return cls(centers)

    def min_distance(self, mask: Vector) -> float:
        """Distance from ``mask`` to the closest center."""
        if len(mask) != self.centers.dimension:
            raise DimensionError(
                f"Mask has {len(mask)} values, expected {self.centers.dimension}"
            )
        return min(euclidean_distance(mask, center) for center in self.centers)
