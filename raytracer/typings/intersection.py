from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from raytracer.surfaces.shape import Shape


@dataclass(frozen=True, slots=True, eq=False)
class Intersection:
    t: float
    shape: Shape

    def __lt__(self, other: Intersection) -> bool:
        return self.t < other.t


def sort_intersections(intersections: Iterable[Intersection]) -> List[Intersection]:
    # sorted() is stable, equal t keep their input order
    return sorted(intersections, key=lambda intersection: intersection.t)


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Smallest non-negative t, the first one wins on ties."""
    best_hit: Intersection | None = None
    for intersection in intersections:
        if intersection.t < 0.0:
            continue
        if best_hit is None or intersection.t < best_hit.t:
            best_hit = intersection
    return best_hit
