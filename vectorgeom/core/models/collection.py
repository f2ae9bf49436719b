"""
Collection base class.

A collection owns an ordered list of child geometries and derives its own
properties (emptiness, dimensionality flags, bounding box, lengths) from
them. It is the root of every variant other than Point.

Construction-time invariants are checked in __post_init__, so a collection
that violates them is never observable:
- components are passed as a list or tuple
- every component is an instance of ``component_type``
- empty components are rejected unless ``allow_empty_components`` is set
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple, Type, TYPE_CHECKING

from ..exceptions import (
    EmptyComponentError,
    MalformedComponentsError,
    WrongComponentTypeError,
)
from .geometry import Geometry

if TYPE_CHECKING:
    from .point import Point
    from .options import GeodesyOptions


@dataclass
class Collection(Geometry):
    """
    Geometry made of an ordered list of child geometries.

    Attributes:
        components: Child geometries, owned by this collection
    """

    components: List[Geometry] = field(default_factory=list)

    component_type: ClassVar[Type[Geometry]] = Geometry
    allow_empty_components: ClassVar[bool] = True

    def __post_init__(self):
        """Validate components after initialization."""
        if not isinstance(self.components, (list, tuple)):
            raise MalformedComponentsError(
                f"Component geometries must be passed as a list, got {type(self.components).__name__}"
            )
        self.components = list(self.components)

        for component in self.components:
            if not isinstance(component, self.component_type):
                raise WrongComponentTypeError(
                    f"Cannot create a collection of {type(component).__name__} components, "
                    f"expected type is {self.component_type.__name__}"
                )
            if not self.allow_empty_components and component.is_empty():
                raise EmptyComponentError(
                    f"Cannot create a collection of empty {type(component).__name__}s "
                    f"({type(self).__name__})"
                )

    @classmethod
    def from_array(cls, coordinates: Any) -> 'Collection':
        """
        Create a collection from nested coordinate lists.

        Each item is handed to ``component_type.from_array``.

        Raises:
            MalformedComponentsError: If coordinates is not a list
            InvalidGeometryError: If a component cannot be built
        """
        if not isinstance(coordinates, (list, tuple)):
            raise MalformedComponentsError(
                f"{cls.__name__} coordinates must be passed as a list, got {type(coordinates).__name__}"
            )
        return cls([cls.component_type.from_array(item) for item in coordinates])

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.components)

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    def dimension(self) -> int:
        return max((c.dimension() for c in self.components), default=0)

    def is_empty(self) -> bool:
        return all(c.is_empty() for c in self.components)

    def is_3d(self) -> bool:
        return any(c.is_3d() for c in self.components)

    def is_measured(self) -> bool:
        return any(c.is_measured() for c in self.components)

    def is_simple(self) -> bool:
        return all(c.is_simple() for c in self.components)

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------

    def get_components(self) -> List[Geometry]:
        return list(self.components)

    def num_geometries(self) -> int:
        return len(self.components)

    def geometry_n(self, n: int) -> Optional[Geometry]:
        """Return the n-th component (1-based), None if out of range."""
        if 1 <= n <= len(self.components):
            return self.components[n - 1]
        return None

    def get_points(self) -> List['Point']:
        points: List['Point'] = []
        for component in self.components:
            points.extend(component.get_points())
        return points

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------

    def get_bbox(self) -> Optional[Dict[str, float]]:
        points = [p for p in self.get_points() if not p.is_empty()]
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return {"minx": min(xs), "miny": min(ys), "maxx": max(xs), "maxy": max(ys)}

    def area(self) -> float:
        return sum((c.area() for c in self.components), 0.0)

    def length(self) -> float:
        return sum((c.length() for c in self.components), 0.0)

    def length_3d(self) -> float:
        return sum((c.length_3d() for c in self.components), 0.0)

    def great_circle_length(
        self, radius: Optional[float] = None, options: Optional['GeodesyOptions'] = None
    ) -> float:
        return sum((c.great_circle_length(radius, options) for c in self.components), 0.0)

    def haversine_length(
        self, radius: Optional[float] = None, options: Optional['GeodesyOptions'] = None
    ) -> float:
        return sum((c.haversine_length(radius, options) for c in self.components), 0.0)

    def vincenty_length(self, options: Optional['GeodesyOptions'] = None) -> Optional[float]:
        """Sum of the components' Vincenty lengths; None if any is None."""
        length = 0.0
        for component in self.components:
            component_length = component.vincenty_length(options)
            if component_length is None:
                return None
            length += component_length
        return length

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def as_array(self) -> List[Any]:
        return [c.as_array() for c in self.components]

    def flatten(self) -> 'Collection':
        for component in self.components:
            component.flatten()
        return self

    def invert_xy(self) -> 'Collection':
        for component in self.components:
            component.invert_xy()
        return self

    def explode(self, as_components: bool = False) -> Optional[List[Any]]:
        """
        Decompose the collection into its line segments.

        Components for which explode is not applicable (points) are skipped.

        Args:
            as_components: Return ``[Point, Point]`` pairs instead of
                two-point LineStrings

        Returns:
            Segments of every component, in component order
        """
        parts: List[Any] = []
        for component in self.components:
            component_parts = component.explode(as_components)
            if component_parts is not None:
                parts.extend(component_parts)
        return parts

    def equals(self, other: Geometry) -> bool:
        """Same variant, same number of components, and pairwise equal components."""
        if not isinstance(other, Geometry) or other.geometry_type() != self.geometry_type():
            return False
        if len(self.components) != len(other.get_components()):
            return False
        return all(a.equals(b) for a, b in zip(self.components, other.get_components()))

    def _distance_parts(self) -> List[Tuple]:
        parts: List[Tuple] = []
        for component in self.components:
            if not component.is_empty():
                parts.extend(component._distance_parts())
        return parts
