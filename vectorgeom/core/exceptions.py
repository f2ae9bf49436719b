"""
Exceptions raised while building geometries.

Every invariant violation detected at construction time raises a subclass
of InvalidGeometryError, so callers (format readers in particular) can
tell precisely which rule a malformed input broke. InvalidGeometryError is
a ValueError: code that only cares about "bad input" can keep catching
ValueError.
"""


class InvalidGeometryError(ValueError):
    """Base exception for geometries that cannot be constructed."""

    pass


class NonNumericCoordinateError(InvalidGeometryError):
    """A coordinate value is not a real number."""

    pass


class MalformedComponentsError(InvalidGeometryError):
    """Component geometries were not supplied as an ordered sequence."""

    pass


class EmptyComponentError(InvalidGeometryError):
    """An empty geometry was placed where only non-empty ones are allowed."""

    pass


class WrongComponentTypeError(InvalidGeometryError):
    """A component is not of the type required by the collection."""

    pass


class TooFewPointsError(InvalidGeometryError):
    """A non-empty LineString was given a single point."""

    pass


class UnclosedRingError(InvalidGeometryError):
    """A Polygon ring is not closed or has fewer than four points."""

    pass
