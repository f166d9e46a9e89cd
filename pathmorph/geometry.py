"""Core geometry types and pure Bézier helpers."""

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """An immutable 2D point."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


PointLike = Point | tuple[float, float]


def as_point(value: PointLike) -> Point:
    """Accept a Point or an (x, y) pair."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x=x, y=y)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values.

    Exact at both ends: ``lerp(a, b, 0) == a`` and ``lerp(a, b, 1) == b``.
    """
    return a * (1 - t) + b * t


def cubic_bezier_component(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    """Evaluate one coordinate of a cubic bezier at t."""
    one_minus_t = 1 - t
    return (
        one_minus_t**3 * p0
        + 3 * one_minus_t**2 * t * p1
        + 3 * one_minus_t * t**2 * p2
        + t**3 * p3
    )


def cubic_coefficients(
    p0: float, p1: float, p2: float, p3: float
) -> tuple[float, float, float, float]:
    """Power-basis coefficients (a, b, c, d) of one bezier coordinate.

    The coordinate at t equals ``a*t**3 + b*t**2 + c*t + d``.
    """
    return (
        -p0 + 3 * p1 - 3 * p2 + p3,
        3 * p0 - 6 * p1 + 3 * p2,
        -3 * p0 + 3 * p1,
        p0,
    )
