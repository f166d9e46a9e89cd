"""Look up y for a given x on a path of cubic bezier curves.

x(t) and y(t) of a cubic bezier are independent cubics in t. For a curve
that is monotonic in x, ``x(t) = x`` has exactly one root in [0, 1]; it is
found in closed form, polished with a few Newton steps and fed to y(t).
"""

import logging
import math
from collections.abc import Sequence

from pathmorph.config import settings
from pathmorph.geometry import Point, cubic_bezier_component, cubic_coefficients
from pathmorph.segments import Close, Curve, Move, Segment, exhaustive_check

logger = logging.getLogger(__name__)

# Relative size below which a leading coefficient is treated as zero
_DEGENERATE = 1e-12


def _solve_linear(c: float, d: float) -> list[float]:
    if c == 0:
        return []
    return [-d / c]


def _solve_quadratic(b: float, c: float, d: float) -> list[float]:
    if abs(b) <= _DEGENERATE * max(abs(c), abs(d)):
        return _solve_linear(c, d)

    disc = c * c - 4 * b * d
    if disc < 0:
        return []
    if disc == 0:
        return [-c / (2 * b)]

    # Numerically stable form, avoids cancellation between c and sqrt(disc)
    q = -0.5 * (c + math.copysign(math.sqrt(disc), c))
    roots = [q / b]
    if q != 0:
        roots.append(d / q)
    return sorted(roots)


def solve_cubic(a: float, b: float, c: float, d: float) -> list[float]:
    """Return the real roots of ``a*t**3 + b*t**2 + c*t + d`` in ascending order.

    Falls back to the quadratic or linear solution when the leading
    coefficients vanish. A constant polynomial has no roots.
    """
    if a == 0 or abs(a) <= _DEGENERATE * max(abs(b), abs(c), abs(d)):
        return _solve_quadratic(b, c, d)

    # Depressed cubic s**3 + p*s + q with t = s - B/3
    B, C, D = b / a, c / a, d / a
    shift = -B / 3
    p = C - B * B / 3
    q = 2 * B**3 / 27 - B * C / 3 + D
    disc = (q / 2) ** 2 + (p / 3) ** 3

    if disc > 0:
        sqrt_disc = math.sqrt(disc)
        root = math.cbrt(-q / 2 + sqrt_disc) + math.cbrt(-q / 2 - sqrt_disc)
        return [root + shift]

    if disc == 0:
        if q == 0:
            return [shift]
        u = math.cbrt(-q / 2)
        return sorted({2 * u + shift, -u + shift})

    # Three distinct real roots, trigonometric form
    r = math.sqrt(-p / 3)
    phi = math.acos(max(-1.0, min(1.0, -q / (2 * r**3))))
    return sorted(
        2 * r * math.cos((phi - 2 * math.pi * k) / 3) + shift for k in range(3)
    )


def _polish(t: float, coeffs: tuple[float, float, float, float]) -> float:
    """Refine a root with Newton steps, keeping t inside [0, 1]."""
    a, b, c, d = coeffs
    for _ in range(settings.solver_max_iterations):
        residual = ((a * t + b) * t + c) * t + d
        if abs(residual) < settings.solver_tolerance:
            break
        slope = (3 * a * t + 2 * b) * t + c
        if slope == 0:
            break
        t = min(1.0, max(0.0, t - residual / slope))
    return t


def cubic_bezier_y_for_x(x: float, p0: Point, p1: Point, p2: Point, p3: Point) -> float:
    """Return y on the curve p0..p3 where it crosses x.

    The curve must be monotonic in x between p0 and p3. Querying an end
    point's x returns that end point's y exactly. If no parameter in [0, 1]
    solves for x, the nearer end of the curve is used.
    """
    if x == p0.x:
        return p0.y
    if x == p3.x:
        return p3.y

    a, b, c, d = cubic_coefficients(p0.x, p1.x, p2.x, p3.x)
    coeffs = (a, b, c, d - x)
    eps = settings.root_epsilon
    candidates = [
        t for t in solve_cubic(*coeffs) if math.isfinite(t) and -eps <= t <= 1 + eps
    ]

    if candidates:
        t = _polish(min(1.0, max(0.0, candidates[0])), coeffs)
    else:
        t = 0.0 if abs(x - p0.x) <= abs(x - p3.x) else 1.0
        logger.warning(
            "No curve parameter solves x=%s, falling back to t=%s", x, t
        )

    y = cubic_bezier_component(p0.y, p1.y, p2.y, p3.y, t)
    if not math.isfinite(y):
        return p0.y if t < 0.5 else p3.y
    return y


def get_y_for_x(path: Sequence[Segment], x: float) -> float:
    """Return the y value of a path given its x coordinate.

    Uses the first curve, in path order, whose x span contains x (ends
    included). Returns 0 when no curve spans x.

    Example:
        >>> p = parse("M150,0 C150,0 0,75 200,75 C75,200 200,225 200,225 C225,200 200,150 0,150")
        >>> get_y_for_x(p, 200)
        75.0
    """
    for segment in path:
        match segment:
            case Curve():
                start, end = segment.from_, segment.to
                if min(start.x, end.x) <= x <= max(start.x, end.x):
                    return cubic_bezier_y_for_x(x, start, segment.c1, segment.c2, end)
            case Move() | Close():
                continue
            case _:
                exhaustive_check(segment)

    logger.debug("No curve spans x=%s, returning 0", x)
    return 0.0
