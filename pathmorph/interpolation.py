"""Pure functions for morphing between paths.

A scalar ``value`` is mapped through a breakpoint table (``input_range``)
onto one output per input path. Every coordinate of every segment is
interpolated independently with the same scalar primitive.
"""

import logging
import math
from bisect import bisect_right
from collections.abc import Sequence
from enum import Enum

from pathmorph.errors import AsymmetricPaths, InvalidInputRange
from pathmorph.geometry import Point, lerp
from pathmorph.segments import (
    Close,
    Curve,
    Move,
    Path,
    Segment,
    exhaustive_check,
    rebase,
    segment_type,
)
from pathmorph.serializer import serialize

logger = logging.getLogger(__name__)


class Extrapolation(str, Enum):
    """What happens to values outside the input range."""

    CLAMP = "clamp"  # pin to the nearest boundary output


def _validate_range(input_range: Sequence[float], size: int) -> None:
    if not input_range:
        raise InvalidInputRange("input_range must not be empty")
    if len(input_range) != size:
        raise InvalidInputRange(
            f"input_range has {len(input_range)} breakpoints for {size} outputs"
        )
    if any(not math.isfinite(v) for v in input_range):
        raise InvalidInputRange(f"input_range must be finite: {list(input_range)}")
    if any(lo > hi for lo, hi in zip(input_range, input_range[1:])):
        raise InvalidInputRange(f"input_range must be ascending: {list(input_range)}")


def _interpolate(
    value: float, input_range: Sequence[float], output_range: Sequence[float]
) -> float:
    # Clamp outside the breakpoints
    if value <= input_range[0]:
        return output_range[0]
    if value >= input_range[-1]:
        return output_range[-1]

    hi = bisect_right(input_range, value)
    lo = hi - 1
    t = (value - input_range[lo]) / (input_range[hi] - input_range[lo])
    return lerp(output_range[lo], output_range[hi], t)


def interpolate(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    extrapolation: Extrapolation | str = Extrapolation.CLAMP,
) -> float:
    """Map value through ascending breakpoints onto the matching outputs.

    Between two breakpoints the output is linear; outside the range it is
    pinned to the first or last output.

    Raises:
        InvalidInputRange: if the ranges differ in length, are empty, or the
            breakpoints are not ascending
        ValueError: for NaN values or an unknown extrapolation
    """
    Extrapolation(extrapolation)
    if math.isnan(value):
        raise ValueError("Cannot interpolate NaN")
    _validate_range(input_range, len(output_range))
    return _interpolate(value, input_range, output_range)


def _check_symmetry(paths: Sequence[Sequence[Segment]]) -> None:
    if not paths:
        raise AsymmetricPaths("No paths to interpolate")

    template = paths[0]
    for path_index, path in enumerate(paths[1:], start=1):
        if len(path) != len(template):
            raise AsymmetricPaths(
                f"Paths to interpolate are not symmetrical: path {path_index} has "
                f"{len(path)} segments, expected {len(template)}"
            )
        for index, (expected, actual) in enumerate(zip(template, path, strict=True)):
            if segment_type(actual) != segment_type(expected):
                raise AsymmetricPaths(
                    f"Paths to interpolate are not symmetrical: segment {index} of "
                    f"path {path_index} is {segment_type(actual).name}, "
                    f"expected {segment_type(expected).name}"
                )


def blend_paths(
    value: float,
    input_range: Sequence[float],
    paths: Sequence[Sequence[Segment]],
    extrapolation: Extrapolation | str = Extrapolation.CLAMP,
) -> Path:
    """Interpolate between structurally identical paths.

    Moves blend x and y, curves blend their end point and both control
    points, closes pass through. Each curve's start is re-derived from
    the blended segment before it.

    Raises:
        AsymmetricPaths: if the paths differ in length or segment kinds
        InvalidInputRange: if input_range does not match the paths
    """
    Extrapolation(extrapolation)
    if math.isnan(value):
        raise ValueError("Cannot interpolate NaN")
    _check_symmetry(paths)
    _validate_range(input_range, len(paths))

    def blend(values: list[float]) -> float:
        return _interpolate(value, input_range, values)

    def blend_point(points: list[Point]) -> Point:
        return Point(x=blend([p.x for p in points]), y=blend([p.y for p in points]))

    blended: list[Segment] = []
    for index, segment in enumerate(paths[0]):
        column = [path[index] for path in paths]
        match segment:
            case Move():
                blended.append(
                    Move(x=blend([s.x for s in column]), y=blend([s.y for s in column]))
                )
            case Curve():
                blended.append(
                    Curve(
                        from_=segment.from_,
                        to=blend_point([s.to for s in column]),
                        c1=blend_point([s.c1 for s in column]),
                        c2=blend_point([s.c2 for s in column]),
                    )
                )
            case Close():
                blended.append(segment)
            case _:
                exhaustive_check(segment)

    logger.debug(
        "Blended %d paths at value=%s",
        len(paths),
        value,
        extra={"path_count": len(paths), "segment_count": len(blended)},
    )
    return rebase(blended)


def interpolate_path(
    value: float,
    input_range: Sequence[float],
    paths: Sequence[Sequence[Segment]],
    extrapolation: Extrapolation | str = Extrapolation.CLAMP,
) -> str:
    """Interpolate between paths and return the SVG path string."""
    return serialize(blend_paths(value, input_range, paths, extrapolation))


def mix_path(
    value: float,
    p1: Sequence[Segment],
    p2: Sequence[Segment],
    extrapolation: Extrapolation | str = Extrapolation.CLAMP,
) -> str:
    """Interpolate two paths with a value that goes from 0 to 1."""
    return interpolate_path(value, [0, 1], [p1, p2], extrapolation)
