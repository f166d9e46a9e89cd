"""Path data model: Move, Curve and Close segments.

A path is an ordered sequence of segments. Operations that build paths
return tuples; operations that read them accept any sequence.

Every consumer dispatches with ``match`` over the three segment classes and
ends with ``exhaustive_check`` so that an unexpected object fails loudly
instead of being skipped.
"""

from collections.abc import Iterator, Sequence
from enum import Enum
from typing import Annotated, Literal, Never

from pydantic import BaseModel, ConfigDict, Field

from pathmorph.errors import UnknownSegmentKind
from pathmorph.geometry import Point, PointLike, as_point


class SegmentType(str, Enum):
    """Segment kinds, valued by their path command letter.

    Segment models store the plain letter in their ``type`` field so the
    discriminated union validates from JSON; ``SegmentType(segment.type)``
    recovers the member, and the two compare equal.
    """

    MOVE = "M"
    CURVE = "C"
    CLOSE = "Z"


class Move(BaseModel):
    """Set the pen position, starting a new subpath."""

    model_config = ConfigDict(frozen=True)

    type: Literal["M"] = "M"
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(x=self.x, y=self.y)


class Curve(BaseModel):
    """A cubic bezier from ``from_`` to ``to`` with control points ``c1``, ``c2``.

    ``from_`` duplicates the previous segment's end point so that a curve
    can be solved or interpolated on its own. It is serialized as ``from``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["C"] = "C"
    from_: Point = Field(alias="from")
    to: Point
    c1: Point
    c2: Point


class Close(BaseModel):
    """Close the current subpath back to its Move position."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Z"] = "Z"


Segment = Annotated[Move | Curve | Close, Field(discriminator="type")]
Path = tuple[Segment, ...]

ORIGIN = Point(x=0.0, y=0.0)


def exhaustive_check(segment: Never) -> Never:
    """Fail on a segment no ``match`` arm handled."""
    raise UnknownSegmentKind(segment)


def move(x: float, y: float) -> Move:
    """Return a move command."""
    return Move(x=x, y=y)


def curve(from_: PointLike, to: PointLike, c1: PointLike, c2: PointLike) -> Curve:
    """Return a cubic bezier curve command."""
    return Curve(from_=as_point(from_), to=as_point(to), c1=as_point(c1), c2=as_point(c2))


def close() -> Close:
    """Return a close command."""
    return Close()


def segment_type(segment: Segment) -> SegmentType:
    """Return the kind of a segment, rejecting anything that is not one."""
    match segment:
        case Move():
            return SegmentType.MOVE
        case Curve():
            return SegmentType.CURVE
        case Close():
            return SegmentType.CLOSE
        case _:
            exhaustive_check(segment)


def pen_positions(path: Sequence[Segment]) -> Iterator[Point]:
    """Yield the pen position in effect before each segment.

    The pen starts at the origin, moves to each Move, follows each Curve's
    end point and returns to the subpath start on Close.
    """
    pen = ORIGIN
    subpath_start = ORIGIN
    for segment in path:
        yield pen
        match segment:
            case Move():
                pen = subpath_start = segment.point
            case Curve():
                pen = segment.to
            case Close():
                pen = subpath_start
            case _:
                exhaustive_check(segment)


def rebase(path: Sequence[Segment]) -> Path:
    """Return the path with every curve starting at the pen position before it."""
    return tuple(
        segment.model_copy(update={"from_": pen})
        if isinstance(segment, Curve) and segment.from_ != pen
        else segment
        for segment, pen in zip(path, pen_positions(path), strict=True)
    )
