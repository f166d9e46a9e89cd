"""Parse SVG path strings into paths made only of moves, cubic curves and closes.

Tokenizing the path grammar (relative coordinates, shorthand commands,
arcs) is left to svgelements. Its Move and Close segments are kept one for
one, and every drawing segment is turned into a cubic. The result is a list
of normalized command tuples:

    ("M", x, y)
    ("C", c1x, c1y, c2x, c2y, x, y)
    ("Z",)

which ``from_normalized`` folds into Move/Curve/Close segments.
"""

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Literal

import svgelements
from pydantic import ValidationError

from pathmorph.config import settings
from pathmorph.errors import MalformedPathSequence
from pathmorph.geometry import Point
from pathmorph.segments import (
    ORIGIN,
    Close,
    Curve,
    Move,
    Path,
    Segment,
    close,
    exhaustive_check,
    move,
)

logger = logging.getLogger(__name__)

MoveCommand = tuple[Literal["M"], float, float]
CurveCommand = tuple[Literal["C"], float, float, float, float, float, float]
CloseCommand = tuple[Literal["Z"]]
NormalizedCommand = MoveCommand | CurveCommand | CloseCommand

# Number of coordinates each command letter carries
COMMAND_ARITY = {"M": 2, "C": 6, "Z": 0}


def _xy(point: Any, segment: object) -> tuple[float, float]:
    if point is None:
        raise MalformedPathSequence(f"Incomplete path segment: {segment!r}")
    return float(point.x), float(point.y)


def _cubic_command(
    c1: tuple[float, float], c2: tuple[float, float], end: tuple[float, float]
) -> CurveCommand:
    return ("C", c1[0], c1[1], c2[0], c2[1], end[0], end[1])


def _segment_to_cubics(segment: object) -> Iterator[CurveCommand]:
    """Convert one svgelements drawing segment into equivalent cubic commands."""
    if isinstance(segment, svgelements.Line):
        (sx, sy), (ex, ey) = _xy(segment.start, segment), _xy(segment.end, segment)
        dx, dy = ex - sx, ey - sy
        yield _cubic_command(
            (sx + dx / 3, sy + dy / 3), (sx + 2 * dx / 3, sy + 2 * dy / 3), (ex, ey)
        )
    elif isinstance(segment, svgelements.QuadraticBezier):
        # Exact degree elevation
        sx, sy = _xy(segment.start, segment)
        qx, qy = _xy(segment.control, segment)
        ex, ey = _xy(segment.end, segment)
        yield _cubic_command(
            (sx + 2 * (qx - sx) / 3, sy + 2 * (qy - sy) / 3),
            (ex + 2 * (qx - ex) / 3, ey + 2 * (qy - ey) / 3),
            (ex, ey),
        )
    elif isinstance(segment, svgelements.CubicBezier):
        yield _cubic_command(
            _xy(segment.control1, segment),
            _xy(segment.control2, segment),
            _xy(segment.end, segment),
        )
    elif isinstance(segment, svgelements.Arc):
        sweep = math.degrees(abs(segment.sweep))
        pieces = max(1, math.ceil(sweep / settings.arc_segment_degrees))
        for cubic in segment.as_cubic_curves(pieces):
            yield from _segment_to_cubics(cubic)
    else:
        raise MalformedPathSequence(f"Unsupported path segment: {segment!r}")


def normalize(d: str) -> list[NormalizedCommand]:
    """Parse an SVG path 'd' string into absolute move/cubic/close commands.

    Every ``M`` and ``Z`` in the text yields exactly one move or close.
    Drawing commands that follow a ``Z`` directly start a new subpath at the
    closed subpath's start, so a move is inserted there.

    Raises:
        MalformedPathSequence: if svgelements cannot parse the string
    """
    if not d or not d.strip():
        return []

    try:
        svg_path = svgelements.Path(d)
        segments = list(svg_path)
    except Exception as e:
        raise MalformedPathSequence(f"Cannot parse path data {d!r}: {e}") from e

    commands: list[NormalizedCommand] = []
    closed = False
    for segment in segments:
        if isinstance(segment, svgelements.Move):
            x, y = _xy(segment.end, segment)
            commands.append(("M", x, y))
            closed = False
        elif isinstance(segment, svgelements.Close):
            commands.append(("Z",))
            closed = True
        else:
            if closed:
                x, y = _xy(segment.start, segment)
                commands.append(("M", x, y))
                closed = False
            commands.extend(_segment_to_cubics(segment))

    return commands


def _unpack(command: Sequence[Any], index: int) -> tuple[str, list[Any]]:
    if isinstance(command, str) or not isinstance(command, Sequence) or not command:
        raise MalformedPathSequence(f"Command {index} is not a tagged tuple: {command!r}")

    letter, *args = command
    if not isinstance(letter, str) or letter not in COMMAND_ARITY:
        raise MalformedPathSequence(f"Command {index} has unknown type {letter!r}")
    arity = COMMAND_ARITY[letter]
    if len(args) != arity:
        raise MalformedPathSequence(
            f"Command {index} ({letter}) takes {arity} coordinates, got {len(args)}"
        )
    return letter, args


def from_normalized(commands: Iterable[Sequence[Any]]) -> Path:
    """Build a path from normalized command tuples.

    The pen position is carried forward so every curve knows where it
    starts. A leading curve starts at the origin.

    Raises:
        MalformedPathSequence: on an unknown or mis-sized command, or a curve
            that follows a close with no move in between
    """
    segments: list[Segment] = []
    pen: Point | None = ORIGIN

    try:
        for index, command in enumerate(commands):
            letter, args = _unpack(command, index)
            if letter == "M":
                segment = move(*args)
                pen = segment.point
                segments.append(segment)
            elif letter == "C":
                if pen is None:
                    raise MalformedPathSequence(
                        f"Curve at command {index} follows a close with no move"
                    )
                c1x, c1y, c2x, c2y, x, y = args
                segment = Curve(
                    from_=pen,
                    c1=Point(x=c1x, y=c1y),
                    c2=Point(x=c2x, y=c2y),
                    to=Point(x=x, y=y),
                )
                pen = segment.to
                segments.append(segment)
            else:
                segments.append(close())
                pen = None
    except ValidationError as e:
        raise MalformedPathSequence(f"Non-numeric coordinate in path commands: {e}") from e

    return tuple(segments)


def to_normalized(path: Sequence[Segment]) -> list[NormalizedCommand]:
    """Flatten a path back into normalized command tuples."""
    commands: list[NormalizedCommand] = []
    for segment in path:
        match segment:
            case Move():
                commands.append(("M", segment.x, segment.y))
            case Curve():
                c1, c2, to = segment.c1, segment.c2, segment.to
                commands.append(("C", c1.x, c1.y, c2.x, c2.y, to.x, to.y))
            case Close():
                commands.append(("Z",))
            case _:
                exhaustive_check(segment)
    return commands


def parse(d: str) -> Path:
    """Parse an SVG path into a sequence of bezier curves.

    The path is made absolute and every drawing command is turned into a
    cubic bezier.
    """
    path = from_normalized(normalize(d))
    logger.debug("Parsed path into %d segments", len(path))
    return path
