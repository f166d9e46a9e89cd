"""Render paths as SVG path text and as JSON."""

import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from pathmorph.errors import EmptyPath, MalformedPathSequence
from pathmorph.segments import Close, Curve, Move, Path, Segment, exhaustive_check

logger = logging.getLogger(__name__)

_path_adapter: TypeAdapter[Path] = TypeAdapter(Path)


def format_number(value: float) -> str:
    """Format a coordinate in its shortest round-trip form.

    Integral values drop the fractional part so that 5.0 renders as ``5``.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


def _point(x: float, y: float) -> str:
    return f"{format_number(x)},{format_number(y)}"


def serialize_move(segment: Move) -> str:
    return f"M{_point(segment.x, segment.y)} "


def serialize_curve(segment: Curve) -> str:
    c1, c2, to = segment.c1, segment.c2, segment.to
    return f"C{_point(c1.x, c1.y)} {_point(c2.x, c2.y)} {_point(to.x, to.y)} "


def serialize_close() -> str:
    return "Z"


def serialize_segment(segment: Segment) -> str:
    """Render one segment as a path command token."""
    match segment:
        case Move():
            return serialize_move(segment)
        case Curve():
            return serialize_curve(segment)
        case Close():
            return serialize_close()
        case _:
            exhaustive_check(segment)


def serialize(path: Sequence[Segment]) -> str:
    """Serialize a path into an SVG path string.

    Curves only emit their control points and end point; the start point
    is the current pen position.

    Raises:
        EmptyPath: if the path has no segments
    """
    if not path:
        raise EmptyPath()
    return "".join(serialize_segment(segment) for segment in path)


def dump_path(path: Sequence[Segment]) -> str:
    """Serialize a path to a JSON array of tagged segments."""
    return _path_adapter.dump_json(tuple(path), by_alias=True).decode()


def load_path(json_text: str | bytes) -> Path:
    """Load a path written by ``dump_path``.

    Raises:
        MalformedPathSequence: if the JSON is invalid or holds an unknown segment
    """
    try:
        return _path_adapter.validate_json(json_text)
    except ValidationError as e:
        logger.debug("Rejected JSON path: %s", e)
        raise MalformedPathSequence(f"Invalid JSON path: {e}") from e
