"""Parse, serialize, morph and query SVG paths made of cubic bezier curves.

Modules:
- geometry: Point and bezier evaluation helpers
- segments: Move, Curve and Close segments and their builders
- serializer: path -> SVG path text (and JSON)
- normalizer: SVG path text -> path
- solver: y for a given x along a path
- interpolation: morphing between structurally identical paths
- logging_config: structured log output for applications embedding the library
"""

from pathmorph.errors import (
    AsymmetricPaths,
    EmptyPath,
    InvalidInputRange,
    MalformedPathSequence,
    PathError,
    UnknownSegmentKind,
)
from pathmorph.geometry import Point, lerp
from pathmorph.interpolation import (
    Extrapolation,
    blend_paths,
    interpolate,
    interpolate_path,
    mix_path,
)
from pathmorph.logging_config import StructuredFormatter, configure_logging
from pathmorph.normalizer import (
    NormalizedCommand,
    from_normalized,
    normalize,
    parse,
    to_normalized,
)
from pathmorph.segments import (
    Close,
    Curve,
    Move,
    Path,
    Segment,
    SegmentType,
    close,
    curve,
    exhaustive_check,
    move,
)
from pathmorph.serializer import dump_path, load_path, serialize
from pathmorph.solver import cubic_bezier_y_for_x, get_y_for_x, solve_cubic

__all__ = [
    # Errors
    "AsymmetricPaths",
    "EmptyPath",
    "InvalidInputRange",
    "MalformedPathSequence",
    "PathError",
    "UnknownSegmentKind",
    # Geometry
    "Point",
    "lerp",
    # Segments
    "Close",
    "Curve",
    "Move",
    "Path",
    "Segment",
    "SegmentType",
    "close",
    "curve",
    "exhaustive_check",
    "move",
    # Text and JSON
    "NormalizedCommand",
    "dump_path",
    "from_normalized",
    "load_path",
    "normalize",
    "parse",
    "serialize",
    "to_normalized",
    # Curve lookup
    "cubic_bezier_y_for_x",
    "get_y_for_x",
    "solve_cubic",
    # Interpolation
    "Extrapolation",
    "blend_paths",
    "interpolate",
    "interpolate_path",
    "mix_path",
    # Logging
    "StructuredFormatter",
    "configure_logging",
]
