"""Errors raised by path parsing, serialization and interpolation."""


class PathError(Exception):
    """Base class for all pathmorph errors."""


class UnknownSegmentKind(PathError, TypeError):
    """A segment matcher was handed something that is not Move, Curve or Close."""

    def __init__(self, segment: object) -> None:
        super().__init__(f"Unknown SVG command: {segment!r}")
        self.segment = segment


class EmptyPath(PathError, ValueError):
    """A path with no segments was passed where at least one is required."""

    def __init__(self) -> None:
        super().__init__("Cannot serialize an empty path")


class AsymmetricPaths(PathError, ValueError):
    """Paths to interpolate do not share the same structure."""


class MalformedPathSequence(PathError, ValueError):
    """A command sequence (or its textual source) cannot form a valid path."""


class InvalidInputRange(PathError, ValueError):
    """A breakpoint table cannot be used for interpolation."""
