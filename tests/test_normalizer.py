"""Tests for parsing SVG path strings into normalized paths."""

import pytest

from pathmorph.errors import MalformedPathSequence
from pathmorph.geometry import Point
from pathmorph.interpolation import blend_paths
from pathmorph.normalizer import from_normalized, normalize, parse, to_normalized
from pathmorph.segments import Close, Curve, Move, close, curve, move
from pathmorph.serializer import serialize

EXAMPLE = "M150,0 C150,0 0,75 200,75 C75,200 200,225 200,225 C225,200 200,150 0,150"


class TestFromNormalized:
    def test_curves_start_at_previous_end(self) -> None:
        path = from_normalized(
            [
                ("M", 0, 0),
                ("C", 1, 1, 2, 2, 3, 3),
                ("C", 4, 4, 5, 5, 6, 6),
                ("Z",),
            ]
        )
        assert path == (
            move(0, 0),
            curve((0, 0), (3, 3), (1, 1), (2, 2)),
            curve((3, 3), (6, 6), (4, 4), (5, 5)),
            close(),
        )

    def test_leading_curve_starts_at_origin(self) -> None:
        path = from_normalized([("C", 1, 1, 2, 2, 3, 3)])
        assert path[0].from_ == Point(x=0, y=0)  # type: ignore[union-attr]

    def test_move_after_close_starts_new_subpath(self) -> None:
        path = from_normalized(
            [
                ("M", 0, 0),
                ("C", 1, 1, 2, 2, 3, 3),
                ("Z",),
                ("M", 10, 10),
                ("C", 11, 11, 12, 12, 13, 13),
            ]
        )
        assert path[4].from_ == Point(x=10, y=10)  # type: ignore[union-attr]

    def test_curve_after_close_is_malformed(self) -> None:
        with pytest.raises(MalformedPathSequence):
            from_normalized(
                [
                    ("M", 0, 0),
                    ("C", 1, 1, 2, 2, 3, 3),
                    ("Z",),
                    ("C", 4, 4, 5, 5, 6, 6),
                ]
            )

    def test_unknown_command(self) -> None:
        with pytest.raises(MalformedPathSequence, match="unknown type"):
            from_normalized([("M", 0, 0), ("L", 1, 1)])

    def test_wrong_arity(self) -> None:
        with pytest.raises(MalformedPathSequence, match="takes 6 coordinates"):
            from_normalized([("M", 0, 0), ("C", 1, 1, 2, 2)])

    def test_non_numeric_coordinate(self) -> None:
        with pytest.raises(MalformedPathSequence):
            from_normalized([("M", "left", "top")])

    def test_untagged_command(self) -> None:
        with pytest.raises(MalformedPathSequence):
            from_normalized(["M00"])

    def test_empty(self) -> None:
        assert from_normalized([]) == ()


class TestToNormalized:
    def test_flattens_segments(self) -> None:
        path = [move(0, 0), curve((0, 0), (3, 3), (1, 1), (2, 2)), close()]
        assert to_normalized(path) == [
            ("M", 0, 0),
            ("C", 1, 1, 2, 2, 3, 3),
            ("Z",),
        ]

    def test_inverse_of_from_normalized(self) -> None:
        commands = [("M", 0.0, 0.0), ("C", 1.0, 1.0, 2.0, 2.0, 3.0, 3.0), ("Z",)]
        assert to_normalized(from_normalized(commands)) == commands


class TestNormalize:
    def test_blank(self) -> None:
        assert normalize("") == []
        assert normalize("   ") == []

    def test_line_becomes_cubic(self) -> None:
        commands = normalize("M0,0 L30,0")
        assert commands[0] == ("M", 0.0, 0.0)
        assert commands[1][0] == "C"
        assert commands[1][1:] == pytest.approx((10, 0, 20, 0, 30, 0))

    def test_relative_coordinates(self) -> None:
        commands = normalize("m10,10 l10,0")
        assert commands[0] == ("M", 10.0, 10.0)
        assert commands[1][-2:] == pytest.approx((20, 10))

    def test_quadratic_is_elevated(self) -> None:
        commands = normalize("M0,0 Q50,100 100,0")
        assert commands[1][0] == "C"
        assert commands[1][1:] == pytest.approx(
            (100 / 3, 200 / 3, 200 / 3, 200 / 3, 100, 0)
        )

    def test_arc_becomes_cubics(self) -> None:
        commands = normalize("M0,0 A50,50 0 0 1 100,0")
        assert commands[0] == ("M", 0.0, 0.0)
        assert len(commands) >= 3
        assert all(c[0] == "C" for c in commands[1:])
        assert commands[-1][-2:] == pytest.approx((100, 0), abs=1e-9)

    def test_close_is_kept_as_is(self) -> None:
        commands = normalize("M0,0 L10,0 L10,10 Z")
        assert [c[0] for c in commands] == ["M", "C", "C", "Z"]

    def test_geometrically_closed_without_z_stays_open(self) -> None:
        commands = normalize("M0,0 L10,0 L0,0")
        assert [c[0] for c in commands] == ["M", "C", "C"]

    def test_bare_and_trailing_moves_are_kept(self) -> None:
        assert normalize("M3,4") == [("M", 3.0, 4.0)]
        commands = normalize("M0,0 L10,0 M20,20")
        assert [c[0] for c in commands] == ["M", "C", "M"]
        assert commands[-1] == ("M", 20.0, 20.0)

    def test_move_at_current_point_is_kept(self) -> None:
        commands = normalize("M0,0 L10,0 M10,0 L20,0")
        assert [c[0] for c in commands] == ["M", "C", "M", "C"]

    def test_drawing_after_close_starts_at_subpath_start(self) -> None:
        commands = normalize("M5,5 L10,5 L10,10 Z L20,20")
        assert [c[0] for c in commands] == ["M", "C", "C", "Z", "M", "C"]
        assert commands[4] == ("M", 5.0, 5.0)

    def test_open_subpath_has_no_close(self) -> None:
        commands = normalize(EXAMPLE)
        assert [c[0] for c in commands] == ["M", "C", "C", "C"]

    def test_separate_subpaths(self) -> None:
        commands = normalize("M0,0 L10,0 M50,50 L60,50")
        assert [c[0] for c in commands] == ["M", "C", "M", "C"]
        assert commands[2] == ("M", 50.0, 50.0)

    def test_unparsable(self) -> None:
        with pytest.raises(MalformedPathSequence):
            normalize("M 0 0 C 10 10")


class TestParse:
    def test_example_path(self) -> None:
        path = parse(EXAMPLE)
        assert len(path) == 4
        assert isinstance(path[0], Move)
        assert all(isinstance(s, Curve) for s in path[1:])
        assert path[1].from_ == Point(x=150, y=0)  # type: ignore[union-attr]
        assert path[2].from_ == Point(x=200, y=75)  # type: ignore[union-attr]
        assert path[3].from_ == Point(x=200, y=225)  # type: ignore[union-attr]
        assert path[3].to == Point(x=0, y=150)  # type: ignore[union-attr]

    def test_round_trip(self) -> None:
        path = parse(EXAMPLE)
        assert parse(serialize(path)) == path

    def test_round_trip_closed(self) -> None:
        path = parse("M0,0 C10,0 20,0 30,0 C30,10 30,20 30,30 C20,20 10,10 0,0 Z")
        assert isinstance(path[-1], Close)
        assert parse(serialize(path)) == path

    def test_round_trip_through_commands(self) -> None:
        path = parse("M0,0 L10,0 Q20,10 10,20 Z M40,40 L50,50")
        assert from_normalized(normalize(serialize(path))) == path

    @pytest.mark.parametrize(
        "commands",
        [
            pytest.param([("M", 3, 4)], id="bare-move"),
            pytest.param(
                [
                    ("M", 0, 0),
                    ("C", 1, 1, 2, 2, 10, 0),
                    ("M", 10, 0),
                    ("C", 11, 1, 12, 2, 20, 0),
                ],
                id="move-at-previous-end",
            ),
            pytest.param(
                [("M", 0, 0), ("C", 5, 0, 10, 5, 10, 10), ("Z",)],
                id="close-away-from-start",
            ),
            pytest.param(
                [("M", 0, 0), ("C", 10, 0, 10, 10, 0, 0)],
                id="back-at-start-without-close",
            ),
            pytest.param(
                [("M", 0, 0), ("C", 1, 1, 2, 2, 3, 3), ("M", 7, 7)],
                id="trailing-move",
            ),
            pytest.param(
                [("M", 0.1, -2.5), ("C", 1e-07, 1.25, 2.75, 3.3, 4, 5)],
                id="fractional-coordinates",
            ),
        ],
    )
    def test_round_trip_built_paths(self, commands: list[tuple]) -> None:
        path = from_normalized(commands)
        assert parse(serialize(path)) == path

    def test_same_commands_parse_to_same_structure(self) -> None:
        # One shape ends on its start point, the other does not
        p1 = parse("M0,0 L10,0 L0,0")
        p2 = parse("M0,0 L10,0 L5,5")

        blended = blend_paths(0.5, [0, 1], [p1, p2])

        assert [type(s) for s in blended] == [Move, Curve, Curve]
        assert blended[-1].to == Point(x=2.5, y=2.5)  # type: ignore[union-attr]
