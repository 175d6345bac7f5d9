"""Tests for boundaries, cone placement and cone noise."""

import pytest
import numpy as np

from conemap.geometry.arc import Arc, ArcBuilder, ArcDirection
from conemap.geometry.primitives import Line, Point, Side, side_of_line
from conemap.track.boundary import BoundaryArc, BoundaryCalculator, boundary_color
from conemap.track.config import TrackConfig
from conemap.track.cones import Cone, ConeColor, ConeNoise, ConeSize
from conemap.track.placement import ConePlacer


START = Point(0.0, -100.0)
VERTICAL = Line(1.0, 0.0, 0.0)


def quarter_arc(radius: float, direction: ArcDirection = ArcDirection.CLOCKWISE) -> Arc:
    """Quarter circle around the origin."""
    if direction is ArcDirection.CLOCKWISE:
        return Arc(Point(0.0, 0.0), radius, 0.0, np.pi / 2, direction)
    return Arc(Point(0.0, 0.0), radius, np.pi / 2, 0.0, direction)


class TestBoundaryCalculator:
    """Test boundary derivation and coloring."""

    def test_left_turn_boundaries(self):
        """Test outer boundary is yellow in a left turn."""
        arc = ArcBuilder().build(START, Point(-300.0, -400.0), VERTICAL).arc
        boundaries = BoundaryCalculator(150.0).boundaries(arc)

        assert np.isclose(boundaries.right.arc.radius, 450.0)
        assert boundaries.right.color is ConeColor.YELLOW
        assert np.isclose(boundaries.left.arc.radius, 150.0)
        assert boundaries.left.color is ConeColor.BLUE

    def test_right_turn_boundaries(self):
        """Test inner boundary is yellow in a right turn."""
        arc = ArcBuilder().build(START, Point(300.0, -400.0), VERTICAL).arc
        boundaries = BoundaryCalculator(150.0).boundaries(arc)

        assert np.isclose(boundaries.right.arc.radius, 150.0)
        assert boundaries.right.color is ConeColor.YELLOW
        assert np.isclose(boundaries.left.arc.radius, 450.0)
        assert boundaries.left.color is ConeColor.BLUE

    def test_boundaries_share_geometry(self):
        """Test boundaries keep center, angles and direction."""
        arc = ArcBuilder().build(START, Point(-700.0, -900.0), VERTICAL).arc
        boundaries = BoundaryCalculator(150.0).boundaries(arc)

        for boundary in (boundaries.left, boundaries.right):
            assert boundary.arc.center == arc.center
            assert boundary.arc.start_angle == arc.start_angle
            assert boundary.arc.end_angle == arc.end_angle
            assert boundary.arc.direction is arc.direction

    @pytest.mark.parametrize("end", [
        Point(-300.0, -400.0),
        Point(300.0, -400.0),
        Point(-900.0, -300.0),
        Point(800.0, -1200.0),
    ])
    def test_color_matches_side_of_travel(self, end):
        """Test yellow starts right of the tangent and blue left of it."""
        arc = ArcBuilder().build(START, end, VERTICAL).arc
        boundaries = BoundaryCalculator(150.0).boundaries(arc)

        assert side_of_line(VERTICAL, boundaries.right.arc.start_point) is Side.RIGHT
        assert side_of_line(VERTICAL, boundaries.left.arc.start_point) is Side.LEFT

    def test_boundary_color_rule(self):
        """Test color rule compares boundary and centerline radius."""
        ccw = quarter_arc(300.0, ArcDirection.COUNTERCLOCKWISE)
        cw = quarter_arc(300.0, ArcDirection.CLOCKWISE)

        assert boundary_color(ccw, ccw.with_radius(450.0)) is ConeColor.YELLOW
        assert boundary_color(ccw, ccw.with_radius(150.0)) is ConeColor.BLUE
        assert boundary_color(cw, cw.with_radius(150.0)) is ConeColor.YELLOW
        assert boundary_color(cw, cw.with_radius(450.0)) is ConeColor.BLUE


class TestConePlacer:
    """Test cone count and positions."""

    def test_spacing_tiers(self):
        """Test spacing depends on boundary length."""
        placer = ConePlacer()

        assert placer.spacing_for(100.0) == 150.0
        assert placer.spacing_for(299.0) == 150.0
        assert placer.spacing_for(300.0) == 250.0
        assert placer.spacing_for(1499.0) == 250.0
        assert placer.spacing_for(1500.0) == 500.0

    @pytest.mark.parametrize("length, expected", [
        (200.0, 2),
        (1000.0, 4),
        (1499.0, 6),
        (2000.0, 4),
        (3200.0, 7),
    ])
    def test_spacing_law_for_gentle_arcs(self, length, expected):
        """Test count is ceil(length / spacing) for spans up to pi/4."""
        placer = ConePlacer()

        assert placer.cone_count(length, np.pi / 4) == expected
        assert placer.cone_count(length, 0.2) == expected

    def test_quarter_circle_without_override(self):
        """Test radius 300 quarter circle gets two cones from spacing alone."""
        placer = ConePlacer(TrackConfig(tight_corner_override=False))
        arc = quarter_arc(300.0)

        assert np.isclose(arc.length, 471.24, atol=0.01)
        assert placer.cone_count(arc.length, arc.angular_span) == 2

    def test_quarter_circle_with_override(self):
        """Test sharp corner of length 400-1000 gets at least three cones."""
        placer = ConePlacer()
        arc = quarter_arc(300.0)

        assert placer.cone_count(arc.length, arc.angular_span) == 3

    def test_override_minimums(self):
        """Test minimum counts in sharp corners."""
        placer = ConePlacer()

        assert placer.cone_count(50.0, np.pi) == 1
        assert placer.cone_count(350.0, np.pi) == 2
        assert placer.cone_count(700.0, np.pi) == 3

    @pytest.mark.parametrize("length", [760.0, 800.0, 1000.0])
    def test_override_is_exact_up_to_1000(self, length):
        """Test sharp corners of length 400-1000 get exactly three cones."""
        placer = ConePlacer()

        assert placer.cone_count(length, np.pi) == 3
        assert placer.cone_count(length, np.pi / 2) == 3

    def test_override_falls_back_to_spacing(self):
        """Test sharp corners longer than 1000 use the spacing law."""
        placer = ConePlacer()

        assert placer.cone_count(1001.0, np.pi) == 5
        assert placer.cone_count(2000.0, np.pi) == 4

    def test_spacing_never_exceeds_cap(self):
        """Test arc distance between cones stays below the tier spacing."""
        placer = ConePlacer(TrackConfig(tight_corner_override=False))

        for radius in [160.0, 300.0, 600.0, 1200.0, 4000.0]:
            for span in [0.1, np.pi / 4, np.pi / 2, 2.5, 5.0]:
                length = radius * span
                count = placer.cone_count(length, span)
                assert length / count <= placer.spacing_for(length) + 1e-9

    def test_cones_start_at_arc_end(self):
        """Test first cone sits at the end angle and steps back."""
        placer = ConePlacer()
        boundary = BoundaryArc(quarter_arc(300.0), ConeColor.YELLOW)

        cones = placer.place_cones(boundary)

        assert len(cones) == 3
        assert np.allclose(cones[0].reference_position.as_tuple(), (0.0, 300.0))
        assert np.allclose(
            cones[1].reference_position.as_tuple(),
            (300.0 * np.cos(np.pi / 3), 300.0 * np.sin(np.pi / 3)),
        )
        assert all(c.color is ConeColor.YELLOW for c in cones)
        assert all(c.size is ConeSize.SMALL for c in cones)

    def test_counterclockwise_steps_forward(self):
        """Test step sign follows the arc direction."""
        placer = ConePlacer()
        boundary = BoundaryArc(quarter_arc(300.0, ArcDirection.COUNTERCLOCKWISE), ConeColor.BLUE)

        cones = placer.place_cones(boundary)

        assert np.allclose(cones[0].reference_position.as_tuple(), (300.0, 0.0))
        assert np.allclose(
            cones[1].reference_position.as_tuple(),
            (300.0 * np.cos(np.pi / 6), 300.0 * np.sin(np.pi / 6)),
        )

    def test_finishing_segment_skips_end_cone(self):
        """Test the cone at the arc end is omitted when finishing."""
        placer = ConePlacer()
        boundary = BoundaryArc(quarter_arc(300.0), ConeColor.YELLOW)

        regular = placer.place_cones(boundary)
        finishing = placer.place_cones(boundary, is_finishing_segment=True)

        assert len(finishing) == len(regular) - 1
        assert finishing == regular[1:]


class TestConeNoise:
    """Test cone noise."""

    def test_offsets_are_discrete(self):
        """Test offsets come from {-m, 0, +m} per axis."""
        noise = ConeNoise(magnitude=20.0, seed=7)

        for _ in range(100):
            dx, dy = noise.sample()
            assert dx in (-20.0, 0.0, 20.0)
            assert dy in (-20.0, 0.0, 20.0)

    def test_seeded_noise_is_reproducible(self):
        """Test equal seeds give equal offsets."""
        a = ConeNoise(seed=3)
        b = ConeNoise(seed=3)

        assert [a.sample() for _ in range(10)] == [b.sample() for _ in range(10)]

    def test_apply_and_remove(self):
        """Test noise moves only the displayed position."""
        cone = Cone(Point(10.0, 20.0), ConeColor.BLUE)

        cone.apply_noise(20.0, -20.0)
        assert cone.display_position == Point(30.0, 0.0)
        assert cone.reference_position == Point(10.0, 20.0)
        assert cone.is_noisy

        cone.remove_noise()
        assert cone.display_position == cone.reference_position
        assert not cone.is_noisy
