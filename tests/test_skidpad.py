"""Tests for the skidpad template generator."""

import pytest
import numpy as np

from conemap.geometry.primitives import Point
from conemap.track.cones import ConeColor, ConeSize
from conemap.track.skidpad import SkidpadConfig, SkidpadGenerator
from conemap.track.track import DrawingState, Track


def positions(track: Track):
    return [(c.reference_position, c.color, c.size) for c in track.cones]


class TestSkidpadGenerator:
    """Test skidpad layout generation."""

    def test_generates_closed_track(self):
        """Test generated layout is closed."""
        track = SkidpadGenerator().generate(300.0, 300.0, 1500.0, 1500.0)

        assert track is not None
        assert track.state is DrawingState.CLOSED
        assert track.num_segments == 5

    def test_deterministic(self):
        """Test repeated calls give identical cones."""
        generator = SkidpadGenerator()

        first = generator.generate(300.0, 300.0, 1500.0, 1500.0)
        second = generator.generate(300.0, 300.0, 1500.0, 1500.0)

        assert len(first.cones) == len(second.cones)
        assert positions(first) == positions(second)

    def test_cone_count(self):
        """Test layout for radius 300 and 1500 straights."""
        track = SkidpadGenerator().generate(300.0, 300.0, 1500.0, 1500.0)

        # 6 entry, 2 timing, 4 per loop, 6 exit
        assert len(track.cones) == 22

    @pytest.mark.parametrize("params", [
        (0.0, 300.0, 1500.0, 1500.0),
        (300.0, 0.0, 1500.0, 1500.0),
        (300.0, 300.0, 0.0, 1500.0),
        (300.0, 300.0, 1500.0, -5.0),
    ])
    def test_non_positive_parameters_are_ignored(self, params):
        """Test malformed requests leave the track untouched."""
        track = Track()
        track.update_pending_segment(Point(-300.0, -400.0))
        track.commit()

        result = SkidpadGenerator().generate(*params, track=track)

        assert result is None
        assert track.num_segments == 1
        assert track.state is DrawingState.DRAWING

    def test_replaces_existing_segments(self):
        """Test generating into a track replaces drawn segments."""
        track = Track()
        track.update_pending_segment(Point(-300.0, -400.0))
        track.commit()

        result = SkidpadGenerator().generate(900.0, 900.0, 1500.0, 1500.0, track=track)

        assert result is track
        assert track.num_segments == 5
        assert len(track.fixed_start_cones) == 8

    def test_timing_cones(self):
        """Test two large orange cones mark the control line."""
        track = SkidpadGenerator().generate(900.0, 900.0, 1500.0, 1500.0)

        orange = [c for c in track.cones if c.color is ConeColor.ORANGE]
        assert len(orange) == 2
        assert all(c.size is ConeSize.LARGE for c in orange)
        control_y = track.start_point.y - 1500.0
        assert {c.reference_position for c in orange} == {
            Point(-170.0, control_y),
            Point(170.0, control_y),
        }

    def test_entry_straight(self):
        """Test entry straight cones are evenly spaced on both edges."""
        track = SkidpadGenerator().generate(900.0, 900.0, 1500.0, 2000.0)
        entry = track.segments[0].cones

        blue_y = [c.reference_position.y for c in entry if c.color is ConeColor.BLUE]
        yellow_x = {c.reference_position.x for c in entry if c.color is ConeColor.YELLOW}

        assert np.allclose(blue_y, [-600.0, -1100.0, -1600.0])
        assert yellow_x == {150.0}

    def test_loop_ring_colors(self):
        """Test ring colors follow the side of travel in each loop."""
        generator = SkidpadGenerator()
        track = generator.generate(900.0, 600.0, 1500.0, 1500.0)
        control_y = -1600.0
        w = generator.config.track_half_width

        right_loop = track.segments[2].cones
        left_loop = track.segments[3].cones

        for cone in right_loop:
            r = np.hypot(cone.reference_position.x - 600.0, cone.reference_position.y - control_y)
            expected = ConeColor.YELLOW if np.isclose(r, 600.0 - w) else ConeColor.BLUE
            assert cone.color is expected

        for cone in left_loop:
            r = np.hypot(cone.reference_position.x + 900.0, cone.reference_position.y - control_y)
            expected = ConeColor.BLUE if np.isclose(r, 900.0 - w) else ConeColor.YELLOW
            assert cone.color is expected

    def test_no_duplicate_cones(self):
        """Test no two cones share a position."""
        for params in [(300.0, 300.0, 1500.0, 1500.0), (900.0, 700.0, 1200.0, 800.0)]:
            track = SkidpadGenerator().generate(*params)
            points = [c.reference_position for c in track.cones]

            for i, p in enumerate(points):
                for q in points[i + 1:]:
                    assert np.hypot(p.x - q.x, p.y - q.y) > 1.0

    def test_custom_width(self):
        """Test corridor half width is configurable."""
        generator = SkidpadGenerator(SkidpadConfig(track_half_width=200.0))
        track = generator.generate(900.0, 900.0, 1000.0, 1000.0)

        entry = track.segments[0].cones
        assert {abs(c.reference_position.x) for c in entry} == {200.0}

    def test_undo_removes_whole_template(self):
        """Test undo on a skidpad leaves only the opening cluster."""
        track = SkidpadGenerator().generate(900.0, 900.0, 1500.0, 1500.0)

        removed = track.undo()

        assert removed is not None
        assert track.state is DrawingState.DRAWING
        assert track.num_segments == 0
        assert track.cones == []
        assert len(track.fixed_start_cones) == 8

        pending = track.update_pending_segment(Point(-300.0, -400.0))
        assert pending.start_point == track.start_point
        assert track.commit()
        assert track.undo() is not None
        assert track.num_segments == 0
