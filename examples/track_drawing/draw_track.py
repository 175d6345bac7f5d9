#!/usr/bin/env python3
"""
Track Drawing Example

This example demonstrates how to:
1. Drive an editor session with scripted pointer input
2. Preview, commit and undo path segments
3. Close the loop on the start/finish cluster
4. Toggle cone noise and inspect the scene

Run with: python draw_track.py
"""

from conemap.editor import EditorInput, EditorSession, PointerAction
from conemap.geometry import Point
from conemap.track.config import TrackConfig
from conemap.track.track import Track


# Clicks for a counterclockwise loop around (-300, -100)
CLICKS = [
    Point(-300.0, -400.0),
    Point(-600.0, -100.0),
    Point(-300.0, 200.0),
    Point(10.0, 95.0),  # Snaps onto the end point
]


def draw_loop(session: EditorSession):
    """Draw a closed loop with scripted clicks."""
    print("=" * 60)
    print("1. Drawing a Loop")
    print("=" * 60)

    for point in CLICKS:
        # Hover first, then click, like a real pointer would
        session.tick(EditorInput(pointer=point))
        scene = session.tick(EditorInput(pointer=point, action=PointerAction.CLICKED))
        segment = session.track.segments[-1]
        print(
            f"Clicked ({point.x:.0f}, {point.y:.0f}): "
            f"radius {segment.center_arc.radius:.0f}, "
            f"{len(segment.cones)} cones, valid={segment.is_valid}"
        )

    print(f"\nClosed: {scene.closed}")
    print(f"Segments: {session.track.num_segments}")
    print(f"Centerline length: {session.track.centerline_length:.0f}")


def undo_and_redo(session: EditorSession):
    """Undo the closing segment and close again."""
    print("\n" + "=" * 60)
    print("2. Undo")
    print("=" * 60)

    session.tick(EditorInput(pointer=CLICKS[-1], undo_requested=True))
    print(f"After undo: {session.track.num_segments} segments, state={session.track.state.value}")

    session.tick(EditorInput(pointer=CLICKS[-1], action=PointerAction.CLICKED))
    print(f"After closing again: state={session.track.state.value}")


def toggle_noise(session: EditorSession):
    """Show noisy cone positions."""
    print("\n" + "=" * 60)
    print("3. Cone Noise")
    print("=" * 60)

    session.tick(EditorInput(pointer=CLICKS[-1], noise_toggle_requested=True))
    moved = sum(1 for cone in session.track.cones if cone.is_noisy)
    print(f"Noisy cones: {moved} of {len(session.track.cones)}")

    session.tick(EditorInput(pointer=CLICKS[-1], noise_toggle_requested=True))
    moved = sum(1 for cone in session.track.cones if cone.is_noisy)
    print(f"After toggling back: {moved} noisy")


def main():
    session = EditorSession(Track(TrackConfig(noise_seed=42)))
    session.setup_logging()

    draw_loop(session)
    undo_and_redo(session)
    toggle_noise(session)

    print("\n" + "=" * 60)
    print("Track drawing example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
