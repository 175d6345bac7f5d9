#!/usr/bin/env python3
"""
Skidpad Example

This example demonstrates how to:
1. Generate the skidpad template
2. Check that generation is reproducible
3. Count cones by color

Run with: python generate_skidpad.py
"""

from collections import Counter

from conemap.track import SkidpadGenerator


def main():
    print("=" * 60)
    print("Skidpad Generation")
    print("=" * 60)

    generator = SkidpadGenerator()
    track = generator.generate(900.0, 900.0, 1500.0, 1500.0)

    colors = Counter(cone.color.value for cone in track.cones)
    print(f"\nState: {track.state.value}")
    print(f"Parts: {track.num_segments}")
    print(f"Cones: {len(track.cones)}")
    for color, count in sorted(colors.items()):
        print(f"  {color}: {count}")

    again = generator.generate(900.0, 900.0, 1500.0, 1500.0)
    same = [c.reference_position for c in track.cones] == [c.reference_position for c in again.cones]
    print(f"\nReproducible: {same}")

    ignored = generator.generate(900.0, 0.0, 1500.0, 1500.0)
    print(f"Request with a zero radius: {'ignored' if ignored is None else 'placed'}")


if __name__ == "__main__":
    main()
