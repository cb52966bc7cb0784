"""Time Room validation on square rooms of growing size.

Usage:
  python scripts/profile_rooms.py [SIDE ...]
"""

import os
import sys
import time
from statistics import mean, pstdev

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from villas import Room, door, floor  # noqa: E402 import after path fix

SIDES = [10, 25, 50, 100]
REPEATS = 5


def square_room(side: int):
    features = [floor(r, c) for r in range(side) for c in range(side)]
    # one door on the bottom edge, just outside the floor block
    features.append(door(side, side // 2))
    return features


def run(sides):
    for side in sides:
        features = square_room(side)
        runtimes = []
        for _ in range(REPEATS):
            t0 = time.perf_counter()
            Room(features)
            t1 = time.perf_counter()
            runtimes.append((t1 - t0) * 1000)
        print(
            f"side={side} features={len(features)} avg_ms={mean(runtimes):.1f} "
            f"sd_ms={pstdev(runtimes):.1f} min_ms={min(runtimes):.1f} max_ms={max(runtimes):.1f}"
        )


if __name__ == "__main__":
    run([int(a) for a in sys.argv[1:]] or SIDES)
