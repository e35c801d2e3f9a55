#!/usr/bin/env python3
"""Sweep every bundled map from its top-left corner and render each run as a GIF."""
import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src", "py"))

from data_types import DIR_EAST, Pose
from make_gif import make_gif
from simulator import run_simulation

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--maps_dir", default=os.path.join(ROOT, "maps"))
    ap.add_argument("--out_dir", default="demo_out")
    ap.add_argument("--duration", type=int, default=250)
    args = ap.parse_args()

    os.makedirs(args.out_dir, exist_ok=True)
    for fname in sorted(os.listdir(args.maps_dir)):
        if not fname.endswith(".txt"):
            continue
        name = os.path.splitext(fname)[0]
        out_json = os.path.join(args.out_dir, name + ".json")
        run_simulation(os.path.join(args.maps_dir, fname), Pose((0, 0), DIR_EAST), out_json, render=True)
        make_gif(out_json, os.path.join(args.out_dir, name + ".gif"), frame_duration=args.duration, title=name)


if __name__ == "__main__":
    main()
