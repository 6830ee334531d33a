#!/usr/bin/env python3
"""
Trisection triangulation driver.

Triangulates a point set (random, lattice or from a file), applies one
edge-flip cleanup pass and prints the point, triangle and flip counts.
"""

import argparse
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import hull_peeler as hp


def main():
    """Main entry point for triangulation runs."""
    parser = argparse.ArgumentParser(
        description='Trisection triangulation with edge-flip cleanup'
    )
    parser.add_argument(
        '--points',
        type=int,
        default=hp.utils.DEFAULT_TRIANGULATION_POINTS,
        help=f'Number of random points (default: {hp.utils.DEFAULT_TRIANGULATION_POINTS})'
    )
    parser.add_argument(
        '--lattice',
        type=int,
        default=None,
        metavar='N',
        help='Use an N x N lattice with spacing 5 instead of random points'
    )
    parser.add_argument(
        '--input',
        type=str,
        default=None,
        help='Read points from a .txt/.csv file'
    )
    parser.add_argument(
        '--skip-header',
        action='store_true',
        help='Skip the first line of the input file'
    )
    parser.add_argument(
        '--no-cleanup',
        action='store_true',
        help='Skip the edge-flip cleanup pass'
    )
    parser.add_argument(
        '--validate',
        action='store_true',
        help='Check that the triangle areas sum to the hull area'
    )
    parser.add_argument(
        '--width',
        type=int,
        default=hp.utils.SCENE_WIDTH,
        help=f'Scene width (default: {hp.utils.SCENE_WIDTH})'
    )
    parser.add_argument(
        '--height',
        type=int,
        default=hp.utils.SCENE_HEIGHT,
        help=f'Scene height (default: {hp.utils.SCENE_HEIGHT})'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducibility'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Directory for triangles.txt (and the figure with --plot)'
    )
    parser.add_argument(
        '--plot',
        action='store_true',
        help='Save a figure of the triangulation into --output'
    )

    args = parser.parse_args()

    if args.plot and not args.output:
        parser.error('--plot requires --output')

    if args.input:
        points = hp.io.load_points_text(args.input, skip_header=args.skip_header)
    elif args.lattice is not None:
        points = hp.utils.generate_lattice(args.lattice, spacing=5, origin=(0, 0))
    else:
        points = hp.utils.generate_random_points(args.points, args.width, args.height, seed=args.seed)

    state = hp.geometry.GeometryState.from_points(points)
    center = hp.utils.get_scene_center(args.width, args.height)

    flips = state.run_triangulation(center=center, clean=not args.no_cleanup)

    if not args.no_cleanup:
        print(f"Triangles cleaned up: {flips}")
    print(f"Number of points: {len(state.points)}")
    print(f"Number of triangles created: {len(state.triangles)}")

    if args.validate and len(state.points) >= 3:
        hull = hp.geometry.build_hull(state.arena, state.points)
        ok = hp.geometry.triangulation_covers_hull(state.arena, hull, state.triangles)
        print(f"Triangle areas match hull area: {ok}")
        if not ok:
            return 1

    if args.output:
        hp.utils.ensure_dir_exists(args.output)
        hp.io.save_triangles(os.path.join(args.output, 'triangles.txt'), state.arena, state.triangles)
        if args.plot:
            hp.visualization.plot_triangles(state.arena, state.triangles,
                                            os.path.join(args.output, 'triangulation.png'))
        print(f"Results saved to: {args.output}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
