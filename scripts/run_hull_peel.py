#!/usr/bin/env python3
"""
Convex hull, hull peel and cluster peel driver.

Builds a point set (random, lattice or from a file), runs the selected
operation and prints the summary counts. Optionally writes the edges and a
figure.
"""

import argparse
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import hull_peeler as hp


def load_point_set(args):
    """Point set selected by the command-line options."""
    if args.input:
        if args.input.lower().endswith('.xls'):
            wb = hp.io.load_workbook(args.input)
            return hp.io.extract_points(wb, sheet_index=args.sheet)
        if args.input.lower().endswith('.ods'):
            doc = hp.io.load_ods(args.input)
            return hp.io.extract_points_ods(doc, sheet_index=args.sheet)
        return hp.io.load_points_text(args.input, skip_header=args.skip_header)
    if args.lattice:
        return hp.utils.generate_lattice()
    return hp.utils.generate_random_points(args.points, args.width, args.height, seed=args.seed)


def main():
    """Main entry point for hull and peel runs."""
    parser = argparse.ArgumentParser(
        description='Convex hull / hull peel / cluster peel of integer 2D points'
    )
    parser.add_argument(
        '--mode',
        choices=['hull', 'peel', 'cluster'],
        default='peel',
        help='Operation to run (default: peel)'
    )
    parser.add_argument(
        '--points',
        type=int,
        default=hp.utils.DEFAULT_POINT_COUNT,
        help=f'Number of random points (default: {hp.utils.DEFAULT_POINT_COUNT})'
    )
    parser.add_argument(
        '--lattice',
        action='store_true',
        help='Use a 10x10 lattice instead of random points'
    )
    parser.add_argument(
        '--input',
        type=str,
        default=None,
        help='Read points from a .txt/.csv, .xls or .ods file'
    )
    parser.add_argument(
        '--sheet',
        type=int,
        default=0,
        help='Sheet index for spreadsheet input (default: 0)'
    )
    parser.add_argument(
        '--skip-header',
        action='store_true',
        help='Skip the first line of a text input file'
    )
    parser.add_argument(
        '--clusters',
        type=int,
        default=hp.utils.DEFAULT_CLUSTER_COUNT,
        help=f'Number of clusters for --mode cluster (default: {hp.utils.DEFAULT_CLUSTER_COUNT})'
    )
    parser.add_argument(
        '--remainder',
        choices=list(hp.peeling.REMAINDER_POLICIES),
        default='keep',
        help='What to do with points left over by uneven clustering (default: keep)'
    )
    parser.add_argument(
        '--membership',
        choices=list(hp.peeling.MEMBERSHIP_MODES),
        default='line',
        help='Peel point/edge membership test (default: line)'
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
        help='Directory for edges.txt (and the figure with --plot)'
    )
    parser.add_argument(
        '--plot',
        action='store_true',
        help='Save a figure of the result into --output'
    )

    args = parser.parse_args()

    if args.points < 0:
        parser.error('--points must be non-negative')
    if args.clusters <= 0:
        parser.error('--clusters must be positive')
    if args.plot and not args.output:
        parser.error('--plot requires --output')

    state = hp.geometry.GeometryState.from_points(load_point_set(args))
    n = len(state.points)
    print(f"Loaded {n} points")

    if args.mode == 'cluster' and args.clusters > n // 2 and n > 0:
        print(f"No more than {n // 2} clusters allowed for {n} points!")
        return 1

    if args.mode == 'hull':
        edges = state.run_hull()
        hp.utils.print_summary('Convex hull', points=n, edges=len(edges))
        if args.plot:
            hp.visualization.plot_edges(state.arena, edges,
                                        os.path.join(args.output, 'hull.png'))

    elif args.mode == 'peel':
        result = state.run_peel(membership=args.membership)
        print(f"Peel completed with {result.point_count} points and {result.edge_count} edges.")
        hp.utils.print_summary('Peel', layers=result.depth, total_edges=result.total_edges,
                               remaining=len(result.remaining))
        if args.plot:
            hp.visualization.plot_peel_layers(state.arena, result.layers,
                                              os.path.join(args.output, 'peel.png'))

    else:
        result = state.run_cluster_peel(args.clusters, remainder=args.remainder,
                                        membership=args.membership)
        for i, peel in enumerate(result.peels):
            hp.utils.print_progress(i + 1, args.clusters, prefix='Clusters')
            print(f"Peel completed with {peel.point_count} points and {peel.edge_count} edges.")
        if result.leftover:
            print(f"{len(result.leftover)} points left unclustered (remainder policy: {args.remainder})")
        hp.utils.print_summary('Cluster peel', clusters=len(result.clusters),
                               target_size=result.target_size, edges=len(state.edges))
        if args.plot:
            hp.visualization.plot_clusters(
                state.arena, result.clusters, [p.layers for p in result.peels],
                os.path.join(args.output, 'clusters.png'), seed=args.seed
            )

    if args.output:
        hp.utils.ensure_dir_exists(args.output)
        hp.io.save_edges(os.path.join(args.output, 'edges.txt'), state.arena, state.edges)
        print(f"Results saved to: {args.output}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
