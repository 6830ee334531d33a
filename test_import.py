#!/usr/bin/env python3
"""Check that the package imports and runs one small example end to end."""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

try:
    import hull_peeler as hp
    print(f"hull_peeler {hp.__version__} imported")
    print("Subpackages: " + ', '.join(hp.__all__))

    state = hp.geometry.GeometryState.from_points([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
    print(f"Square hull: {len(state.run_hull())} edges")

    result = state.run_peel()
    print(f"Peel completed with {result.point_count} points and {result.edge_count} edges.")

    flips = state.run_triangulation()
    print(f"Triangles: {len(state.triangles)}, flips: {flips}")

except Exception as e:
    print(f"Import check failed: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)
