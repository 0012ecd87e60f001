"""Render a domain-coloring gallery of library functions and check identities."""

import argparse
import os
from typing import List, Optional
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from ..functions import FUNCTIONS, get_function
from ..analysis import sample_grid, check_identities
from ..visualization import PlotConfig, plot_domain_coloring, plot_function_gallery


DEFAULT_FUNCTIONS = ['exp', 'ln', 'sin', 'cos', 'tan', 'arcsin', 'sinh', 'arctanh']


def run_identity_checks(resolution: int = 20, tolerance: float = 1e-9) -> bool:
    """Check identities on a grid and print a summary table.

    Args:
        resolution: Points per axis of the sample grid
        tolerance: Maximum allowed residual

    Returns:
        True if every identity passed
    """
    points = [z for row in sample_grid((-2.0, 2.0), (-2.0, 2.0), resolution) for z in row]
    results = check_identities(points)

    print("\n" + "=" * 60)
    print("IDENTITY CHECKS")
    print("=" * 60)
    print(f"  {'Identity':<25} {'Max':<12} {'Mean':<12} {'Non-finite':<11} {'Passed':<6}")
    print("  " + "-" * 68)

    all_passed = True
    for name, residual in results.items():
        passed = residual.passed(tolerance)
        all_passed = all_passed and passed
        print(f"  {name:<25} {residual.max_residual:<12.3e} {residual.mean_residual:<12.3e} "
              f"{residual.non_finite:<11d} "
              f"{'Yes' if passed else 'No':<6}")
    return all_passed


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Domain-coloring gallery of complex functions")
    ap.add_argument("--functions", nargs="+", default=DEFAULT_FUNCTIONS,
                    choices=sorted(FUNCTIONS.keys()), help="functions to render")
    ap.add_argument("--xlim", nargs=2, type=float, default=[-2.0, 2.0])
    ap.add_argument("--ylim", nargs=2, type=float, default=[-2.0, 2.0])
    ap.add_argument("--resolution", type=int, default=100, help="grid points per axis")
    ap.add_argument("--outdir", default="gallery_out")
    ap.add_argument("--separate", action="store_true", help="one image per function")
    ap.add_argument("--check-identities", action="store_true")
    ap.add_argument("--tolerance", type=float, default=1e-9)
    args = ap.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    xlim, ylim = tuple(args.xlim), tuple(args.ylim)
    config = PlotConfig()

    if args.separate:
        for name in args.functions:
            path = os.path.join(args.outdir, f"{name}.{config.save_format}")
            fig = plot_domain_coloring(get_function(name), name, xlim, ylim,
                                       args.resolution, config, save_path=path)
            plt.close(fig)
            print(f"Saved {path}")
    else:
        path = os.path.join(args.outdir, f"gallery.{config.save_format}")
        fig = plot_function_gallery(args.functions, xlim, ylim, args.resolution,
                                    config, save_path=path)
        plt.close(fig)
        print(f"Saved {path}")

    if args.check_identities:
        return 0 if run_identity_checks(tolerance=args.tolerance) else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
