#!/usr/bin/env python3
"""
Quick start script for Complex Plane - Run this after installation to see it in action!
"""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import jax.numpy as jnp


def main():
    print("\n" + "="*60)
    print("🚀 COMPLEX PLANE QUICK START")
    print("="*60)

    # ========================================================================
    # 1. Complex Values
    # ========================================================================
    print("\n1️⃣ Complex Values")
    print("-" * 40)

    from complex_plane import Complex, I, OMEGA, TWO

    z = Complex(1, 1)
    print(f"z = {z}")
    print(f"|z| = {z.magnitude():.7f}, arg(z) = {z.phase_degrees():.1f}°")
    print(f"conj(z) = {z.conjugate()}, 1/z = {z.reciprocal()}")
    print(f"i² = {I ** TWO}")
    print(f"Polar(2, π/3) = {Complex.from_polar(2, jnp.pi / 3)}")

    # ========================================================================
    # 2. Lattice Classification
    # ========================================================================
    print("\n2️⃣ Gaussian and Eisenstein Integers")
    print("-" * 40)

    for w in [Complex(3, 4), Complex(3.4, 4), OMEGA, OMEGA.times(OMEGA)]:
        print(f"  {str(w):<40} gaussian={w.is_gaussian_integer()!s:<6} "
              f"eisenstein={w.is_eisenstein_integer()!s:<6} ({w.to_eisenstein_string()})")

    # ========================================================================
    # 3. Transcendental Functions
    # ========================================================================
    print("\n3️⃣ Transcendental Functions")
    print("-" * 40)

    from complex_plane import FUNCTIONS

    a = Complex(0.5, 0.25)
    print(f"a = {a}")
    for name, fn in FUNCTIONS.items():
        print(f"  {name:>8}(a) = {fn(a)}")

    # ========================================================================
    # 4. Identity Checks
    # ========================================================================
    print("\n4️⃣ Checking Identities on a Grid")
    print("-" * 40)

    from complex_plane import sample_grid, check_identities

    points = [p for row in sample_grid(resolution=15) for p in row]
    for name, residual in check_identities(points).items():
        print(f"  {name:<25} max residual = {residual.max_residual:.2e}")

    # ========================================================================
    # 5. Domain Coloring
    # ========================================================================
    print("\n5️⃣ Domain Coloring")
    print("-" * 40)

    from complex_plane import domain_color, plot_function_gallery

    for w in [Complex(0), Complex(1), Complex(0, 1), Complex(-1), Complex(0, -2), Complex(50)]:
        r, g, b = domain_color(w)
        print(f"  color({w}) = ({r:.3f}, {g:.3f}, {b:.3f})")

    try:
        fig = plot_function_gallery(['exp', 'sin', 'arcsin', 'tanh'], resolution=100,
                                    save_path='gallery.png')
        plt.close(fig)
        print("✓ Gallery saved to 'gallery.png'")
    except (OSError, ValueError) as e:
        print(f"⚠️ Gallery skipped: {e}")

    # ========================================================================
    # Summary
    # ========================================================================
    print("\n" + "="*60)
    print("✅ QUICK START COMPLETE!")
    print("="*60)

    print("\n📚 Next steps:")
    print("  - Run pytest complex_plane/tests for comprehensive testing")
    print("  - Try complex-plane-gallery --help for more renderings")


if __name__ == "__main__":
    main()
