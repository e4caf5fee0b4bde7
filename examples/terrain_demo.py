#!/usr/bin/env python3
"""
Demo script generating terrain with every available generator.
"""

import numpy as np
from py_terrain import configure_logging, create_all_generators, create_height_map, generate_terrain


def main():
    """Demonstrate terrain generation."""
    configure_logging(level="WARNING", log_format="console")

    print("Py-Terrain Generation Demo")
    print("=" * 40)

    height_map = create_height_map()
    print(f"\nMap Size: {height_map.width}x{height_map.height}")

    for generator in create_all_generators():
        print(f"\n{generator.name.upper()}:")
        print(f"  {generator.description}")
        print("-" * 30)

        stats = generate_terrain(height_map, generator)

        print(f"  Minimum Height: {stats.min:.3f}")
        print(f"  Maximum Height: {stats.max:.3f}")
        print(f"  Average Height: {stats.average:.3f}")
        print(f"  Height Range: {stats.range:.3f}")
        print(f"  Midpoint: {stats.midpoint:.3f}")

        # Show height distribution
        bins = [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]
        hist, _ = np.histogram(height_map.to_array(), bins=bins)
        print("  Height distribution:")
        for i in range(len(bins) - 1):
            bar = '#' * int(hist[i] / max(hist.max(), 1) * 20)
            print(f"    {bins[i]:.1f}-{bins[i+1]:.1f}: {bar} ({hist[i]})")


if __name__ == "__main__":
    main()
