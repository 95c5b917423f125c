"""
Simple usage example for the moving-window beta diversity module.

Builds the ten-site demonstration matrices, averages the floristic
dissimilarity over (a) the four nearest sites and (b) all sites within 40
distance units, and prints the resulting table.
"""

import logging
import sys

# Add the src directory to path
sys.path.append('../src')
from betawindow import (
    FixedCount, Radius, compute_neighborhood_average, example_matrices,
    moving_window_table,
)


def simple_usage_example():
    """Simple example showing basic usage of the moving-window average."""

    print("=== Moving Window Average - Usage Example ===\n")

    print("1. Building example matrices...")
    D, G = example_matrices(10)
    print(f"   Dissimilarity: {D.n} x {D.n}, geographic: {G.n} x {G.n}")
    print(D.to_frame().round(2))

    print("\n2. Four nearest neighbours for every site...")
    res = compute_neighborhood_average(D, G, FixedCount(4))
    print(f"   n1 -> {res.values['n1']:.3f} (expected 0.25)")

    print("\n3. Radius window that leaves every site alone...")
    empty = compute_neighborhood_average(D, G, Radius(5))
    print(f"   {len(empty.empty)} sites without neighbours: {list(empty.empty)}")

    print("\n4. Combined table...")
    table = moving_window_table(D, G, {
        "neighbours_beta": FixedCount(4),
        "window_beta": Radius(40),
    })
    print(table)
    return table


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    simple_usage_example()
