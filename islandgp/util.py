# util.py
import random
from typing import Optional
from .expression_tree import tree_to_string, tree_size
from .globals import get_rng

def flip(p: float, rng: Optional[random.Random] = None) -> bool:
    """True with probability p. Each call is independent."""
    rng = rng or get_rng()
    return rng.random() < p

def off_by(x, y):
    return abs(x - y)

def print_report(best, cycle_boundary: bool):
    # Default reporting callback
    if best is None:
        print("Generation report: no best individual yet")
        return
    if cycle_boundary:
        print("\n========================================")
        print("Cycle finished, global best so far")
        print(f"Fitness: {best.fitness:.8f}")
        print(f"Size: {tree_size(best.tree)}")
        print(f"Formula: {tree_to_string(best.tree)}")
        print("========================================\n")
    else:
        print(f"Generation report: best fitness {best.fitness:.6f}  {tree_to_string(best.tree)}")
