# genetic_operators.py
from dataclasses import dataclass
from typing import List, Optional, Tuple
import random
from .expression_tree import Node, tree_height, subtree_at, replace_at
from .globals import get_rng
from .util import flip

@dataclass(frozen=True)
class Individual:
    tree: Node
    fitness: Optional[float] = None

    @property
    def scored(self) -> bool:
        return self.fitness is not None

def _rand_int(rng: random.Random, n: int) -> int:
    # Uniform in [0, n), 0 when the range is empty
    return rng.randrange(n) if n > 0 else 0

def terminal(config, rng: Optional[random.Random] = None) -> Node:
    """Random leaf: an input symbol or a constant from [term_min, term_max)."""
    rng = rng or get_rng()
    if flip(0.5, rng):
        return Node.variable(rng.choice(config.symbols))
    lo, hi = config.term_min, config.term_max
    if isinstance(lo, int) and isinstance(hi, int):
        return Node.constant(lo + rng.randrange(hi - lo))
    return Node.constant(lo + rng.random() * (hi - lo))

def build_tree(config, depth_max: Optional[int] = None, depth_min: Optional[int] = None,
               rng: Optional[random.Random] = None) -> Node:
    """Ramped half-and-half construction.

    Operator nodes are forced until ``depth_min`` is reached (fill), after
    which every level stops with probability 0.5 (grow). The result is never
    deeper than ``depth_max``.
    """
    rng = rng or get_rng()
    if depth_max is None:
        depth_max = config.depth_max
    if depth_min is None:
        depth_min = config.depth_min
    if depth_max == 0 or (depth_min <= 0 and flip(0.5, rng)):
        return terminal(config, rng)
    func = rng.choice(config.funcs)
    children = [build_tree(config, depth_max - 1, depth_min - 1, rng) for _ in range(func.arity)]
    return Node.operator(func, children)

def random_path(tree: Node, rng: Optional[random.Random] = None, n: Optional[int] = None) -> Tuple[int, ...]:
    """Child indices of a walk from the root that takes at most ``n`` steps,
    picking a uniform child each step. ``n`` defaults to a random value below
    the tree's height."""
    rng = rng or get_rng()
    if n is None:
        n = _rand_int(rng, tree_height(tree))
    path = []
    node = tree
    while not node.is_terminal and n > 0:
        index = rng.randrange(len(node.children))
        path.append(index)
        node = node.children[index]
        n = _rand_int(rng, n - 1)
    return tuple(path)

def replacement_path(tree: Node, rng: Optional[random.Random] = None) -> Tuple[int, ...]:
    # Insertion point for replace_subtree: the walk budget starts at the full height
    rng = rng or get_rng()
    return random_path(tree, rng, tree_height(tree))

def random_subtree(tree: Node, rng: Optional[random.Random] = None) -> Node:
    return subtree_at(tree, random_path(tree, rng))

def replace_subtree(tree: Node, replacement: Node, rng: Optional[random.Random] = None) -> Node:
    """New tree with a randomly chosen subtree of ``tree`` swapped for
    ``replacement``. Untouched branches are shared with ``tree``."""
    return replace_at(tree, replacement_path(tree, rng), replacement)

def mutate(config, tree: Node, rng: Optional[random.Random] = None) -> Node:
    rng = rng or get_rng()
    if flip(config.mutation_rate, rng):
        return replace_subtree(tree, build_tree(config, rng=rng), rng)
    return tree

def crossover(tree1: Node, tree2: Node, rng: Optional[random.Random] = None) -> Node:
    # Offspring depth is not bounded by depth_max
    rng = rng or get_rng()
    return replace_subtree(tree1, random_subtree(tree2, rng), rng)

def build_forest(config, rng: Optional[random.Random] = None) -> List[Individual]:
    rng = rng or get_rng()
    return [Individual(build_tree(config, rng=rng)) for _ in range(config.forest_size)]

def build_population(config, rng: Optional[random.Random] = None) -> List[List[Individual]]:
    rng = rng or get_rng()
    return [build_forest(config, rng) for _ in range(config.pop_size)]
