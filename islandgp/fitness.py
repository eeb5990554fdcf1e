# fitness.py
from typing import List, Sequence
import concurrent.futures
import numpy as np
from .expression_tree import Node, compile_tree
from .genetic_operators import Individual
from .globals import INF
from .util import off_by

def find_error(config, tree: Node) -> float:
    """Sum of absolute errors of ``tree`` over the configured test cases.

    Lower is better, 0 is an exact fit. Faults raised by the program
    (division by zero, bad arguments) propagate to the caller. Errors too
    large for a float score as ``INF``.
    """
    program = compile_tree(config.symbols, tree)
    diffs = [off_by(program(*args), expected) for args, expected in zip(config.tests, config.actual)]
    try:
        errors = np.array(diffs, dtype=np.float64)
    except OverflowError:
        return INF
    total = float(np.sum(errors))
    if np.isnan(total):
        return INF
    return total

def forest_error(config, forest: Sequence[Individual]) -> List[Individual]:
    # Parallel fitness evaluation, results keep the forest order
    trees = [ind.tree for ind in forest]
    with concurrent.futures.ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        fitnesses = list(executor.map(find_error, [config] * len(trees), trees))
    return [Individual(tree, fit) for tree, fit in zip(trees, fitnesses)]
