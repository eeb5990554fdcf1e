# selection.py
from typing import Iterable, List, Optional, Sequence
import random
from .expression_tree import Node
from .genetic_operators import Individual, crossover
from .globals import get_rng

def tournament_select_once(config, ferror: Sequence[Individual], rng: Optional[random.Random] = None) -> Node:
    """Sample ``tournament_size`` individuals with replacement and cross over
    the two fittest. Equal fitness keeps sampling order."""
    rng = rng or get_rng()
    selected = sorted((rng.choice(ferror) for _ in range(config.tournament_size)),
                      key=lambda ind: ind.fitness)
    return crossover(selected[0].tree, selected[1].tree, rng)

def tournament_select(config, ferror: Sequence[Individual], rng: Optional[random.Random] = None) -> List[Node]:
    rng = rng or get_rng()
    return [tournament_select_once(config, ferror, rng) for _ in range(len(ferror))]

def get_best(ferror: Iterable[Individual]) -> Individual:
    # First minimum wins ties
    return min(ferror, key=lambda ind: ind.fitness)

def better_of(incumbent: Optional[Individual], challenger: Optional[Individual]) -> Optional[Individual]:
    """The fitter of two champions. The incumbent is kept on ties."""
    if incumbent is None:
        return challenger
    if challenger is None or challenger.fitness >= incumbent.fitness:
        return incumbent
    return challenger
