# genetic_algorithm.py
# Island-model evolution: per-island generation loop, migration and the
# parallel coordinator that tracks the global champion.
from typing import List, NamedTuple, Optional, Sequence
import concurrent.futures
import random
from .config import GPConfig, build_options
from .fitness import forest_error
from .genetic_operators import Individual, build_population, mutate
from .globals import get_rng
from .selection import better_of, get_best, tournament_select

Forest = List[Individual]

class IslandResult(NamedTuple):
    forest: Forest
    best: Optional[Individual]

class RunResult(NamedTuple):
    population: List[Forest]
    best: Optional[Individual]

def should_report(config: GPConfig, step: int) -> bool:
    # Fires on a non-zero remainder
    return step % config.reprate != 0

def is_solved(best: Optional[Individual]) -> bool:
    return best is not None and best.fitness == 0

def generations(config: GPConfig, n: int, forest: Sequence[Individual], best: Optional[Individual],
                rng: Optional[random.Random] = None) -> IslandResult:
    """Run up to ``n`` generations of one forest.

    Each generation scores the forest, keeps the best individual seen so far
    and breeds the next forest by tournament selection, crossover and
    mutation. When a best was passed in, its tree replaces the first slot of
    every new forest. Stops early once the best reaches fitness 0.
    """
    rng = rng or get_rng()
    forest = list(forest)
    while n > 0 and not is_solved(best):
        if should_report(config, n):
            config.repfunc(best, False)
        ferror = forest_error(config, forest)
        new_best = better_of(best, get_best(ferror))
        new_forest = [Individual(mutate(config, tree, rng)) for tree in tournament_select(config, ferror, rng)]
        if best is not None:
            new_forest[0] = Individual(new_best.tree)
        forest, best, n = new_forest, new_best, n - 1
    return IslandResult(forest, best)

def migrate(population: Sequence[Sequence[Individual]], rng: Optional[random.Random] = None) -> List[Forest]:
    """Reshuffle every forest and put back one member drawn from that same
    forest in place of the first shuffled slot. Forest sizes are unchanged."""
    rng = rng or get_rng()
    selected = [rng.choice(forest) for forest in population]
    migrated = []
    for forest, chosen in zip(population, selected):
        shuffled = list(forest)
        rng.shuffle(shuffled)
        migrated.append([chosen] + shuffled[1:])
    return migrated

def parallel_generations(config: GPConfig, cycles: Optional[int] = None, gens: Optional[int] = None,
                         population: Optional[Sequence[Sequence[Individual]]] = None,
                         best: Optional[Individual] = None,
                         rng: Optional[random.Random] = None) -> RunResult:
    """Evolve every island in parallel for ``gens`` generations per cycle,
    migrating after each cycle.

    Pass back a ``population`` and ``best`` from an earlier result to resume
    a search. Without ``rng`` a generator seeded with ``config.seed`` is used.
    """
    if cycles is None:
        cycles = config.cycles
    if gens is None:
        gens = config.gens
    if rng is None:
        rng = random.Random(config.seed)
    if population is None:
        population = build_population(config, rng)
        best = None
    population = [list(forest) for forest in population]

    while cycles > 0 and not is_solved(best):
        if best is not None and should_report(config, cycles):
            config.repfunc(best, True)
        # One private generator per island keeps seeded runs reproducible
        island_rngs = [random.Random(rng.getrandbits(64)) for _ in population]
        with concurrent.futures.ThreadPoolExecutor(max_workers=len(population)) as executor:
            futures = [executor.submit(generations, config, gens, forest, best, island_rng)
                       for forest, island_rng in zip(population, island_rngs)]
            results = [future.result() for future in futures]
        population = migrate([r.forest for r in results], rng)
        for r in results:
            best = better_of(best, r.best)
        cycles -= 1
    return RunResult(population, best)

def run_gp(options=None, **kwargs) -> RunResult:
    """Build a fresh population and evolve it to fit ``tests``/``actual``.

    Example::

        run_gp(symbols=['x'], funcs=[{'op': operator.add, 'arity': 2, 'name': '+'}],
               tests=[[1], [2]], actual=[2, 4], forest_size=20, pop_size=2)
    """
    return parallel_generations(build_options(options, **kwargs))
