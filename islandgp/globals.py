# globals.py
# Default parameters and shared helpers for the island-model GP engine

# Tree generation
TERM_MAX = 1
TERM_MIN = -1
DEPTH_MAX = 4
DEPTH_MIN = 2

# Variation and selection
MUTATION_RATE = 0.05
TOURNAMENT_SIZE = 5

# Island model
FOREST_SIZE = 50
POP_SIZE = 6
GENS = 10
CYCLES = 10
REPRATE = 1

INF = float('inf')

import random
_rng = random.Random()
def get_rng():
    return _rng
