"""Shared fixtures for the test modules."""
import operator
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from islandgp.config import Function, build_options

ADD = Function(operator.add, 2, '+')
MUL = Function(operator.mul, 2, '*')


def quiet(best, cycle_boundary):
    pass


def make_config(**overrides):
    options = dict(symbols=['x'], funcs=[ADD, MUL],
                   tests=[[1], [2], [3]], actual=[2, 4, 6],
                   pop_size=2, forest_size=10, gens=5, cycles=2,
                   tournament_size=3, mutation_rate=0.1, repfunc=quiet)
    options.update(overrides)
    return build_options(options)


class ScriptedRng:
    """Stand-in for random.Random: choice() returns scripted picks in order,
    every numeric draw is 0."""

    def __init__(self, picks):
        self.picks = list(picks)

    def choice(self, seq):
        return self.picks.pop(0)

    def randrange(self, n):
        return 0

    def random(self):
        return 0.0
