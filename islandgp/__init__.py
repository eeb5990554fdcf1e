"""Parallel island-model genetic programming over expression trees."""
from .config import ConfigError, Function, GPConfig, build_options
from .expression_tree import Node, NodeType, compile_tree, tree_height, tree_size, tree_to_string
from .fitness import find_error, forest_error
from .genetic_algorithm import IslandResult, RunResult, generations, migrate, parallel_generations, run_gp
from .genetic_operators import (Individual, build_forest, build_population, build_tree, crossover, mutate,
                                random_subtree, replace_subtree, terminal)
from .selection import get_best, tournament_select, tournament_select_once
from .util import flip, off_by, print_report

__version__ = "0.1.0"
