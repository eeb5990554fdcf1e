"""
Test sum-of-absolute-errors scoring and parallel forest scoring.
"""
import math
import operator
import unittest

from helpers import ADD, MUL, make_config
from islandgp.config import Function
from islandgp.expression_tree import Node
from islandgp.fitness import find_error, forest_error
from islandgp.genetic_operators import Individual
from islandgp.globals import INF

X = Node.variable('x')


class TestFitness(unittest.TestCase):

    def test_identity_is_exact(self):
        config = make_config(tests=[[0]], actual=[0])
        self.assertEqual(find_error(config, X), 0)

    def test_sum_of_absolute_errors(self):
        config = make_config(tests=[[1], [2]], actual=[0, 0])
        tree = Node.operator(ADD, [X, Node.constant(1)])
        self.assertEqual(find_error(config, tree), 5.0)

    def test_errors_are_absolute(self):
        config = make_config(tests=[[1], [2]], actual=[3, 0])
        # |1 - 3| + |2 - 0|
        self.assertEqual(find_error(config, X), 4.0)

    def test_nan_scores_as_infinite(self):
        nan_op = Function(lambda a, b: float('nan'), 2, 'nan')
        config = make_config(funcs=[nan_op])
        self.assertEqual(find_error(config, Node.operator(nan_op, [X, X])), INF)

    def test_huge_integer_result_scores_as_infinite(self):
        config = make_config(tests=[[2 ** 600]], actual=[0])
        square = Node.operator(MUL, [X, X])
        self.assertEqual(find_error(config, square), INF)

    def test_large_integer_errors_within_float_range(self):
        config = make_config(tests=[[2 ** 500]], actual=[0])
        self.assertEqual(find_error(config, X), float(2 ** 500))

    def test_evaluation_fault_propagates(self):
        div = Function(operator.truediv, 2, '/')
        config = make_config(funcs=[div])
        with self.assertRaises(ZeroDivisionError):
            find_error(config, Node.operator(div, [X, Node.constant(0)]))

    def test_forest_error_keeps_order_and_size(self):
        config = make_config(max_workers=3)
        forest = [Individual(Node.constant(c)) for c in range(8)]
        ferror = forest_error(config, forest)
        self.assertEqual(len(ferror), len(forest))
        for c, ind in enumerate(ferror):
            self.assertIs(ind.tree, forest[c].tree)
            self.assertTrue(ind.scored)
            # actual = [2, 4, 6]
            self.assertEqual(ind.fitness, abs(c - 2) + abs(c - 4) + abs(c - 6))

    def test_forest_error_fault_aborts_scoring(self):
        div = Function(operator.truediv, 2, '/')
        config = make_config(funcs=[div])
        forest = [Individual(X), Individual(Node.operator(div, [X, Node.constant(0)])), Individual(X)]
        with self.assertRaises(ZeroDivisionError):
            forest_error(config, forest)

    def test_fitness_is_finite_for_arithmetic(self):
        config = make_config()
        tree = Node.operator(ADD, [X, X])
        fit = find_error(config, tree)
        self.assertTrue(math.isfinite(fit))
        self.assertEqual(fit, 0)


if __name__ == '__main__':
    unittest.main()
