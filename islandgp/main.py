# main.py
import operator
from .genetic_algorithm import run_gp
from .expression_tree import tree_to_string, compile_tree

SYMBOLS = ['x']
FUNCS = [{'op': operator.add, 'arity': 2, 'name': '+'},
         {'op': operator.sub, 'arity': 2, 'name': '-'},
         {'op': operator.mul, 'arity': 2, 'name': '*'}]
# Target function: f(x) = x^2 + 2x
TESTS = [[1], [2], [3], [4], [5]]
ACTUAL = [3, 8, 15, 24, 35]

if __name__ == "__main__":
    print("Symbolic Regression using Genetic Programming (Island Model)")
    print("==========================================================")
    print("Target Function Points:")
    for (x,), y in zip(TESTS, ACTUAL):
        print(f"  f({x}) = {y}")
    print("----------------------------------------")

    result = run_gp(symbols=SYMBOLS, funcs=FUNCS, tests=TESTS, actual=ACTUAL,
                    pop_size=4, forest_size=60, gens=25, cycles=8,
                    mutation_rate=0.1, tournament_size=5, reprate=5, seed=42)
    best = result.best

    if best is not None:
        print("\nBest Solution Found:")
        print("Formula:", tree_to_string(best.tree))
        print(f"Fitness: {best.fitness:.6f}")
        program = compile_tree(SYMBOLS, best.tree)
        print("Predictions vs Targets:")
        for args, y in zip(TESTS, ACTUAL):
            pred = program(*args)
            print(f"  x={args[0]}: Pred={pred}, Target={y}, Diff={abs(pred - y)}")
    else:
        print("\nFailed to find any valid solution.")
