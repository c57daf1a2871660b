import itertools
import random

import pytest


def brute_force_satisfiable(num_vars, formula):
    for values in itertools.product((False, True), repeat=num_vars):
        if all(any(values[abs(lit) - 1] == (lit > 0) for lit in clause) for clause in formula):
            return True
    return False


def random_formula(rng, num_vars, num_clauses, max_width=3):
    formula = []
    for _ in range(num_clauses):
        width = rng.randint(1, min(max_width, num_vars))
        variables = rng.sample(range(1, num_vars + 1), width)
        formula.append([var if rng.random() < 0.5 else -var for var in variables])
    return formula


def pigeonhole(pigeons, holes):
    # Variable p * holes + h + 1: pigeon p sits in hole h
    def var(p, h):
        return p * holes + h + 1
    formula = [[var(p, h) for h in range(holes)] for p in range(pigeons)]
    for h in range(holes):
        for p, q in itertools.combinations(range(pigeons), 2):
            formula.append([-var(p, h), -var(q, h)])
    return pigeons * holes, formula


@pytest.fixture
def random_instances():
    rng = random.Random(1234)
    instances = []
    for _ in range(60):
        num_vars = rng.randint(1, 7)
        num_clauses = rng.randint(1, 4 * num_vars + 2)
        instances.append((num_vars, random_formula(rng, num_vars, num_clauses)))
    return instances
