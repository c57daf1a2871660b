"""
Policies choosing the next variable to branch on.

select() receives the unassigned variables as a SortedSet and the clauses
still active at the node. The choice changes search order only, never the
answer.
"""

import random
from typing import Iterable, Optional

from sortedcontainers import SortedList, SortedSet

from .definitions import CONSTANTS
from .errors import ConfigurationError


class BranchingPolicy:
    name = None

    def select(self, unassigned: SortedSet, clauses: Iterable) -> int:
        raise NotImplementedError

    def __repr__(self):
        return "{}()".format(type(self).__name__)


class LowestIndexPolicy(BranchingPolicy):
    name = "lowest"

    def select(self, unassigned, clauses):
        return unassigned[0]


class RandomPolicy(BranchingPolicy):
    """Uniform choice among unassigned variables from a private generator."""
    name = "random"

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

    def select(self, unassigned, clauses):
        # SortedSet indexing keeps the draw reproducible for a given seed
        return unassigned[self.rng.randrange(len(unassigned))]

    def __repr__(self):
        return "RandomPolicy(seed={})".format(self.seed)


class OccurrencePolicy(BranchingPolicy):
    """
    Score of a variable is the number of active clauses it occurs in.
    The unassigned variable with maximum score is selected, ties going to the
    smallest index. Variables absent from every clause score zero.
    """
    name = "occurrence"

    def select(self, unassigned, clauses):
        scores = dict.fromkeys(unassigned, 0)
        for clause in clauses:
            for lit in clause:
                var = abs(lit)
                if var in scores:
                    scores[var] += 1
        score2var = SortedList((-score, var) for var, score in scores.items())
        return score2var[0][1]


POLICIES = {
    LowestIndexPolicy.name: LowestIndexPolicy,
    RandomPolicy.name: RandomPolicy,
    OccurrencePolicy.name: OccurrencePolicy,
}


def make_policy(name: str = CONSTANTS.DEFAULT_BRANCHING, seed: Optional[int] = None) -> BranchingPolicy:
    if name not in POLICIES:
        raise ConfigurationError("Unknown branching policy {!r}, expected one of {}".format(
            name, ", ".join(sorted(POLICIES))))
    if name == RandomPolicy.name:
        return RandomPolicy(seed=seed)
    return POLICIES[name]()
