import random

import pytest
from sortedcontainers import SortedSet

from dpllsat.branching import (LowestIndexPolicy, OccurrencePolicy, RandomPolicy,
                               make_policy)
from dpllsat.errors import ConfigurationError


def test_lowest_index():
    assert LowestIndexPolicy().select(SortedSet([5, 2, 9]), []) == 2


def test_random_policy_is_reproducible():
    unassigned = SortedSet(range(1, 50))
    first = RandomPolicy(seed=7)
    second = RandomPolicy(seed=7)
    picks = [first.select(unassigned, []) for _ in range(20)]
    assert picks == [second.select(unassigned, []) for _ in range(20)]
    assert all(pick in unassigned for pick in picks)


def test_random_policy_uses_injected_generator():
    rng = random.Random(3)
    expected = SortedSet([4, 8, 15])[random.Random(3).randrange(3)]
    assert RandomPolicy(rng=rng).select(SortedSet([4, 8, 15]), []) == expected


def test_occurrence_policy_prefers_frequent_variable():
    clauses = [(1, 3), (-3, 2), (3, -2), (1,)]
    assert OccurrencePolicy().select(SortedSet([1, 2, 3]), clauses) == 3


def test_occurrence_policy_ties_to_lowest():
    clauses = [(2, 4), (-2, -4)]
    assert OccurrencePolicy().select(SortedSet([1, 2, 4]), clauses) == 2
    # Variables absent from every clause only win when nothing else is left
    assert OccurrencePolicy().select(SortedSet([5, 6]), clauses) == 5


def test_make_policy():
    assert isinstance(make_policy("lowest"), LowestIndexPolicy)
    assert isinstance(make_policy("occurrence"), OccurrencePolicy)
    policy = make_policy("random", seed=11)
    assert isinstance(policy, RandomPolicy)
    assert policy.seed == 11


def test_make_policy_unknown_name():
    with pytest.raises(ConfigurationError):
        make_policy("vsids")
