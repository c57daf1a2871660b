"""
Description: A DPLL based SAT solver
"""

import logging
import time
from typing import Iterable, List, Optional

from .assignment import Assignment
from .branching import BranchingPolicy, LowestIndexPolicy, make_policy
from .config import SolverConfig
from .definitions import SolverState
from .errors import SolverTimeoutError
from .formula import (Clause, Formula, assign_literal, check_formula,
                      has_empty_clause, make_formula, verify_model)
from .propagation import pure_literal_elimination, unit_propagation
from .statistics import SearchStatistics
from .trail import TrailSolver

logger = logging.getLogger(__name__)


class Deadline:
    """Wall-clock limit checked at every decision point."""

    def __init__(self, seconds: float):
        self.seconds = seconds
        self.start = time.monotonic()

    def elapsed(self) -> float:
        return time.monotonic() - self.start

    def expired(self) -> bool:
        return self.elapsed() > self.seconds

    def check(self, assignment=None):
        if self.expired():
            raise SolverTimeoutError(
                "Solver exceeded time limit of {}s".format(self.seconds),
                time_spent=self.elapsed(),
                partial_assignment=assignment)


"""
One search node: BCP to a fixpoint, one pure literal pass, then either a
verdict or the variable to branch on.
Returns (S_SATISFIED, model), (S_CONFLICT, None) or
(S_UNRESOLVED, (formula, assignment, branch_var)).
"""
def expand_node(formula: Formula, assignment: Assignment, num_vars: int,
                policy: BranchingPolicy, statistics: SearchStatistics):
    propagated = unit_propagation(formula, assignment, statistics)
    if propagated is None:
        statistics.conflicts += 1
        return SolverState.S_CONFLICT, None
    formula, assignment = pure_literal_elimination(propagated[0], propagated[1], statistics)
    if not formula:
        return SolverState.S_SATISFIED, assignment
    if has_empty_clause(formula):
        statistics.conflicts += 1
        return SolverState.S_CONFLICT, None
    unassigned = assignment.unassigned(num_vars)
    if not unassigned:
        # Cannot happen for a formula checked against num_vars
        return SolverState.S_SATISFIED, assignment
    var = policy.select(unassigned, formula)
    statistics.decisions += 1
    return SolverState.S_UNRESOLVED, (formula, assignment, var)


def dpll(formula: Formula, assignment: Assignment, num_vars: int,
         policy: Optional[BranchingPolicy] = None,
         statistics: Optional[SearchStatistics] = None,
         deadline: Optional[Deadline] = None) -> Optional[Assignment]:
    """
    Recursive DPLL. Returns a model or None if formula is unsatisfiable
    under assignment. Each branch works on its own formula and assignment.
    Recursion depth grows with the number of decisions, see dpll_iterative()
    for large instances.
    """
    if policy is None:
        policy = LowestIndexPolicy()
    if statistics is None:
        statistics = SearchStatistics()
    return _dpll(formula, assignment, num_vars, policy, statistics, deadline, 0)


def _dpll(formula, assignment, num_vars, policy, statistics, deadline, depth):
    statistics.record_depth(depth)
    state, node = expand_node(formula, assignment, num_vars, policy, statistics)
    if state == SolverState.S_SATISFIED:
        return node
    if state == SolverState.S_CONFLICT:
        return None
    formula, assignment, var = node
    if deadline is not None:
        deadline.check(assignment)
    logger.debug("Branching on variable %d at depth %d", var, depth)
    # first try with true
    model = _dpll(assign_literal(formula, var, True), assignment.extend(var, True),
                  num_vars, policy, statistics, deadline, depth + 1)
    if model is not None:
        return model
    # then try with false
    statistics.backtracks += 1
    logger.debug("Backtracking on variable %d at depth %d", var, depth)
    return _dpll(assign_literal(formula, var, False), assignment.extend(var, False),
                 num_vars, policy, statistics, deadline, depth + 1)


def dpll_iterative(formula: Formula, assignment: Assignment, num_vars: int,
                   policy: Optional[BranchingPolicy] = None,
                   statistics: Optional[SearchStatistics] = None,
                   deadline: Optional[Deadline] = None) -> Optional[Assignment]:
    """
    Same search as dpll() with an explicit stack of pending nodes.
    The false child is pushed below the true child so nodes are expanded in
    the same order as the recursion.
    """
    if policy is None:
        policy = LowestIndexPolicy()
    if statistics is None:
        statistics = SearchStatistics()
    # (formula, assignment, depth, is_false_branch)
    stack = [(formula, assignment, 0, False)]
    while stack:
        formula, assignment, depth, is_false_branch = stack.pop()
        if is_false_branch:
            statistics.backtracks += 1
        statistics.record_depth(depth)
        state, node = expand_node(formula, assignment, num_vars, policy, statistics)
        if state == SolverState.S_SATISFIED:
            return node
        if state == SolverState.S_CONFLICT:
            continue
        formula, assignment, var = node
        if deadline is not None:
            deadline.check(assignment)
        logger.debug("Branching on variable %d at depth %d", var, depth)
        stack.append((assign_literal(formula, var, False), assignment.extend(var, False), depth + 1, True))
        stack.append((assign_literal(formula, var, True), assignment.extend(var, True), depth + 1, False))
    return None


class Solver:
    def __init__(self, var_count: int, formula: Iterable[Iterable[int]],
                 config: Optional[SolverConfig] = None):
        self.var_count = var_count
        self.formula = make_formula(formula)
        check_formula(self.formula, var_count)
        self.clause_count = len(self.formula)
        self.config = config if config is not None else SolverConfig()
        self.policy = make_policy(self.config.branching, self.config.seed)
        self.statistics = SearchStatistics()
        self.state = SolverState.S_UNRESOLVED
        self.model: Optional[Assignment] = None

    def run_engine(self, deadline: Optional[Deadline]) -> Optional[Assignment]:
        engine = self.config.engine
        if engine == "trail":
            trail_solver = TrailSolver(self.var_count, self.formula, self.policy,
                                       self.statistics, deadline)
            return trail_solver.run()
        search = dpll if engine == "recursive" else dpll_iterative
        return search(self.formula, Assignment(), self.var_count,
                      self.policy, self.statistics, deadline)

    def solve(self) -> SolverState:
        logger.info("Solving %d variables, %d clauses with %r",
                    self.var_count, self.clause_count, self.config)
        deadline = None
        if self.config.time_limit is not None:
            deadline = Deadline(self.config.time_limit)
        self.statistics.start()
        try:
            self.model = self.run_engine(deadline)
        finally:
            self.statistics.stop()
        if self.model is not None:
            self.state = SolverState.S_SATISFIED
        else:
            self.state = SolverState.S_UNSATISFIED
        logger.info("Finished with %s after %d decisions", self.state.name,
                    self.statistics.decisions)
        return self.state

    def model_values(self) -> List[bool]:
        """Value of variables 1..var_count, False where the model leaves one unassigned."""
        if self.model is None:
            return []
        return self.model.values_list(self.var_count)

    # Function to verify output assignment if any
    def verify(self) -> List[Clause]:
        if self.model is None:
            return []
        non_true_clauses = verify_model(self.formula, self.model)
        if not non_true_clauses:
            logger.info("All clauses evaluate to true under given assignment")
        else:
            logger.error("%d unsatisfied clauses found", len(non_true_clauses))
        return non_true_clauses

    def print_statistics(self):
        print(self.statistics)


def solve(num_vars: int, formula: Iterable[Iterable[int]], **options) -> Optional[Assignment]:
    """Solve formula over num_vars variables, options as in SolverConfig."""
    solver = Solver(num_vars, formula, SolverConfig(**options))
    solver.solve()
    return solver.model
