"""
DPLL over a single mutable clause database.

Instead of copying the formula at every node, variable states live in flat
lists and every binding is pushed on a trail. Backtracking rewinds the trail
to the mark taken before the decision, restoring the exact pre-branch state.
Decisions are taken in the same order as solver.dpll() for a given policy.
"""

import logging
from typing import List, Optional, Tuple

from .assignment import Assignment
from .definitions import ClauseState, LiteralState, SolverState
from .formula import Formula, get_literal, get_opposite_literal, get_variable, is_negative

logger = logging.getLogger(__name__)


class TrailSolver:
    def __init__(self, var_count: int, formula: Formula, policy, statistics, deadline=None):
        self.var_count = var_count
        self.clauses = [tuple(clause) for clause in formula]
        self.policy = policy
        self.statistics = statistics
        self.deadline = deadline

        # Since variables are 1-indexed, size of these lists if (var_count + 1)
        self.curr_assignment = [LiteralState.L_UNASSIGNED] * (var_count + 1)
        self.curr_literal_assignment = [LiteralState.L_UNASSIGNED] * (2 * var_count + 1)
        # A stack of all assigned variables in current path, most recently assigned variables are at top
        self.assigned_till_now = []
        # (variable, trail length before the decision, false branch taken)
        self.decisions: List[Tuple[int, int, bool]] = []

    def assign_variable(self, var: int, assignment: LiteralState):
        self.curr_assignment[var] = assignment
        pos_lit = get_literal(var)
        self.curr_literal_assignment[pos_lit] = assignment
        neg_assignment = LiteralState.L_UNASSIGNED
        if assignment == LiteralState.L_TRUE:
            neg_assignment = LiteralState.L_FALSE
        elif assignment == LiteralState.L_FALSE:
            neg_assignment = LiteralState.L_TRUE
        self.curr_literal_assignment[get_opposite_literal(pos_lit)] = neg_assignment

    def assert_literal(self, lit: int):
        # Make lit TRUE and record its variable on the trail
        index = get_literal(lit)
        var = get_variable(index)
        if is_negative(index):
            self.assign_variable(var, LiteralState.L_FALSE)
        else:
            self.assign_variable(var, LiteralState.L_TRUE)
        self.assigned_till_now.append(var)

    def literal_status(self, lit: int) -> LiteralState:
        return self.curr_literal_assignment[get_literal(lit)]

    def clause_state(self, clause) -> Tuple[ClauseState, Optional[int]]:
        unassigned_lit = None
        unassigned_count = 0
        for lit in clause:
            lit_state = self.literal_status(lit)
            if lit_state == LiteralState.L_TRUE:
                return ClauseState.C_SATISFIED, None
            if lit_state == LiteralState.L_UNASSIGNED:
                unassigned_count += 1
                unassigned_lit = lit
        if unassigned_count == 0:
            return ClauseState.C_CONFLICTING, None
        if unassigned_count == 1:
            return ClauseState.C_UNIT, unassigned_lit
        return ClauseState.C_UNRESOLVED, None

    def active_clauses(self) -> List[Tuple[int, ...]]:
        """Unsatisfied clauses restricted to their unassigned literals."""
        active = []
        for clause in self.clauses:
            if any(self.literal_status(lit) == LiteralState.L_TRUE for lit in clause):
                continue
            active.append(tuple(lit for lit in clause
                                if self.literal_status(lit) == LiteralState.L_UNASSIGNED))
        return active

    """
    Boolean Constraint Propagation: repeatedly scan the clause database, fail
    on a clause whose literals are all FALSE, otherwise assert the literal of
    the first unit clause. Stops when no clause is unit.
    """
    def bcp(self) -> SolverState:
        while True:
            unit_lit = None
            for clause in self.clauses:
                state, lit = self.clause_state(clause)
                if state == ClauseState.C_CONFLICTING:
                    return SolverState.S_CONFLICT
                if state == ClauseState.C_UNIT and unit_lit is None:
                    unit_lit = lit
            if unit_lit is None:
                return SolverState.S_UNRESOLVED
            self.assert_literal(unit_lit)
            self.statistics.propagations += 1

    def eliminate_pure_literals(self):
        seen = {}
        for clause in self.active_clauses():
            for lit in clause:
                pos, neg = seen.get(abs(lit), (False, False))
                seen[abs(lit)] = (pos or lit > 0, neg or lit < 0)
        pure = [var if pos else -var for var, (pos, neg) in sorted(seen.items()) if pos != neg]
        for lit in pure:
            self.assert_literal(lit)
        self.statistics.pure_literals += len(pure)

    def evaluate(self) -> SolverState:
        all_satisfied = True
        for clause in self.clauses:
            state, _ = self.clause_state(clause)
            if state == ClauseState.C_CONFLICTING:
                return SolverState.S_CONFLICT
            if state != ClauseState.C_SATISFIED:
                all_satisfied = False
        return SolverState.S_SATISFIED if all_satisfied else SolverState.S_UNRESOLVED

    def unassigned_variables(self):
        return self.current_assignment().unassigned(self.var_count)

    def current_assignment(self) -> Assignment:
        return Assignment({var: self.curr_assignment[var] == LiteralState.L_TRUE
                           for var in self.assigned_till_now})

    def undo_to(self, mark: int):
        # Unassign every variable bound since the trail had length mark
        for var in self.assigned_till_now[mark:]:
            self.assign_variable(var, LiteralState.L_UNASSIGNED)
        del self.assigned_till_now[mark:]

    def backtrack(self) -> bool:
        """Flip the deepest decision whose false branch is untried. False when none is left."""
        while self.decisions:
            var, mark, tried_false = self.decisions.pop()
            self.undo_to(mark)
            if not tried_false:
                self.statistics.backtracks += 1
                logger.debug("Backtracking on variable %d at depth %d", var, len(self.decisions))
                self.decisions.append((var, mark, True))
                self.assert_literal(-var)
                return True
        return False

    def decide(self) -> SolverState:
        unassigned = self.unassigned_variables()
        if not unassigned:
            return SolverState.S_SATISFIED
        var = self.policy.select(unassigned, self.active_clauses())
        self.statistics.decisions += 1
        if self.deadline is not None:
            self.deadline.check(self.current_assignment())
        logger.debug("Branching on variable %d at depth %d", var, len(self.decisions))
        self.decisions.append((var, len(self.assigned_till_now), False))
        self.assert_literal(var)
        return SolverState.S_UNRESOLVED

    def run(self) -> Optional[Assignment]:
        while True:
            self.statistics.record_depth(len(self.decisions))
            result = self.bcp()
            if result != SolverState.S_CONFLICT:
                self.eliminate_pure_literals()
                result = self.evaluate()
            if result == SolverState.S_UNRESOLVED:
                result = self.decide()
            if result == SolverState.S_SATISFIED:
                return self.current_assignment()
            if result == SolverState.S_CONFLICT:
                self.statistics.conflicts += 1
                if not self.backtrack():
                    return None
