"""
Simplification passes run at every search node: unit propagation to a
fixpoint, then one round of pure literal elimination.
"""

import logging
from typing import List, Optional, Tuple

from .assignment import Assignment
from .formula import Formula, assign_literal, has_empty_clause, polarities, unit_clauses

logger = logging.getLogger(__name__)


def unit_propagation(formula: Formula, assignment: Assignment,
                     statistics=None) -> Optional[Tuple[Formula, Assignment]]:
    """
    Assign the literal of unit clauses until none is left.

    Each forced assignment is applied before the next unit clause is looked
    up, so later units are read from the simplified formula. Returns None on
    conflict: a variable forced against its current value, or an empty
    clause in the formula.
    """
    if has_empty_clause(formula):
        return None
    while True:
        units = unit_clauses(formula)
        if not units:
            return formula, assignment
        lit = units[0][0]
        var = abs(lit)
        value = lit > 0
        if assignment.conflicts_with(var, value):
            logger.debug("Unit literal %d contradicts assignment", lit)
            return None
        assignment = assignment.extend(var, value)
        formula = assign_literal(formula, var, value)
        if statistics is not None:
            statistics.propagations += 1
        if has_empty_clause(formula):
            logger.debug("Unit literal %d falsified a clause", lit)
            return None


def pure_literals(formula: Formula, assignment: Optional[Assignment] = None) -> List[Tuple[int, bool]]:
    """
    (variable, value) for every variable occurring with one polarity only.
    Variables already bound in assignment keep their value and are skipped.
    """
    pure = []
    for var, (pos, neg) in sorted(polarities(formula).items()):
        if assignment is not None and var in assignment:
            continue
        if pos and not neg:
            pure.append((var, True))
        elif neg and not pos:
            pure.append((var, False))
    return pure


def pure_literal_elimination(formula: Formula, assignment: Assignment,
                             statistics=None) -> Tuple[Formula, Assignment]:
    # One batch pass; literals made pure by it are handled at the next node
    pure = pure_literals(formula, assignment)
    if not pure:
        return formula, assignment
    for var, value in pure:
        formula = assign_literal(formula, var, value)
    if statistics is not None:
        statistics.pure_literals += len(pure)
    return formula, assignment.extend_many(pure)
