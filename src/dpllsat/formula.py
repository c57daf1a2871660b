"""
Literals, clauses and formulas.

A literal is a nonzero int: abs(lit) is the variable, the sign its polarity.
A clause is a tuple of literals (their disjunction), a formula a tuple of
clauses (their conjunction). The empty formula is satisfied; a formula holding
an empty clause is conflicted. Formulas are never mutated, assign_literal
builds a new one.
"""

from typing import Dict, Iterable, List, Mapping, Tuple

from .errors import InvalidClauseError

Literal = int
Clause = Tuple[int, ...]
Formula = Tuple[Clause, ...]


"""
The trail engine keeps per-literal state in flat lists indexed by literal.
The positive literal of a variable v is given by 2*v, while negation is 2*v - 1
Following four are help functions based on this terminology
"""
def get_literal(v: int) -> int:
    if v == 0:
        raise InvalidClauseError("Literal cannot be zero", literal=v)
    return 2 * v if v > 0 else 2 * (abs(v)) - 1

def get_variable(l: int) -> int:
    return (l + 1) // 2 if l % 2 else l // 2

def get_opposite_literal(l: int) -> int:
    return (l + 1) if l % 2 else (l - 1)

def is_negative(l: int) -> bool:
    return True if l % 2 else False


def make_clause(literals: Iterable[int]) -> Clause:
    """Build a clause, dropping repeated literals but keeping their order."""
    clause = []
    for lit in literals:
        lit = int(lit)
        if lit == 0:
            raise InvalidClauseError("Clause contains the literal 0", clause=tuple(clause), literal=0)
        if lit not in clause:
            clause.append(lit)
    return tuple(clause)


def make_formula(clauses: Iterable[Iterable[int]]) -> Formula:
    return tuple(make_clause(clause) for clause in clauses)


def check_formula(formula: Formula, num_vars: int):
    """Raise InvalidClauseError if a literal refers to a variable above num_vars."""
    if num_vars < 0:
        raise InvalidClauseError("Variable count must be non-negative, is {}".format(num_vars))
    for clause in formula:
        for lit in clause:
            if lit == 0 or abs(lit) > num_vars:
                raise InvalidClauseError(
                    "Literal {} out of range for {} variables".format(lit, num_vars),
                    clause=clause, literal=lit)


def assign_literal(formula: Formula, var: int, value: bool) -> Formula:
    """
    Simplify formula under var = value.

    Clauses containing the satisfying literal are dropped, the opposite
    literal is removed from every other clause. The result may contain empty
    clauses; callers check for them with has_empty_clause().
    """
    lit = var if value else -var
    return tuple(
        tuple(l for l in clause if l != -lit)
        for clause in formula
        if lit not in clause
    )


def has_empty_clause(formula: Formula) -> bool:
    return any(not clause for clause in formula)


def unit_clauses(formula: Formula) -> List[Clause]:
    return [clause for clause in formula if len(clause) == 1]


def evaluate_clause(clause: Clause, model: Mapping[int, bool]) -> bool:
    # Unassigned variables count as False
    return any(model.get(abs(lit), False) == (lit > 0) for lit in clause)


def verify_model(formula: Formula, model: Mapping[int, bool]) -> List[Clause]:
    """Return the clauses of formula not satisfied by model, empty if none."""
    return [clause for clause in formula if not evaluate_clause(clause, model)]


def polarities(formula: Formula) -> Dict[int, Tuple[bool, bool]]:
    # var -> (occurs positive, occurs negative)
    seen = {}
    for clause in formula:
        for lit in clause:
            pos, neg = seen.get(abs(lit), (False, False))
            if lit > 0:
                pos = True
            else:
                neg = True
            seen[abs(lit)] = (pos, neg)
    return seen
