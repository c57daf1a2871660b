import enum


class CONSTANTS:
    # Search engines, see solver.Solver
    ENGINES = ("recursive", "iterative", "trail")
    DEFAULT_ENGINE = "iterative"
    # Branching policies, see branching.make_policy
    DEFAULT_BRANCHING = "lowest"
    # DIMACS: first characters of lines that carry no clause
    COMMENT_MARKER = "c"
    HEADER_MARKER = "p"
    # Some SATLIB instances end with a "%" line followed by a lone "0"
    END_MARKER = "%"


class ClauseState(enum.Enum):
    C_UNRESOLVED = 0
    C_SATISFIED = 1
    C_CONFLICTING = 2
    C_UNIT = 3 # Only one literal is undecided, rest eval to false


# Note that LiteralState also functions as VariableState
# The state a literal of a variable fixes that of the variable and vice-versa
class LiteralState(enum.Enum):
    L_UNASSIGNED = -1
    L_FALSE = 0
    L_TRUE = 1


class SolverState(enum.Enum):
    S_UNRESOLVED = 0
    S_SATISFIED = 1
    S_UNSATISFIED = 2
    S_CONFLICT = 3
