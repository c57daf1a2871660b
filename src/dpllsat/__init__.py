"""dpllsat: a DPLL SAT solver with unit propagation and pure literal elimination."""

from .assignment import Assignment
from .branching import (BranchingPolicy, LowestIndexPolicy, OccurrencePolicy,
                        RandomPolicy, make_policy)
from .config import SolverConfig
from .definitions import CONSTANTS, SolverState
from .dimacs import parse_dimacs, parse_dimacs_string, read_dimacs, write_dimacs
from .errors import (ConfigurationError, DimacsParseError, InconsistentAssignmentError,
                     InvalidClauseError, SATBaseException, SolverTimeoutError)
from .formula import assign_literal, has_empty_clause, make_formula, verify_model
from .propagation import pure_literal_elimination, unit_propagation
from .solver import Deadline, Solver, dpll, dpll_iterative, solve
from .statistics import SearchStatistics
from .trail import TrailSolver

__version__ = "0.1.0"
