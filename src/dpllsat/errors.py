"""
Exception classes raised by the solver and its I/O shims.

Conflicts met during search are not exceptions: they are reported as
SolverState.S_CONFLICT or None and recovered by backtracking.
"""


class SATBaseException(Exception):
    """Base class of every error raised by dpllsat."""
    pass


class DimacsParseError(SATBaseException, ValueError):
    """Raised when a DIMACS problem description is malformed."""
    def __init__(self, message, line_number=None):
        self.line_number = line_number
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        if self.line_number is not None:
            return "line {}: {}".format(self.line_number, self.message)
        return self.message


class InvalidClauseError(SATBaseException, ValueError):
    """
    Raised when a clause breaks the input contract: a zero literal, or a
    literal whose variable lies outside [1, num_vars].
    """
    def __init__(self, message="Invalid clause", clause=None, literal=None):
        self.clause = clause
        self.literal = literal
        self.message = message
        super().__init__(self.message)


class InconsistentAssignmentError(SATBaseException):
    """Raised when a variable would be bound to both True and False."""
    def __init__(self, message="Inconsistent variable assignment detected", variable=None):
        self.variable = variable
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        if self.variable is not None:
            return "{} (variable={})".format(self.message, self.variable)
        return self.message


class SolverTimeoutError(SATBaseException):
    """
    Raised when the search exceeds its time limit.

    Attributes:
        time_spent: seconds spent before the deadline fired
        partial_assignment: assignment of the search node being expanded
    """
    def __init__(self, message="Solver exceeded time limit", time_spent=None,
                 partial_assignment=None):
        self.time_spent = time_spent
        self.partial_assignment = partial_assignment
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        if self.time_spent is not None:
            return "{} (time_spent={:.2f}s)".format(self.message, self.time_spent)
        return self.message


class ConfigurationError(SATBaseException, ValueError):
    """Raised for an unknown engine, branching policy or invalid option."""
    pass
