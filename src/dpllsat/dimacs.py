"""
Reader and writer of the DIMACS CNF format.

    c a comment
    p cnf <variables> <clauses>
    1 -2 0
    2 3 0

Every clause line holds the literals of one clause, terminated by 0.
"""

import logging
from typing import Iterable, TextIO, Tuple

from .definitions import CONSTANTS
from .errors import DimacsParseError
from .formula import Formula, make_clause

logger = logging.getLogger(__name__)


def parse_header(line: str, line_number: int) -> Tuple[int, int]:
    tokens = line.split()
    if len(tokens) < 4:
        raise DimacsParseError("Invalid header {!r}".format(line.strip()), line_number)
    if tokens[1] != "cnf":
        raise DimacsParseError("Unsupported format {!r}, expected 'cnf'".format(tokens[1]), line_number)
    try:
        var_count = int(tokens[2])
        clause_count = int(tokens[3])
    except ValueError:
        raise DimacsParseError("Invalid header {!r}".format(line.strip()), line_number) from None
    if var_count < 0 or clause_count < 0:
        raise DimacsParseError("Negative count in header {!r}".format(line.strip()), line_number)
    return var_count, clause_count


def parse_dimacs(lines: Iterable[str], skip_zero_lines: bool = True) -> Tuple[int, Formula]:
    """
    Parse DIMACS lines into (number of variables, formula).

    skip_zero_lines drops lines starting with 0, found at the end of some
    SATLIB instances. Without it such a line is read as a clause, a lone 0
    being the empty clause.
    """
    header = None
    clauses = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        # Some inputs have redundant lines like "c 1 = P9_0[0]" or a "%" trailer
        if not stripped or stripped.startswith(CONSTANTS.COMMENT_MARKER):
            continue
        if stripped.startswith(CONSTANTS.END_MARKER):
            continue
        if stripped.startswith(CONSTANTS.HEADER_MARKER):
            if header is not None:
                raise DimacsParseError("Duplicate header", line_number)
            header = parse_header(stripped, line_number)
            continue
        if skip_zero_lines and stripped.startswith("0"):
            continue
        literals = []
        for token in stripped.split():
            try:
                lit = int(token)
            except ValueError:
                raise DimacsParseError("Invalid literal {!r}".format(token), line_number) from None
            if lit == 0:
                break
            literals.append(lit)
        clauses.append((line_number, literals))

    if header is None:
        raise DimacsParseError("No header line found in DIMACS input")
    var_count, clause_count = header
    for line_number, literals in clauses:
        for lit in literals:
            if abs(lit) > var_count:
                raise DimacsParseError(
                    "Literal {} exceeds declared variable count {}".format(lit, var_count), line_number)
    if len(clauses) != clause_count:
        logger.warning("Header declares %d clauses, found %d", clause_count, len(clauses))
    return var_count, tuple(make_clause(literals) for _, literals in clauses)


def parse_dimacs_string(text: str, skip_zero_lines: bool = True) -> Tuple[int, Formula]:
    return parse_dimacs(text.splitlines(), skip_zero_lines)


def read_dimacs(path, skip_zero_lines: bool = True) -> Tuple[int, Formula]:
    try:
        with open(path, "r", encoding="utf-8") as input_file:
            var_count, formula = parse_dimacs(input_file, skip_zero_lines)
    except UnicodeDecodeError as e:
        raise DimacsParseError("{} is not a text file: {}".format(path, e)) from e
    logger.info("Read %d variables, %d clauses from %s", var_count, len(formula), path)
    return var_count, formula


def write_dimacs(var_count: int, formula: Formula, stream: TextIO):
    stream.write("p cnf {} {}\n".format(var_count, len(formula)))
    for clause in formula:
        stream.write(" ".join(str(lit) for lit in clause) + (" 0\n" if clause else "0\n"))
