import argparse
import logging
import sys

from .branching import POLICIES
from .config import SolverConfig
from .definitions import CONSTANTS, SolverState
from .dimacs import read_dimacs
from .errors import SATBaseException
from .solver import Solver

logger = logging.getLogger(__name__)


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    # Usage errors exit with 1 like every other failure of the tool
    def error(self, message):
        self.print_usage(sys.stderr)
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="dpllsat", description="DPLL SAT solver for DIMACS CNF files")
    parser.add_argument("input_file", help="path to a DIMACS CNF file")
    parser.add_argument("--engine", choices=CONSTANTS.ENGINES, default=CONSTANTS.DEFAULT_ENGINE,
                        help="search engine (default: %(default)s)")
    parser.add_argument("--branching", choices=sorted(POLICIES), default=CONSTANTS.DEFAULT_BRANCHING,
                        help="branching variable selection (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed of the random branching policy")
    parser.add_argument("--timeout", type=float, default=None,
                        help="give up after this many seconds")
    parser.add_argument("--strict", action="store_true",
                        help="read lines starting with 0 as clauses instead of skipping them")
    parser.add_argument("--verify", action="store_true",
                        help="check the model against every clause")
    parser.add_argument("--stats", action="store_true", help="print search statistics")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def print_result(solver: Solver):
    if solver.state == SolverState.S_SATISFIED:
        print("SAT")
        for var, value in enumerate(solver.model_values(), start=1):
            print("Variable {} = {}".format(var, "true" if value else "false"))
    else:
        print("UNSAT")


def main(argv=None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print("{}: error: {}".format(parser.prog, e), file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Arguments: %s", args)

    try:
        var_count, formula = read_dimacs(args.input_file, skip_zero_lines=not args.strict)
        config = SolverConfig(engine=args.engine, branching=args.branching,
                              seed=args.seed, time_limit=args.timeout)
        solver = Solver(var_count, formula, config)
        solver.solve()
    except (SATBaseException, OSError) as e:
        print("Error: {}".format(e))
        return 1

    print_result(solver)
    if args.stats:
        solver.print_statistics()
    if args.verify and solver.verify():
        print("Error: model does not satisfy every clause")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
