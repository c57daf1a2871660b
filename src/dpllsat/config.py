from typing import Optional

from .branching import POLICIES
from .definitions import CONSTANTS
from .errors import ConfigurationError


class SolverConfig:
    """
    Options of one solver run.

    engine: "recursive", "iterative" or "trail"
    branching: name of a policy in branching.POLICIES
    seed: seed of the random branching policy
    time_limit: seconds before SolverTimeoutError, None for no limit
    """

    def __init__(self, engine: str = CONSTANTS.DEFAULT_ENGINE,
                 branching: str = CONSTANTS.DEFAULT_BRANCHING,
                 seed: Optional[int] = None,
                 time_limit: Optional[float] = None):
        if engine not in CONSTANTS.ENGINES:
            raise ConfigurationError("Unknown engine {!r}, expected one of {}".format(
                engine, ", ".join(CONSTANTS.ENGINES)))
        if branching not in POLICIES:
            raise ConfigurationError("Unknown branching policy {!r}, expected one of {}".format(
                branching, ", ".join(sorted(POLICIES))))
        if time_limit is not None and time_limit <= 0:
            raise ConfigurationError("Time limit must be positive, is {}".format(time_limit))
        self.engine = engine
        self.branching = branching
        self.seed = seed
        self.time_limit = time_limit

    def __repr__(self):
        return "SolverConfig(engine={!r}, branching={!r}, seed={!r}, time_limit={!r})".format(
            self.engine, self.branching, self.seed, self.time_limit)
