import time


class SearchStatistics:
    """Counters collected during one search."""

    def __init__(self):
        self.decisions = 0
        self.propagations = 0
        self.pure_literals = 0
        self.conflicts = 0
        self.backtracks = 0
        self.max_depth = 0
        self.solve_time = 0.0
        self._start = None

    def start(self):
        self._start = time.process_time()

    def stop(self):
        if self._start is not None:
            self.solve_time = time.process_time() - self._start
            self._start = None

    def record_depth(self, depth: int):
        if depth > self.max_depth:
            self.max_depth = depth

    def as_dict(self):
        return {
            "decisions": self.decisions,
            "propagations": self.propagations,
            "pure_literals": self.pure_literals,
            "conflicts": self.conflicts,
            "backtracks": self.backtracks,
            "max_depth": self.max_depth,
            "solve_time": self.solve_time,
        }

    def __str__(self):
        lines = ["## Statistics: "]
        lines.append("# Decisions: {}".format(self.decisions))
        lines.append("# Implications: {}".format(self.propagations))
        lines.append("# Pure literals: {}".format(self.pure_literals))
        lines.append("# Conflicts: {}".format(self.conflicts))
        lines.append("# Backtracks: {}".format(self.backtracks))
        lines.append("# Max depth: {}".format(self.max_depth))
        lines.append("# Time (s): {}".format(self.solve_time))
        return "\n".join(lines)
