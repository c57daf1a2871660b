from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from sortedcontainers import SortedSet

from .errors import InconsistentAssignmentError


class Assignment(Mapping):
    """
    Partial map from variable to bool.

    An Assignment is never changed after construction: extend() returns a
    new one, so each search branch owns its own snapshot and a failed branch
    leaves nothing behind for its sibling.
    """

    def __init__(self, values: Optional[Mapping[int, bool]] = None):
        self._values: Dict[int, bool] = dict(values) if values else {}

    def __getitem__(self, var: int) -> bool:
        return self._values[var]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return "Assignment({})".format(self.as_literals())

    def __eq__(self, other):
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __hash__(self):
        return hash(frozenset(self._values.items()))

    def conflicts_with(self, var: int, value: bool) -> bool:
        return var in self._values and self._values[var] != value

    def extend(self, var: int, value: bool) -> "Assignment":
        if self.conflicts_with(var, value):
            raise InconsistentAssignmentError(variable=var)
        values = dict(self._values)
        values[var] = value
        return Assignment(values)

    def extend_many(self, pairs: Iterable[Tuple[int, bool]]) -> "Assignment":
        values = dict(self._values)
        for var, value in pairs:
            if var in values and values[var] != value:
                raise InconsistentAssignmentError(variable=var)
            values[var] = value
        return Assignment(values)

    def unassigned(self, num_vars: int) -> SortedSet:
        """Variables of [1, num_vars] without a value, in ascending order."""
        return SortedSet(var for var in range(1, num_vars + 1) if var not in self._values)

    def values_list(self, num_vars: int) -> List[bool]:
        # Unassigned variables are reported as False
        return [self._values.get(var, False) for var in range(1, num_vars + 1)]

    def as_literals(self) -> List[int]:
        return [var if value else -var for var, value in sorted(self._values.items())]
