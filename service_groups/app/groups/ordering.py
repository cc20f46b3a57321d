"""
Specificity ordering for groups.

Groups are ordered from most general to most specific:

1. fewer requirements first
2. equal counts are ordered by canonical requirement string

The last group of a sorted sequence is therefore the most specific one.
"""

from typing import Iterable, List, MutableSequence, Tuple

from .models import Group


class SpecificityOrder:
    """Total order over groups by requirement count, then requirement string."""

    def key(self, group: Group) -> Tuple[int, str]:
        """Sort key usable with sorted(), list.sort() or heapq."""
        return (len(group.requirements), group.requirement_string())

    def compare(self, a: Group, b: Group) -> int:
        """Return -1, 0 or 1 as a is more general than, equal to, or more specific than b."""
        key_a, key_b = self.key(a), self.key(b)
        if key_a < key_b:
            return -1
        if key_a > key_b:
            return 1
        return 0

    def less(self, a: Group, b: Group) -> bool:
        return self.compare(a, b) < 0


BY_SPECIFICITY = SpecificityOrder()


def sort_by_specificity(groups: Iterable[Group]) -> List[Group]:
    """Return a new list of groups, most general first.

    The sort is stable: groups that compare equal keep their input order.
    """
    return sorted(groups, key=BY_SPECIFICITY.key)


def sort_by_specificity_in_place(groups: MutableSequence[Group]) -> None:
    """Sort a mutable sequence of groups in place, most general first."""
    groups[:] = sort_by_specificity(groups)
