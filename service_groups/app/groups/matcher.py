"""
Requirement matching for groups.
"""

from typing import Iterable, List, Mapping

from .models import Group


def matches(group: Group, attributes: Mapping[str, str]) -> bool:
    """Check a group's requirements against candidate attributes.

    Every required key must be present with an equal value. Extra
    attributes are ignored, and a group without requirements matches
    everything. Comparison is exact and case-sensitive.
    """
    for key, value in group.requirements.items():
        if key not in attributes or attributes[key] != value:
            return False
    return True


def matching_groups(groups: Iterable[Group], attributes: Mapping[str, str]) -> List[Group]:
    """Filter groups whose requirements are satisfied, preserving order."""
    return [group for group in groups if matches(group, attributes)]
