"""
Group matching package.

Decides which configuration profile applies to a machine described by
key/value attributes. A group requires a set of attributes and points at a
profile; every group whose requirements are satisfied matches, and the most
specific match wins.

Modules of interest:
- models: Group entity, JSON parsing, validation and canonical rendering.
- matcher: Requirement matching predicate.
- ordering: Specificity order (requirement count, then requirement string).
- selector: Selection helpers and the in-memory GroupCatalog.
"""

from .models import Group, GroupDocument, parse_group, group_to_json
from .matcher import matches, matching_groups
from .ordering import SpecificityOrder, BY_SPECIFICITY, sort_by_specificity, sort_by_specificity_in_place
from .selector import GroupCatalog, select_group, select_most_specific

__all__ = [
    "Group",
    "GroupDocument",
    "parse_group",
    "group_to_json",
    "matches",
    "matching_groups",
    "SpecificityOrder",
    "BY_SPECIFICITY",
    "sort_by_specificity",
    "sort_by_specificity_in_place",
    "GroupCatalog",
    "select_group",
    "select_most_specific",
]
