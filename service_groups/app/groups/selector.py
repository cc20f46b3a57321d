"""
Group selection for the group matching engine.
"""

from typing import Dict, Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from shared.logging import get_logger
from shared.errors import GroupNotFoundError
from .models import Group, parse_group
from .matcher import matches, matching_groups
from .ordering import sort_by_specificity


def select_most_specific(sorted_groups: Sequence[Group], attributes: Mapping[str, str]) -> Optional[Group]:
    """Pick the most specific matching group from a specificity-ordered sequence.

    Scans from the most specific end; returns None when nothing matches.
    """
    for group in reversed(sorted_groups):
        if matches(group, attributes):
            return group
    return None


def select_group(catalog: Iterable[Group], attributes: Mapping[str, str]) -> Optional[Group]:
    """Select the group that applies to the given attributes.

    The catalog is ordered by specificity (the input is not mutated),
    filtered by requirement matching, and the last match wins. Returns
    None when no group applies.
    """
    return select_most_specific(sort_by_specificity(catalog), attributes)


class GroupCatalog:
    """In-memory catalog of validated groups."""

    def __init__(self):
        self.logger = get_logger("groups.catalog")
        self.groups: Dict[str, Group] = {}
        self._sorted: Optional[Tuple[Group, ...]] = None

    def add_group(self, group: Group) -> None:
        """Validate and add a group, replacing any group with the same id."""
        group.assert_valid()
        replaced = group.id in self.groups
        self.groups[group.id] = group
        self._invalidate_cache()
        self.logger.info(
            "Group added",
            group_id=group.id,
            name=group.name,
            profile=group.profile,
            replaced=replaced
        )

    def load(self, documents: Iterable[Union[bytes, str]]) -> List[Group]:
        """Parse, validate and add each JSON document."""
        loaded = []
        for document in documents:
            group = parse_group(document)
            self.add_group(group)
            loaded.append(group)
        return loaded

    def remove_group(self, group_id: str) -> bool:
        """Remove a group from the catalog."""
        if group_id not in self.groups:
            return False
        group = self.groups.pop(group_id)
        self._invalidate_cache()
        self.logger.info("Group removed", group_id=group_id, name=group.name)
        return True

    def get_group(self, group_id: str) -> Group:
        """Get a group by ID."""
        try:
            return self.groups[group_id]
        except KeyError:
            raise GroupNotFoundError(group_id) from None

    def list_groups(self) -> Tuple[Group, ...]:
        """All groups, most general first."""
        if self._sorted is None:
            self._sorted = tuple(sort_by_specificity(self.groups.values()))
        return self._sorted

    def matching(self, attributes: Mapping[str, str]) -> List[Group]:
        """Matching groups, most general first."""
        return matching_groups(self.list_groups(), attributes)

    def select(self, attributes: Mapping[str, str]) -> Optional[Group]:
        """Select the most specific group for the attributes."""
        group = select_most_specific(self.list_groups(), attributes)
        if group is None:
            self.logger.debug("No applicable group", attributes=dict(attributes))
        else:
            self.logger.debug(
                "Group selected",
                group_id=group.id,
                profile=group.profile,
                requirements=group.requirement_string()
            )
        return group

    def clear(self):
        """Clear all groups from the catalog."""
        self.groups.clear()
        self._invalidate_cache()
        self.logger.info("All groups cleared")

    def stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        return {
            "total_groups": len(self.groups),
            "profiles": sorted(set(g.profile for g in self.groups.values())),
        }

    def __len__(self) -> int:
        return len(self.groups)

    def _invalidate_cache(self):
        self._sorted = None
