"""
Unit tests for requirement matching.
"""

import pytest

from service_groups.app.groups.models import Group
from service_groups.app.groups.matcher import matches, matching_groups


class TestMatches:
    """Test cases for matches."""

    @pytest.mark.parametrize("attributes,requirements,expected", [
        ({"a": "b"}, {"a": "b"}, True),
        ({"a": "b"}, {"a": "c"}, False),
        ({"uuid": "a", "mac": "b"}, {"uuid": "a"}, True),
        ({"uuid": "a"}, {"uuid": "a", "mac": "b"}, False),
        ({}, {"uuid": "a"}, False),
    ])
    def test_requirements_satisfied(self, attributes, requirements, expected):
        """Test requirements must be satisfied and attributes may add pairs."""
        group = Group(requirements=requirements)

        assert matches(group, attributes) is expected

    @pytest.mark.parametrize("attributes", [
        {},
        {"uuid": "a1b2c3d4"},
        {"mac": "52:da:00:89:d8:10", "os": "installed"},
    ])
    def test_empty_requirements_match_everything(self, attributes):
        assert matches(Group(), attributes) is True

    def test_case_sensitive(self):
        """Test no normalization is applied."""
        group = Group(requirements={"mac": "52:DA:00:89:D8:10"})

        assert matches(group, {"mac": "52:da:00:89:d8:10"}) is False
        assert matches(group, {"MAC": "52:DA:00:89:D8:10"}) is False

    def test_unrelated_keys_do_not_change_result(self):
        group = Group(requirements={"region": "a"})
        attributes = {"region": "a"}

        assert matches(group, attributes) is True
        assert matches(group, {**attributes, "zone": "z", "rack": "7"}) is True

    def test_empty_string_value(self):
        """Test an empty required value still needs the key present."""
        group = Group(requirements={"os": ""})

        assert matches(group, {"os": ""}) is True
        assert matches(group, {}) is False


class TestMatchingGroups:
    """Test cases for matching_groups."""

    def test_preserves_order(self):
        general = Group(id="general", profile="p")
        region = Group(id="region", profile="p", requirements={"region": "a"})
        other = Group(id="other", profile="p", requirements={"region": "b"})

        result = matching_groups([region, other, general], {"region": "a"})

        assert result == [region, general]
