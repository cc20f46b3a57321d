"""
Integration tests for the group selection flow: load, validate, order, select.
"""

import json

import pytest

from service_groups.app.groups import (
    GroupCatalog, matching_groups, parse_group, select_group, sort_by_specificity
)
from shared.logging import run_id_var
from scripts.check_groups import main as check_groups


G1 = {"id": "g1", "name": "uuid group", "profile": "p1", "requirements": {"uuid": "a1b2c3d4"}}
G2 = {"id": "g2", "name": "default group", "profile": "p2", "requirements": {}}
REQUEST = {"uuid": "a1b2c3d4", "mac": "52:da:00:89:d8:10"}


class TestSelectionFlow:
    """End-to-end selection over parsed group documents."""

    @pytest.fixture
    def groups(self):
        groups = [parse_group(json.dumps(doc)) for doc in (G1, G2)]
        for group in groups:
            group.assert_valid()
        return groups

    def test_end_to_end(self, groups):
        g1, g2 = groups

        ordered = sort_by_specificity(groups)
        matched = matching_groups(ordered, REQUEST)
        selected = select_group(groups, REQUEST)

        assert ordered == [g2, g1]
        assert matched == [g2, g1]
        assert selected == g1
        assert selected.profile == "p1"

    def test_catalog_flow(self):
        catalog = GroupCatalog()
        catalog.load([json.dumps(G1), json.dumps(G2)])

        assert catalog.select(REQUEST).profile == "p1"
        assert catalog.select({"mac": "52:da:00:89:d8:10"}).profile == "p2"


class TestCheckGroupsScript:
    """Tests for scripts/check_groups.py."""

    @pytest.fixture
    def group_files(self, tmp_path):
        paths = []
        for doc in (G1, G2):
            path = tmp_path / f"{doc['id']}.json"
            path.write_text(json.dumps(doc))
            paths.append(str(path))
        return paths

    def test_valid_catalog_with_selection(self, group_files, capsys):
        code = check_groups(group_files + ["--log-level", "warning", "--select", "uuid=a1b2c3d4", "mac=52:da:00:89:d8:10"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Selected group 'g1' -> profile 'p1'" in out
        assert out.index("- g2: []") < out.index("- g1: [uuid=a1b2c3d4]")

    def test_invalid_group_file(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text('{"id": "g3"}')

        code = check_groups([str(path), "--log-level", "warning"])

        out = capsys.readouterr().out
        assert code == 1
        assert "VALIDATION_ERROR" in out

    def test_no_applicable_group(self, tmp_path, capsys):
        path = tmp_path / "g1.json"
        path.write_text(json.dumps(G1))

        code = check_groups([str(path), "--log-level", "warning", "--select", "uuid=other"])

        assert code == 1
        assert "No applicable group" in capsys.readouterr().out

    def test_run_id_reported_and_cleared(self, group_files, capsys):
        code = check_groups(group_files + ["--log-level", "warning", "--run-id", "run-42"])

        assert code == 0
        assert "run run-42" in capsys.readouterr().out
        assert run_id_var.get() is None
