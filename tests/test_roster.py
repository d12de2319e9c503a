"""Tests for roster import."""

import json

import pytest

from medrunner_tools.exceptions import RosterError
from medrunner_tools.models import CrewChoice, ShipAssignments
from medrunner_tools.roster import (
    count_crew,
    import_crew_for_tip,
    load_ship_assignments,
)


def make_ship(ship_id: int, names: list[str]) -> dict:
    """Create a saved ship entry with one crew member per name."""
    return {
        "id": ship_id,
        "type": "Medship",
        "ship": "RSI Apollo Medivac",
        "crew": [
            {"id": ship_id * 100 + i, "role": "SEC", "name": name}
            for i, name in enumerate(names)
        ],
    }


@pytest.fixture
def roster_file(tmp_path):
    """Write a saved ship assignments document."""
    path = tmp_path / "ship_assignments.json"
    path.write_text(
        json.dumps(
            {
                "ships": [make_ship(1, ["Ace", ""]), make_ship(2, ["Cricket"])],
                "shipIdCounter": 2,
                "savedAt": 1700000000000,
            }
        ),
        encoding="utf-8",
    )
    return path


class TestLoadShipAssignments:
    def test_load(self, roster_file):
        assignments = load_ship_assignments(roster_file)

        assert len(assignments.ships) == 2
        assert count_crew(assignments) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(RosterError, match="No saved ship assignments"):
            load_ship_assignments(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(RosterError, match="Failed to read"):
            load_ship_assignments(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps({"ships": "nope"}), encoding="utf-8")

        with pytest.raises(RosterError, match="Invalid ship assignments"):
            load_ship_assignments(path)


class TestImportCrewForTip:
    def test_one_recipient_per_crew_member(self, roster_file):
        recipients = import_crew_for_tip(load_ship_assignments(roster_file))

        assert [r.id for r in recipients] == [1, 2, 3]
        assert [r.name for r in recipients] == ["Ace", "Recipient 2", "Cricket"]
        assert all(r.choice == CrewChoice.KEEP for r in recipients)

    def test_no_crew(self):
        assignments = ShipAssignments.model_validate({"ships": [make_ship(1, [])]})

        with pytest.raises(RosterError, match="No crew members found"):
            import_crew_for_tip(assignments)
