"""Tests for the MCP tool functions."""

import json

import pytest

from medrunner_tools import mcp_server
from medrunner_tools.config import Settings


@pytest.fixture(autouse=True)
def fresh_state(tmp_path):
    """Give each test its own session state and settings."""
    settings = Settings(
        _env_file=None,
        roster_path=tmp_path / "ship_assignments.json",
        lead_label="You (Lead)",
        currency_label="aUEC",
    )
    mcp_server._state = mcp_server.SessionState(settings=settings)
    yield settings
    mcp_server._state = mcp_server.SessionState()


def test_split_tip():
    report = mcp_server.split_tip("1000", ["keep", "decline"], "keep", ["Ace"])

    assert "Ace: send 498 aUEC" in report
    assert "Declined Tips (redistributed): Recipient 2" in report


def test_split_tip_errors_are_returned():
    assert mcp_server.split_tip("0", ["keep"]).startswith("Error: ")
    assert mcp_server.split_tip("1000", ["maybe"]).startswith("Error: ")
    assert mcp_server.split_tip("1000", []).startswith("Error: ")
    assert mcp_server.split_tip("1000", ["keep"], names=["A", "B"]).startswith(
        "Error: "
    )


def test_import_roster_then_split(fresh_state):
    fresh_state.roster_path.write_text(
        json.dumps({"ships": [{"id": 1, "crew": [{"id": 7, "name": "Ace"}]}]}),
        encoding="utf-8",
    )

    imported = mcp_server.import_roster()
    report = mcp_server.split_tip("2010", [], "decline")

    assert "Imported 1 crew members" in imported
    assert "[1] Ace" in imported
    assert "Ace: send 2,000 aUEC (fee 10 aUEC" in report


def test_import_roster_missing_file():
    assert mcp_server.import_roster().startswith("Error: No saved ship assignments")


def test_transfer_tools():
    assert mcp_server.transfer_cost(1000) == "Send 1,000 | fee 5 | you pay 1,005"
    assert mcp_server.max_transfer_amount(1005) == "Send 1,000 | you pay 1,005 of 1,005"


def test_workflow_prompt():
    assert "split_tip" in mcp_server.tip_split_workflow()
