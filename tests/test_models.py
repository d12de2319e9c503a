"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from medrunner_tools.models import (
    CrewChoice,
    LeadChoice,
    LogisticsTransfer,
    Recipient,
    ShipAssignments,
)


class TestChoices:
    """Crew and lead choices are separate types."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("keep", CrewChoice.KEEP),
            ("K", CrewChoice.KEEP),
            (" decline ", CrewChoice.DECLINE),
            ("d", CrewChoice.DECLINE),
            ("logistics", CrewChoice.LOGISTICS),
            ("donate", CrewChoice.LOGISTICS),
            ("l", CrewChoice.LOGISTICS),
        ],
    )
    def test_parse_crew_choice(self, raw, expected):
        assert CrewChoice.parse(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("lead-keep", LeadChoice.KEEP),
            ("keep", LeadChoice.KEEP),
            ("lead-decline", LeadChoice.DECLINE),
            ("decline", LeadChoice.DECLINE),
            ("lead-logistics", LeadChoice.LOGISTICS),
            ("donate", LeadChoice.LOGISTICS),
        ],
    )
    def test_parse_lead_choice(self, raw, expected):
        assert LeadChoice.parse(raw) == expected

    def test_invalid_choices(self):
        with pytest.raises(ValueError, match="Unknown crew choice"):
            CrewChoice.parse("maybe")
        with pytest.raises(ValueError, match="Unknown lead choice"):
            LeadChoice.parse("lead-maybe")

    def test_lead_choice_values(self):
        assert {c.value for c in LeadChoice} == {
            "lead-keep",
            "lead-decline",
            "lead-logistics",
        }

    def test_crew_cannot_hold_lead_choice(self):
        with pytest.raises(ValidationError):
            Recipient(id=1, name="Ace", choice="lead-keep")


class TestRecipient:
    """Recipient naming and immutability."""

    def test_blank_name_defaults(self):
        assert Recipient(id=4, name="").name == "Recipient 4"
        assert Recipient(id=5, name="   ").name == "Recipient 5"
        assert Recipient(id=6, name=None).name == "Recipient 6"

    def test_default_choice_is_keep(self):
        assert Recipient(id=1, name="Ace").choice == CrewChoice.KEEP

    def test_frozen(self):
        recipient = Recipient(id=1, name="Ace")
        with pytest.raises(ValidationError):
            recipient.name = "Bones"


class TestLogisticsTransfer:
    def test_share_count(self):
        transfer = LogisticsTransfer(
            transfer_amount=597,
            received_amount=597,
            fee=3,
            gross_cost=600,
            contributor_names=["You (Lead)", "Recipient 2"],
        )
        assert transfer.share_count == 2


class TestShipAssignments:
    """The saved roster document uses camelCase keys."""

    def test_parses_saved_document(self):
        data = {
            "ships": [
                {
                    "id": 1,
                    "type": "Gunship",
                    "ship": "Aegis Sabre",
                    "crew": [
                        {
                            "id": 1700000000000,
                            "role": "PIL",
                            "position": 1,
                            "name": "Ace",
                            "discordId": "12345",
                            "comment": "",
                        }
                    ],
                }
            ],
            "shipIdCounter": 1,
            "savedAt": 1700000000123,
        }

        assignments = ShipAssignments.model_validate(data)

        assert assignments.ship_id_counter == 1
        assert assignments.saved_at == 1700000000123
        member = assignments.ships[0].crew[0]
        assert member.discord_id == "12345"
        assert member.position == 1

    def test_empty_document(self):
        assignments = ShipAssignments.model_validate({})
        assert assignments.ships == []
