"""Pydantic domain models for Medrunner Tools."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ============================================================================
# Tip Choices
# ============================================================================


class CrewChoice(StrEnum):
    """What a crew recipient wants done with their share."""

    KEEP = "keep"
    DECLINE = "decline"
    LOGISTICS = "logistics"  # donate to the shared logistics pool

    @classmethod
    def parse(cls, value: str) -> "CrewChoice":
        """Parse operator input, accepting short aliases like "k" or "donate"."""
        key = value.strip().lower()
        if key in _CREW_ALIASES:
            return _CREW_ALIASES[key]
        raise ValueError(
            f"Unknown crew choice {value!r}. Use one of: keep, decline, logistics"
        )


class LeadChoice(StrEnum):
    """What the lead wants done with their own share."""

    KEEP = "lead-keep"
    DECLINE = "lead-decline"
    LOGISTICS = "lead-logistics"

    @classmethod
    def parse(cls, value: str) -> "LeadChoice":
        """Parse operator input; the "lead-" prefix is optional."""
        key = value.strip().lower().removeprefix("lead-")
        if key in _CREW_ALIASES:
            return _LEAD_BY_CREW[_CREW_ALIASES[key]]
        raise ValueError(
            f"Unknown lead choice {value!r}. Use one of: keep, decline, logistics"
        )


_CREW_ALIASES = {
    "keep": CrewChoice.KEEP,
    "k": CrewChoice.KEEP,
    "decline": CrewChoice.DECLINE,
    "d": CrewChoice.DECLINE,
    "logistics": CrewChoice.LOGISTICS,
    "donate": CrewChoice.LOGISTICS,
    "l": CrewChoice.LOGISTICS,
}

_LEAD_BY_CREW = {
    CrewChoice.KEEP: LeadChoice.KEEP,
    CrewChoice.DECLINE: LeadChoice.DECLINE,
    CrewChoice.LOGISTICS: LeadChoice.LOGISTICS,
}


# ============================================================================
# Tip Split Models
# ============================================================================


class Recipient(BaseModel):
    """A crew member receiving part of the tip."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    choice: CrewChoice = CrewChoice.KEEP

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        """Blank names fall back to "Recipient {id}"."""
        if isinstance(data, dict) and not (data.get("name") or "").strip():
            data = {**data, "name": f"Recipient {data.get('id')}"}
        return data


class CrewTransfer(BaseModel):
    """A fee-charged transfer to a crew member keeping their share."""

    model_config = ConfigDict(frozen=True)

    recipient: Recipient
    transfer_amount: int  # what the recipient takes home
    received_amount: int
    fee: int
    gross_cost: int  # transfer_amount + fee, paid by the lead


class LogisticsTransfer(BaseModel):
    """The single pooled transfer for everyone donating to logistics."""

    model_config = ConfigDict(frozen=True)

    transfer_amount: int
    received_amount: int
    fee: int
    gross_cost: int
    contributor_names: list[str] = Field(default_factory=list)

    @property
    def share_count(self) -> int:
        return len(self.contributor_names)


class TipSplitResult(BaseModel):
    """A complete distribution plan for one tip.

    Every keeper (crew and lead) takes home ``equal_take_home_amount``. Crew
    transfers carry a fee; the lead keeps their share without one. Whatever
    integer remainder is left after all transfers (the dust) goes to the lead,
    so ``lead_final_kept = lead_share + dust``.
    """

    model_config = ConfigDict(frozen=True)

    total_pool: int
    total_party_size: int
    lead_choice: LeadChoice
    reference_base_share: int  # fee-naive pool // party size, display only
    equal_take_home_amount: int
    transfers: list[CrewTransfer] = Field(default_factory=list)
    logistics_transfer: LogisticsTransfer | None = None
    total_fees_paid: int = 0
    total_gross_transferred: int = 0  # crew + logistics, excludes the lead
    lead_share: int = 0
    dust: int = 0
    lead_final_kept: int = 0
    declined_names: list[str] = Field(default_factory=list)
    everyone_declined: bool = False

    @property
    def total_spent(self) -> int:
        """Gross transfers plus the lead's own share (everything except dust)."""
        return self.total_gross_transferred + self.lead_share


# ============================================================================
# Roster Models
# ============================================================================


class CrewMember(BaseModel):
    """A crew slot on a ship, as saved by the ship assignment tool."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    role: str = "PIL"
    position: int | None = None
    name: str = ""
    discord_id: str = Field(default="", alias="discordId")
    comment: str = ""


class Ship(BaseModel):
    """A ship with its assigned crew."""

    id: int
    type: str = ""  # Gunship, Medship, CAP
    ship: str = ""
    crew: list[CrewMember] = Field(default_factory=list)


class ShipAssignments(BaseModel):
    """The saved ship assignment document."""

    model_config = ConfigDict(populate_by_name=True)

    ships: list[Ship] = Field(default_factory=list)
    ship_id_counter: int = Field(default=0, alias="shipIdCounter")
    saved_at: int | None = Field(default=None, alias="savedAt")  # epoch millis
