"""Medrunner Tools - Operations toolkit for Medrunner rescue teams."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .exceptions import (
    InvalidPoolAmountError,
    MedrunnerToolsError,
    NoParticipantsError,
)
from .models import (
    CrewChoice,
    LeadChoice,
    Recipient,
    TipSplitResult,
)
from .tips.fees import find_max_transfer_amount, get_transfer_cost
from .tips.splitter import calculate_tip_split, find_equal_take_home_amount

__all__ = [
    "Settings",
    "load_settings",
    "InvalidPoolAmountError",
    "MedrunnerToolsError",
    "NoParticipantsError",
    "CrewChoice",
    "LeadChoice",
    "Recipient",
    "TipSplitResult",
    "find_max_transfer_amount",
    "get_transfer_cost",
    "calculate_tip_split",
    "find_equal_take_home_amount",
]
