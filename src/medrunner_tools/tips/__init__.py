"""Fee-aware tip splitting."""

from .fees import find_max_transfer_amount, get_transfer_cost, transfer_fee
from .splitter import (
    calculate_tip_split,
    find_equal_take_home_amount,
    generate_recipients,
    parse_pool,
)

__all__ = [
    "find_max_transfer_amount",
    "get_transfer_cost",
    "transfer_fee",
    "calculate_tip_split",
    "find_equal_take_home_amount",
    "generate_recipients",
    "parse_pool",
]
