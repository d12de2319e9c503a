"""In-game transfer fee arithmetic.

Every player-to-player transfer costs the sender a 0.5% fee, rounded UP to
the next whole aUEC. All amounts here are integers; the fee is computed with
integer arithmetic so there is no floating point drift.
"""

import logging

logger = logging.getLogger(__name__)

# 0.5% expressed in basis points
TRANSFER_FEE_BASIS_POINTS = 50
_BASIS = 10_000


def get_transfer_cost(amount_sent: int | float) -> int:
    """
    Calculate the sender's total cost (amount + fee) for a transfer.

    Fractional amounts are truncated toward zero first.

    Example:
        1000 aUEC: fee = ceil(1000 * 0.005) = 5, total cost = 1005
        999 aUEC:  fee = ceil(4.995) = 5, total cost = 1004

    Args:
        amount_sent: Amount the recipient should receive

    Returns:
        Total cost including the transfer fee (0 for non-positive amounts)
    """
    amount = int(amount_sent)
    if amount <= 0:
        return 0
    fee = -(-amount * TRANSFER_FEE_BASIS_POINTS // _BASIS)
    return amount + fee


def transfer_fee(amount_sent: int | float) -> int:
    """Fee charged on a transfer of ``amount_sent``."""
    amount = int(amount_sent)
    if amount <= 0:
        return 0
    return get_transfer_cost(amount) - amount


def find_max_transfer_amount(budget: int | float) -> int:
    """
    Find the largest amount that can be sent without the cost exceeding budget.

    Solves ``max x such that x + ceil(x * 0.005) <= budget``. The rounded-up
    fee has no closed-form inverse, so we start from ``floor(budget / 1.005)``
    and correct by stepping one unit at a time.

    Args:
        budget: Maximum total the sender is willing to spend

    Returns:
        Maximum sendable amount (0 for non-positive budgets)
    """
    budget = int(budget)
    if budget <= 0:
        return 0

    # floor(budget / 1.005) without going through a float
    guess = budget * _BASIS // (_BASIS + TRANSFER_FEE_BASIS_POINTS)
    steps = 0

    if get_transfer_cost(guess) > budget:
        while get_transfer_cost(guess) > budget:
            guess -= 1
            steps += 1
    else:
        while get_transfer_cost(guess + 1) <= budget:
            guess += 1
            steps += 1

    if steps:
        logger.debug(
            f"Max transfer for budget {budget}: {guess} "
            f"({steps} correction step{'s' if steps != 1 else ''})"
        )
    return guess
