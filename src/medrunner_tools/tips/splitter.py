"""Fee-aware tip splitting.

Distributes a tip pool so that everyone who keeps their share takes home the
same amount after transfer fees:

- Crew keepers each get their own fee-charged transfer.
- Everyone donating to logistics (crew and lead) is pooled into ONE transfer,
  so only one fee is paid for the whole pool.
- The lead keeps their share without a transfer, so no fee.
- Declined shares are redistributed among everyone else.
- The integer remainder (dust) goes to the lead.
"""

import logging
from decimal import Decimal, InvalidOperation

from ..exceptions import InvalidPoolAmountError, NoParticipantsError
from ..models import (
    CrewChoice,
    CrewTransfer,
    LeadChoice,
    LogisticsTransfer,
    Recipient,
    TipSplitResult,
)
from .fees import find_max_transfer_amount, get_transfer_cost

logger = logging.getLogger(__name__)

DEFAULT_LEAD_LABEL = "You (Lead)"


# ============================================================================
# Recipient list helpers
# ============================================================================


def generate_recipients(count: int) -> list[Recipient]:
    """Create ``count`` default recipients, all keeping their tip."""
    if not count or count < 1:
        return []
    return [
        Recipient(id=i, name="", choice=CrewChoice.KEEP) for i in range(1, count + 1)
    ]


def update_recipient_name(
    recipients: list[Recipient], recipient_id: int, name: str
) -> list[Recipient]:
    """Return a copy of ``recipients`` with one recipient renamed."""
    return [
        Recipient(id=r.id, name=name, choice=r.choice) if r.id == recipient_id else r
        for r in recipients
    ]


def update_recipient_choice(
    recipients: list[Recipient], recipient_id: int, choice: CrewChoice
) -> list[Recipient]:
    """Return a copy of ``recipients`` with one recipient's choice changed."""
    return [
        r.model_copy(update={"choice": CrewChoice(choice)})
        if r.id == recipient_id
        else r
        for r in recipients
    ]


def parse_pool(raw: str | int | float | None) -> int:
    """
    Parse a tip amount entered by the operator.

    Fractions are truncated. Anything unparsable, negative or missing becomes
    0, which calculate_tip_split rejects.
    """
    if raw is None:
        return 0
    try:
        value = Decimal(str(raw).strip().replace(",", ""))
    except InvalidOperation:
        return 0
    if not value.is_finite():
        return 0
    return max(int(value), 0)


# ============================================================================
# Core algorithm
# ============================================================================


def total_cost_for_amount(
    amount: int,
    num_keeper_transfers: int,
    num_donator_shares: int,
    lead_is_keeping: bool,
) -> int:
    """
    Total spent from the pool if every active participant takes home ``amount``.

    Args:
        amount: Equal take-home amount being tested
        num_keeper_transfers: Crew (not lead) keeping their tip
        num_donator_shares: Participants (crew and lead) donating to logistics
        lead_is_keeping: Whether the lead keeps their share (fee-free)

    Returns:
        Sum of all keeper transfer costs, the pooled logistics transfer cost,
        and the lead's own share
    """
    total = get_transfer_cost(amount) * num_keeper_transfers

    if num_donator_shares > 0:
        # Logistics is entitled to amount * donators; send the most that fits
        logistics_amount = find_max_transfer_amount(amount * num_donator_shares)
        total += get_transfer_cost(logistics_amount)

    if lead_is_keeping:
        total += amount

    return total


def find_equal_take_home_amount(
    pool: int,
    total_active_shares: int,
    num_keeper_transfers: int,
    num_donator_shares: int,
    lead_is_keeping: bool,
) -> int:
    """
    Find the maximum equal take-home amount every active participant can get.

    The fee-naive split ``pool // total_active_shares`` is an upper bound.
    The answer is the largest amount at or below it whose total cost still
    fits in the pool. Total cost never decreases as the amount grows, so
    bisecting the range finds the same value a downward scan would.

    Args:
        pool: Total aUEC available to distribute
        total_active_shares: Participants who aren't declining (incl. lead)
        num_keeper_transfers: Crew keeping their tip (excludes lead)
        num_donator_shares: Participants donating to logistics (incl. lead)
        lead_is_keeping: Whether the lead keeps their share

    Returns:
        The equal take-home amount, or 0 if fees eat the whole pool
    """
    if total_active_shares <= 0 or pool <= 0:
        return 0

    def fits(amount: int) -> bool:
        cost = total_cost_for_amount(
            amount, num_keeper_transfers, num_donator_shares, lead_is_keeping
        )
        return cost <= pool

    low, high = 0, pool // total_active_shares
    while low < high:
        mid = (low + high + 1) // 2
        if fits(mid):
            low = mid
        else:
            high = mid - 1

    return low


# ============================================================================
# Orchestration
# ============================================================================


def calculate_tip_split(
    pool: int | float,
    recipients: list[Recipient],
    lead_choice: LeadChoice,
    lead_label: str = DEFAULT_LEAD_LABEL,
) -> TipSplitResult:
    """
    Calculate a complete tip distribution plan.

    Steps:
    1. Validate the pool and recipient list
    2. Partition crew into keeping, donating and declining
    3. Count active shares (everyone not declining, lead included)
    4. Find the equal take-home amount
    5. Build the crew transfers and the pooled logistics transfer
    6. Credit the dust to the lead

    Args:
        pool: Total tip amount (fractions are truncated)
        recipients: Crew recipients with their choices, in display order
        lead_choice: The lead's own choice
        lead_label: Name used for the lead in contributor/declined lists

    Returns:
        The distribution plan

    Raises:
        InvalidPoolAmountError: If the pool is not positive
        NoParticipantsError: If there are no recipients
    """
    total_tip = int(pool)
    if total_tip <= 0:
        raise InvalidPoolAmountError(total_tip)
    if not recipients:
        raise NoParticipantsError()

    lead_choice = LeadChoice(lead_choice)
    total_party_size = len(recipients) + 1  # lead always counts

    keeping = [r for r in recipients if r.choice == CrewChoice.KEEP]
    donating = [r for r in recipients if r.choice == CrewChoice.LOGISTICS]
    declining = [r for r in recipients if r.choice == CrewChoice.DECLINE]

    lead_is_keeping = lead_choice == LeadChoice.KEEP
    lead_is_donating = lead_choice == LeadChoice.LOGISTICS
    lead_is_declining = lead_choice == LeadChoice.DECLINE

    declined_names = [r.name for r in declining]
    if lead_is_declining:
        declined_names.insert(0, lead_label)

    num_decliners = len(declining) + (1 if lead_is_declining else 0)
    total_active_shares = total_party_size - num_decliners

    if total_active_shares == 0:
        logger.info(f"Everyone declined; lead keeps the full {total_tip}")
        return TipSplitResult(
            total_pool=total_tip,
            total_party_size=total_party_size,
            lead_choice=lead_choice,
            reference_base_share=0,
            equal_take_home_amount=0,
            dust=total_tip,
            lead_final_kept=total_tip,
            declined_names=declined_names,
            everyone_declined=True,
        )

    reference_base_share = total_tip // total_party_size
    num_active_donators = len(donating) + (1 if lead_is_donating else 0)

    amount = find_equal_take_home_amount(
        total_tip,
        total_active_shares,
        len(keeping),
        num_active_donators,
        lead_is_keeping,
    )

    # Crew transfers, one fee each
    transfers = []
    for recipient in keeping:
        gross_cost = get_transfer_cost(amount)
        transfers.append(
            CrewTransfer(
                recipient=recipient,
                transfer_amount=amount,
                received_amount=amount,
                fee=gross_cost - amount,
                gross_cost=gross_cost,
            )
        )

    # One pooled transfer for all logistics donations
    logistics_transfer = None
    if num_active_donators > 0:
        entitlement = amount * num_active_donators
        logistics_amount = find_max_transfer_amount(entitlement)
        if logistics_amount > 0:
            logistics_cost = get_transfer_cost(logistics_amount)
            contributors = [r.name for r in donating]
            if lead_is_donating:
                contributors.insert(0, lead_label)
            logistics_transfer = LogisticsTransfer(
                transfer_amount=logistics_amount,
                received_amount=logistics_amount,
                fee=logistics_cost - logistics_amount,
                gross_cost=logistics_cost,
                contributor_names=contributors,
            )

    total_gross = sum(t.gross_cost for t in transfers)
    total_fees = sum(t.fee for t in transfers)
    if logistics_transfer is not None:
        total_gross += logistics_transfer.gross_cost
        total_fees += logistics_transfer.fee

    lead_share = amount if lead_is_keeping else 0
    dust = total_tip - (total_gross + lead_share)
    assert dust >= 0, "Transfers exceed the tip pool"

    logger.info(
        f"Tip split: {total_tip} across {total_active_shares} active shares, "
        f"take-home {amount}, fees {total_fees}, dust {dust}"
    )

    return TipSplitResult(
        total_pool=total_tip,
        total_party_size=total_party_size,
        lead_choice=lead_choice,
        reference_base_share=reference_base_share,
        equal_take_home_amount=amount,
        transfers=transfers,
        logistics_transfer=logistics_transfer,
        total_fees_paid=total_fees,
        total_gross_transferred=total_gross,
        lead_share=lead_share,
        dust=dust,
        lead_final_kept=lead_share + dust,
        declined_names=declined_names,
    )
