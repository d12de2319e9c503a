"""Plain-text tip split summary for pasting into chat."""

from ..models import TipSplitResult
from .splitter import DEFAULT_LEAD_LABEL


def format_amount(amount: int, currency: str = "aUEC") -> str:
    """Format an integer amount with thousands separators: 12,345 aUEC."""
    return f"{amount:,} {currency}"


def format_tip_report(
    result: TipSplitResult,
    lead_label: str = DEFAULT_LEAD_LABEL,
    currency: str = "aUEC",
) -> str:
    """
    Render a tip split as copyable plain text.

    Args:
        result: The computed tip split
        lead_label: How the lead is named in the summary
        currency: Currency label appended to amounts

    Returns:
        Multi-line report text (no trailing newline)
    """

    def money(amount: int) -> str:
        return format_amount(amount, currency)

    lines = [f"Tip Split: {money(result.total_pool)}", ""]

    if result.everyone_declined:
        lines.append(f"Everyone declined. {lead_label} keeps the full tip.")
    elif result.transfers:
        lines.append("Transfers:")
        for transfer in result.transfers:
            lines.append(
                f"  {transfer.recipient.name}: send {money(transfer.transfer_amount)}"
                f" (fee {money(transfer.fee)}, receives"
                f" {money(transfer.received_amount)})"
            )
    else:
        lines.append("No crew members are keeping their share.")

    if result.logistics_transfer is not None:
        logistics = result.logistics_transfer
        shares = logistics.share_count
        share_text = "1 share" if shares == 1 else f"{shares} shares"
        lines.append("")
        lines.append(
            f"Logistics Pool ({share_text}): send {money(logistics.transfer_amount)}"
            f" (fee {money(logistics.fee)})"
        )
        lines.append(f"  From: {', '.join(logistics.contributor_names)}")

    if result.declined_names:
        lines.append("")
        lines.append(
            f"Declined Tips (redistributed): {', '.join(result.declined_names)}"
        )

    lines.extend(
        [
            "",
            "Summary:",
            f"  Total tip: {money(result.total_pool)}",
            f"  Party size: {result.total_party_size}",
            f"  Even share (before fees): {money(result.reference_base_share)}",
            f"  Take-home per keeper: {money(result.equal_take_home_amount)}",
            f"  Transfer fees: {money(result.total_fees_paid)}",
            f"  Total transferred: {money(result.total_gross_transferred)}",
            f"  {lead_label} keeps: {money(result.lead_final_kept)}",
        ]
    )

    return "\n".join(lines)
