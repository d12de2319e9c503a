"""MCP server for Medrunner Tools: exposes the tip splitter as tools for Claude."""

import logging
from dataclasses import dataclass, field

from mcp.server.fastmcp import FastMCP

from .config import Settings, load_settings
from .exceptions import MedrunnerToolsError
from .models import CrewChoice, LeadChoice, Recipient
from .roster import import_crew_for_tip, load_ship_assignments
from .tips.fees import find_max_transfer_amount, get_transfer_cost, transfer_fee
from .tips.report import format_tip_report
from .tips.splitter import calculate_tip_split, generate_recipients, parse_pool

logger = logging.getLogger(__name__)

mcp_app = FastMCP("medrunner-tools")

# ---------------------------------------------------------------------------
# Session state: one MCP server process = one Claude conversation
# ---------------------------------------------------------------------------

WORKFLOW_INSTRUCTIONS = """\
You are helping a Medrunner team lead split a tip across their crew. Follow \
this workflow:

1. CREW: Ask how many crew members shared the job, or call import_roster to \
use the saved ship assignments.

2. CHOICES: Ask each crew member's choice: keep, decline, or logistics \
(donate to the logistics pool). Ask the lead for their own choice too.

3. SPLIT: Call split_tip with the tip amount, the crew choices in order, the \
lead's choice, and any names. Show the user the report it returns.

4. QUESTIONS: Use transfer_cost or max_transfer_amount to answer questions \
about individual transfers.

Everyone keeping their tip takes home the same amount. Each transfer costs a \
0.5% fee rounded up; the lead keeps their own share without a fee.\
"""


@dataclass
class SessionState:
    """Holds state between MCP tool calls within a single conversation."""

    settings: Settings | None = None
    recipients: list[Recipient] = field(default_factory=list)


_state = SessionState()


def _ensure_settings() -> Settings:
    """Lazily load settings (reads .env config)."""
    if _state.settings is None:
        _state.settings = load_settings()
    return _state.settings


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@mcp_app.tool()
def split_tip(
    pool: str,
    choices: list[str],
    lead_choice: str = "keep",
    names: list[str] | None = None,
) -> str:
    """Split a tip fairly, accounting for transfer fees.

    Args:
        pool: Total tip amount (fractions are truncated).
        choices: One choice per crew member, in order: keep, decline, or logistics.
            Pass an empty list to reuse the crew from import_roster.
        lead_choice: The lead's own choice: keep, decline, or logistics.
        names: Optional crew names, in the same order as choices.
    """
    try:
        settings = _ensure_settings()

        if choices:
            recipients = generate_recipients(len(choices))
        else:
            recipients = list(_state.recipients)

        names = names or []
        if len(names) > len(recipients):
            return (
                f"Error: Got {len(names)} names for {len(recipients)} crew members."
            )

        crew = []
        for i, recipient in enumerate(recipients):
            choice = CrewChoice.parse(choices[i]) if choices else recipient.choice
            name = names[i] if i < len(names) and names[i] else recipient.name
            crew.append(Recipient(id=recipient.id, name=name, choice=choice))

        result = calculate_tip_split(
            parse_pool(pool),
            crew,
            LeadChoice.parse(lead_choice),
            lead_label=settings.lead_label,
        )
        return format_tip_report(
            result, lead_label=settings.lead_label, currency=settings.currency_label
        )
    except (ValueError, MedrunnerToolsError) as e:
        return f"Error: {e}"
    except Exception as e:
        logger.exception("split_tip failed")
        return f"Failed to split tip: {e}"


@mcp_app.tool()
def transfer_cost(amount: int) -> str:
    """Show the fee and total cost of sending an amount to another player.

    Args:
        amount: Amount the recipient should receive.
    """
    return (
        f"Send {max(amount, 0):,} | fee {transfer_fee(amount):,} "
        f"| you pay {get_transfer_cost(amount):,}"
    )


@mcp_app.tool()
def max_transfer_amount(budget: int) -> str:
    """Find the largest amount that can be sent without spending more than budget.

    Args:
        budget: Most the sender is willing to spend, fee included.
    """
    amount = find_max_transfer_amount(budget)
    return f"Send {amount:,} | you pay {get_transfer_cost(amount):,} of {budget:,}"


@mcp_app.tool()
def import_roster() -> str:
    """Load the crew from the saved ship assignments for the next split_tip call."""
    try:
        settings = _ensure_settings()
        assignments = load_ship_assignments(settings.roster_path)
        _state.recipients = import_crew_for_tip(assignments)

        lines = [f"Imported {len(_state.recipients)} crew members:"]
        for recipient in _state.recipients:
            lines.append(f"[{recipient.id}] {recipient.name}")
        return "\n".join(lines)
    except MedrunnerToolsError as e:
        return f"Error: {e}"


# ---------------------------------------------------------------------------
# MCP Prompt
# ---------------------------------------------------------------------------


@mcp_app.prompt()
def tip_split_workflow() -> str:
    """Step-by-step instructions for splitting a tip."""
    return WORKFLOW_INSTRUCTIONS


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run_server():
    """Start the MCP server (stdio transport)."""
    mcp_app.run(transport="stdio")
