"""CLI commands for the tip splitter."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Settings, load_settings
from ..exceptions import MedrunnerToolsError
from ..models import CrewChoice, LeadChoice, Recipient, TipSplitResult
from ..roster import import_crew_for_tip, load_ship_assignments
from .fees import find_max_transfer_amount, get_transfer_cost, transfer_fee
from .report import format_amount, format_tip_report
from .splitter import (
    calculate_tip_split,
    generate_recipients,
    parse_pool,
    update_recipient_choice,
    update_recipient_name,
)
from .ui import prompt_lead_choice, prompt_recipients

app = typer.Typer(
    name="tips",
    help="Split tips fairly across the crew, accounting for transfer fees",
)

console = Console()


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _split_list(raw: str | None) -> list[str]:
    """Split a comma-separated option into stripped items."""
    if not raw:
        return []
    return [item.strip() for item in raw.split(",")]


def _build_recipients(
    settings: Settings,
    count: int | None,
    import_roster: bool,
    roster: Path | None,
    choices: list[str],
    names: list[str],
) -> list[Recipient]:
    """Create the recipient list from the roster or a count, then apply options."""
    if import_roster:
        assignments = load_ship_assignments(roster or settings.roster_path)
        recipients = import_crew_for_tip(assignments)
        console.print(
            f"[green]Imported {len(recipients)} crew from ship assignments[/green]"
        )
    else:
        recipients = generate_recipients(count or max(len(choices), len(names)))

    if len(choices) > len(recipients) or len(names) > len(recipients):
        raise typer.BadParameter(
            f"Got more choices/names than recipients ({len(recipients)})"
        )

    for recipient, raw_choice in zip(recipients, choices, strict=False):
        try:
            choice = CrewChoice.parse(raw_choice)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--choices") from e
        recipients = update_recipient_choice(recipients, recipient.id, choice)

    for recipient, name in zip(recipients, names, strict=False):
        if name:
            recipients = update_recipient_name(recipients, recipient.id, name)

    return recipients


def display_result(result: TipSplitResult, settings: Settings):
    """Display a tip split in table format."""
    currency = settings.currency_label
    lead_label = settings.lead_label

    def money(amount: int) -> str:
        return format_amount(amount, currency)

    console.print(f"\n[bold]Tip Split:[/bold] {money(result.total_pool)}")

    if result.everyone_declined:
        console.print(
            f"\n[yellow]Everyone declined. {lead_label} keeps the full tip.[/yellow]"
        )
    elif result.transfers:
        table = Table(title="Transfers", show_header=True, header_style="bold magenta")
        table.add_column("Recipient", style="cyan")
        table.add_column("Send", justify="right")
        table.add_column("Fee", justify="right", style="dim")
        table.add_column("You Pay", justify="right")
        table.add_column("They Receive", justify="right", style="green")

        for transfer in result.transfers:
            table.add_row(
                escape(transfer.recipient.name),
                money(transfer.transfer_amount),
                money(transfer.fee),
                money(transfer.gross_cost),
                money(transfer.received_amount),
            )

        console.print(table)
    else:
        console.print("\n[dim]No crew members are keeping their share.[/dim]")

    if result.logistics_transfer is not None:
        logistics = result.logistics_transfer
        shares = logistics.share_count
        share_text = "1 share" if shares == 1 else f"{shares} shares"
        console.print(
            f"\n[bold yellow]Logistics Pool ({share_text}):[/bold yellow] "
            f"send {money(logistics.transfer_amount)} "
            f"(fee {money(logistics.fee)}, you pay {money(logistics.gross_cost)})"
        )
        contributors = escape(", ".join(logistics.contributor_names))
        console.print(f"  [yellow]From: {contributors}[/yellow]")

    if result.declined_names:
        console.print(
            f"\n[dim]Declined Tips (redistributed): "
            f"{escape(', '.join(result.declined_names))}[/dim]"
        )

    # Summary
    console.print()
    console.print("[bold]Summary:[/bold]")
    console.print(f"  Total tip: {money(result.total_pool)}")
    console.print(f"  Party size: {result.total_party_size}")
    console.print(f"  Even share (before fees): {money(result.reference_base_share)}")
    console.print(f"  Take-home per keeper: {money(result.equal_take_home_amount)}")
    console.print(f"  Transfer fees: {money(result.total_fees_paid)}")
    console.print(f"  Total transferred: {money(result.total_gross_transferred)}")
    console.print(
        f"  [bold green]{lead_label} keeps: "
        f"{money(result.lead_final_kept)}[/bold green]"
    )

    # Verification
    if result.total_spent + result.dust == result.total_pool:
        console.print("  [green]✓ Totals match the tip pool[/green]")
    else:
        console.print(
            f"  [red]✗ Total mismatch: spent {result.total_spent} + dust "
            f"{result.dust}, expected {result.total_pool}[/red]"
        )


@app.command()
def split(
    pool: str = typer.Option(..., "--pool", "-p", help="Total tip amount"),
    recipients: int | None = typer.Option(
        None, "--recipients", "-n", help="Number of crew recipients (excludes you)"
    ),
    import_roster: bool = typer.Option(
        False, "--import-roster", help="Use the crew from saved ship assignments"
    ),
    roster: Path | None = typer.Option(
        None, "--roster", help="Ship assignments file (defaults to settings)"
    ),
    choices: str | None = typer.Option(
        None,
        "--choices",
        help="Comma-separated crew choices in order: keep, decline, logistics",
    ),
    names: str | None = typer.Option(
        None, "--names", help="Comma-separated crew names in order"
    ),
    lead: str = typer.Option(
        "keep", "--lead", "-l", help="Your choice: keep, decline or logistics"
    ),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Enter names and choices interactively"
    ),
    report: bool = typer.Option(
        False, "--report", help="Also print a plain-text report for copy/paste"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Calculate a fee-fair tip split.

    Everyone keeping their tip takes home the same amount after the 0.5%
    transfer fee. Logistics donations are pooled into one transfer, declined
    shares are redistributed, and any leftover goes to you.
    """
    setup_logging(verbose)

    try:
        settings = load_settings()

        try:
            lead_choice = LeadChoice.parse(lead)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--lead") from e

        crew = _build_recipients(
            settings,
            recipients,
            import_roster,
            roster,
            _split_list(choices),
            _split_list(names),
        )

        if interactive:
            crew = prompt_recipients(crew)
            lead_choice = prompt_lead_choice(lead_choice)

        result = calculate_tip_split(
            parse_pool(pool), crew, lead_choice, lead_label=settings.lead_label
        )

        display_result(result, settings)

        if report:
            console.print("\n[bold]Report:[/bold]\n")
            console.print(
                format_tip_report(
                    result,
                    lead_label=settings.lead_label,
                    currency=settings.currency_label,
                ),
                markup=False,
                highlight=False,
            )

    except typer.BadParameter:
        raise
    except MedrunnerToolsError as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        console.print(
            f"\n[bold red]Unexpected error:[/bold red] {escape(str(e))}"
        )
        if verbose:
            raise
        sys.exit(1)


@app.command()
def cost(
    amount: int = typer.Argument(..., help="Amount the recipient should receive"),
):
    """Show the fee and total cost of sending an amount."""
    console.print(f"  Send:     {amount:,}")
    console.print(f"  Fee:      {transfer_fee(amount):,}")
    console.print(f"  You pay:  [bold]{get_transfer_cost(amount):,}[/bold]")


@app.command("max-transfer")
def max_transfer(
    budget: int = typer.Argument(..., help="Most you are willing to spend"),
):
    """Show the largest amount you can send within a budget."""
    amount = find_max_transfer_amount(budget)
    console.print(f"  Budget:   {budget:,}")
    console.print(f"  Send:     [bold]{amount:,}[/bold]")
    console.print(f"  You pay:  {get_transfer_cost(amount):,}")
