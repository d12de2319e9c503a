"""Read-only access to saved ship assignments.

The ship assignment tool owns the roster; here we only load its saved document
to seed a tip split with one recipient per crew member.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .exceptions import RosterError
from .models import CrewChoice, Recipient, ShipAssignments

logger = logging.getLogger(__name__)


def load_ship_assignments(path: Path) -> ShipAssignments:
    """
    Load saved ship assignments from a JSON file.

    Args:
        path: Path to the saved ship assignments document

    Returns:
        Parsed ship assignments

    Raises:
        RosterError: If the file is missing or not a valid assignments document
    """
    if not path.exists():
        raise RosterError(f"No saved ship assignments found at {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RosterError(f"Failed to read ship assignments from {path}: {e}") from e

    try:
        assignments = ShipAssignments.model_validate(data)
    except ValidationError as e:
        raise RosterError(f"Invalid ship assignments in {path}: {e}") from e

    logger.info(f"Loaded {len(assignments.ships)} ships from {path}")
    return assignments


def count_crew(assignments: ShipAssignments) -> int:
    """Total crew across all ships."""
    return sum(len(ship.crew) for ship in assignments.ships)


def import_crew_for_tip(assignments: ShipAssignments) -> list[Recipient]:
    """
    Build a tip recipient list from the crew on every ship.

    Recipients are numbered in ship order. Crew names carry over; unnamed
    crew get the default "Recipient {id}" label.

    Raises:
        RosterError: If no ship has any crew
    """
    crew = [member for ship in assignments.ships for member in ship.crew]
    if not crew:
        raise RosterError(
            "No crew members found in ship assignments. "
            "Please add crew first or enter a number manually."
        )

    return [
        Recipient(id=i, name=member.name, choice=CrewChoice.KEEP)
        for i, member in enumerate(crew, start=1)
    ]
