"""
Helper utilities for the roster manager.

JSON file handling and conversion between roster documents and Roster objects.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from roster import InvalidArgument, Roster

logger = logging.getLogger(__name__)

def ensure_directory(directory):
    """
    Ensure a directory exists, create it if it doesn't.

    Args:
        directory: Directory path as string or Path object
    """
    path = Path(directory)
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created directory: {path}")

def save_json(data, filepath):
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file

    Returns:
        bool: True if saved successfully, False otherwise
    """
    try:
        ensure_directory(Path(filepath).parent)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved data to {filepath}")
        return True
    except Exception as e:
        logger.error(f"Error saving data to {filepath}: {e}")
        return False

def load_json(filepath):
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Data from the JSON file or None if error
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        logger.info(f"Loaded data from {filepath}")
        return data
    except Exception as e:
        logger.error(f"Error loading data from {filepath}: {e}")
        return None

def rosters_from_document(document: Any) -> List[Roster]:
    """
    Build rosters from a roster document.

    Two shapes are accepted:
        {"first turn": ["one", "two"], ...}
        {"rosters": [{"name": "first turn", "elements": ["one", "two"]}, ...]}

    Elements are pushed in list order, so the last listed element is the top.

    Args:
        document: Parsed JSON document

    Returns:
        List[Roster]: Rosters in document order

    Raises:
        InvalidArgument: If the document does not have one of the shapes above,
            or a name or element is invalid
    """
    if not isinstance(document, dict):
        raise InvalidArgument("Roster document must be a JSON object")

    if isinstance(document.get("rosters"), list):
        entries = []
        for entry in document["rosters"]:
            if not isinstance(entry, dict):
                raise InvalidArgument(f"Roster entry must be an object, got {entry!r}")
            entries.append((entry.get("name"), entry.get("elements") or []))
    else:
        entries = list(document.items())

    rosters = []
    for name, elements in entries:
        if not isinstance(elements, list):
            raise InvalidArgument(f"Elements of roster {name!r} must be a list")
        roster = Roster(name)
        for element in elements:
            roster.push(element)
        rosters.append(roster)

    return rosters

def rosters_to_document(rosters: Iterable[Roster]) -> Dict[str, List[str]]:
    """Convert rosters to the name-to-elements document form."""
    return {roster.name: list(roster.elements()) for roster in rosters}
