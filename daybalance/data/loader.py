"""JSON import of day entries and export of insights.

The web layer owns persistence; this module only reads the entries it
exports and writes insight bundles back in the same camelCase shape.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from daybalance.models import DayEntry, InsightsData

logger = logging.getLogger(__name__)

_ENTRIES_ADAPTER = TypeAdapter(list[DayEntry])


class EntryFileError(ValueError):
    """Raised when an entries file cannot be read or validated."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def parse_entries(payload) -> list[DayEntry]:
    """Validate decoded JSON into DayEntry objects.
    
    Args:
        payload: A list of entry objects, or a dict with an "entries" list.
        
    Returns:
        Validated entries.
        
    Raises:
        ValidationError: If the payload does not match the entry schema.
    """
    if isinstance(payload, dict) and "entries" in payload:
        payload = payload["entries"]
    return _ENTRIES_ADAPTER.validate_python(payload)


def load_entries(path: Path) -> list[DayEntry]:
    """Load day entries from a JSON export.
    
    Args:
        path: Path to the JSON file.
        
    Returns:
        List of validated day entries.
        
    Raises:
        EntryFileError: If the file is missing or unreadable, is not
            UTF-8 JSON, or holds invalid entries.
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise EntryFileError(path, "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise EntryFileError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise EntryFileError(path, f"not valid UTF-8 (byte {e.start})") from e
    except OSError as e:
        raise EntryFileError(path, f"cannot read file ({e.strerror or e})") from e

    try:
        entries = parse_entries(payload)
    except ValidationError as e:
        raise EntryFileError(path, f"{e.error_count()} invalid field(s)\n{e}") from e

    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries


def dump_insights(data: InsightsData, indent: int = 2) -> str:
    """Serialize insights to camelCase JSON."""
    return data.model_dump_json(by_alias=True, indent=indent)
