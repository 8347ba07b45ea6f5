"""Configuration loading for DayBalance.

Configuration lives in a TOML file under ~/.config/daybalance/, the
same place the CLI looks for its default entries export.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from daybalance.insights.ranges import TimeRange

logger = logging.getLogger(__name__)


CONFIG_DIR = Path.home() / ".config" / "daybalance"
DEFAULT_ENTRIES_FILE = CONFIG_DIR / "entries.json"


class ConfigError(ValueError):
    """Raised when the config file holds values that fail validation."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InsightsSettings(BaseModel):
    """Effective settings after merging the config file over defaults."""

    entries_file: Path = Field(default=DEFAULT_ENTRIES_FILE, description="Entries JSON export")
    default_range: TimeRange = Field(default=TimeRange.LAST_30_DAYS, description="Default preset")
    correlation_min_days: int = Field(default=5, ge=1, description="Gate for correlations")
    narrative_min_days: int = Field(default=3, ge=1, description="Gate for the narrative")

    model_config = {"frozen": True}


def get_config_path() -> Path:
    """Get the config file path, honouring DAYBALANCE_CONFIG."""
    override = os.environ.get("DAYBALANCE_CONFIG")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "config.toml"


def load_config() -> Optional[dict]:
    """Load the configuration file.
    
    Returns:
        Config dict or None if the file is missing or unreadable.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return None

    try:
        return toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read config %s: %s", config_path, e)
        return None


def create_template_config() -> Path:
    """Write a template configuration file and return its path."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "data": {
            "entries_file": str(DEFAULT_ENTRIES_FILE),
        },
        "insights": {
            "default_range": TimeRange.LAST_30_DAYS.value,
            "correlation_min_days": 5,
            "narrative_min_days": 3,
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path


def get_insights_settings(config: Optional[dict]) -> InsightsSettings:
    """Merge a loaded config dict over the default settings.
    
    Args:
        config: Result of load_config(), may be None.
        
    Returns:
        InsightsSettings instance.
        
    Raises:
        ConfigError: If a configured value is out of range.
    """
    config = config or {}
    data_section = config.get("data", {})
    insights_section = config.get("insights", {})

    values = {
        key: insights_section[key]
        for key in ("default_range", "correlation_min_days", "narrative_min_days")
        if key in insights_section
    }
    if data_section.get("entries_file"):
        values["entries_file"] = Path(str(data_section["entries_file"])).expanduser()

    try:
        return InsightsSettings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(get_config_path(), problems) from e
