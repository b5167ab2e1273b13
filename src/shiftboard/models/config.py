"""Board configuration."""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from .rules import RULES


@dataclass
class BoardConfig:
    """Configuration for a shift board session."""

    # Coverage threshold for highlighting understaffed days
    min_staff_per_day: int = RULES.default_min_staff_per_day

    # Max months a user may plan ahead of the real current month
    forward_month_limit: int = RULES.default_forward_month_limit

    # Persistence
    storage: str = "json"  # json, sqlite, memory
    data_dir: str = "data"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/shiftboard.log"

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "min_staff_per_day": self.min_staff_per_day,
            "forward_month_limit": self.forward_month_limit,
            "storage": self.storage,
            "data_dir": self.data_dir,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "BoardConfig":
        """Create from dictionary, ignoring unknown keys."""
        cfg = cls()
        for key, value in d.items():
            if hasattr(cfg, key):
                setattr(cfg, key, value)
        return cfg


def load_config(path: Optional[Union[str, Path]] = None, **overrides) -> BoardConfig:
    """
    Load and validate configuration.

    Args:
        path: Optional JSON file with configuration keys
        **overrides: Values taking precedence over the file (None values ignored)

    Returns:
        Validated BoardConfig

    Raises:
        pydantic.ValidationError: If a value is out of range
    """
    from .validated import ValidatedBoardConfig

    data: Dict = {}
    if path:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ValidatedBoardConfig(**data).to_dataclass()
