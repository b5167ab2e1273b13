"""
Pydantic Validated Models
=========================
Validation layer for configuration coming from files and command-line flags.

Usage:
    from shiftboard.models.validated import ValidatedBoardConfig

    config = ValidatedBoardConfig(min_staff_per_day=2).to_dataclass()

The plain dataclass BoardConfig stays the type used inside the application.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import BoardConfig


class ValidatedBoardConfig(BaseModel):
    """
    Pydantic-validated board configuration.

    Use this for strict validation at API boundaries.
    """
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    min_staff_per_day: int = Field(default=3, ge=0, le=1000, description="Coverage threshold")
    forward_month_limit: int = Field(default=2, ge=0, le=24, description="Months plannable ahead")

    storage: Literal["json", "sqlite", "memory"] = Field(default="json")
    data_dir: str = Field(default="data", min_length=1)

    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default="logs/shiftboard.log")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names plus TRACE."""
        level = v.strip().upper()
        if level not in ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    def to_dataclass(self) -> BoardConfig:
        """Convert to dataclass BoardConfig."""
        return BoardConfig(**self.model_dump())

    @classmethod
    def from_dataclass(cls, config: BoardConfig) -> "ValidatedBoardConfig":
        """Create from dataclass BoardConfig."""
        return cls(**config.to_dict())
