"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from notediagram.constants import DiagramType

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Logging
    log_level: str = "INFO"
    debug_mode: bool = False

    # CLI output
    output_dir: Path = Path("diagrams")
    default_diagram_types: Annotated[list[DiagramType], NoDecode] = Field(
        default_factory=lambda: list(DiagramType)
    )

    # Presentation delay before results are shown (caller-side only)
    analysis_delay_seconds: float = Field(default=0.0, ge=0.0)

    # API
    cors_origins: str = "http://localhost:3000"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @field_validator("default_diagram_types", mode="before")
    @classmethod
    def _parse_types(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("default_diagram_types")
    @classmethod
    def _validate_types(cls, v: list[DiagramType]) -> list[DiagramType]:
        if not v:
            raise ValueError(
                "default_diagram_types must contain at least one type"
            )
        seen: set[DiagramType] = set()
        dupes: list[str] = []
        for t in v:
            if t in seen:
                dupes.append(t.value)
            seen.add(t)
        if dupes:
            logger.warning(
                "Duplicate types in DEFAULT_DIAGRAM_TYPES: %s",
                ", ".join(dupes),
            )
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        return [
            o.strip() for o in self.cors_origins.split(",") if o.strip()
        ]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
