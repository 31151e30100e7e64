"""Pydantic model for patternbook run-time settings."""

from typing import Literal

from pydantic import BaseModel, Field


class PatternbookConfig(BaseModel):
    """Display settings, filled from command-line options."""

    output_format: Literal["text", "json", "yaml"] = Field(
        default="text",
        description="How demo output is rendered",
    )
    show_timing: bool = Field(
        default=False,
        description="Print how long the demo took (text output only)",
    )
