"""
Output schemas for conversion results.

Used by the CLI's JSON output format (one object per line).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

__all__ = ['ConversionResult', 'StrictModel']


class StrictModel(BaseModel):
    """Immutable model that rejects unknown fields and type coercion."""

    model_config = ConfigDict(extra='forbid', strict=True, frozen=True)


class ConversionResult(StrictModel):
    """A single path ↔ filename conversion."""

    direction: Literal['encode', 'decode']
    source: str  # Argument as given on the command line
    result: str  # Encoded filename or decoded path
