# barsignal/models.py
"""
Pydantic models for validation output and union-shaped catalog fields.

Models:
- ValidationResult: ordered errors/warnings plus derived success flag
- ModifiersSupported: tagged variant for ``modifiersSupported``
  (absent / toggle / list); older catalogs used a boolean, newer ones a list
- ThumbnailRun: summary of one thumbnail generation pass
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ============================================================
# Validation Result
# ============================================================

class ValidationResult(BaseModel):
    """
    Outcome of one validation pass.

    Warnings never affect ``success``; it is true iff ``errors`` is empty.
    """

    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    entry_count: Optional[int] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success(self) -> bool:
        return not self.errors

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


# ============================================================
# modifiersSupported
# ============================================================

class ModifiersAbsent(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["absent"] = "absent"


class ModifiersToggle(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["toggle"] = "toggle"
    enabled: bool


class ModifiersList(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["list"] = "list"
    modifiers: List[str]


ModifiersSupported = Union[ModifiersAbsent, ModifiersToggle, ModifiersList]

_MISSING = object()


def parse_modifiers_supported(value: Any = _MISSING) -> Optional[ModifiersSupported]:
    """
    Classify a raw ``modifiersSupported`` value.

    Returns None when the value matches neither accepted shape.

    Examples:
        parse_modifiers_supported() → ModifiersAbsent()
        parse_modifiers_supported(True) → ModifiersToggle(enabled=True)
        parse_modifiers_supported(["dry", "dirty"]) → ModifiersList(...)
        parse_modifiers_supported("dry") → None
    """
    if value is _MISSING:
        return ModifiersAbsent()
    if isinstance(value, bool):
        return ModifiersToggle(enabled=value)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return ModifiersList(modifiers=list(value))
    return None


# ============================================================
# Thumbnails
# ============================================================

class ThumbnailRun(BaseModel):
    """Summary of a thumbnail pass. ``created`` counts files new to this run."""

    sources: int = 0
    written: List[Path] = Field(default_factory=list)
    created: int = 0
