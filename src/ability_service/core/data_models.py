"""
Value types for ability estimation input.

This module defines the data structures for:
- DifficultyLabel: Human-facing difficulty categories
- ItemResponse: One observed answer with its item's 3PL parameters
"""

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ability_service.core.constants import (
    DEFAULT_DISCRIMINATION,
    DEFAULT_GUESSING,
)


class DifficultyLabel(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ItemResponse(BaseModel):
    """
    One observed response to a test item under the 3PL model.

    Attributes:
        is_correct: Whether the candidate answered the item correctly.
        difficulty: Item difficulty (b) on the ability scale.
        discrimination: Item discrimination (a), typically in [0.5, 2.0].
        guessing: Lower asymptote (c), must lie in [0, 1).
    """

    model_config = ConfigDict(frozen=True)

    is_correct: bool
    difficulty: float
    discrimination: float = DEFAULT_DISCRIMINATION
    guessing: float = Field(default=DEFAULT_GUESSING, ge=0.0, lt=1.0)

    @field_validator("difficulty", "discrimination")
    @classmethod
    def _validate_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"must be finite, got {value}")
        return value

    @classmethod
    def from_label(
        cls,
        is_correct: bool,
        label: str,
        discrimination: float = DEFAULT_DISCRIMINATION,
        guessing: float = DEFAULT_GUESSING,
    ) -> "ItemResponse":
        """
        Build a response whose difficulty comes from a difficulty label.

        Unrecognized labels are treated as medium.
        """
        # Local import: scales depends on this module
        from ability_service.irt.scales import difficulty_label_to_irt

        return cls(
            is_correct=is_correct,
            difficulty=difficulty_label_to_irt(label),
            discrimination=discrimination,
            guessing=guessing,
        )
