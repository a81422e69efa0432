"""
CSV loading utilities for item response data.
"""

from pathlib import Path

import pandas as pd

from ability_service.core.constants import (
    DEFAULT_DISCRIMINATION,
    DEFAULT_GUESSING,
)
from ability_service.core.data_models import ItemResponse

_TRUE_VALUES = {"1", "true", "t", "yes", "y"}
_FALSE_VALUES = {"0", "false", "f", "no", "n"}


def _parse_correctness(value: str) -> bool:
    """Parse a correctness cell such as "1", "true" or "N"."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid value in is_correct column: '{value}'")


def load_csv_to_responses(path: Path) -> list[ItemResponse]:
    """Load a CSV file with one row per answered item into ItemResponses.

    Expected CSV columns:
        - is_correct: 1/0, true/false or yes/no
        - difficulty: numeric IRT difficulty, or
        - difficulty_label: easy/medium/hard (used when difficulty is absent)
        - discrimination (optional): defaults to 1.0
        - guessing (optional): defaults to 0.25

    Returns:
        Responses in file order.

    Raises:
        ValueError: If CSV format is invalid.
    """
    df = pd.read_csv(path, dtype=str)

    if "is_correct" not in df.columns:
        raise ValueError("CSV must have 'is_correct' column")
    if "difficulty" not in df.columns and "difficulty_label" not in df.columns:
        raise ValueError(
            "CSV must have a 'difficulty' or 'difficulty_label' column"
        )

    responses: list[ItemResponse] = []
    for row in df.itertuples(index=False):
        fields = row._asdict()
        is_correct = _parse_correctness(str(fields["is_correct"]))
        discrimination = _optional_float(
            fields.get("discrimination"), DEFAULT_DISCRIMINATION
        )
        guessing = _optional_float(fields.get("guessing"), DEFAULT_GUESSING)

        difficulty = fields.get("difficulty")
        if isinstance(difficulty, str) and difficulty.strip():
            responses.append(
                ItemResponse(
                    is_correct=is_correct,
                    difficulty=float(difficulty),
                    discrimination=discrimination,
                    guessing=guessing,
                )
            )
        else:
            label = fields.get("difficulty_label")
            responses.append(
                ItemResponse.from_label(
                    is_correct,
                    label if isinstance(label, str) else "",
                    discrimination=discrimination,
                    guessing=guessing,
                )
            )

    return responses


def _optional_float(value: object, default: float) -> float:
    # pandas reads empty cells as NaN even with dtype=str
    if isinstance(value, str) and value.strip():
        return float(value)
    return default
