"""
Tests for the ItemResponse value type and difficulty labels.
"""

import math

import pytest
from pydantic import ValidationError

from ability_service.core.data_models import DifficultyLabel, ItemResponse


class TestItemResponse:
    def test_defaults(self) -> None:
        """Discrimination and guessing default to 1.0 and 0.25."""
        response = ItemResponse(is_correct=True, difficulty=0.5)
        assert response.discrimination == 1.0
        assert response.guessing == 0.25

    def test_frozen(self) -> None:
        response = ItemResponse(is_correct=True, difficulty=0.0)
        with pytest.raises(ValidationError):
            response.is_correct = False  # type: ignore[misc]

    @pytest.mark.parametrize("guessing", [1.0, 1.5, -0.1])
    def test_guessing_out_of_range_rejected(self, guessing: float) -> None:
        with pytest.raises(ValidationError):
            ItemResponse(is_correct=True, difficulty=0.0, guessing=guessing)

    def test_guessing_zero_allowed(self) -> None:
        response = ItemResponse(is_correct=False, difficulty=0.0, guessing=0.0)
        assert response.guessing == 0.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_difficulty_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            ItemResponse(is_correct=True, difficulty=value)

    def test_non_finite_discrimination_rejected(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            ItemResponse(
                is_correct=True, difficulty=0.0, discrimination=math.inf
            )


class TestFromLabel:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [("easy", -1.0), ("medium", 0.0), ("hard", 1.0), ("unknown", 0.0)],
    )
    def test_difficulty_from_label(self, label: str, expected: float) -> None:
        response = ItemResponse.from_label(True, label)
        assert response.difficulty == expected
        assert response.is_correct is True

    def test_item_parameters_passed_through(self) -> None:
        response = ItemResponse.from_label(
            False, DifficultyLabel.HARD, discrimination=1.7, guessing=0.2
        )
        assert response.difficulty == 1.0
        assert response.discrimination == 1.7
        assert response.guessing == 0.2


def test_difficulty_label_values() -> None:
    assert [label.value for label in DifficultyLabel] == [
        "easy",
        "medium",
        "hard",
    ]
