import pytest
from pydantic import ValidationError

from ability_service.api.schemas import (
    AbilityRequest,
    ItemResponseSchema,
    ProbabilityRequest,
)


class TestItemResponseSchema:
    def test_to_domain_numeric_difficulty(self) -> None:
        schema = ItemResponseSchema(
            is_correct=True, difficulty=0.8, discrimination=1.5, guessing=0.1
        )
        domain = schema.to_domain()
        assert domain.is_correct is True
        assert domain.difficulty == 0.8
        assert domain.discrimination == 1.5
        assert domain.guessing == 0.1

    def test_to_domain_label(self) -> None:
        schema = ItemResponseSchema(is_correct=False, difficulty_label="easy")
        domain = schema.to_domain()
        assert domain.difficulty == -1.0
        assert domain.discrimination == 1.0
        assert domain.guessing == 0.25

    def test_numeric_difficulty_wins_over_label(self) -> None:
        schema = ItemResponseSchema(
            is_correct=True, difficulty=0.3, difficulty_label="hard"
        )
        assert schema.to_domain().difficulty == 0.3

    def test_difficulty_required(self) -> None:
        with pytest.raises(ValidationError, match="difficulty"):
            ItemResponseSchema(is_correct=True)

    def test_guessing_must_be_below_one(self) -> None:
        with pytest.raises(ValidationError):
            ItemResponseSchema(is_correct=True, difficulty=0.0, guessing=1.0)


class TestAbilityRequest:
    def test_defaults_and_conversion(self) -> None:
        request = AbilityRequest.model_validate(
            {
                "responses": [
                    {"is_correct": True, "difficulty": 0.0},
                    {"is_correct": False, "difficulty_label": "hard"},
                ]
            }
        )
        assert request.initial_ability == 0.0
        domain = request.to_domain()
        assert [r.difficulty for r in domain] == [0.0, 1.0]

    def test_empty_responses_allowed(self) -> None:
        request = AbilityRequest(responses=[], initial_ability=1.2)
        assert request.to_domain() == []


class TestProbabilityRequest:
    def test_abilities_required(self) -> None:
        with pytest.raises(ValidationError):
            ProbabilityRequest(abilities=[], difficulty=0.0)
