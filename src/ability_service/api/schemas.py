from pydantic import BaseModel, Field, model_validator

from ability_service.core.constants import (
    ABILITY_MAX,
    ABILITY_MIN,
    DEFAULT_DISCRIMINATION,
    DEFAULT_GUESSING,
)
from ability_service.core.data_models import DifficultyLabel, ItemResponse
from ability_service.irt.estimation.data_models import AbilityEstimationResult

# --- Request schemas ---


class ItemResponseSchema(BaseModel):
    is_correct: bool
    difficulty: float | None = None
    difficulty_label: str | None = None
    discrimination: float = DEFAULT_DISCRIMINATION
    guessing: float = Field(default=DEFAULT_GUESSING, ge=0.0, lt=1.0)

    @model_validator(mode="after")
    def validate_difficulty_source(self) -> "ItemResponseSchema":
        if self.difficulty is None and self.difficulty_label is None:
            raise ValueError(
                "either difficulty or difficulty_label must be provided"
            )
        return self

    def to_domain(self) -> ItemResponse:
        if self.difficulty is not None:
            return ItemResponse(
                is_correct=self.is_correct,
                difficulty=self.difficulty,
                discrimination=self.discrimination,
                guessing=self.guessing,
            )
        assert self.difficulty_label is not None
        return ItemResponse.from_label(
            self.is_correct,
            self.difficulty_label,
            discrimination=self.discrimination,
            guessing=self.guessing,
        )


class AbilityRequest(BaseModel):
    responses: list[ItemResponseSchema]
    initial_ability: float = Field(
        default=0.0, ge=ABILITY_MIN, le=ABILITY_MAX
    )

    def to_domain(self) -> list[ItemResponse]:
        return [r.to_domain() for r in self.responses]


class ProbabilityRequest(BaseModel):
    abilities: list[float] = Field(min_length=1)
    difficulty: float
    discrimination: float = DEFAULT_DISCRIMINATION
    guessing: float = Field(default=DEFAULT_GUESSING, ge=0.0, lt=1.0)


class NormalizeRequest(BaseModel):
    theta: float


class DenormalizeRequest(BaseModel):
    normalized: float


# --- Response schemas ---


class AbilityResponse(BaseModel):
    estimate: AbilityEstimationResult
    next_difficulty: DifficultyLabel


class ProbabilityResponse(BaseModel):
    probabilities: list[float]


class ScaledAbilityResponse(BaseModel):
    theta: float
    normalized: float


class DifficultyResponse(BaseModel):
    label: str
    difficulty: float


class ErrorDetail(BaseModel):
    code: str
    message: str
    request_id: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
