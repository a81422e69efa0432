from fastapi import APIRouter, Depends

from ability_service.api.config import ApiSettings
from ability_service.api.dependencies import get_app_settings, get_version
from ability_service.api.errors import DataSizeExceededError
from ability_service.api.schemas import (
    AbilityRequest,
    AbilityResponse,
    DenormalizeRequest,
    DifficultyResponse,
    HealthResponse,
    NormalizeRequest,
    ProbabilityRequest,
    ProbabilityResponse,
    ScaledAbilityResponse,
)
from ability_service.irt.estimation.estimator import estimate_ability_detailed
from ability_service.irt.response_models import probability_batch
from ability_service.irt.scales import (
    denormalize_ability,
    difficulty_label_to_irt,
    normalize_ability,
    target_difficulty,
)

router = APIRouter(prefix="/api/v1")


@router.post("/ability")
def estimate(
    request: AbilityRequest,
    settings: ApiSettings = Depends(get_app_settings),
) -> AbilityResponse:
    if len(request.responses) > settings.max_responses:
        raise DataSizeExceededError(
            f"{len(request.responses)} responses exceed the limit of "
            f"{settings.max_responses}"
        )
    result = estimate_ability_detailed(
        request.to_domain(), request.initial_ability
    )
    return AbilityResponse(
        estimate=result,
        next_difficulty=target_difficulty(result.normalized_theta),
    )


@router.post("/probability")
def compute_probability(
    request: ProbabilityRequest,
    settings: ApiSettings = Depends(get_app_settings),
) -> ProbabilityResponse:
    if len(request.abilities) > settings.max_abilities:
        raise DataSizeExceededError(
            f"{len(request.abilities)} abilities exceed the limit of "
            f"{settings.max_abilities}"
        )
    probs = probability_batch(
        request.abilities,
        request.difficulty,
        request.discrimination,
        request.guessing,
    )
    return ProbabilityResponse(probabilities=probs.tolist())


@router.post("/scale/normalize")
async def normalize(request: NormalizeRequest) -> ScaledAbilityResponse:
    return ScaledAbilityResponse(
        theta=request.theta, normalized=normalize_ability(request.theta)
    )


@router.post("/scale/denormalize")
async def denormalize(request: DenormalizeRequest) -> ScaledAbilityResponse:
    return ScaledAbilityResponse(
        theta=denormalize_ability(request.normalized),
        normalized=request.normalized,
    )


@router.get("/difficulty/{label}")
async def difficulty(label: str) -> DifficultyResponse:
    return DifficultyResponse(
        label=label, difficulty=difficulty_label_to_irt(label)
    )


@router.get("/health")
async def health_check(
    version: str = Depends(get_version),
) -> HealthResponse:
    return HealthResponse(version=version)
