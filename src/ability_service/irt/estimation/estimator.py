"""
Maximum likelihood ability estimation with Newton-Raphson.

Starting from an initial guess, each iteration moves theta by
    θ_new = θ - L'(θ) / L''(θ)
where L is the log-likelihood of the observed response pattern under the
3PL model. Where L is not concave (L''(θ) >= 0, possible below the
difficulty of correctly answered items) the step uses -I(θ), the negated
test information, in place of L''(θ), so every step climbs the likelihood.

The search stops when:
    - |L''(θ)| is below the curvature floor, or the derivatives are not
      finite because P(θ) has saturated at 0 or 1 (θ is kept as is),
    - θ_new leaves the ability range (θ is clamped to the violated bound),
    - |θ_new - θ| is below the step tolerance (θ_new is accepted), or
    - the iteration cap is reached (the last θ is returned).
"""

import logging
import math
from collections.abc import Sequence

from ability_service.core.data_models import ItemResponse
from ability_service.irt.estimation.config import (
    EstimationConfig,
    default_config,
)
from ability_service.irt.estimation.data_models import AbilityEstimationResult
from ability_service.irt.estimation.derivatives import ResponseArrays
from ability_service.irt.estimation.enums import ConvergenceStatus
from ability_service.irt.scales import normalize_ability

logger = logging.getLogger(__name__)


def estimate_ability_detailed(
    responses: Sequence[ItemResponse],
    initial_ability: float = 0.0,
    config: EstimationConfig | None = None,
) -> AbilityEstimationResult:
    """
    Estimate ability and report how the Newton-Raphson search ended.

    Args:
        responses: Observed responses with their item parameters.
        initial_ability: Starting value of theta.
        config: Estimation configuration. Uses defaults if None.

    Returns:
        AbilityEstimationResult whose theta equals estimate_ability's result.
    """
    if config is None:
        config = default_config()

    if len(responses) == 0:
        return AbilityEstimationResult(
            theta=initial_ability,
            normalized_theta=normalize_ability(initial_ability),
            n_iterations=0,
            convergence_status=ConvergenceStatus.NO_DATA,
            log_likelihood=None,
            standard_error=None,
            model_version=config.model_version,
        )

    arrays = ResponseArrays(responses)
    newton = config.newton
    bounds = config.bounds

    theta = initial_ability
    status = ConvergenceStatus.MAX_ITERATIONS
    n_iterations = 0

    for iteration in range(newton.max_iterations):
        n_iterations = iteration + 1
        first, second = arrays.derivatives(theta)
        if second >= 0.0:
            second = -arrays.information(theta)

        # P or Q saturated to exactly 0 or 1 makes the terms 0/0
        saturated = not (math.isfinite(first) and math.isfinite(second))
        if saturated or abs(second) < newton.min_curvature:
            status = ConvergenceStatus.FLAT_LIKELIHOOD
            break

        new_theta = theta - first / second

        if new_theta < bounds.lower:
            theta = bounds.lower
            status = ConvergenceStatus.LOWER_BOUND
            break
        if new_theta > bounds.upper:
            theta = bounds.upper
            status = ConvergenceStatus.UPPER_BOUND
            break

        if abs(new_theta - theta) < newton.step_tolerance:
            theta = new_theta
            status = ConvergenceStatus.CONVERGED
            break

        theta = new_theta

    logger.debug(
        f"Ability search ended with {status.value} after "
        f"{n_iterations} iterations: theta={theta:.4f} "
        f"({len(arrays)} responses)"
    )

    return AbilityEstimationResult(
        theta=theta,
        normalized_theta=normalize_ability(theta),
        n_iterations=n_iterations,
        convergence_status=status,
        log_likelihood=_log_likelihood(arrays, theta),
        standard_error=_standard_error(arrays, theta),
        model_version=config.model_version,
    )


def estimate_ability(
    responses: Sequence[ItemResponse], initial_ability: float = 0.0
) -> float:
    """
    Estimate ability (theta) from a response pattern.

    Returns initial_ability unchanged when there are no responses.
    Otherwise the result lies in [-3, 3].

    Args:
        responses: Observed responses with their item parameters.
        initial_ability: Starting value of theta.

    Returns:
        Estimated ability.
    """
    return estimate_ability_detailed(responses, initial_ability).theta


def _log_likelihood(arrays: ResponseArrays, theta: float) -> float | None:
    log_likelihood = arrays.log_likelihood(theta)
    if not math.isfinite(log_likelihood):
        return None
    return log_likelihood


def _standard_error(arrays: ResponseArrays, theta: float) -> float | None:
    """1 / sqrt(I(θ)), undefined where the test information vanishes."""
    information = arrays.information(theta)
    if not math.isfinite(information) or information <= 0.0:
        return None
    return 1.0 / math.sqrt(information)
