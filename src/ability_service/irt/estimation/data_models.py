from pydantic import BaseModel, ConfigDict

from ability_service.irt.estimation.enums import ConvergenceStatus


class AbilityEstimationResult(BaseModel):
    """
    Result of Newton-Raphson ability estimation.

    Attributes:
        theta: Estimated ability on the logistic scale.
        normalized_theta: theta mapped onto (0, 1) by the logistic function.
        n_iterations: Number of Newton steps attempted.
        convergence_status: How the search terminated.
        log_likelihood: Log-likelihood of the responses at theta, or None
            when there were no responses.
        standard_error: 1 / sqrt(test information) at theta, or None
            when the administered items carry no information there.
        model_version: Version string for reproducibility tracking.
    """

    model_config = ConfigDict(frozen=True)

    theta: float
    normalized_theta: float
    n_iterations: int
    convergence_status: ConvergenceStatus
    log_likelihood: float | None
    standard_error: float | None
    model_version: str

    @property
    def converged(self) -> bool:
        """Whether the step tolerance was reached inside the bounds."""
        return self.convergence_status == ConvergenceStatus.CONVERGED

    @property
    def at_bound(self) -> bool:
        """Whether the estimate was clamped to an end of the ability scale."""
        return self.convergence_status in (
            ConvergenceStatus.LOWER_BOUND,
            ConvergenceStatus.UPPER_BOUND,
        )
