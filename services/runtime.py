import math
import logging
from dataclasses import dataclass
from models.runtime import ExperimentDesign
from services.stats import normal_ppf, two_tailed_probability, two_tailed_z

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """A design parameter is outside its valid domain."""
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass(frozen=True)
class RuntimeEstimate:
    """Outcome of one estimation. days is None when the design cannot be estimated, with reason saying why."""
    days: int | None
    sample_per_variation: float | None = None
    total_sample: float | None = None
    reason: str | None = None

    @property
    def estimable(self) -> bool:
        return self.days is not None


def _finite(design: ExperimentDesign):
    for name in ("baseline_conversion_rate", "minimum_detectable_effect", "significance_level",
                 "num_variations", "daily_visitors", "power"):
        value = getattr(design, name)
        if not math.isfinite(value):
            raise InvalidInputError(name, f"{name} must be a finite number, got {value}")


def validate_design(design: ExperimentDesign):
    """Range/domain checks. Raises InvalidInputError naming the first offending field."""
    _finite(design)

    if not (0 < design.baseline_conversion_rate < 1):
        raise InvalidInputError(
            "baseline_conversion_rate",
            f"baseline conversion rate must be strictly between 0 and 1, got {design.baseline_conversion_rate}",
        )
    if design.minimum_detectable_effect <= 0:
        raise InvalidInputError(
            "minimum_detectable_effect",
            f"minimum detectable effect must be greater than 0, got {design.minimum_detectable_effect}",
        )
    if not (0 < design.significance_level < 100):
        raise InvalidInputError(
            "significance_level",
            f"significance level must be strictly between 0 and 100, got {design.significance_level}",
        )
    # levels a hair below 100 round to a cumulative probability of exactly 1
    if two_tailed_probability(design.significance_level) >= 1:
        raise InvalidInputError(
            "significance_level",
            f"significance level {design.significance_level} is too close to 100 to compute a critical value",
        )
    if float(design.num_variations) != int(design.num_variations) or design.num_variations < 2:
        raise InvalidInputError(
            "num_variations",
            f"number of variations must be an integer of at least 2, got {design.num_variations}",
        )
    if design.daily_visitors <= 0:
        raise InvalidInputError(
            "daily_visitors",
            f"daily visitors must be greater than 0, got {design.daily_visitors}",
        )
    if not (0 < design.power < 1):
        raise InvalidInputError(
            "power",
            f"power must be strictly between 0 and 1, got {design.power}",
        )


def _sample_size(design: ExperimentDesign) -> tuple[float | None, str | None]:
    p1 = design.baseline_conversion_rate
    p2 = p1 * (1 + design.minimum_detectable_effect)
    if p2 >= 1:
        logger.info("infeasible design: treatment rate %s is not below 1 (bcr=%s, mde=%s)",
                    p2, p1, design.minimum_detectable_effect)
        return None, f"the treatment conversion rate BCR * (1 + MDE) = {p2:g} must stay below 1"
    if p1 == p2:
        logger.info("infeasible design: no difference between %s and %s", p1, p2)
        return None, "the detectable effect is too small to distinguish from the baseline rate"

    z_alpha = two_tailed_z(design.significance_level)
    z_beta = normal_ppf(design.power)

    n = (z_alpha + z_beta) ** 2 * (p1 * (1 - p1) + p2 * (1 - p2)) / (p1 - p2) ** 2
    if not math.isfinite(n):
        logger.info("infeasible design: sample size overflowed for bcr=%s, mde=%s",
                    p1, design.minimum_detectable_effect)
        return None, "the required sample size is too large to represent"

    logger.debug("z_alpha=%.6f z_beta=%.6f p1=%s p2=%s n=%.3f", z_alpha, z_beta, p1, p2, n)
    return n, None


def required_sample_size(design: ExperimentDesign) -> float | None:
    """
    Per-variation sample size for a two-sided two-proportion z-test.

    n = (z_alpha + z_beta)^2 * (p1(1-p1) + p2(1-p2)) / (p1 - p2)^2

    Returns None when the treatment rate p2 = p1 * (1 + MDE) is not a valid
    probability, or when the effect vanishes under floating point rounding.
    """
    validate_design(design)
    n, _ = _sample_size(design)
    return n


def estimate_runtime(design: ExperimentDesign) -> RuntimeEstimate:
    """Validate once, then derive the sample sizes and the day count together."""
    validate_design(design)

    n, reason = _sample_size(design)
    if n is None:
        return RuntimeEstimate(days=None, reason=reason)

    total = n * int(design.num_variations)
    exact_days = total / design.daily_visitors
    if not math.isfinite(exact_days):
        logger.info("infeasible design: day count overflowed for %s daily visitors", design.daily_visitors)
        return RuntimeEstimate(days=None, sample_per_variation=n, total_sample=total,
                               reason="the required number of days is too large to represent")

    days = math.ceil(exact_days)
    logger.debug("total sample %.3f over %s daily visitors -> %d days", total, design.daily_visitors, days)
    return RuntimeEstimate(days=days, sample_per_variation=n, total_sample=total)


def estimate(design: ExperimentDesign) -> int | None:
    """
    Estimated number of days to run the experiment, or None when the design
    cannot be estimated. Partial days always round up.
    """
    return estimate_runtime(design).days
