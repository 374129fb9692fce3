from dataclasses import dataclass
from pydantic import BaseModel, Field

# Conventional power used when the caller does not supply one
DEFAULT_POWER = 0.80


@dataclass(frozen=True)
class ExperimentDesign:
    """A/B test design parameters consumed by the runtime estimator."""
    baseline_conversion_rate: float
    minimum_detectable_effect: float  # relative lift, 0.05 = +5% over baseline
    significance_level: float         # percent, e.g. 95
    num_variations: float             # total arms including control
    daily_visitors: float
    power: float = DEFAULT_POWER


# --- Pydantic Models for Requests/Responses ---

class RuntimeRequest(BaseModel):
    """Schema for POST /tools/calculate_experiment_runtime."""
    baseline_conversion_rate: float = Field(..., alias="BCR", description="The conversion rate of the control group (e.g., 0.1 for 10%)")
    minimum_detectable_effect: float = Field(..., alias="MDE", description="The relative lift you want to detect (e.g., 0.05 for 5%)")
    significance_level: float = Field(..., alias="sigLevel", description="The desired statistical significance (e.g., 95 for 95%)")
    num_variations: float = Field(..., alias="numVariations", description="The total number of variations, including control")
    daily_visitors: float = Field(..., alias="dailyVisitors", description="The number of visitors per day participating in the experiment")
    power: float | None = Field(default=None, description="Statistical power as a fraction (defaults to 0.8)")

    class Config:
        populate_by_name = True

    def to_design(self, default_power: float = DEFAULT_POWER) -> ExperimentDesign:
        return ExperimentDesign(
            baseline_conversion_rate=self.baseline_conversion_rate,
            minimum_detectable_effect=self.minimum_detectable_effect,
            significance_level=self.significance_level,
            num_variations=self.num_variations,
            daily_visitors=self.daily_visitors,
            power=default_power if self.power is None else self.power,
        )

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        """Payload key for a model attribute, e.g. 'baseline_conversion_rate' -> 'BCR'."""
        field = cls.model_fields.get(field_name)
        if field is None:
            return field_name
        return field.alias or field_name


class RuntimeResponse(BaseModel):
    """Schema returned by the runtime tool."""
    days: int | None
    estimable: bool
    sample_per_variation: float | None = Field(default=None, alias="samplePerVariation")
    total_sample: float | None = Field(default=None, alias="totalSample")

    class Config:
        populate_by_name = True
