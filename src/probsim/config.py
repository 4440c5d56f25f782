"""Simulation defaults and run configuration."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from probsim.errors import InvalidParameter
from probsim.validation import reject_bool

# Simulation parameters
DEFAULT_NUM_TRIALS = 1000
DEFAULT_SEED = None  # Set to int for reproducibility, None for fresh entropy

# Election composite
DEFAULT_DRAWS = 1000  # Binomial draws per entity in one election trial

# Birthday composite
DAYS_IN_YEAR = 365
DEFAULT_GROUP_SIZE = 23

# Output
DEFAULT_HISTOGRAM_BINS = 10
BAR_SCALE = 2.0  # Percent per '#' in console bars


class SimulationConfig(BaseModel):
    """How many trials to run and how to run them."""

    model_config = ConfigDict(frozen=True, strict=True)

    num_trials: int = Field(
        default=DEFAULT_NUM_TRIALS,
        ge=0,
        description="Number of independent trials",
    )
    seed: int | None = Field(
        default=DEFAULT_SEED,
        ge=0,
        description="Master seed; each trial gets its own sub-stream",
    )
    parallel: bool = Field(default=False, description="Run trials in a process pool")
    max_workers: int | None = Field(
        default=None,
        gt=0,
        description="Process pool size (None = CPU count)",
    )

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidParameter(str(exc)) from exc

    @field_validator("num_trials", "seed", "max_workers", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        return reject_bool(value)
