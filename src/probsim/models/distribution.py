"""Parameter models for the supported distribution families."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from probsim.errors import InvalidParameter
from probsim.validation import reject_bool


class DistributionParams(BaseModel):
    """Immutable parameters of one distribution family.

    Construction either yields a fully valid object or raises
    ``InvalidParameter``; pydantic's ``ValidationError`` is chained. Fields
    are strict: strings, floats for counts and booleans are not coerced.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidParameter(str(exc)) from exc

    @field_validator("*", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        return reject_bool(value)


class Bernoulli(DistributionParams):
    """Single trial succeeding with ``probability``."""

    family: Literal["bernoulli"] = "bernoulli"
    probability: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Probability of drawing 1",
    )


class Binomial(DistributionParams):
    """Number of successes in ``trials`` independent Bernoulli draws."""

    family: Literal["binomial"] = "binomial"
    trials: int = Field(..., ge=0, description="Number of Bernoulli draws")
    probability: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Success probability of each draw",
    )


class DiscreteUniform(DistributionParams):
    """Integers in ``[low, high]``, each equally likely."""

    family: Literal["discrete_uniform"] = "discrete_uniform"
    low: int = Field(..., description="Inclusive lower bound")
    high: int = Field(..., description="Inclusive upper bound")

    @model_validator(mode="after")
    def _check_bounds(self) -> "DiscreteUniform":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self


Distribution = Annotated[
    Union[Bernoulli, Binomial, DiscreteUniform],
    Field(discriminator="family"),
]

DISTRIBUTION_FAMILIES: dict[str, type[DistributionParams]] = {
    "bernoulli": Bernoulli,
    "binomial": Binomial,
    "discrete_uniform": DiscreteUniform,
}


def make_distribution(family: str, **params) -> Bernoulli | Binomial | DiscreteUniform:
    """Build a distribution from its identifier and parameters.

    Args:
        family: One of ``bernoulli``, ``binomial``, ``discrete_uniform``
        **params: Fields of the chosen family

    Returns:
        The validated distribution model
    """
    try:
        model = DISTRIBUTION_FAMILIES[family]
    except KeyError:
        known = ", ".join(DISTRIBUTION_FAMILIES)
        raise InvalidParameter(f"Unknown distribution '{family}' (expected one of: {known})") from None
    return model(**params)
