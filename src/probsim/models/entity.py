"""Weighted entity used by the election composite."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from probsim.errors import InvalidParameter
from probsim.validation import reject_bool


class Entity(BaseModel):
    """One contest in an election (e.g. a state and its electoral votes)."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(..., description="Join key / display name (e.g., 'Ohio')")
    weight: int = Field(..., ge=0, description="Votes awarded when the entity is won")
    probability: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Per-draw probability of a win for the candidate",
    )

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidParameter(str(exc)) from exc

    @field_validator("weight", "probability", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        return reject_bool(value)
