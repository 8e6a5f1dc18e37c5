from pydantic import BaseModel, field_validator
from hackathon_scorer.utils.validator import coerce_number, coerce_text


class Criterion(BaseModel):
    """
    One weighted rubric criterion.

    Weights are expected to sum to about 1 but are never normalized here.
    """
    name: str = ""
    weight: float = 0.0

    @field_validator("name", mode="before")
    def coerce_name(cls, v):
        return coerce_text(v)

    @field_validator("weight", mode="before")
    def coerce_weight(cls, v):
        return coerce_number(v)


class RubricResponse(BaseModel):
    """Rubric extraction response"""
    rubric: list[Criterion]
