from pydantic import BaseModel, Field, field_validator
from typing import Optional

from hackathon_scorer.models.project import Project
from hackathon_scorer.models.rubric import Criterion
from hackathon_scorer.utils.validator import coerce_number, coerce_text


class ScoreItem(BaseModel):
    """
    Score for one rubric criterion, as reported by the model.

    Values are only type-coerced; scores outside 0..100 are kept as given.
    """
    name: str = ""
    weight: float = 0.0
    score: float = 0.0
    feedback: str = ""

    @field_validator("name", "feedback", mode="before")
    def coerce_texts(cls, v):
        return coerce_text(v)

    @field_validator("weight", "score", mode="before")
    def coerce_numbers(cls, v):
        return coerce_number(v)


class ProjectResult(BaseModel):
    """Scoring outcome for one project; error is set when scoring failed"""
    name: str
    url: str
    items: list[ScoreItem] = []
    total: float = 0.0
    error: Optional[str] = None

    @property
    def weighted_total(self) -> float:
        """Sum of weight * score over the items"""
        return sum(item.weight * item.score for item in self.items)


class ScoreRequest(BaseModel):
    """Score request"""
    projects: list[Project] = []
    rubric: list[Criterion] = []
    model: Optional[str] = Field(None, description="Gemini model id, defaults to settings.gemini_model")


class ScoreResponse(BaseModel):
    """Ranked scoring results"""
    results: list[ProjectResult]

    class Config:
        json_schema_extra = {
            "example": {
                "results": [
                    {
                        "name": "Foo",
                        "url": "https://example.devpost.com/software/foo",
                        "items": [
                            {"name": "Tech", "weight": 0.6, "score": 80, "feedback": "Solid backend."},
                            {"name": "Design", "weight": 0.4, "score": 50, "feedback": "Rough UI."}
                        ],
                        "total": 68.0
                    },
                    {
                        "name": "Bar",
                        "url": "https://example.devpost.com/software/bar",
                        "items": [],
                        "total": 0.0,
                        "error": "Fetch failed: 404"
                    }
                ]
            }
        }
