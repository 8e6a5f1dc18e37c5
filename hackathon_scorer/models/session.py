from pydantic import BaseModel
from typing import Optional

from hackathon_scorer.models.project import Project
from hackathon_scorer.models.rubric import Criterion
from hackathon_scorer.models.score import ProjectResult


class SessionState(BaseModel):
    """
    Everything the scoring UI keeps between page loads.

    Loaded and saved only through SessionStore.
    """
    gallery_url: str = ""
    projects: list[Project] = []
    rubric: list[Criterion] = []
    results: list[ProjectResult] = []
    model: Optional[str] = None
    auto_rerun: bool = True
