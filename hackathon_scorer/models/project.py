from pydantic import BaseModel, field_validator
from hackathon_scorer.utils.validator import coerce_text


class Project(BaseModel):
    """
    A project submission discovered on a gallery page.

    Missing fields are accepted so a bad entry fails while it is scored
    instead of rejecting the whole batch.
    """
    name: str = ""
    url: str = ""

    @field_validator("name", "url", mode="before")
    def coerce_fields(cls, v):
        return coerce_text(v)


class ScrapeResponse(BaseModel):
    """Gallery scrape response"""
    projects: list[Project]
