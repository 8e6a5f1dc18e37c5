from fastapi import APIRouter, Header, HTTPException
from typing import Optional
from hackathon_scorer.config import get_settings
from hackathon_scorer.models.score import ScoreRequest, ScoreResponse
from hackathon_scorer.services import scoring_service
import logging

settings = get_settings()
router = APIRouter()

@router.post("/score", response_model=ScoreResponse, response_model_exclude_none=True)
async def score_projects(
    request: ScoreRequest,
    api_key: Optional[str] = Header(None, alias="X-Gemini-Api-Key")
):
    """
    Score every project against the rubric and rank them.

    Per-project failures come back inside the results, not as HTTP errors.
    """
    if not request.projects:
        raise HTTPException(status_code=400, detail="Missing projects[]")
    if not request.rubric:
        raise HTTPException(status_code=400, detail="Missing rubric[]")

    try:
        pipeline = scoring_service.get_scoring_pipeline()
        results = await pipeline.score_all(
            projects=request.projects,
            rubric=request.rubric,
            model_id=request.model or settings.gemini_model,
            api_key=api_key
        )
        return ScoreResponse(results=results)
    except Exception as e:
        logging.error(f"Scoring run failed: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
