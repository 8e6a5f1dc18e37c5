from fastapi import APIRouter, Header, HTTPException
from typing import Optional
from hackathon_scorer.config import get_settings
from hackathon_scorer.models.session import SessionState
from hackathon_scorer.services import gallery_service, scoring_service, session_store
import logging

settings = get_settings()
router = APIRouter()

@router.get("/session", response_model=SessionState, response_model_exclude_none=True)
async def get_session():
    """Saved gallery URL, projects, rubric and results"""
    return await session_store.get_session_store().load()

@router.put("/session", response_model=SessionState, response_model_exclude_none=True)
async def put_session(state: SessionState):
    """Replace the saved session"""
    try:
        return await session_store.get_session_store().save(state)
    except OSError as e:
        logging.error(f"Failed to save session: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to save session: {str(e)}")

@router.post("/session/refresh", response_model=SessionState, response_model_exclude_none=True)
async def refresh_session(
    api_key: Optional[str] = Header(None, alias="X-Gemini-Api-Key")
):
    """
    Re-scrape the saved gallery and re-score its projects.

    When the gallery cannot be fetched the saved project list is reused.
    """
    store = session_store.get_session_store()
    state = await store.load()

    if not state.gallery_url:
        raise HTTPException(status_code=400, detail="No gallery URL saved in session")
    if not state.rubric:
        raise HTTPException(status_code=400, detail="No rubric saved in session")

    try:
        state.projects = await gallery_service.harvest(state.gallery_url)
    except Exception as e:
        logging.warning(f"Gallery refresh failed, keeping {len(state.projects)} saved projects: {e}")

    try:
        if state.projects:
            pipeline = scoring_service.get_scoring_pipeline()
            state.results = await pipeline.score_all(
                projects=state.projects,
                rubric=state.rubric,
                model_id=state.model or settings.gemini_model,
                api_key=api_key
            )
        return await store.save(state)
    except Exception as e:
        logging.error(f"Session refresh failed: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
