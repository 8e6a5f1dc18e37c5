from fastapi import APIRouter, HTTPException, Query
from typing import Optional
from hackathon_scorer.models.project import ScrapeResponse
from hackathon_scorer.services import gallery_service
import logging

router = APIRouter()

@router.get("/scrape-gallery", response_model=ScrapeResponse)
async def scrape_gallery(
    url: Optional[str] = Query(None, description="Gallery listing URL")
):
    """
    List the projects linked from a gallery page
    """
    if not url or not url.strip():
        raise HTTPException(status_code=400, detail="Missing ?url")

    try:
        projects = await gallery_service.harvest(url.strip())
        return ScrapeResponse(projects=projects)
    except Exception as e:
        logging.error(f"Gallery scrape failed for {url}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
