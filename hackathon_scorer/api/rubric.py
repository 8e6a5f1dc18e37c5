from fastapi import APIRouter, UploadFile, File, Form, Header, HTTPException
from typing import Optional
from hackathon_scorer.config import get_settings
from hackathon_scorer.models.rubric import RubricResponse
from hackathon_scorer.services import rubric_service
import logging

settings = get_settings()
router = APIRouter()

@router.post("/parse-rubric", response_model=RubricResponse)
async def parse_rubric(
    rubric: Optional[UploadFile] = File(None),
    model: Optional[str] = Form(None),
    api_key: Optional[str] = Header(None, alias="X-Gemini-Api-Key")
):
    """
    Extract weighted criteria from an uploaded rubric PDF
    """
    if rubric is None or not rubric.filename:
        raise HTTPException(status_code=400, detail="No rubric file uploaded")

    content = await rubric.read()
    file_size = len(content)

    if file_size == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if file_size > settings.max_file_size:
        raise HTTPException(
            status_code=400,
            detail=f"File size too large: Maximum size {settings.max_file_size}"
        )

    logging.info(f"Parsing rubric {rubric.filename} ({file_size} bytes)")

    try:
        criteria = await rubric_service.extract_rubric(
            content,
            model or settings.gemini_model,
            api_key=api_key
        )
        return RubricResponse(rubric=criteria)
    except Exception as e:
        logging.error(f"Rubric parsing failed: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
