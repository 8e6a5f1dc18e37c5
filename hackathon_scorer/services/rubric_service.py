import logging
from typing import List, Optional

from hackathon_scorer.config import get_settings
from hackathon_scorer.models.rubric import Criterion
from hackathon_scorer.prompts.rubric_extraction import get_rubric_extraction_prompt
from hackathon_scorer.services.gemini_service import get_gemini_service
from hackathon_scorer.services.pdf_service import get_pdf_parser
from hackathon_scorer.utils.validator import as_object, coerce_list, decode

settings = get_settings()


def criteria_from_payload(payload) -> List[Criterion]:
    """Build the rubric from a decoded reply; a non-list 'criteria' gives []"""
    entries = coerce_list(as_object(payload).get("criteria"))
    return [Criterion.model_validate(entry) for entry in entries]


async def extract_rubric(
    document_bytes: bytes,
    model_id: str,
    api_key: Optional[str] = None
) -> List[Criterion]:
    """
    Turn a rubric document into weighted criteria.

    Extraction, Gemini and decoding failures all propagate to the caller.
    """
    text = get_pdf_parser().extract_text_from_bytes(document_bytes)
    if len(text) > settings.rubric_text_limit:
        logging.warning(
            f"Rubric text truncated from {len(text)} to {settings.rubric_text_limit} characters"
        )

    prompt = get_rubric_extraction_prompt(text[:settings.rubric_text_limit])
    raw = await get_gemini_service().generate(model_id, prompt, api_key=api_key)

    criteria = criteria_from_payload(decode(raw))
    logging.info(f"Extracted {len(criteria)} rubric criteria")
    return criteria
