import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
import logging
from typing import Any, Optional
from hackathon_scorer.config import get_settings
from hackathon_scorer.errors import ConfigurationError, EmptyResponseError, UpstreamError

settings = get_settings()

class GeminiServices:
    """Gemini API service"""

    def __init__(self, temperature: Optional[float] = None):
        self.generation_config = {
            "temperature": settings.gemini_temperature if temperature is None else temperature,
        }

    async def generate(
        self,
        model_id: str,
        prompt: str,
        api_key: Optional[str] = None
    ) -> str:
        """
        Send the prompt as a single user message and return the reply text.

        One attempt only; failures go straight back to the caller.
        """
        key = api_key or settings.gemini_api_key
        if not key:
            raise ConfigurationError("Missing GEMINI_API_KEY (set it in the environment or .env)")

        genai.configure(api_key=key)
        model = genai.GenerativeModel(model_id)

        logging.info(f"Calling Gemini model {model_id} with {len(prompt)} char prompt")

        try:
            response = await model.generate_content_async(
                [{"role": "user", "parts": [prompt]}],
                generation_config=self.generation_config,
                # the transport retries ServiceUnavailable by default
                request_options={"retry": None},
            )
        except google_exceptions.GoogleAPICallError as e:
            status_code = int(e.code) if e.code is not None else 500
            logging.error(f"Gemini API error {status_code}: {e.message}")
            raise UpstreamError(status_code, str(e.message)) from e

        text = _response_text(response).strip()
        if not text:
            raise EmptyResponseError("Empty Gemini response")

        logging.info(f"Gemini generated {len(text)} characters")
        return text


def _response_text(response: Any) -> str:
    """Text of the first candidate, or '' when Gemini returned no parts"""
    try:
        return response.text or ""
    except (ValueError, IndexError, AttributeError):
        return ""

# Singleton instance
_gemini_service = None

def get_gemini_service() -> GeminiServices:
    """
    Get or create GeminiServices singleton
    """

    global _gemini_service
    if _gemini_service is None:
        _gemini_service = GeminiServices()
    return _gemini_service
