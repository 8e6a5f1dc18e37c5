from typing import Optional


class ScorerError(Exception):
    """Base class for every failure raised by the scoring services"""


class ConfigurationError(ScorerError):
    """No Gemini credential supplied or configured"""


class UpstreamError(ScorerError):
    """Gemini answered with a non-success status"""

    MAX_BODY_LENGTH = 400

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = (body or "")[:self.MAX_BODY_LENGTH]
        super().__init__(f"Gemini error {status_code}: {self.body}")


class EmptyResponseError(ScorerError):
    """Gemini answered without any usable text"""


class DecodeError(ScorerError):
    """Model output could not be parsed as JSON"""

    def __init__(self, message: str, raw_text: str = ""):
        self.raw_text = raw_text
        super().__init__(message)


class FetchError(ScorerError):
    """A gallery or project page could not be fetched"""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            message = f"Fetch failed: {status_code}"
        else:
            message = f"Fetch failed: {reason or 'transport error'}"
        super().__init__(message)


class DocumentError(ScorerError):
    """Text could not be extracted from an uploaded document"""
