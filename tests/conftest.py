from __future__ import annotations

from typing import Callable, Dict, List, Optional

import httpx
import pytest


class FakeGemini:
    """Stands in for GeminiServices; replies are picked by a substring of the prompt"""

    def __init__(self, replies: Optional[Dict[str, str]] = None, default: str = "{}"):
        self.replies = replies or {}
        self.default = default
        self.calls: List[dict] = []

    async def generate(self, model_id: str, prompt: str, api_key: Optional[str] = None) -> str:
        self.calls.append({"model_id": model_id, "prompt": prompt, "api_key": api_key})
        for marker, reply in self.replies.items():
            if marker in prompt:
                if isinstance(reply, BaseException):
                    raise reply
                return reply
        return self.default


def make_client(pages: Dict[str, object]) -> httpx.AsyncClient:
    """
    AsyncClient answering from a url -> html map.

    An int value is returned as that status code, an exception is raised.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        page = pages.get(str(request.url))
        if page is None:
            return httpx.Response(404, text="not found")
        if isinstance(page, BaseException):
            raise page
        if isinstance(page, int):
            return httpx.Response(page, text="error")
        return httpx.Response(200, text=page, headers={"content-type": "text/html"})

    from hackathon_scorer.services.gallery_service import create_http_client
    return create_http_client(transport=httpx.MockTransport(handler))


@pytest.fixture
def fake_gemini() -> Callable[..., FakeGemini]:
    return FakeGemini


@pytest.fixture
def client_for() -> Callable[[Dict[str, object]], httpx.AsyncClient]:
    return make_client
