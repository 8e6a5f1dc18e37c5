import re
import logging
from typing import List, Optional, Sequence, Tuple

import httpx
from bs4 import BeautifulSoup

from hackathon_scorer.config import get_settings
from hackathon_scorer.models.project import Project
from hackathon_scorer.models.rubric import Criterion
from hackathon_scorer.models.score import ProjectResult, ScoreItem
from hackathon_scorer.prompts.project_scoring import get_project_scoring_prompt
from hackathon_scorer.services.gallery_service import create_http_client, fetch_page
from hackathon_scorer.services.gemini_service import GeminiServices, get_gemini_service
from hackathon_scorer.utils.validator import as_object, coerce_list, decode, reported_total

settings = get_settings()

CONTENT_SELECTORS = ".main-content, .content, .gallery, article"
WHITESPACE_BEFORE_NEWLINE = re.compile(r"\s+\n")


def _joined_text(soup: BeautifulSoup, selector: str) -> str:
    return "".join(element.get_text() for element in soup.select(selector))


def extract_project_page(html: str, fallback_name: str = "") -> Tuple[str, str]:
    """
    Pull a title and a description out of a project page.

    The title is the first h1/h2, then the harvested name, then "Untitled".
    The description concatenates the meta description, '.large' blocks, the
    likely content containers and the whole body text.
    """
    soup = BeautifulSoup(html, "html.parser")

    heading = soup.select_one("h1, h2")
    title = heading.get_text().strip() if heading else ""
    title = title or fallback_name or "Untitled"

    meta = soup.select_one('meta[name="description"]')
    parts = [
        (meta.get("content") or "") if meta else "",
        _joined_text(soup, ".large"),
        _joined_text(soup, CONTENT_SELECTORS),
        (soup.body or soup).get_text(),
    ]
    description = WHITESPACE_BEFORE_NEWLINE.sub("\n", "\n".join(parts))

    return title, description


def build_result(payload, project: Project, title: str) -> ProjectResult:
    """
    Turn a decoded scoring reply into a ProjectResult.

    A missing, zero or non-numeric total is recomputed from the items.
    """
    data = as_object(payload)
    items = [ScoreItem.model_validate(entry) for entry in coerce_list(data.get("items"))]

    result = ProjectResult(name=title, url=project.url, items=items)
    result.total = reported_total(data.get("total")) or result.weighted_total
    return result


def rank_results(results: Sequence[ProjectResult]) -> List[ProjectResult]:
    """Order by total, highest first; ties keep their input order"""
    return sorted(results, key=lambda result: result.total, reverse=True)


class ScoringPipeline:
    """
    Score every project against a rubric, one project at a time
    """

    def __init__(self, gemini: Optional[GeminiServices] = None):
        self.gemini = gemini or get_gemini_service()

    async def score_all(
        self,
        projects: Sequence[Project],
        rubric: Sequence[Criterion],
        model_id: str,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None
    ) -> List[ProjectResult]:
        """
        Score all projects and rank them.

        A failure while fetching, prompting or decoding one project becomes a
        zero-score result carrying the error; the other projects still run.
        """
        logging.info(f"Scoring {len(projects)} projects against {len(rubric)} criteria")

        if client is None:
            async with create_http_client() as own_client:
                results = await self._score_each(projects, rubric, model_id, api_key, own_client)
        else:
            results = await self._score_each(projects, rubric, model_id, api_key, client)

        failed = sum(1 for result in results if result.error)
        logging.info(f"Scoring completed: {len(results) - failed} scored, {failed} failed")
        return rank_results(results)

    async def _score_each(
        self,
        projects: Sequence[Project],
        rubric: Sequence[Criterion],
        model_id: str,
        api_key: Optional[str],
        client: httpx.AsyncClient
    ) -> List[ProjectResult]:
        results = []
        for project in projects:
            try:
                result = await self.score_project(project, rubric, model_id, api_key, client)
            except Exception as e:
                logging.error(f"Scoring {project.url} failed: {e}")
                result = ProjectResult(
                    name=project.name or "Untitled",
                    url=project.url,
                    items=[],
                    total=0.0,
                    error=str(e) or type(e).__name__,
                )
            results.append(result)
        return results

    async def score_project(
        self,
        project: Project,
        rubric: Sequence[Criterion],
        model_id: str,
        api_key: Optional[str],
        client: httpx.AsyncClient
    ) -> ProjectResult:
        """Fetch, prompt and decode a single project; errors propagate"""
        html = await fetch_page(project.url, client)
        title, description = extract_project_page(html, project.name)

        prompt = get_project_scoring_prompt(
            rubric=rubric,
            title=title,
            url=project.url,
            description=description[:settings.description_text_limit],
        )
        raw = await self.gemini.generate(model_id, prompt, api_key=api_key)

        result = build_result(decode(raw), project, title)
        logging.info(f"Scored {project.url}: total={result.total:.1f}")
        return result

def get_scoring_pipeline() -> ScoringPipeline:
    """Get ScoringPipeline instance"""
    return ScoringPipeline()
