"""
Gallery Harvester - hackathon project listings

Collect project links from a gallery page (Devpost and similar hosts).

Anchors count as projects when their href contains /project/ or /software/
and their text is longer than two characters. This is a heuristic: gallery
markup varies between hosts and missed projects are accepted.
"""
import re
import logging
from typing import List, Optional
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from hackathon_scorer.config import get_settings
from hackathon_scorer.errors import FetchError
from hackathon_scorer.models.project import Project

settings = get_settings()

PROJECT_HREF_PATTERN = re.compile(r"/(project|software)/", re.IGNORECASE)
MIN_NAME_LENGTH = 3

# Some gallery hosts reject default client identifiers
HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": settings.http_user_agent,
}


def create_http_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """HTTP client used for gallery and project pages"""
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        headers=HEADERS,
        follow_redirects=True,
        transport=transport,
    )


async def fetch_page(url: str, client: httpx.AsyncClient) -> str:
    """GET a page and return its markup, raising FetchError on any failure"""
    if not url:
        raise FetchError(url, reason="missing URL")

    logging.info(f"Fetching {url}")
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logging.error(f"Fetch {url} failed: {e}")
        raise FetchError(url, reason=str(e) or type(e).__name__) from e

    if not response.is_success:
        logging.error(f"Fetch {url} returned {response.status_code}")
        raise FetchError(url, status_code=response.status_code)

    return response.text


def absolute_url(href: str, base: str) -> str:
    """Resolve href against base, falling back to the raw href"""
    try:
        return urljoin(base, href)
    except ValueError:
        return href


def parse_gallery(html: str, page_url: str) -> List[Project]:
    """Pick project links out of gallery markup, deduplicated by URL"""
    soup = BeautifulSoup(html, "html.parser")

    projects: List[Project] = []
    seen_urls = set()

    for anchor in soup.find_all("a"):
        href = anchor.get("href") or ""
        name = anchor.get_text().strip()

        if not PROJECT_HREF_PATTERN.search(href) or len(name) < MIN_NAME_LENGTH:
            continue

        url = absolute_url(href, page_url)
        if url in seen_urls:
            continue

        seen_urls.add(url)
        projects.append(Project(name=name, url=url))

    return projects


async def harvest(page_url: str, client: Optional[httpx.AsyncClient] = None) -> List[Project]:
    """
    Fetch a gallery page and return the projects it links to.

    Args:
        page_url: Gallery listing URL
        client: Optional open client; a short-lived one is created otherwise

    Returns:
        Projects in order of first appearance
    """
    if client is None:
        async with create_http_client() as own_client:
            html = await fetch_page(page_url, own_client)
    else:
        html = await fetch_page(page_url, client)

    projects = parse_gallery(html, page_url)
    logging.info(f"Found {len(projects)} projects on {page_url}")
    return projects
