import json
import logging
from pathlib import Path
from typing import Optional

import aiofiles
from pydantic import ValidationError

from hackathon_scorer.config import get_settings
from hackathon_scorer.models.session import SessionState

settings = get_settings()


class SessionStore:
    """
    JSON file holding the SessionState between runs
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or settings.session_file)

    async def load(self) -> SessionState:
        """Read the saved state; a missing or unreadable file gives a fresh one"""
        if not self.path.exists():
            return SessionState()

        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = await f.read()
            return SessionState.model_validate_json(raw)
        except (OSError, ValueError, ValidationError) as e:
            logging.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return SessionState()

    async def save(self, state: SessionState) -> SessionState:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        body = json.dumps(state.model_dump(mode="json", exclude_none=True), ensure_ascii=False, indent=2)
        async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
            await f.write(body)

        logging.info(
            f"Saved session: {len(state.projects)} projects, "
            f"{len(state.rubric)} criteria, {len(state.results)} results"
        )
        return state

def get_session_store() -> SessionStore:
    """Get SessionStore instance"""
    return SessionStore()
