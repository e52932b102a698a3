"""Local candidate store — the existing recruiting pipeline.

Candidates are read from a JSON array, data/candidates.json inside the package
by default. Set CANDIDATES_PATH to point at another file. The store is
read-only here and read wholesale on every request.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import anyio
from pydantic import TypeAdapter

from .core.models import Candidate

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATES_PATH = Path(__file__).parent / "data" / "candidates.json"

_candidate_list = TypeAdapter(list[Candidate])


def get_candidates_path() -> Path:
    """Get the candidate store path."""
    return Path(os.environ.get("CANDIDATES_PATH", DEFAULT_CANDIDATES_PATH))


async def load_candidates(path: Optional[Path] = None) -> list[Candidate]:
    """Read every stored candidate, in stored order."""
    path = path or get_candidates_path()
    raw = await anyio.Path(path).read_text(encoding="utf-8")
    candidates = _candidate_list.validate_json(raw)
    logger.info("Loaded %d candidates from %s", len(candidates), path)
    return candidates
