"""Candidate search: choose a source, fetch, normalize.

One request takes exactly one of two paths: the existing recruiting pipeline
(local store, returned as stored) or a fresh Apify lead search (normalized into
candidates). Nothing here knows about MCP; the server injects the two I/O
callables.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable

from pydantic import BaseModel

from .clients.apify import ScrapeFailure, ScrapeResult
from .models import Candidate, CandidateSearchFilters
from .normalize import leads_to_candidates

logger = logging.getLogger(__name__)

ScrapeFn = Callable[[dict], Awaitable[ScrapeResult]]
LoadFn = Callable[[], Awaitable[list[Candidate]]]


class ProspectSearchError(RuntimeError):
    """The remote lead search failed; no candidates are returned."""


class CandidateSource(str, Enum):
    """Where a result's candidates came from."""

    PIPELINE = "pipeline"
    APIFY = "apify"


class CandidateSearchResult(BaseModel):
    """Candidates for one tool call, tagged with the source branch used."""

    source: CandidateSource
    candidates: list[Candidate]

    @property
    def count(self) -> int:
        return len(self.candidates)


async def search_candidates(
    filters: CandidateSearchFilters,
    *,
    scrape: ScrapeFn,
    load_existing: LoadFn,
) -> CandidateSearchResult:
    """Run one candidate search.

    Args:
        filters: Validated request.
        scrape: Runs the lead scraper with a payload dict.
        load_existing: Reads the existing pipeline candidates.

    Raises:
        ProspectSearchError: The lead scraper failed.
    """
    if filters.use_existing_candidates:
        logger.info("Loading candidates from the existing pipeline")
        candidates = await load_existing()
        return CandidateSearchResult(source=CandidateSource.PIPELINE, candidates=candidates)

    outcome = await scrape(filters.to_payload())
    if isinstance(outcome, ScrapeFailure):
        raise ProspectSearchError(
            f"Failed to fetch prospects from Apify: {outcome.reason or 'Unknown error'}"
        )

    candidates = leads_to_candidates(outcome.leads)
    logger.info("Lead search produced %d candidates", len(candidates))
    return CandidateSearchResult(source=CandidateSource.APIFY, candidates=candidates)


def summarize(result: CandidateSearchResult) -> str:
    """One-line, human-readable summary for the tool response."""
    where = (
        " in the recruiting pipeline"
        if result.source == CandidateSource.PIPELINE
        else " from Apify lead search"
    )
    return (
        f"Found {result.count} candidates{where}. "
        "The interactive widget displays candidate information including name, title, location, "
        "experience, skills, and current stage in the hiring process."
    )
