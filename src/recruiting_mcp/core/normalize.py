"""Lead → Candidate normalization.

Maps the scraper's flat lead records onto the canonical candidate shape.
Pure and deterministic: the same lead at the same index always produces the
same candidate.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .models import Candidate, Lead, Seniority

logger = logging.getLogger(__name__)

ID_PREFIX = "apify"
DEFAULT_STAGE = "Screening"
UNKNOWN_NAME = "Unknown"

DEFAULT_YEARS = 2

YEARS_BY_SENIORITY: dict[str, int] = {
    Seniority.C_SUITE.value: 15,
    Seniority.VP.value: 15,
    Seniority.DIRECTOR.value: 10,
    Seniority.MANAGER.value: 7,
    Seniority.SENIOR.value: 5,
}


def derive_years(seniority: Optional[str]) -> int:
    """Estimate years of experience from a seniority label.

    Unrecognized and missing labels (including ``"Entry"``) fall back to 2.
    """
    if seniority is None:
        return DEFAULT_YEARS
    return YEARS_BY_SENIORITY.get(seniority, DEFAULT_YEARS)


def lead_to_candidate(lead: Lead, index: int) -> Candidate:
    """Convert one scraped lead at position ``index`` into a candidate."""
    email = lead.email or ""
    skills = tuple(s for s in (lead.functional, lead.org_industry) if s)

    return Candidate(
        id=f"{ID_PREFIX}-{index}-{email}",
        name=lead.full_name or UNKNOWN_NAME,
        title=lead.position or "",
        email=email,
        phone=lead.phone or "",
        # Both sides always present, even when one is empty.
        location=f"{lead.city or ''}, {lead.state or ''}",
        years_of_experience=derive_years(lead.seniority),
        skills=skills,
        stage=DEFAULT_STAGE,
    )


def leads_to_candidates(leads: Iterable[Lead]) -> list[Candidate]:
    """Normalize a whole scrape result, preserving order."""
    candidates = [lead_to_candidate(lead, index) for index, lead in enumerate(leads)]
    logger.debug("Normalized %d leads into candidates", len(candidates))
    return candidates
