"""Apify lead scraper client.

API docs: https://docs.apify.com/api/v2#/reference/actors/run-actor-synchronously-and-get-dataset-items
Runs the lead scraper actor synchronously and returns the dataset items.
Authentication via API token (Bearer header).
"""

from __future__ import annotations

import logging
import os
from typing import Literal, Optional, Union

import httpx
from pydantic import BaseModel, Field, ValidationError

from ..models import Lead

logger = logging.getLogger(__name__)

API_BASE = "https://api.apify.com/v2"

DEFAULT_ACTOR_ID = "code_crafter~leads-finder"
DEFAULT_TIMEOUT_SECONDS = 300.0


class ScrapeSuccess(BaseModel):
    """The actor finished and returned its full dataset."""

    ok: Literal[True] = True
    leads: list[Lead]


class ScrapeFailure(BaseModel):
    """The actor run failed as a unit."""

    ok: Literal[False] = False
    reason: Optional[str] = Field(None, description="Underlying failure message, when one is available")


ScrapeResult = Union[ScrapeSuccess, ScrapeFailure]


def get_actor_id() -> str:
    return os.environ.get("APIFY_LEAD_SCRAPER_ACTOR", DEFAULT_ACTOR_ID)


def get_timeout() -> httpx.Timeout:
    seconds = float(os.environ.get("APIFY_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))
    return httpx.Timeout(seconds, connect=10.0)


def _error_message(response: httpx.Response) -> Optional[str]:
    """Pull the message out of an Apify error body: {"error": {"type", "message"}}."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message")
    return None


async def scrape_leads(
    payload: dict,
    api_token: str,
    actor_id: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ScrapeResult:
    """Run the lead scraper actor with ``payload`` as its input.

    Args:
        payload: Actor input, already stripped of unset filters.
        api_token: Apify API token.
        actor_id: Actor to run. Defaults to APIFY_LEAD_SCRAPER_ACTOR.
        transport: Optional httpx transport override.

    Returns:
        ScrapeSuccess with every lead, or ScrapeFailure carrying the reason.
        Network, HTTP and response-shape problems never raise.
    """
    actor = actor_id or get_actor_id()
    url = f"{API_BASE}/acts/{actor}/run-sync-get-dataset-items"
    headers = {"Authorization": f"Bearer {api_token}"}

    logger.info("Running Apify actor %s with filters: %s", actor, ", ".join(sorted(payload)) or "none")
    try:
        async with httpx.AsyncClient(timeout=get_timeout(), transport=transport) as client:
            response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            items = response.json()
    except httpx.HTTPStatusError as exc:
        reason = _error_message(exc.response) or str(exc)
        logger.warning("Apify actor %s returned HTTP %d: %s", actor, exc.response.status_code, reason)
        return ScrapeFailure(reason=reason)
    except httpx.HTTPError as exc:
        reason = str(exc) or type(exc).__name__
        logger.warning("Apify actor %s request failed: %s", actor, reason)
        return ScrapeFailure(reason=reason)
    except ValueError as exc:
        logger.warning("Apify actor %s returned invalid JSON: %s", actor, exc)
        return ScrapeFailure(reason=f"Invalid JSON response: {exc}")

    if not isinstance(items, list):
        logger.warning("Apify actor %s returned %s instead of a list", actor, type(items).__name__)
        return ScrapeFailure(reason=f"Expected a list of leads, got {type(items).__name__}")

    try:
        leads = [Lead.model_validate(item) for item in items]
    except ValidationError as exc:
        return ScrapeFailure(reason=f"Malformed lead record: {exc.error_count()} validation error(s)")

    logger.info("Apify actor %s returned %d leads", actor, len(leads))
    return ScrapeSuccess(leads=leads)
