"""Recruiting Candidates MCP Server.

FastMCP server with one tool, ``list_candidates``, and the recruiting widget
served as an MCP resource.
Run: recruiting-mcp
"""

from __future__ import annotations

import logging
import os
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent, ToolAnnotations
from pydantic import Field

from . import get_widgets
from .core.clients import apify
from .core.clients.apify import ScrapeResult
from .core.models import (
    CandidateSearchFilters,
    EmailStatus,
    EmployeeSize,
    FunctionalArea,
    Seniority,
    TotalResults,
)
from .core.search import CandidateSearchResult, LoadFn, ScrapeFn, search_candidates, summarize
from .store import load_candidates
from .widgets import WIDGET_MIME, WidgetRegistry, widget_meta, widget_resource_meta

logger = logging.getLogger(__name__)

RECRUITING_WIDGET = "recruiting"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=False, openWorldHint=True)

TOOL_DESCRIPTION = (
    "Searches for and displays recruiting candidates/prospects using Apify lead scraper. "
    "You can filter by person title, seniority, location, company details, and more."
)


def _get_apify_token() -> str:
    token = os.environ.get("APIFY_API_TOKEN", "")
    if not token:
        raise ValueError("APIFY_API_TOKEN environment variable is required. Find your token at https://console.apify.com/settings/integrations")
    return token


async def scrape_with_env_token(payload: dict) -> ScrapeResult:
    """Default scraper: the Apify actor, authenticated from the environment."""
    return await apify.scrape_leads(payload, _get_apify_token())


def build_tool_result(result: CandidateSearchResult) -> CallToolResult:
    """Wrap a search result in the tool response envelope the widget expects."""
    return CallToolResult(
        content=[TextContent(type="text", text=summarize(result))],
        structuredContent={"candidates": [c.to_json() for c in result.candidates]},
        _meta=widget_meta(RECRUITING_WIDGET),
    )


def _widget_reader(widgets: WidgetRegistry, uri: str):
    def read() -> str:
        return widgets.read(uri).html

    return read


def create_server(
    widgets: WidgetRegistry,
    scrape: Optional[ScrapeFn] = None,
    load_existing: Optional[LoadFn] = None,
) -> FastMCP:
    """Build the MCP server around an already-loaded widget registry.

    Args:
        widgets: Widgets to expose as ``ui://widget/<name>.html`` resources.
        scrape: Lead scraper call. Defaults to the Apify actor.
        load_existing: Existing pipeline reader. Defaults to the local JSON store.
    """
    scrape = scrape or scrape_with_env_token
    load_existing = load_existing or load_candidates

    server = FastMCP(
        "Recruiting Candidates",
        instructions="Search recruiting candidates and prospects, or list the existing hiring pipeline, and show them in an interactive table.",
    )

    # ─── Widget resources ─────────────────────────────────────────────────────

    for widget in widgets.values():
        server.resource(
            widget.uri,
            name=widget.resource_name,
            title=widget.title,
            description=widget.description,
            mime_type=WIDGET_MIME,
            meta=widget_resource_meta(widget.name),
        )(_widget_reader(widgets, widget.uri))

    # ─── Tool: list_candidates ────────────────────────────────────────────────

    @server.tool(
        name="list_candidates",
        title="List Recruiting Candidates",
        description=TOOL_DESCRIPTION,
        annotations=READ_ONLY,
        meta=widget_meta(RECRUITING_WIDGET),
    )
    async def list_candidates(  # noqa: N803
        personTitle: Annotated[Optional[list[str]], Field(description="Filter by person job titles (e.g., ['Software Engineer', 'Product Manager'])")] = None,
        seniority: Annotated[Optional[list[Seniority]], Field(description="Filter by seniority level")] = None,
        functional: Annotated[Optional[list[FunctionalArea]], Field(description="Filter by functional area")] = None,
        personCountry: Annotated[Optional[list[str]], Field(description="Filter by person country")] = None,
        personState: Annotated[Optional[list[str]], Field(description="Filter by person state")] = None,
        personCity: Annotated[Optional[list[str]], Field(description="Filter by person city")] = None,
        companyKeyword: Annotated[Optional[list[str]], Field(description="Filter by company keywords")] = None,
        companyIndustry: Annotated[Optional[list[str]], Field(description="Filter by company industry")] = None,
        companyEmployeeSize: Annotated[Optional[list[EmployeeSize]], Field(description="Filter by company employee size")] = None,
        companyDomain: Annotated[Optional[list[str]], Field(description="Filter by company domain (e.g., ['example.com'])")] = None,
        companyCountry: Annotated[Optional[list[str]], Field(description="Filter by company country")] = None,
        companyState: Annotated[Optional[list[str]], Field(description="Filter by company state")] = None,
        companyCity: Annotated[Optional[list[str]], Field(description="Filter by company city")] = None,
        contactEmailStatus: Annotated[Optional[list[EmailStatus]], Field(description="Filter by email verification status")] = None,
        hasEmail: Annotated[Optional[bool], Field(description="Require email address")] = None,
        hasPhone: Annotated[Optional[bool], Field(description="Require phone number")] = None,
        totalResults: Annotated[Optional[TotalResults], Field(description="Maximum number of results to return (default: 100, max: 50000 for paid tier)")] = None,
        useExistingCandidates: Annotated[bool, Field(description="If true, returns existing candidates from the pipeline instead of searching for new prospects")] = False,
    ) -> CallToolResult:
        filters = CandidateSearchFilters(
            person_title=personTitle,
            seniority=seniority,
            functional=functional,
            person_country=personCountry,
            person_state=personState,
            person_city=personCity,
            company_keyword=companyKeyword,
            company_industry=companyIndustry,
            company_employee_size=companyEmployeeSize,
            company_domain=companyDomain,
            company_country=companyCountry,
            company_state=companyState,
            company_city=companyCity,
            contact_email_status=contactEmailStatus,
            has_email=hasEmail,
            has_phone=hasPhone,
            total_results=totalResults,
            use_existing_candidates=useExistingCandidates,
        )
        result = await search_candidates(filters, scrape=scrape, load_existing=load_existing)
        return build_tool_result(result)

    return server


def main():
    """Entry point for the CLI command."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    server = create_server(get_widgets())
    transport = os.environ.get("MCP_TRANSPORT", "streamable-http")
    logger.info("Starting recruiting MCP server (transport: %s)", transport)
    server.run(transport=transport)


if __name__ == "__main__":
    main()
