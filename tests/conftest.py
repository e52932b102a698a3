import json

import pytest

from recruiting_mcp.core.clients.apify import ScrapeFailure, ScrapeSuccess
from recruiting_mcp.core.models import Lead


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def stored_candidates():
    return [
        {
            "id": "cand-1",
            "name": "Ada Lovelace",
            "title": "Staff Engineer",
            "email": "ada@example.com",
            "phone": "",
            "location": "London, UK",
            "yearsOfExperience": 12,
            "skills": ["Mathematics", "Engineering"],
            "stage": "Interview",
        },
        {
            "id": "cand-2",
            "name": "Grace Hopper",
            "title": "Engineering Director",
            "email": "grace@example.com",
            "phone": "+1 555 0100",
            "location": "Arlington, VA",
            "yearsOfExperience": 30,
            "skills": ["Compilers"],
            "stage": "Offer",
        },
    ]


@pytest.fixture
def candidates_file(tmp_path, stored_candidates):
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps(stored_candidates), encoding="utf-8")
    return path


@pytest.fixture
def raw_leads():
    return [
        {
            "fullName": "Jordan Lee",
            "position": "VP Engineering",
            "seniority": "VP",
            "email": "jordan@acme.io",
            "phone": "+1 512 555 0199",
            "city": "Austin",
            "state": "TX",
            "functional": "Engineering",
            "orgIndustry": "Software",
            "linkedinUrl": "https://linkedin.com/in/jordanlee",
        },
        {
            "fullName": "Sam Rivera",
            "position": "Recruiter",
            "seniority": "Entry",
            "email": "sam@globex.com",
            "city": "",
            "state": "California",
            "functional": "Human Resources",
            "orgIndustry": None,
        },
    ]


class FakeScraper:
    """Records every payload and returns a canned outcome."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.payloads = []

    async def __call__(self, payload):
        self.payloads.append(payload)
        return self.outcome


class FakeStore:
    def __init__(self, candidates):
        self.candidates = candidates
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.candidates


@pytest.fixture
def scraper(raw_leads):
    return FakeScraper(ScrapeSuccess(leads=[Lead.model_validate(item) for item in raw_leads]))


@pytest.fixture
def failing_scraper():
    return FakeScraper(ScrapeFailure(reason="timeout"))


@pytest.fixture
def assets_dir(tmp_path):
    path = tmp_path / "assets"
    path.mkdir()
    (path / "recruiting.html").write_text("<html><body>recruiting</body></html>", encoding="utf-8")
    (path / "notes.txt").write_text("not a widget", encoding="utf-8")
    return path
