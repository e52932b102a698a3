"""Pydantic data models — candidates, leads and the search request.

Candidates are the canonical output records rendered by the recruiting widget.
Leads are the loosely shaped records returned by the lead scraper. The search
filters model is the validated tool request.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Seniority(str, Enum):
    """Seniority levels understood by the lead scraper."""

    C_SUITE = "C-Suite"
    VP = "VP"
    DIRECTOR = "Director"
    MANAGER = "Manager"
    SENIOR = "Senior"
    ENTRY = "Entry"


class FunctionalArea(str, Enum):
    """Functional areas understood by the lead scraper."""

    SALES = "Sales"
    MARKETING = "Marketing"
    ENGINEERING = "Engineering"
    OPERATIONS = "Operations"
    FINANCE = "Finance"
    HUMAN_RESOURCES = "Human Resources"
    LEGAL = "Legal"
    IT = "IT"


class EmployeeSize(str, Enum):
    """Company headcount buckets.

    Values are the scraper's own labels. Compact spellings such as ``"2-10"``
    are accepted and resolved to the spaced label.
    """

    ONE = "1"
    TWO_TO_TEN = "2 - 10"
    ELEVEN_TO_FIFTY = "11 - 50"
    FIFTY_ONE_TO_200 = "51 - 200"
    TWO_HUNDRED_ONE_TO_500 = "201 - 500"
    FIVE_HUNDRED_ONE_TO_1000 = "501 - 1000"
    ONE_THOUSAND_ONE_TO_5000 = "1001 - 5000"
    FIVE_THOUSAND_ONE_TO_10000 = "5001 - 10000"
    OVER_10000 = "10001+"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            compact = value.replace(" ", "")
            for member in cls:
                if member.value.replace(" ", "") == compact:
                    return member
        return None


class EmailStatus(str, Enum):
    """Contact email verification status."""

    VERIFIED = "Verified"
    UNVERIFIED = "Unverified"


TotalResults = Annotated[int, Field(ge=1, le=50000)]


class Candidate(BaseModel):
    """A recruiting candidate as rendered by the widget."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    years_of_experience: int = 0
    skills: tuple[str, ...] = ()
    stage: str = ""

    def to_json(self) -> dict:
        """Camel-cased dict, the shape the widget and the tool response use."""
        return self.model_dump(by_alias=True, mode="json", exclude_unset=True)


class Lead(BaseModel):
    """A raw lead record from the scraper. Any field may be missing."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    full_name: Optional[str] = None
    position: Optional[str] = None
    seniority: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    functional: Optional[str] = None
    org_industry: Optional[str] = None


class CandidateSearchFilters(BaseModel):
    """Validated ``list_candidates`` request.

    Every filter is optional; ``None`` means the caller did not filter on that
    dimension and the field is left out of the scraper payload entirely.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    # Person filters
    person_title: Optional[list[str]] = None
    seniority: Optional[list[Seniority]] = None
    functional: Optional[list[FunctionalArea]] = None
    person_country: Optional[list[str]] = None
    person_state: Optional[list[str]] = None
    person_city: Optional[list[str]] = None

    # Company filters
    company_keyword: Optional[list[str]] = None
    company_industry: Optional[list[str]] = None
    company_employee_size: Optional[list[EmployeeSize]] = None
    company_domain: Optional[list[str]] = None
    company_country: Optional[list[str]] = None
    company_state: Optional[list[str]] = None
    company_city: Optional[list[str]] = None

    # Quality filters
    contact_email_status: Optional[list[EmailStatus]] = None
    has_email: Optional[bool] = None
    has_phone: Optional[bool] = None

    # Output control
    total_results: Optional[TotalResults] = None

    use_existing_candidates: bool = False

    def to_payload(self) -> dict:
        """Scraper input: camelCase keys for supplied filters only."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"use_existing_candidates"},
            mode="json",
        )
