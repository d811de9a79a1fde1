from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JobListing(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Opaque identifier, unique only within one response")
    title: str
    company: str
    location: str
    description: str
    posted_date: str = Field(..., alias="posted")
    salary_range: str = Field(..., alias="salary")
    link: str | None = None
    eligibility: str | None = None
    deadline: str | None = None
    exam_date: str | None = None
    vacancies: int | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SearchRequest(BaseModel):
    query: str | None = None
    location: str | None = None
    locale: str | None = None


class SearchResponse(BaseModel):
    success: bool = True
    count: int
    query: str
    location: str
    jobs: list[dict[str, Any]] = Field(default_factory=list)


class JobDetail(BaseModel):
    id: str
    title: str
    company: str
    location: str
    description: str
    requirements: list[str] = Field(default_factory=list)
    salary: str
    posted: str


class HealthStatus(BaseModel):
    status: str
    message: str
    version: str
    timestamp: str
