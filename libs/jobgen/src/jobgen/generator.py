from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import datetime, timedelta

from jobgen.locales import WESTERN, LocaleProfile
from jobgen.models import JobListing
from jobgen.utils import epoch_millis, to_iso, utc_now

MIN_LISTINGS = 3
MAX_LISTINGS = 7
POSTED_WINDOW = timedelta(days=7)
LOGGER = logging.getLogger("jobportal.jobgen")


def detail_link(job_id: str) -> str:
    return f"/api/jobs/{job_id}"


class MockJobGenerator:
    """Fabricates between three and seven listings for a query.

    Category, company and (when no location is given) location are picked
    cyclically by position, so only the list length and the dates and salaries
    vary between calls with the same query.
    """

    def __init__(
        self,
        profile: LocaleProfile = WESTERN,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.profile = profile
        # Listings are presentation filler: keep the fast non-cryptographic PRNG here.
        # Never replace it with secrets or random.SystemRandom.
        self.rng = rng or random.Random()
        self.clock = clock

    def with_profile(self, profile: LocaleProfile) -> MockJobGenerator:
        if profile is self.profile:
            return self
        return MockJobGenerator(profile, rng=self.rng, clock=self.clock)

    def generate(self, query: str, location: str | None = None) -> list[JobListing]:
        if not query:
            raise ValueError("query must be a non-empty string")

        now = self.clock()
        count = self.rng.randint(MIN_LISTINGS, MAX_LISTINGS)
        listings = [self._build_listing(index, query, location, now) for index in range(count)]
        LOGGER.debug(
            "generated %d listings for query=%r location=%r profile=%s",
            count,
            query,
            location,
            self.profile.name,
        )
        return listings

    def _build_listing(
        self,
        index: int,
        query: str,
        location: str | None,
        now: datetime,
    ) -> JobListing:
        profile = self.profile
        category = profile.categories[index % len(profile.categories)]
        company = profile.companies[index % len(profile.companies)]
        resolved_location = location or profile.locations[index % len(profile.locations)]
        job_id = f"job-{epoch_millis(now)}-{index}"

        listing = JobListing(
            id=job_id,
            title=profile.title_template.format(category=category, query=query),
            company=company,
            location=resolved_location,
            description=profile.description_template.format(
                query=query,
                query_lower=query.lower(),
                company=company,
            ),
            posted_date=to_iso(now - self.rng.random() * POSTED_WINDOW),
            salary_range=self._salary_range(),
            link=detail_link(job_id),
        )
        if profile.recruitment_details:
            listing = self._with_recruitment_details(listing, index, now)
        return listing

    def _salary_range(self) -> str:
        bounds = self.profile.salary
        first = (bounds.low_base + self.rng.randrange(bounds.low_spread)) * bounds.unit
        second = (bounds.high_base + self.rng.randrange(bounds.high_spread)) * bounds.unit
        low, high = sorted((first, second))
        return self.profile.format_salary_range(low, high)

    def _with_recruitment_details(
        self,
        listing: JobListing,
        index: int,
        now: datetime,
    ) -> JobListing:
        eligibility = self.profile.eligibility[index % len(self.profile.eligibility)]
        deadline = now + timedelta(days=self.rng.randint(15, 45))
        exam_date = deadline + timedelta(days=self.rng.randint(30, 60))
        return listing.model_copy(
            update={
                "eligibility": eligibility,
                "deadline": deadline.date().isoformat(),
                "exam_date": exam_date.date().isoformat(),
                "vacancies": self.rng.randint(10, 500),
            }
        )


def generate_mock_jobs(
    query: str,
    location: str | None = None,
    profile: LocaleProfile = WESTERN,
    *,
    rng: random.Random | None = None,
) -> list[JobListing]:
    return MockJobGenerator(profile, rng=rng).generate(query, location)
