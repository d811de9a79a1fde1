from __future__ import annotations

from jobgen.models import JobDetail
from jobgen.utils import now_utc_iso

FIXED_REQUIREMENTS = (
    "5+ years of experience",
    "Strong problem-solving skills",
    "Team player",
    "Excellent communication",
)


def lookup_job_detail(job_id: str) -> JobDetail:
    """Echo the id back on the same canned record; nothing is looked up."""
    return JobDetail(
        id=job_id,
        title="Senior Software Engineer",
        company="Tech Innovations Inc.",
        location="Remote",
        description=(
            "Exciting opportunity for an experienced software engineer to join our dynamic team."
        ),
        requirements=list(FIXED_REQUIREMENTS),
        salary="$100,000 - $150,000",
        posted=now_utc_iso(),
    )
