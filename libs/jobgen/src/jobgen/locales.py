"""Locale profiles for mock listing generation.

A profile bundles the lookup tables, title and description templates, currency
symbol and digit grouping used by one generation call. Profiles are immutable
and shared across requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

GROUPING_WESTERN = "western"
GROUPING_INDIAN = "indian"

Grouping = Literal["western", "indian"]


@dataclass(frozen=True)
class SalaryBounds:
    unit: int
    low_base: int
    low_spread: int
    high_base: int
    high_spread: int


@dataclass(frozen=True)
class LocaleProfile:
    name: str
    currency_symbol: str
    grouping: Grouping
    categories: tuple[str, ...]
    companies: tuple[str, ...]
    locations: tuple[str, ...]
    title_template: str
    description_template: str
    salary: SalaryBounds
    recruitment_details: bool = False
    eligibility: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for table_name in ("categories", "companies", "locations"):
            if not getattr(self, table_name):
                raise ValueError(f"Locale profile '{self.name}' has an empty {table_name} table.")
        if self.recruitment_details and not self.eligibility:
            raise ValueError(
                f"Locale profile '{self.name}' enables recruitment details without eligibility."
            )

    def format_amount(self, value: int) -> str:
        return f"{self.currency_symbol}{group_digits(value, self.grouping)}"

    def format_salary_range(self, low: int, high: int) -> str:
        return f"{self.format_amount(low)} - {self.format_amount(high)}"


def group_digits(value: int, grouping: Grouping) -> str:
    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    if grouping == GROUPING_WESTERN:
        return f"{sign}{int(digits):,}"
    if grouping != GROUPING_INDIAN:
        raise ValueError(f"Unsupported digit grouping: {grouping}")

    # Indian grouping: the last three digits, then pairs (1,00,000 = one lakh).
    if len(digits) <= 3:
        return f"{sign}{digits}"
    head, tail = digits[:-3], digits[-3:]
    pairs: list[str] = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return f"{sign}{','.join(pairs)},{tail}"


WESTERN = LocaleProfile(
    name="western",
    currency_symbol="$",
    grouping=GROUPING_WESTERN,
    categories=("Senior", "Junior", "Lead", "Principal", "Staff"),
    companies=(
        "Tech Innovations Inc.",
        "Global Solutions Corp",
        "StartUp Ventures",
        "Enterprise Systems Ltd",
        "Remote Work Hub",
        "Digital Dynamics",
        "Future Tech Labs",
        "Cloud Computing Co.",
    ),
    locations=(
        "Remote",
        "San Francisco, CA",
        "New York, NY",
        "Austin, TX",
        "Seattle, WA",
        "Boston, MA",
    ),
    title_template="{category} {query}",
    description_template=(
        "Exciting opportunity for {query_lower} role. Join our team and work on "
        "innovative projects with cutting-edge technology."
    ),
    salary=SalaryBounds(unit=1000, low_base=60, low_spread=100, high_base=100, high_spread=100),
)

INDIA = LocaleProfile(
    name="india",
    currency_symbol="₹",
    grouping=GROUPING_INDIAN,
    categories=(
        "Civil Services",
        "Clerical Cadre",
        "Technical Posts",
        "Officer Grade",
        "Group A/B/C/D",
    ),
    companies=(
        "Union Public Service Commission (UPSC)",
        "Staff Selection Commission (SSC)",
        "Railway Recruitment Board (RRB)",
        "Institute of Banking Personnel Selection (IBPS)",
        "State Public Service Commission",
        "Defence Recruitment",
        "Central Government Ministry",
        "State Government Department",
    ),
    locations=(
        "All India",
        "Delhi",
        "Mumbai",
        "Bangalore",
        "Kolkata",
        "Chennai",
        "Hyderabad",
        "Multiple Locations",
    ),
    title_template="{query} - {category}",
    description_template=(
        "Applications invited for {query_lower} positions in {company}. Government "
        "opportunity with excellent career growth and benefits. Educational "
        "qualifications and age criteria apply."
    ),
    salary=SalaryBounds(unit=10000, low_base=25, low_spread=50, high_base=60, high_spread=90),
    recruitment_details=True,
    eligibility=(
        "Graduate in any discipline",
        "12th pass from a recognised board",
        "Engineering degree or diploma",
        "Post-graduate degree",
        "10th pass with ITI certificate",
    ),
)

PROFILES: dict[str, LocaleProfile] = {profile.name: profile for profile in (WESTERN, INDIA)}
DEFAULT_PROFILE_NAME = WESTERN.name


class UnknownLocaleError(LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown locale profile: {name}")
        self.name = name


def get_locale_profile(name: str | None) -> LocaleProfile:
    key = (name or DEFAULT_PROFILE_NAME).strip().lower()
    try:
        return PROFILES[key]
    except KeyError as exc:
        raise UnknownLocaleError(key) from exc
