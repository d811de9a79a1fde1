"""Structured rendering of listings for the portal page.

Everything the page displays is built as a ``Node`` tree. Text and attribute
values stay data until serialisation, where they are escaped; the page rebuilds
the tree with ``createElement``/``textContent`` and never assigns raw markup.
"""

from __future__ import annotations

import html
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from jobgen.models import JobListing

NO_RESULTS_MESSAGE = "NO JOBS FOUND. TRY A DIFFERENT SEARCH."
RESULTS_HEADING = "SEARCH RESULTS"
VIEW_DETAILS = "[ VIEW DETAILS ]"
ERROR_DISMISS_MS = 5000
SAFE_HREF_PREFIXES = ("#", "/", "http://", "https://")


@dataclass
class Node:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    text: str | None = None
    children: list[Node] = field(default_factory=list)

    def append(self, child: Node) -> Node:
        self.children.append(child)
        return self

    @property
    def class_name(self) -> str:
        return self.attrs.get("class", "")

    def walk(self) -> Iterator[Node]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, class_name: str) -> list[Node]:
        return [node for node in self.walk() if class_name in node.class_name.split()]

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"tag": self.tag}
        if self.attrs:
            payload["attrs"] = dict(self.attrs)
        if self.text is not None:
            payload["text"] = self.text
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload

    def to_html(self) -> str:
        attrs = "".join(
            f' {name}="{html.escape(value, quote=True)}"' for name, value in self.attrs.items()
        )
        inner = html.escape(self.text, quote=False) if self.text is not None else ""
        inner += "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def element(
    tag: str,
    text: str | None = None,
    *,
    class_name: str | None = None,
    **attrs: str,
) -> Node:
    resolved = {name.replace("_", "-"): value for name, value in attrs.items()}
    if class_name:
        resolved = {"class": class_name, **resolved}
    return Node(tag=tag, attrs=resolved, text=text)


def safe_href(link: str | None) -> str:
    if link and link.strip().lower().startswith(SAFE_HREF_PREFIXES):
        return link.strip()
    return "#"


def render_no_results() -> Node:
    return element("p", NO_RESULTS_MESSAGE, class_name="error-message")


def render_inline_error(message: str, *, dismiss_after_ms: int = ERROR_DISMISS_MS) -> Node:
    return element(
        "div",
        message,
        class_name="error-message",
        data_dismiss_after_ms=str(dismiss_after_ms),
    )


class JobCardRenderer:
    """Turns listings into card nodes.

    The enhanced variant also shows eligibility, deadline, exam date and vacancy
    count, each only when the listing carries it.
    """

    def __init__(self, *, enhanced: bool = True) -> None:
        self.enhanced = enhanced

    def render_card(self, listing: JobListing, index: int = 0) -> Node:
        card = element("div", class_name="job-card", style=f"animation-delay: {index * 0.1:.1f}s")
        card.append(element("h4", f"► {listing.title}", class_name="job-title"))
        card.append(element("p", f"COMPANY: {listing.company}", class_name="job-company"))
        card.append(element("p", f"LOCATION: {listing.location}", class_name="job-location"))
        if listing.salary_range:
            card.append(element("p", f"SALARY: {listing.salary_range}", class_name="job-salary"))
        if listing.posted_date:
            posted = listing.posted_date[:10]
            card.append(element("p", f"POSTED: {posted}", class_name="job-posted"))
        card.append(element("p", listing.description, class_name="job-description"))

        if self.enhanced:
            for node in self._optional_fields(listing):
                card.append(node)

        card.append(element("a", VIEW_DETAILS, class_name="job-link", href=safe_href(listing.link)))
        return card

    def render_results(self, listings: Sequence[JobListing]) -> list[Node]:
        if not listings:
            return [render_no_results()]

        header = element("div", class_name="results-header")
        heading = element("h3")
        heading.append(element("span", "►", class_name="blink"))
        heading.append(element("span", f" {RESULTS_HEADING}"))
        header.append(heading)
        cards = [self.render_card(listing, index) for index, listing in enumerate(listings)]
        return [header, *cards]

    def _optional_fields(self, listing: JobListing) -> list[Node]:
        nodes: list[Node] = []
        if listing.eligibility:
            nodes.append(
                element("p", f"ELIGIBILITY: {listing.eligibility}", class_name="job-eligibility")
            )
        if listing.deadline:
            nodes.append(element("p", f"LAST DATE: {listing.deadline}", class_name="job-deadline"))
        if listing.exam_date:
            nodes.append(
                element("p", f"EXAM DATE: {listing.exam_date}", class_name="job-exam-date")
            )
        if listing.vacancies is not None:
            nodes.append(
                element("p", f"VACANCIES: {listing.vacancies}", class_name="job-vacancies")
            )
        return nodes
