from __future__ import annotations

from typing import Protocol

from jobgen.generator import MockJobGenerator
from jobgen.models import JobListing


class JobSourceError(RuntimeError):
    pass


class JobSource(Protocol):
    async def search(self, query: str, location: str | None = None) -> list[JobListing]: ...


class LocalJobSource:
    def __init__(self, generator: MockJobGenerator | None = None) -> None:
        self.generator = generator or MockJobGenerator()

    async def search(self, query: str, location: str | None = None) -> list[JobListing]:
        return self.generator.generate(query, location)
