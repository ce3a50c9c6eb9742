"""Base interfaces for external data sources."""

import re
from abc import ABC, abstractmethod
from pydantic import BaseModel, field_validator

from models.records import BreachRecord


UNKNOWN_SOURCE = "Unknown"


class BreachRow(BaseModel):
    """One credential row as returned by a breach provider."""
    email: str = ""
    password: str | None = None
    hash_password: str | None = None
    sha1: str | None = None
    sources: list[str] | None = None

    @field_validator('sources', mode='before')
    @classmethod
    def single_source(cls, v):
        if isinstance(v, str):
            return [v]
        return v


class SearchRow(BaseModel):
    """One organic hit from a web search provider."""
    title: str = ""
    link: str
    snippet: str = ""


def guess_domain(source_name: str) -> str:
    """Best-effort domain for a breach label. Not authoritative."""
    return re.sub(r"[^a-z0-9]", "", source_name.lower()) + ".com"


def map_breach_rows(rows: list[BreachRow]) -> list[BreachRecord]:
    """Group credential rows by source label, one BreachRecord per source."""
    grouped: dict[str, list[BreachRow]] = {}

    for row in rows:
        for source in row.sources or [UNKNOWN_SOURCE]:
            grouped.setdefault(source, []).append(row)

    breaches = []
    for source_name, entries in grouped.items():
        data_classes = ["Email addresses"]
        if any(e.password for e in entries):
            data_classes.append("Passwords")
        if any(e.hash_password for e in entries):
            data_classes.append("Password hashes")

        breaches.append(BreachRecord(
            name=source_name,
            domain=guess_domain(source_name),
            breach_date="Unknown",
            data_classes=data_classes,
            description=(
                f"Your data was found in the {source_name} breach. "
                f"{len(entries)} record(s) matched."
            ),
            pwn_count=len(entries),
        ))

    return breaches


class BreachSource(ABC):
    """
    Breach lookup provider.

    Implementations raise ConfigError when a credential is missing and
    ProviderError on transport failures, non-2xx answers or rows that
    cannot be decoded.
    """

    name: str = "Breach Source"

    @abstractmethod
    async def lookup(self, query: str) -> list[BreachRow]:
        pass

    async def breaches(self, query: str) -> list[BreachRecord]:
        """Look up the query and map the rows. Providers that know more override this."""
        return map_breach_rows(await self.lookup(query))


class ProfileSource(ABC):
    """
    Public profile search provider.

    Implementations degrade to synthetic rows on their own failures.
    """

    name: str = "Profile Source"

    @abstractmethod
    async def search(self, query: str) -> list[SearchRow]:
        pass
