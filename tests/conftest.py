import pytest

from models.records import BreachRecord, ProfileRecord
from shadow.errors import ProviderError
from shadow.sources import BreachRow, BreachSource, ProfileSource, SearchRow


def make_breach(name: str = "Acme", *data_classes: str) -> BreachRecord:
    return BreachRecord(
        name=name,
        domain=f"{name.lower()}.com",
        data_classes=list(data_classes),
        description=f"{name} breach",
        pwn_count=1,
    )


def make_profile(platform: str, url: str | None = None) -> ProfileRecord:
    return ProfileRecord(
        platform=platform,
        url=url or f"https://example.com/{platform.lower()}",
        title=platform,
    )


class FakeBreachSource(BreachSource):
    name = "Fake Breaches"

    def __init__(self, rows: list[BreachRow] | None = None, error: Exception | None = None):
        self.rows = rows or []
        self.error = error
        self.calls: list[str] = []

    async def lookup(self, query: str) -> list[BreachRow]:
        self.calls.append(query)
        if self.error:
            raise self.error
        return self.rows


class FakeProfileSource(ProfileSource):
    name = "Fake Profiles"

    def __init__(self, rows: list[SearchRow] | None = None, error: Exception | None = None):
        self.rows = rows or []
        self.error = error
        self.calls: list[str] = []

    async def search(self, query: str) -> list[SearchRow]:
        self.calls.append(query)
        if self.error:
            raise self.error
        return self.rows


@pytest.fixture
def acme_rows():
    return [
        BreachRow(email="a@b.com", password="x", hash_password="", sha1="", sources=["Acme"]),
        BreachRow(email="c@d.com", password="", hash_password="h", sha1="", sources=["Acme"]),
    ]


@pytest.fixture
def failing_breach_source():
    return FakeBreachSource(error=ProviderError(503, "down", "Fake Breaches"))
