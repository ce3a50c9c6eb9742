"""
Breach data without any network access.

The same query always yields the same breaches: a subset of a fixed pool
of well-known incidents is chosen with a 32-bit polynomial hash of the
lowercased query.
"""

from models.records import BreachRecord
from .base import BreachSource, BreachRow


SIMULATED_POOL: list[BreachRecord] = [
    BreachRecord(
        name="LinkedIn",
        domain="linkedin.com",
        breach_date="2021-06-22",
        data_classes=["Email addresses", "Names", "Phone numbers", "Professional info"],
        description="In June 2021, 700 million LinkedIn user records were scraped and posted for sale.",
        pwn_count=700000000,
    ),
    BreachRecord(
        name="Adobe",
        domain="adobe.com",
        breach_date="2013-10-04",
        data_classes=["Email addresses", "Passwords", "Password hints"],
        description="In October 2013, 153 million Adobe accounts were breached.",
        pwn_count=153000000,
    ),
    BreachRecord(
        name="Dropbox",
        domain="dropbox.com",
        breach_date="2012-07-01",
        data_classes=["Email addresses", "Passwords"],
        description="In mid-2012, Dropbox suffered a data breach exposing stored credentials.",
        pwn_count=68648009,
    ),
    BreachRecord(
        name="MyFitnessPal",
        domain="myfitnesspal.com",
        breach_date="2018-02-01",
        data_classes=["Email addresses", "Passwords", "Usernames"],
        description="In February 2018, Under Armour's MyFitnessPal was breached.",
        pwn_count=143606147,
    ),
    BreachRecord(
        name="Canva",
        domain="canva.com",
        breach_date="2019-05-24",
        data_classes=["Email addresses", "Names", "Usernames", "Geographic locations"],
        description="In May 2019, Canva suffered a breach impacting 137 million users.",
        pwn_count=137272116,
    ),
    BreachRecord(
        name="Twitter",
        domain="twitter.com",
        breach_date="2023-01-05",
        data_classes=["Email addresses", "Names", "Usernames", "Phone numbers"],
        description="In early 2023, over 200 million Twitter records were leaked.",
        pwn_count=211524284,
    ),
]


def string_hash(value: str) -> int:
    """Polynomial rolling hash (h * 31 + code) folded to a non-negative int32."""
    h = 0
    for ch in value:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return abs(h)


def select_sources(query: str) -> list[BreachRecord]:
    h = string_hash(query.lower())
    count = 2 + (h % 4)  # 2-5 sources
    pool = list(reversed(SIMULATED_POOL)) if h % 2 else list(SIMULATED_POOL)
    return pool[:min(count, len(pool))]


class SimulatedBreachSource(BreachSource):
    name = "Simulated Breaches"

    async def lookup(self, query: str) -> list[BreachRow]:
        """Provider-shaped rows, one per selected breach."""
        return [
            BreachRow(
                email=query,
                password="********" if "Passwords" in breach.data_classes else "",
                hash_password="",
                sha1="",
                sources=[breach.name],
            )
            for breach in select_sources(query)
        ]

    async def breaches(self, query: str) -> list[BreachRecord]:
        return [breach.model_copy(deep=True) for breach in select_sources(query)]
