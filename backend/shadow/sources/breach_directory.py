"""
Breach lookup via the BreachDirectory API on RapidAPI.
Requires RAPIDAPI_KEY. No breach dates are supplied by this provider.
"""

import httpx
from pydantic import ValidationError as RowError

from ..errors import ConfigError, ProviderError
from .base import BreachSource, BreachRow


class BreachDirectorySource(BreachSource):
    name = "BreachDirectory"

    API_URL = "https://breachdirectory.p.rapidapi.com/"
    API_HOST = "breachdirectory.p.rapidapi.com"

    def __init__(
        self,
        api_key: str | None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def lookup(self, query: str) -> list[BreachRow]:
        if not self.api_key:
            raise ConfigError("RAPIDAPI_KEY is not set")

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                resp = await client.get(
                    self.API_URL,
                    params={"func": "auto", "term": query},
                    headers={
                        "X-RapidAPI-Key": self.api_key,
                        "X-RapidAPI-Host": self.API_HOST,
                    },
                    timeout=self.timeout,
                )
            except httpx.HTTPError as e:
                raise ProviderError(None, f"{type(e).__name__}: {e}", self.name) from e

            if not resp.is_success:
                print(f"[BreachDirectory] API error: {resp.status_code}")
                raise ProviderError(resp.status_code, resp.text, self.name)

            try:
                data = resp.json()
            except ValueError as e:
                raise ProviderError(resp.status_code, "invalid JSON body", self.name) from e

        if not isinstance(data, dict):
            raise ProviderError(resp.status_code, "unexpected response shape", self.name)

        try:
            rows = [BreachRow.model_validate(r) for r in (data.get("result") or [])]
        except (RowError, TypeError) as e:
            raise ProviderError(resp.status_code, f"malformed row: {e}", self.name) from e

        print(f"[BreachDirectory] API returned {data.get('found', len(rows))} result(s)")
        return rows
