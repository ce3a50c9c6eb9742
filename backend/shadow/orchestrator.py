"""Orchestrator sequences the data sources for one scan."""

import asyncio
import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from config import Settings
from models.records import BreachRecord, ProfileRecord, QueryType
from models.scan import ScanOutcome, ScanResult, ScanSource
from .errors import ValidationError
from .personas import select_persona
from .risk import (
    DEFAULT_WEIGHTS,
    RiskWeights,
    calculate_risk_score,
    check_score_invariant,
    collect_exposed_data_types,
    get_risk_bar,
)
from .sources import (
    BreachDirectorySource,
    BreachSource,
    ProfileSource,
    SerperProfileSource,
    SimulatedBreachSource,
    map_profile_rows,
)


MIN_QUERY_LENGTH = 2
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ScanState(str, Enum):
    IDLE = "idle"
    SOURCING_BREACHES = "sourcing_breaches"
    REAL_SUCCEEDED = "real_succeeded"
    REAL_FAILED = "real_failed"
    SOURCING_PROFILES = "sourcing_profiles"
    SCORING = "scoring"
    DONE = "done"


@dataclass
class ProfileStageResult:
    """Outcome of the best-effort profile stage. Failure reads as zero profiles."""
    profiles: list[ProfileRecord] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_query(query: str | None) -> str:
    """Return the normalized query or raise ValidationError."""
    if not query or len(query.strip()) < MIN_QUERY_LENGTH:
        raise ValidationError("Please enter a valid username or email")
    return query.strip().lower()


def detect_query_type(query: str) -> QueryType:
    return QueryType.EMAIL if EMAIL_RE.match(query) else QueryType.USERNAME


def build_scan_result(
    query: str,
    breaches: list[BreachRecord],
    profiles: list[ProfileRecord],
    weights: RiskWeights = DEFAULT_WEIGHTS,
) -> ScanResult:
    """Score breaches and profiles together into a fresh ScanResult."""
    score, breakdown = calculate_risk_score(breaches, profiles, weights)
    return ScanResult(
        query=query,
        query_type=detect_query_type(query),
        breaches=breaches,
        profiles=profiles,
        exposed_data_types=collect_exposed_data_types(breaches),
        risk_score=score,
        risk_breakdown=breakdown,
        timestamp=datetime.now(timezone.utc),
    )


class ScanOrchestrator:
    """
    Runs one scan from query to ScanOutcome.

    Flow:
    1. Validate the query
    2. Real sourcing disabled: persona after a simulated delay, done
    3. Real sourcing enabled: breach lookup
       - failure: log it, fall back to the persona path
       - success: best-effort profile search, then score everything

    Create one orchestrator per scan; `audit_log` and `state` describe the
    most recent run.
    """

    def __init__(
        self,
        real_api_enabled: bool = False,
        breach_source: BreachSource | None = None,
        profile_source: ProfileSource | None = None,
        mock_delay: float = 1.5,
        source_timeout: float | None = 10.0,
        weights: RiskWeights = DEFAULT_WEIGHTS,
    ):
        self.real_api_enabled = real_api_enabled
        self.breach_source = breach_source
        self.profile_source = profile_source
        self.mock_delay = mock_delay
        self.source_timeout = source_timeout
        self.weights = weights

        self.audit_log: list[str] = []
        self.state = ScanState.IDLE
        self.start_time: float = 0

    @classmethod
    def from_settings(cls, config: Settings) -> "ScanOrchestrator":
        if config.BREACH_PROVIDER == "simulated":
            breach_source: BreachSource = SimulatedBreachSource()
        else:
            breach_source = BreachDirectorySource(
                config.RAPIDAPI_KEY,
                timeout=config.SOURCE_TIMEOUT_SECONDS,
            )

        return cls(
            real_api_enabled=config.ENABLE_REAL_API,
            breach_source=breach_source,
            profile_source=SerperProfileSource(
                config.SERPER_API_KEY,
                timeout=config.SOURCE_TIMEOUT_SECONDS,
            ),
            mock_delay=config.MOCK_DELAY_SECONDS,
            source_timeout=config.SOURCE_TIMEOUT_SECONDS,
        )

    def _log(self, message: str, level: str = "INFO"):
        """Add timestamped audit log entry."""
        timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S")
        entry = f"[{timestamp}] [{level}] {message}"
        self.audit_log.append(entry)
        print(entry)

    def _enter(self, state: ScanState):
        self.state = state
        self._log(f"STATE: {state.value.upper()}")

    def _mask_query(self, query: str) -> str:
        """Mask the target for display."""
        if '@' not in query:
            return query[0] + "***" if len(query) <= 2 else query[0] + "***" + query[-1]
        local, domain = query.split('@', 1)
        if len(local) <= 2:
            masked = local[:1] + "***"
        else:
            masked = local[0] + "***" + local[-1]
        return f"{masked}@{domain}"

    async def _with_timeout(self, coro):
        if self.source_timeout is None:
            return await coro
        return await asyncio.wait_for(coro, timeout=self.source_timeout)

    async def scan(self, query: str) -> ScanOutcome:
        """
        Execute a scan.

        Raises:
            ValidationError: query shorter than 2 characters after trimming.
                No source is called in that case.
        """
        self.audit_log = []
        self.state = ScanState.IDLE
        self.start_time = time.time()

        normalized = validate_query(query)

        self._log("SCAN INITIATED")
        self._log(f"TARGET: {self._mask_query(normalized)}")

        if not self.real_api_enabled or self.breach_source is None:
            self._log("MODE: MOCK (real sourcing disabled)")
            return await self._scan_mock(query)

        self._log("MODE: REAL")
        self._enter(ScanState.SOURCING_BREACHES)
        self._log(f"QUERYING: {self.breach_source.name.upper()}")

        try:
            breaches = await self._with_timeout(self.breach_source.breaches(normalized))
        except asyncio.TimeoutError:
            self._enter(ScanState.REAL_FAILED)
            self._log(f"  TIMEOUT: {self.breach_source.name}", "WARN")
            return await self._scan_mock(query)
        except Exception as e:
            self._enter(ScanState.REAL_FAILED)
            self._log(f"  ERROR: {self.breach_source.name} - {type(e).__name__}: {e}", "ERROR")
            return await self._scan_mock(query)

        self._enter(ScanState.REAL_SUCCEEDED)
        self._log(f"  FOUND: {len(breaches)} breach source(s)", "SUCCESS")

        stage = await self._gather_profiles(normalized)

        self._enter(ScanState.SCORING)
        result = build_scan_result(normalized, breaches, stage.profiles, self.weights)
        check_score_invariant(result)

        return self._finish(result, ScanSource.REAL)

    async def _gather_profiles(self, normalized: str) -> ProfileStageResult:
        """Best-effort second stage. Never raises."""
        if self.profile_source is None:
            self._log("PROFILE SEARCH SKIPPED: no source configured", "WARN")
            return ProfileStageResult()

        self._enter(ScanState.SOURCING_PROFILES)
        self._log(f"QUERYING: {self.profile_source.name.upper()}")

        try:
            rows = await self._with_timeout(self.profile_source.search(normalized))
            profiles = map_profile_rows(rows)
        except asyncio.TimeoutError:
            self._log(f"  TIMEOUT: {self.profile_source.name}, continuing with breaches only", "WARN")
            return ProfileStageResult(error="timeout")
        except Exception as e:
            self._log(
                f"  ERROR: {self.profile_source.name} - {type(e).__name__}: {e}, "
                "continuing with breaches only",
                "WARN",
            )
            return ProfileStageResult(error=f"{type(e).__name__}: {e}")

        self._log(f"  FOUND: {len(profiles)} profile(s)", "SUCCESS")
        return ProfileStageResult(profiles=profiles)

    async def _scan_mock(self, query: str) -> ScanOutcome:
        self._log("USING MOCK PERSONA DATA")
        if self.mock_delay > 0:
            await asyncio.sleep(self.mock_delay)

        result, narrative = select_persona(query)
        return self._finish(result, ScanSource.MOCK, narrative)

    def _finish(self, result: ScanResult, source: ScanSource, narrative: str | None = None) -> ScanOutcome:
        self.state = ScanState.DONE
        elapsed = time.time() - self.start_time

        self._log("=" * 40)
        self._log(f"SCAN COMPLETE ({elapsed:.1f}s) VIA {source.value.upper()}")
        self._log(f"BREACHES: {len(result.breaches)}  PROFILES: {len(result.profiles)}")
        self._log(f"RISK: {get_risk_bar(result.risk_score)}")
        self._log("=" * 40)

        return ScanOutcome(result=result, narrative=narrative, source=source)
