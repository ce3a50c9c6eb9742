"""Error taxonomy for the scan pipeline."""


class ShadowError(Exception):
    """Base class for scan pipeline errors."""


class ValidationError(ShadowError):
    """Query rejected before any source is called. The only user-facing error."""


class ConfigError(ShadowError):
    """A real source is missing a required credential."""


class ProviderError(ShadowError):
    """A real source answered with a non-2xx status or could not be reached."""

    def __init__(self, status: int | None, body: str = "", provider: str = "provider"):
        self.status = status
        self.body = body
        self.provider = provider
        if status is None:
            message = f"{provider} unreachable: {body}"
        else:
            message = f"{provider} returned {status}: {body}"
        super().__init__(message)


class ScoringInvariantViolation(ShadowError):
    """Score does not equal the capped sum of its breakdown."""
