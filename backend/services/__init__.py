from .narrator import NarratorService, narrator_service

__all__ = ["NarratorService", "narrator_service"]
