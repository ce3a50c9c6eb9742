from .health import router as health_router
from .scan import router as scan_router
from .narrator import router as narrator_router

__all__ = ["health_router", "scan_router", "narrator_router"]
