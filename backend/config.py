from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    APP_NAME: str = "Digital Shadow"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Real sourcing switch. Off = personas only, no outbound calls.
    ENABLE_REAL_API: bool = False
    # Demonstration banner for the frontend
    DEMO_MODE: bool = False

    BREACH_PROVIDER: str = "breachdirectory"  # or "simulated"

    RAPIDAPI_KEY: Optional[str] = None
    SERPER_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash-exp"

    MOCK_DELAY_SECONDS: float = 1.5
    SOURCE_TIMEOUT_SECONDS: float = 10.0

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
