import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(".env")

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
APP_TITLE = "MedAI Diagnostic Assistant"


@dataclass(frozen=True)
class Settings:
    model_provider: str
    model_name: str
    openrouter_api_key: str | None
    groq_api_key: str | None
    inference_timeout: float
    referer: str
    debug: bool
    environment: str
    cors_origins: list[str]

    @property
    def api_key(self) -> str | None:
        if self.model_provider == "groq":
            return self.groq_api_key
        return self.openrouter_api_key


def get_settings() -> Settings:
    """Read settings from the environment on every call so tests can patch it."""
    referer = os.getenv("APP_REFERER") or os.getenv("REPLIT_DOMAINS", "")
    return Settings(
        model_provider=os.getenv("MODEL_PROVIDER", "openrouter"),
        model_name=os.getenv("MODEL_NAME", "deepseek/deepseek-r1"),
        openrouter_api_key=os.getenv("OPENROUTER_API_KEY")
        or os.getenv("VITE_OPENROUTER_API_KEY"),
        groq_api_key=os.getenv("GROQ_API_KEY"),
        inference_timeout=float(os.getenv("INFERENCE_TIMEOUT", "60")),
        referer=referer.split(",")[0] or "http://localhost:5000",
        debug=os.getenv("DEBUG") == "1",
        environment=os.getenv("ENVIRONMENT", "development"),
        cors_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    )
