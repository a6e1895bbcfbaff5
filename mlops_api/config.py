# mlops_api/config.py
from functools import lru_cache
from pathlib import Path
import os
from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]

# Load in ascending precedence; later overrides earlier
load_dotenv(ROOT / ".env")
load_dotenv(ROOT / ".env.local", override=True)
load_dotenv(ROOT / "mlops_api" / ".env", override=True)
load_dotenv(ROOT / "mlops_api" / ".env.local", override=True)

DEFAULT_PORT = 4000


class Settings:
    def __init__(self):
        # Server
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", str(DEFAULT_PORT)))
        self.APP_VERSION: str = os.getenv("APP_VERSION", "0.1.0")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # CORS
        self.ALLOWED_ORIGINS: list[str] = [
            s.strip() for s in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",") if s.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
