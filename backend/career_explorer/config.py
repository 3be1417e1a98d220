"""Application settings and validation."""

import os
from pathlib import Path
from typing import List

BASE = Path(__file__).resolve().parent.parent


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError("PORT must be a positive integer") from None


class Settings:
    ENV: str
    DATABASE_URL: str
    LOG_LEVEL: str
    PORT: int
    FRONTEND_URL: str
    ALLOW_DEV_CORS: bool
    SEED_ON_STARTUP: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'career_explorer.db'}")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.PORT = _parse_port(os.getenv("PORT", "3000"))
        self.FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "false").lower() == "true"
        self._validate()

    def _validate(self):
        if self.PORT <= 0:
            raise RuntimeError("PORT must be a positive integer")
        if not self.DATABASE_URL:
            raise RuntimeError("DATABASE_URL must not be empty")

    @property
    def is_dev(self) -> bool:
        return self.ENV == "dev"

    def cors_origins(self) -> List[str]:
        """Origins allowed to call the API from a browser.

        In dev with `ALLOW_DEV_CORS` every origin is accepted so local HTML
        files and alternative frontends work without extra setup.
        """
        if self.is_dev and self.ALLOW_DEV_CORS:
            return ["*"]
        return [o.strip() for o in self.FRONTEND_URL.split(",") if o.strip()]


settings = Settings()
