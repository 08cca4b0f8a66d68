import json
from pathlib import Path

from pydantic_settings import BaseSettings

_DEFAULT_LABOR_MARKET_FILE = str(Path(__file__).parent / "services" / "data" / "labor_market.yaml")


def parse_origins(raw: str) -> list[str]:
    """Split a JSON list or comma-separated string of origins, dropping blanks."""
    raw = raw.strip()
    if raw.startswith("["):
        origins = [str(o) for o in json.loads(raw)]
    else:
        origins = raw.split(",")
    return [o.strip() for o in origins if o.strip()]


class Settings(BaseSettings):
    # Front-ends allowed to call the API (CORS_ORIGINS: comma-separated or JSON list)
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    debug: bool = False
    log_level: str = "INFO"

    # Request limits
    rate_limit: str = "120/minute"  # slowapi limit string for scoring routes
    max_pool_size: int = 5000  # largest candidate/job pool accepted by /rank and /opportunities

    # Field-keyed labor-market records; builtin defaults are used if missing
    labor_market_file: str = _DEFAULT_LABOR_MARKET_FILE

    # If True, an out-of-range score raises instead of being clamped and logged
    strict_invariants: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def cors_origin_list(self) -> list[str]:
        return parse_origins(self.cors_origins)


settings = Settings()
