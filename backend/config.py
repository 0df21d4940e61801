import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:8081",
        "http://localhost:19006",
        "exp://localhost:8081",
    ]
    debug: bool = False

    # Pipeline tuning
    knowledge_limit: int = 3  # knowledge chunks retrieved per message
    candidate_limit: int = 3  # ranked jobs/events/programs kept per message
    history_window: int = 10  # recent turns passed to the generation context
    max_message_length: int = 2000

    rate_limit: str = "30/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
