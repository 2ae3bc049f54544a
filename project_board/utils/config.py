"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over .env values.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def app_title() -> str:
    """Optional: page title. Default Project Board."""
    return get_optional("APP_TITLE", "Project Board")


def description_min_length() -> int:
    """Optional: minimum description length. Default 5."""
    return get_optional_int("DESCRIPTION_MIN_LENGTH", 5)


def people_min() -> int:
    """Optional: minimum headcount per project. Default 1."""
    return get_optional_int("PEOPLE_MIN", 1)


def people_max() -> int:
    """Optional: maximum headcount per project. Default 5."""
    return get_optional_int("PEOPLE_MAX", 5)


def project_id_strategy() -> str:
    """Optional: identifier generator, "random" or "counter". Default random."""
    val = get_optional("PROJECT_ID_STRATEGY", "random").lower()
    return val if val in ("random", "counter") else "random"


def log_level() -> str:
    """Optional: logging level name. Default INFO."""
    return get_optional("LOG_LEVEL", "INFO").upper()


def log_file() -> Optional[Path]:
    """Optional: log file path. Logs go to stderr only when unset."""
    val = get_optional("LOG_FILE", "")
    return Path(val) if val else None
