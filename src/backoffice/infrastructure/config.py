"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

BACKENDS = ("json", "memory")

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "db.json"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    backend: str = "json"
    data_file: Path = _DEFAULT_DATA_FILE
    log_level: str = "INFO"
    log_json: bool = False
    default_page_limit: int = 20

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Unknown backend '{self.backend}' (expected one of: {', '.join(BACKENDS)})"
            )
        if self.default_page_limit < 1:
            raise ValueError("default_page_limit must be >= 1")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_file = env.get("BACKOFFICE_DATA_FILE")
        return cls(
            backend=env.get("BACKOFFICE_BACKEND", "json").strip().lower(),
            data_file=Path(data_file) if data_file else _DEFAULT_DATA_FILE,
            log_level=env.get("BACKOFFICE_LOG_LEVEL", "INFO").strip().upper(),
            log_json=_env_bool(env.get("BACKOFFICE_LOG_JSON"), False),
            default_page_limit=int(env.get("BACKOFFICE_DEFAULT_PAGE_LIMIT", "20")),
        )
