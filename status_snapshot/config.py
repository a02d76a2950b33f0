"""
status_snapshot/config.py

Environment-driven runtime settings for status snapshot runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from status_snapshot.errors import ConfigurationError

DEFAULT_TIMEZONE = "America/Los_Angeles"
DEFAULT_OUTPUT_PATH = "output.json"
DEFAULT_SELECTOR_TIMEOUT_MS = 60000


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = _project_root()
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class RemoteStoreSettings:
    """
    GitHub contents API settings for publishing the snapshot.
    """

    token: str | None = None
    repository: str | None = None
    branch: str | None = None
    api_url: str = "https://api.github.com"
    path: str = DEFAULT_OUTPUT_PATH
    commit_message: str = "Update service status snapshot"
    timeout_seconds: float = 15.0

    @property
    def enabled(self) -> bool:
        return bool(self.token and self.repository)

    def owner_and_repo(self) -> tuple[str, str]:
        """
        Split the `owner/repo` identifier into its two parts.
        """

        raw = (self.repository or "").strip()
        parts = raw.split("/")
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise ConfigurationError(
                f"GITHUB_REPOSITORY must look like 'owner/repo', got '{raw}'."
            )
        return parts[0].strip(), parts[1].strip()


@dataclass(frozen=True)
class StatusSnapshotSettings:
    """
    Runtime settings for one status snapshot run.
    """

    output_path: str = DEFAULT_OUTPUT_PATH
    timezone: str = DEFAULT_TIMEZONE
    selector_timeout_ms: int = DEFAULT_SELECTOR_TIMEOUT_MS
    headless: bool = True
    remote: RemoteStoreSettings = field(default_factory=RemoteStoreSettings)


@lru_cache(maxsize=1)
def get_status_snapshot_settings() -> StatusSnapshotSettings:
    """
    Return cached status snapshot settings from environment variables.
    """

    output_path = _get_str_env("STATUS_SNAPSHOT_OUTPUT_PATH", DEFAULT_OUTPUT_PATH)
    return StatusSnapshotSettings(
        output_path=output_path,
        timezone=_get_str_env("STATUS_SNAPSHOT_TIMEZONE", DEFAULT_TIMEZONE),
        selector_timeout_ms=max(
            1,
            _get_int_env("STATUS_SNAPSHOT_SELECTOR_TIMEOUT_MS", DEFAULT_SELECTOR_TIMEOUT_MS),
        ),
        headless=_get_bool_env("STATUS_SNAPSHOT_HEADLESS", True),
        remote=RemoteStoreSettings(
            token=_get_optional_str_env("GITHUB_TOKEN"),
            repository=_get_optional_str_env("GITHUB_REPOSITORY"),
            branch=_get_optional_str_env("GITHUB_BRANCH"),
            api_url=_get_str_env("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
            path=_get_str_env("STATUS_SNAPSHOT_REMOTE_PATH", DEFAULT_OUTPUT_PATH),
            commit_message=_get_str_env(
                "STATUS_SNAPSHOT_COMMIT_MESSAGE",
                "Update service status snapshot",
            ),
            timeout_seconds=max(1.0, _get_float_env("GITHUB_TIMEOUT_SECONDS", 15.0)),
        ),
    )
