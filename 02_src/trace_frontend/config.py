"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_SERVICE_NAME = "tracing (exclusive)"

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_number(env: Mapping[str, str], name: str, default, cast):
    value = env.get(name)
    if value is None or value.strip() == "":
        return default
    try:
        return cast(value)
    except ValueError as e:
        raise ValueError(f"invalid value for {name}: {value!r}") from e


def parse_cluster_list(value: str | None) -> list[str]:
    """Split a comma-separated cluster list, dropping blanks."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from the environment."""

    api_host: str = "localhost"
    api_port: int = 8000
    log_level: str = "INFO"
    log_file: str = str(DEFAULT_LOG_PATH)
    enable_trace_server: bool = False
    clusters: list[str] = field(default_factory=list)
    service_name: str = DEFAULT_SERVICE_NAME
    query_limit: int = 20
    jaeger_query_url: str | None = None
    jaeger_timeout_seconds: float = 10.0
    fixture_file: str | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables."""
        if env is None:
            env = os.environ

        query_limit = _env_number(env, "TRACE_QUERY_LIMIT", 20, int)
        # A limit of one would hide ambiguous matches.
        if query_limit < 2:
            raise ValueError("TRACE_QUERY_LIMIT must be at least 2")

        return cls(
            api_host=env.get("API_HOST", "localhost"),
            api_port=_env_number(env, "API_PORT", 8000, int),
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_file=env.get("LOG_FILE") or str(DEFAULT_LOG_PATH),
            enable_trace_server=_env_bool(env, "TRACE_SERVER_ENABLE", False),
            clusters=parse_cluster_list(env.get("TRACE_CLUSTERS")),
            service_name=env.get("TRACE_SERVICE_NAME") or DEFAULT_SERVICE_NAME,
            query_limit=query_limit,
            jaeger_query_url=env.get("JAEGER_QUERY_URL") or None,
            jaeger_timeout_seconds=_env_number(
                env, "JAEGER_TIMEOUT_SECONDS", 10.0, float
            ),
            fixture_file=env.get("TRACE_FIXTURE_FILE") or None,
        )
