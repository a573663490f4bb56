"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from omni_events.errors import ConfigError
from omni_events.models.config import ToolConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "OMNI_EVENTS_",
) -> ToolConfig:
    """Load configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (OMNI_EVENTS_MONGO_URI, MONGO_URI, etc.)
        2. TOML config file
        3. Defaults from ToolConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if not p.exists():
            raise ConfigError(f"config file not found: {p}")
        with open(p, "rb") as f:
            try:
                raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"invalid config file {p}: {exc}") from exc

    cfg = ToolConfig()

    # ── Mongo section ──────────────────────────────────────
    mongo = raw.get("mongo", {})
    if v := mongo.get("uri"):
        cfg.mongo_uri = str(v)
    if v := mongo.get("database"):
        cfg.database = str(v)

    # ── Watch section ──────────────────────────────────────
    watch = raw.get("watch", {})
    if v := watch.get("transactions_collection"):
        cfg.transactions_collection = str(v)
    if v := watch.get("meta_events_collection"):
        cfg.meta_events_collection = str(v)
    if "full_document_lookup" in watch:
        cfg.full_document_lookup = bool(watch["full_document_lookup"])

    # ── Migrate section ────────────────────────────────────
    migrate = raw.get("migrate", {})
    if v := migrate.get("legacy_collection"):
        cfg.legacy_collection = str(v)

    # ── Logging section ────────────────────────────────────
    logging_raw = raw.get("logging", {})
    if v := logging_raw.get("level"):
        cfg.log_level = str(v)

    # ── Environment variable overrides (highest priority) ──
    if uri := os.environ.get(f"{env_prefix}MONGO_URI") or os.environ.get("MONGO_URI"):
        cfg.mongo_uri = uri
    if db := os.environ.get(f"{env_prefix}DATABASE"):
        cfg.database = db
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level

    return cfg


def mask_uri(uri: str) -> str:
    """Hide credentials in a mongodb:// URI for display."""
    scheme, sep, rest = uri.partition("://")
    if not sep or "@" not in rest:
        return uri
    _, host = rest.rsplit("@", 1)
    return f"{scheme}://***@{host}"
