"""Configuration models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ToolConfig:
    """Complete watcher / migrator configuration."""

    # Mongo
    mongo_uri: str = ""  # loaded from env var MONGO_URI / OMNI_EVENTS_MONGO_URI
    database: str = "testnet_omni_bridge_db"

    # Watch
    transactions_collection: str = "omni_transactions"
    meta_events_collection: str = "omni_meta_events"
    full_document_lookup: bool = False  # ask the server for post-update snapshots

    # Migrate
    legacy_collection: str = "omni_events"

    # Logging
    log_level: str = "info"
