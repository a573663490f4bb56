"""Legacy schema migration."""

from omni_events.migration.convert import convert_legacy_event, resolve_enrichment, sender_of
from omni_events.migration.migrator import LegacyMigrator

__all__ = ["LegacyMigrator", "convert_legacy_event", "resolve_enrichment", "sender_of"]
