"""MongoDB adapters."""

from omni_events.mongo.store import MongoChangeFeed, MongoEventStore

__all__ = ["MongoChangeFeed", "MongoEventStore"]
