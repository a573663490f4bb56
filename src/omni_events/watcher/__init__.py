"""Change watcher - live decoding of event collections."""

from omni_events.watcher.sinks import EchoObservationSink
from omni_events.watcher.watcher import CollectionWatcher, watch_collections

__all__ = ["CollectionWatcher", "EchoObservationSink", "watch_collections"]
