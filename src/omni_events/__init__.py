"""omni_events - typed Omni bridge event documents: change watcher and legacy migration."""

__version__ = "0.1.0"
