"""Protocol interfaces for the document store and operator boundaries."""

from omni_events.interfaces.feed import ChangeFeed, ChangeFeedSession
from omni_events.interfaces.prompt import Prompt
from omni_events.interfaces.sink import ObservationSink
from omni_events.interfaces.store import DocumentSink, DocumentSource

__all__ = [
    "ChangeFeed", "ChangeFeedSession",
    "Prompt",
    "ObservationSink",
    "DocumentSink", "DocumentSource",
]
