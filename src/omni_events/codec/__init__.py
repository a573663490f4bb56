"""Document codec: schema dataclasses <-> externally tagged documents."""

from omni_events.codec.decode import decode
from omni_events.codec.encode import encode
from omni_events.errors import DecodeError

__all__ = ["decode", "encode", "DecodeError"]
