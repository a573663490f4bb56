"""Exception types raised by omni_events."""

from __future__ import annotations


class DecodeError(ValueError):
    """A document does not match the expected schema.

    ``path`` locates the failing value, e.g.
    ``$.Transaction.transfer_message.NearTransferMessage.amount``.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class MigrationError(RuntimeError):
    """A legacy document could not be read; nothing was written."""

    def __init__(self, index: int, document_id: object, cause: DecodeError) -> None:
        super().__init__(
            f"legacy document #{index} (_id={document_id}) failed to decode: {cause}"
        )
        self.index = index
        self.document_id = document_id
        self.cause = cause


class ConfigError(RuntimeError):
    """Required configuration is missing or invalid."""
