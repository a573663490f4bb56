"""Observation sinks that print watcher output for an operator."""

from __future__ import annotations

from typing import Any

import click

from omni_events.errors import DecodeError


class EchoObservationSink:
    """Writes decoded events to stdout and failures to stderr."""

    def on_decoded(self, collection: str, value: Any) -> None:
        click.echo(f"Change detected in {collection}:\n{value!r}")

    def on_failure(self, collection: str, error: DecodeError, document: dict[str, Any]) -> None:
        click.echo(
            f"Failed to parse document {document.get('_id')} from {collection}: {error}",
            err=True,
        )

    def on_closed(self, collection: str, error: BaseException | None) -> None:
        if error is None:
            click.echo(f"Change feed for {collection} closed")
        else:
            click.echo(f"Error watching changes on {collection}: {error}", err=True)
