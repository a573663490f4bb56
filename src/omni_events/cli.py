"""CLI entry point for omni_events."""

from __future__ import annotations

import asyncio
import json
import logging
import signal
import sys

import click
from bson import json_util

from omni_events.codec import DecodeError, decode
from omni_events.config import load_config, mask_uri
from omni_events.errors import ConfigError, MigrationError
from omni_events.migration.migrator import LegacyMigrator
from omni_events.models.config import ToolConfig
from omni_events.models.events import Event, MetaEvent, TransactionEvent
from omni_events.models.legacy import LegacyEvent
from omni_events.mongo.store import MongoEventStore
from omni_events.watcher.sinks import EchoObservationSink
from omni_events.watcher.watcher import CollectionWatcher, watch_collections

log = logging.getLogger(__name__)

DOCUMENT_KINDS = {
    "transaction": TransactionEvent,
    "meta": MetaEvent,
    "event": Event,
    "legacy": LegacyEvent,
}


def _load(ctx: click.Context) -> ToolConfig:
    """Load config or exit with a configuration error."""
    try:
        cfg = load_config(ctx.obj["config_path"])
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    if not ctx.obj["verbose"]:
        logging.getLogger().setLevel(cfg.log_level.upper())
    return cfg


def _require_uri(cfg: ToolConfig) -> None:
    """Exit with error if no Mongo URI is configured."""
    if not cfg.mongo_uri:
        click.echo("Error: No MongoDB URI configured.", err=True)
        click.echo("Set MONGO_URI (or OMNI_EVENTS_MONGO_URI) or [mongo] uri in config.", err=True)
        sys.exit(1)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """omni-events - watch and migrate Omni bridge event collections."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show effective configuration."""
    cfg = _load(ctx)
    click.echo(f"Mongo URI:     {mask_uri(cfg.mongo_uri) if cfg.mongo_uri else '(not set)'}")
    click.echo(f"Database:      {cfg.database}")
    click.echo(f"Transactions:  {cfg.transactions_collection}")
    click.echo(f"Meta events:   {cfg.meta_events_collection}")
    click.echo(f"Legacy events: {cfg.legacy_collection}")
    click.echo(f"Full lookup:   {cfg.full_document_lookup}")
    click.echo(f"Log level:     {cfg.log_level}")


# ── Watch ──────────────────────────────────────────────


@cli.command()
@click.option(
    "--collection", "collections", multiple=True,
    help="Only watch this collection (repeatable). Defaults to transactions + meta events.",
)
@click.option(
    "--lookup-full-document", is_flag=True, default=None,
    help="Ask the server for post-update snapshots so updates are decoded too.",
)
@click.pass_context
def watch(ctx: click.Context, collections: tuple[str, ...], lookup_full_document: bool | None) -> None:
    """Decode new documents from the event collections as they are written."""
    cfg = _load(ctx)
    _require_uri(cfg)
    if lookup_full_document is not None:
        cfg.full_document_lookup = lookup_full_document

    targets = {
        cfg.transactions_collection: TransactionEvent,
        cfg.meta_events_collection: MetaEvent,
    }
    selected = list(collections) or list(targets)
    unknown = [name for name in selected if name not in targets]
    if unknown:
        click.echo(f"Error: unknown collection(s): {', '.join(unknown)}", err=True)
        click.echo(f"Known: {', '.join(targets)}", err=True)
        sys.exit(1)

    async def _watch() -> None:
        store = MongoEventStore(cfg.mongo_uri, cfg.database)
        stop = asyncio.Event()
        sink = EchoObservationSink()
        watchers = [
            CollectionWatcher(
                name, targets[name],
                store.feed(name, cfg.full_document_lookup),
                sink, stop_event=stop,
            )
            for name in selected
        ]

        # Watch tasks are cancelled on signal: a change stream may stay idle indefinitely.
        task = asyncio.ensure_future(watch_collections(watchers))
        loop = asyncio.get_running_loop()

        def _signal_handler():
            log.info("Stop requested")
            stop.set()
            task.cancel()

        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, _signal_handler)
            except NotImplementedError:
                # Windows doesn't support add_signal_handler
                pass

        try:
            reports = await task
        except asyncio.CancelledError:
            click.echo("Stopped")
            return
        finally:
            await store.close()

        for report in reports:
            click.echo(
                f"{report.collection}: {report.decoded} decoded, {report.failed} failed, "
                f"{report.skipped} skipped"
                + (f" (closed: {report.error})" if report.error else "")
            )

    click.echo(f"Watching {', '.join(selected)} in {cfg.database}")
    asyncio.run(_watch())


# ── Migrate ────────────────────────────────────────────


def _ask(question: str) -> str:
    return click.prompt(question, default="", show_default=False)


@cli.command()
@click.option("--source", default=None, help="Legacy collection to read (default from config)")
@click.pass_context
def migrate(ctx: click.Context, source: str | None) -> None:
    """Convert every legacy event into the normalized schema and insert them in one batch."""
    cfg = _load(ctx)
    _require_uri(cfg)
    legacy_collection = source or cfg.legacy_collection

    async def _migrate():
        store = MongoEventStore(cfg.mongo_uri, cfg.database)
        try:
            migrator = LegacyMigrator(store, store, prompt=_ask, echo=click.echo)
            return await migrator.migrate(legacy_collection)
        finally:
            await store.close()

    try:
        result = asyncio.run(_migrate())
    except MigrationError as exc:
        click.echo(f"Migration failed: {exc}", err=True)
        sys.exit(1)

    if result.aborted:
        click.echo(f"Read {result.read} legacy events; migration aborted.")
    else:
        click.echo(f"Read {result.read} legacy events; wrote {result.written}.")


# ── Offline decode ─────────────────────────────────────


@cli.command("decode")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--kind", type=click.Choice(sorted(DOCUMENT_KINDS)), default="transaction",
    show_default=True, help="Schema to decode against",
)
def decode_cmd(path: str, kind: str) -> None:
    """Decode a JSON document (or array of documents) exported from the store."""
    with open(path) as f:
        try:
            loaded = json_util.loads(f.read())
        except json.JSONDecodeError as exc:
            click.echo(f"Error: {path} is not valid JSON: {exc}", err=True)
            sys.exit(1)

    documents = loaded if isinstance(loaded, list) else [loaded]
    target = DOCUMENT_KINDS[kind]
    failures = 0
    for index, document in enumerate(documents):
        try:
            value = decode(target, document)
        except DecodeError as exc:
            failures += 1
            click.echo(f"#{index}: {exc}", err=True)
            continue
        click.echo(f"#{index}: {value!r}")

    if failures:
        click.echo(f"{failures} of {len(documents)} documents failed to decode", err=True)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
