"""Command-line interface using Typer."""

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from reel_scheduler import __version__
from reel_scheduler.adapters.cache.file import JsonFileCache
from reel_scheduler.adapters.remote.rest import HttpRemoteStore
from reel_scheduler.config import settings
from reel_scheduler.domain.enums import (
    ContentType,
    FilterName,
    ProductionStatus,
    UploadStatus,
)
from reel_scheduler.domain.models import TrackedItem
from reel_scheduler.logging import setup_logging
from reel_scheduler.services.notifications import Notification, NotificationLevel
from reel_scheduler.services.scheduler import (
    ImportValidationError,
    ReelScheduler,
    export_filename,
)
from reel_scheduler.services.store import ItemNotFoundError, ItemValidationError
from reel_scheduler.utils.async_utils import run_async

setup_logging()

app = typer.Typer(
    name="reel-scheduler",
    help="Reel Scheduler - track shoot, edit and upload status of short-form videos",
    add_completion=False,
)

console = Console()

STATUS_STYLES = {
    "Done": "green",
    "Uploaded": "green",
    "Pending": "yellow",
    "Scheduled": "cyan",
    "Not": "red",
}

NOTIFICATION_STYLES = {
    NotificationLevel.SUCCESS: "green",
    NotificationLevel.INFO: "blue",
    NotificationLevel.WARNING: "yellow",
    NotificationLevel.ERROR: "bold red",
}


def _styled(status: str) -> str:
    style = STATUS_STYLES.get(status)
    return f"[{style}]{status}[/{style}]" if style else status


def _print_notification(notification: Notification) -> None:
    style = NOTIFICATION_STYLES[notification.level]
    console.print(f"[{style}]{notification.message}[/{style}]")


@asynccontextmanager
async def _session(ctx: typer.Context) -> AsyncIterator[ReelScheduler]:
    """Load the collection, hand it to the command, then settle remote writes."""
    options = ctx.obj or {}
    scheduler = ReelScheduler(
        remote=HttpRemoteStore(base_url=options.get("api_url")),
        cache=JsonFileCache(cache_dir=options.get("cache_dir")),
    )
    scheduler.notifications.subscribe(_print_notification)
    await scheduler.start(monitor=False)
    try:
        yield scheduler
    finally:
        await scheduler.stop()


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]Error: {message}[/bold red]")
    raise typer.Exit(code=1)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Reel Scheduler v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    api_url: Optional[str] = typer.Option(
        None, "--api-url", help="Remote API base URL (defaults to API_BASE_URL)."
    ),
    cache_dir: Optional[Path] = typer.Option(
        None, "--cache-dir", help="Local cache directory (defaults to CACHE_DIR)."
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Reel Scheduler - offline-first tracker for Instagram and YouTube shorts."""
    ctx.obj = {"api_url": api_url, "cache_dir": cache_dir}


@app.command()
def serve(
    host: str = typer.Option(settings.api_host, "--host", help="Bind address"),
    port: int = typer.Option(settings.api_port, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(settings.api_reload, "--reload", help="Auto-reload on changes"),
) -> None:
    """Run the reference remote store server."""
    import uvicorn

    console.print(f"[bold blue]Serving /api on http://{host}:{port}[/bold blue]")
    uvicorn.run("reel_scheduler.main:app", host=host, port=port, reload=reload)


@app.command()
def status(ctx: typer.Context) -> None:
    """Show link state and where the collection was loaded from."""

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            table = Table(title="Reel Scheduler Status", show_header=False)
            table.add_column("Key", style="cyan")
            table.add_column("Value")
            link = "[green]Online[/green]" if scheduler.is_online else "[yellow]Offline[/yellow]"
            table.add_row("Link", link)
            table.add_row("Remote", scheduler.remote.base_url)
            table.add_row("Loaded from", str(scheduler.persistence.last_load_source))
            table.add_row("Videos", str(len(scheduler.store)))
            table.add_row("Local cache", str(scheduler.cache.path))
            console.print(table)

    run_async(_run())


@app.command("list")
def list_videos(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Match name, type or notes"),
    filter_name: FilterName = typer.Option(FilterName.ALL, "--filter", "-f", help="Filter"),
) -> None:
    """List videos, searched then filtered."""

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            videos = scheduler.view(search=search, filter_name=filter_name)

        if not videos:
            hint = (
                "Try a different search term" if search else "Add your first video to get started"
            )
            console.print(f"[dim]No videos found. {hint}.[/dim]")
            return

        table = Table(title=f"Videos ({filter_name})")
        table.add_column("ID", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Shoot")
        table.add_column("Edit")
        table.add_column("Instagram")
        table.add_column("YouTube")
        table.add_column("Views", justify="right")
        table.add_column("Likes", justify="right")
        for video in videos:
            table.add_row(
                str(video.id),
                video.name + (" [yellow]*[/yellow]" if video.notes else ""),
                str(video.content_type),
                _styled(video.shoot),
                _styled(video.edit),
                f"{_styled(video.ig_upload)} {video.ig_date}".strip(),
                f"{_styled(video.yt_upload)} {video.yt_date}".strip(),
                str(video.views),
                str(video.likes),
            )
        console.print(table)

    run_async(_run())


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show progress counters."""

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            result = scheduler.stats()

        table = Table(title="Progress")
        table.add_column("Total", justify="right")
        table.add_column("Edited", justify="right")
        table.add_column("IG uploaded", justify="right")
        table.add_column("YT uploaded", justify="right")
        table.add_row(
            str(result.total),
            str(result.edited),
            str(result.ig_uploaded),
            str(result.yt_uploaded),
        )
        console.print(table)

    run_async(_run())


@app.command()
def reminders(ctx: typer.Context) -> None:
    """Show uploads due today, tomorrow, or overdue."""

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            result = scheduler.reminders()

        if not result.count:
            console.print("[dim]No upcoming uploads.[/dim]")
            return

        for title, bucket, style in (
            ("Overdue", result.overdue, "red"),
            ("Today", result.today, "yellow"),
            ("Tomorrow", result.tomorrow, "cyan"),
        ):
            if not bucket:
                continue
            console.print(f"[bold {style}]{title}[/bold {style}]")
            for reminder in bucket:
                console.print(f"  {reminder.video} - {reminder.platform_label} ({reminder.date})")

    run_async(_run())


@app.command()
def calendar(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Year (default: current)"),
    month: Optional[int] = typer.Option(
        None, "--month", "-m", min=1, max=12, help="Month 1-12 (default: current)"
    ),
) -> None:
    """Show scheduled and uploaded posts for a month."""
    today = date.today()
    year = year or today.year
    month = month or today.month

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            events = scheduler.calendar(year, month)

        table = Table(title=date(year, month, 1).strftime("%B %Y"))
        table.add_column("Day", justify="right")
        table.add_column("Uploads")
        for day, day_events in events.items():
            if not day_events:
                continue
            cells = []
            for event in day_events:
                style = "green" if event.css_class == "uploaded" else "cyan"
                cells.append(f"[{style}]{event.platform.short.upper()}[/{style}] {event.label}")
            table.add_row(str(day), ", ".join(cells))
        console.print(table)

    run_async(_run())


def _collect_changes(**options: Any) -> dict[str, Any]:
    return {key: value for key, value in options.items() if value is not None}


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Video name"),
    content_type: ContentType = typer.Option(ContentType.OTHER, "--type", "-t"),
    shoot: ProductionStatus = typer.Option(ProductionStatus.PENDING, "--shoot"),
    edit: ProductionStatus = typer.Option(ProductionStatus.PENDING, "--edit"),
    ig_upload: UploadStatus = typer.Option(UploadStatus.NOT, "--ig"),
    yt_upload: UploadStatus = typer.Option(UploadStatus.NOT, "--yt"),
    ig_date: str = typer.Option("", "--ig-date", help="YYYY-MM-DD"),
    yt_date: str = typer.Option("", "--yt-date", help="YYYY-MM-DD"),
    views: int = typer.Option(0, "--views", min=0),
    likes: int = typer.Option(0, "--likes", min=0),
    notes: str = typer.Option("", "--notes"),
) -> None:
    """Add a video."""
    item = TrackedItem(
        id=0,
        name=name,
        content_type=content_type,
        shoot=shoot,
        edit=edit,
        ig_upload=ig_upload,
        yt_upload=yt_upload,
        ig_date=ig_date,
        yt_date=yt_date,
        views=views,
        likes=likes,
        notes=notes,
    )

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            try:
                added = scheduler.add_item(item)
            except ItemValidationError as e:
                _fail(str(e))
            console.print(f"[dim]Assigned id {added.id}[/dim]")

    run_async(_run())


@app.command()
def edit(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., help="Video id"),
    name: Optional[str] = typer.Option(None, "--name"),
    content_type: Optional[ContentType] = typer.Option(None, "--type", "-t"),
    shoot: Optional[ProductionStatus] = typer.Option(None, "--shoot"),
    edit_status: Optional[ProductionStatus] = typer.Option(None, "--edit"),
    ig_upload: Optional[UploadStatus] = typer.Option(None, "--ig"),
    yt_upload: Optional[UploadStatus] = typer.Option(None, "--yt"),
    ig_date: Optional[str] = typer.Option(None, "--ig-date", help="YYYY-MM-DD, '' to unset"),
    yt_date: Optional[str] = typer.Option(None, "--yt-date", help="YYYY-MM-DD, '' to unset"),
    views: Optional[int] = typer.Option(None, "--views", min=0),
    likes: Optional[int] = typer.Option(None, "--likes", min=0),
    notes: Optional[str] = typer.Option(None, "--notes"),
) -> None:
    """Edit fields of a video."""
    changes = _collect_changes(
        name=name,
        content_type=content_type,
        shoot=shoot,
        edit=edit_status,
        ig_upload=ig_upload,
        yt_upload=yt_upload,
        ig_date=ig_date,
        yt_date=yt_date,
        views=views,
        likes=likes,
        notes=notes,
    )
    if not changes:
        _fail("Nothing to change")

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            try:
                scheduler.update_item(item_id, **changes)
            except (ItemNotFoundError, ItemValidationError) as e:
                _fail(str(e))

    run_async(_run())


@app.command()
def delete(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., help="Video id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a video."""
    if not yes:
        typer.confirm("Are you sure you want to delete this video?", abort=True)

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            if not scheduler.delete_item(item_id):
                _fail(f"Video not found: {item_id}")

    run_async(_run())


@app.command()
def duplicate(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., help="Video id to copy"),
) -> None:
    """Duplicate a video with fresh publishing state."""

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            try:
                copy = scheduler.duplicate_item(item_id)
            except ItemNotFoundError as e:
                _fail(str(e))
            console.print(f"[dim]Created {copy.name!r} with id {copy.id}[/dim]")

    run_async(_run())


@app.command()
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete ALL videos."""
    if not yes:
        typer.confirm(
            "WARNING: This will delete ALL videos and cannot be undone. Continue?", abort=True
        )

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            scheduler.clear_all()

    run_async(_run())


@app.command("export")
def export_data(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file"),
) -> None:
    """Export all videos to a JSON backup file."""

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            data = scheduler.export_data()

        path = output or Path(export_filename())
        try:
            path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            _fail(f"Failed to export data: {e}")
        console.print(f"[green]Data exported successfully to {path}[/green]")

    run_async(_run())


@app.command("import")
def import_data(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Backup file"),
) -> None:
    """Replace all videos with the contents of a backup file."""
    raw = path.read_text(encoding="utf-8")

    async def _run() -> None:
        async with _session(ctx) as scheduler:
            try:
                scheduler.import_data(raw)
            except ImportValidationError as e:
                _fail(f"Error importing data: {e}")

    run_async(_run())


@app.command()
def sync(ctx: typer.Context) -> None:
    """Push the local collection to the remote store."""

    async def _run() -> bool:
        async with _session(ctx) as scheduler:
            return await scheduler.sync()

    if not run_async(_run()):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
