"""Typer-based CLI entry point."""

from __future__ import annotations

import logging
from functools import wraps
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .errors import IconPickerError
from .gui.ui.render import MarkupRenderAdapter
from .gui.viewmodels.icon_picker_viewmodel import IconPickerViewModel, PickerOptions
from .io.icon_source import list_icon_names, resolve_base_path
from .settings.manager import SettingsManager

app = typer.Typer(help="Searchable, paginated icon picker")
console = Console()


def _handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IconPickerError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _load_settings(settings_path: Optional[Path]) -> SettingsManager:
    settings = SettingsManager(path=settings_path)
    settings.load()
    return settings


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("list")
@_handle_errors
def list_icons(
    base_dir: Path = typer.Argument(..., help="Directory holding the icon files."),
    query: str = typer.Option("", "--query", "-q", help="Case-insensitive search text."),
    page: int = typer.Option(1, "--page", "-p", min=1, help="1-based page to show."),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Items per page."),
    html: bool = typer.Option(False, "--html", help="Print list markup instead of a table."),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="Settings file to use."),
) -> None:
    """Print one page of icons matching QUERY."""

    settings = _load_settings(settings_path)
    options = PickerOptions.from_settings(settings)
    if page_size is not None:
        options = PickerOptions(page_size, options.scroll_threshold, options.load_delay_ms)

    assets_root = settings.get("assets_root")
    base_path = resolve_base_path(base_dir, Path(assets_root) if assets_root else None)
    names = list_icon_names(base_path, settings.get("picker.icon_suffix"))

    view_model = IconPickerViewModel(options=options)
    adapter = MarkupRenderAdapter()
    view_model.initialize(base_path, names)
    view_model.apply_filter(query)
    items = []
    for _ in range(page):
        items = view_model.next_page()
    adapter.append(items)

    if html:
        typer.echo(adapter.html())
        return

    table = Table(title=f"{base_path} (page {page})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Id")
    offset = (page - 1) * options.page_size
    for index, item in enumerate(items, start=offset + 1):
        table.add_row(str(index), item.display_text, item.id)
    console.print(table)
    console.print(
        f"{len(view_model.displayed_items)} of {len(view_model.filtered_items)} matches shown"
    )
    if view_model.has_more():
        console.print(f"[yellow]More results: --page {page + 1}")


@app.command()
@_handle_errors
def pick(
    base_dir: Path = typer.Argument(..., help="Directory holding the icon files."),
    query: str = typer.Option("", "--query", "-q", help="Initial search text."),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="Settings file to use."),
) -> None:
    """Open the picker dialog and print the chosen icon id."""

    from PySide6.QtWidgets import QApplication

    from .gui.ui.widgets.icon_picker_dialog import pick_icon

    settings = _load_settings(settings_path)
    assets_root = settings.get("assets_root")
    base_path = resolve_base_path(base_dir, Path(assets_root) if assets_root else None)

    _qt_app = QApplication.instance() or QApplication([])
    selected = pick_icon(
        base_path,
        options=PickerOptions.from_settings(settings),
        suffix=settings.get("picker.icon_suffix"),
        query=query,
    )
    if selected is None:
        typer.echo("No icon selected", err=True)
        raise typer.Exit(1)
    typer.echo(selected)


if __name__ == "__main__":
    app()
