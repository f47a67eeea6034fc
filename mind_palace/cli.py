from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError

from . import app as palace_app
from .config import Settings
from .errors import MindPalaceError
from .store.palace import PalaceStore, dumps
from .store.query import fetch_memories

app = typer.Typer(help="Mind palace memory assistant")

_PALACE_HELP = "Path of the palace JSON document"


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def _settings(**overrides: object) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        _fail(exc)


def _store(palace: str | None) -> PalaceStore:
    if palace is not None:
        return PalaceStore(palace)
    return PalaceStore(_settings().palace_path)


@app.command()
def chat(
    model: str | None = typer.Option(None, help="Chat model to use"),
    palace: str | None = typer.Option(None, help=_PALACE_HELP),
    temperature: float | None = typer.Option(None, help="Sampling temperature"),
    user_name: str | None = typer.Option(None, help="Name the assistant calls the user"),
    verbose: bool = typer.Option(False, help="Print effective settings"),
) -> None:
    """Talk to the assistant interactively."""
    overrides: dict[str, object] = {}
    if model is not None:
        overrides["chat_model"] = model
    if palace is not None:
        overrides["palace_path"] = palace
    if temperature is not None:
        overrides["temperature"] = temperature
    if user_name is not None:
        overrides["user_name"] = user_name
    settings = _settings(**overrides)
    if verbose:
        typer.echo(settings.public_dump())
    try:
        asyncio.run(palace_app.run(settings=settings))
    except MindPalaceError as exc:
        _fail(exc)


@app.command()
def add(
    room: str = typer.Argument(..., help="Room to file the memory under"),
    description: str = typer.Argument(..., help="The memory itself"),
    palace: str | None = typer.Option(None, help=_PALACE_HELP),
) -> None:
    """Store a memory without asking the chat model."""
    try:
        memory = _store(palace).add_memory(room, description)
    except MindPalaceError as exc:
        _fail(exc)
    typer.echo(f'Added to "{room}": {palace_app.format_memory(memory)}')


@app.command()
def search(
    room: str = typer.Argument(..., help="Room to search, any case"),
    keywords: list[str] = typer.Argument(..., help="Words a memory must contain"),
    palace: str | None = typer.Option(None, help=_PALACE_HELP),
) -> None:
    """Print memories of a room that mention any keyword."""
    try:
        memories = fetch_memories(_store(palace), room, keywords)
    except MindPalaceError as exc:
        _fail(exc)
    palace_app.report_search(room, memories, typer.echo)


@app.command()
def rooms(palace: str | None = typer.Option(None, help=_PALACE_HELP)) -> None:
    """List rooms and how many memories each holds."""
    for room in _store(palace).load().rooms:
        typer.echo(f"{room.name} ({len(room.memories)} memories)")


@app.command()
def show(palace: str | None = typer.Option(None, help=_PALACE_HELP)) -> None:
    """Print the palace document."""
    typer.echo(dumps(_store(palace).load()))


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    app()
