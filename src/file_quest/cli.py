"""
cli.py

PURPOSE: Command-line interface for generating and inspecting worlds.
DEPENDENCIES: typer, rich, pydantic

ARCHITECTURE NOTES:
The CLI provides commands for:
- generate: Generate a world and print its tree (optionally save it)
- show: Render a saved world or a hand-built layout file
- validate: Validate a layout or save file
- saves: List worlds in the saves directory
- domains: List the available themes
- config: Show the effective configuration
"""

import json
import logging
import random
from collections import Counter
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console

from file_quest import __version__
from file_quest.config import get_settings
from file_quest.domains import DOMAINS, DomainType
from file_quest.engine.world import World, WorldError
from file_quest.filesystem.namespace import Namespace
from file_quest.generator import GenerationError, WorldGenerator
from file_quest.models.layout import NamespaceLayout
from file_quest.models.node import NodeError
from file_quest.models.state import SavedWorld
from file_quest.observability import init_telemetry, shutdown_telemetry
from file_quest.ui import plain

app = typer.Typer(
    name="file-quest",
    help="Explore procedurally generated project trees like a dungeon.",
    add_completion=False,
)

console = Console()

SEED_LIMIT = 2**32


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"file-quest version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """File Quest - generate and inspect explorable worlds."""
    settings = get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_json(path: Path) -> dict[str, Any]:
    """Read a JSON object from disk or exit with an error."""
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        plain.print_error(f"Invalid JSON at line {e.lineno}: {e.msg}")
        raise typer.Exit(1) from None

    if not isinstance(data, dict):
        plain.print_error("Expected a JSON object at the top level")
        raise typer.Exit(1)
    return data


def _resolve_world_file(world_file: Path) -> Path:
    """Accept a file path or the name of a world in the saves directory."""
    if world_file.is_file():
        return world_file

    saves = get_settings().saves_dir()
    for candidate in (saves / world_file, saves / f"{world_file}.json"):
        if candidate.is_file():
            return candidate

    plain.print_error(f"No such file or saved world: {world_file}")
    raise typer.Exit(1)


def _print_validation_errors(error: ValidationError) -> None:
    plain.print_error("Validation errors:")
    for item in error.errors():
        loc = " -> ".join(str(x) for x in item["loc"])
        plain.print_error(f"  {loc}: {item['msg']}")


@app.command()
def generate(
    domain: Annotated[
        DomainType | None,
        typer.Option(
            "--domain",
            "-D",
            help="Theme of the world (default from configuration)",
        ),
    ] = None,
    level: Annotated[
        int | None,
        typer.Option(
            "--level",
            "-l",
            help="World level; higher levels are deeper",
            min=1,
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Generation seed (random if omitted)",
        ),
    ] = None,
    depth: Annotated[
        int | None,
        typer.Option(
            "--depth",
            "-d",
            help="Limit the printed tree to this many levels",
            min=0,
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Include hidden files",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Save the world to this JSON file",
        ),
    ] = None,
    save_name: Annotated[
        str | None,
        typer.Option(
            "--save",
            "-S",
            help="Save the world under this name in the saves directory",
        ),
    ] = None,
) -> None:
    """Generate a world and print its tree."""
    settings = get_settings()
    init_telemetry(settings.otel)

    if seed is None:
        seed = settings.seed if settings.seed is not None else random.randrange(SEED_LIMIT)

    try:
        world = WorldGenerator(seed=seed).generate_world(
            domain or settings.default_domain,
            level or settings.default_level,
        )
    except GenerationError as e:
        plain.print_error(f"Generation failed: {e}")
        raise typer.Exit(1) from None
    finally:
        shutdown_telemetry()

    plain.print_title(world.domain_name)
    plain.print_world_summary(world)
    console.print()
    plain.print_tree(world.namespace.tree(max_depth=depth, show_hidden=show_all))

    if output is None and save_name:
        output = settings.saves_dir() / f"{save_name}.json"

    if output is not None:
        if output.exists() and not typer.confirm(f"File {output} already exists. Overwrite?"):
            raise typer.Exit(0)
        with open(output, "w") as f:
            json.dump(world.to_saved().model_dump(mode="json"), f, indent=2)
        console.print()
        plain.print_success(f"World saved to {output}")


@app.command()
def show(
    world_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a save file or layout JSON file, or the name of a saved world",
        ),
    ],
    path: Annotated[
        str | None,
        typer.Option(
            "--path",
            "-p",
            help="Directory to show instead of the saved cursor",
        ),
    ] = None,
    depth: Annotated[
        int | None,
        typer.Option(
            "--depth",
            "-d",
            help="Limit the printed tree to this many levels",
            min=0,
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Include hidden files",
        ),
    ] = False,
    list_only: Annotated[
        bool,
        typer.Option(
            "--ls",
            help="List the directory instead of printing a tree",
        ),
    ] = False,
) -> None:
    """Render a saved world or a hand-built layout."""
    data = _load_json(_resolve_world_file(world_file))

    try:
        if "state" in data:
            world = World.from_saved(SavedWorld.model_validate(data))
            namespace = world.namespace
            plain.print_world_summary(world)
            console.print()
        else:
            namespace = Namespace.from_layout(NamespaceLayout.model_validate(data))
    except ValidationError as e:
        _print_validation_errors(e)
        raise typer.Exit(1) from None
    except (NodeError, WorldError) as e:
        plain.print_error(f"Invalid world: {e}")
        raise typer.Exit(1) from None

    if path:
        result = namespace.cd(path)
        if not result.success:
            plain.print_error(f"cd: {result.error}")
            raise typer.Exit(1)

    if list_only:
        listing = namespace.ls(show_hidden=show_all, detailed=True)
        plain.print_listing(listing.files, detailed=listing.detailed)
    else:
        plain.print_tree(namespace.tree(max_depth=depth, show_hidden=show_all))


@app.command()
def validate(
    world_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a save file or layout JSON file, or the name of a saved world",
        ),
    ],
) -> None:
    """Validate a layout or save file."""
    data = _load_json(_resolve_world_file(world_file))

    try:
        if "state" in data:
            saved = SavedWorld.model_validate(data)
            namespace = World.from_saved(saved).namespace
            layout = saved.layout
        else:
            layout = NamespaceLayout.model_validate(data)
            namespace = Namespace.from_layout(layout)
    except ValidationError as e:
        _print_validation_errors(e)
        raise typer.Exit(1) from None
    except (NodeError, WorldError) as e:
        plain.print_error(f"Invalid world: {e}")
        raise typer.Exit(1) from None

    special = layout.special_items
    problems: list[str] = []
    if special and special.boss_location:
        boss = namespace.get_node_by_path(special.boss_location)
        if boss is None or not boss.is_directory:
            problems.append(f"boss location is not a directory: {special.boss_location}")
    if special and special.key_location:
        key = namespace.get_node_by_path(special.key_location)
        if key is None or not key.is_file:
            problems.append(f"key location is not a file: {special.key_location}")

    if problems:
        for problem in problems:
            plain.print_error(problem)
        raise typer.Exit(1)

    counts = Counter(node.file_type.value for node in namespace.walk() if node.is_file)
    directories = sum(1 for node in namespace.walk() if node.is_directory)

    plain.print_success(f"Valid world: {layout.root_name}")
    console.print(f"  Directories: {directories}")
    for file_type, count in sorted(counts.items()):
        console.print(f"  {file_type}: {count}")


@app.command()
def saves() -> None:
    """List worlds in the saves directory."""
    saves_dir = get_settings().saves_dir()
    names = sorted(path.stem for path in saves_dir.glob("*.json"))
    if not names:
        console.print(f"No saved worlds in {saves_dir}")
        return
    for name in names:
        console.print(name)


@app.command()
def domains() -> None:
    """List the available world themes."""
    plain.print_domains(DOMAINS)


@app.command("config")
def config_cmd() -> None:
    """Show the effective configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Data directory: {settings.data_dir}")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Default domain: {settings.default_domain.value}")
    console.print(f"  Default level: {settings.default_level}")
    seed_status = settings.seed if settings.seed is not None else "(random)"
    console.print(f"  Seed: {seed_status}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")
    endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
    console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
