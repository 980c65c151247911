"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module turns core results into console output using Rich:
- Tree projections (rich.tree.Tree)
- Directory listings, plain or detailed (rich.table.Table)
- World summaries, messages and errors
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from file_quest.domains import Domain
from file_quest.engine.world import World
from file_quest.filesystem.namespace import TreeNode
from file_quest.models.node import FileType, Node, NodeType

# Global console instance
console = Console()

FILE_TYPE_STYLES: dict[FileType, str] = {
    FileType.MONSTER: "red",
    FileType.TREASURE: "yellow",
    FileType.SAVE_POINT: "green",
    FileType.EVENT: "magenta",
    FileType.EMPTY: "dim",
    FileType.NONE: "bold blue",
}

FILE_TYPE_LABELS: dict[FileType, str] = {
    FileType.MONSTER: "monster",
    FileType.TREASURE: "treasure",
    FileType.SAVE_POINT: "save point",
    FileType.EVENT: "event",
    FileType.EMPTY: "empty",
    FileType.NONE: "directory",
}


def node_label(name: str, node_type: NodeType, file_type: FileType) -> Text:
    """Colored display name; directories get a trailing slash."""
    display = f"{name}/" if node_type == NodeType.DIRECTORY else name
    return Text(display, style=FILE_TYPE_STYLES[file_type])


def build_tree(projection: TreeNode, branch: Tree | None = None) -> Tree:
    """Convert a TreeNode projection into a rich Tree."""
    label = node_label(projection.name, projection.node_type, projection.file_type)
    tree = Tree(label) if branch is None else branch.add(label)
    for child in projection.children or []:
        build_tree(child, tree)
    return tree


def print_tree(projection: TreeNode) -> None:
    """Print a tree projection."""
    console.print(build_tree(projection))


def print_listing(files: list[Node], detailed: bool = False) -> None:
    """Print directory entries, one per line or as a table."""
    if not detailed:
        for node in files:
            console.print(node_label(node.name, node.node_type, node.file_type))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Entries", justify="right")
    for node in files:
        entries = str(len(node.children)) if node.is_directory else ""
        table.add_row(
            node_label(node.name, node.node_type, node.file_type),
            FILE_TYPE_LABELS[node.file_type],
            entries,
        )
    console.print(table)


def print_world_summary(world: World) -> None:
    """Print domain, level, cursor and special item locations."""
    node_count = sum(1 for _ in world.namespace.walk())
    console.print(f"[bold]{world.domain_name}[/bold] (level {world.level})")
    console.print(f"  Nodes: {node_count}")
    console.print(f"  Max depth: {world.max_depth}")
    console.print(f"  Current path: {world.current_path}")
    console.print(f"  Boss: {world.boss_location or '(none)'}")
    console.print(f"  Key: {world.key_location or '(none)'}")
    if world.seed is not None:
        console.print(f"  Seed: {world.seed}")


def print_domains(domains: tuple[Domain, ...]) -> None:
    """Print the domain table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("Description")
    for domain in domains:
        table.add_row(domain.type.value, domain.name, domain.description)
    console.print(table)


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(f"[red]{text}[/red]")


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{text}[/green]")


def print_title(title: str) -> None:
    """Print a title in a panel."""
    panel = Panel(
        Text(title, justify="center", style="bold"),
        border_style="blue",
    )
    console.print(panel)
