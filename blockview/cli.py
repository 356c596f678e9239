#!/usr/bin/env python3
"""Blockview CLI - inspect saved lsblk snapshots."""
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from blockview.cli_support import (
    configure,
    load_tree,
    print_error,
    print_success,
    print_warning,
)
from blockview.core.config import get_config
from blockview.core.errors import BlockviewError
from blockview.core.logger import get_logger
from blockview.core.units import format_size
from blockview.discovery.queries import (
    largest_mounted_removable_partition,
    largest_unmounted_removable_partition,
    mounted_removable_partitions,
    unmounted_removable_partitions,
)
from blockview.models.device import DeviceRecord, DeviceTree, Quantity

app = typer.Typer(
    name="blockview",
    help="""Blockview - typed queries over lsblk snapshots

Save a snapshot once, then query it:
  lsblk -pabOJ > disks.json
  blockview tree disks.json
  blockview partitions disks.json --unmounted
  blockview largest disks.json
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

SOURCE_HELP = "lsblk JSON snapshot file, or '-' for stdin"


@app.callback()
def main(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to blockview.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Load configuration before any command runs."""
    try:
        configure(config_path=config, verbose=verbose, log_file=log_file)
    except BlockviewError as e:
        print_error(console, escape(str(e)))
        raise typer.Exit(1) from e


def _load(source: Optional[str]) -> DeviceTree:
    try:
        return load_tree(source)
    except BlockviewError as e:
        logger.debug(f"Failed to load snapshot: {e}")
        print_error(console, escape(str(e)))
        raise typer.Exit(1) from e


def _size(quantity: Quantity) -> str:
    if not quantity.is_present:
        return "-"
    return format_size(quantity.value, get_config().units)


def _node_label(record: DeviceRecord) -> str:
    parts = [f"[bold]{escape(record.name)}[/bold]", _size(record.size)]
    if record.device_type:
        parts.append(escape(record.device_type))
    if record.transport:
        parts.append(f"[cyan]{escape(record.transport)}[/cyan]")
    if record.is_mounted():
        parts.append(f"[green]{escape(record.mountpoint)}[/green]")
    return " ".join(parts)


def _add_children(node: Tree, record: DeviceRecord) -> None:
    for child in record.children:
        _add_children(node.add(_node_label(child)), child)


def _partition_table(title: str, partitions: Iterable[DeviceRecord]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Device")
    table.add_column("Size", justify="right")
    table.add_column("FS")
    table.add_column("Label")
    table.add_column("Mountpoint")
    table.add_column("Available", justify="right")

    for partition in partitions:
        table.add_row(
            escape(partition.path or partition.name),
            _size(partition.size),
            escape(partition.fs_type),
            escape(partition.label),
            escape(partition.mountpoint),
            _size(partition.fs_available),
        )
    return table


@app.command()
def tree(
    source: Optional[str] = typer.Argument(None, help=SOURCE_HELP),
) -> None:
    """Show every device and its children."""
    devices = _load(source)
    if not devices:
        print_warning(console, "Snapshot contains no block devices")
        return

    root = Tree("[bold]Block devices[/bold]")
    for device in devices:
        _add_children(root.add(_node_label(device)), device)
    console.print(root)


@app.command()
def partitions(
    source: Optional[str] = typer.Argument(None, help=SOURCE_HELP),
    mounted: bool = typer.Option(
        False, "--mounted/--unmounted", help="List mounted instead of unmounted partitions"
    ),
) -> None:
    """List partitions of USB devices."""
    devices = _load(source)

    if mounted:
        found, state = mounted_removable_partitions(devices), "mounted"
    else:
        found, state = unmounted_removable_partitions(devices), "unmounted"

    if not found:
        print_warning(console, f"No {state} removable partitions found")
        return

    console.print(_partition_table(f"Removable partitions ({state})", found))
    print_success(console, f"Found {len(found)} {state} partition(s)")


@app.command()
def largest(
    source: Optional[str] = typer.Argument(None, help=SOURCE_HELP),
    mounted: bool = typer.Option(
        False, "--mounted", help="Pick the mounted partition with the most free space"
    ),
) -> None:
    """Show the largest removable partition."""
    devices = _load(source)

    if mounted:
        partition = largest_mounted_removable_partition(devices)
        state = "mounted"
    else:
        partition = largest_unmounted_removable_partition(devices)
        state = "unmounted"

    if partition is None:
        print_warning(console, f"No {state} removable partitions found")
        raise typer.Exit(1)

    console.print(_partition_table(f"Largest {state} removable partition", [partition]))


@app.command()
def size(
    num_bytes: int = typer.Argument(..., help="Byte count"),
    iec: bool = typer.Option(False, "--iec", help="Use 1024-based units (KiB, MiB, ...)"),
) -> None:
    """Format a byte count."""
    try:
        console.print(format_size(num_bytes, "iec" if iec else "si"))
    except ValueError as e:
        print_error(console, escape(str(e)))
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
