"""
Main module for the roster manager.

Reads provided rosters from a JSON document, rebalances them to the
configured capacity and prints the managed rosters.
"""
import sys
import random
import logging
import argparse
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import settings
from config.logging_config import configure_logging
from roster import InvalidArgument, Roster, RosterManager
from utils.helpers import load_json, save_json, rosters_from_document, rosters_to_document

logger = logging.getLogger(__name__)
console = Console()

def build_manager(rosters: List[Roster], capacity: int, seed: Optional[int] = None) -> RosterManager:
    """
    Create a roster manager and register the provided rosters.

    Args:
        rosters: Provided rosters
        capacity: Maximum size of a managed roster
        seed: Optional seed for a reproducible shuffle

    Returns:
        RosterManager with every roster registered
    """
    rng = random.Random(seed) if seed is not None else None
    manager = RosterManager(capacity, rng=rng)
    for roster in rosters:
        manager.manage(roster)
    return manager

def render_rosters(managed, provided_names) -> Table:
    """Build a rich table of managed rosters."""
    table = Table(title="Managed rosters")
    table.add_column("Roster", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Elements")

    for roster in managed:
        name = escape(roster.name)
        if roster.name not in provided_names:
            name = f"[yellow]{name}[/yellow]"
        table.add_row(name, str(roster.size()), escape(", ".join(roster.elements())))

    return table

def parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rebalance rosters to a maximum size")
    parser.add_argument("rosters", help="JSON file with the provided rosters")
    parser.add_argument(
        "--capacity",
        type=int,
        default=settings.ROSTER_CAPACITY,
        help=f"Maximum number of elements per roster (default: {settings.ROSTER_CAPACITY})"
    )
    parser.add_argument("--output", help="Write the managed rosters to this JSON file")
    parser.add_argument("--seed", type=int, help="Seed the shuffle for a reproducible result")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level (default: %(default)s)")
    parser.add_argument("--log-file", default=str(settings.LOG_FILE), help="Log file path")
    return parser.parse_args(args)

def main(args: Optional[Sequence[str]] = None) -> int:
    """
    Entry point for the command-line interface.

    Returns:
        int: Exit code, 0 on success and 1 on failure
    """
    opts = parse_args(args)
    configure_logging(level=opts.log_level, log_file=opts.log_file)
    settings.check_settings()

    document = load_json(opts.rosters)
    if document is None:
        console.print(f"[bold red]Could not read rosters from {opts.rosters}[/bold red]")
        return 1

    try:
        rosters = rosters_from_document(document)
        manager = build_manager(rosters, opts.capacity, seed=opts.seed)
    except InvalidArgument as e:
        logger.error(f"Invalid rosters in {opts.rosters}: {e}")
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1

    managed = manager.get_managed_rosters()
    logger.info(
        f"Rebalanced {len(rosters)} rosters into {len(managed)} with capacity {manager.capacity}"
    )

    console.print(render_rosters(managed, {roster.name for roster in rosters}))

    if opts.output:
        if not save_json(rosters_to_document(managed), opts.output):
            console.print(f"[bold red]Failed to write {opts.output}[/bold red]")
            return 1
        console.print(f"[green]Saved managed rosters to {opts.output}[/green]")

    return 0

if __name__ == "__main__":
    sys.exit(main())
