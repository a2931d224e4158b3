"""Command-line interface for profilesweep."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from profilesweep import ProfileSweeper, SweeperConfig, to_json, __version__
from profilesweep.exceptions import ConfigError, EnumerationError
from profilesweep.models.profile import ProfileRecord

app = typer.Typer(
    name="profilesweep",
    help="Inventory and remove local Windows user profiles",
    add_completion=False,
)
console = Console()

KEEP_PROMPT = "Enter ID of profiles to keep: (example: 0,5,7,17)"
CONFIRM_PROMPT = "Do you want to continue? (y/n)"


def version_callback(value: bool):
    if value:
        console.print(f"profilesweep version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """profilesweep - inventory and remove local Windows user profiles."""
    pass


@app.command("list")
def list_profiles(
    json_output: bool = typer.Option(
        False, "--json", help="Print the inventory as JSON"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Enable debug logging on stderr"
    ),
):
    """Show all user profiles with their owner and size."""
    with _make_sweeper(verbose) as sweeper:
        records = _load_inventory(sweeper)

    if json_output:
        typer.echo(to_json(records))
        return

    console.print(_profile_table(records, with_index=True))
    console.print(f"\n[bold]{len(records)} profiles[/bold]")


@app.command()
def clean(
    keep: Optional[str] = typer.Option(
        None, "--keep", "-k", help="Comma-separated IDs to keep (prompts if omitted)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Show what would be deleted and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Enable debug logging on stderr"
    ),
):
    """Delete every profile not explicitly kept. Loaded profiles are never deleted."""
    with _make_sweeper(verbose) as sweeper:
        records = _load_inventory(sweeper)
        console.print(_profile_table(records, with_index=True))

        if keep is None:
            console.print(KEEP_PROMPT)
            keep = _read_line()
            if keep is None:
                console.print("Aborting!")
                raise typer.Exit(1)

        plan = sweeper.plan(records, keep)

        console.print()
        console.print("=== Profiles to delete ===")
        console.print(_profile_table(plan.candidates, with_index=False))
        for record in plan.protected:
            _print_loaded(record.sid)

        if plan.is_empty:
            console.print("No profiles to delete")
            return

        if dry_run:
            console.print("[dim]Dry run, nothing was deleted[/dim]")
            return

        console.print(CONFIRM_PROMPT)
        if not sweeper.confirm(_read_line()):
            console.print("Aborting!")
            return

        report = sweeper.execute(plan)

    for outcome in report.outcomes:
        if outcome.success:
            console.print(f"[green]Deleted profile {outcome.sid}[/green]", soft_wrap=True)
        else:
            console.print(f"[red]Failed to delete profile {outcome.sid}[/red]", soft_wrap=True)

    already_reported = {record.sid for record in plan.protected}
    for sid in report.skipped_loaded:
        if sid not in already_reported:
            _print_loaded(sid)

    console.print(
        f"\n[bold]Deleted {report.deleted_count}/{len(report.outcomes)} profiles[/bold]"
    )
    if report.failed_count:
        raise typer.Exit(1)


def _make_sweeper(verbose: bool) -> ProfileSweeper:
    config = SweeperConfig(log_level="DEBUG") if verbose else SweeperConfig()
    try:
        return ProfileSweeper(config)
    except ConfigError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(2)


def _load_inventory(sweeper: ProfileSweeper) -> list[ProfileRecord]:
    try:
        return sweeper.inventory()
    except EnumerationError as e:
        console.print(f"[red]Failed to enumerate profiles: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _read_line() -> str | None:
    """Read one line of operator input, None on end of input."""
    try:
        return console.input()
    except EOFError:
        return None


def _print_loaded(sid: str):
    console.print(
        f"[yellow]{sid} can't be deleted, because profile is loaded[/yellow]",
        soft_wrap=True,
    )


def _format_size(size: int | None) -> str:
    return f"{size:,}" if size is not None else "-"


def _profile_table(records: list[ProfileRecord], with_index: bool) -> Table:
    """Build the inventory table, optionally with the selection index."""
    table = Table()
    if with_index:
        table.add_column("ID", justify="right")
    table.add_column("SID", no_wrap=True)
    table.add_column("Domain")
    table.add_column("Username")
    table.add_column("Roaming")
    table.add_column("Loaded")
    table.add_column("Size", justify="right")

    for index, p in enumerate(records):
        row = [
            escape(p.sid),
            escape(p.display_domain),
            escape(p.display_username),
            "yes" if p.roaming_configured else "no",
            "[yellow]yes[/yellow]" if p.loaded else "no",
            _format_size(p.size),
        ]
        if with_index:
            row.insert(0, str(index))
        table.add_row(*row)

    return table


if __name__ == "__main__":
    app()
