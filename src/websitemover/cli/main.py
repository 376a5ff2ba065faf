"""Main CLI interface for websitemover using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.prompt import Confirm
from rich.table import Table

from .. import __version__
from ..config import (
    MoveWebsiteFilesConfiguration,
    get_config_manager,
    load_configuration,
    read_configuration_file,
    to_xml,
    write_configuration_file,
)
from ..mover import ConsoleProgressSink, RelocationRequest, RelocationResult, RelocationStrategy, WebsiteRelocator
from ..pipeline import BuildProcess, BuildStep, StageDispatcher
from ..plugins import MoveWebsiteFilesPlugin, PerfDiagPlugin
from ..utils.logging import get_console, get_logger, setup_logging

console = get_console()
logger = get_logger(__name__)


def _enabled(flag: bool) -> str:
    return "[green]Enabled[/green]" if flag else "[yellow]Disabled[/yellow]"


def _print_result(result: RelocationResult):
    """Print a relocation summary table."""
    table = Table(title="Relocation Summary", show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Strategy", result.strategy.value)
    table.add_row("Source", str(result.source))
    table.add_row("Destination", str(result.destination))
    table.add_row(
        "Files moved",
        str(result.files_moved) if result.files_moved is not None else "(not counted)",
    )
    table.add_row("Elapsed", f"{result.elapsed_seconds:.2f}s")
    if result.skipped_directories:
        table.add_row("Hidden folders skipped", str(len(result.skipped_directories)))

    console.print(table)


def edit_interactively(
    configuration: MoveWebsiteFilesConfiguration,
) -> MoveWebsiteFilesConfiguration | None:
    """
    Let the user edit a configuration copy at the terminal.

    Returns:
        The edited configuration, or None if the user discarded the changes
    """
    console.print("\n[bold]MoveWebsiteFiles settings[/bold]")
    console.print(
        "[dim]Direct move relocates whole folders at once. It is faster but fails if the "
        "output folder already holds a folder of the same name.[/dim]\n"
    )

    configuration.use_direct_move = Confirm.ask(
        "Use direct move", default=configuration.use_direct_move, console=console
    )

    if not Confirm.ask("Save changes", default=True, console=console):
        return None
    return configuration


@click.group()
@click.version_option(version=__version__, prog_name="websitemover")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to the YAML settings file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the configured logging level",
)
@click.pass_context
def cli(ctx, config: Optional[Path], log_level: Optional[str]):
    """
    websitemover - move a generated documentation website into its output folder.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    try:
        settings = get_config_manager(config).load(create_if_missing=True)
    except ValueError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    setup_logging(
        level=log_level or settings.logging.level,
        log_dir=settings.logging.log_dir,
        max_bytes=settings.logging.max_bytes,
        backup_count=settings.logging.backup_count,
        console_enabled=settings.logging.console_enabled,
        file_enabled=settings.logging.file_enabled,
    )
    ctx.obj["settings"] = settings


def _plugin_config_path(ctx, plugin_config: Optional[Path]) -> Optional[Path]:
    return plugin_config or ctx.obj["settings"].relocation.plugin_config


@cli.command()
@click.argument("source", type=click.Path(path_type=Path))
@click.argument("destination", type=click.Path(path_type=Path))
@click.option(
    "--direct/--manual",
    "direct",
    default=None,
    help="Move whole folders at once, or file by file (default: from plug-in configuration)",
)
@click.option(
    "--plugin-config",
    type=click.Path(path_type=Path),
    help="MoveWebsiteFiles configuration fragment (XML)",
)
@click.option(
    "--progress-interval",
    type=click.IntRange(min=1),
    help="Report progress every N files when moving file by file",
)
@click.pass_context
def move(
    ctx,
    source: Path,
    destination: Path,
    direct: Optional[bool],
    plugin_config: Optional[Path],
    progress_interval: Optional[int],
):
    """
    Move the contents of SOURCE into DESTINATION.

    \b
    Examples:
        websitemover move build/Working/Output/Website build/Help
        websitemover move staging out --direct
    """
    settings = ctx.obj["settings"]

    try:
        if direct is None:
            config_path = _plugin_config_path(ctx, plugin_config)
            configuration = (
                read_configuration_file(config_path)
                if config_path
                else MoveWebsiteFilesConfiguration()
            )
            strategy = RelocationStrategy.from_configuration(configuration)
        else:
            strategy = RelocationStrategy.DIRECT if direct else RelocationStrategy.MANUAL

        relocator = WebsiteRelocator(
            sink=ConsoleProgressSink(console),
            progress_interval=progress_interval or settings.relocation.progress_interval,
        )
        result = relocator.relocate(RelocationRequest(source, destination), strategy)

        console.print()
        _print_result(result)
        console.print("\n[bold green]✓ Website files moved[/bold green]")

    except Exception as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        logger.exception("Move command error")
        sys.exit(1)


@cli.command()
@click.argument("working_folder", type=click.Path(path_type=Path))
@click.argument("output_folder", type=click.Path(path_type=Path))
@click.option(
    "--plugin-config",
    type=click.Path(path_type=Path),
    help="MoveWebsiteFiles configuration fragment (XML)",
)
@click.option("--perf", is_flag=True, help="Also report build step timings")
@click.pass_context
def build(ctx, working_folder: Path, output_folder: Path, plugin_config: Optional[Path], perf: bool):
    """
    Run the website copy step of a build with the MoveWebsiteFiles plug-in.

    The website is expected under WORKING_FOLDER/Output/Website. The website
    folder and OUTPUT_FOLDER may not be nested in one another, so WORKING_FOLDER
    cannot be placed under OUTPUT_FOLDER.
    """
    settings = ctx.obj["settings"]

    try:
        config_path = _plugin_config_path(ctx, plugin_config)
        fragment = to_xml(read_configuration_file(config_path)) if config_path else None

        # Progress reaches the console through the build's logger
        build_process = BuildProcess(working_folder=working_folder, output_folder=output_folder)
        mover_plugin = MoveWebsiteFilesPlugin(progress_interval=settings.relocation.progress_interval)

        with StageDispatcher([mover_plugin]) as dispatcher:
            if perf:
                dispatcher.register(PerfDiagPlugin())

            dispatcher.initialize(build_process, {mover_plugin.metadata.id: fragment})
            dispatcher.run_step(BuildStep.COPYING_WEBSITE_FILES)

        if mover_plugin.last_result is not None:
            console.print()
            _print_result(mover_plugin.last_result)
        console.print("\n[bold green]✓ Build step complete[/bold green]")

    except Exception as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        logger.exception("Build command error")
        sys.exit(1)


@cli.group(name="config")
def config_group():
    """Manage the MoveWebsiteFiles plug-in configuration."""
    pass


@config_group.command(name="show")
@click.argument("path", type=click.Path(path_type=Path), required=False)
@click.pass_context
def config_show(ctx, path: Optional[Path]):
    """Display the plug-in configuration stored in PATH."""
    try:
        path = path or _plugin_config_path(ctx, None)
        configuration = read_configuration_file(path) if path else MoveWebsiteFilesConfiguration()

        console.print("\n[bold cyan]MoveWebsiteFiles Configuration[/bold cyan]\n")
        console.print(f"  Direct move: {_enabled(configuration.use_direct_move)}")
        console.print(f"\n[dim]XML: {to_xml(configuration)}[/dim]", highlight=False)
        if path:
            console.print(f"[dim]File: {path}[/dim]")

    except Exception as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        logger.exception("Config show error")
        sys.exit(1)


@config_group.command(name="edit")
@click.argument("path", type=click.Path(path_type=Path))
def config_edit(path: Path):
    """Edit the plug-in configuration stored in PATH."""
    try:
        configuration = read_configuration_file(path)
        plugin = MoveWebsiteFilesPlugin()
        current = to_xml(configuration)

        updated = plugin.configure(current, editor=edit_interactively)

        # configure hands back the very same fragment when the edit is discarded
        if updated is current:
            console.print("[yellow]Changes discarded[/yellow]")
            return

        write_configuration_file(path, load_configuration(updated))
        console.print(f"[green]✓ Saved:[/green] {path}")

    except Exception as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        logger.exception("Config edit error")
        sys.exit(1)


if __name__ == "__main__":
    cli()
