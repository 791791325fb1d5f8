"""
Typer-based CLI for MARAS rule post-processing.

Validates pipeline configurations and lists the available rule filters.
"""
from pathlib import Path
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from maras.core.config import PipelineConfig
from maras.core.exceptions import ConfigurationError
from maras.filtering.pipeline import STEP_OUTPUTS

app = typer.Typer(
    name="maras",
    help="Filter mined association rules for drug interactions and adverse reactions",
    add_completion=False
)
console = Console()

STEP_DESCRIPTIONS = {
    "closures": "Keep rules whose items form a closed itemset",
    "drug_reaction": "Keep rules with only drugs => only reactions",
    "no_singletons": "Drop rules below the minimum number of drugs (default 2)",
    "no_complex": "Drop rules above the drug or reaction caps (default 2 and 1)",
}


def resolve_config_path(config_name: str) -> Path:
    """
    Resolve configuration file path.

    Tries:
    1. Exact path if it exists
    2. config/<config_name> if not found
    3. config/<config_name>.json if not found

    Raises:
        typer.BadParameter: If file not found
    """
    path = Path(config_name)
    if path.exists():
        return path

    config_dir = Path('config')
    path = config_dir / config_name
    if path.exists():
        return path

    if not config_name.endswith('.json'):
        path = config_dir / f"{config_name}.json"
        if path.exists():
            return path

    raise typer.BadParameter(
        f"Configuration file not found: {config_name}\n"
        f"Tried: {config_name}, config/{config_name}, config/{config_name}.json"
    )


@app.command()
def validate(
    config: str = typer.Argument(
        ...,
        help="Configuration file name (e.g., 'default_pipeline.json' or 'default_pipeline')"
    )
):
    """
    Validate a pipeline configuration file.

    Examples:
        maras validate default_pipeline
        maras validate config/default_pipeline.json
    """
    try:
        config_path = resolve_config_path(config)
    except typer.BadParameter as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Validating:[/bold] {config_path.name}")

    try:
        cfg = PipelineConfig.from_json(config_path)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]✗ Validation failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print("[green]✓ Configuration is valid![/green]")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Pipeline Name", cfg.name)
    table.add_row("Steps", " -> ".join(cfg.steps) if cfg.steps else "(none)")
    table.add_row("Min Antecedent Items", str(cfg.policy.min_antecedent_items))
    table.add_row("Max Antecedent Items", str(cfg.policy.max_antecedent_items))
    table.add_row("Max Consequent Items", str(cfg.policy.max_consequent_items))
    table.add_row("Needs Closures", "yes" if cfg.requires_closures else "no")

    console.print(table)


@app.command()
def steps():
    """List the rule filters a pipeline can use."""
    table = Table(title="Filter Steps", show_header=True, header_style="bold magenta")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Output Collection", style="green")
    table.add_column("Description", style="dim")

    for step, output in STEP_OUTPUTS.items():
        table.add_row(step, output, STEP_DESCRIPTIONS[step])

    console.print(table)


@app.command()
def info():
    """Show system and environment information."""
    import platform
    from importlib.metadata import version, PackageNotFoundError

    from maras import __version__

    console.print(Panel.fit(
        "[bold cyan]MARAS rule post-processing[/bold cyan]\n"
        "[dim]Drug interaction and adverse reaction rule filters[/dim]",
        border_style="cyan"
    ))

    table = Table(title="System Information", show_header=True, header_style="bold cyan")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Version", style="green")

    table.add_row("maras", __version__)
    table.add_row("Python", platform.python_version())
    table.add_row("Platform", platform.platform())
    for dist in ("pydantic", "structlog", "typer", "rich"):
        try:
            table.add_row(dist, version(dist))
        except PackageNotFoundError:
            table.add_row(dist, "not installed")

    console.print(table)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
