"""Command Line Interface for blueprintgen.

Generate, validate, render and export architectural floor plans.
"""

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from blueprintgen.export import ExportBridge, available_formats
from blueprintgen.generation import GenerationSession
from blueprintgen.models import BlueprintSpec
from blueprintgen.rendering import BlueprintRenderer, ViewState
from blueprintgen.settings import ConfigManager, Settings, configure_logging
from blueprintgen.standards import BUILDING_TYPES, get_standard, list_countries
from blueprintgen.validation import Validator

app = typer.Typer(
    name="blueprintgen",
    help="Procedural architectural floor plans: generate, validate, render and export",
    no_args_is_help=True,
)
console = Console()

_state: dict = {}


def _settings() -> Settings:
    settings = _state.get("settings")
    if settings is None:
        settings = ConfigManager().load_settings()
        _state["settings"] = settings
    return settings


def _load_spec(path: Path) -> BlueprintSpec:
    try:
        return BlueprintSpec.from_json(path.read_text(encoding="utf-8"))
    except OSError as exc:
        console.print(f"[red]Could not read {path}: {exc}[/red]")
        raise typer.Exit(code=1)
    except ValidationError as exc:
        console.print(f"[red]Invalid blueprint in {path}:[/red]\n{exc}")
        raise typer.Exit(code=1)


def _rooms_table(spec: BlueprintSpec) -> Table:
    table = Table(title=f"{spec.building_type.upper()} PLAN - {spec.country}")
    table.add_column("ID", style="cyan")
    table.add_column("Room")
    table.add_column("Position", justify="right")
    table.add_column("Size", justify="right")
    table.add_column(f"Area (sq {spec.unit})", justify="right")
    for room in spec.rooms:
        table.add_row(
            room.id,
            room.name,
            f"({room.position.x:g}, {room.position.y:g})",
            f"{room.width:g} x {room.depth:g}",
            f"{room.area:g}",
        )
    table.caption = f"Total: {spec.total_area:g} sq {spec.unit}"
    return table


def _print_warnings(warnings: List[str]) -> None:
    if not warnings:
        console.print("[green]No layout warnings.[/green]")
        return
    console.print(f"[yellow]{len(warnings)} warning(s):[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]![/yellow] {warning}")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Override BLUEPRINT_LOG_LEVEL"
    ),
):
    """Load settings and configure logging."""
    settings = _settings()
    configure_logging(log_level or settings.log_level)


@app.command()
def generate(
    building_type: str = typer.Argument("house", help="house, shop, office or restaurant"),
    country: Optional[str] = typer.Option(None, "--country", "-c", help="Country code"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the spec as JSON"),
    delay: Optional[float] = typer.Option(None, "--delay", help="Simulated latency in seconds"),
):
    """Generate and lay out a blueprint."""
    settings = _settings()
    session = GenerationSession(
        delay=settings.generation_delay if delay is None else delay,
        country=country or settings.default_country,
    )
    spec = asyncio.run(session.generate(building_type))
    if spec is None:
        console.print("[red]Generation failed; see the log for details.[/red]")
        raise typer.Exit(code=1)

    console.print(_rooms_table(spec))
    _print_warnings(session.warnings)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(spec.to_json(), encoding="utf-8")
        console.print(f"[green]Saved spec to {output}[/green]")


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="Blueprint JSON file"),
    markdown: bool = typer.Option(False, "--markdown", "-m", help="Print a Markdown report"),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 when there are warnings"),
):
    """Check minimum room areas and overlaps."""
    spec = _load_spec(spec_file)
    report = Validator().validate(spec)
    if markdown:
        console.print(report.to_markdown())
    else:
        _print_warnings(report.warnings)
    if strict and report.warnings:
        raise typer.Exit(code=1)


@app.command()
def render(
    spec_file: Path = typer.Argument(..., help="Blueprint JSON file"),
    output: Path = typer.Option(Path("blueprint.png"), "--output", "-o", help="PNG file"),
    scale: float = typer.Option(0.8, "--scale", "-s", help="Zoom factor (0.3 - 2.5)"),
    pan_x: float = typer.Option(0.0, "--pan-x", help="Horizontal pan in pixels"),
    pan_y: float = typer.Option(0.0, "--pan-y", help="Vertical pan in pixels"),
):
    """Draw the plan to a PNG image."""
    spec = _load_spec(spec_file)
    view = ViewState(scale=scale, offset=(pan_x, pan_y))
    surface = BlueprintRenderer().render(spec, view)
    try:
        path = surface.save_png(output)
    finally:
        surface.close()
    console.print(
        f"[green]Rendered {surface.width}x{surface.height} plan at {view.percent}% to {path}[/green]"
    )


@app.command()
def export(
    spec_file: Path = typer.Argument(..., help="Blueprint JSON file"),
    formats: List[str] = typer.Option(
        ["pdf"], "--format", "-f", help=f"One of: {', '.join(available_formats())}"
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-d", help="Target directory"),
    basename: Optional[str] = typer.Option(None, "--basename", "-b", help="File name without extension"),
):
    """Export the plan as PDF, SVG, PNG or JSON."""
    spec = _load_spec(spec_file)
    bridge = ExportBridge(output_dir or _settings().output_dir)

    failed = False
    for fmt in formats:
        result = bridge.export(spec, fmt, basename=basename)
        if result.success:
            console.print(f"[green]{result.format.upper()}[/green] {result.file_path}")
        else:
            failed = True
            console.print(f"[red]{result.format.upper()}[/red] {result.message}")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def countries():
    """List supported countries, units and building types."""
    table = Table(title="Countries")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Unit")
    table.add_column("Standard")
    for country in list_countries():
        table.add_row(country.code, country.name, country.unit, get_standard(country.code).notes)
    console.print(table)

    types = Table(title="Building types")
    types.add_column("ID", style="cyan")
    types.add_column("Name")
    types.add_column("Rooms")
    types.add_column("Layout")
    for building in BUILDING_TYPES.values():
        types.add_row(building.id, building.name, ", ".join(building.default_rooms), building.typical_layout)
    console.print(types)


@app.command("env-template")
def env_template(
    directory: Path = typer.Argument(Path("."), help="Where to write .env.example"),
):
    """Write a .env.example listing every configuration key."""
    path = ConfigManager().generate_env_template(directory)
    console.print(f"[green]Wrote {path}[/green]")


if __name__ == "__main__":
    app()
