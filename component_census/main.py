"""Component Census CLI - JSX component usage inventory for design-system audits."""
import json
from pathlib import Path
from typing import List, Optional
import typer
from rich.table import Table
from rich.markup import escape
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
)

from component_census.config import __version__, build_scan_config, get_config
from component_census.analyzer.discovery import discover_files
from component_census.analyzer.processors import PROCESSORS, count_components, get_processor
from component_census.analyzer.report import ReportTree
from component_census.analyzer.scanner import ScanSummary, scan_files
from component_census.analyzer.syntax import UnrecognizedSyntaxShape
from component_census.utils.safe_console import SafeConsole, error_console

app = typer.Typer(
    name="component-census",
    help="Inventory JSX component usages for design-system adoption audits",
    add_completion=False
)
console = SafeConsole()


def run_scan(files: List[Path], report: ReportTree, scan_config, root: Path,
             show_progress: bool) -> ScanSummary:
    """Scan files into the report, optionally behind a progress bar."""
    if not show_progress:
        return scan_files(files, report, scan_config, root=root)

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=error_console,
        transient=True
    ) as progress:
        task = progress.add_task("[cyan]Scanning components...", total=len(files))
        return scan_files(
            files, report, scan_config, root=root,
            on_file=lambda _path: progress.advance(task)
        )


def print_summary(report: ReportTree, summary: ScanSummary, output: Path, limit: int = 15):
    """Show the most used components after writing a report file."""
    counts = count_components(report)

    table = Table(title=f"📊 Top components ({len(counts)} total)")
    table.add_column("Component", style="cyan")
    table.add_column("Instances", justify="right", style="green")
    for name, count in list(counts.items())[:limit]:
        table.add_row(escape(name), str(count))

    console.print(table)
    console.print(
        f"[green]✓ Scanned {summary.files_scanned} file(s)[/green] → {escape(str(output))}"
    )
    if summary.failed_files:
        console.print(f"[yellow]⚠ {len(summary.failed_files)} file(s) could not be parsed[/yellow]")


@app.command()
def scan(
    root: str = typer.Argument(".", help="Directory (or single file) to crawl"),
    components: Optional[List[str]] = typer.Option(None, "--components", "-c", help="Component names to report (repeatable or comma separated). Default: all"),
    include_subcomponents: Optional[bool] = typer.Option(None, "--include-subcomponents/--no-include-subcomponents", help="Also report dotted usages such as Header.Logo. Default: from environment, else off"),
    imported_from: Optional[str] = typer.Option(None, "--imported-from", help="Only report components imported from this exact module"),
    imported_from_pattern: Optional[str] = typer.Option(None, "--imported-from-pattern", help="Only report components whose module matches this regex"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-e", help="Extra directory names to skip"),
    include_tests: bool = typer.Option(False, "--include-tests", help="Also scan *.test.* and *.spec.* files"),
    processor: str = typer.Option("raw-report", "--processor", "-p", help=f"Output shape: {', '.join(PROCESSORS)}"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file instead of stdout"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Disable the progress bar"),
):
    """Scan JSX/TSX sources and report component usages as JSON."""
    root_path = Path(root)
    if not root_path.exists():
        console.print(f"[red]Error: Path does not exist: {escape(root)}[/red]")
        raise typer.Exit(1)

    env = get_config()
    try:
        scan_config = build_scan_config(
            components=components or env.components,
            include_sub_components=env.include_sub_components if include_subcomponents is None else include_subcomponents,
            imported_from=imported_from or env.imported_from,
            imported_from_pattern=imported_from_pattern or env.imported_from_pattern,
        )
        process = get_processor(processor)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    files = discover_files(root_path, exclude=(exclude or []) + env.exclude, include_tests=include_tests)
    base_dir = root_path.parent if root_path.is_file() else root_path

    report: ReportTree = {}
    try:
        summary = run_scan(files, report, scan_config, base_dir, show_progress=not no_progress and output is not None)
    except UnrecognizedSyntaxShape as e:
        console.print(f"[red]✗ Scan aborted in {escape(str(e.file_path))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    document = process(report)

    if output is None:
        typer.echo(json.dumps(document, indent=2, ensure_ascii=False))
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
    print_summary(report, summary, output)


@app.command()
def version():
    """Show the Component Census version."""
    console.print(f"component-census {__version__}")


@app.callback()
def main():
    """Component Census - where is each design-system component used?"""
    pass


if __name__ == "__main__":
    app()
