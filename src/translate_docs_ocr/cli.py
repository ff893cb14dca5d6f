"""
CLI for translate-docs-ocr.

Provides commands for translating a directory of documents and for checking
the translation service connection with file names.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from translate_docs_ocr.config import Settings, create_default_config, load_config
from translate_docs_ocr.log import setup_logging
from translate_docs_ocr.models import FileStatus, RunReport
from translate_docs_ocr.orchestrator import BatchTranslator
from translate_docs_ocr.translation import LibreTranslateClient

app = typer.Typer(
    name="translate-docs-ocr",
    help="Batch OCR and translation of PDF, image and DOCX documents.",
    add_completion=False,
)

console = Console()


def get_settings(config_path: Path | None = None, verbose: bool = False) -> Settings:
    """Load settings from config file or defaults, then configure logging."""
    settings = load_config(config_path)
    if verbose:
        settings.logging.level = "DEBUG"
    setup_logging(settings.logging)
    return settings


def get_translator(settings: Settings) -> LibreTranslateClient:
    """Create the LibreTranslate client for the configured language pair."""
    return LibreTranslateClient(
        settings.translation.libretranslate_url,
        source_language=settings.translation.source_language,
        target_language=settings.translation.target_language,
        api_key=settings.translation.api_key,
        timeout=settings.translation.timeout_seconds,
    )


def _display_config(settings: Settings, source_dir: Path, target_dir: Path | None) -> None:
    """Display the configuration being used."""
    config_table = Table(show_header=False, box=None, padding=(0, 2))
    config_table.add_column("Key", style="cyan")
    config_table.add_column("Value", style="green")

    config_table.add_row("Source", str(source_dir))
    if target_dir is not None:
        config_table.add_row("Target", str(target_dir))
    config_table.add_row("Service", settings.translation.libretranslate_url)
    config_table.add_row(
        "Languages",
        f"{settings.translation.source_language} -> {settings.translation.target_language}",
    )
    config_table.add_row("OCR language", settings.ocr.language)

    console.print(
        Panel(config_table, title="[bold blue]translate-docs-ocr[/bold blue]", border_style="blue")
    )


def _display_report(report: RunReport) -> None:
    """Display a per-file summary of a translate run."""
    table = Table(title="Translation Summary")
    table.add_column("File", style="cyan")
    table.add_column("Format", style="magenta")
    table.add_column("Status")
    table.add_column("Translated", justify="right")
    table.add_column("Failed", justify="right")
    table.add_column("Artifacts", justify="right")

    for file_report in report.files:
        status_style = {
            FileStatus.COMPLETED: "green",
            FileStatus.FAILED: "red",
        }.get(file_report.status, "white")

        table.add_row(
            file_report.path.name[:40],
            file_report.format.value,
            f"[{status_style}]{file_report.status.value}[/{status_style}]",
            str(file_report.units_translated),
            str(file_report.units_failed),
            str(len(file_report.artifacts)),
        )

    console.print(table)
    console.print(
        f"[green]{report.count(FileStatus.COMPLETED)} completed[/green], "
        f"[red]{report.count(FileStatus.FAILED)} failed[/red], "
        f"{report.unsupported} unsupported skipped"
    )


@app.command()
def filenames(
    source_dir: Path = typer.Option(..., "--source-dir", "-s", help="Directory to walk"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Translate file names only (checks the translation service)."""
    settings = get_settings(config, verbose)

    async def run() -> None:
        async with get_translator(settings) as translator:
            batch = BatchTranslator.from_settings(settings, translator, console=console)
            await batch.translate_filenames(source_dir)

    try:
        asyncio.run(run())
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None


@app.command()
def translate(
    target_dir: Path = typer.Argument(..., help="Directory receiving translated output"),
    source_dir: Path = typer.Option(..., "--source-dir", "-s", help="Directory to translate"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Translate the source folder into the target folder."""
    settings = get_settings(config, verbose)
    _display_config(settings, source_dir, target_dir)

    async def run() -> RunReport:
        async with get_translator(settings) as translator:
            batch = BatchTranslator.from_settings(settings, translator, console=console)
            return await batch.translate_directory(source_dir, target_dir)

    try:
        report = asyncio.run(run())
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    _display_report(report)
    console.print(f"[green]Output saved to: {target_dir}[/green]")


@app.command()
def init(
    output_path: Path = typer.Option(
        Path("config.yaml"),
        "--output",
        "-o",
        help="Output path for config file",
    ),
) -> None:
    """Generate a default configuration file."""
    if output_path.exists():
        overwrite = typer.confirm(f"{output_path} already exists. Overwrite?")
        if not overwrite:
            raise typer.Abort()

    create_default_config(output_path)
    console.print(f"[green]Created config file: {output_path}[/green]")
    console.print("\nEdit the file to point at your LibreTranslate server, then run:")
    console.print("  translate-docs-ocr translate ./translated --source-dir ./documents")


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
