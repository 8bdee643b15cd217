"""Main CLI application"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ghana_legal_docs.db import get_draft_repository
from ghana_legal_docs.exceptions import DraftStorageError
from ghana_legal_docs.models.records import DocumentType, TenancyRecord, record_from_snapshot
from ghana_legal_docs.services.clause_library import CLAUSE_LIBRARY, resolve_clauses
from ghana_legal_docs.services.composer import compose
from ghana_legal_docs.services.exporter import ExportFormat, export_document
from ghana_legal_docs.cli.preview_cmd import preview_command
from ghana_legal_docs.utils.config import get_settings

app = typer.Typer(
    name="ghana-legal-docs",
    help="Generate Ghanaian tenancy and vehicle transfer agreements",
    add_completion=False,
)
draft_app = typer.Typer(help="Manage saved drafts", add_completion=False)
app.add_typer(draft_app, name="draft")

console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs")):
    """Configure logging for every command"""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _load_record(document_type: DocumentType, data: Optional[Path], clauses: Optional[List[str]]):
    """Record from a JSON snapshot file, else the saved draft, else a blank form"""
    if data:
        try:
            snapshot = json.loads(data.read_text(encoding="utf-8"))
            record = record_from_snapshot(document_type, snapshot)
        except (OSError, ValueError, ValidationError) as e:
            console.print(f"[red]Invalid record data in {data}: {e}[/red]")
            raise typer.Exit(code=1)
    else:
        record = get_draft_repository().load(document_type)
        if record is None:
            console.print("[yellow]No data or saved draft. Using blank values.[/yellow]")
            record = record_from_snapshot(document_type, {})

    if clauses:
        if not isinstance(record, TenancyRecord):
            console.print("[red]Clauses can only be added to tenancy agreements[/red]")
            raise typer.Exit(code=1)
        try:
            extra = resolve_clauses(clauses)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(code=1)
        merged = list(record.custom_clauses) + [c for c in extra if c not in record.custom_clauses]
        record = record.model_copy(update={"custom_clauses": merged})
    return record


DATA_OPTION = typer.Option(None, "--data", "-d", help="JSON record snapshot (camelCase keys)")
CLAUSE_OPTION = typer.Option(None, "--clause", "-c", help="Library clause as 'Category:N' (repeatable)")


@app.command("clauses")
def clauses():
    """List the clause library"""
    table = Table(title="Clause Library")
    table.add_column("Selection", style="cyan", no_wrap=True)
    table.add_column("Clause")

    for category, items in CLAUSE_LIBRARY.items():
        for index, clause in enumerate(items, start=1):
            table.add_row(f"{category}:{index}", clause)

    console.print(table)
    console.print("\nAdd clauses with [cyan]--clause \"Restrictions & Rules:1\"[/cyan]")


@app.command("preview")
def preview(
    document_type: DocumentType = typer.Argument(..., help="tenancy or vehicle-transfer"),
    data: Optional[Path] = DATA_OPTION,
    clause: Optional[List[str]] = CLAUSE_OPTION,
):
    """Show the agreement in the terminal"""
    record = _load_record(document_type, data, clause)
    preview_command(compose(record), console)


@app.command("export")
def export(
    document_type: DocumentType = typer.Argument(..., help="tenancy or vehicle-transfer"),
    fmt: ExportFormat = typer.Option(ExportFormat.DOCX, "--format", "-f", help="docx, pdf or print"),
    data: Optional[Path] = DATA_OPTION,
    clause: Optional[List[str]] = CLAUSE_OPTION,
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory"),
):
    """Export the agreement as Word, PDF or a print page"""
    record = _load_record(document_type, data, clause)

    settings = get_settings()
    if output_dir:
        settings = settings.model_copy(update={"output_dir": str(output_dir)})

    result = export_document(record, fmt, settings)
    if not result.success:
        console.print(f"[red]{result.title}: {result.message}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green][OK] {result.title}[/green] {result.message}")
    console.print(f"[dim]{result.path}[/dim]")


@draft_app.command("save")
def draft_save(
    document_type: DocumentType = typer.Argument(..., help="tenancy or vehicle-transfer"),
    data: Path = typer.Option(..., "--data", "-d", help="JSON record snapshot (camelCase keys)"),
    clause: Optional[List[str]] = CLAUSE_OPTION,
):
    """Save a record as the draft for its document type"""
    record = _load_record(document_type, data, clause)
    try:
        get_draft_repository().save(document_type, record)
    except DraftStorageError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    console.print("[green][OK] Draft Saved[/green] Your progress has been saved locally.")


@draft_app.command("show")
def draft_show(
    document_type: DocumentType = typer.Argument(..., help="tenancy or vehicle-transfer"),
):
    """Print the saved draft as JSON"""
    record = get_draft_repository().load(document_type)
    if record is None:
        console.print(f"[yellow]No saved draft for {document_type.value}[/yellow]")
        raise typer.Exit(code=1)
    print(json.dumps(record.to_snapshot(), ensure_ascii=False, indent=2))


@draft_app.command("clear")
def draft_clear(
    document_type: DocumentType = typer.Argument(..., help="tenancy or vehicle-transfer"),
):
    """Remove the saved draft"""
    try:
        get_draft_repository().clear(document_type)
    except DraftStorageError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    console.print(Panel.fit("[bold]Draft Cleared[/bold]\nYour saved draft has been removed.",
                            border_style="green"))


if __name__ == "__main__":
    app()
