"""CLI interface using typer + rich."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from resume_builder.config import load_config
from resume_builder.models.resume import ResumeData
from resume_builder.models.settings import AVAILABLE_FONTS
from resume_builder.store.resume_store import ResumeStore
from resume_builder.store.workspace import ResumeWorkspace
from resume_builder.templates import TEMPLATE_CLASSES, render_resume
from resume_builder.templates.renderer import save_typst
from resume_builder.transfer.import_export import (
    export_filename,
    export_resumes,
    import_selected,
    read_import_file,
    write_export,
)

app = typer.Typer(
    name="resume-builder",
    help="Build Typst resumes from structured resume data",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    db: Path = typer.Option(None, "--db", help="Resume database path (default from config.yaml)"),
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    config = load_config(config_path)
    ctx.obj = {"config": config, "db_path": db or config.storage.resolved_db_path}


def _store(ctx: typer.Context) -> ResumeStore:
    return ResumeStore(ctx.obj["db_path"])


def _open_workspace(ctx: typer.Context) -> tuple[ResumeStore, ResumeWorkspace]:
    store = _store(ctx)
    workspace = store.load_workspace()
    workspace.initialize()
    store.save_workspace(workspace)
    return store, workspace


def _load_resume_file(path: Path, index: int) -> ResumeData:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        # An export file: pick one entry
        if not 0 <= index < len(raw):
            raise ValueError(f"export file has {len(raw)} resumes, no index {index}")
        if not isinstance(raw[index], dict):
            raise ValueError(f"export entry {index} is not an object")
        raw = raw[index].get("data") or {}
    if not isinstance(raw, dict):
        raise ValueError("expected a resume object or an export array")
    return ResumeData.model_validate(raw)


@app.command()
def render(
    ctx: typer.Context,
    file: Path = typer.Argument(None, help="Resume JSON or export file (default: active resume)"),
    template: str = typer.Option(None, "--template", "-t", help="Template id"),
    font: str = typer.Option(None, "--font", help="Font family"),
    font_size: int = typer.Option(None, "--font-size", help="Base font size in pt"),
    index: int = typer.Option(0, "--index", help="Entry to render from an export file"),
    output: Path = typer.Option(None, "--output", "-o", help="Output .typ path"),
) -> None:
    """Render a resume to a Typst document."""
    render_config = ctx.obj["config"].render

    if file is not None:
        if not file.exists():
            console.print(f"[red]File not found: {file}[/red]")
            raise typer.Exit(1)
        try:
            data = _load_resume_file(file, index)
        except (OSError, ValueError) as e:
            console.print(f"[red]Could not read resume file: {e}[/red]")
            raise typer.Exit(1)
        name = file.stem
    else:
        _, workspace = _open_workspace(ctx)
        data = workspace.active_resume_data
        name = workspace.active_resume.name if workspace.active_resume else "resume"

    template_id = template or render_config.template
    if template_id not in TEMPLATE_CLASSES:
        console.print(f"[red]Template not found: {template_id}[/red]")
        raise typer.Exit(1)

    document = render_resume(
        data,
        template_id=template_id,
        font=font or render_config.font,
        font_size=font_size or render_config.font_size,
    )

    if output is None:
        output = Path(f"./output/{name}.typ".replace(" ", "_"))
    save_typst(document, output)
    console.print(f"[green]Saved Typst document: {output}[/green]")


@app.command()
def templates() -> None:
    """List available templates."""
    for template_id, template_cls in TEMPLATE_CLASSES.items():
        console.print(f"  [bold]{template_id}[/bold]: {template_cls.name} - {template_cls.description}")


@app.command()
def fonts() -> None:
    """List available fonts."""
    for font in AVAILABLE_FONTS:
        console.print(f"  {font}")


@app.command("list")
def list_resumes(ctx: typer.Context) -> None:
    """List stored resumes."""
    _, workspace = _open_workspace(ctx)

    table = Table(title="Resumes")
    table.add_column("", width=1)
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Updated")
    for resume in workspace.resumes_list:
        marker = "*" if resume.id == workspace.active_resume_id else ""
        table.add_row(marker, resume.id, resume.name, resume.updated_at.strftime("%Y-%m-%d %H:%M"))
    console.print(table)


@app.command()
def create(ctx: typer.Context, name: str = typer.Argument(None, help="Resume name")) -> None:
    """Create an empty resume."""
    store, workspace = _open_workspace(ctx)
    resume_id = workspace.create_resume(name)
    store.save_workspace(workspace)
    console.print(f"[green]Created {resume_id}: {workspace.get(resume_id).name}[/green]")


@app.command()
def delete(ctx: typer.Context, resume_id: str = typer.Argument(help="Resume id")) -> None:
    """Delete a resume."""
    store, workspace = _open_workspace(ctx)
    if workspace.get(resume_id) is None:
        console.print(f"[red]Resume not found: {resume_id}[/red]")
        raise typer.Exit(1)
    workspace.delete_resume(resume_id)
    store.save_workspace(workspace)
    console.print(f"[green]Deleted {resume_id}[/green]")


@app.command()
def use(ctx: typer.Context, resume_id: str = typer.Argument(help="Resume id")) -> None:
    """Make a resume the active one."""
    store, workspace = _open_workspace(ctx)
    if workspace.get(resume_id) is None:
        console.print(f"[red]Resume not found: {resume_id}[/red]")
        raise typer.Exit(1)
    workspace.set_active_resume(resume_id)
    store.save_workspace(workspace)
    console.print(f"[green]Active resume: {resume_id}[/green]")


@app.command("import")
def import_resumes(
    ctx: typer.Context,
    file: Path = typer.Argument(help="Export file to import"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Import everything without asking"),
) -> None:
    """Import resumes from an export file."""
    store, workspace = _open_workspace(ctx)
    result = read_import_file(file, [r.name for r in workspace.resumes_list])
    if not result.success:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    if not result.previews:
        console.print("[yellow]No resumes found in file.[/yellow]")
        return

    table = Table(title=f"Resumes in {file.name}")
    table.add_column("#")
    table.add_column("Name")
    table.add_column("Items")
    table.add_column("Duplicate")
    for i, preview in enumerate(result.previews):
        table.add_row(
            str(i),
            preview.name,
            str(preview.item_count),
            "[yellow]yes[/yellow]" if preview.is_duplicate else "",
        )
    console.print(table)

    if not yes and not typer.confirm(f"Import {len(result.previews)} resumes?"):
        console.print("[dim]Import cancelled.[/dim]")
        return

    count = import_selected(workspace, result.previews, range(len(result.previews)))
    store.save_workspace(workspace)
    console.print(f"[green]Imported {count} resumes[/green]")


@app.command()
def export(
    ctx: typer.Context,
    resume_ids: list[str] = typer.Argument(None, help="Resume ids (default: active resume)"),
    all_: bool = typer.Option(False, "--all", help="Export every resume"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file or directory"),
) -> None:
    """Export resumes to a JSON file."""
    _, workspace = _open_workspace(ctx)
    if all_:
        ids = [r.id for r in workspace.resumes_list]
    else:
        ids = resume_ids or [workspace.active_resume_id]

    entries = export_resumes(workspace, ids)
    if not entries:
        console.print("[red]No resumes to export[/red]")
        raise typer.Exit(1)

    selected = [r for r in workspace.resumes_list if r.id in set(ids)]
    filename = export_filename(selected)
    if output is None:
        path = Path("./output") / filename
    elif output.suffix == ".json":
        path = output
    else:
        path = output / filename
    write_export(path, entries)
    console.print(f"[green]Exported {len(entries)} resumes: {path}[/green]")


if __name__ == "__main__":
    app()
