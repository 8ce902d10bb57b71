"""
Candidate Intake Command Line Interface

Provides CLI commands for the intake service, including database setup
and adding candidates from JSON submissions.
"""

import asyncio
import base64
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="candidate-intake",
    help="Candidate Intake Service CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to the console"),
):
    """Configure logging before running a command."""
    from candidate_intake.utils.config import get_settings
    from candidate_intake.utils.logger import setup_logging

    get_settings().logging.console_output = verbose
    setup_logging()


@app.command()
def version():
    """Show application version."""
    from candidate_intake import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from candidate_intake.utils.config import get_settings

    settings = get_settings()

    table = Table(title="Candidate Intake Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("Max CV Size", f"{settings.intake.max_resume_size_bytes} bytes")
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Initialize the database with required collections and indexes."""
    from candidate_intake.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")

    db_manager = get_database_manager()

    async def _init() -> bool:
        if not await db_manager.check_async_connection():
            return False
        await db_manager.ensure_indexes()
        return True

    try:
        console.print("  Checking database connection...")
        connected = asyncio.run(_init())
    except Exception as e:
        console.print(f"[red]Error initializing database: {e}[/red]")
        raise typer.Exit(1)
    finally:
        db_manager.close()

    if not connected:
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
        raise typer.Exit(1)

    console.print("  [green]✓[/green] Indexes created")
    console.print("\n[green]Database initialized successfully![/green]")


def _read_cv(path: Path) -> dict[str, str]:
    """UTF-8 text CVs are kept as text, anything else is base64 encoded."""
    raw = path.read_bytes()
    content = None
    if path.suffix.lower() == ".txt":
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError:
            content = None  # e.g. Latin-1 text, sent as base64 below
    if content is None:
        content = base64.b64encode(raw).decode("ascii")
    return {"fileName": path.name, "fileContent": content}


@app.command()
def add_candidate(
    submission_file: Path = typer.Argument(..., help="JSON file with the candidate submission"),
    cv: Optional[Path] = typer.Option(None, "--cv", help="CV file to attach"),
):
    """Add a candidate from a JSON submission."""
    from candidate_intake.data.database import get_database_manager
    from candidate_intake.errors import IntakeError
    from candidate_intake.services import add_candidate as add_candidate_service

    if not submission_file.exists():
        console.print(f"[red]Error: File not found: {submission_file}[/red]")
        raise typer.Exit(1)

    try:
        submission = json.loads(submission_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: Invalid JSON in {submission_file}: {e}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error: Could not read {submission_file}: {e}[/red]")
        raise typer.Exit(1)

    if cv is not None:
        if not cv.exists():
            console.print(f"[red]Error: CV file not found: {cv}[/red]")
            raise typer.Exit(1)
        try:
            cv_data = _read_cv(cv)
        except OSError as e:
            console.print(f"[red]Error: Could not read CV file {cv}: {e}[/red]")
            raise typer.Exit(1)
        if isinstance(submission, dict):
            submission["cv"] = cv_data

    try:
        candidate = asyncio.run(add_candidate_service(submission))
    except IntakeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        get_database_manager().close()

    table = Table(title="Candidate Added")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("ID", str(candidate.id))
    table.add_row("Name", candidate.name)
    table.add_row("Email", candidate.email)
    table.add_row("Education", str(len(candidate.education)))
    table.add_row("Work Experience", str(len(candidate.work_experience)))
    table.add_row("Resumes", ", ".join(r.file_name for r in candidate.resumes) or "-")

    console.print(table)


if __name__ == "__main__":
    app()
