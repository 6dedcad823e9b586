"""Command Line Interface (CLI) output for the grading run."""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from utils.logger import get_logger

logger = get_logger()
console = Console()

def display_welcome():
    """Displays a welcome message."""
    console.print(Panel(
        "[bold green]Welcome to the Letter Grader application[/bold green]",
        title="Welcome",
        border_style="blue"
    ))
    console.print("This tool calculates weighted letter grades and class statistics from a roster file.")
    console.rule()

def display_farewell():
    """Displays a farewell message."""
    console.rule()
    console.print("[bold cyan]Grading process complete. Exiting.[/bold cyan]")

def display_error(message: str):
    """Displays an error message in a standard format."""
    console.print(Panel(Text.assemble(("Error: ", "bold red"), message), title="Error", border_style="red"))

def display_warning(message: str):
    """Displays a warning message."""
    console.print(Text.assemble(("Warning: ", "yellow"), message))

def display_success(message: str):
    """Displays a success message."""
    console.print(Text.assemble(("Success: ", "green"), message))

def display_info(message: str):
    console.print(Text(message))

def display_step(step_number: int, description: str):
    """Displays the current step in the process."""
    console.print(f"\n[bold blue]Step {step_number}:[/bold blue] {description}", highlight=False)
    console.rule()

def display_statistics(rows: List[str]):
    """Displays the preformatted class statistics rows.

    Args:
        rows: Header row followed by the Average, Minimum and Maximum rows, as
            produced by ``core.report.format_statistics_rows``.
    """
    if not rows:
        console.print("[yellow]No statistics to display.[/yellow]")
        return

    console.print("\n[bold]Here are the class statistics:[/bold]")
    logger.debug(f"Displaying {len(rows) - 1} statistics rows.")
    header, *body = rows
    console.print(Text(header, style="bold magenta"))
    for row in body:
        console.print(Text(row))
