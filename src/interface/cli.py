# src/interface/cli.py

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt
from rich import box

from src.domain.models import PageView


console = Console()


def display_welcome_banner(record_count: int) -> None:
    console.print(Panel.fit(
        "[bold cyan]🔍 Simple Search Engine[/bold cyan]\n"
        f"[dim]Literal text search over {record_count} records[/dim]",
        box=box.DOUBLE,
        border_style="cyan",
    ))


def prompt_for_query(case_sensitive: bool) -> str:
    mode = "Aa" if case_sensitive else "aa"
    return Prompt.ask(f"\n[bold yellow]❓ Search[/bold yellow] [dim]({mode})[/dim]")


def display_status(message: str) -> None:
    console.print(f"\n[bold]{message}[/bold]")


def display_no_results(message: str) -> None:
    console.print(f"\n[dim]{message}[/dim]\n")


def display_page(view: PageView) -> None:
    table = Table(box=box.ROUNDED, show_lines=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="bold white")
    table.add_column("Content")

    for record in view.items:
        table.add_row(str(record.id), record.title, record.content)

    console.print(table)

    if view.show_controls:
        console.print(f"[dim]Page {view.page_number} of {view.total_pages}[/dim]")


def display_case_mode(case_sensitive: bool) -> None:
    state = "[green]on[/green]" if case_sensitive else "[red]off[/red]"
    console.print(f"\n[dim]Case sensitive:[/dim] {state}")


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}\n")


def prompt_for_action(view: PageView) -> str:
    """
    Ask what to do next. Page navigation choices are only offered when
    there is more than one page, and previous / next only where they lead
    somewhere.
    """
    choices = []
    hints = []

    if view.show_controls:
        if view.has_next:
            choices.append("n")
            hints.append("[dim]n[/dim]=next")
        if view.has_previous:
            choices.append("p")
            hints.append("[dim]p[/dim]=previous")
        choices += [str(n) for n in range(1, view.total_pages + 1)]
        hints.append(f"[dim]1..{view.total_pages}[/dim]=page")

    choices += ["s", "c", "q"]
    hints += ["[dim]s[/dim]=new search", "[dim]c[/dim]=toggle case", "[dim]q[/dim]=quit"]

    console.print("  ".join(hints))
    return Prompt.ask(
        "[dim]Action[/dim]",
        choices=choices,
        default="s",
        show_choices=False,
    )
