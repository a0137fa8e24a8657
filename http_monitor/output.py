"""HTTP Monitor - Report output"""

from datetime import datetime
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .models import MonitorSnapshot

CLASS_COLORS = {'1XX': 'blue', '2XX': 'green', '3XX': 'cyan', '4XX': 'yellow', '5XX': 'red'}


def print_snapshot(snapshot: MonitorSnapshot, console: Console):
    console.print("─" * 50, style="cyan")

    # Response codes
    table = Table(title="Response codes", box=box.SIMPLE)
    table.add_column("Class", style="bold")
    table.add_column("Requests", justify="right")
    for code_class, count in sorted(snapshot.response_codes.items()):
        color = CLASS_COLORS.get(code_class, 'white')
        table.add_row(f"[{color}]HTTP/{code_class}[/]", str(count))
    console.print(table)

    # Top sections
    table = Table(title=f"Top {len(snapshot.top_sections)} sections", box=box.SIMPLE)
    table.add_column("Section", style="cyan")
    table.add_column("Requests", justify="right")
    for section, count in snapshot.top_sections:
        table.add_row(section, str(count))
    console.print(table)

    rate = _format_rate(snapshot.rate)
    state = "[red bold]ALERTING[/]" if snapshot.alerting else "[green]ok[/]"
    console.print(
        f"Total: [cyan]{snapshot.total:,}[/]  Window: [cyan]{snapshot.window_size:,}[/]  "
        f"Rate: [cyan]{rate}[/]  High traffic: {state}"
    )
    console.print("---")


def _format_rate(rate: Optional[float]) -> str:
    return "n/a" if rate is None else f"{rate:.2f}/s"


def print_alert(rate: Optional[float], when: datetime, console: Console):
    console.print(
        f"[red bold]High traffic generated an alert - hits = {_format_rate(rate)}, "
        f"triggered at {when:%Y-%m-%d %H:%M:%S}[/]"
    )


def print_recovery(when: datetime, console: Console):
    console.print(f"[green]High traffic alert recovered at {when:%Y-%m-%d %H:%M:%S}[/]")
