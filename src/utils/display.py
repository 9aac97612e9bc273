"""Rich console display utilities for L-algebras."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from src.core.algebra import LAlgebra
from src.core.element import Element, downset

console = Console()


def _fmt_set(s: Iterable[Element]) -> str:
    return "{" + ", ".join(str(x.value) for x in sorted(s, key=lambda x: x.value)) + "}"


def display_algebra(a: LAlgebra, title: str = "") -> None:
    """Display the multiplication table, highlighting the logical unit."""
    lu = a.unit_value
    table = Table(title=title or f"L-algebra of size {a.size}")
    table.add_column("·", style="bold cyan", justify="right")
    for j in range(1, a.size + 1):
        table.add_column(str(j), justify="right")

    for i, row in enumerate(a.to_list(), 1):
        cells = [f"[dim]{v}[/dim]" if v == lu else str(v) for v in row]
        table.add_row(str(i), *cells)

    console.print(table)
    console.print(f"[bold]Logical unit:[/bold] {lu}")


def display_order(a: LAlgebra) -> None:
    """Display the downset of every element as a tree."""
    tree = Tree("[bold]x ≤ y[/bold]")
    for y in a:
        below = [x for x in downset(y) if x != y]
        tree.add(f"[cyan]{y.value}[/cyan] ≥ {_fmt_set(below)}")
    console.print(Panel(tree, title="Order", border_style="blue"))


def display_properties(name: str, profile: dict[str, bool]) -> None:
    """Display a property profile as a table."""
    table = Table(title=f"Properties: {name}")
    table.add_column("Property", style="cyan")
    table.add_column("Holds", justify="center")

    for prop, holds in profile.items():
        table.add_row(prop, "[green]yes[/green]" if holds else "[red]no[/red]")

    console.print(table)


def display_ideals(
    ideals: list[frozenset[Element]],
    prime: list[frozenset[Element]],
) -> None:
    """Display the ideals of an algebra, marking the prime ones."""
    table = Table(title="Ideals")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Ideal", style="cyan")
    table.add_column("Prime", justify="center")

    for i, ideal in enumerate(ideals, 1):
        mark = "[green]✓[/green]" if ideal in prime else ""
        table.add_row(str(i), _fmt_set(ideal), mark)

    console.print(table)
    console.print(f"\n[bold]{len(ideals)} ideals, {len(prime)} prime[/bold]")
