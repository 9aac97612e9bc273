"""CLI interface for the L-algebra toolkit.

Usage:
    lalg check '[[2, 2], [1, 2]]'
    lalg show 3 1
    lalg properties 4 2
    lalg ideals 4 2 --variant or
    lalg build 4 --dedupe --normalize
"""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from src.core.errors import LAlgebraError

console = Console()


@click.group()
@click.option(
    "--catalog-path", default="catalog", envvar="LALG_CATALOG",
    help="Path to the algebra catalog directory",
)
@click.option("--verbose", "-v", is_flag=True, help="Log algorithm progress")
@click.pass_context
def main(ctx: click.Context, catalog_path: str, verbose: bool) -> None:
    """Finite L-algebras: validation, properties, ideals and constructions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    ctx.ensure_object(dict)
    ctx.obj["catalog_path"] = catalog_path


def _load(ctx: click.Context, n: int, k: int):
    from src.catalog.repository import AlgebraCatalog

    catalog = AlgebraCatalog(ctx.obj["catalog_path"])
    try:
        return catalog.load(n, k)
    except LAlgebraError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


@main.command()
@click.argument("table")
def check(table: str) -> None:
    """Check whether TABLE (a JSON matrix, 1-based) defines an L-algebra."""
    from src.core.validator import check_l_algebra

    try:
        matrix = json.loads(table)
    except json.JSONDecodeError as e:
        console.print(f"[red]Not a JSON matrix: {e}[/red]")
        sys.exit(2)

    if check_l_algebra(matrix):
        console.print("[green]valid L-algebra[/green]")
    else:
        console.print("[red]not an L-algebra[/red]")
        sys.exit(1)


@main.command()
@click.argument("n", type=int)
@click.argument("k", type=int)
@click.pass_context
def show(ctx: click.Context, n: int, k: int) -> None:
    """Show the K-th catalogued L-algebra of size N."""
    from src.utils.display import display_algebra, display_order

    a = _load(ctx, n, k)
    display_algebra(a, title=f"LA({n}, {k})")
    display_order(a)


@main.command()
@click.argument("n", type=int)
@click.argument("k", type=int)
@click.pass_context
def properties(ctx: click.Context, n: int, k: int) -> None:
    """List the structural properties of the K-th L-algebra of size N."""
    from src.properties.oracle import prime_elements, property_profile
    from src.utils.display import display_properties

    a = _load(ctx, n, k)
    display_properties(f"LA({n}, {k})", property_profile(a))
    primes = [x.value for x in prime_elements(a)]
    console.print(f"[bold]Prime elements:[/bold] {primes}")


@main.command()
@click.argument("n", type=int)
@click.argument("k", type=int)
@click.option("--variant", default="and", type=click.Choice(["and", "or"]), help="Ideal axiom variant")
@click.pass_context
def ideals(ctx: click.Context, n: int, k: int, variant: str) -> None:
    """List the ideals and prime ideals of the K-th L-algebra of size N."""
    from src.substructures.closure import ideals as all_ideals, prime_spectrum
    from src.utils.display import display_ideals

    a = _load(ctx, n, k)
    display_ideals(all_ideals(a, variant), prime_spectrum(a, variant))


@main.command()
@click.argument("n", type=int)
@click.option("--max-models", default=None, type=int, help="Stop after this many algebras")
@click.option("--dedupe", is_flag=True, help="Drop algebras isomorphic to an earlier one")
@click.option("--normalize", is_flag=True, help="Store tables in normal form")
@click.option("--timeout", default=30000, help="Z3 timeout in milliseconds")
@click.option("--compress", is_flag=True, help="Store bz2-compressed chunks")
@click.pass_context
def build(
    ctx: click.Context,
    n: int,
    max_models: int | None,
    dedupe: bool,
    normalize: bool,
    timeout: int,
    compress: bool,
) -> None:
    """Enumerate L-algebras of size N with Z3 and store them in the catalog."""
    from src.catalog.repository import AlgebraCatalog
    from src.constructions.normal_form import normal_form
    from src.core.algebra import LAlgebra
    from src.solvers.z3_solver import Z3LAlgebraFinder

    finder = Z3LAlgebraFinder(timeout_ms=timeout)
    if not finder.is_available():
        console.print("[red]Z3 not available. Install z3-solver: pip install z3-solver[/red]")
        sys.exit(1)

    console.print(f"\n[bold]Enumerating L-algebras of size {n}[/bold]")
    result = finder.find_tables(n, max_models=max_models, dedupe=dedupe)
    if result.timed_out:
        console.print("[yellow]Z3 timed out; the catalog will be incomplete.[/yellow]")

    tables = result.tables
    if normalize:
        tables = [normal_form(LAlgebra(t)).to_list() for t in tables]

    catalog = AlgebraCatalog(ctx.obj["catalog_path"])
    path = catalog.store(n, tables, compress=compress)
    console.print(f"[green]Stored {len(tables)} L-algebras in {path}[/green]")


if __name__ == "__main__":
    main()
