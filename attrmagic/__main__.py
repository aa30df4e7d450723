from __future__ import annotations

import ast
from typing import Any

import typer
from rich.console import Console
from rich.table import Table
from typer import Argument
from typer import Option

from attrmagic import __version__ as attrmagic_version
from attrmagic.errors import InvalidUsageError

# --- attrmagic command line interface --------------------------------

cli = typer.Typer(
    name="attrmagic",
    epilog="#### attrmagic lazy attribute tools ####",
    no_args_is_help=True,
)


@cli.command("version")
def version():
    """show the attrmagic version"""
    typer.echo(attrmagic_version)


@cli.command("predicates")
def predicates():
    """list the registered predicates"""
    from attrmagic.predicates import NEGATION_PREFIX
    from attrmagic.predicates import available_predicates

    table = Table(title="attrmagic predicates")
    table.add_column("Predicate", justify="left", style="cyan", no_wrap=True)
    table.add_column("Negated", justify="left", style="magenta")
    for name in available_predicates():
        table.add_row(name, f"{NEGATION_PREFIX}{name}")
    Console().print(table)


@cli.command("config")
def config():
    """show the effective attrmagic settings"""
    from attrmagic.settings import settings_dict

    table = Table(title="attrmagic settings")
    table.add_column("Key", justify="left", style="cyan", no_wrap=True)
    table.add_column("Value", justify="left", style="green")
    for key, value in settings_dict().items():
        table.add_row(key, repr(value))
    Console().print(table)


@cli.command("check", no_args_is_help=True)
def check(
    value: str = Argument(..., help="python literal, or a plain string"),
    predicate: str = Option("not_nil", "--predicate", "-p"),
):
    """check a literal value against a predicate"""
    from attrmagic._repr import value_repr
    from attrmagic.predicates import check_predicate
    from attrmagic.predicates import parse_predicate

    obj = _parse_literal(value)
    try:
        spec = parse_predicate(predicate)
        ok = check_predicate(obj, spec)
    except InvalidUsageError as err:
        typer.echo(f"ERROR: {err}", err=True)
        raise typer.Exit(2)
    except (TypeError, AttributeError) as err:
        typer.echo(
            f"ERROR: {value_repr(obj)} does not support {spec.name}: {err}", err=True
        )
        raise typer.Exit(2)

    if ok:
        typer.echo(f"OK: {value_repr(obj)} {spec.verb} be {spec.name}")
        raise typer.Exit(0)
    else:
        typer.echo(f"FAIL: {value_repr(obj)} {spec.verb} be {spec.name}")
        raise typer.Exit(1)


def _parse_literal(value: str) -> Any:
    try:
        return ast.literal_eval(value)
    except (ValueError, SyntaxError):
        return value


if __name__ == "__main__":  # pragma: no cover
    cli()
