#!/usr/bin/env python3
# src/classlocation/cli.py


from __future__ import annotations

import sys

import typer

from .catalog import PathPrefix, PathSuffix
from .loader import load_unit
from .platform import FixedPlatform, HostPlatform
from .report import locate as locate_unit
from .resolver import InvalidLocationError

app = typer.Typer(
    name="classlocation",
    help="Find the directory root or archive a Python module, class or function was loaded from.",
    add_completion=False,
)


def _verbosity_callback(value: int):
    return max(0, min(value, 3))


@app.command()
def locate(
    target: str = typer.Argument(..., help="Unit to locate: 'module.path' or 'module.path:Qual.Name'"),
    file: bool = typer.Option(False, "--file", help="Print the filesystem path instead of the location URL"),
    as_json: bool = typer.Option(False, "--json", help="Print both views as a JSON report"),
    assume_windows: bool | None = typer.Option(
        None,
        "--assume-windows/--assume-posix",
        help="Override platform detection for drive-letter handling",
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    platform = HostPlatform() if assume_windows is None else FixedPlatform(assume_windows)

    try:
        unit = load_unit(target)
        report = locate_unit(unit, target, platform=platform, verbose=verbose)
    except InvalidLocationError as e:
        typer.secho(f"Cannot locate {target}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    elif file:
        typer.echo(str(report.file))
    else:
        typer.echo(report.location)


@app.command()
def catalog() -> None:
    print("Path Tokens")
    print("-" * 40)
    print(f"{'Catalog':<12} {'Name':<10} {'Code':<6} {'Literal'}")
    print("-" * 40)
    for member in PathPrefix:
        print(f"{'prefix':<12} {member.name:<10} {member.code:<6} {member.literal}")
    for member in PathSuffix:
        print(f"{'suffix':<12} {member.name:<10} {member.code:<6} {member.literal}")
    print("-" * 40)


@app.command()
def diagnose() -> None:
    """Show where classlocation and its dependencies were loaded from."""
    print(f"Python: {sys.version.split()[0]}")
    print(f"Windows: {'yes' if HostPlatform().is_windows() else 'no'}\n")

    for target in ("classlocation", "typer", "pydantic", "pydantic_core._pydantic_core"):
        try:
            print(f"{target:<32} {locate_unit(load_unit(target), target).file}")
        except ValueError as e:
            print(f"{target:<32} [unresolved] {e}")


if __name__ == "__main__":
    app()
