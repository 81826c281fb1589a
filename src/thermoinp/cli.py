"""Command-line entrypoints for thermoinp."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import typer

from thermoinp.errors import ThermoParseError
from thermoinp.files import load_text, read_thermo_file, strip_comments
from thermoinp.models import Species, ThermoFile

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


def _species_payload(species: Species) -> Dict[str, Any]:
    return {
        "name": species.name,
        "description": species.description,
        "elements": [[symbol, count] for symbol, count in species.elements],
        "molecular_weight": species.molecular_weight,
        "heat_of_formation": species.heat_of_formation,
        "temperature_ranges": [
            {
                "temp_low": rng.temp_low,
                "temp_high": rng.temp_high,
                "coefficients": list(rng.coefficients),
                "integration_constants": list(rng.integration_constants),
            }
            for rng in species.temperature_ranges
        ],
    }


def _payload(thermo: ThermoFile) -> Dict[str, Any]:
    return {
        "header": {
            "temp_ranges": list(thermo.header.temp_ranges),
            "date": thermo.header.date,
        },
        "species_count": len(thermo.species),
        "species": [_species_payload(entry) for entry in thermo.species],
    }


@app.command()
def parse(
    thermo_file: Annotated[
        Path, typer.Argument(help="Path to a thermo.inp data file.")
    ],
    strict: Annotated[
        bool, typer.Option(help="Fail on malformed records instead of stopping.")
    ] = False,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log skipped fields and records.")
    ] = False,
) -> None:
    """Parse a thermo.inp file and print its contents as JSON."""
    _configure_logging(verbose)
    try:
        thermo = read_thermo_file(thermo_file, strict=strict)
    except ThermoParseError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)

    json_output = json.dumps(_payload(thermo), indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command("strip-comments")
def strip_comments_cmd(
    input_file: Annotated[
        Path, typer.Argument(help="File whose '!' comment lines should be dropped.")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save the filtered text.")
    ] = None,
) -> None:
    """Drop lines beginning with '!' and pass the rest through."""
    filtered = strip_comments(load_text(input_file))
    if output:
        with open(output, "w") as f:
            f.write(filtered)
    else:
        typer.echo(filtered, nl=False)
