"""Command-line interface for Addressify using Typer."""

import json

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from addressify.config import get_settings
from addressify.geocoding import GeocodeServiceRegistry
from addressify.logging import setup_logging
from addressify.models import InputError, Match, ProviderError, UnknownServiceError
from addressify.verification import AddressVerifier

app = typer.Typer(
    name="addressify",
    help="Addressify: Normalize and verify free-form postal addresses",
    add_completion=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    Addressify CLI - Normalize and verify free-form postal addresses.
    """
    setup_logging(get_settings(), verbose=verbose)

    if verbose:
        logger.debug("Verbose mode enabled")


@app.command()
def verify(
    address: str = typer.Argument(..., help="Free-form address to verify"),
    service: str | None = typer.Option(
        None,
        "--service",
        "-s",
        help="Geocoding service to use (defaults to the configured service)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON",
    ),
) -> None:
    """Verify an address and print its normalized form."""
    logger.info("verify command called with address: {}", address)

    try:
        verifier = AddressVerifier.from_settings(get_settings(), service)
        outcome = verifier.verify(address)
    except InputError as e:
        typer.secho(f"✗ Invalid address: {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=2)
    except UnknownServiceError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=2)
    except ProviderError as e:
        logger.error("Address verification failed: {}", str(e))
        typer.secho(
            f"✗ Geocoding provider failed: {e}",
            fg=typer.colors.RED,
            bold=True,
        )
        raise typer.Exit(code=1)

    if as_json:
        payload = {"addressType": outcome.address_type}
        if isinstance(outcome, Match):
            payload["address"] = outcome.address.to_dict()
        typer.echo(json.dumps(payload))
    elif isinstance(outcome, Match):
        table = Table(title="Normalized address")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for field, value in outcome.address.to_dict().items():
            table.add_row(field, "" if value is None else str(value))
        Console().print(table)

        colour = typer.colors.GREEN if outcome.address_type == "valid" else typer.colors.YELLOW
        typer.secho(f"Address type: {outcome.address_type}", fg=colour, bold=True)
    else:
        typer.secho("✗ Address not found (unverifiable)", fg=typer.colors.YELLOW, bold=True)

    if not isinstance(outcome, Match):
        raise typer.Exit(code=1)


@app.command()
def query(
    address: str = typer.Argument(..., help="Free-form address"),
    service: str | None = typer.Option(
        None,
        "--service",
        "-s",
        help="Geocoding service to use (defaults to the configured service)",
    ),
) -> None:
    """Print the lookup URL for an address without sending it."""
    settings = get_settings()

    try:
        geocoder = GeocodeServiceRegistry.get_service(
            service or settings.default_geocode_service, settings
        )
    except UnknownServiceError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=2)

    typer.echo(geocoder.build_query(address))


@app.command()
def services() -> None:
    """List the available geocoding services."""
    for name in GeocodeServiceRegistry.list_services():
        typer.echo(name)


if __name__ == "__main__":
    app()
