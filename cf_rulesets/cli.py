"""
Command-line interface for managing rulesets.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
import requests
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .client import RouteRoot, RulesetsClient
from .config import APIConfig, Settings
from .errors import RulesetsError
from .models import Ruleset
from .transport import HTTPTransport

# Create console for output
console = Console()

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, show_path=False)]
)

logger = logging.getLogger("cf_rulesets")

DEFAULT_API_URL = APIConfig.model_fields["api_url"].default


@click.group()
@click.version_option(version=__version__)
def cli():
    """Manage zone and account rulesets."""
    pass


def common_options(function):
    """Options shared by every command."""
    function = click.option(
        "--api-token",
        envvar="CLOUDFLARE_API_TOKEN",
        help=(
            "API token (can also be set via CLOUDFLARE_API_TOKEN env var, "
            "or CF_RULESETS_API__API_TOKEN settings)"
        ),
    )(function)
    function = click.option(
        "--api-url",
        help=f"API base URL (default: {DEFAULT_API_URL})",
    )(function)
    function = click.option(
        "--zone",
        "zone_id",
        help="Zone ID owning the rulesets",
    )(function)
    function = click.option(
        "--account",
        "account_id",
        help="Account ID owning the rulesets",
    )(function)
    function = click.option(
        "--debug/--no-debug",
        default=False,
        help="Enable debug mode for more verbose output",
    )(function)
    return function


def build_client(api_token: Optional[str], api_url: Optional[str], debug: bool) -> RulesetsClient:
    """
    Create a client on top of the default HTTP transport.

    Without --api-token the API configuration comes from CF_RULESETS_* settings;
    --api-url overrides the base URL either way.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if api_token:
        api_config = APIConfig(api_token=api_token, api_url=api_url or DEFAULT_API_URL)
    else:
        try:
            api_config = Settings().api
        except ValidationError:
            raise click.UsageError(
                "Missing option '--api-token' (or CLOUDFLARE_API_TOKEN / CF_RULESETS_API__API_TOKEN)"
            )
        if api_url:
            api_config = api_config.model_copy(update={"api_url": api_url})
    return RulesetsClient(HTTPTransport(api_config))


def resolve_owner(zone_id: Optional[str], account_id: Optional[str]) -> Tuple[RouteRoot, str]:
    """Return the route root and identifier selected by --zone/--account."""
    if bool(zone_id) == bool(account_id):
        raise click.UsageError("Exactly one of --zone or --account is required")
    if zone_id:
        return RouteRoot.ZONE, zone_id
    return RouteRoot.ACCOUNT, account_id


def load_ruleset(path: Path) -> Ruleset:
    """Read a ruleset definition from a JSON file."""
    try:
        return Ruleset.model_validate_json(path.read_text())
    except ValidationError as e:
        raise click.BadParameter(f"{path} is not a valid ruleset: {e}")


def fail(error: Exception) -> None:
    """Report a failed API call and exit."""
    logger.debug("Request failed", exc_info=error)
    console.print(f"[red]Error: {error}[/red]")
    sys.exit(1)


@cli.command(name="list")
@common_options
def list_rulesets(api_token, api_url, zone_id, account_id, debug):
    """List all rulesets of a zone or account."""
    root, identifier = resolve_owner(zone_id, account_id)
    client = build_client(api_token, api_url, debug)

    try:
        if root == RouteRoot.ZONE:
            rulesets = client.list_zone_rulesets(identifier)
        else:
            rulesets = client.list_account_rulesets(identifier)
    except (requests.exceptions.RequestException, RulesetsError) as e:
        fail(e)

    table = Table(title=f"Rulesets for {root.value}/{identifier}")
    for column in ("ID", "Name", "Kind", "Phase", "Version"):
        table.add_column(column)
    for ruleset in rulesets:
        payload = ruleset.to_payload()
        table.add_row(
            payload.get("id", ""),
            payload.get("name", ""),
            payload.get("kind", ""),
            payload.get("phase", ""),
            payload.get("version", ""),
        )
    console.print(table)


@cli.command(name="get")
@common_options
@click.argument("ruleset_id")
def get_ruleset(api_token, api_url, zone_id, account_id, debug, ruleset_id):
    """Show a single ruleset as JSON."""
    root, identifier = resolve_owner(zone_id, account_id)
    client = build_client(api_token, api_url, debug)

    try:
        if root == RouteRoot.ZONE:
            ruleset = client.get_zone_ruleset(identifier, ruleset_id)
        else:
            ruleset = client.get_account_ruleset(identifier, ruleset_id)
    except (requests.exceptions.RequestException, RulesetsError) as e:
        fail(e)

    console.print_json(data=ruleset.to_payload())


@cli.command(name="create")
@common_options
@click.option(
    "--file",
    "ruleset_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON file holding the ruleset to create",
)
def create_ruleset(api_token, api_url, zone_id, account_id, debug, ruleset_file):
    """Create a ruleset from a JSON file."""
    root, identifier = resolve_owner(zone_id, account_id)
    ruleset = load_ruleset(ruleset_file)
    client = build_client(api_token, api_url, debug)

    try:
        if root == RouteRoot.ZONE:
            created = client.create_zone_ruleset(identifier, ruleset)
        else:
            created = client.create_account_ruleset(identifier, ruleset)
    except (requests.exceptions.RequestException, RulesetsError) as e:
        fail(e)

    console.print(f"[bold green]Created ruleset {created.id}[/bold green]")
    console.print_json(data=created.to_payload())


@cli.command(name="update")
@common_options
@click.argument("ruleset_id")
@click.option(
    "--file",
    "ruleset_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON file holding the new description and rules",
)
def update_ruleset(api_token, api_url, zone_id, account_id, debug, ruleset_id, ruleset_file):
    """Replace the description and rules of a ruleset."""
    root, identifier = resolve_owner(zone_id, account_id)
    ruleset = load_ruleset(ruleset_file)
    client = build_client(api_token, api_url, debug)
    description = ruleset.description or ""

    try:
        if root == RouteRoot.ZONE:
            updated = client.update_zone_ruleset(identifier, ruleset_id, description, ruleset.rules)
        else:
            updated = client.update_account_ruleset(identifier, ruleset_id, description, ruleset.rules)
    except (requests.exceptions.RequestException, RulesetsError) as e:
        fail(e)

    console.print(f"[bold green]Updated ruleset {updated.id} (version {updated.version})[/bold green]")
    console.print_json(data=updated.to_payload())


@cli.command(name="delete")
@common_options
@click.argument("ruleset_id")
def delete_ruleset(api_token, api_url, zone_id, account_id, debug, ruleset_id):
    """Delete a ruleset."""
    root, identifier = resolve_owner(zone_id, account_id)
    client = build_client(api_token, api_url, debug)

    try:
        if root == RouteRoot.ZONE:
            client.delete_zone_ruleset(identifier, ruleset_id)
        else:
            client.delete_account_ruleset(identifier, ruleset_id)
    except (requests.exceptions.RequestException, RulesetsError) as e:
        fail(e)

    console.print(f"[bold green]Deleted ruleset {ruleset_id}[/bold green]")


def main():
    """Entry point for the CLI."""
    cli()
