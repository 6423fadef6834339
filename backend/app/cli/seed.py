"""Flask CLI commands for seeding roles, an admin account and demo data."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from app.core.passwords import check_password_policy
from app.seeds import seed_data

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Raise logging verbosity for seed modules when requested."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(seed_data.__name__).setLevel(level)
    LOGGER.setLevel(level)


def _echo_summary(summary: dict[str, dict[str, int]]) -> None:
    """Pretty-print a tabular summary of seed results."""
    click.echo("Seed summary:")
    if not summary:
        click.echo("  (no changes)")
        return
    width = max(len(name) for name in summary)
    for table, counters in sorted(summary.items()):
        created = counters.get("created", 0)
        existing = counters.get("existing", 0)
        click.echo(f"  {table.ljust(width)}  created={created:>2}  existing={existing:>2}")


@click.group("seed")
@click.option("--verbose", is_flag=True, help="Enable verbose logging for seeding.")
@click.pass_context
def seed_cli(ctx: click.Context, verbose: bool) -> None:
    """Collection of database seeding commands."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@seed_cli.command("roles")
@click.pass_context
@with_appcontext
def roles_command(ctx: click.Context) -> None:
    """Create the Admin, Manager, Employee and User roles."""
    try:
        summary = seed_data.seed_roles(verbose=bool(ctx.obj.get("verbose", False)))
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Seeding roles failed: {exc}") from exc
    _echo_summary(summary)


@seed_cli.command("admin")
@click.option("--email", required=True, help="Admin account email.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--first-name", default="System", show_default=True)
@click.option("--last-name", default="Administrator", show_default=True)
@with_appcontext
def admin_command(email: str, password: str, first_name: str, last_name: str) -> None:
    """Create an account holding the Admin role (or grant it to an existing one)."""
    problems = check_password_policy(password)
    if problems:
        raise click.BadParameter(" ".join(problems), param_hint="--password")
    try:
        summary = seed_data.seed_admin(
            email=email, password=password, first_name=first_name, last_name=last_name
        )
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Creating admin failed: {exc}") from exc
    _echo_summary(summary)


@seed_cli.command("run")
@click.pass_context
@with_appcontext
def run_command(ctx: click.Context) -> None:
    """Populate roles plus demo businesses, employees and services."""
    try:
        summary = seed_data.run_all(verbose=bool(ctx.obj.get("verbose", False)))
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    _echo_summary(summary)
