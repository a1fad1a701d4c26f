"""
Flask CLI commands: ``flask --app apoxer.app seed`` and friends.
"""
import logging
import sys

import click
from flask.cli import with_appcontext

from apoxer.exceptions import ApoxerException

logger = logging.getLogger("main")


def _print_errors(errors):
    for error in errors:
        click.echo(f"  - {error}", err=True)


@click.command("seed")
@with_appcontext
def seed_command():
    """Insert the sample games and their communities."""
    from apoxer.services.seed_service import seed_games

    result = seed_games()
    click.echo(f"Games inserted: {result.games_inserted}")
    click.echo(f"Communities inserted: {result.communities_inserted}")
    _print_errors(result.errors)


@click.command("seed-events")
@click.option("--email", default=None, help="Account recorded as creator of the seeded rows.")
@with_appcontext
def seed_events_command(email):
    """Insert the sample game versions and events."""
    from apoxer.repositories.user_repository import UserRepository
    from apoxer.services.seed_service import seed_events

    created_by = None
    if email:
        user = UserRepository.get_by_email(email)
        if user is None:
            click.echo(f"No account for {email}", err=True)
            sys.exit(1)
        created_by = user.id

    result = seed_events(created_by=created_by)
    click.echo(f"Game versions created: {result.versions_created}")
    click.echo(f"Events created: {result.events_created}")
    _print_errors(result.errors)


@click.command("enrich-games")
@click.option("--limit", type=int, default=None, help="Only look at this many incomplete games.")
@with_appcontext
def enrich_games_command(limit):
    """Fill missing descriptions and artwork from RAWG."""
    from apoxer.services.rawg_service import enrich_games

    try:
        result = enrich_games(limit=limit)
    except ApoxerException as e:
        click.echo(e.message, err=True)
        sys.exit(1)
    click.echo(f"Updated: {result.updated}, skipped: {result.skipped}")
    _print_errors(result.errors)


@click.command("create-user")
@click.argument("email")
@click.argument("password")
@click.option("--username", default=None)
@click.option("--display-name", default=None)
@with_appcontext
def create_user_command(email, password, username, display_name):
    """Create a login account."""
    from apoxer.auth import create_user

    try:
        user = create_user(email, password, username=username, display_name=display_name)
    except ApoxerException as e:
        click.echo(e.message, err=True)
        sys.exit(1)
    click.echo(f"Created {user.email} ({user.id})")


def init_commands(app):
    for command in (seed_command, seed_events_command, enrich_games_command, create_user_command):
        app.cli.add_command(command)
