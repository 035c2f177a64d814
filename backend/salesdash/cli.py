# Overview: Flask CLI command groups for schema setup, demo data, and category imports.

# backend/salesdash/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Use: python -m flask --app salesdash <group> <command> [options]
#
# Schema:
# - python -m flask --app salesdash db-admin create-all
#   Create any missing tables (use `flask db upgrade` for migrations).
# - python -m flask --app salesdash db-admin reset --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
#
# Demo data:
# - python -m flask --app salesdash seed demo --days 7 --start 2024-01-01
#   Create demo concepts, branches, categories, products and fact rows.
#
# Categories:
# - python -m flask --app salesdash categories import path/to/categories.csv
#   Bulk import categories from a .csv/.txt/.xlsx file.

import click
from datetime import timedelta
from flask.cli import with_appcontext

from .errors import ImportPartialError, NothingImportedError, ValidationError
from .extensions import db
from .services import import_service, seed_service
from .time_utils import utcnow


@click.group('db-admin')
def db_admin_group():
    """Schema setup and repair commands."""


@db_admin_group.command('create-all')
@with_appcontext
def create_all():
    """Create all tables that do not exist yet."""
    db.create_all()
    click.echo("PASS Tables created.")


@db_admin_group.command('reset')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA!
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()

    click.echo("PASS Database reset complete. Run 'flask seed demo' for sample data.")


@click.group('seed')
def seed_group():
    """Demo data commands."""


@seed_group.command('demo')
@click.option('--days', type=click.IntRange(1, 366), default=7, show_default=True, help='Number of days to generate')
@click.option('--start', type=click.DateTime(formats=['%Y-%m-%d']), default=None, help='First day (default: DAYS ago)')
@click.option('--seed', 'rng_seed', type=int, default=7, show_default=True, help='Random seed')
@with_appcontext
def seed_demo(days, start, rng_seed):
    """Populate concepts, branches and every fact table with demo rows."""
    first_day = start.date() if start else (utcnow().date() - timedelta(days=days))
    click.echo(f"START Seeding {days} day(s) from {first_day.isoformat()}...")

    result = seed_service.seed_demo(start=first_day, days=days, seed=rng_seed)

    click.echo(f"PASS Branches: {result['branches']}")
    click.echo(f"PASS Branch-days written: {result['days_written']}")


@click.group('categories')
def categories_group():
    """Category maintenance commands."""


@categories_group.command('import')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def import_categories(path):
    """Bulk import categories from a CSV or Excel file."""
    try:
        with open(path, 'rb') as fh:
            imported = import_service.import_categories(filename=path, stream=fh)
    except ValidationError as e:
        click.echo(f"FAIL {e.message}")
        for field, messages in e.fields.items():
            for message in messages:
                click.echo(f"     {field}: {message}")
        raise SystemExit(1)
    except ImportPartialError as e:
        click.echo(f"WARN  Imported {e.details['imported']} categories with errors:")
        for line in e.details['errors']:
            click.echo(f"     {line}")
        raise SystemExit(1)
    except NothingImportedError as e:
        click.echo(f"FAIL {e.message}")
        for line in e.details['errors']:
            click.echo(f"     {line}")
        raise SystemExit(1)

    click.echo(f"PASS {imported} categories imported successfully")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(db_admin_group)
    app.cli.add_command(seed_group)
    app.cli.add_command(categories_group)
