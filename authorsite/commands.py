import click
from flask.cli import with_appcontext

from .core import LoggingService
from .modules.contact import init_contact_db
from .modules.newsletter import init_newsletter_db


def init_database():
    """Create every table the site needs (safe to run repeatedly)"""
    init_newsletter_db()
    init_contact_db()
    LoggingService.init_logs_table()


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the subscriber, contact and log tables."""
    init_database()
    click.echo('Database initialised.')


@click.command('cleanup-logs')
@click.option('--days', default=30, show_default=True, help='Keep entries newer than this.')
@with_appcontext
def cleanup_logs_command(days):
    """Delete app_logs entries older than --days."""
    deleted = LoggingService.cleanup_old_logs(days)
    click.echo(f'Deleted {deleted} log entries.')
