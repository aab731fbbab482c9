"""CLI command to create the database schema."""
import click
from flask.cli import with_appcontext


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop existing tables first")
@with_appcontext
def init_db_command(drop):
    """
    Create all tables for users, draws and daily usage.

    Usage:
        flask init-db
        flask init-db --drop   # start from an empty database
    """
    from symbol_quest.extensions import db
    import symbol_quest.models  # noqa: F401

    if drop:
        if not click.confirm("This will DELETE all users and draws. Continue?"):
            click.echo("Aborted.")
            return
        db.drop_all()

    db.create_all()
    click.echo("Database initialized.")
