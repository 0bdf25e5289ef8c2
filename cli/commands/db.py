import click
from core.sa.database import Database

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
def init():
    """Create any missing tables"""
    database = Database()
    database.init_db()
    click.echo(click.style("Database initialized", fg='green'))

@db.command()
@click.confirmation_option(prompt='This deletes every user, book and list item. Continue?')
def reset():
    """Drop and recreate every table"""
    database = Database()
    database.drop_db()
    database.init_db()
    click.echo(click.style("Database reset", fg='green'))
