import click
from flask import current_app
from wiki.api.pages import STORE_KEY
from wiki.stores.sql import SqlPageStore


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create the pages table."""
        store = current_app.extensions[STORE_KEY]
        if not isinstance(store, SqlPageStore):
            raise click.ClickException(f"{store!r} has no schema to create")

        store.create_schema()
        click.echo("Initialized the database.")
