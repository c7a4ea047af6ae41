import os
import sys
import click
from dotenv import load_dotenv
from flask import Flask

from .models.catalog import CatalogError, load_catalog_file
from .models.suggestion import SituationContext
from .suggestion_engine import default_catalog, select
from .utils import CATALOG_ERROR_KEY, CATALOG_KEY

load_dotenv()


def load_app_catalog(app):
    """Load the catalog once and keep it (or the reason it failed) on the app."""
    path = app.config.get("TEARS_CATALOG_PATH")
    try:
        catalog = load_catalog_file(path) if path else default_catalog()
    except CatalogError as e:
        app.logger.error(f"Failed to load suggestion catalog: {e}")
        app.extensions[CATALOG_KEY] = None
        app.extensions[CATALOG_ERROR_KEY] = str(e)
        return None

    app.extensions[CATALOG_KEY] = catalog
    app.extensions[CATALOG_ERROR_KEY] = None
    return catalog


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # --- Core Application Configuration ---
    app.config.from_mapping(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-key"),
        TEARS_CATALOG_PATH=os.getenv("TEARS_CATALOG_PATH") or None,
    )
    if test_config is not None:
        app.config.from_mapping(test_config)

    # Start even without a catalog so /health can report the problem
    load_app_catalog(app)

    # --- Blueprints ---
    from . import routes
    app.register_blueprint(routes.bp)

    # --- CLI Commands ---
    @app.cli.command("check-catalog")
    @click.argument("path", required=False)
    def check_catalog_command(path):
        """Validate a catalog file (or the configured / built-in catalog)."""
        path = path or app.config.get("TEARS_CATALOG_PATH")
        try:
            catalog = load_catalog_file(path) if path else default_catalog()
        except CatalogError as e:
            click.echo(f"Invalid catalog: {e}", err=True)
            sys.exit(1)
        click.echo(f"Catalog {catalog.version} is valid: {len(catalog)} suggestions, "
                   f"{len(catalog.vocabulary())} tags.")

    @app.cli.command("suggest")
    @click.argument("tags", nargs=-1)
    def suggest_command(tags):
        """Print the suggestions for the given situation tags."""
        catalog = app.extensions.get(CATALOG_KEY)
        if catalog is None:
            click.echo(f"Suggestions are unavailable: {app.extensions.get(CATALOG_ERROR_KEY)}", err=True)
            sys.exit(1)

        result = select(catalog, SituationContext.of(tags))
        click.echo("Do:")
        for item in result.do:
            click.echo(f"  [{item.id}] {item.text}")
        click.echo("Don't:")
        for item in result.dont:
            click.echo(f"  [{item.id}] {item.text}")

    return app
