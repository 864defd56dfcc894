from flask import Flask
from .config import config_by_name
from .extensions import db, migrate
from .api import wiki_bp
from .api.pages import STORE_KEY, RENDERER_KEY
from .errors import register_error_handlers
from .cli import register_commands
from .rendering import TemplateRenderer
from .stores import PageStore, SqlPageStore


def create_app(
    config_name: str = "development",
    *,
    store: PageStore | None = None,
    renderer=None,
) -> Flask:
    """
    Build the wiki application.

    `store` and `renderer` default to the SQL store and the template
    renderer; tests pass their own.
    """
    # No static route: every path outside /view, /edit and /save is a 404
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"].upper())

    # -------------------------------------------------
    # Persistence
    # -------------------------------------------------
    if app.config.get("SQLALCHEMY_DATABASE_URI"):
        db.init_app(app)
        migrate.init_app(app, db)

    if store is None:
        if "sqlalchemy" not in app.extensions:
            raise RuntimeError(
                "No database configured: set DATABASE_URI or DB_HOST/DB_NAME"
            )
        store = SqlPageStore()

    app.extensions[STORE_KEY] = store
    app.extensions[RENDERER_KEY] = renderer or TemplateRenderer()
    app.logger.info("Using page store %r", store)

    # -------------------------------------------------
    # Routes
    # -------------------------------------------------
    app.register_blueprint(wiki_bp)
    register_error_handlers(app)
    register_commands(app)

    return app
