from flask import current_app, request
from wiki.domain.invariants.exceptions import InvariantViolation
from wiki.exceptions import InvalidPath, RenderError, StoreError

PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app):
    @app.errorhandler(InvalidPath)
    def handle_invalid_path(error):
        current_app.logger.debug("Rejected path=%s", error.path)
        return "404 page not found\n", 404, PLAIN_TEXT

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        current_app.logger.warning("Invariant violated path=%s: %s", request.path, error)
        return f"{error}\n", 400, PLAIN_TEXT

    @app.errorhandler(StoreError)
    def handle_store_error(error):
        current_app.logger.error("Store failure path=%s: %s", request.path, error)
        return f"{error}\n", 500, PLAIN_TEXT

    @app.errorhandler(RenderError)
    def handle_render_error(error):
        current_app.logger.error("Render failure path=%s: %s", request.path, error)
        return f"{error}\n", 500, PLAIN_TEXT
