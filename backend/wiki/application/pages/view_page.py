from flask import current_app
from wiki.domain.paths import Action, build_path
from wiki.domain.upsert import NotFound
from .results import PageResult, Redirect, Rendered


def view_page(*, store, renderer, title: str) -> PageResult:
    """
    Show a page, or send the client off to create it.
    """
    outcome = store.load(title)

    if isinstance(outcome, NotFound):
        current_app.logger.debug("No page title=%s, redirecting to edit", title)
        return Redirect(build_path(Action.EDIT, title))

    return Rendered(renderer.render("view", outcome.page))
