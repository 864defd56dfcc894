from flask import current_app
from wiki.domain.page import Page
from wiki.domain.paths import Action, build_path
from .results import PageResult, Redirect


def save_page(*, store, title: str, body: str) -> PageResult:
    """
    Write submitted content under a title.

    Responsibilities:
    - Build an unsaved page from the request
    - Let the store choose insert or update
    - Redirect to the page view

    StoreError propagates to the caller untouched.
    """
    page = Page(title=title, content=body.encode("utf-8"))

    saved = store.save(page)

    current_app.logger.info(
        "Saved page title=%s identity=%s bytes=%s",
        saved.title,
        saved.identity,
        len(saved.content),
    )
    return Redirect(build_path(Action.VIEW, saved.title))
