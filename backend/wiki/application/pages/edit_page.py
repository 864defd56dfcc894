from wiki.domain.page import Page
from wiki.domain.upsert import NotFound
from .results import PageResult, Rendered


def edit_page(*, store, renderer, title: str) -> PageResult:
    """
    Render the edit form for a page.

    A title with no stored page gets a blank, unsaved page, which is how
    new pages come into existence.
    """
    outcome = store.load(title)

    if isinstance(outcome, NotFound):
        page = Page.blank(title)
    else:
        page = outcome.page

    return Rendered(renderer.render("edit", page))
