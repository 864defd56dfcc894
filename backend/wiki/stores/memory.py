"""
In-memory page store.
"""

import itertools
import logging
import threading

from wiki.domain.invariants.page import assert_page
from wiki.domain.page import Page
from wiki.domain.upsert import Found, Insert, LoadOutcome, NotFound, plan_save
from wiki.exceptions import StoreError, TitleConflict

from .base import PageStore

logger = logging.getLogger(__name__)


class MemoryPageStore(PageStore):
    """
    Page store kept in a dictionary keyed by title.

    Identities come from a counter starting at 1. Not durable: meant for
    tests and for running the wiki without a database.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pages: dict[str, Page] = {}
        self._titles: dict[int, str] = {}
        self._identities = itertools.count(1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)

    def load(self, title: str) -> LoadOutcome:
        with self._lock:
            page = self._pages.get(title)
        if page is None:
            return NotFound(title)
        return Found(page)

    def save(self, page: Page) -> Page:
        assert_page(page)

        with self._lock:
            existing = self._pages.get(page.title)
            action = plan_save(page, existing.identity if existing else None)

            if isinstance(action, Insert):
                saved = page.with_identity(next(self._identities))
            else:
                stored_title = self._titles.get(action.identity)
                if stored_title is None:
                    raise StoreError(f"no page with identity {action.identity}")
                if stored_title != page.title:
                    raise TitleConflict(
                        f"page {action.identity} is titled {stored_title!r}, "
                        f"refusing to retitle it {page.title!r}"
                    )
                saved = page.with_identity(action.identity)

            self._pages[saved.title] = saved
            self._titles[saved.identity] = saved.title

        logger.debug("Stored page title=%s identity=%s", saved.title, saved.identity)
        return saved
