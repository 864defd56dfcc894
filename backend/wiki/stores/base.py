"""
Page store contract.
"""

from wiki.domain.page import Page
from wiki.domain.upsert import LoadOutcome


class PageStore:
    """
    Base class for page stores.

    A store is shared by every request, so implementations must be safe to
    call from several threads at once. Each call is atomic for the single
    record it touches; nothing spans records.
    """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"

    def load(self, title: str) -> LoadOutcome:
        """
        Look up the page whose title equals `title` exactly.

        Returns Found(page) on a hit and NotFound(title) otherwise. Raises
        StoreError when the backend cannot answer.
        """
        raise NotImplementedError(f"load not implemented in {self.__class__.__name__}")

    def save(self, page: Page) -> Page:
        """
        Insert or update `page` and return it carrying its identity.

        Raises TitleConflict when the write would change the title of an
        existing record, StoreError for any other failure.
        """
        raise NotImplementedError(f"save not implemented in {self.__class__.__name__}")
